from datetime import UTC, date, datetime
from typing import Annotated, Literal
from uuid import uuid4

from pydantic import BaseModel, Field

# --- Enums / Literals ---
RoleType = Literal["STUDENT", "SOCIETY_ADMIN", "DEPARTMENT_REP", "SYSTEM_ADMIN"]
AnnouncementType = Literal["EVENT", "GENERAL", "DEPARTMENT", "URGENT"]

ROLE_ID_PREFIXES: dict[str, str] = {
    "STUDENT": "STU_",
    "SOCIETY_ADMIN": "ADMIN_",
    "DEPARTMENT_REP": "DEPT_",
    "SYSTEM_ADMIN": "SYS_",
}


def _now() -> datetime:
    return datetime.now(UTC)


def new_id(prefix: str) -> str:
    return f"{prefix}_{uuid4().hex[:12]}"


# --- Inbox ---

class Notification(BaseModel):
    id: str = Field(default_factory=lambda: new_id("NOTIF"))
    title: str = "System Notification"
    content: str
    read: bool = False
    created_at: datetime = Field(default_factory=_now)

# --- Users ---

class StudentProfile(BaseModel):
    role: Literal["STUDENT"] = "STUDENT"
    department: str
    semester: int
    # Lowercase, trimmed, unique; insertion order kept for the persisted CSV
    skills: list[str] = Field(default_factory=list)
    joined_society_ids: list[str] = Field(default_factory=list)
    joined_group_ids: list[str] = Field(default_factory=list)
    rsvp_event_ids: list[str] = Field(default_factory=list)

    def add_skill(self, skill: str) -> bool:
        """Add one or more comma-separated skills. Returns True if any was new."""
        added = False
        for piece in skill.split(","):
            cleaned = piece.strip().lower()
            if cleaned and cleaned not in self.skills:
                self.skills.append(cleaned)
                added = True
        return added

    def has_skill(self, skill: str) -> bool:
        return skill.strip().lower() in self.skills

class SocietyAdminProfile(BaseModel):
    role: Literal["SOCIETY_ADMIN"] = "SOCIETY_ADMIN"
    managed_society_ids: list[str] = Field(default_factory=list)

class DepartmentRepProfile(BaseModel):
    role: Literal["DEPARTMENT_REP"] = "DEPARTMENT_REP"
    department: str

class SystemAdminProfile(BaseModel):
    role: Literal["SYSTEM_ADMIN"] = "SYSTEM_ADMIN"

UserProfile = Annotated[
    StudentProfile | SocietyAdminProfile | DepartmentRepProfile | SystemAdminProfile,
    Field(discriminator="role"),
]

class User(BaseModel):
    id: str  # Raw registration id, e.g. "FA20-BCS-001"
    name: str
    email: str
    password: str
    active: bool = True
    registered_on: date = Field(default_factory=date.today)
    notifications: list[Notification] = Field(default_factory=list)
    profile: UserProfile

    @property
    def role(self) -> RoleType:
        return self.profile.role

    @property
    def user_id(self) -> str:
        """Role-qualified identity used for every relationship reference."""
        return ROLE_ID_PREFIXES[self.role] + self.id

    @property
    def is_student(self) -> bool:
        return isinstance(self.profile, StudentProfile)

    def unread_notifications(self) -> list[Notification]:
        return [n for n in self.notifications if not n.read]

# --- Collectives ---

class Announcement(BaseModel):
    id: str = Field(default_factory=lambda: new_id("ANN"))
    title: str
    content: str
    created_by: str
    kind: AnnouncementType = "GENERAL"
    event_id: str | None = None
    published: bool = False
    created_at: datetime = Field(default_factory=_now)

class Event(BaseModel):
    id: str = Field(default_factory=lambda: new_id("EVT"))
    title: str
    description: str
    date: date
    venue: str
    organizer: str
    attendee_ids: list[str] = Field(default_factory=list)

class Society(BaseModel):
    id: str = Field(default_factory=lambda: new_id("SOC"))
    name: str
    description: str
    category: str
    admin_id: str
    member_ids: list[str] = Field(default_factory=list)
    pending_ids: list[str] = Field(default_factory=list)
    event_ids: list[str] = Field(default_factory=list)
    announcements: list[Announcement] = Field(default_factory=list)

class Message(BaseModel):
    id: str = Field(default_factory=lambda: new_id("MSG"))
    content: str
    sender_id: str
    group_id: str
    created_at: datetime = Field(default_factory=_now)

class Group(BaseModel):
    id: str = Field(default_factory=lambda: new_id("GRP"))
    name: str
    description: str = "Study Group"
    category: str = "Academic"
    member_ids: list[str] = Field(default_factory=list)
    messages: list[Message] = Field(default_factory=list)
