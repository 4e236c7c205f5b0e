from dataclasses import dataclass
from datetime import date

from cuiconnect.domain.entities import (
    Announcement,
    AnnouncementType,
    Event,
    Group,
    Message,
    Society,
    User,
)


@dataclass
class CreateSocietyInput:
    actor: User
    name: str
    description: str
    category: str


@dataclass
class CreateGroupInput:
    creator: User
    name: str
    description: str = "Study Group"
    category: str = "Academic"


@dataclass
class PostMessageInput:
    sender: User
    group: Group
    content: str


@dataclass
class CreateSocietyEventInput:
    actor: User
    society: Society
    title: str
    description: str
    date: date
    venue: str


@dataclass
class PostAnnouncementInput:
    actor: User
    society: Society
    title: str
    content: str
    kind: AnnouncementType = "GENERAL"


@dataclass
class DepartmentAnnouncementInput:
    actor: User
    title: str
    content: str


@dataclass
class CreateDepartmentEventInput:
    actor: User
    title: str
    description: str
    date: date
    venue: str


@dataclass
class SocietyOutput:
    society: Society | None = None
    success: bool = False
    error: str | None = None


@dataclass
class GroupOutput:
    group: Group | None = None
    success: bool = False
    error: str | None = None


@dataclass
class MessageOutput:
    message: Message | None = None
    success: bool = False
    error: str | None = None


@dataclass
class EventOutput:
    event: Event | None = None
    notified: int = 0
    success: bool = False
    error: str | None = None


@dataclass
class AnnouncementOutput:
    announcement: Announcement | None = None
    notified: int = 0
    success: bool = False
    error: str | None = None
