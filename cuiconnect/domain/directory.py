"""
Directory - in-memory registry of every entity in a session.

All lookups are linear scans in insertion order; the first match wins when
duplicates somehow exist. Uniqueness (emails, society and group names) is the
caller's responsibility. There is no remove operation for top-level entities.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from cuiconnect.domain.entities import Event, Group, Society, User


@dataclass
class Directory:
    users: list[User] = field(default_factory=list)
    societies: list[Society] = field(default_factory=list)
    groups: list[Group] = field(default_factory=list)
    events: list[Event] = field(default_factory=list)

    # --- Registration ---

    def add_user(self, user: User) -> None:
        self.users.append(user)

    def add_society(self, society: Society) -> None:
        self.societies.append(society)

    def add_group(self, group: Group) -> None:
        self.groups.append(group)

    def add_event(self, event: Event) -> None:
        self.events.append(event)

    def clear_users(self) -> None:
        """Drop every user; used only by a destructive reload."""
        self.users.clear()

    # --- Lookups ---

    def get_user(self, user_id: str) -> User | None:
        for u in self.users:
            if u.user_id == user_id:
                return u
        return None

    def find_user_by_email(self, email: str) -> User | None:
        key = email.strip().lower()
        for u in self.users:
            if u.email.strip().lower() == key:
                return u
        return None

    def get_society(self, society_id: str) -> Society | None:
        for s in self.societies:
            if s.id == society_id:
                return s
        return None

    def find_society_by_name(self, name: str) -> Society | None:
        key = name.lower()
        for s in self.societies:
            if s.name.lower() == key:
                return s
        return None

    def get_group(self, group_id: str) -> Group | None:
        for g in self.groups:
            if g.id == group_id:
                return g
        return None

    def find_group_by_name(self, name: str) -> Group | None:
        key = name.lower()
        for g in self.groups:
            if g.name.lower() == key:
                return g
        return None

    def get_event(self, event_id: str) -> Event | None:
        for e in self.events:
            if e.id == event_id:
                return e
        return None

    # --- Views ---

    def students(self) -> list[User]:
        return [u for u in self.users if u.is_student]

    def students_in_department(self, department: str) -> list[User]:
        key = department.lower()
        return [
            u for u in self.students()
            if u.profile.department.lower() == key  # type: ignore[union-attr]
        ]

    def search_students_by_skill(self, skill: str, exclude: User | None = None) -> list[User]:
        results = []
        for u in self.students():
            if exclude is not None and u.user_id == exclude.user_id:
                continue
            if u.profile.has_skill(skill):  # type: ignore[union-attr]
                results.append(u)
        return results

    def active_user_count(self) -> int:
        return sum(1 for u in self.users if u.active)
