from typing import Protocol

from cuiconnect.domain.entities import Event, Group, Society, User


class ReportDirectoryPort(Protocol):
    users: list[User]
    societies: list[Society]
    groups: list[Group]
    events: list[Event]

    def get_event(self, event_id: str) -> Event | None: ...
    def students(self) -> list[User]: ...
    def active_user_count(self) -> int: ...
