from datetime import date, datetime
from typing import Protocol

from cuiconnect.domain.entities import Event, Group, Society, User


class UserTablePort(Protocol):
    def exists(self) -> bool: ...
    def read_lines(self) -> list[str]: ...
    def overwrite(self, text: str) -> None: ...


class UserDirectoryPort(Protocol):
    users: list[User]
    societies: list[Society]
    groups: list[Group]
    events: list[Event]

    def add_user(self, user: User) -> None: ...
    def clear_users(self) -> None: ...
    def find_user_by_email(self, email: str) -> User | None: ...
    def students(self) -> list[User]: ...


class TimePort(Protocol):
    def now_utc(self) -> datetime: ...
    def today(self) -> date: ...
