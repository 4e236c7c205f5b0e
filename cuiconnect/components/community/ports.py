from collections.abc import Iterable
from datetime import date, datetime
from typing import Protocol

from cuiconnect.domain.entities import Event, Group, Society, User


class CommunityDirectoryPort(Protocol):
    def add_society(self, society: Society) -> None: ...
    def add_group(self, group: Group) -> None: ...
    def add_event(self, event: Event) -> None: ...
    def get_user(self, user_id: str) -> User | None: ...
    def find_society_by_name(self, name: str) -> Society | None: ...
    def find_group_by_name(self, name: str) -> Group | None: ...
    def students_in_department(self, department: str) -> list[User]: ...


class FanOutPort(Protocol):
    def notify_all(self, users: Iterable[User], content: str) -> int: ...


class TimePort(Protocol):
    def now_utc(self) -> datetime: ...
    def today(self) -> date: ...
