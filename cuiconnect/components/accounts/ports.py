from typing import Any, Protocol

from cuiconnect.domain.entities import User


class UserDirectoryPort(Protocol):
    users: list[User]

    def add_user(self, user: User) -> None: ...
    def get_user(self, user_id: str) -> User | None: ...
    def find_user_by_email(self, email: str) -> User | None: ...
    def search_students_by_skill(
        self, skill: str, exclude: User | None = None
    ) -> list[User]: ...


class SaveResultPort(Protocol):
    success: bool


class UserStorePort(Protocol):
    """Anything that can durably rewrite the users table of a directory."""

    def save(self, directory: Any) -> SaveResultPort: ...
