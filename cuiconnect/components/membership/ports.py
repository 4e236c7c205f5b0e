from typing import Protocol

from cuiconnect.domain.entities import User


class NotifierPort(Protocol):
    def notify(self, user: User, content: str) -> bool:
        """Deliver to one inbox. Must not raise."""
        ...


class UserLookupPort(Protocol):
    def get_user(self, user_id: str) -> User | None: ...

