from dataclasses import dataclass

from cuiconnect.domain.entities import Notification


@dataclass
class NotifyOutput:
    notification: Notification | None = None
    success: bool = False
    error: str | None = None


@dataclass
class MarkReadOutput:
    marked: int = 0
    success: bool = False
    error: str | None = None
