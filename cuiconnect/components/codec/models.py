from dataclasses import dataclass

from cuiconnect.domain.entities import User


@dataclass
class DecodeOutput:
    user: User | None = None
    success: bool = False
    error: str | None = None
