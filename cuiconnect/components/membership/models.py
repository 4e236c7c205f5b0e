from dataclasses import dataclass

from cuiconnect.domain.entities import Event, Group, Society, User
from cuiconnect.domain.state import MembershipState


@dataclass
class JoinSocietyInput:
    student: User
    society: Society


@dataclass
class ApproveRequestInput:
    actor: User
    society: Society
    student: User


@dataclass
class RejectRequestInput:
    actor: User
    society: Society
    student: User


@dataclass
class LeaveSocietyInput:
    student: User
    society: Society


@dataclass
class RemoveMemberInput:
    actor: User
    society: Society
    student: User


@dataclass
class JoinGroupInput:
    student: User
    group: Group


@dataclass
class LeaveGroupInput:
    student: User
    group: Group


@dataclass
class RsvpInput:
    student: User
    event: Event


@dataclass
class MembershipOutput:
    state: MembershipState | None = None
    success: bool = False
    error: str | None = None
