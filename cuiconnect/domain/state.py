from enum import Enum

from cuiconnect.domain.entities import Society


class MembershipState(str, Enum):
    NONE = "none"
    PENDING = "pending"
    MEMBER = "member"


# NONE -> PENDING -> MEMBER -> NONE, PENDING -> NONE. Nothing else.
_ALLOWED: dict[MembershipState, set[MembershipState]] = {
    MembershipState.NONE: {MembershipState.PENDING},
    MembershipState.PENDING: {MembershipState.MEMBER, MembershipState.NONE},
    MembershipState.MEMBER: {MembershipState.NONE},
}


def membership_state(society: Society, user_id: str) -> MembershipState:
    """
    Where a student stands with a society.
    Raises ValueError if the student sits in both lists (corrupted state).
    """
    is_member = user_id in society.member_ids
    is_pending = user_id in society.pending_ids
    if is_member and is_pending:
        raise ValueError(f"{user_id} is both member and pending in {society.name}")
    if is_member:
        return MembershipState.MEMBER
    if is_pending:
        return MembershipState.PENDING
    return MembershipState.NONE


def can_transition(current: MembershipState, new: MembershipState) -> bool:
    return new in _ALLOWED[current]
