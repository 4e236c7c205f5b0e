"""
Membership component - society and group membership lifecycles.

Society membership, per (society, student):

    NONE --request--> PENDING --approve--> MEMBER --leave/remove--> NONE
    PENDING --reject--> NONE

Groups have no pending stage: join and leave apply immediately.
Every conflict (already a member, nothing pending, ...) is reported as
success=False with no mutation; nothing here raises for state conflicts.
"""

from __future__ import annotations

import logging

from cuiconnect.domain.entities import StudentProfile, User
from cuiconnect.domain.policy import PolicyEngine
from cuiconnect.domain.state import MembershipState, membership_state

from .models import (
    ApproveRequestInput,
    JoinGroupInput,
    JoinSocietyInput,
    LeaveGroupInput,
    LeaveSocietyInput,
    MembershipOutput,
    RejectRequestInput,
    RemoveMemberInput,
    RsvpInput,
)
from .ports import NotifierPort, UserLookupPort

logger = logging.getLogger(__name__)


def _profile(user: User) -> StudentProfile | None:
    return user.profile if isinstance(user.profile, StudentProfile) else None


def _not_a_student() -> MembershipOutput:
    return MembershipOutput(success=False, error="Only students can hold memberships")


# --- Societies ---


def run_request_join(
    inp: JoinSocietyInput,
    users: UserLookupPort,
    notifier: NotifierPort,
) -> MembershipOutput:
    student, society = inp.student, inp.society
    if _profile(student) is None:
        return _not_a_student()

    state = membership_state(society, student.user_id)
    if state is MembershipState.MEMBER:
        return MembershipOutput(state=state, success=False, error="Already a member")
    if state is MembershipState.PENDING:
        return MembershipOutput(state=state, success=False, error="Request already pending")

    society.pending_ids.append(student.user_id)
    logger.info("%s requested to join society %s", student.name, society.name)

    admin = users.get_user(society.admin_id)
    if admin is not None:
        notifier.notify(admin, f"New join request for {society.name} from {student.name}")
    else:
        logger.warning("Society %s has no resolvable admin %s", society.name, society.admin_id)

    return MembershipOutput(state=MembershipState.PENDING, success=True)


def run_approve(
    inp: ApproveRequestInput,
    policy: PolicyEngine,
    notifier: NotifierPort,
) -> MembershipOutput:
    society, student = inp.society, inp.student
    if not policy.can_manage_society(inp.actor, society):
        return MembershipOutput(success=False, error="Access denied")

    if student.user_id not in society.pending_ids:
        return MembershipOutput(
            state=membership_state(society, student.user_id),
            success=False,
            error="No pending request",
        )

    society.pending_ids.remove(student.user_id)
    if student.user_id not in society.member_ids:
        society.member_ids.append(student.user_id)

    profile = _profile(student)
    if profile is not None and society.id not in profile.joined_society_ids:
        profile.joined_society_ids.append(society.id)

    notifier.notify(student, f"Your request to join {society.name} has been APPROVED!")
    logger.info("%s approved %s for %s", inp.actor.name, student.name, society.name)
    return MembershipOutput(state=MembershipState.MEMBER, success=True)


def run_reject(
    inp: RejectRequestInput,
    policy: PolicyEngine,
    notifier: NotifierPort,
) -> MembershipOutput:
    society, student = inp.society, inp.student
    if not policy.can_manage_society(inp.actor, society):
        return MembershipOutput(success=False, error="Access denied")

    if student.user_id not in society.pending_ids:
        return MembershipOutput(
            state=membership_state(society, student.user_id),
            success=False,
            error="No pending request",
        )

    society.pending_ids.remove(student.user_id)
    notifier.notify(student, f"Your request to join {society.name} was declined.")
    logger.info("%s rejected %s for %s", inp.actor.name, student.name, society.name)
    return MembershipOutput(state=MembershipState.NONE, success=True)


def _drop_member(student: User, society_id: str, symmetric: bool) -> None:
    profile = _profile(student)
    if symmetric and profile is not None and society_id in profile.joined_society_ids:
        profile.joined_society_ids.remove(society_id)


def run_leave_society(inp: LeaveSocietyInput, symmetric: bool = True) -> MembershipOutput:
    """
    Remove the student from the society's members. Pending requests are
    untouched. With symmetric=False the student's own society list is left
    for the caller to update.
    """
    student, society = inp.student, inp.society
    if student.user_id not in society.member_ids:
        return MembershipOutput(
            state=membership_state(society, student.user_id),
            success=False,
            error="Not a member",
        )

    society.member_ids.remove(student.user_id)
    _drop_member(student, society.id, symmetric)
    logger.info("%s left society %s", student.name, society.name)
    return MembershipOutput(state=MembershipState.NONE, success=True)


def run_remove_member(
    inp: RemoveMemberInput,
    policy: PolicyEngine,
    symmetric: bool = True,
) -> MembershipOutput:
    society, student = inp.society, inp.student
    if not policy.can_manage_society(inp.actor, society):
        return MembershipOutput(success=False, error="Access denied")

    if student.user_id not in society.member_ids:
        return MembershipOutput(success=False, error="Student not found in society")

    society.member_ids.remove(student.user_id)
    _drop_member(student, society.id, symmetric)
    logger.info(
        "%s removed member %s from society %s", inp.actor.name, student.user_id, society.name
    )
    return MembershipOutput(state=MembershipState.NONE, success=True)


# --- Groups ---


def run_join_group(inp: JoinGroupInput, notifier: NotifierPort) -> MembershipOutput:
    student, group = inp.student, inp.group
    profile = _profile(student)
    if profile is None:
        return _not_a_student()

    if student.user_id in group.member_ids:
        # Keep the student's side consistent even on the no-op path
        if group.id not in profile.joined_group_ids:
            profile.joined_group_ids.append(group.id)
        return MembershipOutput(success=False, error="Already a member")

    group.member_ids.append(student.user_id)
    if group.id not in profile.joined_group_ids:
        profile.joined_group_ids.append(group.id)

    notifier.notify(student, f"You joined group: {group.name}")
    logger.info("%s joined group %s", student.name, group.name)
    return MembershipOutput(success=True)


def run_leave_group(inp: LeaveGroupInput) -> MembershipOutput:
    student, group = inp.student, inp.group
    if student.user_id not in group.member_ids:
        return MembershipOutput(success=False, error="Not a member")

    group.member_ids.remove(student.user_id)
    profile = _profile(student)
    if profile is not None and group.id in profile.joined_group_ids:
        profile.joined_group_ids.remove(group.id)

    logger.info("%s left group %s", student.name, group.name)
    return MembershipOutput(success=True)


# --- Events ---


def run_rsvp(inp: RsvpInput, notifier: NotifierPort) -> MembershipOutput:
    student, event = inp.student, inp.event
    profile = _profile(student)
    if profile is None:
        return _not_a_student()

    if event.id in profile.rsvp_event_ids or student.user_id in event.attendee_ids:
        return MembershipOutput(success=False, error="Already RSVP'd")

    profile.rsvp_event_ids.append(event.id)
    event.attendee_ids.append(student.user_id)

    notifier.notify(student, f"RSVP confirmed for: {event.title}")
    logger.info("%s RSVP'd to event %s", student.name, event.title)
    return MembershipOutput(success=True)


def run(
    inp: (
        JoinSocietyInput
        | ApproveRequestInput
        | RejectRequestInput
        | LeaveSocietyInput
        | RemoveMemberInput
        | JoinGroupInput
        | LeaveGroupInput
        | RsvpInput
    ),
    *,
    users: UserLookupPort,
    policy: PolicyEngine,
    notifier: NotifierPort,
    symmetric_leave: bool = True,
) -> MembershipOutput:
    if isinstance(inp, JoinSocietyInput):
        return run_request_join(inp, users, notifier)

    elif isinstance(inp, ApproveRequestInput):
        return run_approve(inp, policy, notifier)

    elif isinstance(inp, RejectRequestInput):
        return run_reject(inp, policy, notifier)

    elif isinstance(inp, LeaveSocietyInput):
        return run_leave_society(inp, symmetric_leave)

    elif isinstance(inp, RemoveMemberInput):
        return run_remove_member(inp, policy, symmetric_leave)

    elif isinstance(inp, JoinGroupInput):
        return run_join_group(inp, notifier)

    elif isinstance(inp, LeaveGroupInput):
        return run_leave_group(inp)

    elif isinstance(inp, RsvpInput):
        return run_rsvp(inp, notifier)

    else:
        raise ValueError(f"Unknown input type: {type(inp)}")
