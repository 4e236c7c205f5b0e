"""
Membership component - join/approve/reject/leave for societies and groups.

Societies gate entry behind an admin-approved pending request; groups and
event RSVPs apply immediately and idempotently.
"""

from .component import (
    run,
    run_approve,
    run_join_group,
    run_leave_group,
    run_leave_society,
    run_reject,
    run_remove_member,
    run_request_join,
    run_rsvp,
)
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

__all__ = [
    # Entry points
    "run",
    "run_approve",
    "run_join_group",
    "run_leave_group",
    "run_leave_society",
    "run_reject",
    "run_remove_member",
    "run_request_join",
    "run_rsvp",
    # Input models
    "ApproveRequestInput",
    "JoinGroupInput",
    "JoinSocietyInput",
    "LeaveGroupInput",
    "LeaveSocietyInput",
    "RejectRequestInput",
    "RemoveMemberInput",
    "RsvpInput",
    # Output models
    "MembershipOutput",
    # Ports
    "NotifierPort",
    "UserLookupPort",
]
