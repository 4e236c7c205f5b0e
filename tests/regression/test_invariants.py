from datetime import date

import pytest

from cuiconnect.components.accounts import (
    LoginInput,
    RegisterSocietyAdminInput,
    RegisterStudentInput,
    run_login,
    run_register,
)
from cuiconnect.components.codec import decode_line, encode_user
from cuiconnect.components.membership import (
    ApproveRequestInput,
    JoinGroupInput,
    JoinSocietyInput,
    LeaveGroupInput,
    RejectRequestInput,
    RsvpInput,
    run_approve,
    run_join_group,
    run_leave_group,
    run_reject,
    run_request_join,
    run_rsvp,
)
from cuiconnect.components.persistence import run_load
from cuiconnect.domain.directory import Directory
from cuiconnect.domain.entities import Event, Group


@pytest.fixture
def student(make_student):
    return make_student()


@pytest.fixture
def world(directory, society_admin, society, student):
    directory.add_user(society_admin)
    directory.add_user(student)
    directory.add_society(society)
    return directory


# --- R1: Approval ---
def test_R1_request_then_approve(world, policy, notifier, society_admin, society, student):
    """R1: After request + approve the student is a member, not pending, and lists the society."""
    run_request_join(JoinSocietyInput(student=student, society=society), world, notifier)
    run_approve(
        ApproveRequestInput(actor=society_admin, society=society, student=student),
        policy,
        notifier,
    )

    assert student.user_id in society.member_ids
    assert student.user_id not in society.pending_ids
    assert society.id in student.profile.joined_society_ids


# --- R2: Pending uniqueness ---
def test_R2_double_request_single_pending(world, notifier, society, student):
    """R2: Two join requests leave exactly one pending entry."""
    inp = JoinSocietyInput(student=student, society=society)
    assert run_request_join(inp, world, notifier).success
    assert not run_request_join(inp, world, notifier).success

    assert society.pending_ids.count(student.user_id) == 1


# --- R3: Reject is a no-op when nothing is pending ---
def test_R3_reject_non_pending(world, policy, notifier, society_admin, society, student):
    """R3: Rejecting a student with no pending request fails and mutates nothing."""
    before_society = society.model_copy(deep=True)
    before_student = student.model_copy(deep=True)

    result = run_reject(
        RejectRequestInput(actor=society_admin, society=society, student=student),
        policy,
        notifier,
    )

    assert result.success is False
    assert society == before_society
    assert student == before_student


# --- R4: Codec round-trip ---
@pytest.mark.parametrize(
    "name, skills",
    [
        ("Plain Name", ["java"]),
        ("Pipe | Name", ["a|b"]),
        ("Back\\slash", ["c\\d"]),
        ("Ends with backslash\\", ["x\\"]),
        ("Mixed \\| both  spaced", ["two words", "p|q\\r"]),
    ],
)
def test_R4_codec_round_trip(make_student, name, skills):
    """R4: Encode/decode is exact for names and skills with delimiters, escapes and spaces."""
    original = make_student(name=name, skills=skills)

    decoded = decode_line(encode_user(original)).user

    assert decoded.name == original.name
    assert decoded.profile.skills == original.profile.skills
    assert decoded.user_id == original.user_id


# --- R5: Malformed records are isolated ---
def test_R5_one_malformed_two_valid(user_table):
    """R5: A table with one malformed and two valid lines loads exactly two users."""
    user_table.overwrite(
        "# CUICONNECT USERS DB\n"
        "STUDENT|S1|One|one@x.com|pw|true|CS|3|java\n"
        "STUDENT|S2|Broken|broken@x.com\n"
        "SYSTEM_ADMIN|SYS1|Admin|admin@x.com|pw|true\n"
    )
    directory = Directory()

    result = run_load(directory, user_table)

    assert result.loaded == 2
    assert [u.email for u in directory.users] == ["one@x.com", "admin@x.com"]


# --- R6: Email identity across save/reload ---
def test_R6_duplicate_email_and_reload(directory, store):
    """R6: "A@X.com" after "a@x.com" is rejected; a reloaded directory still authenticates."""
    first = run_register(
        RegisterStudentInput(
            id="S1", name="A", email="a@x.com", password="pw", department="CS", semester=1
        ),
        directory,
        store,
    )
    dup = run_register(
        RegisterSocietyAdminInput(id="SA1", name="B", email="A@X.com", password="pw"),
        directory,
        store,
    )
    assert first.success and first.persisted
    assert dup.success is False

    fresh = Directory()
    store.load(fresh)
    auth = run_login(LoginInput(email="a@x.com", password="pw"), fresh)

    assert auth.success
    assert auth.user.user_id == first.user.user_id


# --- R7: Group membership is idempotent ---
def test_R7_group_join_leave(make_student, notifier):
    """R7: Joining twice keeps size 2; leaving drops back to 1."""
    creator = make_student(id="X", email="x@x.com")
    joiner = make_student(id="Y", email="y@x.com")
    group = Group(name="G", member_ids=[creator.user_id])

    assert run_join_group(JoinGroupInput(student=joiner, group=group), notifier).success
    assert len(group.member_ids) == 2
    assert not run_join_group(JoinGroupInput(student=joiner, group=group), notifier).success
    assert len(group.member_ids) == 2
    assert run_leave_group(LeaveGroupInput(student=joiner, group=group)).success
    assert len(group.member_ids) == 1


# --- R8: RSVP is idempotent ---
def test_R8_rsvp_once(student, notifier):
    """R8: A second RSVP fails and sends no second confirmation."""
    event = Event(
        title="Java Workshop",
        description="",
        date=date(2026, 1, 19),
        venue="CS Lab 5",
        organizer="CS Society",
    )

    assert run_rsvp(RsvpInput(student=student, event=event), notifier).success
    assert not run_rsvp(RsvpInput(student=student, event=event), notifier).success

    assert event.attendee_ids == [student.user_id]
    confirmations = [n for n in student.notifications if n.content.startswith("RSVP confirmed")]
    assert len(confirmations) == 1


# --- R9: Undecodable bytes are isolated to their line ---
def test_R9_undecodable_line_skipped(user_table):
    """R9: A line with invalid UTF-8 is skipped; the valid lines around it still load."""
    user_table.path.write_bytes(
        b"# CUICONNECT USERS DB\n"
        b"STUDENT|S1|One|one@x.com|pw|true|CS|3|java\n"
        b"STUDENT|S2|Bad\xff\xfe|bad@x.com|pw|true|CS|3|java\n"
        b"SYSTEM_ADMIN|SYS1|Admin|admin@x.com|pw|true\n"
    )
    directory = Directory()

    result = run_load(directory, user_table)

    assert result.success
    assert result.loaded == 2
    assert [s.line_no for s in result.skipped] == [3]
    assert [u.email for u in directory.users] == ["one@x.com", "admin@x.com"]
