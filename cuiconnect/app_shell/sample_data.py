"""
Demo population used by the `seed` command and the integration tests.

Login credentials:
    Student:        ali.student@demo.com / pass123
    Society Admin:  farhan.admin@demo.com / admin123
    Department Rep: sana.rep@demo.com / dept123
    System Admin:   admin.sys@demo.com / sysadmin
"""

from __future__ import annotations

import logging
from datetime import timedelta

from cuiconnect.components.accounts import (
    RegisterDepartmentRepInput,
    RegisterInput,
    RegisterSocietyAdminInput,
    RegisterStudentInput,
    RegisterSystemAdminInput,
    run_register,
)
from cuiconnect.components.community import (
    CreateGroupInput,
    CreateSocietyInput,
    PostMessageInput,
    run_create_group,
    run_create_society,
    run_post_group_message,
)
from cuiconnect.domain.entities import Event, Group, Society, StudentProfile, User

from .context import ServiceContext

logger = logging.getLogger(__name__)

STUDENTS = [
    RegisterStudentInput(
        id="FA20-BCS-001",
        name="Ali Khan",
        email="ali.student@demo.com",
        password="pass123",
        department="Computer Science",
        semester=5,
        skills="Java, Python, Database",
    ),
    RegisterStudentInput(
        id="FA20-BCS-002",
        name="Sara Ahmed",
        email="sara.student@demo.com",
        password="pass123",
        department="Computer Science",
        semester=5,
        skills="Web Development, JavaScript, React",
    ),
    RegisterStudentInput(
        id="FA20-BBA-001",
        name="Ahmed Raza",
        email="ahmed.student@demo.com",
        password="pass123",
        department="Business",
        semester=4,
        skills="Marketing, Management",
    ),
]

SOCIETY_ADMIN = RegisterSocietyAdminInput(
    id="SA001", name="Dr. Farhan", email="farhan.admin@demo.com", password="admin123"
)
DEPARTMENT_REP = RegisterDepartmentRepInput(
    id="DR001",
    name="Dr. Sana",
    email="sana.rep@demo.com",
    password="dept123",
    department="Computer Science",
)
SYSTEM_ADMIN = RegisterSystemAdminInput(
    id="SYS001", name="Admin", email="admin.sys@demo.com", password="sysadmin"
)

SOCIETIES = [
    ("CS Society", "Computer Science Student Society", "Academic"),
    ("Sports Society", "Sports & Fitness Community", "Sports"),
    ("AI Society", "AI, ML, and Research Community", "Tech"),
]


def _register(ctx: ServiceContext, inp: RegisterInput) -> User:
    result = run_register(inp, ctx.directory, registration=ctx.rules.registration)
    if not result.success or result.user is None:
        raise ValueError(f"Sample user {inp.email} rejected: {result.error}")
    return result.user


def _create_society(ctx: ServiceContext, admin: User, name: str, desc: str, cat: str) -> Society:
    result = run_create_society(
        CreateSocietyInput(actor=admin, name=name, description=desc, category=cat),
        ctx.directory,
        ctx.policy,
    )
    if not result.success or result.society is None:
        raise ValueError(f"Sample society {name} rejected: {result.error}")
    return result.society


def _enroll_society(student: User, society: Society) -> None:
    if not isinstance(student.profile, StudentProfile):
        raise ValueError(f"{student.user_id} is not a student")
    society.member_ids.append(student.user_id)
    student.profile.joined_society_ids.append(society.id)


def _enroll_group(student: User, group: Group) -> None:
    if not isinstance(student.profile, StudentProfile):
        raise ValueError(f"{student.user_id} is not a student")
    group.member_ids.append(student.user_id)
    student.profile.joined_group_ids.append(group.id)


def _create_group(ctx: ServiceContext, creator: User, name: str, desc: str, cat: str) -> Group:
    result = run_create_group(
        CreateGroupInput(creator=creator, name=name, description=desc, category=cat),
        ctx.directory,
    )
    if not result.success or result.group is None:
        raise ValueError(f"Sample group {name} rejected: {result.error}")
    return result.group


def _chat(ctx: ServiceContext, group: Group, lines: list[tuple[User, str]]) -> None:
    for sender, content in lines:
        run_post_group_message(
            PostMessageInput(sender=sender, group=group, content=content), ctx.clock
        )


def load_sample_data(ctx: ServiceContext) -> None:
    """
    Populate an empty directory with the demo users, societies, events and groups.

    Raises ValueError if the directory already holds any of the sample emails,
    names or ids.
    """
    s1, s2, s3 = (_register(ctx, inp) for inp in STUDENTS)

    admin = _register(ctx, SOCIETY_ADMIN)
    cs, _, ai = (_create_society(ctx, admin, *entry) for entry in SOCIETIES)
    _enroll_society(s1, cs)
    _enroll_society(s2, cs)

    today = ctx.clock.today()
    events = [
        (Event(
            title="Java Workshop",
            description="Learn advanced Java programming",
            date=today + timedelta(days=7),
            venue="CS Lab 5",
            organizer=cs.name,
        ), cs),
        (Event(
            title="Career Fair",
            description="Meet tech companies",
            date=today + timedelta(days=14),
            venue="Auditorium",
            organizer="Career Office",
        ), None),
        (Event(
            title="AI Bootcamp",
            description="Intro to ML + projects",
            date=today + timedelta(days=10),
            venue="Seminar Hall",
            organizer=ai.name,
        ), ai),
    ]
    for event, society in events:
        ctx.directory.add_event(event)
        if society is not None:
            society.event_ids.append(event.id)

    _register(ctx, DEPARTMENT_REP)
    _register(ctx, SYSTEM_ADMIN)

    oop = _create_group(
        ctx, s1, "OOP Study Group", "Discuss OOP concepts and viva prep", "Academic"
    )
    _enroll_group(s2, oop)
    _enroll_group(s3, oop)
    _chat(ctx, oop, [
        (s1, "Assalam o Alaikum, let's prepare OOP viva together."),
        (s2, "Walaikum Salam! I'll share SOLID principles notes."),
    ])

    team = _create_group(ctx, s2, "AI Project Team", "Discuss AI project report & demo", "Tech")
    _enroll_group(s1, team)
    _enroll_group(s3, team)
    _chat(ctx, team, [
        (s2, "Guys, add input validation + sample data for demo."),
        (s1, "I fixed group join and logs module."),
        (s3, "I'll write final report intro and UML summary."),
    ])

    ctx.notifier.notify(s1, "Welcome! Sample data loaded.")
    ctx.notifier.notify(s2, "You have been added to AI Project Team group.")
    ctx.notifier.notify(s3, "Try joining a society from the list.")

    logger.info("Sample data initialized.")
