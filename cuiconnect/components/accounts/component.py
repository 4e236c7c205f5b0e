from __future__ import annotations

import logging

from cuiconnect.domain.entities import (
    DepartmentRepProfile,
    SocietyAdminProfile,
    StudentProfile,
    SystemAdminProfile,
    User,
)
from cuiconnect.domain.policy import PolicyEngine
from cuiconnect.rules.models import RegistrationRules

from .models import (
    AccountOutput,
    AddSkillInput,
    AuthOutput,
    LoginInput,
    RegisterDepartmentRepInput,
    RegisterInput,
    RegisterSocietyAdminInput,
    RegisterStudentInput,
    RegisterSystemAdminInput,
    SearchBySkillInput,
    ToggleStatusInput,
    UserListOutput,
)
from .ports import UserDirectoryPort, UserStorePort

logger = logging.getLogger(__name__)


def _persist(directory: UserDirectoryPort, store: UserStorePort | None) -> bool:
    if store is None:
        return False
    return store.save(directory).success


def _build_user(inp: RegisterInput) -> User:
    profile: StudentProfile | SocietyAdminProfile | DepartmentRepProfile | SystemAdminProfile
    if isinstance(inp, RegisterStudentInput):
        profile = StudentProfile(department=inp.department, semester=inp.semester)
        if inp.skills.strip():
            profile.add_skill(inp.skills)
    elif isinstance(inp, RegisterSocietyAdminInput):
        profile = SocietyAdminProfile()
    elif isinstance(inp, RegisterDepartmentRepInput):
        profile = DepartmentRepProfile(department=inp.department)
    elif isinstance(inp, RegisterSystemAdminInput):
        profile = SystemAdminProfile()
    else:
        raise ValueError(f"Unknown input type: {type(inp)}")

    return User(
        id=inp.id,
        name=inp.name,
        email=inp.email.strip(),
        password=inp.password,
        profile=profile,
    )


def run_register(
    inp: RegisterInput,
    directory: UserDirectoryPort,
    store: UserStorePort | None = None,
    registration: RegistrationRules | None = None,
) -> AccountOutput:
    """
    Register a user of any role and rewrite the users table.

    Emails are unique across all roles, compared case-insensitively.
    Raw ids only need to be unique within a role.
    """
    registration = registration or RegistrationRules()

    if directory.find_user_by_email(inp.email):
        logger.info("Registration rejected, email already registered: %s", inp.email)
        return AccountOutput(success=False, error="Email already registered")

    if isinstance(inp, RegisterStudentInput) and not (
        registration.semester_min <= inp.semester <= registration.semester_max
    ):
        return AccountOutput(
            success=False,
            error=(
                f"Semester must be between {registration.semester_min} "
                f"and {registration.semester_max}"
            ),
        )

    user = _build_user(inp)
    if directory.get_user(user.user_id):
        return AccountOutput(success=False, error="ID already registered")

    directory.add_user(user)
    persisted = _persist(directory, store)
    logger.info("%s registered: %s (%s)", user.role, user.name, user.email)
    return AccountOutput(user=user, persisted=persisted, success=True)


def run_login(inp: LoginInput, directory: UserDirectoryPort) -> AuthOutput:
    user = directory.find_user_by_email(inp.email)
    if not user or user.password != inp.password:
        logger.info("Login failed for email: %s", inp.email)
        return AuthOutput(success=False, error="Invalid email or password")

    if not user.active:
        return AuthOutput(success=False, error="Account is deactivated")

    logger.info("Login success: %s (%s)", user.name, user.role)
    return AuthOutput(user=user, success=True)


def run_toggle_status(
    inp: ToggleStatusInput,
    directory: UserDirectoryPort,
    policy: PolicyEngine,
    store: UserStorePort | None = None,
) -> AccountOutput:
    if not policy.can_manage_users(inp.actor):
        return AccountOutput(success=False, error="Access denied")

    if inp.target.user_id == inp.actor.user_id:
        return AccountOutput(success=False, error="Cannot deactivate yourself")

    inp.target.active = not inp.target.active
    # Persist after flipping so the new status is what lands on disk
    persisted = _persist(directory, store)

    status = "ACTIVE" if inp.target.active else "INACTIVE"
    logger.info("%s toggled status for %s to %s", inp.actor.name, inp.target.name, status)
    return AccountOutput(user=inp.target, persisted=persisted, success=True)


def run_add_skill(
    inp: AddSkillInput,
    directory: UserDirectoryPort,
    store: UserStorePort | None = None,
) -> AccountOutput:
    profile = inp.student.profile
    if not isinstance(profile, StudentProfile):
        return AccountOutput(success=False, error="Only students have skills")

    if not profile.add_skill(inp.skill):
        return AccountOutput(user=inp.student, success=False, error="Skill already listed")

    persisted = _persist(directory, store)
    logger.info("%s added skill: %s", inp.student.name, inp.skill)
    return AccountOutput(user=inp.student, persisted=persisted, success=True)


def run_search_by_skill(inp: SearchBySkillInput, directory: UserDirectoryPort) -> UserListOutput:
    if not inp.skill.strip():
        return UserListOutput(users=[], success=False, error="Skill is required")
    users = directory.search_students_by_skill(inp.skill, exclude=inp.actor)
    return UserListOutput(users=users, success=True)

