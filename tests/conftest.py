from datetime import UTC, date, datetime
from unittest.mock import Mock

import pytest

from cuiconnect.adapters.fs.user_table import FileUserTable
from cuiconnect.app_shell.context import ServiceContext
from cuiconnect.components.notifications import Notifier
from cuiconnect.components.persistence import UserStore
from cuiconnect.domain.directory import Directory
from cuiconnect.domain.entities import (
    DepartmentRepProfile,
    Society,
    SocietyAdminProfile,
    StudentProfile,
    SystemAdminProfile,
    User,
)
from cuiconnect.domain.policy import PolicyEngine
from cuiconnect.rules.models import Rules


@pytest.fixture
def rules():
    return Rules()


@pytest.fixture
def policy(rules):
    return PolicyEngine(rules)


@pytest.fixture
def mock_time():
    """Mock time port that returns a fixed time."""
    time = Mock()
    time.now_utc.return_value = datetime(2026, 1, 12, 12, 0, 0, tzinfo=UTC)
    time.today.return_value = date(2026, 1, 12)
    return time


@pytest.fixture
def notifier(mock_time):
    return Notifier(mock_time)


@pytest.fixture
def directory():
    return Directory()


@pytest.fixture
def user_table(tmp_path):
    return FileUserTable(tmp_path / "users.txt")


@pytest.fixture
def store(user_table):
    return UserStore(user_table)


@pytest.fixture
def make_student():
    def _make(
        id: str = "FA20-BCS-001",
        name: str = "Ali Khan",
        email: str = "ali@demo.com",
        department: str = "Computer Science",
        semester: int = 5,
        skills: list[str] | None = None,
    ) -> User:
        return User(
            id=id,
            name=name,
            email=email,
            password="pass123",
            profile=StudentProfile(
                department=department, semester=semester, skills=skills or []
            ),
        )

    return _make


@pytest.fixture
def society_admin():
    return User(
        id="SA001",
        name="Dr. Farhan",
        email="farhan@demo.com",
        password="admin123",
        profile=SocietyAdminProfile(),
    )


@pytest.fixture
def department_rep():
    return User(
        id="DR001",
        name="Dr. Sana",
        email="sana@demo.com",
        password="dept123",
        profile=DepartmentRepProfile(department="Computer Science"),
    )


@pytest.fixture
def system_admin():
    return User(
        id="SYS001",
        name="Admin",
        email="admin@demo.com",
        password="sysadmin",
        profile=SystemAdminProfile(),
    )


@pytest.fixture
def society(society_admin):
    soc = Society(
        name="CS Society",
        description="Computer Science Student Society",
        category="Academic",
        admin_id=society_admin.user_id,
    )
    society_admin.profile.managed_society_ids.append(soc.id)
    return soc


@pytest.fixture
def ctx(tmp_path, rules, mock_time):
    """A full ServiceContext rooted in a temporary directory."""
    return ServiceContext.create(rules, tmp_path, clock=mock_time)
