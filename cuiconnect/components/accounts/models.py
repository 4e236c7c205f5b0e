from dataclasses import dataclass

from cuiconnect.domain.entities import User


@dataclass
class RegisterStudentInput:
    id: str
    name: str
    email: str
    password: str
    department: str
    semester: int
    skills: str = ""  # Comma separated


@dataclass
class RegisterSocietyAdminInput:
    id: str
    name: str
    email: str
    password: str


@dataclass
class RegisterDepartmentRepInput:
    id: str
    name: str
    email: str
    password: str
    department: str


@dataclass
class RegisterSystemAdminInput:
    id: str
    name: str
    email: str
    password: str


RegisterInput = (
    RegisterStudentInput
    | RegisterSocietyAdminInput
    | RegisterDepartmentRepInput
    | RegisterSystemAdminInput
)


@dataclass
class LoginInput:
    email: str
    password: str


@dataclass
class ToggleStatusInput:
    actor: User
    target: User


@dataclass
class AddSkillInput:
    student: User
    skill: str


@dataclass
class SearchBySkillInput:
    actor: User
    skill: str


@dataclass
class AccountOutput:
    user: User | None = None
    # Whether the users table was rewritten after the change
    persisted: bool = False
    success: bool = False
    error: str | None = None


@dataclass
class AuthOutput:
    user: User | None = None
    success: bool = False
    error: str | None = None


@dataclass
class UserListOutput:
    users: list[User]
    success: bool = False
    error: str | None = None
