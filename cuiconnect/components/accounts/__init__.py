"""
Accounts component - registration, login and account administration.

Registers users of every role under a directory-wide unique email,
authenticates active users, lets a system admin toggle account status, and
manages student skills. Every mutation rewrites the users table when a
store is supplied.
"""

from .component import (
    run_add_skill,
    run_login,
    run_register,
    run_search_by_skill,
    run_toggle_status,
)
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

__all__ = [
    # Entry points
    "run_add_skill",
    "run_login",
    "run_register",
    "run_search_by_skill",
    "run_toggle_status",
    # Input models
    "AddSkillInput",
    "LoginInput",
    "RegisterDepartmentRepInput",
    "RegisterInput",
    "RegisterSocietyAdminInput",
    "RegisterStudentInput",
    "RegisterSystemAdminInput",
    "SearchBySkillInput",
    "ToggleStatusInput",
    # Output models
    "AccountOutput",
    "AuthOutput",
    "UserListOutput",
    # Ports
    "UserDirectoryPort",
    "UserStorePort",
]
