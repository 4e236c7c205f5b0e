from pydantic import BaseModel, Field


class ProjectRules(BaseModel):
    slug: str = "cuiconnect"
    rules_version: str = "1.0"

class StorageRules(BaseModel):
    users_db_file: str = "cuiconnect_users.txt"
    header: str = "# CUICONNECT USERS DB"
    encoding: str = "utf-8"
    atomic_writes: bool = True

class RegistrationRules(BaseModel):
    semester_min: int = 1
    semester_max: int = 12

class MembershipRules(BaseModel):
    # When true, leaving a society also drops it from the student's own list.
    symmetric_leave: bool = True

class RbacRules(BaseModel):
    roles: dict[str, list[str]] = Field(
        default_factory=lambda: {
            "STUDENT": ["society:join", "group:*", "event:rsvp"],
            "SOCIETY_ADMIN": ["society:*", "event:create", "announcement:post"],
            "DEPARTMENT_REP": ["department:*", "event:create"],
            "SYSTEM_ADMIN": ["users:*", "society:view_all", "system:*"],
        }
    )

class BackupsRules(BaseModel):
    backup_dir_name: str = "backups"
    retention_count: int = 10

class OpsRules(BaseModel):
    log_level: str = "INFO"
    log_file: str | None = None
    required_env: list[str] = Field(default_factory=list)
    backups: BackupsRules = Field(default_factory=BackupsRules)

class Rules(BaseModel):
    project: ProjectRules = Field(default_factory=ProjectRules)
    storage: StorageRules = Field(default_factory=StorageRules)
    registration: RegistrationRules = Field(default_factory=RegistrationRules)
    membership: MembershipRules = Field(default_factory=MembershipRules)
    rbac: RbacRules = Field(default_factory=RbacRules)
    ops: OpsRules = Field(default_factory=OpsRules)
