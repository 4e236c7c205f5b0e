"""
Record codec - one User <-> one delimited line of text.

Fields are joined with "|" in a fixed, role-specific order (role tag first).
Escaping applied to every field:
- "\\" -> "\\\\"
- "|"  -> "\\|"
- newline -> single space (lossy, never restored)

Decoding splits on unescaped "|" only and restores escaped characters in
the same pass, so an escaped backslash followed by a delimiter is never
mistaken for an escaped delimiter.
"""

from __future__ import annotations

from cuiconnect.domain.entities import (
    DepartmentRepProfile,
    SocietyAdminProfile,
    StudentProfile,
    SystemAdminProfile,
    User,
)

from .models import DecodeOutput

DELIMITER = "|"
ESCAPE = "\\"
COMMENT_PREFIX = "#"

# Field count per role, role tag included
FIELD_COUNTS: dict[str, int] = {
    "STUDENT": 9,
    "SOCIETY_ADMIN": 6,
    "DEPARTMENT_REP": 7,
    "SYSTEM_ADMIN": 6,
}


# --- Field escaping ---


def escape_field(value: str | None) -> str:
    if value is None:
        return ""
    value = value.replace("\r\n", " ").replace("\n", " ").replace("\r", " ")
    return value.replace(ESCAPE, ESCAPE * 2).replace(DELIMITER, ESCAPE + DELIMITER)


def split_fields(line: str) -> list[str]:
    """Split on unescaped delimiters, unescaping each field."""
    fields: list[str] = []
    current: list[str] = []
    i = 0
    while i < len(line):
        ch = line[i]
        if ch == ESCAPE and i + 1 < len(line) and line[i + 1] in (ESCAPE, DELIMITER):
            current.append(line[i + 1])
            i += 2
            continue
        if ch == DELIMITER:
            fields.append("".join(current))
            current = []
        else:
            current.append(ch)
        i += 1
    fields.append("".join(current))
    return fields


def is_comment(line: str) -> bool:
    return line.lstrip().startswith(COMMENT_PREFIX)


def has_undecodable_bytes(line: str) -> bool:
    """True if the line carries bytes smuggled in by the surrogateescape handler."""
    return any("\udc80" <= ch <= "\udcff" for ch in line)


# --- Encoding ---


def _bool_field(value: bool) -> str:
    return "true" if value else "false"


def encode_user(user: User) -> str:
    head = [
        user.role,
        escape_field(user.id),
        escape_field(user.name),
        escape_field(user.email),
        escape_field(user.password),
        _bool_field(user.active),
    ]
    profile = user.profile

    if isinstance(profile, StudentProfile):
        tail = [
            escape_field(profile.department),
            str(profile.semester),
            escape_field(",".join(profile.skills)),
        ]
    elif isinstance(profile, DepartmentRepProfile):
        tail = [escape_field(profile.department)]
    else:
        tail = []

    return DELIMITER.join(head + tail)


# --- Decoding ---


def decode_line(line: str) -> DecodeOutput:
    """
    Decode one table line. Never raises: malformed lines come back as
    DecodeOutput(success=False) with the reason.
    """
    if not line.strip():
        return DecodeOutput(success=False, error="Blank line")
    if is_comment(line):
        return DecodeOutput(success=False, error="Comment line")
    if has_undecodable_bytes(line):
        return DecodeOutput(success=False, error="Undecodable bytes in line")

    parts = split_fields(line)
    role = parts[0].strip()

    required = FIELD_COUNTS.get(role)
    if required is None:
        return DecodeOutput(success=False, error=f"Unknown role tag: {role!r}")
    if len(parts) < required:
        return DecodeOutput(
            success=False,
            error=f"{role} record has {len(parts)} fields, expected {required}",
        )

    user_id, name, email, password = parts[1:5]
    active = parts[5].strip().lower() == "true"

    profile: StudentProfile | SocietyAdminProfile | DepartmentRepProfile | SystemAdminProfile
    if role == "STUDENT":
        try:
            semester = int(parts[7].strip())
        except ValueError:
            return DecodeOutput(success=False, error=f"Invalid semester: {parts[7]!r}")
        profile = StudentProfile(department=parts[6], semester=semester)
        if parts[8].strip():
            profile.add_skill(parts[8])
    elif role == "DEPARTMENT_REP":
        profile = DepartmentRepProfile(department=parts[6])
    elif role == "SOCIETY_ADMIN":
        profile = SocietyAdminProfile()
    else:
        profile = SystemAdminProfile()

    user = User(
        id=user_id,
        name=name,
        email=email,
        password=password,
        active=active,
        profile=profile,
    )
    return DecodeOutput(user=user, success=True)
