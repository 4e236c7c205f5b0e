"""
Persistence component - the on-disk user table.

Save rebuilds the whole table (header line + one record per user) on every
call; there is no append mode. Load is destructive: once the table has
records, the directory's users are cleared and rebuilt from it. A missing
table, or one holding only comments, leaves the directory untouched.
After a reload each student's society, group and RSVP lists are rebuilt from
the collectives already in the directory.

I/O failures never escape: they are logged and reported in the output.
"""

from __future__ import annotations

import logging
from pathlib import Path

from cuiconnect.components.codec import decode_line, encode_user, is_comment
from cuiconnect.domain.entities import StudentProfile

from .models import BackupOutput, LoadOutput, SaveOutput, SkippedLine
from .ports import TimePort, UserDirectoryPort, UserTablePort

logger = logging.getLogger(__name__)

DEFAULT_HEADER = "# CUICONNECT USERS DB"


def run_save(
    directory: UserDirectoryPort,
    table: UserTablePort,
    header: str = DEFAULT_HEADER,
) -> SaveOutput:
    if not is_comment(header):
        header = f"# {header}"
    lines = [header] + [encode_user(u) for u in directory.users]
    try:
        table.overwrite("\n".join(lines) + "\n")
    # UnicodeError: a field the table encoding cannot represent
    except (OSError, UnicodeError) as e:
        logger.error("Failed to save users table: %s", e)
        return SaveOutput(success=False, error=f"Could not write users table: {e}")

    logger.info("Saved %d users", len(directory.users))
    return SaveOutput(saved=len(directory.users), success=True)


def _relink_students(directory: UserDirectoryPort) -> None:
    """Rebuild each student's own lists from the societies, groups and events that name them."""
    for user in directory.users:
        profile = user.profile
        if not isinstance(profile, StudentProfile):
            continue
        uid = user.user_id
        profile.joined_society_ids = [s.id for s in directory.societies if uid in s.member_ids]
        profile.joined_group_ids = [g.id for g in directory.groups if uid in g.member_ids]
        profile.rsvp_event_ids = [e.id for e in directory.events if uid in e.attendee_ids]


def run_load(directory: UserDirectoryPort, table: UserTablePort) -> LoadOutput:
    try:
        lines = table.read_lines()
    except (OSError, UnicodeError) as e:
        logger.error("Failed to read users table: %s", e)
        return LoadOutput(success=False, error=f"Could not read users table: {e}")

    records = [(n, line) for n, line in enumerate(lines, start=1) if not is_comment(line)]
    if not records:
        logger.info("Users table missing or empty; keeping in-memory users")
        return LoadOutput(success=True)

    directory.clear_users()
    output = LoadOutput(replaced=True, success=True)

    for line_no, line in records:
        result = decode_line(line)
        if not result.success or result.user is None:
            logger.warning("Skipping users table line %d: %s", line_no, result.error)
            output.skipped.append(SkippedLine(line_no=line_no, reason=result.error or ""))
            continue
        if directory.find_user_by_email(result.user.email) is not None:
            logger.warning("Skipping users table line %d: duplicate email", line_no)
            output.skipped.append(SkippedLine(line_no=line_no, reason="Duplicate email"))
            continue
        directory.add_user(result.user)
        output.loaded += 1

    _relink_students(directory)
    if output.loaded:
        logger.info("Loaded %d users from disk", output.loaded)
    return output


def render_backup(directory: UserDirectoryPort, time: TimePort) -> str:
    """Human-readable snapshot of the directory; not meant to be loaded back."""
    out = [f"=== CUICONNECT BACKUP {time.now_utc().isoformat()} ===", ""]
    out.append(f"Total Users: {len(directory.users)}")
    out.append(f"Total Students: {len(directory.students())}")
    out.append(f"Total Societies: {len(directory.societies)}")
    out.append(f"Total Groups: {len(directory.groups)}")
    out.extend(["", "=== USERS LIST ==="])
    for u in directory.users:
        status = "Active" if u.active else "Inactive"
        out.append(f"{u.user_id} | {u.name} | {u.email} | {u.role} | {status}")
    out.extend(["", "=== SOCIETIES ==="])
    for s in directory.societies:
        out.append(
            f"{s.id} | {s.name} | Members: {len(s.member_ids)} | Events: {len(s.event_ids)}"
        )
    out.extend(["", "=== GROUPS ==="])
    for g in directory.groups:
        out.append(
            f"{g.id} | {g.name} | Members: {len(g.member_ids)} | Messages: {len(g.messages)}"
        )
    return "\n".join(out) + "\n"


def run_backup(
    directory: UserDirectoryPort,
    backup_dir: Path,
    time: TimePort,
    retention_count: int = 10,
) -> BackupOutput:
    stamp = time.now_utc().strftime("%Y%m%d_%H%M%S_%f")
    target = backup_dir / f"backup_{stamp}.txt"

    try:
        backup_dir.mkdir(parents=True, exist_ok=True)
        target.write_text(render_backup(directory, time), encoding="utf-8")

        pruned = 0
        old = sorted(backup_dir.glob("backup_*.txt"))
        if retention_count > 0:
            for f in old[:-retention_count]:
                f.unlink()
                pruned += 1
    except OSError as e:
        logger.error("Backup failed: %s", e)
        return BackupOutput(success=False, error=f"Backup failed: {e}")

    logger.info("Backup written to %s", target)
    return BackupOutput(path=target, pruned=pruned, success=True)


class UserStore:
    """Binds a table and header so callers can just save/load a directory."""

    def __init__(self, table: UserTablePort, header: str = DEFAULT_HEADER):
        self.table = table
        self.header = header

    def save(self, directory: UserDirectoryPort) -> SaveOutput:
        return run_save(directory, self.table, self.header)

    def load(self, directory: UserDirectoryPort) -> LoadOutput:
        return run_load(directory, self.table)
