"""
Persistence component - durable user table.

Saves every user as one codec line under a comment header (full rewrite)
and reloads them into a directory at startup. Also writes human-readable
backup snapshots.
"""

from .component import (
    DEFAULT_HEADER,
    UserStore,
    render_backup,
    run_backup,
    run_load,
    run_save,
)
from .models import BackupOutput, LoadOutput, SaveOutput, SkippedLine
from .ports import TimePort, UserDirectoryPort, UserTablePort

__all__ = [
    # Entry points
    "run_backup",
    "run_load",
    "run_save",
    "render_backup",
    "UserStore",
    # Output models
    "BackupOutput",
    "LoadOutput",
    "SaveOutput",
    "SkippedLine",
    # Ports
    "TimePort",
    "UserDirectoryPort",
    "UserTablePort",
    # Constants
    "DEFAULT_HEADER",
]
