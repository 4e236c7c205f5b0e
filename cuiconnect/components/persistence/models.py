from dataclasses import dataclass, field
from pathlib import Path


@dataclass
class SaveOutput:
    saved: int = 0
    success: bool = False
    error: str | None = None


@dataclass
class SkippedLine:
    line_no: int
    reason: str


@dataclass
class LoadOutput:
    loaded: int = 0
    skipped: list[SkippedLine] = field(default_factory=list)
    # False when the table was missing/empty and the directory was left alone
    replaced: bool = False
    success: bool = False
    error: str | None = None


@dataclass
class BackupOutput:
    path: Path | None = None
    pruned: int = 0
    success: bool = False
    error: str | None = None
