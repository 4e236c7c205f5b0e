"""
Reports component output models.
"""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class SystemReport:
    """Head counts across the whole directory."""

    total_users: int
    students: int
    societies: int
    events: int
    groups: int
    active_users: int
    inactive_users: int


@dataclass(frozen=True)
class SocietyReport:
    """Activity summary for one society."""

    society_id: str
    name: str
    members: int
    pending_requests: int
    events: int
    upcoming_events: int
    announcements: int


@dataclass
class SocietyReportsOutput:
    reports: list[SocietyReport] = field(default_factory=list)
    success: bool = False
    error: str | None = None


@dataclass
class SystemReportOutput:
    report: SystemReport | None = None
    success: bool = False
    error: str | None = None
