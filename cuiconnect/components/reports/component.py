"""
Reports component - read-only summaries for administrators.

Nothing here mutates the directory.
"""

from __future__ import annotations

import logging
from datetime import date

from cuiconnect.domain.entities import Society, User
from cuiconnect.domain.policy import PolicyEngine

from .models import SocietyReport, SocietyReportsOutput, SystemReport, SystemReportOutput
from .ports import ReportDirectoryPort

logger = logging.getLogger(__name__)


def build_system_report(directory: ReportDirectoryPort) -> SystemReport:
    total = len(directory.users)
    active = directory.active_user_count()
    return SystemReport(
        total_users=total,
        students=len(directory.students()),
        societies=len(directory.societies),
        events=len(directory.events),
        groups=len(directory.groups),
        active_users=active,
        inactive_users=total - active,
    )


def build_society_report(
    society: Society, directory: ReportDirectoryPort, today: date
) -> SocietyReport:
    upcoming = 0
    for event_id in society.event_ids:
        event = directory.get_event(event_id)
        if event is not None and event.date >= today:
            upcoming += 1

    return SocietyReport(
        society_id=society.id,
        name=society.name,
        members=len(society.member_ids),
        pending_requests=len(society.pending_ids),
        events=len(society.event_ids),
        upcoming_events=upcoming,
        announcements=len(society.announcements),
    )


def run_system_report(
    actor: User, directory: ReportDirectoryPort, policy: PolicyEngine
) -> SystemReportOutput:
    if not policy.check_permission(actor, "system:report"):
        return SystemReportOutput(success=False, error="Access denied")
    return SystemReportOutput(report=build_system_report(directory), success=True)


def run_society_reports(
    actor: User, directory: ReportDirectoryPort, policy: PolicyEngine, today: date
) -> SocietyReportsOutput:
    """Reports for every society the actor owns, in directory order."""
    owned = [s for s in directory.societies if policy.can_manage_society(actor, s)]
    if not owned and not policy.check_permission(actor, "society:manage"):
        return SocietyReportsOutput(success=False, error="Access denied")

    reports = [build_society_report(s, directory, today) for s in owned]
    logger.debug("Built %d society reports for %s", len(reports), actor.name)
    return SocietyReportsOutput(reports=reports, success=True)


def format_system_report(report: SystemReport) -> str:
    return "\n".join(
        [
            "=== SYSTEM REPORT ===",
            f"Total Users: {report.total_users}",
            f"Students: {report.students}",
            f"Societies: {report.societies}",
            f"Events: {report.events}",
            f"Groups: {report.groups}",
            f"Active Users: {report.active_users}",
            f"Inactive Users: {report.inactive_users}",
        ]
    )


def format_society_report(report: SocietyReport) -> str:
    return "\n".join(
        [
            f"=== {report.name} ===",
            f"Members: {report.members}",
            f"Pending Requests: {report.pending_requests}",
            f"Events: {report.events}",
            f"Upcoming Events: {report.upcoming_events}",
            f"Announcements: {report.announcements}",
        ]
    )
