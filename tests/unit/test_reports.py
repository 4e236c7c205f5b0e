from datetime import date

from cuiconnect.components.reports import (
    build_society_report,
    build_system_report,
    format_society_report,
    format_system_report,
    run_society_reports,
    run_system_report,
)
from cuiconnect.domain.entities import Event, Group, Society


def _event(day: date) -> Event:
    return Event(title="E", description="", date=day, venue="", organizer="")


def test_system_report_counts(directory, make_student, society_admin, society):
    active = make_student(id="S1", email="s1@demo.com")
    inactive = make_student(id="S2", email="s2@demo.com")
    inactive.active = False
    for u in (active, inactive, society_admin):
        directory.add_user(u)
    directory.add_society(society)
    directory.add_group(Group(name="G"))
    directory.add_event(_event(date(2026, 1, 20)))

    report = build_system_report(directory)

    assert report.total_users == 3
    assert report.students == 2
    assert report.societies == 1
    assert report.groups == 1
    assert report.events == 1
    assert report.active_users == 2
    assert report.inactive_users == 1
    assert "Inactive Users: 1" in format_system_report(report)


def test_society_report_counts_upcoming(directory, society):
    past, future = _event(date(2026, 1, 1)), _event(date(2026, 1, 12))
    for e in (past, future):
        directory.add_event(e)
        society.event_ids.append(e.id)
    society.member_ids.append("STU_1")
    society.pending_ids.append("STU_2")

    report = build_society_report(society, directory, date(2026, 1, 12))

    assert report.members == 1
    assert report.pending_requests == 1
    assert report.events == 2
    assert report.upcoming_events == 1
    assert format_society_report(report).startswith("=== CS Society ===")


def test_run_system_report_requires_system_admin(directory, policy, system_admin, society_admin):
    assert run_system_report(system_admin, directory, policy).success
    assert run_system_report(society_admin, directory, policy).error == "Access denied"


def test_run_society_reports_only_owned(directory, policy, society_admin, society, make_student):
    foreign = Society(name="Other", description="", category="", admin_id="ADMIN_X")
    directory.add_society(society)
    directory.add_society(foreign)

    result = run_society_reports(society_admin, directory, policy, date(2026, 1, 12))

    assert result.success
    assert [r.name for r in result.reports] == ["CS Society"]

    denied = run_society_reports(make_student(), directory, policy, date(2026, 1, 12))
    assert denied.error == "Access denied"
