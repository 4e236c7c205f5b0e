"""
Reports component - system-wide and per-society summaries.
"""

from .component import (
    build_society_report,
    build_system_report,
    format_society_report,
    format_system_report,
    run_society_reports,
    run_system_report,
)
from .models import SocietyReport, SocietyReportsOutput, SystemReport, SystemReportOutput
from .ports import ReportDirectoryPort

__all__ = [
    # Entry points
    "build_society_report",
    "build_system_report",
    "format_society_report",
    "format_system_report",
    "run_society_reports",
    "run_system_report",
    # Output models
    "SocietyReport",
    "SocietyReportsOutput",
    "SystemReport",
    "SystemReportOutput",
    # Ports
    "ReportDirectoryPort",
]
