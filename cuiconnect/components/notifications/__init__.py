"""
Notifications component - per-user inbox delivery.

Appends unread notifications to a recipient's inbox as a side effect of
membership, announcement and RSVP operations, and marks them read.
"""

from .component import (
    Notifier,
    deliver,
    fan_out,
    run_mark_all_read,
    run_mark_read,
    run_notify,
)
from .models import MarkReadOutput, NotifyOutput
from .ports import TimePort

__all__ = [
    # Entry points
    "run_notify",
    "run_mark_read",
    "run_mark_all_read",
    # Fan-out helpers
    "Notifier",
    "deliver",
    "fan_out",
    # Output models
    "MarkReadOutput",
    "NotifyOutput",
    # Ports
    "TimePort",
]
