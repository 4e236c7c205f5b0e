"""
Notifications component - inbox fan-out.

Delivery is fire-and-forget: `deliver` never raises, so a failed
notification can never abort the operation that triggered it.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from cuiconnect.domain.entities import Notification, User

from .models import MarkReadOutput, NotifyOutput
from .ports import TimePort

logger = logging.getLogger(__name__)


def run_notify(user: User, content: str, time: TimePort) -> NotifyOutput:
    notification = Notification(content=content, created_at=time.now_utc())
    user.notifications.append(notification)
    logger.info("Notification sent to %s: %s", user.name, content)
    return NotifyOutput(notification=notification, success=True)


def deliver(user: User, content: str, time: TimePort) -> bool:
    """Best-effort run_notify; failures are logged and reported as False."""
    try:
        return run_notify(user, content, time).success
    except Exception:
        logger.exception("Could not deliver notification to %s", user.user_id)
        return False


def fan_out(users: Iterable[User], content: str, time: TimePort) -> int:
    """Deliver the same content to every user. Returns the delivered count."""
    return sum(1 for u in users if deliver(u, content, time))


def run_mark_read(user: User, notification_id: str) -> MarkReadOutput:
    for n in user.notifications:
        if n.id == notification_id:
            n.read = True
            return MarkReadOutput(marked=1, success=True)
    # Unknown ids are a silent no-op
    return MarkReadOutput(marked=0, success=True)


def run_mark_all_read(user: User) -> MarkReadOutput:
    marked = 0
    for n in user.notifications:
        if not n.read:
            n.read = True
            marked += 1
    if marked:
        logger.info("%s marked %d notifications as read", user.name, marked)
    return MarkReadOutput(marked=marked, success=True)


class Notifier:
    """Clock-bound fan-out, handed to components that need to notify."""

    def __init__(self, time: TimePort):
        self.time = time

    def notify(self, user: User, content: str) -> bool:
        return deliver(user, content, self.time)

    def notify_all(self, users: Iterable[User], content: str) -> int:
        return fan_out(users, content, self.time)
