"""
Community component - societies, groups, events and announcements.

Society admins create societies and run them: scheduling events and posting
announcements that fan out to the current members. Department reps broadcast
to every student of their department. Students create study groups and chat
inside the groups they belong to.

Notifications are fire-and-forget; a failed delivery never fails the operation.
"""

from __future__ import annotations

import logging
from datetime import date

from cuiconnect.domain.entities import (
    Announcement,
    DepartmentRepProfile,
    Event,
    Group,
    Message,
    Society,
    SocietyAdminProfile,
    StudentProfile,
    User,
)
from cuiconnect.domain.policy import PolicyEngine

from .models import (
    AnnouncementOutput,
    CreateDepartmentEventInput,
    CreateGroupInput,
    CreateSocietyEventInput,
    CreateSocietyInput,
    DepartmentAnnouncementInput,
    EventOutput,
    GroupOutput,
    MessageOutput,
    PostAnnouncementInput,
    PostMessageInput,
    SocietyOutput,
)
from .ports import CommunityDirectoryPort, FanOutPort, TimePort

logger = logging.getLogger(__name__)


def _members(society: Society, directory: CommunityDirectoryPort) -> list[User]:
    members = []
    for member_id in society.member_ids:
        user = directory.get_user(member_id)
        if user is None:
            logger.warning("Society %s lists unknown member %s", society.name, member_id)
            continue
        members.append(user)
    return members


# --- Societies ---


def run_create_society(
    inp: CreateSocietyInput,
    directory: CommunityDirectoryPort,
    policy: PolicyEngine,
) -> SocietyOutput:
    if not policy.can_create_society(inp.actor):
        return SocietyOutput(success=False, error="Access denied")

    name = inp.name.strip()
    if not name:
        return SocietyOutput(success=False, error="Society name is required")
    if directory.find_society_by_name(name):
        return SocietyOutput(success=False, error="Society name already taken")

    society = Society(
        name=name,
        description=inp.description,
        category=inp.category,
        admin_id=inp.actor.user_id,
    )
    directory.add_society(society)

    if isinstance(inp.actor.profile, SocietyAdminProfile):
        inp.actor.profile.managed_society_ids.append(society.id)

    logger.info("%s created society %s", inp.actor.name, society.name)
    return SocietyOutput(society=society, success=True)


def run_post_announcement(
    inp: PostAnnouncementInput,
    directory: CommunityDirectoryPort,
    policy: PolicyEngine,
    notifier: FanOutPort,
    time: TimePort,
    event_id: str | None = None,
) -> AnnouncementOutput:
    society = inp.society
    if not policy.can_post_announcement(inp.actor, society):
        return AnnouncementOutput(success=False, error="Access denied")

    if not inp.title.strip():
        return AnnouncementOutput(success=False, error="Title is required")

    announcement = Announcement(
        title=inp.title,
        content=inp.content,
        created_by=inp.actor.name,
        kind=inp.kind,
        event_id=event_id,
        published=True,
        created_at=time.now_utc(),
    )
    society.announcements.append(announcement)

    notified = notifier.notify_all(
        _members(society, directory),
        f"New announcement from {society.name}: {announcement.title}",
    )
    logger.info(
        "%s posted %s announcement to %s (%d notified)",
        inp.actor.name,
        announcement.kind,
        society.name,
        notified,
    )
    return AnnouncementOutput(announcement=announcement, notified=notified, success=True)


def run_create_society_event(
    inp: CreateSocietyEventInput,
    directory: CommunityDirectoryPort,
    policy: PolicyEngine,
    notifier: FanOutPort,
    time: TimePort,
) -> EventOutput:
    """
    Schedule an event for a society and announce it to the members.

    The event is registered once, both in the society's event list and in the
    directory; the accompanying EVENT announcement links back to it by id.
    """
    society = inp.society
    if not (policy.can_create_event(inp.actor) and policy.can_manage_society(inp.actor, society)):
        return EventOutput(success=False, error="Access denied")

    if not inp.title.strip():
        return EventOutput(success=False, error="Title is required")

    event = Event(
        title=inp.title,
        description=inp.description,
        date=inp.date,
        venue=inp.venue,
        organizer=society.name,
    )
    society.event_ids.append(event.id)
    directory.add_event(event)

    announced = run_post_announcement(
        PostAnnouncementInput(
            actor=inp.actor,
            society=society,
            title=f"New Event: {event.title}",
            content=f"{event.description}\nDate: {event.date}\nVenue: {event.venue}",
            kind="EVENT",
        ),
        directory,
        policy,
        notifier,
        time,
        event_id=event.id,
    )
    logger.info("%s scheduled event %s on %s", society.name, event.title, event.date)
    return EventOutput(event=event, notified=announced.notified, success=True)


# --- Department ---


def _department_of(actor: User) -> str | None:
    if isinstance(actor.profile, DepartmentRepProfile):
        return actor.profile.department
    return None


def run_post_department_announcement(
    inp: DepartmentAnnouncementInput,
    directory: CommunityDirectoryPort,
    policy: PolicyEngine,
    notifier: FanOutPort,
    time: TimePort,
) -> AnnouncementOutput:
    department = _department_of(inp.actor)
    if department is None or not policy.can_broadcast_department(inp.actor):
        return AnnouncementOutput(success=False, error="Access denied")

    announcement = Announcement(
        title=inp.title,
        content=inp.content,
        created_by=inp.actor.name,
        kind="DEPARTMENT",
        published=True,
        created_at=time.now_utc(),
    )
    notified = notifier.notify_all(
        directory.students_in_department(department),
        f"New department announcement: {announcement.title}",
    )
    logger.info("%s broadcast to %s (%d notified)", inp.actor.name, department, notified)
    return AnnouncementOutput(announcement=announcement, notified=notified, success=True)


def run_create_department_event(
    inp: CreateDepartmentEventInput,
    directory: CommunityDirectoryPort,
    policy: PolicyEngine,
    notifier: FanOutPort,
) -> EventOutput:
    department = _department_of(inp.actor)
    if department is None or not policy.can_create_event(inp.actor):
        return EventOutput(success=False, error="Access denied")

    event = Event(
        title=inp.title,
        description=inp.description,
        date=inp.date,
        venue=inp.venue,
        organizer=f"{department} Department",
    )
    directory.add_event(event)

    notified = notifier.notify_all(
        directory.students_in_department(department),
        f"New department event: {event.title}",
    )
    logger.info("%s created department event %s", inp.actor.name, event.title)
    return EventOutput(event=event, notified=notified, success=True)


def upcoming_events(events: list[Event], today: date) -> list[Event]:
    """Events on or after today, soonest first."""
    return sorted((e for e in events if e.date >= today), key=lambda e: e.date)


# --- Groups ---


def run_create_group(inp: CreateGroupInput, directory: CommunityDirectoryPort) -> GroupOutput:
    creator = inp.creator
    if not isinstance(creator.profile, StudentProfile):
        return GroupOutput(success=False, error="Only students can create groups")

    name = inp.name.strip()
    if not name:
        return GroupOutput(success=False, error="Group name is required")
    existing = directory.find_group_by_name(name)
    if existing:
        return GroupOutput(group=existing, success=False, error="Group name already taken")

    group = Group(
        name=name,
        description=inp.description or "Study Group",
        category=inp.category or "Academic",
        member_ids=[creator.user_id],
    )
    directory.add_group(group)
    creator.profile.joined_group_ids.append(group.id)

    logger.info("%s created group %s", creator.name, group.name)
    return GroupOutput(group=group, success=True)


def run_post_group_message(inp: PostMessageInput, time: TimePort) -> MessageOutput:
    sender, group = inp.sender, inp.group
    if sender.user_id not in group.member_ids:
        return MessageOutput(success=False, error="Join the group to post messages")

    content = inp.content.strip()
    if not content:
        return MessageOutput(success=False, error="Message is empty")

    message = Message(
        content=content,
        sender_id=sender.user_id,
        group_id=group.id,
        created_at=time.now_utc(),
    )
    group.messages.append(message)
    logger.debug("%s posted in %s", sender.name, group.name)
    return MessageOutput(message=message, success=True)
