"""
Community component - societies, study groups, events and announcements.
"""

from .component import (
    run_create_department_event,
    run_create_group,
    run_create_society,
    run_create_society_event,
    run_post_announcement,
    run_post_department_announcement,
    run_post_group_message,
    upcoming_events,
)
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

__all__ = [
    # Entry points
    "run_create_department_event",
    "run_create_group",
    "run_create_society",
    "run_create_society_event",
    "run_post_announcement",
    "run_post_department_announcement",
    "run_post_group_message",
    "upcoming_events",
    # Input models
    "CreateDepartmentEventInput",
    "CreateGroupInput",
    "CreateSocietyEventInput",
    "CreateSocietyInput",
    "DepartmentAnnouncementInput",
    "PostAnnouncementInput",
    "PostMessageInput",
    # Output models
    "AnnouncementOutput",
    "EventOutput",
    "GroupOutput",
    "MessageOutput",
    "SocietyOutput",
    # Ports
    "CommunityDirectoryPort",
    "FanOutPort",
    "TimePort",
]
