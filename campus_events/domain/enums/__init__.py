"""Domain enums.

Usage:
    from campus_events.domain.enums import EventStatus, RegistrationStatus
"""

from campus_events.domain.enums.event_category import EventCategory
from campus_events.domain.enums.event_sort import EventSort
from campus_events.domain.enums.event_status import EventStatus
from campus_events.domain.enums.registration_status import RegistrationStatus
from campus_events.domain.enums.user_role import UserRole

__all__ = [
    "EventCategory",
    "EventSort",
    "EventStatus",
    "RegistrationStatus",
    "UserRole",
]
