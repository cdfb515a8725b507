"""Domain value objects."""

from campus_events.domain.value_objects.email import Email
from campus_events.domain.value_objects.event_filter import EventFilter
from campus_events.domain.value_objects.user_identity import UserIdentity

__all__ = ["Email", "EventFilter", "UserIdentity"]
