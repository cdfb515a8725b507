"""Domain entities."""

from campus_events.domain.entities.event import Event
from campus_events.domain.entities.registration import Registration

__all__ = ["Event", "Registration"]
