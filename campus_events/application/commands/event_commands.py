"""Event catalog commands (CQRS write operations).

Commands are immutable data containers; handlers hold the logic and return
Result types. Every catalog command requires an administrator actor.
"""

from dataclasses import dataclass, field
from datetime import date, time
from typing import Any
from uuid import UUID

from campus_events.domain.enums import EventCategory, EventStatus
from campus_events.domain.value_objects import UserIdentity


@dataclass(frozen=True, kw_only=True)
class CreateEvent:
    """Create a catalog event.

    Example:
        >>> command = CreateEvent(
        ...     actor=admin,
        ...     title="Intro to Rust",
        ...     date=date(2026, 11, 20),
        ...     category=EventCategory.WORKSHOP,
        ...     max_capacity=40,
        ...     registration_deadline=date(2026, 11, 18),
        ... )
        >>> result = await handler.handle(command)
    """

    actor: UserIdentity
    title: str
    date: date
    category: EventCategory = EventCategory.ACADEMIC
    status: EventStatus = EventStatus.UPCOMING
    description: str | None = None
    venue: str | None = None
    organizer: str | None = None
    contact_email: str | None = None
    image_url: str | None = None
    start_time: time | None = None
    end_time: time | None = None
    max_capacity: int | None = None
    registration_deadline: date | None = None


@dataclass(frozen=True, kw_only=True)
class UpdateEvent:
    """Apply a partial edit to an event.

    Attributes:
        actor: Caller (must be an administrator).
        event_id: Event to edit.
        changes: Field name to new value. Only the fields present change;
            an explicit None clears an optional field.
    """

    actor: UserIdentity
    event_id: UUID
    changes: dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True, kw_only=True)
class DeleteEvent:
    """Delete an event that has no active registrations."""

    actor: UserIdentity
    event_id: UUID
