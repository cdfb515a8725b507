"""Event domain entity.

Catalog record for a campus event. Created, edited and deleted by
administrators; read by everyone.

Architecture:
    - Pure domain entity (no infrastructure dependencies)
    - Validation returns Result types (railway-oriented programming)

Usage:
    from uuid_extensions import uuid7

    event = Event(id=uuid7(), title="Robotics Workshop", date=date(2026, 11, 3))
    match event.validate():
        case Failure(error=error):
            ...
"""

from dataclasses import dataclass, field, fields
from datetime import UTC, date, datetime, time
from typing import Any
from uuid import UUID

from campus_events.core.enums import ErrorCode
from campus_events.core.errors import ValidationError
from campus_events.core.result import Failure, Result, Success
from campus_events.domain.enums import EventCategory, EventStatus
from campus_events.domain.errors import EventError

TITLE_MAX_LENGTH = 200

# Fields an administrator may change after creation.
EDITABLE_FIELDS = frozenset(
    {
        "title",
        "description",
        "date",
        "start_time",
        "end_time",
        "venue",
        "category",
        "organizer",
        "contact_email",
        "image_url",
        "max_capacity",
        "registration_deadline",
        "status",
    }
)


@dataclass
class Event:
    """Campus event.

    Attributes:
        id: Unique event identifier.
        title: Event title (required).
        date: Calendar date the event takes place.
        category: Catalog category.
        status: Lifecycle status; only UPCOMING accepts registrations.
        description: Free text.
        venue: Free text.
        organizer: Free text.
        contact_email: Free text.
        image_url: Free text.
        start_time: Optional local start time.
        end_time: Optional local end time.
        max_capacity: Positive seat limit (None = unbounded).
        registration_deadline: Last day registrations are accepted (None = no cutoff).
        created_at: Creation timestamp (immutable).
        updated_at: Last modification timestamp.
    """

    id: UUID
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
    created_at: datetime = field(default_factory=lambda: datetime.now(UTC))
    updated_at: datetime = field(default_factory=lambda: datetime.now(UTC))

    # -------------------------------------------------------------------------
    # Query Methods (Read-Only)
    # -------------------------------------------------------------------------

    def validate(self) -> Result[None, ValidationError]:
        """Check the event's field invariants.

        Returns:
            Success(None): All invariants hold.
            Failure(ValidationError): First violated invariant.
        """
        title = self.title.strip() if self.title else ""
        if not title:
            return _invalid(ErrorCode.INVALID_EVENT_TITLE, EventError.TITLE_REQUIRED, "title")
        if len(title) > TITLE_MAX_LENGTH:
            return _invalid(ErrorCode.INVALID_EVENT_TITLE, EventError.TITLE_TOO_LONG, "title")

        if self.max_capacity is not None and (
            isinstance(self.max_capacity, bool) or self.max_capacity <= 0
        ):
            return _invalid(
                ErrorCode.INVALID_EVENT_CAPACITY, EventError.INVALID_CAPACITY, "max_capacity"
            )

        if self.registration_deadline is not None and self.registration_deadline > self.date:
            return _invalid(
                ErrorCode.INVALID_REGISTRATION_DEADLINE,
                EventError.DEADLINE_AFTER_DATE,
                "registration_deadline",
            )

        if (
            self.start_time is not None
            and self.end_time is not None
            and self.end_time < self.start_time
        ):
            return _invalid(ErrorCode.INVALID_TIME_RANGE, EventError.END_BEFORE_START, "end_time")

        return Success(value=None)

    def is_open_for_registration(self) -> bool:
        """Check whether the event status accepts registrations."""
        return self.status in EventStatus.open_states()

    def is_past_deadline(self, today: date) -> bool:
        """Check whether ``today`` is strictly after the registration deadline.

        Args:
            today: Current date in the campus timezone.

        Returns:
            bool: False when no deadline is set.
        """
        return self.registration_deadline is not None and today > self.registration_deadline

    def has_seat_for(self, confirmed_count: int) -> bool:
        """Check whether one more confirmed registration fits.

        Args:
            confirmed_count: Current confirmed registrations.

        Returns:
            bool: True for unbounded events or while count < max_capacity.
        """
        return self.max_capacity is None or confirmed_count < self.max_capacity

    # -------------------------------------------------------------------------
    # Mutation Methods (Return Result)
    # -------------------------------------------------------------------------

    def apply_changes(self, changes: dict[str, Any]) -> Result[None, ValidationError]:
        """Apply a partial administrator edit.

        All-or-nothing: the entity is left untouched when any change is
        rejected or the resulting event violates an invariant.

        Args:
            changes: Field name to new value. Unknown or immutable fields
                are rejected.

        Returns:
            Success(None): Changes applied.
            Failure(ValidationError): Unknown field or invariant violation.
        """
        for name in changes:
            if name not in EDITABLE_FIELDS:
                return _invalid(ErrorCode.VALIDATION_FAILED, EventError.UNKNOWN_FIELD, name)

        snapshot = {f.name: getattr(self, f.name) for f in fields(self)}
        for name, value in changes.items():
            setattr(self, name, value)

        result = self.validate()
        if isinstance(result, Failure):
            for name, value in snapshot.items():
                setattr(self, name, value)
            return result

        self.updated_at = datetime.now(UTC)
        return Success(value=None)


def _invalid(code: ErrorCode, message: str, field_name: str) -> Failure[ValidationError]:
    return Failure(error=ValidationError(code=code, message=message, field=field_name))
