"""Admission decision rule.

Pure function: given an event, the date, and the ledger state for that event,
decide whether a new confirmed registration may be created. It performs no
I/O; callers are responsible for reading its inputs and performing the write
atomically with respect to other admissions for the same event.

Rules, in order (first failure wins):
    1. Event status is upcoming.
    2. ``today`` is not after the registration deadline.
    3. Caller holds no non-cancelled registration for the event.
    4. Confirmed count is below max_capacity.
"""

from datetime import date
from uuid import UUID

from campus_events.core.result import Failure, Result, Success
from campus_events.domain.entities import Event
from campus_events.domain.errors import (
    AdmissionError,
    AlreadyRegisteredError,
    DeadlinePassedError,
    EventFullError,
    EventNotOpenError,
)


def decide_admission(
    event: Event,
    *,
    today: date,
    confirmed_count: int,
    existing_registration_id: UUID | None,
) -> Result[None, AdmissionError]:
    """Decide whether a registration for ``event`` may be admitted.

    Args:
        event: Target event.
        today: Current date in the campus timezone.
        confirmed_count: Confirmed registrations for the event.
        existing_registration_id: Caller's non-cancelled registration, if any.

    Returns:
        Success(None): Admission allowed.
        Failure(AdmissionError): First failing rule.
    """
    event_id = str(event.id)

    if not event.is_open_for_registration():
        return Failure(
            error=EventNotOpenError(event_id=event_id, event_status=event.status.value)
        )

    if event.is_past_deadline(today):
        assert event.registration_deadline is not None
        return Failure(
            error=DeadlinePassedError(
                event_id=event_id,
                registration_deadline=event.registration_deadline.isoformat(),
            )
        )

    if existing_registration_id is not None:
        return Failure(
            error=AlreadyRegisteredError(
                event_id=event_id,
                registration_id=str(existing_registration_id),
            )
        )

    if not event.has_seat_for(confirmed_count):
        assert event.max_capacity is not None
        return Failure(
            error=EventFullError(
                event_id=event_id,
                max_capacity=event.max_capacity,
                confirmed_count=confirmed_count,
            )
        )

    return Success(value=None)
