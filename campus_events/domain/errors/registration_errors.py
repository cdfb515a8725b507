"""Registration admission and lifecycle errors.

Admission rejections are reported in a fixed order (first failing rule wins):

    1. EventNotOpenError        event status is not upcoming
    2. DeadlinePassedError      today is after the registration deadline
    3. AlreadyRegisteredError   caller already holds a non-cancelled registration
    4. EventFullError           confirmed registrations reached max_capacity

``AlreadyRegisteredError`` is benign: the caller is already in, and the error
carries the id of the registration that satisfies the request.

Usage:
    match await handler.handle(command):
        case Failure(error=AlreadyRegisteredError(registration_id=existing)):
            ...  # "you're already registered"
        case Failure(error=EventFullError()):
            ...
"""

from dataclasses import dataclass

from campus_events.core.enums import ErrorCode
from campus_events.core.errors import DomainError


@dataclass(frozen=True, slots=True, kw_only=True)
class AdmissionError(DomainError):
    """Base for the four admission rejections.

    Attributes:
        event_id: Event the admission attempt targeted.
    """

    event_id: str

    @property
    def is_benign(self) -> bool:
        """Whether the rejection means the caller already got what they asked for."""
        return False


@dataclass(frozen=True, slots=True, kw_only=True)
class EventNotOpenError(AdmissionError):
    """Event status does not accept registrations.

    Attributes:
        event_status: Status the event was in.
    """

    code: ErrorCode = ErrorCode.EVENT_NOT_OPEN
    message: str = "Event is not open for registration"
    event_status: str


@dataclass(frozen=True, slots=True, kw_only=True)
class DeadlinePassedError(AdmissionError):
    """Registration deadline is in the past.

    Attributes:
        registration_deadline: ISO date of the deadline.
    """

    code: ErrorCode = ErrorCode.REGISTRATION_DEADLINE_PASSED
    message: str = "Registration deadline has passed"
    registration_deadline: str


@dataclass(frozen=True, slots=True, kw_only=True)
class AlreadyRegisteredError(AdmissionError):
    """Caller already holds a non-cancelled registration for the event.

    Attributes:
        registration_id: Id of the existing registration.
    """

    code: ErrorCode = ErrorCode.REGISTRATION_ALREADY_EXISTS
    message: str = "You are already registered for this event"
    registration_id: str | None = None

    @property
    def is_benign(self) -> bool:
        return True


@dataclass(frozen=True, slots=True, kw_only=True)
class EventFullError(AdmissionError):
    """Confirmed registrations already reached the event's capacity.

    Attributes:
        max_capacity: Capacity of the event.
        confirmed_count: Confirmed registrations at decision time.
    """

    code: ErrorCode = ErrorCode.EVENT_FULL
    message: str = "Event is full"
    max_capacity: int
    confirmed_count: int


@dataclass(frozen=True, slots=True, kw_only=True)
class IllegalTransitionError(DomainError):
    """Requested registration status change is not in the transition table.

    Attributes:
        from_status: Current status.
        to_status: Requested status.
    """

    code: ErrorCode = ErrorCode.REGISTRATION_TRANSITION_ILLEGAL
    message: str = "Registration status change is not permitted"
    from_status: str
    to_status: str
