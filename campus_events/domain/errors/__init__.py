"""Domain errors.

Usage:
    from campus_events.domain.errors import EventFullError, IllegalTransitionError
"""

from campus_events.domain.errors.event_error import EventError
from campus_events.domain.errors.registration_errors import (
    AdmissionError,
    AlreadyRegisteredError,
    DeadlinePassedError,
    EventFullError,
    EventNotOpenError,
    IllegalTransitionError,
)

__all__ = [
    "AdmissionError",
    "AlreadyRegisteredError",
    "DeadlinePassedError",
    "EventError",
    "EventFullError",
    "EventNotOpenError",
    "IllegalTransitionError",
]
