"""Domain-level error codes (machine-readable).

Error codes follow ENTITY_ACTION_REASON naming convention.
Used with Result types for railway-oriented programming.

Categories:
- Validation errors (INVALID_*, VALIDATION_*)
- Resource errors (*_NOT_FOUND)
- Conflict errors (*_CONFLICT, *_HAS_*)
- Authentication / authorization errors
- Admission rejections (EVENT_NOT_OPEN, REGISTRATION_DEADLINE_PASSED, ...)
- Backing store errors (STORE_*)
"""

from enum import Enum


class ErrorCode(Enum):
    """Domain-level error codes (machine-readable).

    Error codes follow ENTITY_ACTION_REASON naming convention.
    """

    # Validation errors
    VALIDATION_FAILED = "validation_failed"
    INVALID_EVENT_TITLE = "invalid_event_title"
    INVALID_EVENT_CAPACITY = "invalid_event_capacity"
    INVALID_REGISTRATION_DEADLINE = "invalid_registration_deadline"
    INVALID_TIME_RANGE = "invalid_time_range"
    INVALID_REGISTRATION_STATUS = "invalid_registration_status"

    # Resource errors
    EVENT_NOT_FOUND = "event_not_found"
    REGISTRATION_NOT_FOUND = "registration_not_found"

    # Conflict errors
    EVENT_HAS_ACTIVE_REGISTRATIONS = "event_has_active_registrations"
    EVENT_CAPACITY_BELOW_CONFIRMED = "event_capacity_below_confirmed"
    REGISTRATION_ADMISSION_CONFLICT = "registration_admission_conflict"

    # Authentication errors
    AUTHENTICATION_REQUIRED = "authentication_required"

    # Authorization errors
    PERMISSION_DENIED = "permission_denied"
    RESOURCE_NOT_OWNED = "resource_not_owned"

    # Registration lifecycle
    REGISTRATION_TRANSITION_ILLEGAL = "registration_transition_illegal"

    # Admission rejections (checked in this order)
    EVENT_NOT_OPEN = "event_not_open"
    REGISTRATION_DEADLINE_PASSED = "registration_deadline_passed"
    REGISTRATION_ALREADY_EXISTS = "registration_already_exists"
    EVENT_FULL = "event_full"

    # Backing store errors
    STORE_UNAVAILABLE = "store_unavailable"
