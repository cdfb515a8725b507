"""Event validation error messages.

Used as the ``message`` of ``ValidationError`` / ``ConflictError`` results
produced by the catalog.
"""


class EventError:
    """Event error message constants.

    These are NOT exceptions. They are message values carried inside
    ``Failure`` results.
    """

    # -------------------------------------------------------------------------
    # Validation Errors
    # -------------------------------------------------------------------------

    TITLE_REQUIRED = "Event title is required"
    TITLE_TOO_LONG = "Event title must be at most 200 characters"
    INVALID_CAPACITY = "max_capacity must be a positive integer"
    DEADLINE_AFTER_DATE = "registration_deadline must be on or before the event date"
    END_BEFORE_START = "end_time must not be before start_time"
    UNKNOWN_FIELD = "Field cannot be updated"

    # -------------------------------------------------------------------------
    # State Errors
    # -------------------------------------------------------------------------

    NOT_FOUND = "Event not found"
    HAS_ACTIVE_REGISTRATIONS = (
        "Event has active registrations; cancel them or mark the event cancelled"
    )
    CAPACITY_BELOW_CONFIRMED = (
        "max_capacity cannot be lowered below the number of confirmed registrations"
    )
