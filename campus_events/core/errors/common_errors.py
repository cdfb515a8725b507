"""Common error classes used across all layers.

Error Types:
- ValidationError: Input validation failures
- NotFoundError: Resource not found
- ConflictError: State conflicts (event still has registrations, ...)
- AuthenticationError: No identity supplied
- AuthorizationError: Actor lacks the role for the action
- StoreUnavailableError: Backing store did not respond or commit

Usage:
    from campus_events.core.errors import ValidationError
    from campus_events.core.enums import ErrorCode
    from campus_events.core.result import Failure

    return Failure(error=ValidationError(
        code=ErrorCode.INVALID_EVENT_CAPACITY,
        message="max_capacity must be a positive integer",
        field="max_capacity",
    ))
"""

from dataclasses import dataclass

from campus_events.core.enums import ErrorCode
from campus_events.core.errors.domain_error import DomainError


@dataclass(frozen=True, slots=True, kw_only=True)
class ValidationError(DomainError):
    """Input validation failure.

    Attributes:
        field: Field name that failed validation.
    """

    field: str | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class NotFoundError(DomainError):
    """Resource not found.

    Attributes:
        resource_type: Type of resource (Event, Registration).
        resource_id: ID of the resource that was not found.
    """

    resource_type: str
    resource_id: str


@dataclass(frozen=True, slots=True, kw_only=True)
class ConflictError(DomainError):
    """Resource state conflict.

    Attributes:
        resource_type: Type of resource in conflict.
        conflicting_field: Field that has the conflict.
    """

    resource_type: str
    conflicting_field: str | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class AuthenticationError(DomainError):
    """No authenticated identity was supplied."""

    pass


@dataclass(frozen=True, slots=True, kw_only=True)
class AuthorizationError(DomainError):
    """Authorization failure (actor lacks the required role).

    Attributes:
        required_permission: Role or ownership that was required.
    """

    required_permission: str | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class StoreUnavailableError(DomainError):
    """Backing store did not respond or did not commit.

    The only error kind for which a caller-initiated retry is appropriate.
    Nothing inside the service retries it.

    Attributes:
        operation: Store operation that failed (e.g. "registration_admit").
    """

    code: ErrorCode = ErrorCode.STORE_UNAVAILABLE
    message: str = "Registration store is temporarily unavailable"
    operation: str | None = None

    @property
    def is_retryable(self) -> bool:
        """Store failures may clear on their own."""
        return True
