"""Base domain error class for railway-oriented programming.

DomainError is the base class for every error the service reports. Errors
flow through the system as data inside ``Failure`` results and are never
raised.

Usage:
    from campus_events.core.errors import DomainError

    @dataclass(frozen=True, slots=True, kw_only=True)
    class MyError(DomainError):
        pass  # Inherits code, message, details
"""

from dataclasses import dataclass

from campus_events.core.enums import ErrorCode


@dataclass(frozen=True, slots=True, kw_only=True)
class DomainError:
    """Base domain error (does NOT inherit from Exception).

    Attributes:
        code: Machine-readable error code (enum).
        message: Human-readable error message.
        details: Optional context for debugging and rendering.
    """

    code: ErrorCode
    message: str
    details: dict[str, str] | None = None

    @property
    def is_retryable(self) -> bool:
        """Whether a caller-initiated retry may succeed without other changes."""
        return False

    def __str__(self) -> str:
        """String representation of error."""
        return f"{self.code.value}: {self.message}"
