"""Core errors package.

Usage:
    from campus_events.core.errors import DomainError, ValidationError
"""

from campus_events.core.errors.common_errors import (
    AuthenticationError,
    AuthorizationError,
    ConflictError,
    NotFoundError,
    StoreUnavailableError,
    ValidationError,
)
from campus_events.core.errors.domain_error import DomainError

__all__ = [
    "DomainError",
    "ValidationError",
    "NotFoundError",
    "ConflictError",
    "AuthenticationError",
    "AuthorizationError",
    "StoreUnavailableError",
]
