"""Infrastructure layer error types.

Adapters catch driver exceptions and return these as ``Failure`` values.
Database failures reach callers as ``StoreUnavailableError`` (see
``store_unavailable``); cache failures as ``CacheError``, which callers
treat as a cache miss.
"""

from dataclasses import dataclass

from sqlalchemy.exc import InterfaceError, OperationalError
from sqlalchemy.exc import TimeoutError as PoolTimeoutError

from campus_events.core.errors import DomainError, StoreUnavailableError
from campus_events.infrastructure.enums import InfrastructureErrorCode


@dataclass(frozen=True, slots=True, kw_only=True)
class InfrastructureError(DomainError):
    """Base infrastructure error.

    Attributes:
        infrastructure_code: Original infrastructure error code.
    """

    infrastructure_code: InfrastructureErrorCode | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class CacheError(InfrastructureError):
    """Cache backend failure."""

    pass


def store_unavailable(operation: str, error: Exception) -> StoreUnavailableError:
    """Map a database exception to StoreUnavailableError.

    Args:
        operation: Repository operation that failed.
        error: Exception raised by SQLAlchemy or the driver.

    Returns:
        StoreUnavailableError with the failure classified in ``details``.
    """
    if isinstance(error, (PoolTimeoutError, TimeoutError)):
        infrastructure_code = InfrastructureErrorCode.DATABASE_TIMEOUT
    elif isinstance(error, (OperationalError, InterfaceError, OSError)):
        infrastructure_code = InfrastructureErrorCode.DATABASE_CONNECTION_FAILED
    else:
        infrastructure_code = InfrastructureErrorCode.DATABASE_ERROR

    return StoreUnavailableError(
        operation=operation,
        details={
            "infrastructure_code": infrastructure_code.value,
            "error_type": type(error).__name__,
        },
    )
