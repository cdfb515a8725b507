"""Infrastructure errors."""

from campus_events.infrastructure.errors.infrastructure_error import (
    CacheError,
    InfrastructureError,
    store_unavailable,
)

__all__ = ["CacheError", "InfrastructureError", "store_unavailable"]
