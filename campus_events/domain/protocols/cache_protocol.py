"""Cache protocol for domain layer.

Architecture:
- Protocol-based (structural typing)
- All operations return Result types
- Fail-open: callers fall back to the source of truth on cache errors
"""

from typing import Protocol

from campus_events.core.errors import DomainError
from campus_events.core.result import Result


class CacheProtocol(Protocol):
    """Key/value cache with per-entry TTL."""

    async def get(self, key: str) -> Result[str | None, DomainError]:
        """Get value from cache.

        Returns:
            Success(str) if present and not expired, Success(None) otherwise.
        """
        ...

    async def set(
        self, key: str, value: str, ttl: float | None = None
    ) -> Result[None, DomainError]:
        """Store a value.

        Args:
            key: Cache key.
            value: Value to cache.
            ttl: Seconds until expiry (None = no expiration).
        """
        ...

    async def delete(self, key: str) -> Result[bool, DomainError]:
        """Delete a key.

        Returns:
            Success(True) if the key existed.
        """
        ...

    async def close(self) -> None:
        """Release connections held by the cache client."""
        ...
