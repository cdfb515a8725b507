"""Cache keys protocol for key generation.

Infrastructure adapter: campus_events/infrastructure/cache/cache_keys.py
"""

from typing import Protocol
from uuid import UUID


class CacheKeysProtocol(Protocol):
    """Protocol for generating aggregate cache keys."""

    @property
    def prefix(self) -> str:
        """Cache key prefix (typically "campus")."""
        ...

    def registration_count(self, event_id: UUID) -> str:
        """Key for an event's confirmed-registration count."""
        ...

    def membership(self, event_id: UUID, user_email: str) -> str:
        """Key for whether a user holds an active registration for an event."""
        ...
