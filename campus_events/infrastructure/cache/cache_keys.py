"""Cache key construction for aggregate values.

All keys follow the pattern: {prefix}:{resource}:{id}[:{qualifier}]

Usage:
    keys = CacheKeys(prefix=settings.cache_key_prefix)
    keys.registration_count(event_id)         # "campus:event:<id>:count"
    keys.membership(event_id, "a@campus.edu")  # "campus:event:<id>:member:a@campus.edu"
"""

from dataclasses import dataclass
from uuid import UUID


@dataclass(frozen=True)
class CacheKeys:
    """Centralized cache key construction.

    Attributes:
        prefix: Cache key prefix (typically "campus").
    """

    prefix: str

    def registration_count(self, event_id: UUID) -> str:
        """Confirmed-registration count for an event."""
        return f"{self.prefix}:event:{event_id}:count"

    def membership(self, event_id: UUID, user_email: str) -> str:
        """Whether a user holds an active registration for an event."""
        return f"{self.prefix}:event:{event_id}:member:{user_email}"
