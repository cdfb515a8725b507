"""In-memory adapter implementing CacheProtocol.

Process-local TTL cache for single-instance deployments, local development
and tests. For several instances behind a load balancer use RedisAdapter so
invalidations reach every instance.
"""

import time

from campus_events.core.result import Result, Success
from campus_events.infrastructure.errors import CacheError

DEFAULT_MAX_ENTRIES = 10_000


class InMemoryCacheAdapter:
    """Dictionary-backed cache with monotonic-clock expiry.

    Expired entries are dropped on read, and swept whenever a new key would
    grow the cache past ``max_entries``. If the sweep frees nothing, the
    least recently written entry is evicted.
    """

    def __init__(self, max_entries: int = DEFAULT_MAX_ENTRIES) -> None:
        self._entries: dict[str, tuple[str, float | None]] = {}
        self._max_entries = max_entries

    async def get(self, key: str) -> Result[str | None, CacheError]:
        """Get value if present and not expired."""
        entry = self._entries.get(key)
        if entry is None:
            return Success(value=None)

        value, expires_at = entry
        if expires_at is not None and time.monotonic() >= expires_at:
            del self._entries[key]
            return Success(value=None)
        return Success(value=value)

    async def set(
        self, key: str, value: str, ttl: float | None = None
    ) -> Result[None, CacheError]:
        """Store a value with optional TTL in seconds."""
        now = time.monotonic()
        # Re-inserting moves the key to the newest position.
        self._entries.pop(key, None)
        if len(self._entries) >= self._max_entries:
            self._make_room(now)
        self._entries[key] = (value, now + ttl if ttl is not None else None)
        return Success(value=None)

    async def delete(self, key: str) -> Result[bool, CacheError]:
        """Delete a key."""
        return Success(value=self._entries.pop(key, None) is not None)

    async def close(self) -> None:
        """Drop all entries."""
        self._entries.clear()

    def __len__(self) -> int:
        return len(self._entries)

    def _make_room(self, now: float) -> None:
        expired = [
            key
            for key, (_, expires_at) in self._entries.items()
            if expires_at is not None and now >= expires_at
        ]
        for key in expired:
            del self._entries[key]

        while len(self._entries) >= self._max_entries:
            del self._entries[next(iter(self._entries))]
