"""Aggregate view over the registration ledger.

Answers the two derived questions every display surface asks:

- ``registration_count(event_id)``: confirmed registrations for the event
- ``is_registered(event_id, user_email)``: a non-cancelled registration exists

Answers are computed from the ledger and memoized in the cache for a short
TTL. Handlers that mutate the ledger call ``invalidate`` before returning, so
the mutating instance reads its own writes; other instances see the change
once their cached entry expires (or immediately with a shared Redis cache).

The admission flow never reads from here. It reads the ledger directly inside
its exclusive section.

Cache failures are logged and treated as misses.
"""

from uuid import UUID

from campus_events.core.errors import StoreUnavailableError
from campus_events.core.result import Failure, Result, Success
from campus_events.domain.protocols import (
    CacheKeysProtocol,
    CacheProtocol,
    LoggerProtocol,
    RegistrationRepository,
)

_TRUE = "1"
_FALSE = "0"


class AggregateView:
    """Cached registration aggregates.

    Example:
        >>> view = AggregateView(registration_repo, cache, keys, logger, ttl_seconds=5)
        >>> await view.registration_count(event_id)
        Success(value=12)
    """

    def __init__(
        self,
        registration_repo: RegistrationRepository,
        cache: CacheProtocol,
        cache_keys: CacheKeysProtocol,
        logger: LoggerProtocol,
        ttl_seconds: float,
    ) -> None:
        """Initialize the view.

        Args:
            registration_repo: Ledger to compute aggregates from.
            cache: Memoization cache.
            cache_keys: Key builder.
            logger: Structured logger.
            ttl_seconds: Cache lifetime of an answer (0 disables caching).
        """
        self._registration_repo = registration_repo
        self._cache = cache
        self._keys = cache_keys
        self._logger = logger
        self._ttl = ttl_seconds

    async def registration_count(
        self, event_id: UUID
    ) -> Result[int, StoreUnavailableError]:
        """Confirmed registrations for an event."""
        counts = await self.registration_counts([event_id])
        match counts:
            case Success(value=by_event):
                return Success(value=by_event[event_id])
            case Failure(error=error):
                return Failure(error=error)

    async def registration_counts(
        self, event_ids: list[UUID]
    ) -> Result[dict[UUID, int], StoreUnavailableError]:
        """Confirmed registrations for several events (one ledger query for misses)."""
        counts: dict[UUID, int] = {}
        missing: list[UUID] = []
        for event_id in event_ids:
            cached = await self._cached(self._keys.registration_count(event_id))
            if cached is None:
                missing.append(event_id)
            else:
                counts[event_id] = int(cached)

        if missing:
            fresh = await self._registration_repo.count_confirmed_many(missing)
            if isinstance(fresh, Failure):
                return fresh
            for event_id, count in fresh.value.items():
                counts[event_id] = count
                await self._store(self._keys.registration_count(event_id), str(count))

        return Success(value=counts)

    async def is_registered(
        self, event_id: UUID, user_email: str
    ) -> Result[bool, StoreUnavailableError]:
        """Whether the user holds a non-cancelled registration for the event."""
        registered = await self.registered_event_ids(user_email, [event_id])
        match registered:
            case Success(value=event_ids):
                return Success(value=event_id in event_ids)
            case Failure(error=error):
                return Failure(error=error)

    async def registered_event_ids(
        self, user_email: str, event_ids: list[UUID]
    ) -> Result[set[UUID], StoreUnavailableError]:
        """Subset of ``event_ids`` the user holds a non-cancelled registration for."""
        registered: set[UUID] = set()
        missing: list[UUID] = []
        for event_id in event_ids:
            cached = await self._cached(self._keys.membership(event_id, user_email))
            if cached is None:
                missing.append(event_id)
            elif cached == _TRUE:
                registered.add(event_id)

        if missing:
            fresh = await self._registration_repo.active_event_ids(user_email, missing)
            if isinstance(fresh, Failure):
                return fresh
            for event_id in missing:
                member = event_id in fresh.value
                if member:
                    registered.add(event_id)
                await self._store(
                    self._keys.membership(event_id, user_email),
                    _TRUE if member else _FALSE,
                )

        return Success(value=registered)

    async def invalidate(self, event_id: UUID, user_email: str) -> None:
        """Drop the cached answers a ledger mutation for (event, user) can change."""
        for key in (
            self._keys.registration_count(event_id),
            self._keys.membership(event_id, user_email),
        ):
            result = await self._cache.delete(key)
            if isinstance(result, Failure):
                self._logger.warning(
                    "aggregate_cache_invalidate_failed",
                    key=key,
                    error_code=result.error.code.value,
                )

    async def _cached(self, key: str) -> str | None:
        if self._ttl <= 0:
            return None
        result = await self._cache.get(key)
        match result:
            case Success(value=value):
                return value
            case Failure(error=error):
                self._logger.warning(
                    "aggregate_cache_read_failed", key=key, error_code=error.code.value
                )
                return None

    async def _store(self, key: str, value: str) -> None:
        if self._ttl <= 0:
            return
        result = await self._cache.set(key, value, ttl=self._ttl)
        if isinstance(result, Failure):
            self._logger.warning(
                "aggregate_cache_write_failed", key=key, error_code=result.error.code.value
            )
