"""Infrastructure dependency factories.

Application-scoped singletons for core infrastructure services:
- Database (PostgreSQL / SQLite)
- Cache (in-memory / Redis)
- Admission locks (in-process)
- Logging (structlog console)

Plus the request-scoped database session.
"""

from functools import lru_cache
from typing import TYPE_CHECKING, AsyncGenerator

from sqlalchemy.ext.asyncio import AsyncSession

from campus_events.core.config import settings
from campus_events.infrastructure.persistence.database import Database

if TYPE_CHECKING:
    from campus_events.domain.protocols import (
        AdmissionLockProtocol,
        CacheKeysProtocol,
        CacheProtocol,
        LoggerProtocol,
    )


# ============================================================================
# Application-Scoped Dependencies (Singletons)
# ============================================================================


@lru_cache()
def get_database() -> Database:
    """Get database singleton (app-scoped).

    Returns:
        Database instance with connection pool.
    """
    return Database(database_url=settings.database_url, echo=settings.db_echo)


@lru_cache()
def get_cache() -> "CacheProtocol":
    """Get aggregate cache singleton (app-scoped).

    Adapter selection by CACHE_BACKEND:
        - 'memory': InMemoryCacheAdapter (single instance)
        - 'redis': RedisAdapter (shared across instances)

    Returns:
        Cache client implementing CacheProtocol.
    """
    if settings.cache_backend == "redis":
        from redis.asyncio import ConnectionPool, Redis

        from campus_events.infrastructure.cache import RedisAdapter

        pool = ConnectionPool.from_url(
            settings.redis_url,
            max_connections=50,
            decode_responses=False,
            socket_connect_timeout=5,
            socket_timeout=5,
        )
        return RedisAdapter(redis_client=Redis(connection_pool=pool))

    from campus_events.infrastructure.cache import InMemoryCacheAdapter

    return InMemoryCacheAdapter()


@lru_cache()
def get_cache_keys() -> "CacheKeysProtocol":
    """Get cache key builder singleton (app-scoped)."""
    from campus_events.infrastructure.cache import CacheKeys

    return CacheKeys(prefix=settings.cache_key_prefix)


@lru_cache()
def get_admission_locks() -> "AdmissionLockProtocol":
    """Get per-event admission lock registry (app-scoped).

    One registry per process; every request handled by this process shares it.
    """
    from campus_events.infrastructure.concurrency import InProcessAdmissionLocks

    return InProcessAdmissionLocks()


@lru_cache()
def get_logger() -> "LoggerProtocol":
    """Return the application-scoped logger singleton.

    - development: human-readable console output
    - testing/ci/production: JSON lines
    """
    from campus_events.infrastructure.logging import ConsoleAdapter

    return ConsoleAdapter(use_json=not settings.is_development, level=settings.log_level)


# ============================================================================
# Request-Scoped Dependencies
# ============================================================================


async def get_db_session() -> AsyncGenerator[AsyncSession, None]:
    """Get database session (request-scoped).

    Commits on success, rolls back on exception, always closes.

    Yields:
        Database session for request duration.
    """
    db = get_database()
    async with db.get_session() as session:
        yield session
