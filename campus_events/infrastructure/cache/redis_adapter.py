"""Redis adapter implementing CacheProtocol.

Shared cache for multi-instance deployments. Redis exceptions are mapped to
CacheError results; callers treat them as misses.
"""

from redis.asyncio import Redis
from redis.exceptions import RedisError

from campus_events.core.enums import ErrorCode
from campus_events.core.result import Failure, Result, Success
from campus_events.infrastructure.enums import InfrastructureErrorCode
from campus_events.infrastructure.errors import CacheError


class RedisAdapter:
    """Redis implementation of CacheProtocol.

    Note: Does NOT inherit from CacheProtocol (uses structural typing).

    Attributes:
        _redis: Async Redis client instance.
    """

    def __init__(self, redis_client: Redis) -> None:
        """Initialize Redis adapter.

        Args:
            redis_client: Async Redis client instance.
        """
        self._redis = redis_client

    async def get(self, key: str) -> Result[str | None, CacheError]:
        """Get value from Redis."""
        try:
            value = await self._redis.get(key)
        except RedisError as e:
            return Failure(
                error=_cache_error(
                    InfrastructureErrorCode.CACHE_GET_ERROR,
                    f"Failed to get key '{key}' from cache",
                    key,
                    e,
                )
            )

        if value is None:
            return Success(value=None)
        return Success(value=value.decode("utf-8") if isinstance(value, bytes) else value)

    async def set(
        self, key: str, value: str, ttl: float | None = None
    ) -> Result[None, CacheError]:
        """Set value in Redis (millisecond TTL precision)."""
        try:
            if ttl is not None:
                await self._redis.set(key, value, px=max(1, int(ttl * 1000)))
            else:
                await self._redis.set(key, value)
        except RedisError as e:
            return Failure(
                error=_cache_error(
                    InfrastructureErrorCode.CACHE_SET_ERROR,
                    f"Failed to set key '{key}' in cache",
                    key,
                    e,
                )
            )
        return Success(value=None)

    async def delete(self, key: str) -> Result[bool, CacheError]:
        """Delete key from Redis."""
        try:
            deleted_count = await self._redis.delete(key)
        except RedisError as e:
            return Failure(
                error=_cache_error(
                    InfrastructureErrorCode.CACHE_DELETE_ERROR,
                    f"Failed to delete key '{key}' from cache",
                    key,
                    e,
                )
            )
        return Success(value=deleted_count > 0)

    async def close(self) -> None:
        """Close the underlying connection pool."""
        await self._redis.aclose()


def _cache_error(
    infrastructure_code: InfrastructureErrorCode, message: str, key: str, error: Exception
) -> CacheError:
    return CacheError(
        code=ErrorCode.STORE_UNAVAILABLE,
        infrastructure_code=infrastructure_code,
        message=message,
        details={"key": key, "error": str(error)},
    )
