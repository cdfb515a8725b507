"""Cache adapters."""

from campus_events.infrastructure.cache.cache_keys import CacheKeys
from campus_events.infrastructure.cache.memory_adapter import InMemoryCacheAdapter
from campus_events.infrastructure.cache.redis_adapter import RedisAdapter

__all__ = ["CacheKeys", "InMemoryCacheAdapter", "RedisAdapter"]
