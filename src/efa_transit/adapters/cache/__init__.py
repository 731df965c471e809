"""Query cache adapters."""

from efa_transit.adapters.cache.memory_query_cache import MemoryQueryCache
from efa_transit.adapters.cache.redis_query_cache import RedisQueryCache

__all__ = ["MemoryQueryCache", "RedisQueryCache"]
