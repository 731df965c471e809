"""Adapters layer - external system integrations."""

from efa_transit.adapters.cache import MemoryQueryCache, RedisQueryCache
from efa_transit.adapters.config import AppConfig
from efa_transit.adapters.efa_api import EfaHttpClient

__all__ = [
    "AppConfig",
    "EfaHttpClient",
    "MemoryQueryCache",
    "RedisQueryCache",
]
