"""Tests for wiring of cache and query service."""

from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from efa_transit.adapters.cache import MemoryQueryCache, RedisQueryCache
from efa_transit.adapters.config import AppConfig
from efa_transit.adapters.efa_api import EfaHttpClient
from efa_transit.application import TransitQueryService
from efa_transit.bootstrap import create_query_cache, create_query_service


@pytest.mark.asyncio
async def test_memory_backend_creates_memory_cache() -> None:
    config = AppConfig(_env_file=None, cache_backend="memory")

    cache = await create_query_cache(config)

    assert isinstance(cache, MemoryQueryCache)


@pytest.mark.asyncio
async def test_unreachable_redis_yields_not_ready_cache() -> None:
    """Given a Redis server that does not answer, when creating the cache, then it is not ready."""
    config = AppConfig(_env_file=None, cache_backend="redis", redis_url="redis://localhost:1")
    client = MagicMock()
    client.ping = AsyncMock(side_effect=OSError("connection refused"))

    with patch("efa_transit.adapters.cache.redis_query_cache.redis.from_url", return_value=client):
        cache = await create_query_cache(config)

    assert isinstance(cache, RedisQueryCache)
    assert cache.is_ready() is False


def test_create_query_service_uses_config_ttls() -> None:
    config = AppConfig(_env_file=None, cache_ttl_departures_seconds=15)

    service = create_query_service(config, MagicMock(), MemoryQueryCache())

    assert isinstance(service, TransitQueryService)
    assert isinstance(service._provider, EfaHttpClient)
    assert service._ttls.departures == 15
