"""Wiring of configuration, provider client, cache and query service."""

import logging
import sys
from typing import TYPE_CHECKING

from efa_transit.adapters.cache import MemoryQueryCache, RedisQueryCache
from efa_transit.adapters.config import AppConfig
from efa_transit.adapters.efa_api import EfaHttpClient
from efa_transit.application.services import TransitQueryService

if TYPE_CHECKING:
    from aiohttp import ClientSession

    from efa_transit.domain.contracts import QueryCache

logger = logging.getLogger(__name__)


def configure_logging(config: AppConfig) -> None:
    """Configure root logging once for an entry point."""
    logging.basicConfig(
        level=config.log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stderr,
    )


async def create_query_cache(config: AppConfig) -> "QueryCache":
    """Create the configured cache.

    A Redis server that cannot be reached leaves the cache in its not-ready
    state; queries then go straight to the provider until a later readiness
    check succeeds.
    """
    if config.cache_backend == "memory":
        logger.info("Using in-memory query cache")
        return MemoryQueryCache()

    cache = RedisQueryCache.from_url(
        config.redis_url, config.cache_timeout_seconds, config.cache_reconnect_interval_seconds
    )
    await cache.connect()
    return cache


def create_query_service(
    config: AppConfig, session: "ClientSession", cache: "QueryCache"
) -> TransitQueryService:
    """Create a query service on a shared HTTP session and cache."""
    provider = EfaHttpClient(
        session=session,
        base_url=config.efa_base_url,
        timeout_seconds=config.efa_api_timeout,
        language=config.efa_language,
        trip_count=config.efa_trip_count,
        departure_limit=config.efa_departure_limit,
    )
    return TransitQueryService(provider, cache, config.cache_ttls())
