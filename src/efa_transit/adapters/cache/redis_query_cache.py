"""Redis-backed query cache."""

from __future__ import annotations

import asyncio
import logging
import time
from typing import TYPE_CHECKING

import redis.asyncio as redis
from redis.exceptions import ConnectionError as RedisConnectionError
from redis.exceptions import RedisError
from redis.exceptions import TimeoutError as RedisTimeoutError

from efa_transit.domain.contracts.query_cache import QueryCache

if TYPE_CHECKING:
    from redis.asyncio import Redis

logger = logging.getLogger(__name__)

# Cache calls are bounded so a slow store never delays a query noticeably
DEFAULT_OPERATION_TIMEOUT_SECONDS = 1.0
# Minimum gap between readiness checks while the server is unreachable
DEFAULT_RECONNECT_INTERVAL_SECONDS = 30.0

_UNAVAILABLE_ERRORS = (RedisConnectionError, RedisTimeoutError, OSError, asyncio.TimeoutError)


class RedisQueryCache(QueryCache):
    """Query cache on a shared Redis connection pool.

    The store is optional infrastructure: every failure is logged and
    reported to the caller as a miss (``get``) or ignored (``set``). While
    the server is unreachable the cache is not ready and operations are
    skipped; readiness is re-checked with a ping at most once per
    reconnect interval, so the cache recovers when the server comes back.
    """

    def __init__(
        self,
        client: Redis,
        operation_timeout_seconds: float = DEFAULT_OPERATION_TIMEOUT_SECONDS,
        reconnect_interval_seconds: float = DEFAULT_RECONNECT_INTERVAL_SECONDS,
    ) -> None:
        """Initialize with a Redis client.

        Args:
            client: redis.asyncio client created with ``decode_responses=True``.
            operation_timeout_seconds: Upper bound for each cache call.
            reconnect_interval_seconds: Minimum seconds between readiness checks
                while the server is unreachable.
        """
        self._client = client
        self._timeout = operation_timeout_seconds
        self._reconnect_interval = reconnect_interval_seconds
        self._ready = False
        self._next_check_at = 0.0

    @classmethod
    def from_url(
        cls,
        url: str,
        operation_timeout_seconds: float = DEFAULT_OPERATION_TIMEOUT_SECONDS,
        reconnect_interval_seconds: float = DEFAULT_RECONNECT_INTERVAL_SECONDS,
    ) -> RedisQueryCache:
        """Create a cache for the Redis server at ``url``."""
        client = redis.from_url(
            url,
            decode_responses=True,
            socket_timeout=operation_timeout_seconds,
            socket_connect_timeout=operation_timeout_seconds,
        )
        return cls(client, operation_timeout_seconds, reconnect_interval_seconds)

    async def connect(self) -> bool:
        """Check the connection and mark the cache ready.

        Returns:
            Whether the server answered.
        """
        try:
            await asyncio.wait_for(self._client.ping(), timeout=self._timeout)
        except (RedisError, OSError, asyncio.TimeoutError) as e:
            logger.error(f"Redis connect error: {e}")
            self._mark_unavailable()
            return False

        if not self._ready:
            logger.info("Redis client connected successfully.")
        self._ready = True
        return True

    def is_ready(self) -> bool:
        return self._ready

    async def _ensure_ready(self) -> bool:
        """Return readiness, pinging the server if a re-check is due."""
        if self._ready:
            return True
        if time.monotonic() < self._next_check_at:
            return False
        return await self.connect()

    def _mark_unavailable(self) -> None:
        self._ready = False
        self._next_check_at = time.monotonic() + self._reconnect_interval

    async def get(self, key: str) -> str | None:
        if not await self._ensure_ready():
            logger.warning(f"Redis client not ready, skipping cache GET for key: {key}")
            return None

        try:
            value = await asyncio.wait_for(self._client.get(key), timeout=self._timeout)
        except _UNAVAILABLE_ERRORS as e:
            logger.error(f"Redis GET error for key {key}, marking cache unavailable: {e}")
            self._mark_unavailable()
            return None
        except RedisError as e:
            logger.error(f"Redis GET error for key {key}: {e}")
            return None
        return value if isinstance(value, str) else None

    async def set(self, key: str, value: str, ttl_seconds: int) -> None:
        if not await self._ensure_ready():
            logger.warning(f"Redis client not ready, skipping cache SET for key: {key}")
            return

        try:
            await asyncio.wait_for(
                self._client.set(key, value, ex=ttl_seconds), timeout=self._timeout
            )
        except _UNAVAILABLE_ERRORS as e:
            logger.error(f"Redis SET error for key {key}, marking cache unavailable: {e}")
            self._mark_unavailable()
        except RedisError as e:
            logger.error(f"Redis SET error for key {key}: {e}")

    async def close(self) -> None:
        """Release the connection pool."""
        self._ready = False
        self._next_check_at = float("inf")
        await self._client.aclose()
