"""In-process query cache."""

from __future__ import annotations

import logging
import time

from efa_transit.domain.contracts.query_cache import QueryCache

logger = logging.getLogger(__name__)


class MemoryQueryCache(QueryCache):
    """In-memory cache of serialised query results with per-entry expiry.

    Operations never await, so concurrent tasks on one event loop see each
    ``get``/``set`` as atomic.
    """

    def __init__(self) -> None:
        """Initialize the cache."""
        self._entries: dict[str, tuple[float, str]] = {}

    def is_ready(self) -> bool:
        return True

    async def get(self, key: str) -> str | None:
        entry = self._entries.get(key)
        if entry is None:
            return None

        expires_at, value = entry
        if time.monotonic() >= expires_at:
            self._entries.pop(key, None)
            return None
        return value

    async def set(self, key: str, value: str, ttl_seconds: int) -> None:
        now = time.monotonic()
        self._evict_expired(now)
        self._entries[key] = (now + ttl_seconds, value)

    def _evict_expired(self, now: float) -> None:
        """Drop every expired entry so keys never read again do not accumulate."""
        expired = [key for key, (expires_at, _) in self._entries.items() if now >= expires_at]
        for key in expired:
            del self._entries[key]
        if expired:
            logger.debug(f"Evicted {len(expired)} expired cache entries")

    def __len__(self) -> int:
        return len(self._entries)
