"""Protocol for query result caching."""

from typing import Protocol


class QueryCache(Protocol):
    """Protocol for a key-value store of serialised query results.

    Implementations never raise from ``get`` or ``set``: an unavailable store
    behaves like an empty one.
    """

    def is_ready(self) -> bool:
        """Whether the store currently accepts operations."""
        ...

    async def get(self, key: str) -> str | None:
        """Get a cached value.

        Args:
            key: Cache key.

        Returns:
            The stored value, or None on a miss or when the store is unavailable.
        """
        ...

    async def set(self, key: str, value: str, ttl_seconds: int) -> None:
        """Store a value, replacing any previous one.

        Args:
            key: Cache key.
            value: Serialised result.
            ttl_seconds: Seconds until the entry expires.
        """
        ...
