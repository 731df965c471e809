"""Contracts (protocols) shared across layers."""

from efa_transit.domain.contracts.query_cache import QueryCache

__all__ = ["QueryCache"]
