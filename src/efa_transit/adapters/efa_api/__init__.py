"""EFA API adapter for the South Tyrol journey planner."""

from efa_transit.adapters.efa_api.http_client import EfaHttpClient, is_stop_id

__all__ = ["EfaHttpClient", "is_stop_id"]
