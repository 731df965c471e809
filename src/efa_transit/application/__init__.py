"""Application layer - query use cases."""

from efa_transit.application.services import TransitQueryService

__all__ = ["TransitQueryService"]
