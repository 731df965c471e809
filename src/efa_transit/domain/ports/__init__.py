"""Ports (interfaces) for the ports-and-adapters architecture."""

from efa_transit.domain.ports.transit_provider import TransitProvider

__all__ = ["TransitProvider"]
