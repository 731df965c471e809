"""Domain models for EFA transit queries."""

from efa_transit.domain.models.cache_ttls import CacheTtls
from efa_transit.domain.models.departure import Departure
from efa_transit.domain.models.error_details import ErrorDetails
from efa_transit.domain.models.geo_point import GeoPoint
from efa_transit.domain.models.itinerary import Itinerary
from efa_transit.domain.models.segment import Segment, SegmentKind
from efa_transit.domain.models.station import Station

__all__ = [
    "CacheTtls",
    "Departure",
    "ErrorDetails",
    "GeoPoint",
    "Itinerary",
    "Segment",
    "SegmentKind",
    "Station",
]
