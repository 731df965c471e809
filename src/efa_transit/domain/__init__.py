"""Domain layer - core models, errors and ports."""

from efa_transit.domain.exceptions import (
    AmbiguousLocationError,
    InvalidInputError,
    NotFoundError,
    TransitQueryError,
    UpstreamUnavailableError,
)
from efa_transit.domain.models import (
    Departure,
    GeoPoint,
    Itinerary,
    Segment,
    SegmentKind,
    Station,
)
from efa_transit.domain.ports import TransitProvider

__all__ = [
    "AmbiguousLocationError",
    "Departure",
    "GeoPoint",
    "InvalidInputError",
    "Itinerary",
    "NotFoundError",
    "Segment",
    "SegmentKind",
    "Station",
    "TransitProvider",
    "TransitQueryError",
    "UpstreamUnavailableError",
]
