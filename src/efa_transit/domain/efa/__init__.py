"""Pure normalization of EFA payloads into domain models.

Nothing in this package performs I/O; payloads come from a ``TransitProvider``.
"""

from efa_transit.domain.efa.departure_parser import DepartureParser
from efa_transit.domain.efa.result_classifier import (
    Classification,
    OutcomeKind,
    classify_departure_response,
    classify_stop_finder_response,
    classify_trip_response,
)
from efa_transit.domain.efa.stop_parser import StopParser
from efa_transit.domain.efa.trip_parser import TripParser

__all__ = [
    "Classification",
    "DepartureParser",
    "OutcomeKind",
    "StopParser",
    "TripParser",
    "classify_departure_response",
    "classify_stop_finder_response",
    "classify_trip_response",
]
