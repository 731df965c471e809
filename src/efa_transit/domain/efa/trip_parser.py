"""Parser for EFA trip responses (``XML_TRIP_REQUEST2``)."""

import logging
import math
from collections.abc import Mapping
from datetime import datetime
from typing import Any

from efa_transit.domain.efa.constants import (
    TRANSIT_LABEL,
    UNKNOWN_POINT_NAME,
    WALK_LABEL,
)
from efa_transit.domain.efa.geo import extract_coords
from efa_transit.domain.efa.shape import as_list, get_mapping
from efa_transit.domain.efa.temporal import (
    duration_minutes,
    parse_efa_datetime,
    total_itinerary_minutes,
)
from efa_transit.domain.models.itinerary import Itinerary
from efa_transit.domain.models.segment import Segment, SegmentKind

logger = logging.getLogger(__name__)


class TripParser:
    """Parses EFA trip responses into Itinerary objects."""

    @staticmethod
    def parse_trips(payload: Mapping[str, Any]) -> list[Itinerary]:
        """Parse all trips of a trip response.

        Trips whose legs yield no segments are dropped.

        Args:
            payload: Decoded trip response.

        Returns:
            List of itineraries in provider order.
        """
        itineraries = []
        for trip in as_list(payload.get("trips")):
            if not isinstance(trip, Mapping):
                continue
            itinerary = TripParser._parse_trip(trip)
            if itinerary:
                itineraries.append(itinerary)
        return itineraries

    @staticmethod
    def _parse_trip(trip: Mapping[str, Any]) -> Itinerary | None:
        segments: list[Segment] = []
        timings: list[tuple[datetime | None, datetime | None]] = []

        for leg in as_list(trip.get("legs")):
            if not isinstance(leg, Mapping):
                continue
            segment = TripParser._parse_leg(leg)
            segments.append(segment)
            timings.append((segment.departure, segment.arrival))

        if not segments:
            return None

        duration: int | str | None = trip.get("duration") or None
        calculated = total_itinerary_minutes(timings)
        if calculated > 0:
            duration = calculated
        elif duration is not None and not isinstance(duration, (int, str)):
            duration = str(duration)

        return Itinerary(
            segments=segments,
            duration=duration,
            interchanges=TripParser._parse_interchanges(trip.get("interchanges")),
        )

    @staticmethod
    def _parse_leg(leg: Mapping[str, Any]) -> Segment:
        points = [p for p in as_list(leg.get("points")) if isinstance(p, Mapping)]
        origin_point: Mapping[str, Any] = points[0] if points else {}
        destination_point: Mapping[str, Any] = points[-1] if points else {}

        departure = parse_efa_datetime(origin_point.get("dateTime"))
        arrival = parse_efa_datetime(destination_point.get("dateTime"))
        calculated = duration_minutes(departure, arrival)

        mode = get_mapping(leg, "mode")
        kind, label = TripParser._segment_kind(leg, mode)
        if kind is SegmentKind.WALK:
            walk_duration = TripParser._parse_minutes(leg.get("duration"))
            segment_duration = walk_duration if walk_duration is not None else calculated
        else:
            segment_duration = calculated

        return Segment(
            kind=kind,
            label=label,
            origin=str(origin_point.get("name") or UNKNOWN_POINT_NAME),
            destination=str(destination_point.get("name") or UNKNOWN_POINT_NAME),
            origin_coords=extract_coords(origin_point.get("ref")),
            destination_coords=extract_coords(destination_point.get("ref")),
            departure=departure,
            arrival=arrival,
            duration_minutes=segment_duration,
            line=str(mode.get("number") or mode.get("destination") or ""),
            direction=str(mode["direction"]) if mode.get("direction") else None,
            operator=TripParser._extract_operator(leg, mode),
        )

    @staticmethod
    def _segment_kind(leg: Mapping[str, Any], mode: Mapping[str, Any]) -> tuple[SegmentKind, str]:
        """Determine segment kind and label. Walk indicators take precedence."""
        if leg.get("type") == "WALK" or mode.get("type") == "FOOTPATH":
            return SegmentKind.WALK, WALK_LABEL
        if mode.get("name"):
            return SegmentKind.TRANSIT, str(mode["name"])
        return SegmentKind.TRANSIT, TRANSIT_LABEL

    @staticmethod
    def _extract_operator(leg: Mapping[str, Any], mode: Mapping[str, Any]) -> str | None:
        """Operator name: serving line operator, then mode operator, then line name."""
        serving_line = get_mapping(leg, "servingLine")
        for operator in (get_mapping(serving_line, "operator"), get_mapping(mode, "operator")):
            if operator.get("name"):
                return str(operator["name"])
        if serving_line.get("name"):
            return str(serving_line["name"])
        return None

    @staticmethod
    def _parse_minutes(value: Any) -> int | float | None:
        """Parse a provider minute figure, keeping sub-minute precision."""
        if value is None or isinstance(value, bool):
            return None
        try:
            minutes = float(value)
        except (TypeError, ValueError):
            return None
        if not math.isfinite(minutes) or minutes < 0:
            return None
        return int(minutes) if minutes.is_integer() else minutes

    @staticmethod
    def _parse_interchanges(value: Any) -> int:
        try:
            return max(int(value), 0)
        except (TypeError, ValueError):
            return 0
