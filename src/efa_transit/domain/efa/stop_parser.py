"""Parser for EFA stop-finder responses (``XML_STOPFINDER_REQUEST``)."""

import logging
import math
from collections.abc import Mapping
from typing import Any

from efa_transit.domain.efa.constants import (
    UNKNOWN_LOCALITY,
    UNKNOWN_STATION_NAME,
    UNKNOWN_STATION_TYPE,
)
from efa_transit.domain.efa.geo import extract_coords
from efa_transit.domain.efa.shape import get_mapping, stop_finder_points
from efa_transit.domain.models.station import Station

logger = logging.getLogger(__name__)


class StopParser:
    """Parses EFA stop-finder points into Station objects."""

    @staticmethod
    def parse_stations(payload: Mapping[str, Any], with_distance: bool = False) -> list[Station]:
        """Parse the points of a stop-finder response.

        Args:
            payload: Decoded stop-finder response.
            with_distance: Keep the provider's distance figure and sort by it
                (proximity searches).

        Returns:
            List of stations.
        """
        stations = [
            StopParser._parse_point(point, with_distance)
            for point in stop_finder_points(payload)
            if isinstance(point, Mapping)
        ]

        if with_distance and stations and stations[0].distance is not None:
            stations.sort(key=lambda s: s.distance if s.distance is not None else math.inf)

        return stations

    @staticmethod
    def _parse_point(point: Mapping[str, Any], with_distance: bool) -> Station:
        ref = get_mapping(point, "ref")
        name = point.get("name") or UNKNOWN_STATION_NAME
        locality = point.get("locality") or ref.get("place") or UNKNOWN_LOCALITY

        return Station(
            id=StopParser._station_id(point, ref, name, locality),
            name=str(name),
            locality=str(locality),
            coords=extract_coords(ref),
            type=str(point.get("anyType") or UNKNOWN_STATION_TYPE),
            distance=StopParser._parse_distance(ref.get("distance")) if with_distance else None,
        )

    @staticmethod
    def _station_id(
        point: Mapping[str, Any], ref: Mapping[str, Any], name: str, locality: str
    ) -> str:
        """Provider id, then the stateless token, then an id generated from name and locality."""
        station_id = ref.get("id") or point.get("stateless")
        if station_id:
            return str(station_id)
        return f"gen_{name}_{locality}"

    @staticmethod
    def _parse_distance(value: Any) -> int | float | None:
        if value is None or isinstance(value, bool):
            return None
        try:
            distance = float(value)
        except (TypeError, ValueError):
            logger.debug(f"Ignoring non-numeric distance {value!r}")
            return None
        if not math.isfinite(distance):
            return None
        return int(distance) if distance.is_integer() else distance
