"""Extraction of coordinates from EFA point references."""

import logging
import math
from collections.abc import Mapping
from typing import Any

from efa_transit.domain.models.geo_point import GeoPoint

logger = logging.getLogger(__name__)


def parse_coords(packed: Any) -> GeoPoint | None:
    """Parse a ``"<lon>,<lat>"`` string into a GeoPoint.

    Note the axis order: EFA sends longitude first, GeoPoint holds latitude
    first.
    """
    if not isinstance(packed, str):
        return None

    parts = packed.split(",")
    if len(parts) != 2:
        logger.warning(f"Could not parse coordinates: {packed!r}")
        return None

    try:
        longitude = float(parts[0])
        latitude = float(parts[1])
    except ValueError:
        logger.warning(f"Could not parse coordinates: {packed!r}")
        return None

    if not (math.isfinite(latitude) and math.isfinite(longitude)):
        return None
    if not (-90.0 <= latitude <= 90.0 and -180.0 <= longitude <= 180.0):
        logger.warning(f"Coordinates out of range: {packed!r}")
        return None

    return GeoPoint(latitude=latitude, longitude=longitude)


def extract_coords(point_ref: Any) -> GeoPoint | None:
    """Extract the coordinates of a point ``ref`` object."""
    if not isinstance(point_ref, Mapping):
        return None
    return parse_coords(point_ref.get("coords"))
