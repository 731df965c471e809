"""Normalization of the provider's object-or-array fields.

EFA serialises a collection with a single member as a bare object, an empty
collection as a missing key (or sometimes an empty string), and everything
else as an array. Every collection read from a payload goes through
``as_list`` so the parsers never special-case the shape.
"""

from collections.abc import Mapping
from typing import Any


def as_list(value: Any) -> list[Any]:
    """Return ``value`` as an ordered list.

    ``None`` and scalars give an empty list, a mapping gives a one-element
    list, and a list is returned with its items in their original order.
    """
    if isinstance(value, list):
        return list(value)
    if isinstance(value, Mapping):
        return [value]
    return []


def get_mapping(payload: Any, key: str) -> Mapping[str, Any]:
    """Return ``payload[key]`` when it is a mapping, otherwise an empty one."""
    if not isinstance(payload, Mapping):
        return {}
    value = payload.get(key)
    return value if isinstance(value, Mapping) else {}


def stop_finder_points(payload: Mapping[str, Any]) -> list[Any]:
    """Extract the point list of a stop-finder response.

    ``stopFinder.points`` comes as a list of points, as ``{"point": ...}``
    wrapping one or several points, or as a bare point.
    """
    points = get_mapping(payload, "stopFinder").get("points")
    if isinstance(points, Mapping) and "point" in points:
        return as_list(points["point"])
    return as_list(points)
