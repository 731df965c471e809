"""Builders for EFA payload fragments used across tests."""

from typing import Any


def efa_datetime(hour: int, minute: int, day: int = 7) -> dict[str, str]:
    """EFA dateTime fragment on 2024-05-<day>."""
    return {
        "year": "2024",
        "month": "5",
        "day": str(day),
        "hour": str(hour),
        "minute": str(minute),
    }


def leg_point(name: str, hour: int, minute: int, coords: str | None = None) -> dict[str, Any]:
    """A leg point with a name, a time and optionally coordinates."""
    point: dict[str, Any] = {"name": name, "dateTime": efa_datetime(hour, minute)}
    if coords:
        point["ref"] = {"coords": coords}
    return point
