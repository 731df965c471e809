"""Parsing of EFA date/time fragments and duration arithmetic."""

import logging
import math
from collections.abc import Iterable, Mapping
from datetime import datetime
from typing import Any

logger = logging.getLogger(__name__)

_FRAGMENT_FIELDS = ("year", "month", "day", "hour", "minute")


def _fragment_part(fragment: Mapping[str, Any], field: str) -> str | None:
    value = fragment.get(field)
    if isinstance(value, bool) or not isinstance(value, (str, int)):
        return None
    text = str(value).strip()
    try:
        int(text)
    except ValueError:
        return None
    return text


def parse_efa_datetime(fragment: Any) -> datetime | None:
    """Parse an EFA ``dateTime`` object into a naive local datetime.

    All five fields must be present and numeric, otherwise the whole fragment
    is treated as unavailable. No timezone conversion is applied.

    Args:
        fragment: Mapping with ``year``, ``month``, ``day``, ``hour`` and ``minute``.

    Returns:
        The parsed datetime, or None.
    """
    if not isinstance(fragment, Mapping):
        return None

    parts = [_fragment_part(fragment, field) for field in _FRAGMENT_FIELDS]
    if any(part is None for part in parts):
        return None

    year, month, day, hour, minute = parts
    composed = f"{year}-{month.zfill(2)}-{day.zfill(2)}T{hour.zfill(2)}:{minute.zfill(2)}:00"
    try:
        return datetime.fromisoformat(composed)
    except ValueError:
        logger.warning(f"Invalid date created from EFA dateTime {dict(fragment)}: {composed}")
        return None


def format_clock(instant: datetime | None) -> str | None:
    """Format a datetime as ``HH:MM``."""
    if instant is None:
        return None
    return instant.strftime("%H:%M")


def duration_minutes(start: datetime | None, end: datetime | None) -> int | None:
    """Whole minutes from ``start`` to ``end``, rounded half up.

    Returns None if either instant is missing or ``end`` lies before ``start``.
    """
    if start is None or end is None:
        return None

    seconds = (end - start).total_seconds()
    if seconds < 0:
        logger.warning(f"End {end.isoformat()} is before start {start.isoformat()}")
        return None
    return math.floor(seconds / 60 + 0.5)


def total_itinerary_minutes(legs: Iterable[tuple[datetime | None, datetime | None]]) -> int:
    """Accumulate travel and waiting time over consecutive legs.

    Each leg contributes its travel time when it can be calculated. Alongside
    it, the wait since the previous leg's arrival is added when that wait is
    known and strictly positive; overlapping legs add nothing.

    Args:
        legs: ``(departure, arrival)`` pairs in itinerary order.

    Returns:
        Total minutes, 0 when nothing could be calculated.
    """
    total = 0
    previous_arrival: datetime | None = None

    for departure, arrival in legs:
        travel = duration_minutes(departure, arrival)
        wait = duration_minutes(previous_arrival, departure) if previous_arrival else None

        if travel is not None:
            total += travel
            if wait is not None and wait > 0:
                total += wait

        previous_arrival = arrival

    return total
