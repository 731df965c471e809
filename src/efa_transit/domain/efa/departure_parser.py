"""Parser for EFA departure monitor responses (``XML_DM_REQUEST``)."""

import logging
from collections.abc import Mapping
from typing import Any

from efa_transit.domain.efa.constants import (
    UNKNOWN_DEPARTURE_FIELD,
    UNKNOWN_LINE,
    UNKNOWN_SERVICE_TYPE,
)
from efa_transit.domain.efa.shape import as_list, get_mapping
from efa_transit.domain.efa.temporal import (
    duration_minutes,
    format_clock,
    parse_efa_datetime,
)
from efa_transit.domain.models.departure import Departure

logger = logging.getLogger(__name__)


class DepartureParser:
    """Parses EFA departure list entries into Departure objects."""

    @staticmethod
    def parse_departures(payload: Mapping[str, Any]) -> list[Departure]:
        """Parse the departure list of a departure monitor response.

        Args:
            payload: Decoded departure monitor response.

        Returns:
            List of Departure objects in provider order.
        """
        return [
            DepartureParser._parse_departure(dep)
            for dep in as_list(payload.get("departureList"))
            if isinstance(dep, Mapping)
        ]

    @staticmethod
    def _parse_departure(dep: Mapping[str, Any]) -> Departure:
        serving_line = get_mapping(dep, "servingLine")
        scheduled = parse_efa_datetime(dep.get("dateTime"))
        real = parse_efa_datetime(dep.get("realDateTime"))
        scheduled_time = format_clock(scheduled)
        real_time = format_clock(real)

        delay = DepartureParser._parse_delay(dep.get("delay"))
        if delay == 0 and scheduled and real:
            calculated = duration_minutes(scheduled, real)
            if calculated is not None and calculated > 0:
                delay = calculated

        return Departure(
            line=str(serving_line.get("number") or UNKNOWN_LINE),
            direction=str(
                serving_line.get("direction")
                or serving_line.get("directionFrom")
                or UNKNOWN_DEPARTURE_FIELD
            ),
            platform=str(
                serving_line.get("platformName")
                or dep.get("platformName")
                or serving_line.get("platform")
                or UNKNOWN_DEPARTURE_FIELD
            ),
            time=scheduled_time or UNKNOWN_DEPARTURE_FIELD,
            real_time=real_time if real_time and real_time != scheduled_time else None,
            delay_minutes=delay,
            service_type=str(serving_line.get("name") or UNKNOWN_SERVICE_TYPE),
        )

    @staticmethod
    def _parse_delay(value: Any) -> int:
        """Provider delay in minutes. Missing, malformed or negative figures count as 0."""
        if value is None or isinstance(value, bool):
            return 0
        try:
            delay = int(str(value).strip())
        except ValueError:
            logger.debug(f"Ignoring non-numeric delay {value!r}")
            return 0
        return max(delay, 0)
