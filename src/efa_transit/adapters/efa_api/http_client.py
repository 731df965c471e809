"""HTTP client for EFA requests.

Talks to the JSON flavour of the EFA XML interface (``outputFormat=JSON``).
"""

import asyncio
import logging
import time
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

import aiohttp

from efa_transit.adapters.api_request_logger import log_api_request, log_api_response
from efa_transit.adapters.efa_api.constants import (
    DEFAULT_HEADERS,
    DEPARTURE_MONITOR_ENDPOINT,
    EFA_BASE_URL,
    STOP_FINDER_ENDPOINT,
    TRIP_ENDPOINT,
    WGS84_EPSG,
)
from efa_transit.domain.exceptions import UpstreamUnavailableError
from efa_transit.domain.ports.transit_provider import TransitProvider

logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from aiohttp import ClientResponse, ClientSession

# Provider calls must never hang indefinitely
DEFAULT_TIMEOUT_SECONDS = 8.0


class EfaHttpClient(TransitProvider):
    """HTTP client for the EFA trip, stop-finder and departure monitor endpoints."""

    def __init__(
        self,
        session: "ClientSession | None" = None,
        base_url: str = EFA_BASE_URL,
        timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS,
        language: str = "de",
        trip_count: int = 5,
        departure_limit: int = 20,
    ) -> None:
        """Initialize with optional aiohttp session.

        Args:
            session: aiohttp ClientSession shared across requests.
            base_url: EFA installation base URL.
            timeout_seconds: Total timeout per request.
            language: Response language.
            trip_count: Number of trips requested per route search.
            departure_limit: Number of departures requested per stop.
        """
        self._session = session
        self._base_url = base_url.rstrip("/")
        self._timeout = aiohttp.ClientTimeout(total=timeout_seconds)
        self._language = language
        self._trip_count = trip_count
        self._departure_limit = departure_limit

    def _common_params(self) -> dict[str, str | int]:
        return {
            "language": self._language,
            "outputFormat": "JSON",
            "coordOutputFormat": "WGS84",
            "stateless": 1,
        }

    async def fetch_trips(self, origin: str, destination: str) -> dict[str, Any]:
        """Request trip options from XML_TRIP_REQUEST2."""
        params = {
            **self._common_params(),
            "type_origin": "any",
            "name_origin": origin,
            "type_destination": "any",
            "name_destination": destination,
            "calcNumberOfTrips": self._trip_count,
            "useRealtime": 1,
        }
        return await self._get_json(TRIP_ENDPOINT, params)

    async def fetch_stops_by_name(self, query: str) -> dict[str, Any]:
        """Request stops matching a name from XML_STOPFINDER_REQUEST."""
        params = {**self._common_params(), "type_sf": "any", "name_sf": query}
        return await self._get_json(STOP_FINDER_ENDPOINT, params)

    async def fetch_stops_by_coord(
        self, latitude: float, longitude: float, radius_meters: int
    ) -> dict[str, Any]:
        """Request stops around a coordinate from XML_STOPFINDER_REQUEST.

        EFA expects ``<lon>,<lat>:<radius>:<epsg>`` as the search term.
        """
        params = {
            **self._common_params(),
            "type_sf": "coord",
            "name_sf": f"{longitude},{latitude}:{radius_meters}:{WGS84_EPSG}",
            "psOption_stopType": "stop",
        }
        return await self._get_json(STOP_FINDER_ENDPOINT, params)

    async def fetch_departures(self, station: str) -> dict[str, Any]:
        """Request the departure monitor from XML_DM_REQUEST.

        Numeric identifiers are sent as stop ids, anything else as a free-text name.
        """
        params = {
            **self._common_params(),
            "type_dm": "stop" if is_stop_id(station) else "any",
            "name_dm": station,
            "mode": "direct",
            "useRealtime": 1,
            "limit": self._departure_limit,
        }
        return await self._get_json(DEPARTURE_MONITOR_ENDPOINT, params)

    async def _get_json(self, endpoint: str, params: Mapping[str, Any]) -> dict[str, Any]:
        if not self._session:
            raise RuntimeError("EFA client requires an aiohttp session")

        url = f"{self._base_url}/{endpoint}"
        log_api_request("GET", url, params)
        started = time.monotonic()

        try:
            async with self._session.get(
                url, params=dict(params), headers=DEFAULT_HEADERS, timeout=self._timeout
            ) as response:
                log_api_response(url, response.status, time.monotonic() - started)
                return await self._handle_response(response, url)
        except asyncio.TimeoutError as e:
            logger.error(f"EFA request to {url} timed out after {self._timeout.total}s")
            raise UpstreamUnavailableError("Zeitüberschreitung beim Fahrplandienst.") from e
        except aiohttp.ClientError as e:
            logger.error(f"Error requesting {url}: {e}")
            raise UpstreamUnavailableError(
                "Fehler bei der Kommunikation mit dem Fahrplandienst."
            ) from e

    async def _handle_response(self, response: "ClientResponse", url: str) -> dict[str, Any]:
        """Decode a response, rejecting non-200 statuses and non-object bodies."""
        if response.status != 200:
            response_text = await response.text()
            logger.error(f"EFA returned status {response.status} for {url}: {response_text[:500]}")
            raise UpstreamUnavailableError(
                f"Fahrplandienst antwortete mit Status {response.status}.",
                provider_error=response_text[:500] or None,
            )

        try:
            # EFA does not always label its JSON with the right content type
            data = await response.json(content_type=None)
        except ValueError as e:
            logger.error(f"EFA returned undecodable JSON for {url}: {e}")
            raise UpstreamUnavailableError("Ungültige Antwort vom Fahrplandienst.") from e

        if not isinstance(data, dict):
            logger.error(f"EFA returned {type(data).__name__} instead of an object for {url}")
            raise UpstreamUnavailableError("Ungültige Antwort vom Fahrplandienst.")
        return data


def is_stop_id(station: str) -> bool:
    """Whether ``station`` looks like a numeric EFA stop id."""
    return station.strip().isdigit()
