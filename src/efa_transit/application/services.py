"""Application services (use cases) for transit queries."""

import logging
import math
from collections.abc import Awaitable, Callable
from typing import TYPE_CHECKING, Any, TypeVar

from pydantic import TypeAdapter, ValidationError

from efa_transit.application import cache_keys
from efa_transit.domain.efa import (
    Classification,
    DepartureParser,
    OutcomeKind,
    StopParser,
    TripParser,
    classify_departure_response,
    classify_stop_finder_response,
    classify_trip_response,
)
from efa_transit.domain.exceptions import (
    AmbiguousLocationError,
    InvalidInputError,
    NotFoundError,
    UpstreamUnavailableError,
)
from efa_transit.domain.models import CacheTtls, Departure, Itinerary, Station

logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from efa_transit.domain.contracts import QueryCache
    from efa_transit.domain.ports import TransitProvider

T = TypeVar("T")

MIN_STATION_QUERY_LENGTH = 3
DEFAULT_NEARBY_RADIUS_METERS = 1000

_ITINERARIES = TypeAdapter(list[Itinerary])
_STATIONS = TypeAdapter(list[Station])
_DEPARTURES = TypeAdapter(list[Departure])


class TransitQueryService:
    """Entry point for route, stop and departure queries.

    Each call validates its input, consults the cache, and only on a miss
    fetches from the provider, classifies the response, normalizes it and
    stores the result. Cache trouble never fails a query.
    """

    def __init__(
        self,
        provider: "TransitProvider",
        cache: "QueryCache",
        ttls: CacheTtls | None = None,
    ) -> None:
        """Initialize with a provider and a cache.

        Args:
            provider: Source of raw EFA payloads.
            cache: Store for serialised results.
            ttls: Per-endpoint cache lifetimes.
        """
        self._provider = provider
        self._cache = cache
        self._ttls = ttls or CacheTtls()

    async def search_route(self, origin: str, destination: str) -> list[Itinerary]:
        """Find itineraries between two free-text locations.

        Raises:
            InvalidInputError: If either location is empty.
            AmbiguousLocationError: If the provider needs a more specific location.
            UpstreamUnavailableError: On provider or network failure.
        """
        origin = (origin or "").strip()
        destination = (destination or "").strip()
        if not origin or not destination:
            raise InvalidInputError("Start- und Zielort benötigt.")

        async def fetch() -> list[Itinerary]:
            payload = await self._provider.fetch_trips(origin, destination)
            context = f"route {origin} -> {destination}"
            self._raise_for_outcome(classify_trip_response(payload), context)
            itineraries = TripParser.parse_trips(payload)
            if not itineraries:
                logger.info(f"No trips found for route: {origin} -> {destination}")
            return itineraries

        return await self._cached(
            cache_keys.route_key(origin, destination), self._ttls.route, _ITINERARIES, fetch
        )

    async def search_stations(self, query: str) -> list[Station]:
        """Find stops by name.

        Raises:
            InvalidInputError: If the trimmed query is shorter than 3 characters.
            UpstreamUnavailableError: On provider or network failure.
        """
        query = (query or "").strip()
        if len(query) < MIN_STATION_QUERY_LENGTH:
            raise InvalidInputError(
                f"Suchbegriff fehlt oder ist zu kurz (mind. {MIN_STATION_QUERY_LENGTH} Zeichen)."
            )

        async def fetch() -> list[Station]:
            payload = await self._provider.fetch_stops_by_name(query)
            self._raise_for_outcome(classify_stop_finder_response(payload), f"stations {query!r}")
            stations = StopParser.parse_stations(payload)
            if not stations:
                logger.info(f"No points found by stop finder for query: {query!r}")
            return stations

        return await self._cached(
            cache_keys.stations_key(query), self._ttls.stations, _STATIONS, fetch
        )

    async def search_nearby_stations(
        self,
        latitude: float,
        longitude: float,
        radius_meters: int = DEFAULT_NEARBY_RADIUS_METERS,
    ) -> list[Station]:
        """Find stops around a coordinate, nearest first.

        Raises:
            InvalidInputError: For out-of-range coordinates or a non-positive radius.
            UpstreamUnavailableError: On provider or network failure.
        """
        latitude, longitude, radius = _validate_coordinates(latitude, longitude, radius_meters)

        async def fetch() -> list[Station]:
            payload = await self._provider.fetch_stops_by_coord(latitude, longitude, radius)
            context = f"nearby {latitude:.4f},{longitude:.4f} r={radius}"
            self._raise_for_outcome(classify_stop_finder_response(payload), context)
            stations = StopParser.parse_stations(payload, with_distance=True)
            if not stations:
                logger.info(f"No nearby points found by stop finder for {context}")
            return stations

        return await self._cached(
            cache_keys.nearby_key(latitude, longitude, radius), self._ttls.nearby, _STATIONS, fetch
        )

    async def get_departures(self, station: str) -> list[Departure]:
        """Get live departures for a stop id or stop name.

        Raises:
            InvalidInputError: If no station is given.
            NotFoundError: If the provider does not know the stop.
            UpstreamUnavailableError: On provider or network failure.
        """
        station = (station or "").strip()
        if not station:
            raise InvalidInputError("Haltestellen-ID oder -Name benötigt.")

        async def fetch() -> list[Departure]:
            payload = await self._provider.fetch_departures(station)
            context = f"departures {station!r}"
            self._raise_for_outcome(classify_departure_response(payload), context)
            departures = DepartureParser.parse_departures(payload)
            if not departures:
                logger.info(f"No departures found for identifier: {station}")
            return departures

        return await self._cached(
            cache_keys.departures_key(station), self._ttls.departures, _DEPARTURES, fetch
        )

    async def _cached(
        self,
        key: str,
        ttl_seconds: int,
        adapter: TypeAdapter[list[T]],
        fetch: Callable[[], Awaitable[list[T]]],
    ) -> list[T]:
        """Serve ``key`` from the cache, or fetch and store it."""
        cached = await self._cache.get(key)
        if cached is not None:
            try:
                result = adapter.validate_json(cached)
            except ValidationError as e:
                logger.warning(f"Discarding undecodable cache entry {key}: {e}")
            else:
                logger.info(f"Cache hit for {key}")
                return result

        logger.info(f"Cache miss for {key}")
        result = await fetch()
        await self._cache.set(key, adapter.dump_json(result).decode("utf-8"), ttl_seconds)
        return result

    @staticmethod
    def _raise_for_outcome(classification: Classification, context: str) -> None:
        """Log provider diagnostics and raise for any non-success outcome."""
        if classification.messages:
            logger.warning(f"EFA Info/Warning [{context}]: {'; '.join(classification.messages)}")

        kind = classification.kind
        if kind is OutcomeKind.SUCCESS:
            return
        if kind is OutcomeKind.AMBIGUOUS_LOCATION:
            logger.warning(
                f"Ambiguous location(s) {list(classification.ambiguous_endpoints)} for {context}"
            )
            raise AmbiguousLocationError(
                "Start- oder Zielort ist mehrdeutig.", list(classification.ambiguous_endpoints)
            )
        if kind is OutcomeKind.STOP_NOT_FOUND:
            logger.warning(f"Stop not found for {context}")
            raise NotFoundError("Haltestelle nicht gefunden.")

        logger.error(f"EFA technical error for {context}: {classification.provider_error}")
        raise UpstreamUnavailableError(
            "Fehler bei der Kommunikation mit dem Fahrplandienst.",
            provider_error=classification.provider_error,
        )


def _validate_coordinates(
    latitude: Any, longitude: Any, radius_meters: Any
) -> tuple[float, float, int]:
    """Return validated coordinates and a whole-metre radius."""
    try:
        lat = float(latitude)
        lon = float(longitude)
        radius = float(radius_meters)
    except (TypeError, ValueError) as e:
        raise InvalidInputError("Ungültige Koordinaten oder Radius.") from e

    if not all(math.isfinite(v) for v in (lat, lon, radius)):
        raise InvalidInputError("Ungültige Koordinaten oder Radius.")
    if not (-90.0 <= lat <= 90.0 and -180.0 <= lon <= 180.0) or int(radius) <= 0:
        raise InvalidInputError("Ungültige Koordinaten oder Radius.")
    return lat, lon, int(radius)
