"""Transit provider port."""

from typing import Any, Protocol


class TransitProvider(Protocol):
    """Port for fetching raw payloads from the journey planner.

    Implementations raise ``UpstreamUnavailableError`` on transport failure
    and otherwise return the decoded JSON untouched.
    """

    async def fetch_trips(self, origin: str, destination: str) -> dict[str, Any]:
        """Request trip options between two free-text locations."""
        ...

    async def fetch_stops_by_name(self, query: str) -> dict[str, Any]:
        """Request stops matching a name."""
        ...

    async def fetch_stops_by_coord(
        self, latitude: float, longitude: float, radius_meters: int
    ) -> dict[str, Any]:
        """Request stops within a radius of a coordinate."""
        ...

    async def fetch_departures(self, station: str) -> dict[str, Any]:
        """Request the departure monitor for a stop id or name."""
        ...
