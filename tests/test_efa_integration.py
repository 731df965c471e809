"""End-to-end integration tests against the live South Tyrol EFA installation."""

import aiohttp
import pytest

from efa_transit.adapters.cache import MemoryQueryCache
from efa_transit.adapters.efa_api import EfaHttpClient
from efa_transit.application.services import TransitQueryService


@pytest.mark.integration
@pytest.mark.asyncio
async def test_bozen_station_search_and_departures() -> None:
    """Search for Bozen, then fetch departures for the first stop found."""
    async with aiohttp.ClientSession() as session:
        service = TransitQueryService(EfaHttpClient(session=session), MemoryQueryCache())

        stations = await service.search_stations("Bozen Bahnhof")
        assert len(stations) > 0, "Should find at least one stop for 'Bozen Bahnhof'"

        departures = await service.get_departures(stations[0].id)
        print(f"Departures from {stations[0].name}: {len(departures)}")
        assert all(d.delay_minutes >= 0 for d in departures)


@pytest.mark.integration
@pytest.mark.asyncio
async def test_route_bozen_meran() -> None:
    async with aiohttp.ClientSession() as session:
        service = TransitQueryService(EfaHttpClient(session=session), MemoryQueryCache())

        itineraries = await service.search_route("Bozen Bahnhof", "Meran Bahnhof")

        assert len(itineraries) > 0, "Should find at least one trip Bozen -> Meran"
        assert all(len(i.segments) >= 1 for i in itineraries)


@pytest.mark.integration
@pytest.mark.asyncio
async def test_nearby_stations_are_sorted_by_distance() -> None:
    async with aiohttp.ClientSession() as session:
        service = TransitQueryService(EfaHttpClient(session=session), MemoryQueryCache())

        stations = await service.search_nearby_stations(46.4983, 11.3548, 500)

        distances = [s.distance for s in stations if s.distance is not None]
        assert distances == sorted(distances)
