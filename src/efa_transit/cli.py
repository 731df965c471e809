"""Command-line access to route, stop and departure queries."""

import argparse
import asyncio
import json
import sys
from typing import TYPE_CHECKING, Any

import aiohttp
from pydantic import BaseModel

from efa_transit.adapters.config import AppConfig
from efa_transit.bootstrap import (
    configure_logging,
    create_query_cache,
    create_query_service,
)
from efa_transit.domain.exceptions import InvalidInputError, TransitQueryError
from efa_transit.domain.models import Departure, Itinerary, Station

if TYPE_CHECKING:
    from efa_transit.application.services import TransitQueryService

# Exit status for rejected input, matching argparse usage errors
EXIT_INVALID_INPUT = 2


def format_itinerary(index: int, itinerary: Itinerary) -> list[str]:
    """Render an itinerary as indented text lines."""
    duration = itinerary.duration if itinerary.duration is not None else "?"
    unit = " min" if isinstance(itinerary.duration, int) else ""
    lines = [f"Option {index}: {duration}{unit}, {itinerary.interchanges} Umstieg(e)"]

    for segment in itinerary.segments:
        times = f"{segment.departure_time or '--:--'}-{segment.arrival_time or '--:--'}"
        line = f" {segment.line}" if segment.line else ""
        direction = f" -> {segment.direction}" if segment.direction else ""
        lines.append(f"  {times}  {segment.label}{line}{direction}")
        lines.append(f"      {segment.origin} -> {segment.destination}")
        if segment.duration_minutes is not None:
            lines.append(f"      {segment.duration_minutes} min")
        if segment.operator:
            lines.append(f"      {segment.operator}")
    return lines


def format_station(station: Station) -> list[str]:
    """Render a station as indented text lines."""
    distance = f" - {station.distance} m" if station.distance is not None else ""
    lines = [f"  {station.name} ({station.locality}){distance}", f"    ID: {station.id}"]
    if station.coords:
        lines.append(f"    Coords: {station.coords.latitude}, {station.coords.longitude}")
    return lines


def format_departure(departure: Departure) -> str:
    """Render a departure as one text line."""
    time = departure.time
    if departure.real_time:
        time = f"{departure.time} ({departure.real_time})"
    delay = f" +{departure.delay_minutes}" if departure.delay_minutes else ""
    return (
        f"  {time}{delay}  {departure.service_type} {departure.line} -> {departure.direction}"
        f"  [{departure.platform}]"
    )


def to_json(results: list[BaseModel]) -> str:
    """Serialise query results as a JSON array."""
    return json.dumps(
        [result.model_dump(mode="json") for result in results], indent=2, ensure_ascii=False
    )


def render(command: str, results: list[Any]) -> list[str]:
    """Render query results for plain-text output."""
    if command == "route":
        lines: list[str] = []
        for i, itinerary in enumerate(results, 1):
            lines.extend(format_itinerary(i, itinerary))
            lines.append("")
        return lines
    if command in ("stations", "nearby"):
        lines = [f"Found {len(results)} station(s):", ""]
        for station in results:
            lines.extend(format_station(station))
        return lines
    return [format_departure(departure) for departure in results]


async def run_command(service: "TransitQueryService", args: argparse.Namespace) -> list[Any]:
    """Dispatch parsed arguments to the query service."""
    if args.command == "route":
        return await service.search_route(args.origin, args.destination)
    if args.command == "stations":
        return await service.search_stations(args.query)
    if args.command == "nearby":
        return await service.search_nearby_stations(args.lat, args.lon, args.radius)
    return await service.get_departures(args.station)


def exit_code_for(error: TransitQueryError) -> int:
    return EXIT_INVALID_INPUT if isinstance(error, InvalidInputError) else 1


def build_parser(default_radius: int = 1000) -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        description="EFA transit queries",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Plan a trip
  efa-transit route "Bozen Bahnhof" "Meran Bahnhof"

  # Search for stops by name
  efa-transit stations "Bozen"

  # Search for stops around a coordinate
  efa-transit nearby 46.4983 11.3548 --radius 500

  # Show live departures (stop id or name)
  efa-transit departures 66000001
        """,
    )

    subparsers = parser.add_subparsers(dest="command", help="Command to execute")

    route_parser = subparsers.add_parser("route", help="Plan a trip between two locations")
    route_parser.add_argument("origin", help="Start location")
    route_parser.add_argument("destination", help="Destination")
    route_parser.add_argument("--json", action="store_true", help="Output as JSON")

    stations_parser = subparsers.add_parser("stations", help="Search for stops by name")
    stations_parser.add_argument("query", help="Stop name (at least 3 characters)")
    stations_parser.add_argument("--json", action="store_true", help="Output as JSON")

    nearby_parser = subparsers.add_parser("nearby", help="Search for stops around a coordinate")
    nearby_parser.add_argument("lat", type=float, help="Latitude")
    nearby_parser.add_argument("lon", type=float, help="Longitude")
    nearby_parser.add_argument(
        "--radius", type=int, default=default_radius, help="Radius in metres"
    )
    nearby_parser.add_argument("--json", action="store_true", help="Output as JSON")

    departures_parser = subparsers.add_parser("departures", help="Show live departures")
    departures_parser.add_argument("station", help="Stop id or stop name")
    departures_parser.add_argument("--json", action="store_true", help="Output as JSON")

    return parser


async def main() -> None:
    """Main CLI entry point."""
    config = AppConfig()
    configure_logging(config)

    parser = build_parser(config.default_nearby_radius)
    args = parser.parse_args()

    if not args.command:
        parser.print_help()
        sys.exit(1)

    cache = await create_query_cache(config)
    try:
        async with aiohttp.ClientSession() as session:
            service = create_query_service(config, session, cache)
            results = await run_command(service, args)
    except TransitQueryError as e:
        print(f"Error: {e.details.reason}", file=sys.stderr)
        if e.details.provider_error:
            print(f"  Provider: {e.details.provider_error}", file=sys.stderr)
        if e.details.ambiguous_endpoints:
            print(f"  Ambiguous: {', '.join(e.details.ambiguous_endpoints)}", file=sys.stderr)
        sys.exit(exit_code_for(e))
    finally:
        close = getattr(cache, "close", None)
        if close is not None:
            await close()

    if args.json:
        print(to_json(results))
    else:
        print("\n".join(render(args.command, results)))


def cli_main() -> None:
    """Synchronous entry point for the CLI command."""
    try:
        asyncio.run(main())
    except KeyboardInterrupt:
        print("\nInterrupted.", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    cli_main()
