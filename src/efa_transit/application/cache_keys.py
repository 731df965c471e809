"""Deterministic cache keys for query results."""

KEY_PREFIX = "transport"


def route_key(origin: str, destination: str) -> str:
    return f"{KEY_PREFIX}:route:{origin}:{destination}"


def stations_key(query: str) -> str:
    return f"{KEY_PREFIX}:stations:{query}"


def nearby_key(latitude: float, longitude: float, radius_meters: int) -> str:
    """Key for a proximity search.

    Coordinates are reduced to 4 decimal places (about 11 m) so that nearly
    identical map positions share an entry.
    """
    return f"{KEY_PREFIX}:stations:nearby:{latitude:.4f}:{longitude:.4f}:{radius_meters}"


def departures_key(station: str) -> str:
    return f"{KEY_PREFIX}:departures:{station}"
