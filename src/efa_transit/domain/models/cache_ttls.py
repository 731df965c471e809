"""Cache time-to-live settings per query endpoint."""

from dataclasses import dataclass


@dataclass(frozen=True)
class CacheTtls:
    """Seconds a cached result stays valid, per endpoint."""

    route: int = 300
    stations: int = 3600
    nearby: int = 3600
    departures: int = 60
