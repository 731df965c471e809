"""Station domain model."""

from pydantic import BaseModel, ConfigDict

from efa_transit.domain.models.geo_point import GeoPoint


class Station(BaseModel):
    """Represents a public transport stop as returned by a stop search."""

    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    locality: str
    coords: GeoPoint | None = None
    type: str = "unknown"
    distance: int | float | None = None  # metres, proximity search only
