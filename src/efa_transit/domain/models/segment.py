"""Itinerary segment domain model."""

from datetime import datetime
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

from efa_transit.domain.models.geo_point import GeoPoint


class SegmentKind(str, Enum):
    """Whether a segment is walked or ridden."""

    WALK = "walk"
    TRANSIT = "transit"


class Segment(BaseModel):
    """One leg of an itinerary."""

    model_config = ConfigDict(frozen=True)

    kind: SegmentKind
    label: str  # "Fußweg" for walks, otherwise the provider's mode name
    origin: str
    destination: str
    origin_coords: GeoPoint | None = None
    destination_coords: GeoPoint | None = None
    departure: datetime | None = None
    arrival: datetime | None = None
    duration_minutes: int | float | None = Field(default=None, ge=0)
    line: str = ""
    direction: str | None = None
    operator: str | None = None

    @property
    def departure_time(self) -> str | None:
        """Departure as ``HH:MM``."""
        return self.departure.strftime("%H:%M") if self.departure else None

    @property
    def arrival_time(self) -> str | None:
        """Arrival as ``HH:MM``."""
        return self.arrival.strftime("%H:%M") if self.arrival else None
