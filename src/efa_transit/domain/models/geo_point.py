"""Geographic point domain model."""

from pydantic import BaseModel, ConfigDict, Field


class GeoPoint(BaseModel):
    """A WGS84 coordinate pair."""

    model_config = ConfigDict(frozen=True)

    latitude: float = Field(ge=-90.0, le=90.0)
    longitude: float = Field(ge=-180.0, le=180.0)

    def as_list(self) -> list[float]:
        """Return the point as ``[lat, lon]``."""
        return [self.latitude, self.longitude]
