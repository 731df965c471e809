"""Departure domain model."""

from pydantic import BaseModel, ConfigDict, Field


class Departure(BaseModel):
    """Represents a single departure from a stop."""

    model_config = ConfigDict(frozen=True)

    line: str
    direction: str
    platform: str
    time: str  # scheduled "HH:MM", or "N/A"
    real_time: str | None = None  # only set when it differs from ``time``
    delay_minutes: int = Field(default=0, ge=0)
    service_type: str = "Unknown"
