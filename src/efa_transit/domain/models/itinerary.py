"""Itinerary domain model."""

from pydantic import BaseModel, ConfigDict, Field

from efa_transit.domain.models.segment import Segment


class Itinerary(BaseModel):
    """A door-to-door trip option.

    ``duration`` holds the calculated total in minutes when one could be
    derived from the leg timestamps; otherwise it is whatever the provider
    reported, which may be a clock-like string such as ``"00:25"`` or absent.
    """

    model_config = ConfigDict(frozen=True)

    segments: list[Segment] = Field(min_length=1)
    duration: int | str | None = None
    interchanges: int = 0
