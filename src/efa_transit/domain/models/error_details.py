"""Error details domain model."""

from pydantic import BaseModel, ConfigDict, Field


class ErrorDetails(BaseModel):
    """Structured description of a failed query, suitable for rendering."""

    model_config = ConfigDict(frozen=True)

    kind: str
    reason: str
    status_code: int | None = None
    ambiguous_endpoints: list[str] = Field(default_factory=list)
    provider_error: str | None = None
