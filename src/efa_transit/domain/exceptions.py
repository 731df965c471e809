"""Errors surfaced by transit queries."""

from efa_transit.domain.models.error_details import ErrorDetails


class TransitQueryError(Exception):
    """Base exception for failed transit queries."""

    kind = "TRANSIT_QUERY_ERROR"
    status_code = 500

    def __init__(self, reason: str) -> None:
        super().__init__(reason)
        self.reason = reason

    @property
    def details(self) -> ErrorDetails:
        """Structured form of the error for rendering to a caller."""
        return ErrorDetails(kind=self.kind, reason=self.reason, status_code=self.status_code)


class InvalidInputError(TransitQueryError):
    """Raised when the caller supplied unusable parameters. Never retried."""

    kind = "INVALID_INPUT"
    status_code = 400


class AmbiguousLocationError(TransitQueryError):
    """Raised when an origin or destination matches several places."""

    kind = "AMBIGUOUS_LOCATION"
    status_code = 400

    def __init__(self, reason: str, endpoints: list[str]) -> None:
        super().__init__(reason)
        self.endpoints = endpoints

    @property
    def details(self) -> ErrorDetails:
        return ErrorDetails(
            kind=self.kind,
            reason=self.reason,
            status_code=self.status_code,
            ambiguous_endpoints=list(self.endpoints),
        )


class NotFoundError(TransitQueryError):
    """Raised when the provider does not know the requested stop."""

    kind = "NOT_FOUND"
    status_code = 404


class UpstreamUnavailableError(TransitQueryError):
    """Raised on provider or network failure. Safe to retry with backoff."""

    kind = "UPSTREAM_UNAVAILABLE"
    status_code = 502

    def __init__(self, reason: str, provider_error: str | None = None) -> None:
        super().__init__(reason)
        self.provider_error = provider_error

    @property
    def details(self) -> ErrorDetails:
        return ErrorDetails(
            kind=self.kind,
            reason=self.reason,
            status_code=self.status_code,
            provider_error=self.provider_error,
        )
