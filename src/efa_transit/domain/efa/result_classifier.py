"""Classification of EFA responses before their data is trusted.

EFA reports most functional failures inside otherwise successful responses,
as numeric codes buried in message lists. The classifier turns them into a
closed set of outcomes so no raw code travels further than this module.
"""

import json
from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from efa_transit.domain.efa.constants import (
    AMBIGUOUS_LOCATION_CODES,
    STOP_NOT_FOUND_CODES,
)
from efa_transit.domain.efa.shape import as_list, get_mapping


class OutcomeKind(Enum):
    """Possible outcomes of a provider request."""

    SUCCESS = "success"
    AMBIGUOUS_LOCATION = "ambiguous_location"
    STOP_NOT_FOUND = "stop_not_found"
    UPSTREAM_FAILURE = "upstream_failure"


@dataclass(frozen=True)
class Classification:
    """Outcome of a provider request plus diagnostic context."""

    kind: OutcomeKind
    provider_error: str | None = None
    ambiguous_endpoints: tuple[str, ...] = ()
    messages: tuple[str, ...] = field(default_factory=tuple)

    @property
    def is_success(self) -> bool:
        return self.kind is OutcomeKind.SUCCESS


def _message_text(message: Any) -> str:
    if isinstance(message, Mapping):
        text = message.get("text")
        if text:
            return str(text)
        return json.dumps(message, default=str, ensure_ascii=False)
    return str(message)


def collect_messages(*message_data: Any) -> tuple[str, ...]:
    """Flatten provider message lists into non-empty texts."""
    texts = []
    for data in message_data:
        if isinstance(data, str):
            items: list[Any] = [data]
        else:
            items = as_list(data)
        for item in items:
            text = _message_text(item).strip()
            if text:
                texts.append(text)
    return tuple(texts)


def _has_code(messages: Any, codes: frozenset[str]) -> bool:
    """Check a message list for ``{"name": "code", "value": <code>}`` entries.

    Also accepts a bare message object carrying a ``code`` field.
    """
    for message in as_list(messages):
        if not isinstance(message, Mapping):
            continue
        if message.get("name") == "code" and str(message.get("value")) in codes:
            return True
        if "code" in message and str(message.get("code")) in codes:
            return True
    return False


def _upstream_failure(payload: Mapping[str, Any], messages: tuple[str, ...]) -> Classification:
    return Classification(
        kind=OutcomeKind.UPSTREAM_FAILURE,
        provider_error=str(payload.get("error")),
        messages=messages,
    )


def _has_error(payload: Mapping[str, Any]) -> bool:
    return bool(payload.get("error"))


def classify_trip_response(payload: Mapping[str, Any]) -> Classification:
    """Classify an ``XML_TRIP_REQUEST2`` response."""
    messages = collect_messages(payload.get("itdMessageList"))
    if _has_error(payload):
        return _upstream_failure(payload, messages)

    ambiguous = tuple(
        endpoint
        for endpoint in ("origin", "destination")
        if _has_code(get_mapping(payload, endpoint).get("message"), AMBIGUOUS_LOCATION_CODES)
    )
    if ambiguous and not as_list(payload.get("trips")):
        return Classification(
            kind=OutcomeKind.AMBIGUOUS_LOCATION,
            ambiguous_endpoints=ambiguous,
            messages=messages,
        )

    return Classification(kind=OutcomeKind.SUCCESS, messages=messages)


def classify_stop_finder_response(payload: Mapping[str, Any]) -> Classification:
    """Classify an ``XML_STOPFINDER_REQUEST`` response."""
    messages = collect_messages(get_mapping(payload, "stopFinder").get("message"))
    if _has_error(payload):
        return _upstream_failure(payload, messages)
    return Classification(kind=OutcomeKind.SUCCESS, messages=messages)


def classify_departure_response(payload: Mapping[str, Any]) -> Classification:
    """Classify an ``XML_DM_REQUEST`` response.

    An unknown stop is reported before any generic error so it is never
    mistaken for a provider failure.
    """
    monitor_messages = get_mapping(payload, "departureMonitor").get("message")
    messages = collect_messages(payload.get("message"), monitor_messages)

    if _has_code(monitor_messages, STOP_NOT_FOUND_CODES):
        return Classification(kind=OutcomeKind.STOP_NOT_FOUND, messages=messages)
    if _has_error(payload):
        return _upstream_failure(payload, messages)
    return Classification(kind=OutcomeKind.SUCCESS, messages=messages)
