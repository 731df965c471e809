"""Tests for EFA date/time parsing and duration arithmetic."""

from datetime import datetime

import pytest

from efa_transit.domain.efa.temporal import (
    duration_minutes,
    format_clock,
    parse_efa_datetime,
    total_itinerary_minutes,
)


def _fragment(**overrides: str) -> dict[str, str]:
    fragment = {"year": "2024", "month": "5", "day": "7", "hour": "8", "minute": "5"}
    fragment.update(overrides)
    return fragment


def test_when_all_fields_present_then_parses_padded_local_time() -> None:
    """Given a complete fragment with single-digit parts, when parsing, then they are zero-padded."""
    assert parse_efa_datetime(_fragment()) == datetime(2024, 5, 7, 8, 5)


def test_when_fields_are_integers_then_parses() -> None:
    """Given numeric rather than text fields, when parsing, then they are accepted."""
    fragment = {"year": 2024, "month": 12, "day": 31, "hour": 23, "minute": 59}

    assert parse_efa_datetime(fragment) == datetime(2024, 12, 31, 23, 59)


@pytest.mark.parametrize("missing", ["year", "month", "day", "hour", "minute"])
def test_when_a_field_is_missing_then_unavailable(missing: str) -> None:
    """Given a fragment missing one field, when parsing, then None is returned."""
    fragment = _fragment()
    del fragment[missing]

    assert parse_efa_datetime(fragment) is None


def test_when_a_field_is_not_numeric_then_unavailable() -> None:
    """Given a non-numeric field, when parsing, then None is returned."""
    assert parse_efa_datetime(_fragment(hour="eight")) is None


def test_when_calendar_date_is_invalid_then_unavailable() -> None:
    """Given February 30th, when parsing, then None is returned rather than raising."""
    assert parse_efa_datetime(_fragment(month="2", day="30")) is None


@pytest.mark.parametrize("value", [None, "2024-05-07", [], 42])
def test_when_fragment_is_not_a_mapping_then_unavailable(value: object) -> None:
    """Given input that is not a mapping, when parsing, then None is returned."""
    assert parse_efa_datetime(value) is None


def test_format_clock() -> None:
    """Given a datetime, when formatting, then HH:MM is returned; None stays None."""
    assert format_clock(datetime(2024, 5, 7, 8, 5)) == "08:05"
    assert format_clock(None) is None


def test_duration_rounds_to_whole_minutes() -> None:
    """Given 90 and 89 seconds, when computing duration, then 2 and 1 minutes."""
    start = datetime(2024, 5, 7, 8, 0, 0)

    assert duration_minutes(start, datetime(2024, 5, 7, 8, 1, 30)) == 2
    assert duration_minutes(start, datetime(2024, 5, 7, 8, 1, 29)) == 1


def test_duration_of_zero_length_is_zero() -> None:
    """Given identical instants, when computing duration, then 0."""
    instant = datetime(2024, 5, 7, 8, 0)

    assert duration_minutes(instant, instant) == 0


def test_duration_when_end_before_start_then_unavailable() -> None:
    """Given an end before the start, when computing duration, then None."""
    assert duration_minutes(datetime(2024, 5, 7, 9, 0), datetime(2024, 5, 7, 8, 0)) is None


def test_duration_when_instant_missing_then_unavailable() -> None:
    """Given a missing instant, when computing duration, then None."""
    assert duration_minutes(None, datetime(2024, 5, 7, 8, 0)) is None
    assert duration_minutes(datetime(2024, 5, 7, 8, 0), None) is None


def test_total_adds_positive_wait_between_legs() -> None:
    """Given 10 and 15 minute legs with a 5 minute gap, when totalling, then 30."""
    legs = [
        (datetime(2024, 5, 7, 8, 0), datetime(2024, 5, 7, 8, 10)),
        (datetime(2024, 5, 7, 8, 15), datetime(2024, 5, 7, 8, 30)),
    ]

    assert total_itinerary_minutes(legs) == 30


def test_total_ignores_zero_wait() -> None:
    """Given 10 and 15 minute legs without a gap, when totalling, then 25."""
    legs = [
        (datetime(2024, 5, 7, 8, 0), datetime(2024, 5, 7, 8, 10)),
        (datetime(2024, 5, 7, 8, 10), datetime(2024, 5, 7, 8, 25)),
    ]

    assert total_itinerary_minutes(legs) == 25


def test_total_ignores_overlapping_legs() -> None:
    """Given a leg departing before the previous one arrives, when totalling, then no wait is added."""
    legs = [
        (datetime(2024, 5, 7, 8, 0), datetime(2024, 5, 7, 8, 10)),
        (datetime(2024, 5, 7, 8, 8), datetime(2024, 5, 7, 8, 20)),
    ]

    assert total_itinerary_minutes(legs) == 22


def test_total_skips_legs_without_timestamps() -> None:
    """Given a leg without timestamps, when totalling, then only the known legs count."""
    legs = [
        (None, None),
        (datetime(2024, 5, 7, 8, 15), datetime(2024, 5, 7, 8, 30)),
    ]

    assert total_itinerary_minutes(legs) == 15


def test_total_of_no_legs_is_zero() -> None:
    assert total_itinerary_minutes([]) == 0
