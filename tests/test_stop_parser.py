"""Tests for building stations from EFA stop-finder responses."""

from typing import Any

import pytest

from efa_transit.domain.efa.stop_parser import StopParser
from efa_transit.domain.models import GeoPoint


def test_point_is_parsed(station_payload: dict[str, Any]) -> None:
    """Given one point, when parsing, then a station with swapped coordinates results."""
    stations = StopParser.parse_stations(station_payload)

    assert len(stations) == 1
    station = stations[0]
    assert station.id == "66000001"
    assert station.name == "Bozen"
    assert station.locality == "Bozen"
    assert station.coords == GeoPoint(latitude=46.50, longitude=11.35)
    assert station.type == "stop"
    assert station.distance is None


def test_id_falls_back_to_stateless_token() -> None:
    payload = {"stopFinder": {"points": [{"name": "Meran", "stateless": "stopID:66002002"}]}}

    assert StopParser.parse_stations(payload)[0].id == "stopID:66002002"


def test_id_is_generated_from_name_and_locality() -> None:
    """Given neither id nor stateless token, when parsing, then an id is built from name and locality."""
    payload = {"stopFinder": {"points": [{"name": "Waltherplatz", "locality": "Bozen"}]}}

    assert StopParser.parse_stations(payload)[0].id == "gen_Waltherplatz_Bozen"


def test_generated_id_is_deterministic() -> None:
    payload = {"stopFinder": {"points": [{"name": "Waltherplatz", "ref": {"place": "Bozen"}}]}}

    first = StopParser.parse_stations(payload)[0]
    second = StopParser.parse_stations(payload)[0]

    assert first.id == second.id == "gen_Waltherplatz_Bozen"
    assert first.locality == "Bozen"


def test_missing_fields_use_sentinels() -> None:
    """Given a point without name, locality or coordinates, when parsing, then defaults are used."""
    station = StopParser.parse_stations({"stopFinder": {"points": [{"ref": {"coords": "x,y"}}]}})[0]

    assert station.name == "Unbekannter Name"
    assert station.locality == "Unbekannter Ort"
    assert station.coords is None
    assert station.type == "unknown"
    assert station.id == "gen_Unbekannter Name_Unbekannter Ort"


def test_nearby_results_sorted_by_distance() -> None:
    """Given distances on the points, when parsing a proximity search, then nearest comes first."""
    payload = {
        "stopFinder": {
            "points": [
                {"name": "Far", "ref": {"id": "1", "distance": "850"}},
                {"name": "Unknown", "ref": {"id": "2"}},
                {"name": "Near", "ref": {"id": "3", "distance": "120"}},
            ]
        }
    }

    stations = StopParser.parse_stations(payload, with_distance=True)

    assert [s.name for s in stations] == ["Near", "Far", "Unknown"]
    assert stations[0].distance == 120


def test_nearby_results_keep_order_when_first_has_no_distance() -> None:
    payload = {
        "stopFinder": {
            "points": [
                {"name": "First", "ref": {"id": "1"}},
                {"name": "Second", "ref": {"id": "2", "distance": "10"}},
            ]
        }
    }

    stations = StopParser.parse_stations(payload, with_distance=True)

    assert [s.name for s in stations] == ["First", "Second"]


def test_name_search_ignores_distance() -> None:
    payload = {"stopFinder": {"points": [{"name": "A", "ref": {"id": "1", "distance": "5"}}]}}

    assert StopParser.parse_stations(payload)[0].distance is None


def test_no_points_gives_empty_list() -> None:
    assert StopParser.parse_stations({"stopFinder": {"points": None}}) == []


@pytest.mark.parametrize(
    "ref_id,name,locality,any_type",
    [(66000001, 4711, 39100, 1), (1.5, 2.5, 3.5, 4.5)],
)
def test_non_string_point_fields_are_coerced(
    ref_id: Any, name: Any, locality: Any, any_type: Any
) -> None:
    """Given numeric id, name, locality and type, when parsing, then text fields become strings."""
    payload = {
        "stopFinder": {
            "points": [
                {
                    "name": name,
                    "locality": locality,
                    "anyType": any_type,
                    "ref": {"id": ref_id, "coords": 11.35, "distance": "far"},
                }
            ]
        }
    }

    station = StopParser.parse_stations(payload, with_distance=True)[0]

    assert station.id == str(ref_id)
    assert station.name == str(name)
    assert station.locality == str(locality)
    assert station.type == str(any_type)
    assert station.coords is None
    assert station.distance is None
