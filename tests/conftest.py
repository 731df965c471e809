"""Shared fixtures for EFA payloads."""

from typing import Any

import pytest
from efa_payloads import efa_datetime, leg_point


@pytest.fixture
def bus_leg() -> dict[str, Any]:
    """A 10 minute bus leg, 08:00-08:10."""
    return {
        "points": [
            leg_point("Bozen, Bahnhof", 8, 0, "11.3548,46.4983"),
            leg_point("Bozen, Siegesplatz", 8, 10, "11.3431,46.5023"),
        ],
        "mode": {
            "name": "Stadtbus",
            "number": "3",
            "direction": "Bozen Kaiserau",
            "operator": {"name": "SASA"},
        },
    }


@pytest.fixture
def walk_leg() -> dict[str, Any]:
    """A walk 08:15-08:30 with a provider duration of 12 minutes."""
    return {
        "type": "WALK",
        "duration": "12",
        "points": [
            leg_point("Bozen, Siegesplatz", 8, 15),
            leg_point("Bozen, Museion", 8, 30),
        ],
        "mode": {"type": "FOOTPATH"},
    }


@pytest.fixture
def station_payload() -> dict[str, Any]:
    """Stop-finder response with a single point named Bozen."""
    return {
        "stopFinder": {
            "points": {
                "point": {
                    "name": "Bozen",
                    "anyType": "stop",
                    "ref": {"id": "66000001", "coords": "11.35,46.50", "place": "Bozen"},
                }
            }
        }
    }


@pytest.fixture
def departure_payload() -> dict[str, Any]:
    """Departure monitor response with one delayed bus."""
    return {
        "departureList": {
            "dateTime": efa_datetime(8, 0),
            "realDateTime": efa_datetime(8, 3),
            "delay": "0",
            "servingLine": {
                "number": "10A",
                "direction": "Bozen Bahnhof",
                "name": "Stadtbus",
                "platformName": "B",
            },
        }
    }
