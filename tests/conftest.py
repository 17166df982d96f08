"""Global pytest fixtures & helpers.

Adds project root to path and provides reusable route payloads for the
codec, geometry, and converter tests.
"""
from __future__ import annotations

import os
import sys
from typing import Any, Dict, List

import pytest

ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

from route_geometry.models import ConverterConfig


# --- Factory helpers -------------------------------------------------
def make_gpx_route(**overrides: Any) -> Dict[str, Any]:
    route: Dict[str, Any] = {
        "format": "gpx",
        "name": "Morning Loop",
        "type": "Run",
        # GPX parsers emit (lat, lon) pairs.
        "coordinates": [
            [53.3498, -6.2603],
            [53.3505, -6.2590],
            [53.3512, -6.2575],
        ],
        "elevation": [10.0, 14.0, 12.0],
        "timestamps": [
            "2025-03-01T08:00:00Z",
            "2025-03-01T08:01:00Z",
            "2025-03-01T08:02:30Z",
        ],
        "metadata": {"filename": "loop.gpx", "created_at": "2025-03-01"},
    }
    route.update(overrides)
    return route


def make_strava_activity(**overrides: Any) -> Dict[str, Any]:
    activity: Dict[str, Any] = {
        "id": 987654321,
        "name": "Lunch Ride",
        "type": "Ride",
        "distance": 25_000.0,
        "moving_time": 3600,
        "elapsed_time": 3900,
        "average_speed": 6.9,
        "max_speed": 14.2,
        "map": {"summary_polyline": "_p~iF~ps|U_ulLnnqC_mqNvxq`@"},
    }
    activity.update(overrides)
    return activity


# --- Fixtures --------------------------------------------------------
@pytest.fixture
def gpx_route() -> Dict[str, Any]:
    return make_gpx_route()


@pytest.fixture
def strava_activity() -> Dict[str, Any]:
    return make_strava_activity()


@pytest.fixture
def antimeridian_coordinates() -> List[List[float]]:
    return [[179.5, 10.0], [-179.5, 10.1], [-179.0, 10.2]]


@pytest.fixture
def config() -> ConverterConfig:
    return ConverterConfig()
