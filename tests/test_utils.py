"""Tests for GeoJSON serialisation helpers."""

from __future__ import annotations

from datetime import datetime, timezone
import json

import numpy as np
import pytest

from route_geometry.geometry.models import Bounds
from route_geometry.models import SourceKind
from route_geometry.utils import dumps_geojson, json_dumps_sorted


def test_dumps_normalises_library_types() -> None:
    payload = {
        "coordinates": [(np.float64(-6.26), np.float64(53.34))],
        "distance": np.int64(1200),
        "source": SourceKind.GPX,
        "start": datetime(2025, 3, 1, 8, 0, tzinfo=timezone.utc),
        "bounds": Bounds((0.0, 0.0), (1.0, 1.0), (0.5, 0.5)),
        "array": np.array([1.5, 2.5]),
    }
    decoded = json.loads(dumps_geojson(payload))
    assert decoded == {
        "coordinates": [[-6.26, 53.34]],
        "distance": 1200,
        "source": "gpx",
        "start": "2025-03-01T08:00:00+00:00",
        "bounds": {
            "southwest": [0.0, 0.0],
            "northeast": [1.0, 1.0],
            "center": [0.5, 0.5],
            "antimeridianCrossing": False,
        },
        "array": [1.5, 2.5],
    }


def test_sorted_output_is_stable() -> None:
    assert json_dumps_sorted({"b": 1, "a": 2}) == '{"a":2,"b":1}'


def test_nan_is_rejected() -> None:
    with pytest.raises(ValueError):
        dumps_geojson({"distance": float("nan")})
