"""Tests for Web Mercator projection helpers and the polar clamp."""

from __future__ import annotations

import math

import pytest

from route_geometry.errors import RangeError, ValidationError
from route_geometry.geometry.models import MAX_MERCATOR_LAT
from route_geometry.geometry.projection import (
    WEB_MERCATOR,
    WGS84,
    clamp_latitudes,
    get_transformer,
    normalize_longitude,
    to_geographic,
    to_projected,
    transform_coordinates,
)

EARTH_RADIUS_M = 6378137.0


def test_origin_projects_to_zero() -> None:
    point = to_projected(0.0, 0.0)
    assert point.x == pytest.approx(0.0, abs=1e-6)
    assert point.y == pytest.approx(0.0, abs=1e-6)


def test_dateline_projects_to_half_circumference() -> None:
    point = to_projected(180.0, 0.0)
    assert point.x == pytest.approx(math.pi * EARTH_RADIUS_M, rel=1e-9)


def test_mercator_limit_is_square() -> None:
    point = to_projected(180.0, MAX_MERCATOR_LAT)
    assert point.y == pytest.approx(point.x, rel=1e-6)


@pytest.mark.parametrize(
    "lon, lat",
    [
        (0.0, 0.0),
        (-6.2603, 53.3498),
        (151.2093, -33.8688),
        (-179.999, 85.0),
        (179.5, -85.0511),
    ],
)
def test_projection_round_trip(lon: float, lat: float) -> None:
    back = to_geographic(*to_projected(lon, lat))
    assert back.lon == pytest.approx(lon, abs=1e-6)
    assert back.lat == pytest.approx(lat, abs=1e-6)


@pytest.mark.parametrize(
    "lon, lat, message",
    [
        (181.0, 0.0, "Invalid longitude"),
        (0.0, 86.0, "Invalid latitude"),
        (0.0, -90.0, "Invalid latitude"),
        ("0", 0.0, "expected number"),
        (True, 0.0, "expected number"),
    ],
)
def test_to_projected_rejects_out_of_range(lon, lat, message) -> None:
    with pytest.raises(RangeError, match=message):
        to_projected(lon, lat)


def test_to_geographic_clamps_latitude() -> None:
    point = to_geographic(0.0, 4.0e7)
    assert point.lat == pytest.approx(MAX_MERCATOR_LAT)


def test_transform_coordinates_batch_round_trip() -> None:
    route = [(-0.1276, 51.5072), (2.3522, 48.8566), (13.405, 52.52)]
    projected = transform_coordinates(route, WGS84, WEB_MERCATOR)
    assert len(projected) == 3
    assert projected[0] == pytest.approx(tuple(to_projected(*route[0])))
    back = transform_coordinates(projected, WEB_MERCATOR, WGS84)
    for (lon, lat), (exp_lon, exp_lat) in zip(back, route):
        assert lon == pytest.approx(exp_lon, abs=1e-6)
        assert lat == pytest.approx(exp_lat, abs=1e-6)


def test_transform_coordinates_identity_and_empty() -> None:
    assert transform_coordinates([], WGS84, WEB_MERCATOR) == []
    assert transform_coordinates([[1, 2]], WGS84, WGS84) == [(1.0, 2.0)]


def test_transform_coordinates_names_failing_index() -> None:
    with pytest.raises(RangeError, match="index 1"):
        transform_coordinates([(0.0, 0.0), (0.0, 89.0)], WGS84, WEB_MERCATOR)


def test_transform_coordinates_rejects_unknown_projection() -> None:
    with pytest.raises(ValidationError, match="Invalid target projection: utm"):
        transform_coordinates([(0.0, 0.0)], WGS84, "utm")


def test_transformers_are_cached() -> None:
    assert get_transformer(WGS84, WEB_MERCATOR) is get_transformer(WGS84, WEB_MERCATOR)


def test_clamp_latitudes_limits_polar_points() -> None:
    clamped = clamp_latitudes([(10.0, 89.9), (20.0, -90.0), (30.0, 45.0)])
    assert clamped == [
        (10.0, MAX_MERCATOR_LAT),
        (20.0, -MAX_MERCATOR_LAT),
        (30.0, 45.0),
    ]


def test_clamp_latitudes_without_mercator_limit() -> None:
    clamped = clamp_latitudes([(10.0, 89.9), (20.0, 95.0)], clamp_to_mercator=False)
    assert clamped == [(10.0, 89.9), (20.0, 90.0)]


def test_clamp_latitudes_rejects_short_pair() -> None:
    with pytest.raises(ValidationError, match="index 0"):
        clamp_latitudes([(10.0,)])


@pytest.mark.parametrize(
    "value, expected",
    [
        (0.0, 0.0),
        (180.0, 180.0),
        (-180.0, -180.0),
        (190.0, -170.0),
        (-190.0, 170.0),
        (540.0, 180.0),
        (725.0, 5.0),
    ],
)
def test_normalize_longitude(value: float, expected: float) -> None:
    assert normalize_longitude(value) == pytest.approx(expected)


@pytest.mark.parametrize("value", [float("nan"), "10", None, False])
def test_normalize_longitude_rejects_non_numbers(value) -> None:
    with pytest.raises(ValidationError):
        normalize_longitude(value)
