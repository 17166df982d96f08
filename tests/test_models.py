"""Tests for source tags, conversion config, and env-driven defaults."""

from __future__ import annotations

from dataclasses import FrozenInstanceError

import pytest

from route_geometry import config
from route_geometry.errors import RouteGeometryError, ValidationError
from route_geometry.models import ConverterConfig, Route, SourceKind


@pytest.mark.parametrize(
    "value, expected",
    [
        ("gpx", SourceKind.GPX),
        (" TCX ", SourceKind.TCX),
        ("strava_polyline", SourceKind.STRAVA_POLYLINE),
        (SourceKind.COORDINATES, SourceKind.COORDINATES),
        ("strava", SourceKind.STRAVA_POLYLINE),
        ("gpx_upload", SourceKind.GPX),
        (" Tcx_Upload", SourceKind.TCX),
    ],
)
def test_source_kind_parse(value, expected: SourceKind) -> None:
    assert SourceKind.parse(value) is expected


def test_source_kind_parse_lists_supported_values() -> None:
    with pytest.raises(ValidationError, match="Supported: gpx, tcx"):
        SourceKind.parse("kml")


def test_validation_error_is_a_value_error() -> None:
    assert issubclass(ValidationError, RouteGeometryError)
    assert issubclass(ValidationError, ValueError)


def test_converter_config_defaults_follow_module_constants() -> None:
    cfg = ConverterConfig()
    assert cfg.min_coordinates == config.GEOMETRY_MIN_COORDINATES
    assert cfg.max_coordinates == config.GEOMETRY_MAX_COORDINATES
    assert cfg.polyline_precision == config.POLYLINE_PRECISION
    assert cfg.line_opacity == config.LINE_OPACITY


def test_config_and_route_are_frozen() -> None:
    cfg = ConverterConfig()
    with pytest.raises(FrozenInstanceError):
        cfg.max_coordinates = 10  # type: ignore[misc]
    route = Route(
        coordinates=((0.0, 0.0), (1.0, 1.0)),
        source=SourceKind.COORDINATES,
        name="Route",
        activity_type="route",
    )
    with pytest.raises(FrozenInstanceError):
        route.name = "Other"  # type: ignore[misc]


def test_env_helpers(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("RG_TEST_INT", "12")
    monkeypatch.setenv("RG_TEST_FLOAT", "not-a-number")
    monkeypatch.setenv("RG_TEST_BOOL", "off")
    assert config._env_int("RG_TEST_INT", 1) == 12
    assert config._env_float("RG_TEST_FLOAT", 2.5) == 2.5
    assert config._env_bool("RG_TEST_BOOL", True) is False
    assert config._env_bool("RG_TEST_MISSING", True) is True
