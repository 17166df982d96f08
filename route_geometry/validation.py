"""Structural and range checks for GeoJSON route output."""

from __future__ import annotations

from typing import Any, Mapping, Optional

from .errors import ValidationError
from .models import ConverterConfig
from .utils import is_array, is_finite_number

_GEOMETRY_TYPES = ("LineString", "MultiLineString")


def validate_geojson(
    geojson: Any, config: Optional[ConverterConfig] = None
) -> None:
    """Raise ``ValidationError`` unless ``geojson`` is a renderable route.

    Accepts a Feature or a FeatureCollection whose features all carry a
    LineString or MultiLineString within the configured coordinate limits.
    """

    config = config or ConverterConfig()
    if not isinstance(geojson, Mapping):
        raise ValidationError("Invalid GeoJSON: expected object")
    kind = geojson.get("type")
    if kind == "Feature":
        validate_feature(geojson, config)
    elif kind == "FeatureCollection":
        validate_feature_collection(geojson, config)
    else:
        raise ValidationError(
            f"Invalid GeoJSON type: {kind}. Expected Feature or FeatureCollection"
        )


def validate_feature_collection(
    collection: Mapping[str, Any], config: ConverterConfig
) -> None:
    features = collection.get("features")
    if not is_array(features):
        raise ValidationError("Invalid FeatureCollection: features must be an array")
    if len(features) == 0:
        raise ValidationError("Invalid FeatureCollection: no features")
    for index, feature in enumerate(features):
        try:
            validate_feature(feature, config)
        except ValidationError as exc:
            raise ValidationError(f"Invalid feature at index {index}: {exc}") from exc


def validate_feature(feature: Any, config: ConverterConfig) -> None:
    if not isinstance(feature, Mapping) or feature.get("type") != "Feature":
        raise ValidationError("Invalid Feature: expected object of type Feature")
    geometry = feature.get("geometry")
    if not isinstance(geometry, Mapping):
        raise ValidationError("Invalid Feature: missing geometry")
    properties = feature.get("properties")
    if not isinstance(properties, Mapping):
        raise ValidationError("Invalid Feature: missing properties")

    geometry_type = geometry.get("type")
    if geometry_type not in _GEOMETRY_TYPES:
        raise ValidationError(
            f"Invalid geometry type: {geometry_type}. "
            "Expected LineString or MultiLineString"
        )
    coordinates = geometry.get("coordinates")
    if geometry_type == "LineString":
        validate_line_coordinates(coordinates, config)
    else:
        if not is_array(coordinates):
            raise ValidationError("Invalid geometry: coordinates must be an array")
        for index, line in enumerate(coordinates):
            try:
                validate_line_coordinates(line, config)
            except ValidationError as exc:
                raise ValidationError(
                    f"Invalid MultiLineString coordinates at index {index}: {exc}"
                ) from exc

    _check_text_length(properties, "name", config.max_name_length)
    _check_text_length(properties, "description", config.max_description_length)


def validate_line_coordinates(coordinates: Any, config: ConverterConfig) -> None:
    """Check point count and the WGS84 range of every LineString position."""

    if not is_array(coordinates):
        raise ValidationError("LineString coordinates must be an array")
    count = len(coordinates)
    if count < config.min_coordinates:
        raise ValidationError(
            f"LineString must have at least {config.min_coordinates} coordinates"
        )
    if count > config.max_coordinates:
        raise ValidationError(
            f"LineString has too many coordinates "
            f"({count} > {config.max_coordinates})"
        )
    for index, coord in enumerate(coordinates):
        if not is_array(coord) or len(coord) < 2:
            raise ValidationError(
                f"Invalid coordinate at index {index}: expected [lon, lat] array"
            )
        lon, lat = coord[0], coord[1]
        if not (is_finite_number(lon) and is_finite_number(lat)):
            raise ValidationError(
                f"Invalid coordinate at index {index}: expected numeric values"
            )
        if not -180.0 <= lon <= 180.0:
            raise ValidationError(
                f"Invalid longitude at index {index}: {lon} (must be -180 to 180)"
            )
        if not -90.0 <= lat <= 90.0:
            raise ValidationError(
                f"Invalid latitude at index {index}: {lat} (must be -90 to 90)"
            )


def _check_text_length(properties: Mapping[str, Any], key: str, limit: int) -> None:
    value = properties.get(key)
    if isinstance(value, str) and len(value) > limit:
        raise ValidationError(
            f"Property {key!r} is too long ({len(value)} > {limit} characters)"
        )
