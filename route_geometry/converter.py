"""Unified conversion of parsed route data into render-ready GeoJSON.

Route objects come from upstream GPX/TCX parsers, Strava payloads, or plain
coordinate lists. ``convert`` normalises them into an immutable ``Route``,
assembles a LineString Feature (or a FeatureCollection when the route crosses
the antimeridian), attaches styling hints, and validates the result.
"""

from __future__ import annotations

from dataclasses import replace
from datetime import datetime, timezone
import logging
import re
from typing import Any, Callable, Dict, List, Mapping, Optional, Sequence, Tuple, Union

from .activity_types import (
    activity_color,
    activity_line_width,
    activity_render_order,
    activity_type_from_payload,
    normalize_activity_type,
)
from .errors import ValidationError
from .geometry import (
    Bounds,
    LonLat,
    calculate_bounds,
    clamp_latitudes,
    decode_polyline,
    duration_s,
    elevation_profile,
    elevation_stats,
    route_distance_m,
    simplify_coordinates,
    split_at_antimeridian,
    transform_coordinates,
)
from .geometry.projection import WEB_MERCATOR, WGS84
from .models import SOURCE_ALIASES, ConverterConfig, Route, SourceKind
from .utils import has_items, is_array, is_finite_number
from .validation import validate_geojson

LOGGER = logging.getLogger(__name__)

RouteData = Union[Mapping[str, Any], Sequence[Sequence[float]]]
GeoJSON = Dict[str, Any]

_STRAVA_KEYS = ("activity_id", "map", "polyline", "latlng")
_SOURCE_TAGS = {member.value for member in SourceKind} | set(SOURCE_ALIASES)
# Fractional seconds; Python 3.10 fromisoformat only takes 3 or 6 digits.
_ISO_FRACTION = re.compile(r"(\d{2}:\d{2}:\d{2})\.(\d+)")


def supported_sources() -> List[str]:
    return [member.value for member in SourceKind]


def detect_source(route_data: Any) -> SourceKind:
    """Infer the ``SourceKind`` of an untagged route object.

    Explicit ``format`` / ``source`` tags win; otherwise Strava payloads are
    recognised by their activity id, map, or encoded polyline, and anything
    else carrying coordinates is treated as a plain coordinate route.

    Raises:
        ValidationError: nothing in ``route_data`` identifies a source.
    """

    if isinstance(route_data, Mapping):
        for key in ("format", "source"):
            tag = str(route_data.get(key) or "").strip().lower()
            if tag in _SOURCE_TAGS:
                return SourceKind.parse(tag)
        if any(_present(route_data.get(key)) for key in _STRAVA_KEYS):
            return SourceKind.STRAVA_POLYLINE
        if "coordinates" in route_data:
            return SourceKind.COORDINATES
    elif is_array(route_data):
        return SourceKind.COORDINATES
    raise ValidationError("Unable to auto-detect route data type")


def normalize_coordinates(coordinates: Any) -> List[LonLat]:
    """Return ``coordinates`` as (lon, lat) pairs, whichever order they used.

    Pairs carry no order tag, so the order is inferred per pair:

    * a value above 90 in magnitude can only be a longitude;
    * with both values within +/-90, a negative value next to a non-negative
      one is taken as a western-hemisphere longitude;
    * anything else is assumed to be (lat, lon), the GPX/TCX convention.

    The last two rules are a heuristic and can pick the wrong order for
    routes near the equator and prime meridian.

    Raises:
        ValidationError: a pair is malformed, non-numeric, or out of range
            once ordered.
    """

    if not is_array(coordinates):
        raise ValidationError("Invalid coordinates: expected array")
    return [_normalize_pair(coord, index) for index, coord in enumerate(coordinates)]


def build_route(
    route_data: RouteData,
    source: SourceKind,
    *,
    config: Optional[ConverterConfig] = None,
    name: Optional[str] = None,
    description: Optional[str] = None,
    activity_type: Optional[str] = None,
) -> Route:
    """Build the immutable ``Route`` for ``route_data`` of a known source.

    ``name``, ``description`` and ``activity_type`` override the values found
    in ``route_data``.
    """

    config = config or ConverterConfig()
    if source is not SourceKind.COORDINATES and not isinstance(route_data, Mapping):
        raise ValidationError(
            f"Invalid {source.value} data: expected object with coordinates"
        )
    route = _ROUTE_BUILDERS[source](route_data, config)
    overrides: Dict[str, Any] = {}
    if name is not None:
        overrides["name"] = name
    if description is not None:
        overrides["description"] = description
    if activity_type is not None:
        overrides["activity_type"] = normalize_activity_type(activity_type)
    if overrides:
        route = replace(route, **overrides)
    _check_point_count(route.coordinates, config)
    return route


def convert(
    route_data: RouteData,
    *,
    source: Optional[Union[SourceKind, str]] = None,
    config: Optional[ConverterConfig] = None,
    include_elevation: bool = True,
    include_timestamps: bool = True,
    validate_output: bool = True,
    handle_multi_segment: bool = True,
    optimize_for_map: bool = True,
    simplify: bool = False,
    tolerance_m: Optional[float] = None,
    add_style_hints: bool = True,
    include_projected: bool = False,
    name: Optional[str] = None,
    description: Optional[str] = None,
    activity_type: Optional[str] = None,
) -> GeoJSON:
    """Convert a parsed route into a GeoJSON Feature or FeatureCollection.

    Args:
        route_data: Route mapping (or bare coordinate list) from a parser.
        source: Source tag; detected with :func:`detect_source` when omitted.
        config: Limits and defaults for this call.
        include_elevation: Attach an ``elevationProfile`` when samples exist.
        include_timestamps: Attach ``duration``/``startTime``/``endTime``.
        validate_output: Run :func:`validate_geojson` on the result.
        handle_multi_segment: Split antimeridian crossings into a
            FeatureCollection.
        optimize_for_map: Clamp polar latitudes and apply styling/simplification.
        simplify: Drop vertices closer than ``tolerance_m`` to the line.
        tolerance_m: Simplification tolerance; defaults to the config value.
        add_style_hints: Attach ``lineColor``/``lineWidth``/``lineOpacity``/
            ``renderOrder``.
        include_projected: Attach Web Mercator ``projectedCoordinates``.
        name: Overrides the route name.
        description: Overrides the route description.
        activity_type: Overrides the route activity type.

    Raises:
        ValidationError: unsupported source, malformed or out-of-range
            input, or output that breaks the GeoJSON invariants.
        DecodeError: a Strava polyline cannot be decoded.
        RangeError: ``include_projected`` is set for latitudes beyond the
            Web Mercator limit without ``optimize_for_map`` clamping.
    """

    config = config or ConverterConfig()
    if route_data is None or not (
        isinstance(route_data, Mapping) or is_array(route_data)
    ):
        raise ValidationError("Invalid route data: expected object")
    if source is None:
        kind = detect_source(route_data)
        LOGGER.debug("Detected route source %s", kind.value)
    else:
        kind = SourceKind.parse(source)

    route = build_route(
        route_data,
        kind,
        config=config,
        name=name,
        description=description,
        activity_type=activity_type,
    )
    geojson = route_to_feature(
        route,
        config=config,
        include_elevation=include_elevation,
        include_timestamps=include_timestamps,
    )
    if handle_multi_segment:
        geojson = split_multi_segment(geojson, config=config)
    if optimize_for_map:
        geojson = optimize_geojson_for_map(
            geojson,
            config=config,
            simplify=simplify,
            tolerance_m=tolerance_m,
            add_style_hints=add_style_hints,
        )
    if validate_output:
        try:
            validate_geojson(geojson, config)
        except ValidationError as exc:
            LOGGER.warning(
                "GeoJSON validation failed for %s route %r: %s",
                kind.value,
                route.name,
                exc,
            )
            raise
    if include_projected:
        geojson = _attach_projected(geojson)
    return geojson


def route_to_feature(
    route: Route,
    *,
    config: Optional[ConverterConfig] = None,
    include_elevation: bool = True,
    include_timestamps: bool = True,
) -> GeoJSON:
    """Assemble the single LineString Feature for ``route``."""

    config = config or ConverterConfig()
    coordinates = list(route.coordinates)
    stats = elevation_stats(route.elevation) if route.elevation else None
    distance = route.distance if route.distance else route_distance_m(coordinates)
    bounds = route.bounds or calculate_bounds(
        coordinates, threshold=config.antimeridian_threshold
    )
    if route.total_elevation_gain is not None:
        gain: Optional[float] = route.total_elevation_gain
    else:
        gain = stats.gain if stats else 0

    properties: Dict[str, Any] = {
        "name": route.name,
        "description": route.description,
        "activityType": route.activity_type,
        "source": route.source.value,
        "distance": distance,
        "elevationGain": gain,
        "elevationLoss": stats.loss if stats else None,
        "elevationMin": stats.min if stats else None,
        "elevationMax": stats.max if stats else None,
        "elevationAvg": stats.avg if stats else None,
        "hasElevation": bool(route.elevation),
        "hasTimestamps": bool(route.timestamps),
        "totalPoints": len(coordinates),
        "bounds": bounds.to_dict() if bounds else None,
    }
    properties.update(route.extra_properties)

    if include_elevation and route.elevation:
        properties["elevationProfile"] = elevation_profile(route.elevation, coordinates)
    if include_timestamps:
        if route.timestamps:
            properties["duration"] = duration_s(route.timestamps)
            properties["startTime"] = route.timestamps[0].isoformat()
            properties["endTime"] = route.timestamps[-1].isoformat()
        elif route.duration is not None:
            properties["duration"] = route.duration

    return {
        "type": "Feature",
        "geometry": {
            "type": "LineString",
            "coordinates": [[lon, lat] for lon, lat in coordinates],
        },
        "properties": properties,
    }


def split_multi_segment(
    feature: GeoJSON, *, config: Optional[ConverterConfig] = None
) -> GeoJSON:
    """Split a LineString Feature at antimeridian crossings.

    Returns ``feature`` unchanged when there is no crossing, otherwise a
    FeatureCollection with one Feature per segment. A segment holding a
    single point is emitted as a zero-length line so it stays drawable.
    """

    config = config or ConverterConfig()
    if feature.get("type") != "Feature" or feature["geometry"]["type"] != "LineString":
        return feature
    coordinates = [tuple(coord) for coord in feature["geometry"]["coordinates"]]
    segments = split_at_antimeridian(
        coordinates, threshold=config.antimeridian_threshold
    )
    if len(segments) <= 1:
        return feature

    LOGGER.debug(
        "Route %r crosses the antimeridian; split into %d segments",
        feature["properties"].get("name"),
        len(segments),
    )
    features: List[GeoJSON] = []
    for index, segment in enumerate(segments):
        if len(segment) == 1:
            segment = [segment[0], segment[0]]
        features.append(
            {
                "type": "Feature",
                "geometry": {
                    "type": "LineString",
                    "coordinates": [[lon, lat] for lon, lat in segment],
                },
                "properties": {
                    **feature["properties"],
                    "segmentIndex": index,
                    "segmentDistance": route_distance_m(segment),
                    "totalSegments": len(segments),
                },
            }
        )
    return {
        "type": "FeatureCollection",
        "features": features,
        "properties": {
            **feature["properties"],
            "isMultiSegment": True,
            "totalSegments": len(segments),
            "totalDistance": sum(f["properties"]["segmentDistance"] for f in features),
        },
    }


def optimize_geojson_for_map(
    geojson: GeoJSON,
    *,
    config: Optional[ConverterConfig] = None,
    simplify: bool = False,
    tolerance_m: Optional[float] = None,
    add_style_hints: bool = True,
) -> GeoJSON:
    """Clamp polar latitudes, optionally simplify, and attach style hints."""

    config = config or ConverterConfig()
    tolerance = config.simplify_tolerance_m if tolerance_m is None else tolerance_m

    def _optimize(feature: GeoJSON) -> GeoJSON:
        geometry = feature["geometry"]
        properties = dict(feature["properties"])
        if geometry["type"] == "LineString":
            lines = [geometry["coordinates"]]
        else:
            lines = geometry["coordinates"]
        optimized_lines = []
        for line in lines:
            points = clamp_latitudes(line, clamp_to_mercator=config.clamp_to_mercator)
            if simplify:
                points = simplify_coordinates(points, tolerance)
            optimized_lines.append([[lon, lat] for lon, lat in points])
        if add_style_hints:
            activity = properties.get("activityType")
            properties.update(
                {
                    "lineColor": activity_color(activity),
                    "lineWidth": activity_line_width(properties.get("distance") or 0),
                    "lineOpacity": config.line_opacity,
                    "renderOrder": activity_render_order(activity),
                }
            )
        if simplify:
            properties["totalPoints"] = sum(len(line) for line in optimized_lines)
        return {
            **feature,
            "geometry": {
                **geometry,
                "coordinates": (
                    optimized_lines[0]
                    if geometry["type"] == "LineString"
                    else optimized_lines
                ),
            },
            "properties": properties,
        }

    if geojson["type"] == "FeatureCollection":
        return {**geojson, "features": [_optimize(f) for f in geojson["features"]]}
    return _optimize(geojson)


def project_geojson(geojson: GeoJSON) -> List[List[Tuple[float, float]]]:
    """Return Web Mercator coordinates for every LineString in ``geojson``.

    One list per LineString, in feature order, for renderers that place lines
    in planar pixel space.
    """

    if geojson["type"] == "FeatureCollection":
        features = geojson["features"]
    else:
        features = [geojson]
    projected: List[List[Tuple[float, float]]] = []
    for feature in features:
        geometry = feature["geometry"]
        lines = (
            [geometry["coordinates"]]
            if geometry["type"] == "LineString"
            else geometry["coordinates"]
        )
        for line in lines:
            projected.append(transform_coordinates(line, WGS84, WEB_MERCATOR))
    return projected


# ---------------------------------------------------------------------------
# Source builders
# ---------------------------------------------------------------------------


def _build_gpx_route(data: Mapping[str, Any], config: ConverterConfig) -> Route:
    coordinates = _required_coordinates(data, "GPX")
    metadata = data.get("metadata") or {}
    return _file_route(
        data,
        coordinates,
        source=SourceKind.GPX,
        default_name="GPX Route",
        default_type="gpx",
        extra={
            "format": "gpx",
            "filename": metadata.get("filename"),
            "created": metadata.get("created_at"),
        },
    )


def _build_tcx_route(data: Mapping[str, Any], config: ConverterConfig) -> Route:
    coordinates = _required_coordinates(data, "TCX")
    metadata = data.get("metadata") or {}
    return _file_route(
        data,
        coordinates,
        source=SourceKind.TCX,
        default_name="TCX Activity",
        default_type="activity",
        extra={
            "format": "tcx",
            "sport": metadata.get("sport"),
            "filename": metadata.get("filename"),
            "created": metadata.get("created_at"),
        },
    )


def _build_strava_route(data: Mapping[str, Any], config: ConverterConfig) -> Route:
    coordinates = _strava_coordinates(data, config)
    elevation_samples = data.get("elevation_profile")
    elevation = (
        _parse_elevation(elevation_samples, len(coordinates), strict=False)
        if has_items(elevation_samples)
        else None
    )
    has_time = has_items(data.get("time_series")) or bool(data.get("has_time_data"))
    duration = data.get("elapsed_time") or data.get("moving_time")
    return Route(
        coordinates=tuple(coordinates),
        source=SourceKind.STRAVA_POLYLINE,
        name=_text(data.get("name") or data.get("activity_name"), "Strava Activity"),
        activity_type=activity_type_from_payload(data, "activity"),
        description=_text(data.get("description"), ""),
        elevation=elevation,
        duration=_optional_number(duration, "duration"),
        distance=_optional_number(data.get("distance"), "distance"),
        total_elevation_gain=_optional_number(
            data.get("total_elevation_gain", data.get("elevation_gain")),
            "total_elevation_gain",
        ),
        bounds=_coerce_bounds(data.get("bounds")),
        extra_properties={
            "activityId": data.get("id", data.get("activity_id")),
            "averageSpeed": data.get("average_speed"),
            "maxSpeed": data.get("max_speed"),
            "movingTime": data.get("moving_time"),
            "elapsedTime": data.get("elapsed_time"),
            "hasElevation": bool(elevation or data.get("has_altitude_data")),
            "hasTimestamps": has_time,
        },
    )


def _build_coordinates_route(data: RouteData, config: ConverterConfig) -> Route:
    if isinstance(data, Mapping):
        if not is_array(data.get("coordinates")):
            raise ValidationError(
                "Invalid coordinate data: expected array or object with coordinates"
            )
        return _file_route(
            data,
            normalize_coordinates(data["coordinates"]),
            source=SourceKind.COORDINATES,
            default_name="Route",
            default_type="route",
            extra={},
        )
    return Route(
        coordinates=tuple(normalize_coordinates(data)),
        source=SourceKind.COORDINATES,
        name="Route",
        activity_type=normalize_activity_type("route"),
    )


_ROUTE_BUILDERS: Dict[SourceKind, Callable[[Any, ConverterConfig], Route]] = {
    SourceKind.GPX: _build_gpx_route,
    SourceKind.TCX: _build_tcx_route,
    SourceKind.STRAVA_POLYLINE: _build_strava_route,
    SourceKind.COORDINATES: _build_coordinates_route,
}


def _file_route(
    data: Mapping[str, Any],
    coordinates: List[LonLat],
    *,
    source: SourceKind,
    default_name: str,
    default_type: str,
    extra: Dict[str, Any],
) -> Route:
    """Build a ``Route`` from a GPX/TCX-shaped mapping with parallel series."""

    count = len(coordinates)
    elevation = (
        _parse_elevation(data["elevation"], count, strict=True)
        if has_items(data.get("elevation"))
        else None
    )
    timestamps = (
        _parse_timestamps(data["timestamps"], count)
        if has_items(data.get("timestamps"))
        else None
    )
    return Route(
        coordinates=tuple(coordinates),
        source=source,
        name=_text(data.get("name"), default_name),
        activity_type=activity_type_from_payload(data, default_type),
        description=_text(data.get("description"), ""),
        elevation=elevation,
        timestamps=timestamps,
        distance=_optional_number(data.get("distance"), "distance"),
        total_elevation_gain=_optional_number(
            data.get("total_elevation_gain"), "total_elevation_gain"
        ),
        bounds=_coerce_bounds(data.get("bounds")),
        extra_properties=extra,
    )


def _required_coordinates(data: Mapping[str, Any], label: str) -> List[LonLat]:
    coordinates = data.get("coordinates")
    if not is_array(coordinates):
        raise ValidationError(f"Invalid {label} data: missing coordinates array")
    return normalize_coordinates(coordinates)


def _strava_coordinates(
    data: Mapping[str, Any], config: ConverterConfig
) -> List[LonLat]:
    """Resolve Strava coordinates from explicit arrays, streams, or polylines."""

    geometry = data.get("geometry") or {}
    map_payload = data.get("map") or {}
    for candidate in (
        data.get("coordinates"),
        geometry.get("coordinates"),
        map_payload.get("coordinates"),
    ):
        if is_array(candidate) and len(candidate):
            return normalize_coordinates(candidate)

    latlng = data.get("latlng")
    if is_array(latlng) and len(latlng):
        # Strava streams are explicitly (lat, lon).
        return [
            _checked_lonlat(_pair(coord, index)[::-1], index)
            for index, coord in enumerate(latlng)
        ]

    encoded = (
        data.get("polyline")
        or map_payload.get("polyline")
        or map_payload.get("summary_polyline")
    )
    if encoded:
        return decode_polyline(
            encoded, precision=config.polyline_precision, validate_coords=True
        )
    raise ValidationError("Invalid Strava data: no coordinate data found")


# ---------------------------------------------------------------------------
# Field parsing
# ---------------------------------------------------------------------------


def _normalize_pair(coord: Any, index: int) -> LonLat:
    first, second = _pair(coord, index)
    if abs(first) > 90 and abs(second) <= 90:
        lon, lat = first, second
    elif abs(first) <= 90 and abs(second) > 90:
        lon, lat = second, first
    elif abs(first) <= 90 and abs(second) <= 90:
        if first < 0 <= second:
            lon, lat = first, second
        elif second < 0 <= first:
            lon, lat = second, first
        else:
            lon, lat = second, first
    else:
        lon, lat = first, second
    return _checked_lonlat((lon, lat), index)


def _pair(coord: Any, index: int) -> Tuple[float, float]:
    if not is_array(coord) or len(coord) < 2:
        raise ValidationError(
            f"Invalid coordinate at index {index}: "
            "expected [lat, lon] or [lon, lat] array"
        )
    first, second = coord[0], coord[1]
    if not (is_finite_number(first) and is_finite_number(second)):
        raise ValidationError(
            f"Invalid coordinate at index {index}: expected numeric values, "
            f"got [{type(first).__name__}, {type(second).__name__}]"
        )
    return float(first), float(second)


def _checked_lonlat(pair: Sequence[float], index: int) -> LonLat:
    lon, lat = pair[0], pair[1]
    if abs(lon) > 180 or abs(lat) > 90:
        raise ValidationError(
            f"Invalid coordinate at index {index}: [{lon}, {lat}] "
            "(longitude must be -180 to 180, latitude -90 to 90)"
        )
    return lon, lat


def _parse_elevation(samples: Any, count: int, *, strict: bool) -> Tuple[float, ...]:
    """Return elevation metres from mappings or raw numeric samples."""

    if not is_array(samples):
        raise ValidationError("Invalid elevation data: expected array")
    if strict and len(samples) != count:
        raise ValidationError(
            f"Elevation series has {len(samples)} samples for {count} coordinates"
        )
    values = []
    for index, sample in enumerate(samples):
        value = sample
        if isinstance(sample, Mapping):
            value = sample.get("elevation_meters")
            if value is None:
                value = sample.get("elevation")
        if not is_finite_number(value):
            raise ValidationError(
                f"Invalid elevation sample at index {index}: {sample!r}"
            )
        values.append(float(value))
    return tuple(values)


def _parse_timestamps(samples: Any, count: int) -> Tuple[datetime, ...]:
    if not is_array(samples):
        raise ValidationError("Invalid timestamp data: expected array")
    if len(samples) != count:
        raise ValidationError(
            f"Timestamp series has {len(samples)} samples for {count} coordinates"
        )
    parsed = tuple(
        _parse_timestamp(sample, index) for index, sample in enumerate(samples)
    )
    aware = {value.tzinfo is not None for value in parsed}
    if len(aware) > 1:
        raise ValidationError("Timestamp series mixes timezone-aware and naive values")
    return parsed


def _parse_timestamp(sample: Any, index: int) -> datetime:
    value = sample
    if isinstance(sample, Mapping):
        value = (
            sample.get("timestamp") or sample.get("iso_string") or sample.get("time")
        )
    if isinstance(value, datetime):
        return value
    if is_finite_number(value):
        return datetime.fromtimestamp(float(value), tz=timezone.utc)
    if isinstance(value, str):
        text = value.strip()
        if text.endswith(("Z", "z")):
            text = text[:-1] + "+00:00"
        text = _ISO_FRACTION.sub(_six_digit_fraction, text, count=1)
        try:
            return datetime.fromisoformat(text)
        except ValueError as exc:
            raise ValidationError(
                f"Invalid timestamp at index {index}: {value!r}"
            ) from exc
    raise ValidationError(f"Invalid timestamp at index {index}: {sample!r}")


def _six_digit_fraction(match: re.Match) -> str:
    return f"{match.group(1)}.{match.group(2)[:6].ljust(6, '0')}"

def _coerce_bounds(value: Any) -> Optional[Bounds]:
    """Accept precomputed bounds as a ``Bounds`` or its dict form."""

    if value is None or isinstance(value, Bounds):
        return value
    if not isinstance(value, Mapping):
        raise ValidationError("Invalid bounds: expected object")
    try:
        southwest = _pair(value["southwest"], 0)
        northeast = _pair(value["northeast"], 1)
    except KeyError as exc:
        raise ValidationError(f"Invalid bounds: missing {exc.args[0]}") from exc
    center = value.get("center")
    return Bounds(
        southwest=southwest,
        northeast=northeast,
        center=(
            _pair(center, 2)
            if center is not None
            else (
                (southwest[0] + northeast[0]) / 2.0,
                (southwest[1] + northeast[1]) / 2.0,
            )
        ),
        antimeridian_crossing=bool(value.get("antimeridianCrossing", False)),
    )


def _optional_number(value: Any, label: str) -> Optional[float]:
    if value is None:
        return None
    if not is_finite_number(value):
        raise ValidationError(f"Invalid {label}: expected number, got {value!r}")
    return float(value)


def _text(value: Any, default: str) -> str:
    if value is None:
        return default
    text = str(value).strip()
    return text or default


def _present(value: Any) -> bool:
    """Truthiness that also works for numpy arrays."""

    if is_array(value):
        return len(value) > 0
    return bool(value)

def _check_point_count(coordinates: Sequence[LonLat], config: ConverterConfig) -> None:
    count = len(coordinates)
    if count < config.min_coordinates:
        raise ValidationError(
            f"Route must have at least {config.min_coordinates} coordinates, "
            f"got {count}"
        )
    if count > config.max_coordinates:
        raise ValidationError(
            f"Route has too many coordinates ({count} > {config.max_coordinates})"
        )


def _attach_projected(geojson: GeoJSON) -> GeoJSON:
    def _with_projection(feature: GeoJSON) -> GeoJSON:
        projected = project_geojson(feature)
        if feature["geometry"]["type"] == "LineString":
            value: Any = [list(point) for point in projected[0]]
        else:
            value = [[list(point) for point in line] for line in projected]
        return {
            **feature,
            "properties": {**feature["properties"], "projectedCoordinates": value},
        }

    if geojson["type"] == "FeatureCollection":
        features = [_with_projection(f) for f in geojson["features"]]
        return {**geojson, "features": features}
    return _with_projection(geojson)
