"""Coordinate-level primitives: polyline codec, projection, seams, measures."""

from .antimeridian import crosses_antimeridian, split_at_antimeridian
from .bounds import calculate_bounds
from .measures import (
    cumulative_distances_m,
    duration_s,
    elevation_profile,
    elevation_stats,
    route_distance_m,
    segment_lengths_m,
)
from .models import (
    MAX_MERCATOR_LAT,
    Bounds,
    ElevationStats,
    GeographicPoint,
    LonLat,
    ProjectedPoint,
)
from .polyline_codec import decode_polyline, decode_strava_map, encode_polyline
from .projection import (
    WEB_MERCATOR,
    WGS84,
    clamp_latitudes,
    normalize_longitude,
    to_geographic,
    to_projected,
    transform_coordinates,
)
from .simplify import simplify_coordinates

__all__ = [
    "MAX_MERCATOR_LAT",
    "WEB_MERCATOR",
    "WGS84",
    "Bounds",
    "ElevationStats",
    "GeographicPoint",
    "LonLat",
    "ProjectedPoint",
    "calculate_bounds",
    "clamp_latitudes",
    "crosses_antimeridian",
    "cumulative_distances_m",
    "decode_polyline",
    "decode_strava_map",
    "duration_s",
    "elevation_profile",
    "elevation_stats",
    "encode_polyline",
    "normalize_longitude",
    "route_distance_m",
    "segment_lengths_m",
    "simplify_coordinates",
    "split_at_antimeridian",
    "to_geographic",
    "to_projected",
    "transform_coordinates",
]
