"""Conversions between WGS84 degrees and spherical Web Mercator metres."""

from __future__ import annotations

import logging
import math
from numbers import Real
from threading import RLock
from typing import Any, List, Sequence, Tuple

import numpy as np
from cachetools import LRUCache, cached
from numpy.typing import NDArray
from pyproj import CRS, Transformer

from ..config import (
    CLAMP_TO_MERCATOR_LIMITS,
    TRANSFORMER_CACHE_SIZE,
)
from ..errors import RangeError, ValidationError
from .models import MAX_MERCATOR_LAT, GeographicPoint, LonLat, ProjectedPoint

LOGGER = logging.getLogger(__name__)

WGS84 = "wgs84"
WEB_MERCATOR = "webmercator"
PROJECTIONS = (WGS84, WEB_MERCATOR)

_EPSG_CODES = {WGS84: 4326, WEB_MERCATOR: 3857}

MetricArray = NDArray[np.float64]


@cached(cache=LRUCache(maxsize=max(2, TRANSFORMER_CACHE_SIZE)), lock=RLock())
def get_transformer(from_projection: str, to_projection: str) -> Transformer:
    """Return a shared (lon, lat)-ordered transformer between two projections."""

    return Transformer.from_crs(
        CRS.from_epsg(_EPSG_CODES[from_projection]),
        CRS.from_epsg(_EPSG_CODES[to_projection]),
        always_xy=True,
    )


def to_projected(lon: float, lat: float) -> ProjectedPoint:
    """Project a WGS84 position into Web Mercator metres.

    Raises:
        RangeError: ``lon`` is outside [-180, 180] or ``lat`` is beyond the
            Web Mercator limit. Callers needing polar coverage should run
            :func:`clamp_latitudes` first.
    """

    _check_geographic(lon, lat)
    x, y = get_transformer(WGS84, WEB_MERCATOR).transform(lon, lat)
    return ProjectedPoint(float(x), float(y))


def to_geographic(x: float, y: float) -> GeographicPoint:
    """Convert Web Mercator metres back to WGS84 degrees."""

    lon, lat = get_transformer(WEB_MERCATOR, WGS84).transform(x, y)
    lat = max(-MAX_MERCATOR_LAT, min(MAX_MERCATOR_LAT, float(lat)))
    return GeographicPoint(float(lon), lat)


def transform_coordinates(
    coordinates: Sequence[Sequence[float]],
    from_projection: str,
    to_projection: str,
) -> List[Tuple[float, float]]:
    """Transform a batch of positions between ``wgs84`` and ``webmercator``."""

    for name, label in ((from_projection, "source"), (to_projection, "target")):
        if name not in PROJECTIONS:
            raise ValidationError(
                f"Invalid {label} projection: {name}. "
                f"Valid options: {', '.join(PROJECTIONS)}"
            )
    array = as_coordinate_array(coordinates)
    if from_projection == to_projection or len(array) == 0:
        return [(float(a), float(b)) for a, b in array]

    if from_projection == WGS84:
        for index, (lon, lat) in enumerate(array):
            try:
                _check_geographic(float(lon), float(lat))
            except RangeError as exc:
                raise RangeError(
                    f"Coordinate transformation failed at index {index}: {exc}"
                ) from exc
    LOGGER.debug(
        "Transforming %d positions %s -> %s", len(array), from_projection, to_projection
    )
    xs, ys = get_transformer(from_projection, to_projection).transform(
        array[:, 0], array[:, 1]
    )
    if to_projection == WGS84:
        ys = np.clip(ys, -MAX_MERCATOR_LAT, MAX_MERCATOR_LAT)
    return [(float(a), float(b)) for a, b in zip(xs, ys)]


def clamp_latitudes(
    coordinates: Sequence[Sequence[float]],
    *,
    clamp_to_mercator: bool = CLAMP_TO_MERCATOR_LIMITS,
) -> List[LonLat]:
    """Clamp polar latitudes so the route can be drawn on a Mercator map.

    Longitudes are left untouched. Unlike :func:`to_projected` this never
    fails on range: it is the lossy path for best-effort map compatibility.
    """

    limit = MAX_MERCATOR_LAT if clamp_to_mercator else 90.0
    clamped: List[LonLat] = []
    for index, coord in enumerate(coordinates):
        if len(coord) < 2:
            raise ValidationError(
                f"Invalid coordinate at index {index}: expected [lon, lat] array"
            )
        lon, lat = float(coord[0]), float(coord[1])
        clamped.append((lon, max(-limit, min(limit, lat))))
    return clamped


def normalize_longitude(longitude: float) -> float:
    """Wrap ``longitude`` into the [-180, 180] range."""

    if isinstance(longitude, bool) or not isinstance(longitude, (int, float)):
        raise ValidationError(f"Invalid longitude: expected number, got {longitude!r}")
    if math.isnan(longitude):
        raise ValidationError("Invalid longitude: NaN")
    if -180.0 <= longitude <= 180.0:
        return float(longitude)
    normalized = math.fmod(longitude, 360.0)
    if normalized > 180.0:
        normalized -= 360.0
    elif normalized < -180.0:
        normalized += 360.0
    return normalized


def _check_geographic(lon: float, lat: float) -> None:
    for value in (lon, lat):
        if isinstance(value, bool) or not isinstance(value, Real):
            raise RangeError(f"Invalid coordinate value {value!r}: expected number")
    if not -180.0 <= lon <= 180.0:
        raise RangeError(f"Invalid longitude {lon}: must be between -180 and 180")
    if not -MAX_MERCATOR_LAT <= lat <= MAX_MERCATOR_LAT:
        raise RangeError(
            f"Invalid latitude {lat}: must be between "
            f"-{MAX_MERCATOR_LAT} and {MAX_MERCATOR_LAT}"
        )


def as_coordinate_array(points: Sequence[Any]) -> MetricArray:
    """Convert an arbitrary sequence of 2D positions into a float64 array."""

    if len(points) == 0:
        return np.empty((0, 2), dtype=float)
    try:
        array = np.asarray([tuple(pt)[:2] for pt in points], dtype=float)
    except (TypeError, ValueError) as exc:
        raise ValidationError("Expected a sequence of numeric 2D coordinates") from exc
    if array.ndim != 2 or array.shape[1] != 2:
        raise ValidationError("Expected a sequence of 2D coordinates")
    return array
