"""Metre-tolerance simplification of (lon, lat) routes before rendering."""

from __future__ import annotations

from threading import RLock
from typing import List, Sequence

import numpy as np
from cachetools import LRUCache, cached
from numpy.typing import NDArray
from pyproj import CRS, Transformer
from pyproj.exceptions import CRSError
from shapely.geometry import LineString

from ..config import TRANSFORMER_CACHE_SIZE
from .models import LonLat
from .projection import as_coordinate_array

MetricArray = NDArray[np.float64]


def simplify_coordinates(
    coordinates: Sequence[LonLat], tolerance_m: float
) -> List[LonLat]:
    """Drop vertices that deviate less than ``tolerance_m`` from the line.

    The route is projected into its local UTM zone so the tolerance is in
    metres. Kept vertices are returned unchanged in degrees, endpoints always
    included.
    """

    array = as_coordinate_array(coordinates)
    points = [(float(lon), float(lat)) for lon, lat in array]
    if len(points) < 3 or tolerance_m <= 0:
        return points

    transformer = _local_transformer(_utm_epsg(array))
    xs, ys = transformer.transform(array[:, 0], array[:, 1])
    metric = np.column_stack((xs, ys)).astype(float, copy=False)
    simplified = LineString(metric).simplify(tolerance_m, preserve_topology=False)
    if simplified.is_empty or len(simplified.coords) < 2:
        return [points[0], points[-1]]
    kept = _matching_indices(metric, np.asarray(simplified.coords, dtype=float))
    return [points[index] for index in kept]


def _matching_indices(metric: MetricArray, vertices: MetricArray) -> List[int]:
    """Map simplified vertices back to their positions in the original line."""

    indices: List[int] = []
    cursor = 0
    for vertex in vertices:
        while cursor < len(metric) - 1 and not np.array_equal(metric[cursor], vertex):
            cursor += 1
        indices.append(cursor)
    return indices


def _utm_epsg(array: MetricArray) -> int:
    """Return the EPSG code of the UTM zone containing the route's mean point."""

    mean_lon = float(np.mean(array[:, 0]))
    mean_lat = float(np.mean(array[:, 1]))
    zone = int((mean_lon + 180.0) // 6.0) + 1
    zone = max(1, min(zone, 60))
    if mean_lat >= 0:
        return 32600 + zone
    return 32700 + zone


@cached(cache=LRUCache(maxsize=max(1, TRANSFORMER_CACHE_SIZE)), lock=RLock())
def _local_transformer(epsg: int) -> Transformer:
    """Build a (lon, lat) -> UTM metres transformer, Web Mercator as a fallback."""

    try:
        target_crs = CRS.from_epsg(epsg)
    except CRSError:
        target_crs = CRS.from_epsg(3857)
    return Transformer.from_crs(CRS.from_epsg(4326), target_crs, always_xy=True)
