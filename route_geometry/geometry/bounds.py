"""Bounding boxes over (lon, lat) sequences, aware of the antimeridian."""

from __future__ import annotations

from typing import Optional, Sequence

from ..config import ANTIMERIDIAN_THRESHOLD_DEG
from ..errors import ValidationError
from .antimeridian import crosses_antimeridian
from .models import Bounds, LonLat
from .projection import PROJECTIONS, WGS84, as_coordinate_array, normalize_longitude


def calculate_bounds(
    coordinates: Optional[Sequence[LonLat]],
    *,
    handle_antimeridian: bool = True,
    projection: str = WGS84,
    threshold: float = ANTIMERIDIAN_THRESHOLD_DEG,
) -> Optional[Bounds]:
    """Return the bounding box of ``coordinates`` or ``None`` when empty.

    For WGS84 input that crosses the seam (and ``handle_antimeridian`` is
    set) the box wraps across 180 degrees: its western edge is the smallest
    longitude east of the prime meridian and its eastern edge the largest
    longitude west of it. Without this the box would span the whole globe.
    """

    if projection not in PROJECTIONS:
        raise ValidationError(
            f"Invalid projection: {projection}. Valid options: {', '.join(PROJECTIONS)}"
        )
    if coordinates is None or len(coordinates) == 0:
        return None

    array = as_coordinate_array(coordinates)
    lons = array[:, 0]
    lats = array[:, 1]
    min_lat = float(lats.min())
    max_lat = float(lats.max())
    center_lat = (min_lat + max_lat) / 2.0

    if (
        handle_antimeridian
        and projection == WGS84
        and crosses_antimeridian(array, threshold=threshold)
    ):
        eastern = lons[lons >= 0.0]
        western = lons[lons < 0.0]
        if eastern.size and western.size:
            west = float(eastern.min())
            east = float(western.max())
            span = (east - west) % 360.0
            center_lon = normalize_longitude(west + span / 2.0)
            return Bounds(
                southwest=(west, min_lat),
                northeast=(east, max_lat),
                center=(center_lon, center_lat),
                antimeridian_crossing=True,
            )

    west = float(lons.min())
    east = float(lons.max())
    return Bounds(
        southwest=(west, min_lat),
        northeast=(east, max_lat),
        center=((west + east) / 2.0, center_lat),
        antimeridian_crossing=False,
    )
