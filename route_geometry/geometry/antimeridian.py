"""Detection and splitting of routes that cross the 180 degree meridian."""

from __future__ import annotations

from typing import List, Sequence

from ..config import ANTIMERIDIAN_THRESHOLD_DEG
from .models import LonLat


def split_at_antimeridian(
    coordinates: Sequence[LonLat],
    *,
    threshold: float = ANTIMERIDIAN_THRESHOLD_DEG,
) -> List[List[LonLat]]:
    """Split a (lon, lat) sequence wherever consecutive points jump the seam.

    A longitude jump larger than ``threshold`` between neighbours is read as a
    crossing and starts a new segment. No crossing point is interpolated, so
    every input point appears in exactly one segment. A route without a
    crossing comes back as a single segment; an empty input gives ``[]``.
    """

    if len(coordinates) == 0:
        return []
    segments: List[List[LonLat]] = []
    current: List[LonLat] = [coordinates[0]]
    for previous, point in zip(coordinates, coordinates[1:]):
        if abs(point[0] - previous[0]) > threshold:
            segments.append(current)
            current = [point]
        else:
            current.append(point)
    segments.append(current)
    return segments


def crosses_antimeridian(
    coordinates: Sequence[LonLat],
    *,
    threshold: float = ANTIMERIDIAN_THRESHOLD_DEG,
) -> bool:
    """Return ``True`` when any consecutive pair jumps across the seam."""

    return any(
        abs(point[0] - previous[0]) > threshold
        for previous, point in zip(coordinates, coordinates[1:])
    )
