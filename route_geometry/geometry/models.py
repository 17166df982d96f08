"""Dataclasses describing coordinates and derived geometry values."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, NamedTuple, Optional, Tuple


LonLat = Tuple[float, float]

# Largest latitude representable in spherical Web Mercator.
MAX_MERCATOR_LAT = 85.0511287798


class ProjectedPoint(NamedTuple):
    """Planar Web Mercator position in metres."""

    x: float
    y: float


class GeographicPoint(NamedTuple):
    """WGS84 position in decimal degrees."""

    lon: float
    lat: float


@dataclass(frozen=True, slots=True)
class Bounds:
    """Bounding rectangle of a coordinate sequence.

    When ``antimeridian_crossing`` is set the box wraps across 180 degrees, so
    ``southwest[0]`` is numerically greater than ``northeast[0]``.
    """

    southwest: LonLat
    northeast: LonLat
    center: LonLat
    antimeridian_crossing: bool = False

    def to_dict(self) -> Dict[str, Any]:
        return {
            "southwest": list(self.southwest),
            "northeast": list(self.northeast),
            "center": list(self.center),
            "antimeridianCrossing": self.antimeridian_crossing,
        }


@dataclass(frozen=True, slots=True)
class ElevationStats:
    """Whole-metre elevation summary derived from a sample series."""

    gain: int = 0
    loss: int = 0
    min: Optional[int] = None
    max: Optional[int] = None
    avg: Optional[int] = None
