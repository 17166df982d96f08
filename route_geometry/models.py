"""Route input model, source tags, and conversion configuration."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any, Mapping, Optional, Tuple

from .config import (
    ANTIMERIDIAN_THRESHOLD_DEG,
    CLAMP_TO_MERCATOR_LIMITS,
    GEOMETRY_MAX_COORDINATES,
    GEOMETRY_MAX_DESCRIPTION_LENGTH,
    GEOMETRY_MAX_NAME_LENGTH,
    GEOMETRY_MIN_COORDINATES,
    LINE_OPACITY,
    POLYLINE_PRECISION,
    SIMPLIFY_TOLERANCE_M,
)
from .errors import ValidationError
from .geometry.models import Bounds, LonLat


SOURCE_ALIASES = {
    "gpx_upload": "gpx",
    "tcx_upload": "tcx",
    "strava": "strava_polyline",
}


class SourceKind(str, Enum):
    """Upstream format a route object was produced from.

    ``parse`` also accepts the upload and shorthand tags upstream parsers use
    (``gpx_upload``, ``tcx_upload``, ``strava``).
    """

    GPX = "gpx"
    TCX = "tcx"
    STRAVA_POLYLINE = "strava_polyline"
    COORDINATES = "coordinates"

    @classmethod
    def parse(cls, value: "SourceKind | str") -> "SourceKind":
        """Return the member for ``value`` or raise ``ValidationError``."""

        if isinstance(value, cls):
            return value
        try:
            tag = str(value).strip().lower()
            return cls(SOURCE_ALIASES.get(tag, tag))
        except ValueError as exc:
            supported = ", ".join(member.value for member in cls)
            raise ValidationError(
                f"Unsupported source type: {value!r}. Supported: {supported}"
            ) from exc


@dataclass(frozen=True, slots=True)
class ConverterConfig:
    """Limits and defaults applied by a single conversion call."""

    min_coordinates: int = GEOMETRY_MIN_COORDINATES
    max_coordinates: int = GEOMETRY_MAX_COORDINATES
    max_name_length: int = GEOMETRY_MAX_NAME_LENGTH
    max_description_length: int = GEOMETRY_MAX_DESCRIPTION_LENGTH
    polyline_precision: int = POLYLINE_PRECISION
    antimeridian_threshold: float = ANTIMERIDIAN_THRESHOLD_DEG
    clamp_to_mercator: bool = CLAMP_TO_MERCATOR_LIMITS
    simplify_tolerance_m: float = SIMPLIFY_TOLERANCE_M
    line_opacity: float = LINE_OPACITY


@dataclass(frozen=True, slots=True)
class Route:
    """Normalized route handed from a source builder to feature assembly.

    ``coordinates`` are always (lon, lat). ``elevation`` and ``timestamps``
    are parallel series when present. ``duration`` is a reported duration in
    seconds for sources without timestamps.
    """

    coordinates: Tuple[LonLat, ...]
    source: SourceKind
    name: str
    activity_type: str
    description: str = ""
    elevation: Optional[Tuple[float, ...]] = None
    timestamps: Optional[Tuple[datetime, ...]] = None
    duration: Optional[float] = None
    distance: Optional[float] = None
    total_elevation_gain: Optional[float] = None
    bounds: Optional[Bounds] = None
    extra_properties: Mapping[str, Any] = field(default_factory=dict)
