"""Central configuration for route geometry normalization.

Values here are module constants that seed the defaults of
``route_geometry.models.ConverterConfig``. They can be overridden through
environment variables (optionally via a local `.env`). Conversion calls only
ever read the config value they are given.
"""

from __future__ import annotations

import os

from dotenv import load_dotenv


def _env_float(key: str, default: float) -> float:
    value = os.getenv(key)
    if value is None:
        return default
    try:
        return float(value)
    except ValueError:
        return default


def _env_int(key: str, default: int) -> int:
    value = os.getenv(key)
    if value is None:
        return default
    try:
        return int(value)
    except ValueError:
        return default


def _env_bool(key: str, default: bool) -> bool:
    value = os.getenv(key)
    if value is None:
        return default
    normalized = value.strip().lower()
    if normalized in {"1", "true", "yes", "on"}:
        return True
    if normalized in {"0", "false", "no", "off"}:
        return False
    return default


# Load .env from the current directory or any parent folder.
load_dotenv()


# ---------------------------------------------------------------------------
# Geometry limits
# ---------------------------------------------------------------------------
# A LineString needs at least two positions to be drawable.
GEOMETRY_MIN_COORDINATES = _env_int("GEOMETRY_MIN_COORDINATES", 2)

# Upper bound on positions per route. Bounds worst-case CPU and memory per call;
# callers with larger tracks must chunk them first.
GEOMETRY_MAX_COORDINATES = _env_int("GEOMETRY_MAX_COORDINATES", 50_000)

# Text property limits enforced during output validation.
GEOMETRY_MAX_NAME_LENGTH = _env_int("GEOMETRY_MAX_NAME_LENGTH", 200)
GEOMETRY_MAX_DESCRIPTION_LENGTH = _env_int("GEOMETRY_MAX_DESCRIPTION_LENGTH", 1000)


# ---------------------------------------------------------------------------
# Polyline / projection settings
# ---------------------------------------------------------------------------
# Decimal digits kept by the polyline codec (5 => factor 1e5, Google default).
POLYLINE_PRECISION = _env_int("POLYLINE_PRECISION", 5)

# Longitude jump (degrees) between consecutive points treated as a seam crossing.
ANTIMERIDIAN_THRESHOLD_DEG = _env_float("ANTIMERIDIAN_THRESHOLD_DEG", 180.0)

# Clamp polar latitudes to the Web Mercator limit instead of +/-90.
CLAMP_TO_MERCATOR_LIMITS = _env_bool("CLAMP_TO_MERCATOR_LIMITS", True)

# Maximum number of pyproj transformers kept in memory.
TRANSFORMER_CACHE_SIZE = _env_int("TRANSFORMER_CACHE_SIZE", 16)


# ---------------------------------------------------------------------------
# Rendering hints
# ---------------------------------------------------------------------------
# Maximum deviation (metres) allowed when simplification is requested.
SIMPLIFY_TOLERANCE_M = _env_float("SIMPLIFY_TOLERANCE_M", 1.0)

# Opacity attached to every styled feature.
LINE_OPACITY = _env_float("LINE_OPACITY", 0.8)
