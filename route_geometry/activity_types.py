"""Utilities for classifying activity types and deriving map styling hints."""

from __future__ import annotations

from typing import Any, Mapping

__all__ = [
    "normalize_activity_type",
    "activity_type_from_payload",
    "activity_color",
    "activity_line_width",
    "activity_render_order",
]

UNKNOWN_ACTIVITY = "unknown"
DEFAULT_LINE_COLOR = "#74B9FF"

# Strava and GPX/TCX labels folded onto the styling categories below.
_TYPE_ALIASES = {
    "ride": "cycling",
    "virtualride": "cycling",
    "ebikeride": "cycling",
    "bike": "cycling",
    "bicycle": "cycling",
    "run": "running",
    "virtualrun": "running",
    "jog": "running",
    "hike": "hiking",
    "walk": "walking",
    "swim": "swimming",
    "rowing": "rowing",
    "skiing": "skiing",
    "gpx track": "gpx",
    "gpx route": "gpx",
    "tcx activity": "activity",
}

_COLORS = {
    "cycling": "#FF6B35",
    "running": "#4ECDC4",
    "hiking": "#45B7D1",
    "walking": "#96CEB4",
    "swimming": "#FFEAA7",
    "rowing": "#DDA0DD",
    "skiing": "#E17055",
    "gpx": "#6C5CE7",
    "activity": "#FD79A8",
}

# Higher values draw on top.
_RENDER_ORDER = {
    "cycling": 3,
    "running": 2,
    "hiking": 2,
    "gpx": 2,
    "walking": 1,
    "swimming": 1,
    "activity": 1,
}

# (minimum exclusive distance in metres, width), widest first.
_LINE_WIDTH_STEPS = (
    (100_000.0, 4),
    (50_000.0, 3),
    (10_000.0, 2),
)


def normalize_activity_type(value: Any) -> str:
    """Return the styling category for a raw activity type label.

    Labels are compared case-insensitively. Known Strava / GPX / TCX names are
    folded onto a shared category (``"Ride"`` and ``"VirtualRide"`` both
    become ``"cycling"``); anything else is returned lower-cased. Missing or
    blank labels map to ``"unknown"``.
    """

    if value is None:
        return UNKNOWN_ACTIVITY
    normalized = str(value).strip().lower()
    if not normalized:
        return UNKNOWN_ACTIVITY
    return _TYPE_ALIASES.get(normalized, normalized)


def activity_type_from_payload(payload: Mapping[str, Any], default: str) -> str:
    """Return the normalised type of a route payload.

    ``type`` is preferred over ``sport_type``: Strava's ``sport_type`` values
    (``TrailRun``, ``GravelRide``) are more specific than the palette.
    """

    for key in ("type", "activity_type", "sport_type"):
        raw = payload.get(key)
        if raw is not None and str(raw).strip():
            return normalize_activity_type(raw)
    return normalize_activity_type(default)


def activity_color(activity_type: str) -> str:
    return _COLORS.get(activity_type, DEFAULT_LINE_COLOR)


def activity_line_width(distance_m: float) -> int:
    """Return a line width stepped by route length (longer routes draw wider)."""

    for threshold, width in _LINE_WIDTH_STEPS:
        if distance_m > threshold:
            return width
    return 1


def activity_render_order(activity_type: str) -> int:
    return _RENDER_ORDER.get(activity_type, 1)
