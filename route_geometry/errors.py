"""Central error types used across the package."""

from __future__ import annotations


class RouteGeometryError(ValueError):
    """Base error for malformed route input or geometry output."""


class DecodeError(RouteGeometryError):
    """Raised when an encoded polyline string cannot be decoded."""


class EncodeError(RouteGeometryError):
    """Raised when a coordinate cannot be encoded into a polyline."""


class RangeError(RouteGeometryError):
    """Raised when projection input falls outside the supported bounds."""


class ValidationError(RouteGeometryError):
    """Raised when route input or GeoJSON output is malformed."""


__all__ = [
    "RouteGeometryError",
    "DecodeError",
    "EncodeError",
    "RangeError",
    "ValidationError",
]
