"""Route geometry normalization for map rendering."""

from .converter import convert, detect_source, project_geojson, supported_sources
from .errors import (
    DecodeError,
    EncodeError,
    RangeError,
    RouteGeometryError,
    ValidationError,
)
from .models import ConverterConfig, Route, SourceKind
from .validation import validate_geojson

__all__ = [
    "convert",
    "detect_source",
    "project_geojson",
    "supported_sources",
    "validate_geojson",
    "ConverterConfig",
    "Route",
    "SourceKind",
    "RouteGeometryError",
    "DecodeError",
    "EncodeError",
    "RangeError",
    "ValidationError",
]
