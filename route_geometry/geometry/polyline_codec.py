"""Encode and decode Google polyline strings.

The wire format stores latitude before longitude for every point; this module
always exposes coordinates as (lon, lat) tuples so they can be dropped straight
into GeoJSON.
"""

from __future__ import annotations

import logging
import math
from numbers import Real
from typing import Any, Iterable, List, Mapping, Optional, Sequence

import numpy as np
import polyline

from ..config import POLYLINE_PRECISION
from ..errors import DecodeError, EncodeError, ValidationError
from .models import LonLat

LOGGER = logging.getLogger(__name__)

# Every encoded character is a 6-bit group offset by 63 ("?" .. "~").
_ALPHABET_MIN = 63
_ALPHABET_MAX = 126

_EXPECTED_SEQUENCE = "Invalid coordinates: expected a sequence of (lon, lat) pairs"


def decode_polyline(
    encoded: Any,
    *,
    precision: int = POLYLINE_PRECISION,
    validate_coords: bool = True,
) -> List[LonLat]:
    """Decode an encoded polyline string into a list of (lon, lat) tuples.

    Args:
        encoded: Polyline text. ``""`` decodes to an empty list.
        precision: Number of decimal digits the string was encoded with.
        validate_coords: Reject decoded points outside the WGS84 ranges
            instead of passing them downstream.

    Raises:
        DecodeError: ``encoded`` is not a string, contains a character outside
            the polyline alphabet, or ends in the middle of a value.
        ValidationError: ``validate_coords`` is set and a decoded point is out
            of range.
    """

    if not isinstance(encoded, str):
        raise DecodeError(
            f"Invalid polyline: expected string, got {type(encoded).__name__}"
        )
    if not encoded:
        return []
    _check_alphabet(encoded)
    try:
        decoded = polyline.decode(encoded, precision, geojson=True)
    except (IndexError, ValueError) as exc:
        raise DecodeError(
            f"Unexpected end of polyline string after {len(encoded)} characters"
        ) from exc

    points = [(float(lon), float(lat)) for lon, lat in decoded]
    if validate_coords:
        for index, (lon, lat) in enumerate(points):
            if not -90.0 <= lat <= 90.0:
                raise ValidationError(f"Invalid latitude {lat} at coordinate {index}")
            if not -180.0 <= lon <= 180.0:
                raise ValidationError(
                    f"Invalid longitude {lon} at coordinate {index}"
                )
    LOGGER.debug(
        "Decoded %d points from %d polyline characters", len(points), len(encoded)
    )
    return points


def encode_polyline(
    coordinates: Iterable[Sequence[Any]],
    *,
    precision: int = POLYLINE_PRECISION,
) -> str:
    """Encode (lon, lat) coordinates into a polyline string.

    Each point is rounded to ``precision`` digits and encoded as the delta from
    the previous rounded point, so repeated encoding never accumulates drift.
    """

    if coordinates is None or isinstance(coordinates, (str, bytes)):
        raise EncodeError(_EXPECTED_SEQUENCE)
    try:
        items = list(coordinates)
    except TypeError as exc:
        raise EncodeError(_EXPECTED_SEQUENCE) from exc
    points = [_coerce_point(coord, index) for index, coord in enumerate(items)]
    if not points:
        return ""
    try:
        return polyline.encode(points, precision, geojson=True)
    except (OverflowError, TypeError, ValueError) as exc:
        raise EncodeError("Polyline encoding failed") from exc


def decode_strava_map(
    map_payload: Optional[Mapping[str, Any]],
    *,
    precision: int = POLYLINE_PRECISION,
    validate_coords: bool = True,
) -> List[LonLat]:
    """Decode the detailed or summary polyline of a Strava ``map`` object."""

    if not map_payload:
        return []
    encoded = map_payload.get("polyline") or map_payload.get("summary_polyline")
    if not encoded:
        return []
    return decode_polyline(
        encoded, precision=precision, validate_coords=validate_coords
    )


def _check_alphabet(encoded: str) -> None:
    for position, char in enumerate(encoded):
        if not _ALPHABET_MIN <= ord(char) <= _ALPHABET_MAX:
            raise DecodeError(
                f"Invalid character {char!r} in polyline at position {position}"
            )


def _coerce_point(coord: Any, index: int) -> LonLat:
    """Return a float (lon, lat) pair or raise ``EncodeError``."""

    if isinstance(coord, (str, bytes)) or not isinstance(
        coord, (Sequence, np.ndarray)
    ):
        raise EncodeError(
            f"Invalid coordinate at index {index}: expected [lon, lat] sequence"
        )
    if len(coord) < 2:
        raise EncodeError(
            f"Invalid coordinate at index {index}: expected [lon, lat] sequence"
        )
    lon, lat = coord[0], coord[1]
    for value in (lon, lat):
        if isinstance(value, bool) or not isinstance(value, Real):
            raise EncodeError(
                f"Invalid coordinate at index {index}: non-numeric value {value!r}"
            )
        if not math.isfinite(value):
            raise EncodeError(
                f"Invalid coordinate at index {index}: non-finite value {value!r}"
            )
    return float(lon), float(lat)
