"""General utility helpers shared across modules."""

from __future__ import annotations

import json
import math
from dataclasses import asdict, is_dataclass
from datetime import date, datetime
from enum import Enum
from numbers import Real
from typing import Any, Sequence

import numpy as np


def is_array(value: Any) -> bool:
    """Return ``True`` for list-like coordinate containers, numpy arrays included."""

    return isinstance(value, (Sequence, np.ndarray)) and not isinstance(
        value, (str, bytes)
    )


def has_items(value: Any) -> bool:
    return is_array(value) and len(value) > 0


def is_finite_number(value: Any) -> bool:
    return (
        isinstance(value, Real)
        and not isinstance(value, bool)
        and math.isfinite(value)
    )


def _normalise_value(value: Any) -> Any:
    """Convert objects to JSON-friendly representations."""

    if isinstance(value, (datetime, date)):
        return value.isoformat()
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, np.generic):
        return value.item()
    if isinstance(value, np.ndarray):
        return [_normalise_value(item) for item in value.tolist()]
    if is_dataclass(value) and not isinstance(value, type):
        to_dict = getattr(value, "to_dict", None)
        return _normalise_value(to_dict() if callable(to_dict) else asdict(value))
    if isinstance(value, (list, tuple)):
        return [_normalise_value(item) for item in value]
    if isinstance(value, dict):
        return {str(key): _normalise_value(val) for key, val in value.items()}
    return value


def dumps_geojson(value: Any, *, sort_keys: bool = False) -> str:
    """Serialise converter output for a rendering client.

    NaN and infinity are rejected because they are not valid JSON.
    """

    normalised = _normalise_value(value)
    return json.dumps(
        normalised, sort_keys=sort_keys, separators=(",", ":"), allow_nan=False
    )


def json_dumps_sorted(value: Any) -> str:
    """Return canonical JSON for hashing / comparisons."""

    return dumps_geojson(value, sort_keys=True)
