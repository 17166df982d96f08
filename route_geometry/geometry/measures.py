"""Distance, elevation, and duration measures derived from route samples."""

from __future__ import annotations

from datetime import datetime
from typing import Any, Dict, List, Optional, Sequence

import numpy as np
from numpy.typing import NDArray
from pyproj import Geod

from .models import ElevationStats, LonLat
from .projection import as_coordinate_array

MetricArray = NDArray[np.float64]

_GEOD = Geod(ellps="WGS84")


def segment_lengths_m(coordinates: Sequence[LonLat]) -> MetricArray:
    """Return geodesic lengths (metres) between consecutive (lon, lat) points."""

    array = as_coordinate_array(coordinates)
    if len(array) < 2:
        return np.zeros(0, dtype=float)
    _, _, distances = _GEOD.inv(
        array[:-1, 0], array[:-1, 1], array[1:, 0], array[1:, 1]
    )
    return np.asarray(distances, dtype=float)


def route_distance_m(coordinates: Sequence[LonLat]) -> float:
    """Return the geodesic length of a route in whole metres."""

    return float(round(float(np.sum(segment_lengths_m(coordinates)))))


def cumulative_distances_m(coordinates: Sequence[LonLat]) -> MetricArray:
    """Return the running distance at each point, starting from zero."""

    lengths = segment_lengths_m(coordinates)
    if len(coordinates) == 0:
        return np.zeros(0, dtype=float)
    return np.concatenate(([0.0], np.cumsum(lengths)))


def elevation_stats(samples: Sequence[float]) -> ElevationStats:
    """Summarise an elevation series.

    Gain and loss accumulate the positive and negative forward differences
    separately. Values are rounded to whole metres.
    """

    if len(samples) == 0:
        return ElevationStats()
    values = np.asarray(samples, dtype=float)
    deltas = np.diff(values)
    gain = float(np.sum(deltas[deltas > 0]))
    loss = float(-np.sum(deltas[deltas < 0]))
    return ElevationStats(
        gain=int(round(gain)),
        loss=int(round(loss)),
        min=int(round(float(values.min()))),
        max=int(round(float(values.max()))),
        avg=int(round(float(values.mean()))),
    )


def elevation_profile(
    samples: Sequence[float],
    coordinates: Optional[Sequence[LonLat]] = None,
) -> List[Dict[str, Any]]:
    """Return ``{index, elevation, distance}`` rows for charting.

    ``distance`` is the cumulative route distance at the sample when the
    coordinates line up with the samples, otherwise ``None``.
    """

    distances: Optional[MetricArray] = None
    if coordinates is not None and len(coordinates) == len(samples):
        distances = cumulative_distances_m(coordinates)
    return [
        {
            "index": index,
            "elevation": float(value),
            "distance": (
                round(float(distances[index]), 1) if distances is not None else None
            ),
        }
        for index, value in enumerate(samples)
    ]


def duration_s(timestamps: Sequence[datetime]) -> int:
    """Return the whole seconds between the first and last timestamp."""

    if len(timestamps) < 2:
        return 0
    return int(round((timestamps[-1] - timestamps[0]).total_seconds()))
