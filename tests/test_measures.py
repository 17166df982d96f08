"""Tests for distance, elevation, and duration measures."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

import pytest

from route_geometry.geometry.measures import (
    cumulative_distances_m,
    duration_s,
    elevation_profile,
    elevation_stats,
    route_distance_m,
    segment_lengths_m,
)
from route_geometry.geometry.models import ElevationStats

EQUATOR_DEGREE_M = 111_319.49


def test_equator_degree_length() -> None:
    lengths = segment_lengths_m([(0.0, 0.0), (1.0, 0.0)])
    assert lengths.tolist() == [pytest.approx(EQUATOR_DEGREE_M, abs=0.1)]


def test_route_distance_is_whole_metres() -> None:
    distance = route_distance_m([(0.0, 0.0), (1.0, 0.0), (2.0, 0.0)])
    assert distance == pytest.approx(2 * EQUATOR_DEGREE_M, abs=1.0)
    assert distance == int(distance)


def test_distance_of_short_routes_is_zero() -> None:
    assert route_distance_m([]) == 0.0
    assert route_distance_m([(5.0, 5.0)]) == 0.0
    assert route_distance_m([(5.0, 5.0), (5.0, 5.0)]) == 0.0


def test_distance_across_antimeridian_takes_short_way() -> None:
    distance = route_distance_m([(179.5, 0.0), (-179.5, 0.0)])
    assert distance == pytest.approx(EQUATOR_DEGREE_M, abs=1.0)


def test_cumulative_distances_start_at_zero() -> None:
    cumulative = cumulative_distances_m([(0.0, 0.0), (1.0, 0.0), (2.0, 0.0)])
    assert cumulative[0] == 0.0
    assert cumulative[2] == pytest.approx(2 * EQUATOR_DEGREE_M, abs=0.5)
    assert len(cumulative_distances_m([])) == 0


def test_elevation_stats_accumulate_gain_and_loss() -> None:
    stats = elevation_stats([10.0, 14.0, 12.0, 20.4])
    assert stats == ElevationStats(gain=12, loss=2, min=10, max=20, avg=14)


def test_elevation_stats_of_empty_series() -> None:
    assert elevation_stats([]) == ElevationStats()


def test_elevation_profile_with_aligned_coordinates() -> None:
    profile = elevation_profile([5.0, 7.5], [(0.0, 0.0), (1.0, 0.0)])
    assert profile[0] == {"index": 0, "elevation": 5.0, "distance": 0.0}
    assert profile[1]["elevation"] == 7.5
    assert profile[1]["distance"] == pytest.approx(EQUATOR_DEGREE_M, abs=0.1)


def test_elevation_profile_without_aligned_coordinates() -> None:
    profile = elevation_profile([5.0, 7.5, 6.0], [(0.0, 0.0), (1.0, 0.0)])
    assert [row["distance"] for row in profile] == [None, None, None]
    assert [row["index"] for row in profile] == [0, 1, 2]


def test_duration_in_seconds() -> None:
    start = datetime(2025, 3, 1, 8, 0, tzinfo=timezone.utc)
    stamps = [start, start + timedelta(seconds=61), start + timedelta(minutes=5)]
    assert duration_s(stamps) == 300
    assert duration_s([start]) == 0
    assert duration_s([]) == 0
