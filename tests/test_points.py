"""Tests for threshold point counting."""

import pytest

from nutri_score.domain.thresholds import ENERGY_THRESHOLDS, FRUITS_THRESHOLDS
from nutri_score.errors import ThresholdOrderError
from nutri_score.services.points import points


def test_points_counts_entries_strictly_below_value() -> None:
    assert points(ENERGY_THRESHOLDS, 1200) == 3
    assert points(ENERGY_THRESHOLDS, 1005) == 2
    assert points(ENERGY_THRESHOLDS, 1005.1) == 3


def test_points_bounds() -> None:
    assert points(ENERGY_THRESHOLDS, 0) == 0
    assert points(ENERGY_THRESHOLDS, 335) == 0
    assert points(ENERGY_THRESHOLDS, 3350.5) == len(ENERGY_THRESHOLDS)


def test_points_matches_count_and_is_monotonic() -> None:
    table = (1.0, 2.0, 2.0, 5.0)
    previous = 0
    for value in [0.5, 1.0, 1.5, 2.0, 2.5, 5.0, 6.0]:
        result = points(table, value)
        assert result == sum(1 for entry in table if entry < value)
        assert result >= previous
        previous = result


def test_points_plateau_counts_duplicates_together() -> None:
    assert points(FRUITS_THRESHOLDS, 80) == 2
    assert points(FRUITS_THRESHOLDS, 81) == 5
    assert points(FRUITS_THRESHOLDS, 100) == 5


def test_points_nan_scores_zero() -> None:
    assert points(ENERGY_THRESHOLDS, float("nan")) == 0


def test_points_empty_table() -> None:
    assert points((), 10) == 0


def test_points_rejects_unsorted_table() -> None:
    with pytest.raises(ThresholdOrderError):
        points((3.0, 1.0, 2.0), 2.5)
