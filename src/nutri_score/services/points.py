"""Threshold point counting."""

from bisect import bisect_left
from collections.abc import Sequence
from itertools import pairwise

from nutri_score.errors import ThresholdOrderError


def points(table: Sequence[float], value: float) -> int:
    """Return how many thresholds in an ascending table are below ``value``.

    The same counter serves negative and positive nutrients; the direction
    only depends on the table and on how the caller combines the result.
    """
    if not is_ascending(table):
        raise ThresholdOrderError(f"Threshold table is not ascending: {table!r}")
    return bisect_left(table, value)


def is_ascending(table: Sequence[float]) -> bool:
    """Check that a table is sorted ascending, ties allowed."""
    return all(left <= right for left, right in pairwise(table))
