"""Exceptions raised by the scoring core."""


class NutriScoreError(Exception):
    """Base error for Nutri-Score computations."""


class ThresholdOrderError(NutriScoreError):
    """A threshold table is not sorted ascending."""


class DegenerateNutritionError(NutriScoreError, ValueError):
    """Nutrition values cannot be scored for the given category."""
