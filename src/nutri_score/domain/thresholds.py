"""Threshold tables per nutrient and category."""

from dataclasses import dataclass

from nutri_score.domain.nutrition import Category

_INF = float("inf")

# negative
ENERGY_THRESHOLDS = (
    335.0, 670.0, 1005.0, 1340.0, 1675.0, 2010.0, 2345.0, 2680.0, 3015.0, 3350.0,
)  # fmt: skip
SATURATED_FAT_THRESHOLDS = (1.0, 2.0, 3.0, 4.0, 5.0, 6.0, 7.0, 8.0, 9.0, 10.0)
SUGAR_THRESHOLDS = (4.5, 9.0, 13.5, 18.0, 22.5, 27.0, 31.0, 36.0, 40.0, 45.0)
SODIUM_THRESHOLDS = (
    90.0, 180.0, 270.0, 360.0, 450.0, 540.0, 630.0, 720.0, 810.0, 900.0,
)  # fmt: skip

# positive
FRUITS_THRESHOLDS = (40.0, 60.0, 80.0, 80.0, 80.0, _INF, _INF, _INF, _INF, _INF)
FIBER_THRESHOLDS = (0.8, 1.9, 2.8, 3.7, 4.7)
PROTEIN_THRESHOLDS = (1.6, 3.2, 4.8, 6.4, 8.0)

DRINKS_ENERGY_THRESHOLDS = (
    0.0, 30.0, 60.0, 90.0, 120.0, 150.0, 180.0, 210.0, 240.0, 270.0,
)  # fmt: skip
DRINKS_SUGAR_THRESHOLDS = (0.0, 1.5, 3.0, 4.5, 6.0, 7.5, 9.0, 10.5, 12.0, 13.5)
DRINKS_FRUITS_THRESHOLDS = (0.0, 40.0, 40.0, 60.0, 60.0, 80.0, 80.0, 80.0, 80.0, 80.0)
# percent of total fat that is saturated
OILS_AND_FATS_SATURATED_FAT_THRESHOLDS = (
    10.0, 16.0, 22.0, 28.0, 34.0, 40.0, 46.0, 52.0, 58.0, 64.0,
)  # fmt: skip


@dataclass(frozen=True)
class ThresholdSet:
    """Ascending cutoffs for every scored dimension of a category."""

    energy: tuple[float, ...]
    saturated_fat: tuple[float, ...]
    sugar: tuple[float, ...]
    protein: tuple[float, ...]
    sodium: tuple[float, ...]
    fiber: tuple[float, ...]
    fruits: tuple[float, ...]


def resolve_tables(category: Category) -> ThresholdSet:
    """Return the threshold tables that apply to a category."""
    is_drink = category is Category.DRINKS
    return ThresholdSet(
        energy=DRINKS_ENERGY_THRESHOLDS if is_drink else ENERGY_THRESHOLDS,
        saturated_fat=(
            OILS_AND_FATS_SATURATED_FAT_THRESHOLDS
            if category is Category.OILS_AND_FATS
            else SATURATED_FAT_THRESHOLDS
        ),
        sugar=DRINKS_SUGAR_THRESHOLDS if is_drink else SUGAR_THRESHOLDS,
        protein=PROTEIN_THRESHOLDS,
        sodium=SODIUM_THRESHOLDS,
        fiber=FIBER_THRESHOLDS,
        fruits=DRINKS_FRUITS_THRESHOLDS if is_drink else FRUITS_THRESHOLDS,
    )
