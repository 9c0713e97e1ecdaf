"""Nutrition domain models."""

import math
from dataclasses import dataclass
from enum import Enum

SALT_TO_SODIUM_DIVISOR = 2.5


class Category(Enum):
    """Food category (single source of truth for category-specific rules)."""

    DRINKS = "drinks"
    CHEESE = "cheese"
    OILS_AND_FATS = "oils_and_fats"
    OTHER = "other"

    @property
    def label(self) -> str:
        """Human readable category name."""
        return _CATEGORY_LABELS[self]


_CATEGORY_LABELS = {
    Category.DRINKS: "Drinks",
    Category.CHEESE: "Cheese",
    Category.OILS_AND_FATS: "Oils And Fats",
    Category.OTHER: "Other",
}

CATEGORY_COUNT = len(Category)
DEFAULT_CATEGORY = list(Category)[CATEGORY_COUNT - 1]


@dataclass(frozen=True)
class Nutrition:
    """Nutrition values per 100 g (or 100 ml) of a product."""

    energy: float
    fat: float
    saturated_fat: float
    sugar: float
    protein: float
    salt: float
    fiber: float

    @property
    def sodium(self) -> float:
        """Sodium derived from salt."""
        return self.salt / SALT_TO_SODIUM_DIVISOR

    def saturated_fat_value(self, category: Category) -> float:
        """Return the saturated fat value scored for a category.

        Oils and fats are scored on the share of fat that is saturated, in
        percent. Whenever that share is undefined or not finite (zero fat,
        infinite or NaN inputs) the result is ``inf``; callers decide
        whether to accept it.
        """
        if category is not Category.OILS_AND_FATS:
            return self.saturated_fat
        if self.fat == 0:
            return math.inf
        ratio = self.saturated_fat / self.fat * 100.0
        if not math.isfinite(ratio):
            return math.inf
        return ratio
