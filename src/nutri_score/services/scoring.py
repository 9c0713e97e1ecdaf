"""Nutri-Score computation and grading."""

import logging
import math
from dataclasses import dataclass
from typing import Literal

from nutri_score.domain.nutrition import Category, Nutrition
from nutri_score.domain.scores import Grade, ScoreBreakdown, ScoreResult
from nutri_score.domain.thresholds import resolve_tables
from nutri_score.errors import DegenerateNutritionError
from nutri_score.services.points import points

ZeroFatPolicy = Literal["worst", "reject"]

SUPPRESSION_NEGATIVE_MIN = 11
SUPPRESSION_FRUIT_POINTS_MAX = 5

_logger = logging.getLogger(__name__)


def compute_score(
    category: Category, nutrition: Nutrition, fruits_percentage: float
) -> ScoreBreakdown:
    """Combine negative and positive points into a signed score."""
    tables = resolve_tables(category)
    energy_points = points(tables.energy, nutrition.energy)
    sugar_points = points(tables.sugar, nutrition.sugar)
    fat_points = points(
        tables.saturated_fat, nutrition.saturated_fat_value(category)
    )
    sodium_points = points(tables.sodium, nutrition.sodium)
    negative = energy_points + sugar_points + fat_points + sodium_points

    fruit_points = points(tables.fruits, fruits_percentage)
    fiber_points = points(tables.fiber, nutrition.fiber)
    protein_points = points(tables.protein, nutrition.protein)

    counted = (
        category is Category.CHEESE
        or negative < SUPPRESSION_NEGATIVE_MIN
        or fruit_points >= SUPPRESSION_FRUIT_POINTS_MAX
    )
    if counted:
        score = negative - (fruit_points + fiber_points + protein_points)
    else:
        _logger.info(
            "Negative score %s is more than 10 and fruit score %s is less than 5; "
            "fibers and proteins are not counted",
            negative,
            fruit_points,
        )
        score = negative - fruit_points

    return ScoreBreakdown(
        score=score,
        negative=negative,
        energy_points=energy_points,
        sugar_points=sugar_points,
        fat_points=fat_points,
        sodium_points=sodium_points,
        fruit_points=fruit_points,
        fiber_points=fiber_points,
        protein_points=protein_points,
        fibers_and_proteins_counted=counted,
    )


def grade(category: Category, score: int, is_water: bool = False) -> Grade:
    """Map a score to a letter grade."""
    if category is Category.DRINKS:
        if is_water:
            return Grade.A
        if score <= 1:
            return Grade.B
        if score <= 5:
            return Grade.C
        if score <= 9:
            return Grade.D
        return Grade.E
    if score <= -1:
        return Grade.A
    if score <= 2:
        return Grade.B
    if score <= 10:
        return Grade.C
    if score <= 18:
        return Grade.D
    return Grade.E


@dataclass
class ScoringService:
    """Service evaluating products into scores and grades."""

    zero_fat_policy: ZeroFatPolicy = "worst"

    def evaluate(
        self,
        category: Category,
        nutrition: Nutrition,
        fruits_percentage: float,
        is_water: bool = False,
    ) -> ScoreResult:
        """Score a product and grade it."""
        if (
            category is Category.OILS_AND_FATS
            and self.zero_fat_policy == "reject"
            and math.isinf(nutrition.saturated_fat_value(category))
        ):
            raise DegenerateNutritionError(
                "Saturated fat share is undefined; fat must be a positive finite "
                "value to score oils and fats"
            )
        breakdown = compute_score(category, nutrition, fruits_percentage)
        letter = grade(category, breakdown.score, is_water)
        _logger.debug(
            "Scored product: category=%s score=%s grade=%s",
            category.value,
            breakdown.score,
            letter,
        )
        return ScoreResult(breakdown=breakdown, grade=letter)
