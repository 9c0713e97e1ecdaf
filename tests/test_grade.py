"""Tests for score to letter mapping."""

import pytest

from nutri_score.domain.nutrition import Category
from nutri_score.domain.scores import Grade
from nutri_score.services.scoring import grade


@pytest.mark.parametrize(
    ("score", "expected"),
    [
        (-15, Grade.A),
        (-1, Grade.A),
        (0, Grade.B),
        (2, Grade.B),
        (3, Grade.C),
        (10, Grade.C),
        (11, Grade.D),
        (18, Grade.D),
        (19, Grade.E),
        (40, Grade.E),
    ],
)
@pytest.mark.parametrize(
    "category", [Category.CHEESE, Category.OILS_AND_FATS, Category.OTHER]
)
def test_food_grade_boundaries(category: Category, score: int, expected: Grade) -> None:
    assert grade(category, score, is_water=False) is expected
    assert grade(category, score, is_water=True) is expected


@pytest.mark.parametrize(
    ("score", "expected"),
    [
        (-5, Grade.B),
        (1, Grade.B),
        (2, Grade.C),
        (5, Grade.C),
        (6, Grade.D),
        (9, Grade.D),
        (10, Grade.E),
        (30, Grade.E),
    ],
)
def test_drink_grade_boundaries(score: int, expected: Grade) -> None:
    assert grade(Category.DRINKS, score, is_water=False) is expected


@pytest.mark.parametrize("score", [-10, 0, 15, 40])
def test_water_is_always_a(score: int) -> None:
    assert grade(Category.DRINKS, score, is_water=True) is Grade.A
