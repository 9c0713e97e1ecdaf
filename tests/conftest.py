"""Shared test fixtures."""

import pytest

from nutri_score.config import Settings
from nutri_score.containers import AppContainer
from nutri_score.domain.nutrition import Nutrition
from nutri_score.services.scoring import ScoringService


def make_nutrition(**overrides: float) -> Nutrition:
    """Build a nutrition record with zero defaults."""
    values: dict[str, float] = {
        "energy": 0.0,
        "fat": 0.0,
        "saturated_fat": 0.0,
        "sugar": 0.0,
        "protein": 0.0,
        "salt": 0.0,
        "fiber": 0.0,
    }
    values.update(overrides)
    return Nutrition(**values)


@pytest.fixture
def settings() -> Settings:
    return Settings(environment="test", log_level="INFO", zero_fat_policy="worst")


@pytest.fixture
def container(settings: Settings) -> AppContainer:
    return AppContainer(
        settings=settings,
        scoring_service=ScoringService(zero_fat_policy=settings.zero_fat_policy),
    )
