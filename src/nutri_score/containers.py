"""Dependency container wiring for the application."""

from dataclasses import dataclass

from nutri_score.config import Settings
from nutri_score.services.scoring import ScoringService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    scoring_service: ScoringService


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    scoring_service = ScoringService(
        zero_fat_policy=resolved_settings.zero_fat_policy
    )
    return AppContainer(settings=resolved_settings, scoring_service=scoring_service)
