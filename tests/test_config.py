"""Tests for application settings."""

import pytest
from pydantic import ValidationError

from nutri_score.config import Settings


def test_settings_read_prefixed_environment(monkeypatch) -> None:
    monkeypatch.setenv("NUTRI_SCORE_ZERO_FAT_POLICY", "reject")
    monkeypatch.setenv("NUTRI_SCORE_LOG_LEVEL", "DEBUG")

    settings = Settings()

    assert settings.zero_fat_policy == "reject"
    assert settings.log_level == "DEBUG"


def test_settings_reject_unknown_policy() -> None:
    with pytest.raises(ValidationError):
        Settings(zero_fat_policy="clamp")
