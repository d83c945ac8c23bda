"""Tests for environment-driven settings."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from buildcalc.config import Settings, get_settings


class TestDefaults:
    def test_defaults(self) -> None:
        settings = Settings()
        assert settings.app_name == "BuildCalc"
        assert settings.max_plinth_area == 50_000
        assert settings.max_compare_options == 5
        assert settings.timeline_overlap_factor == 0.7
        assert settings.cors_origins == ["http://localhost:3000"]
        assert settings.is_development

    def test_get_settings_is_cached(self) -> None:
        assert get_settings() is get_settings()


class TestFromEnv:
    def test_reads_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("APP_NAME", "Calculator")
        monkeypatch.setenv("ENVIRONMENT", "production")
        monkeypatch.setenv("MAX_COMPARE_OPTIONS", "3")
        monkeypatch.setenv("TIMELINE_OVERLAP_FACTOR", "0.8")
        monkeypatch.setenv("CORS_ORIGINS", "https://example.com, http://localhost:3000")

        settings = Settings.from_env()

        assert settings.app_name == "Calculator"
        assert not settings.is_development
        assert settings.max_compare_options == 3
        assert settings.timeline_overlap_factor == 0.8
        assert settings.cors_origins == ["https://example.com", "http://localhost:3000"]

    def test_unset_variables_keep_defaults(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("MAX_PLINTH_AREA", raising=False)
        assert Settings.from_env().max_plinth_area == 50_000

    def test_invalid_value_rejected(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("TIMELINE_OVERLAP_FACTOR", "1.5")
        with pytest.raises(ValidationError):
            Settings.from_env()
