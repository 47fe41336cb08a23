"""Testes unitários para config/settings.py."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from ong_lifecycle.config.settings import (
    WEBHOOK_DUPLICATE_IGNORE,
    WEBHOOK_DUPLICATE_REJECT,
    Settings,
    get_settings,
)


class TestSettingsDefaults:
    """Testes para valores padrão de Settings."""

    def test_default_environment_is_development(self) -> None:
        s = Settings()
        assert s.environment == "development"
        assert s.is_development is True
        assert s.is_production is False

    def test_default_duplicate_policy_is_ignore(self) -> None:
        """Reentrega de webhook é no-op por padrão."""
        s = Settings()
        assert s.webhook_duplicate_policy == WEBHOOK_DUPLICATE_IGNORE
        assert s.ignore_duplicate_webhooks is True

    def test_defaults_are_valid(self) -> None:
        assert Settings().validate_all() == []


class TestSettingsFromEnv:
    def test_policy_from_env(self, monkeypatch) -> None:
        monkeypatch.setenv("WEBHOOK_DUPLICATE_POLICY", "REJECT")
        get_settings.cache_clear()
        s = get_settings()
        assert s.webhook_duplicate_policy == WEBHOOK_DUPLICATE_REJECT
        assert s.ignore_duplicate_webhooks is False

    def test_misspelled_policy_fails_on_load(self, monkeypatch) -> None:
        """Valor com erro de digitação não pode virar reject silenciosamente."""
        monkeypatch.setenv("WEBHOOK_DUPLICATE_POLICY", "rejec")
        get_settings.cache_clear()
        with pytest.raises(ValidationError):
            get_settings()

    def test_environment_aliases(self, monkeypatch) -> None:
        monkeypatch.setenv("ENVIRONMENT", "prod")
        assert Settings().is_production is True
        monkeypatch.setenv("ENVIRONMENT", "stage")
        assert Settings().is_staging is True

    def test_get_settings_is_cached(self) -> None:
        assert get_settings() is get_settings()


class TestSettingsValidation:
    def test_invalid_policy_rejected(self) -> None:
        with pytest.raises(ValidationError, match="webhook_duplicate_policy"):
            Settings(webhook_duplicate_policy="retry")

    def test_policy_is_normalized(self) -> None:
        assert Settings(webhook_duplicate_policy=" Ignore ").webhook_duplicate_policy == "ignore"

    def test_invalid_log_settings_reported(self) -> None:
        errors = Settings(log_level="LOUD", log_format="xml").validate_observability()
        assert len(errors) == 2

    def test_validate_all_aggregates(self) -> None:
        errors = Settings(log_level="LOUD", log_format="xml").validate_all()
        assert len(errors) == 2
