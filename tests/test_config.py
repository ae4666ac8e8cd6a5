"""Unit tests for Settings and get_settings."""
import logging

import pytest
from pydantic import ValidationError

from ffm.config import Settings, get_settings


class TestSettingsDefaults:
    """Tests for default configuration values."""

    def test_defaults(self, monkeypatch):
        for name in ("LOG_LEVEL", "LOG_JSON"):
            monkeypatch.delenv(name, raising=False)
        settings = Settings(_env_file=None)
        assert settings.LOG_LEVEL == "INFO"
        assert settings.LOG_JSON is True

    def test_log_level_number(self):
        settings = Settings(_env_file=None, LOG_LEVEL="WARNING")
        assert settings.log_level_number == logging.WARNING


class TestSettingsFromEnvironment:
    """Tests for environment-variable overrides."""

    def test_env_override(self, monkeypatch):
        monkeypatch.setenv("LOG_LEVEL", "debug")
        monkeypatch.setenv("LOG_JSON", "false")
        settings = Settings(_env_file=None)
        assert settings.LOG_LEVEL == "DEBUG"
        assert settings.LOG_JSON is False

    def test_unknown_log_level_rejected(self):
        with pytest.raises(ValidationError):
            Settings(_env_file=None, LOG_LEVEL="chatty")


class TestGetSettings:
    """Tests for the cached settings accessor."""

    def test_cached_instance(self):
        assert get_settings() is get_settings()

    def test_cache_clear_reloads(self, monkeypatch):
        monkeypatch.setenv("LOG_LEVEL", "ERROR")
        get_settings.cache_clear()
        assert get_settings().LOG_LEVEL == "ERROR"
