"""Unit tests for environment-driven settings."""

import pytest

from orderflow.infrastructure.config import Settings


class TestSettingsFromEnv:

    def test_defaults(self, monkeypatch):
        monkeypatch.delenv("ORDERFLOW_LOG_LEVEL", raising=False)
        monkeypatch.delenv("ORDERFLOW_LOG_FORMAT", raising=False)

        settings = Settings.from_env()

        assert settings == Settings(log_level="INFO", log_format="json")

    def test_reads_and_normalises_environment(self, monkeypatch):
        monkeypatch.setenv("ORDERFLOW_LOG_LEVEL", "debug")
        monkeypatch.setenv("ORDERFLOW_LOG_FORMAT", "Console")

        settings = Settings.from_env()

        assert settings.log_level == "DEBUG"
        assert settings.log_format == "console"

    def test_unknown_format_rejected(self, monkeypatch):
        monkeypatch.setenv("ORDERFLOW_LOG_FORMAT", "xml")
        with pytest.raises(ValueError, match="Unknown log format"):
            Settings.from_env()


class TestSettingsValidation:

    def test_unknown_level_rejected(self):
        with pytest.raises(ValueError, match="Unknown log level"):
            Settings(log_level="LOUD")
