"""Unit tests for builder settings."""

import logging

import pytest
from pydantic import ValidationError

from swml.config import Settings, configure_logging, get_settings
from swml.services.builder import SwmlBuilder


class TestSettings:
    """Tests for Settings."""

    def test_defaults(self):
        settings = Settings()
        assert settings.validate_steps is False
        assert settings.json_indent is None
        assert settings.log_level == "WARNING"

    def test_reads_prefixed_environment(self, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv("SWML_VALIDATE_STEPS", "1")
        monkeypatch.setenv("SWML_JSON_INDENT", "4")
        monkeypatch.setenv("SWML_LOG_LEVEL", "debug")

        settings = Settings()
        assert settings.validate_steps is True
        assert settings.json_indent == 4
        assert settings.log_level == "DEBUG"

    def test_rejects_unknown_log_level(self):
        with pytest.raises(ValidationError):
            Settings(log_level="chatty")

    def test_get_settings_is_cached(self):
        assert get_settings() is get_settings()


class TestConfigureLogging:
    """Tests for configure_logging."""

    def test_applies_level_to_package_logger(self):
        logger = configure_logging(Settings(log_level="info"))

        assert logger is logging.getLogger("swml")
        assert logger.level == logging.INFO
        logger.setLevel(logging.NOTSET)

    def test_builder_logs_appends(self, caplog: pytest.LogCaptureFixture):
        with caplog.at_level(logging.DEBUG, logger="swml"):
            SwmlBuilder(validate=False).answer()

        assert "Appended answer to main (1 steps)" in caplog.text
