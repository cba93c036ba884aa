"""
Tests for Chronassert settings.
"""

import logging

from chronassert.formatters import MessageFormatter
from chronassert.settings import ChronassertSettings, configure_logging, get_settings, reload_settings


def test_defaults():
    """Test default settings values."""
    settings = ChronassertSettings()
    assert settings.log_level == "WARNING"
    assert settings.repr_max_string == 200
    assert settings.repr_max_length == 50
    assert settings.repr_max_depth == 4


def test_get_settings_is_cached():
    assert get_settings() is get_settings()


def test_environment_overrides(monkeypatch):
    """Test CHRONASSERT_* variables override defaults after reload."""
    monkeypatch.setenv("CHRONASSERT_REPR_MAX_STRING", "5")
    monkeypatch.setenv("CHRONASSERT_LOG_LEVEL", "debug")
    settings = reload_settings()
    assert settings.repr_max_string == 5
    assert settings.log_level == "debug"
    assert get_settings() is settings
    assert MessageFormatter().max_string == 5


def test_configure_logging(monkeypatch):
    calls = {}
    monkeypatch.setattr(logging, "basicConfig", lambda **kwargs: calls.update(kwargs))
    monkeypatch.setenv("CHRONASSERT_LOG_LEVEL", "debug")
    reload_settings()
    configure_logging()
    assert calls["level"] == logging.DEBUG
