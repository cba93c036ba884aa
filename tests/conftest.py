"""
Pytest configuration and fixtures for Chronassert tests.
"""

from datetime import datetime, timezone

import pytest

from chronassert.failures import describe
from chronassert.formatters import MessageFormatter
from chronassert.settings import reload_settings


@pytest.fixture(autouse=True)
def reset_settings(monkeypatch):
    """Isolate tests from CHRONASSERT_* variables set in the environment."""
    for name in ("LOG_LEVEL", "REPR_MAX_STRING", "REPR_MAX_LENGTH", "REPR_MAX_DEPTH"):
        monkeypatch.delenv(f"CHRONASSERT_{name}", raising=False)
    reload_settings()
    yield
    reload_settings()


@pytest.fixture
def message_for():
    """Build the expected failure message for a kind and its operands."""

    def build(kind, *operands, description=None):
        return MessageFormatter().create(describe(kind, *operands), description)

    return build


@pytest.fixture
def utc_midnight():
    """2000-01-01T00:00:00Z."""
    return datetime(2000, 1, 1, tzinfo=timezone.utc)
