import pytest
from dialect_types.config import Settings

from libb import attrdict


@pytest.fixture(autouse=True)
def reset_settings(monkeypatch):
    """Reset settings before and after each test to ensure test isolation."""
    monkeypatch.setattr('dialect_types.config.settings.DEFAULT_LOCATIONS', ())
    Settings.reset()
    yield
    Settings.reset()


@pytest.fixture
def utc_context():
    """Parse context for rows stored in UTC"""
    return attrdict(timezone='+00:00')
