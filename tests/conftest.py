"""Root conftest — shared test configuration."""

import pytest

from antifragile.config import get_settings


@pytest.fixture(autouse=True)
def _isolated_settings(monkeypatch):
    """Fresh settings per test; environment overrides must not leak between tests."""
    monkeypatch.delenv("ANTIFRAGILE_SERIALIZATION_ENABLED", raising=False)
    monkeypatch.delenv("ANTIFRAGILE_LOG_LEVEL", raising=False)
    monkeypatch.delenv("ANTIFRAGILE_LOG_FORMAT", raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
