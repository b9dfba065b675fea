"""Pytest configuration and fixtures."""

import pytest

from fluentassert.settings import CONFIG_ENV_VAR, default_settings


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch):
    """Run every test against built-in settings, whatever the environment says."""
    monkeypatch.delenv(CONFIG_ENV_VAR, raising=False)
    default_settings.cache_clear()
    yield
    default_settings.cache_clear()
