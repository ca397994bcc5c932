"""Shared fixtures for the social media buttons test suite."""

import pytest

from infrastructure.configuration import Settings
from infrastructure.locale_support import reset_cache
from infrastructure.logging import configure_logging
from infrastructure.services import (
    get_country_lookup,
    get_locale_resolver,
    get_locale_source,
    get_locale_support,
    get_settings,
)

# Suppresses log output for the whole session
configure_logging()

_PROVIDERS = (
    get_settings,
    get_locale_resolver,
    get_locale_support,
    get_locale_source,
    get_country_lookup,
)


@pytest.fixture
def settings(monkeypatch):
    """Settings loaded from defaults, isolated from any local .env file."""
    monkeypatch.delenv("X_ACCOUNT", raising=False)
    monkeypatch.delenv("LOCALE_SUPPORT_CACHE_BACKEND", raising=False)
    return Settings(_env_file=None)


@pytest.fixture(autouse=True)
def reset_singletons():
    """Reset provider and cache singletons around each test."""
    reset_cache()
    for provider in _PROVIDERS:
        provider.cache_clear()
    yield
    reset_cache()
    for provider in _PROVIDERS:
        provider.cache_clear()
