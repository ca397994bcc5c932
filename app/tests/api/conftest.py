"""Fixtures for API route tests."""

from unittest.mock import MagicMock

import pytest

from api.dependencies.rate_limits import get_limiter
from infrastructure.i18n import RequestLocaleSource
from infrastructure.locale_support import RemoteLocaleSupportCache
from infrastructure.services import get_locale_source, get_locale_support, get_settings


@pytest.fixture(autouse=True)
def reset_rate_limits():
    """Start every test with empty rate limit counters."""
    get_limiter().reset()
    yield
    get_limiter().reset()


@pytest.fixture
def support():
    support = MagicMock(spec=RemoteLocaleSupportCache)
    support.is_supported.return_value = True
    return support


@pytest.fixture
def dependency_overrides(settings, support):
    """Providers replaced so no request leaves the process."""
    return {
        get_settings: lambda: settings,
        get_locale_support: lambda: support,
        get_locale_source: lambda: RequestLocaleSource(
            country_header=settings.locale.LOCALE_COUNTRY_HEADER
        ),
    }
