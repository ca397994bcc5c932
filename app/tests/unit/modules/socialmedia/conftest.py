"""Fixtures for social media module tests."""

from unittest.mock import MagicMock

import pytest

from infrastructure.i18n import LocaleResolver
from infrastructure.locale_support import RemoteLocaleSupportCache
from modules.socialmedia import SocialMedia, SocialMediaOptions, SupportedLocaleSelector
from tests.factories import make_locale_info, make_signals


@pytest.fixture
def support():
    """Support lookups answering "supported" for every tag."""
    support = MagicMock(spec=RemoteLocaleSupportCache)
    support.is_supported.return_value = True
    return support


@pytest.fixture
def resolver():
    """Real resolver wrapped to count calls."""
    return MagicMock(wraps=LocaleResolver())


@pytest.fixture
def selector(resolver, support):
    return SupportedLocaleSelector(resolver=resolver, support=support)


@pytest.fixture
def french_signals():
    return make_signals(language_code="fr", locale=make_locale_info("FR"))


@pytest.fixture
def site_options():
    return SocialMediaOptions(x_account="example", host_name="www.example.com")


@pytest.fixture
def social_media(french_signals, selector, site_options):
    return SocialMedia(
        signals=french_signals,
        selector=selector,
        options=site_options,
        facebook_app_id="12345",
    )
