"""Fixtures for locale support tests."""

from unittest.mock import MagicMock

import pytest
import requests

from infrastructure.configuration import FacebookSettings
from infrastructure.locale_support import InMemorySupportCache, LocaleProbe
from tests.factories import FakeClock, make_response


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def memory_cache(clock):
    return InMemorySupportCache(clock=clock)


@pytest.fixture
def facebook_settings():
    return FacebookSettings(_env_file=None)


@pytest.fixture
def mock_session():
    """requests.Session double answering 200 "ok" by default."""
    session = MagicMock(spec=requests.Session)
    session.get.return_value = make_response()
    return session


@pytest.fixture
def probe(facebook_settings, mock_session):
    return LocaleProbe(facebook_settings, session=mock_session)
