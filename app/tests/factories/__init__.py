"""Test data factories for deterministic test data generation."""

from tests.factories.http import FakeClock, make_response
from tests.factories.locale import (
    FakeLocaleInfo,
    make_locale_info,
    make_signals,
)

__all__ = [
    "FakeClock",
    "FakeLocaleInfo",
    "make_locale_info",
    "make_response",
    "make_signals",
]
