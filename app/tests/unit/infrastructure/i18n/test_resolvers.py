"""Tests for infrastructure.i18n.resolvers module."""

from unittest.mock import MagicMock

import pytest

from infrastructure.i18n import DEFAULT_REGION_TAG, LocaleResolver, LocaleSignals, RegionTag
from tests.factories import make_locale_info, make_signals


@pytest.fixture
def resolver():
    return LocaleResolver()


class TestLocaleResolverInitialization:
    """Tests for LocaleResolver construction."""

    def test_default_tag_is_en_gb(self):
        """LocaleResolver falls back to en_GB by default."""
        assert LocaleResolver().default_tag == RegionTag("en", "GB")
        assert DEFAULT_REGION_TAG == RegionTag("en", "GB")

    def test_custom_default_tag(self):
        """LocaleResolver accepts a custom default."""
        resolver = LocaleResolver(default_tag=RegionTag("de", "DE"))
        assert resolver.resolve(LocaleSignals()) == RegionTag("de", "DE")

    def test_rejects_string_default(self):
        """LocaleResolver requires a RegionTag default."""
        with pytest.raises(TypeError):
            LocaleResolver(default_tag="en_GB")


class TestLanguageCodeDetected:
    """Resolution when a language code was detected."""

    def test_language_with_sub_region(self, resolver):
        """Detected language and sub-region combine directly."""
        result = resolver.resolve(make_signals("en", "us"))
        assert str(result) == "en_US"

    @pytest.mark.parametrize(
        "language,sub_region",
        [("EN", "gb"), ("fr", "CA"), ("Pt", "bR"), ("de", "at")],
    )
    def test_language_with_sub_region_is_normalised(self, resolver, language, sub_region):
        """Output is lower(language)_upper(sub_region) for any casing."""
        result = resolver.resolve(make_signals(language, sub_region))
        assert str(result) == f"{language.lower()}_{sub_region.upper()}"

    def test_sub_region_wins_over_country(self, resolver):
        """The sub-region takes precedence over the locale's country."""
        signals = make_signals("en", "us", make_locale_info(country="GB"))
        assert str(resolver.resolve(signals)) == "en_US"

    def test_country_used_when_no_sub_region(self, resolver):
        """Without sub-region the locale's country qualifies the language."""
        signals = make_signals("en", None, make_locale_info(country="ie"))
        assert str(resolver.resolve(signals)) == "en_IE"

    def test_official_language_overrides_when_no_region(self, resolver):
        """With no attachable region, the country's official language wins."""
        signals = make_signals("en", None, make_locale_info(country="", official=["fr"]))
        assert str(resolver.resolve(signals)) == "fr"

    def test_language_without_region_or_locale_uses_default(self, resolver):
        """A bare language cannot tell en_GB from en_US: default applies."""
        assert resolver.resolve(make_signals("en")) == RegionTag("en", "GB")

    def test_unusable_language_code_falls_through(self, resolver):
        """A malformed language code falls through to the locale's data."""
        signals = make_signals("english", "us", make_locale_info(country="FR"))
        assert str(resolver.resolve(signals)) == "fr_FR"


class TestNoLanguageCode:
    """Resolution from country-level locale data only."""

    def test_official_language(self, resolver):
        """The first official language qualifies the country."""
        signals = LocaleSignals(locale=make_locale_info(country="FR", official=["fr"]))
        assert str(resolver.resolve(signals)) == "fr_FR"

    def test_first_official_language_wins(self, resolver):
        """Only the first official language is considered."""
        signals = make_signals(locale=make_locale_info(country="CH", official=["de", "fr"]))
        assert str(resolver.resolve(signals)) == "de_CH"

    def test_spoken_language_when_no_official(self, resolver):
        """Spoken languages are consulted when no official one has a code."""
        signals = make_signals(
            locale=make_locale_info(country="US", official=[], spoken=["en", "es"])
        )
        assert str(resolver.resolve(signals)) == "en_US"

    def test_official_entry_without_code_falls_to_spoken(self, resolver):
        """An official entry without code falls through to spoken languages."""
        signals = make_signals(
            locale=make_locale_info(country="BE", official=[None, "fr"], spoken=["nl"])
        )
        assert str(resolver.resolve(signals)) == "nl_BE"

    def test_no_languages_uses_default(self, resolver):
        """A locale without any language codes resolves to the default."""
        signals = make_signals(locale=make_locale_info(country="AQ", official=[], spoken=[]))
        assert resolver.resolve(signals) == RegionTag("en", "GB")

    def test_sub_region_alone_is_ignored(self, resolver):
        """A sub-region without language does not produce a tag."""
        assert str(resolver.resolve(make_signals(sub_region_code="US"))) == "en_GB"

    def test_no_signals_uses_default(self, resolver):
        """No signals at all resolve to en_GB."""
        assert str(resolver.resolve(LocaleSignals())) == "en_GB"


class TestResolverContract:
    """General guarantees of resolve()."""

    def test_resolve_is_deterministic(self, resolver):
        """Resolving the same signals twice yields the same tag."""
        signals = make_signals(locale=make_locale_info())
        assert resolver.resolve(signals) == resolver.resolve(signals)

    def test_resolve_rejects_non_signals(self, resolver):
        """Passing anything but LocaleSignals is a usage error."""
        with pytest.raises(TypeError):
            resolver.resolve({"language_code": "en"})


class TestLocaleResolverLogging:
    """Decision events go to the caller's logger when one is given."""

    def test_default_fallback_logged_to_caller_logger(self, resolver):
        logger = MagicMock()

        assert resolver.resolve(make_signals(), logger=logger) == DEFAULT_REGION_TAG

        logger.debug.assert_any_call("language_code_undetermined")
        logger.info.assert_called_once_with(
            "country_undetermined_using_default", default_tag="en_GB"
        )

    def test_region_undetermined_logged(self, resolver):
        logger = MagicMock()
        resolver.resolve(make_signals(language_code="en"), logger=logger)
        logger.debug.assert_any_call("region_undetermined", language_code="en")

    def test_resolved_tag_logged(self, resolver):
        logger = MagicMock()
        resolver.resolve(make_signals(language_code="fr", sub_region_code="FR"), logger=logger)
        logger.debug.assert_any_call("region_tag_resolved", region_tag="fr_FR")
        logger.info.assert_not_called()
