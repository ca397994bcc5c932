"""Tests for the request-scoped SocialMedia object."""

from unittest.mock import MagicMock

import pytest
import requests

from infrastructure.configuration import FacebookSettings
from infrastructure.i18n import LocaleResolver, RegionTag
from infrastructure.locale_support import (
    InMemorySupportCache,
    LocaleProbe,
    RemoteLocaleSupportCache,
)
from modules.socialmedia import (
    ButtonOptions,
    SocialMedia,
    SocialMediaOptions,
    SocialMediaUsageError,
    SupportedLocaleSelector,
    buttons,
)
from tests.factories import make_locale_info, make_signals

pytestmark = pytest.mark.unit


class TestSocialMediaInitialization:
    """Tests for SocialMedia construction."""

    def test_rejects_non_signals(self, selector):
        with pytest.raises(SocialMediaUsageError):
            SocialMedia(signals={"language_code": "fr"}, selector=selector)

    def test_rejects_dict_options(self, french_signals, selector):
        with pytest.raises(SocialMediaUsageError):
            SocialMedia(
                signals=french_signals, selector=selector, options={"x_account": "example"}
            )

    def test_default_options(self, french_signals, selector):
        social_media = SocialMedia(signals=french_signals, selector=selector)
        assert social_media.options == SocialMediaOptions()

    def test_usage_error_is_value_error(self, selector):
        with pytest.raises(ValueError):
            SocialMedia(signals=None, selector=selector)


class TestMemoization:
    """Resolution and verification run at most once per object."""

    def test_region_tag_resolved_once(self, social_media, resolver):
        assert social_media.region_tag() == RegionTag("fr", "FR")
        assert social_media.region_tag() == RegionTag("fr", "FR")
        resolver.resolve.assert_called_once()

    def test_facebook_locale_verified_once(self, social_media, support, resolver):
        assert social_media.facebook_locale() == RegionTag("fr", "FR")
        assert social_media.facebook_locale() == RegionTag("fr", "FR")
        support.is_supported.assert_called_once()
        assert support.is_supported.call_args.args == (RegionTag("fr", "FR"),)
        resolver.resolve.assert_called_once()

    def test_repeated_renders_reuse_locale(self, social_media, support, resolver):
        social_media.render(facebook_like_button=True, x_follow_button=True)
        social_media.render(facebook_share_button=True, google_plusone=True)
        resolver.resolve.assert_called_once()
        support.is_supported.assert_called_once()

    def test_unsupported_locale_uses_en_us(self, social_media, support):
        support.is_supported.return_value = False
        assert social_media.facebook_locale() == RegionTag("en", "US")
        assert social_media.region_tag() == RegionTag("fr", "FR")


class TestRender:
    """Tests for SocialMedia.render output."""

    def test_nothing_requested_returns_none(self, social_media, resolver):
        assert social_media.render() is None
        resolver.resolve.assert_not_called()

    def test_reddit_only(self, social_media, support):
        """No Facebook button means no probe."""
        assert social_media.render(reddit_button=True) == buttons.reddit()
        support.is_supported.assert_not_called()

    def test_facebook_like_loads_localized_sdk(self, social_media):
        html = social_media.render(facebook_like_button=True)

        assert html.startswith('<div id="fb-root"></div>')
        assert "//connect.facebook.com/fr_FR/sdk.js#xfbml=1&version=v2.8&appId=12345" in html
        assert html.endswith(buttons.facebook_like("www.example.com"))

    def test_facebook_unsupported_locale(self, social_media, support):
        support.is_supported.return_value = False
        html = social_media.render(facebook_share_button=True)
        assert "//connect.facebook.com/en_US/sdk.js" in html

    def test_like_and_share_single_separator(self, social_media):
        html = social_media.render(facebook_like_button=True, facebook_share_button=True)
        expected = (
            buttons.facebook_sdk("fr_FR", "12345", "v2.8")
            + buttons.facebook_like("www.example.com")
            + "<p>"
            + buttons.facebook_share("www.example.com")
        )
        assert html == expected

    def test_x_buttons_in_order(self, social_media):
        html = social_media.render(x_follow_button=True, x_tweet_button=True)
        expected = buttons.x_follow("example", "fr") + "<p>" + buttons.x_tweet("example")
        assert html == expected

    def test_x_follow_has_data_lang_for_non_english(self, social_media):
        html = social_media.render(x_follow_button=True)
        assert 'data-lang="fr"' in html

    def test_x_follow_no_data_lang_for_english(self, selector, site_options):
        signals = make_signals(language_code="en", sub_region_code="US")
        social_media = SocialMedia(signals=signals, selector=selector, options=site_options)
        assert "data-lang" not in social_media.render(x_follow_button=True)

    def test_x_tweet_with_related(self, french_signals, selector):
        options = SocialMediaOptions(x_account="example", x_related=("news", "Example news"))
        social_media = SocialMedia(signals=french_signals, selector=selector, options=options)
        assert 'data-related="news:Example news"' in social_media.render(x_tweet_button=True)

    def test_x_then_facebook_separated(self, social_media):
        html = social_media.render(x_follow_button=True, facebook_share_button=True)
        assert buttons.x_follow("example", "fr") + "<p>" + buttons.facebook_share(
            "www.example.com"
        ) in html

    def test_full_order_with_alignment(self, social_media):
        html = social_media.render(
            ButtonOptions(
                facebook_like_button=True,
                x_follow_button=True,
                linkedin_share_button=True,
                google_plusone=True,
                reddit_button=True,
                align="center",
            )
        )
        sep = '<p align="center">'
        expected = (
            buttons.facebook_sdk("fr_FR", "12345", "v2.8")
            + buttons.x_follow("example", "fr")
            + sep
            + buttons.facebook_like("www.example.com")
            + sep
            + buttons.linkedin_share()
            + sep
            + buttons.google_plusone("fr-FR", "https")
            + sep
            + buttons.reddit()
        )
        assert html == expected

    def test_google_plusone_uses_bcp47(self, social_media):
        assert "lang: 'fr-FR'" in social_media.render(google_plusone=True)

    def test_twitter_aliases(self, social_media):
        html = social_media.render(twitter_follow_button=True)
        assert "twitter-follow-button" in html

    def test_as_string_alias(self, social_media):
        assert social_media.as_string(reddit_button=True) == buttons.reddit()


class TestRenderUsageErrors:
    """Misuse of render raises SocialMediaUsageError."""

    def test_options_and_kwargs(self, social_media):
        with pytest.raises(SocialMediaUsageError):
            social_media.render(ButtonOptions(reddit_button=True), reddit_button=True)

    def test_non_button_options(self, social_media):
        with pytest.raises(SocialMediaUsageError):
            social_media.render({"reddit_button": True})

    def test_unknown_button(self, social_media):
        with pytest.raises(SocialMediaUsageError):
            social_media.render(myspace_button=True)

    def test_x_without_account(self, french_signals, selector):
        social_media = SocialMedia(
            signals=french_signals,
            selector=selector,
            options=SocialMediaOptions(host_name="www.example.com"),
        )
        with pytest.raises(SocialMediaUsageError, match="x_account"):
            social_media.render(x_tweet_button=True)

    def test_facebook_without_host_name(self, french_signals, selector, support):
        social_media = SocialMedia(
            signals=french_signals,
            selector=selector,
            options=SocialMediaOptions(x_account="example"),
        )
        with pytest.raises(SocialMediaUsageError, match="host_name"):
            social_media.render(facebook_like_button=True)
        support.is_supported.assert_not_called()


class TestLogger:
    """Tests for the optional logger collaborator."""

    def test_set_logger_none(self, social_media):
        with pytest.raises(SocialMediaUsageError):
            social_media.set_logger(None)

    def test_set_logger_receives_messages(self, social_media):
        logger = MagicMock()

        assert social_media.set_logger(logger) is social_media
        social_media.render(reddit_button=True)

        logger.debug.assert_any_call("entering_render")

    def test_constructor_logger(self, french_signals, selector):
        logger = MagicMock()
        social_media = SocialMedia(signals=french_signals, selector=selector, logger=logger)

        social_media.region_tag()

        logger.debug.assert_any_call("region_tag_resolved", region_tag="fr_FR")

    def test_logger_receives_decision_events(self, site_options):
        """Undetermined locale, probe failure and fallback reach the caller's logger."""
        session = MagicMock(spec=requests.Session)
        session.get.side_effect = requests.Timeout("read timed out")
        support = RemoteLocaleSupportCache(
            cache=InMemorySupportCache(),
            probe=LocaleProbe(FacebookSettings(_env_file=None), session=session),
        )
        selector = SupportedLocaleSelector(resolver=LocaleResolver(), support=support)
        logger = MagicMock()
        social_media = SocialMedia(
            signals=make_signals(), selector=selector, options=site_options, logger=logger
        )

        social_media.render(facebook_like_button=True)

        events = [c.args[0] for c in logger.info.call_args_list]
        assert "country_undetermined_using_default" in events
        assert "locale_probe_timeout" in events
        assert "platform_locale_fallback" in events
        assert social_media.facebook_locale() == RegionTag("en", "US")

    def test_set_logger_before_resolution(self, french_signals, selector, support):
        """A logger set after construction receives the fallback event."""
        support.is_supported.return_value = False
        social_media = SocialMedia(signals=french_signals, selector=selector)
        logger = MagicMock()

        social_media.set_logger(logger).facebook_locale()

        logger.info.assert_any_call(
            "platform_locale_fallback", region_tag="fr_FR", default_tag="en_US"
        )
        assert support.is_supported.call_args.kwargs["logger"] is logger
