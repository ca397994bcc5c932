"""Request-scoped social media buttons.

A SocialMedia object is created per page render. It resolves the visitor's
region tag and the Facebook SDK locale at most once, however many times
buttons are rendered.

Usage:
    sm = SocialMedia(
        signals=LocaleSignals(language_code="fr", sub_region_code="FR"),
        selector=selector,
        options=SocialMediaOptions(x_account="example", host_name="www.example.com"),
    )
    html = sm.render(ButtonOptions(facebook_like_button=True, x_follow_button=True))
"""

from typing import Any, Optional, Protocol

from infrastructure.i18n import LocaleSignals, RegionTag
from infrastructure.logging import get_module_logger
from modules.socialmedia import buttons
from modules.socialmedia.errors import SocialMediaUsageError
from modules.socialmedia.schemas import ButtonOptions, SocialMediaOptions
from modules.socialmedia.selector import SupportedLocaleSelector
from modules.socialmedia.state import ResolverState

module_logger = get_module_logger()


class SupportsLogging(Protocol):
    """Minimal logger capability set; structlog BoundLogger qualifies."""

    def debug(self, event: str, *args: Any, **kwargs: Any) -> Any: ...

    def info(self, event: str, *args: Any, **kwargs: Any) -> Any: ...


class SocialMedia:
    """Social media buttons in the visitor's language."""

    def __init__(
        self,
        signals: LocaleSignals,
        selector: SupportedLocaleSelector,
        options: Optional[SocialMediaOptions] = None,
        facebook_app_id: str = "",
        facebook_sdk_version: str = "v2.8",
        logger: Optional[SupportsLogging] = None,
    ):
        """Initialize a SocialMedia object for one request.

        Args:
            signals: Locale signals detected for the visitor.
            selector: Selector resolving and verifying the locale.
            options: Site-wide options (X account, host name, ...).
            facebook_app_id: Facebook application ID for the SDK loader.
            facebook_sdk_version: Graph API version for the SDK loader.
            logger: Optional logger; the module logger is used if omitted.

        Raises:
            SocialMediaUsageError: If signals or options have the wrong type.
        """
        if not isinstance(signals, LocaleSignals):
            raise SocialMediaUsageError("signals must be a LocaleSignals instance")
        if options is not None and not isinstance(options, SocialMediaOptions):
            raise SocialMediaUsageError("options must be a SocialMediaOptions instance")

        self.signals = signals
        self.options = options or SocialMediaOptions()
        self.facebook_app_id = facebook_app_id
        self.facebook_sdk_version = facebook_sdk_version
        self._selector = selector
        self._state = ResolverState()
        self._logger = logger or module_logger

    def set_logger(self, logger: SupportsLogging) -> "SocialMedia":
        """Replace the logger used for this object's messages.

        Raises:
            SocialMediaUsageError: If logger is None.
        """
        if logger is None:
            raise SocialMediaUsageError("Usage: set_logger(logger)")
        self._logger = logger
        return self

    def region_tag(self) -> RegionTag:
        """The visitor's region tag, resolved on first call."""
        return self._state.region_tag(self._resolve)

    def facebook_locale(self) -> RegionTag:
        """The region tag presented to Facebook, verified on first call."""
        return self._state.platform_locale(
            lambda: self._selector.select_for(self.region_tag(), logger=self._logger)
        )

    def _resolve(self) -> RegionTag:
        return self._selector.resolver.resolve(self.signals, logger=self._logger)

    def render(self, options: Optional[ButtonOptions] = None, **kwargs: Any) -> Optional[str]:
        """Return the HTML for the requested buttons.

        Buttons can be requested with a ButtonOptions instance or with the
        equivalent keyword arguments, not both.

        Returns:
            HTML fragment, or None if no button was requested.

        Raises:
            SocialMediaUsageError: If the arguments are invalid, or a button
                needs an option (x_account, host_name) that is not set.
        """
        options = self._button_options(options, kwargs)
        self._logger.debug("entering_render")

        if not options.wants_any:
            return None

        if options.wants_x and not self.options.x_account:
            raise SocialMediaUsageError("X buttons need the x_account option")
        if options.wants_facebook and not self.options.host_name:
            raise SocialMediaUsageError("Facebook buttons need the host_name option")

        separator = buttons.paragraph(options.align)
        html = ""

        if options.wants_facebook:
            html += buttons.facebook_sdk(
                str(self.facebook_locale()),
                self.facebook_app_id,
                self.facebook_sdk_version,
            )

        if options.x_follow_button:
            language = self.region_tag().language
            html += buttons.x_follow(
                self.options.x_account, None if language == "en" else language
            )
            if options.x_tweet_button:
                html += separator
        if options.x_tweet_button:
            html += buttons.x_tweet(self.options.x_account, self.options.x_related)

        if options.facebook_like_button:
            if options.wants_x:
                html += separator
            html += buttons.facebook_like(self.options.host_name)
            if (
                options.facebook_share_button
                or options.linkedin_share_button
                or options.google_plusone
                or options.reddit_button
            ):
                html += separator

        if options.facebook_share_button:
            if options.wants_x and not options.facebook_like_button:
                html += separator
            html += buttons.facebook_share(self.options.host_name)
            if options.linkedin_share_button or options.google_plusone or options.reddit_button:
                html += separator

        if options.linkedin_share_button:
            html += buttons.linkedin_share()
            if options.google_plusone or options.reddit_button:
                html += separator

        if options.google_plusone:
            html += buttons.google_plusone(self.region_tag().as_bcp47(), self.options.protocol)
            if options.reddit_button:
                html += separator

        if options.reddit_button:
            html += buttons.reddit()

        return html

    as_string = render

    @staticmethod
    def _button_options(options: Optional[ButtonOptions], kwargs: dict) -> ButtonOptions:
        if options is not None:
            if kwargs:
                raise SocialMediaUsageError("Usage: render(options) or render(**buttons)")
            if not isinstance(options, ButtonOptions):
                raise SocialMediaUsageError("options must be a ButtonOptions instance")
            return options
        try:
            return ButtonOptions(**kwargs)
        except ValueError as e:
            raise SocialMediaUsageError(str(e)) from e
