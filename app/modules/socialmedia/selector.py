"""Selection of the locale presented to the Facebook SDK."""

from typing import Any, Optional

import structlog

from infrastructure.i18n import LocaleResolver, LocaleSignals, RegionTag
from infrastructure.locale_support import RemoteLocaleSupportCache

logger = structlog.get_logger().bind(component="socialmedia.selector")

DEFAULT_PLATFORM_TAG = RegionTag("en", "US")


class SupportedLocaleSelector:
    """Picks the visitor's region tag if the platform supports it.

    The platform default is configured independently of the resolver's
    default: a visitor whose locale cannot be determined resolves to en_GB,
    while a locale Facebook does not know falls back to en_US.
    """

    def __init__(
        self,
        resolver: LocaleResolver,
        support: RemoteLocaleSupportCache,
        default_tag: RegionTag = DEFAULT_PLATFORM_TAG,
    ):
        """Initialize selector.

        Args:
            resolver: Resolver producing the visitor's region tag.
            support: Cached platform support lookups.
            default_tag: Tag used when the resolved tag is unsupported or
                cannot be verified.
        """
        self.resolver = resolver
        self.support = support
        self.default_tag = default_tag
        self.log = logger

    def select(self, signals: LocaleSignals, logger: Optional[Any] = None) -> RegionTag:
        """Resolve the signals and return the tag to present to the platform."""
        return self.select_for(self.resolver.resolve(signals, logger=logger), logger=logger)

    def select_for(self, tag: RegionTag, logger: Optional[Any] = None) -> RegionTag:
        """Return tag if the platform supports it, else the platform default.

        Args:
            tag: Already resolved region tag.
            logger: Optional caller logger for the fallback and probe
                events; the module logger is used if omitted.

        Returns:
            tag or the platform default tag.
        """
        if self.support.is_supported(tag, logger=logger):
            return tag
        log = logger if logger is not None else self.log
        log.info(
            "platform_locale_fallback",
            region_tag=str(tag),
            default_tag=str(self.default_tag),
        )
        return self.default_tag
