"""Locale resolution logic for determining a visitor's region tag.

Turns the raw signals detected for a visitor (language, sub-region and
country locale data) into one canonical ``ll_RR`` region tag.
"""

from typing import Any, Optional, Sequence

import structlog
from infrastructure.i18n.models import LanguageEntry, LocaleInfo, LocaleSignals, RegionTag

logger = structlog.get_logger().bind(component="i18n.resolver")

DEFAULT_REGION_TAG = RegionTag("en", "GB")


class LocaleResolver:
    """Resolves a visitor's region tag from detected locale signals.

    Implements fallback chain for determining the region tag:
    1. Detected language qualified by the detected sub-region, or else by
       the visitor's country
    2. Detected language known but no region attachable: the country's
       first official language qualified by the country
    3. No usable language: the country's first official language, then its
       first spoken language
    4. Default region tag

    Resolution never fails; unusable signals fall through to the next step.
    """

    def __init__(self, default_tag: RegionTag = DEFAULT_REGION_TAG):
        """Initialize locale resolver.

        Args:
            default_tag: Fallback tag when the locale cannot be determined.
        """
        if not isinstance(default_tag, RegionTag):
            raise TypeError("default_tag must be a RegionTag")
        self.default_tag = default_tag
        self.log = logger

    def resolve(self, signals: LocaleSignals, logger: Optional[Any] = None) -> RegionTag:
        """Resolve the region tag for the given signals.

        Args:
            signals: Detected locale signals.
            logger: Optional caller logger receiving the decision events
                instead of the module logger.

        Returns:
            Resolved RegionTag, or the default tag if none can be determined.

        Raises:
            TypeError: If signals is not a LocaleSignals instance.
        """
        if not isinstance(signals, LocaleSignals):
            raise TypeError("resolve() expects a LocaleSignals instance")

        log = logger if logger is not None else self.log
        locale = signals.locale
        tag = None

        if signals.language_code:
            log.debug("language_code_detected", language_code=signals.language_code)
            tag = self._from_language_code(
                signals.language_code, signals.sub_region_code, locale, log
            )
        else:
            log.debug("language_code_undetermined")

        if tag is None and locale is not None:
            tag = self._from_languages(locale.official_languages(), locale)
            if tag is None:
                tag = self._from_languages(locale.spoken_languages(), locale)

        if tag is None:
            log.info("country_undetermined_using_default", default_tag=str(self.default_tag))
            return self.default_tag

        log.debug("region_tag_resolved", region_tag=str(tag))
        return tag

    def _from_language_code(
        self,
        language_code: str,
        sub_region_code: Optional[str],
        locale: Optional[LocaleInfo],
        log: Any,
    ) -> Optional[RegionTag]:
        region = sub_region_code
        if not region and locale is not None:
            region = locale.country_code()

        if region:
            return _build(language_code, region)

        if locale is not None:
            # The country's official language takes precedence over the
            # detected one when no region can be attached to the latter.
            return self._from_languages(locale.official_languages(), locale)

        # Can't determine the area, i.e. is it en_GB or en_US?
        log.debug("region_undetermined", language_code=language_code)
        return None

    def _from_languages(
        self, languages: Sequence[LanguageEntry], locale: LocaleInfo
    ) -> Optional[RegionTag]:
        if not languages:
            return None
        code = languages[0].code_alpha2()
        if not code:
            return None
        return _build(code, locale.country_code())


def _build(language: str, region: Optional[str]) -> Optional[RegionTag]:
    try:
        return RegionTag.build(language, region)
    except ValueError:
        logger.debug("unusable_locale_signal", language=language, region=region)
        return None
