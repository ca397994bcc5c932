"""Locale signal sources.

Provides the country-level locale data backed by CLDR (via Babel) and the
extraction of locale signals from an incoming HTTP request.
"""

from dataclasses import dataclass
from typing import Callable, List, Mapping, Optional, Tuple

import structlog
from babel.languages import get_official_languages, get_territory_language_info

from infrastructure.i18n.models import Language, LocaleSignals

logger = structlog.get_logger().bind(component="i18n.sources")


def _alpha2(code: Optional[str]) -> Optional[str]:
    """Reduce a CLDR language code ("zh_Hant", "gsw") to ISO 639-1 or None."""
    if not code:
        return None
    language = code.split("_")[0]
    if len(language) == 2 and language.isalpha():
        return language.lower()
    return None


class BabelLocaleInfo:
    """LocaleInfo backed by CLDR territory data.

    Attributes:
        territory: Uppercase ISO 3166-1 alpha-2 country code.
    """

    def __init__(self, territory: str):
        if not territory or not isinstance(territory, str):
            raise ValueError("territory must be a non-empty country code")
        self.territory = territory.strip().upper()

    def __repr__(self) -> str:
        return f"BabelLocaleInfo({self.territory!r})"

    def country_code(self) -> str:
        return self.territory

    def official_languages(self) -> List[Language]:
        """Official and de facto official languages, most spoken first."""
        codes = get_official_languages(self.territory, de_facto=True)
        return [Language(_alpha2(code)) for code in codes]

    def spoken_languages(self) -> List[Language]:
        """All languages CLDR lists for the territory, most spoken first."""
        info = get_territory_language_info(self.territory)
        ordered = sorted(
            info.items(),
            key=lambda item: item[1].get("population_percent") or 0,
            reverse=True,
        )
        return [Language(_alpha2(code)) for code, _ in ordered]


def parse_accept_language(header: Optional[str]) -> List[Tuple[str, float]]:
    """Parse an Accept-Language header into (range, quality) pairs.

    "en-US,en;q=0.9,fr-FR;q=0.8" -> [("en-US", 1.0), ("en", 0.9), ("fr-FR", 0.8)]

    Pairs are sorted by quality, highest first. Wildcards, empty ranges
    and ranges with q=0 are dropped; unparsable quality values count as 1.0.
    """
    if not header:
        return []

    preferences = []
    for part in header.split(","):
        lang_range = part.split(";")[0].strip()
        if not lang_range or lang_range == "*":
            continue
        quality = 1.0
        if ";" in part and "q=" in part:
            try:
                quality = float(part.split("q=")[1])
            except ValueError:
                quality = 1.0
        if quality <= 0:
            # q=0 marks the range as not acceptable
            continue
        preferences.append((lang_range, quality))

    return sorted(preferences, key=lambda x: x[1], reverse=True)


@dataclass
class RequestLocaleSource:
    """Builds LocaleSignals from the headers and address of a request.

    Attributes:
        country_header: Name of an edge header carrying the visitor's
            country (e.g., "CloudFront-Viewer-Country").
        country_lookup: Optional callable mapping a client IP to a country
            code, used when the header is absent.
    """

    country_header: Optional[str] = None
    country_lookup: Optional[Callable[[str], Optional[str]]] = None

    def signals(
        self, headers: Mapping[str, str], client_ip: Optional[str] = None
    ) -> LocaleSignals:
        """Extract locale signals.

        Args:
            headers: Case-insensitive request header mapping.
            client_ip: Remote address of the visitor.

        Returns:
            LocaleSignals; fields that cannot be detected are None.
        """
        language_code = None
        sub_region_code = None

        preferences = parse_accept_language(headers.get("accept-language"))
        if preferences:
            parts = preferences[0][0].replace("_", "-").split("-")
            language_code = _alpha2(parts[0])
            if language_code:
                sub_region_code = next(
                    (p.upper() for p in parts[1:] if len(p) == 2 and p.isalpha()),
                    None,
                )

        country = self._country(headers, client_ip)
        locale = BabelLocaleInfo(country) if country else None

        logger.debug(
            "locale_signals_detected",
            language_code=language_code,
            sub_region_code=sub_region_code,
            country=country,
        )
        return LocaleSignals(
            language_code=language_code,
            sub_region_code=sub_region_code,
            locale=locale,
        )

    def _country(
        self, headers: Mapping[str, str], client_ip: Optional[str]
    ) -> Optional[str]:
        country = None
        if self.country_header:
            country = headers.get(self.country_header.lower())
        if not country and self.country_lookup and client_ip:
            country = self.country_lookup(client_ip)
        if country and len(country.strip()) == 2 and country.strip().isalpha():
            return country.strip().upper()
        return None
