"""i18n system - visitor locale resolution.

Resolves the locale signals detected for a visitor into a canonical
``ll_RR`` region tag.

Main components:
- models: RegionTag, LocaleSignals, LocaleInfo, LanguageEntry
- resolvers: LocaleResolver implementing the fallback chain
- sources: BabelLocaleInfo and RequestLocaleSource for detecting signals
"""

from infrastructure.i18n.models import (
    Language,
    LanguageEntry,
    LocaleInfo,
    LocaleSignals,
    RegionTag,
)
from infrastructure.i18n.resolvers import DEFAULT_REGION_TAG, LocaleResolver
from infrastructure.i18n.sources import (
    BabelLocaleInfo,
    RequestLocaleSource,
    parse_accept_language,
)

__all__ = [
    "RegionTag",
    "LocaleSignals",
    "LocaleInfo",
    "LanguageEntry",
    "Language",
    "LocaleResolver",
    "DEFAULT_REGION_TAG",
    "BabelLocaleInfo",
    "RequestLocaleSource",
    "parse_accept_language",
]
