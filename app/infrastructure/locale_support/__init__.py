"""Infrastructure locale support cache.

Verifies that the Facebook SDK exists for a visitor's region tag, caching
the answer so the platform is probed at most once per tag and TTL window.

Usage:

    from infrastructure.locale_support import (
        LocaleProbe,
        RemoteLocaleSupportCache,
        get_cache,
    )

    support = RemoteLocaleSupportCache(
        cache=get_cache(settings),
        probe=LocaleProbe(settings.facebook),
        ttl_seconds=settings.locale.LOCALE_SUPPORT_TTL_SECONDS,
    )
    support.is_supported(RegionTag.parse("fr_FR"))
"""

from infrastructure.locale_support.cache import SupportCache
from infrastructure.locale_support.factory import get_cache, reset_cache
from infrastructure.locale_support.memory import InMemorySupportCache, SupportCacheEntry
from infrastructure.locale_support.probe import (
    INVALID_LOCALE_MARKER,
    LocaleProbe,
    ProbeResult,
    ProbeStatus,
    is_invalid_locale_response,
)
from infrastructure.locale_support.service import RemoteLocaleSupportCache

__all__ = [
    "SupportCache",
    "InMemorySupportCache",
    "SupportCacheEntry",
    "get_cache",
    "reset_cache",
    "LocaleProbe",
    "ProbeResult",
    "ProbeStatus",
    "INVALID_LOCALE_MARKER",
    "is_invalid_locale_response",
    "RemoteLocaleSupportCache",
]
