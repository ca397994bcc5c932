"""Remote locale support lookups with a write-through cache."""

from typing import Any, Optional, Union

from infrastructure.i18n.models import RegionTag
from infrastructure.locale_support.cache import SupportCache
from infrastructure.locale_support.probe import LocaleProbe
from infrastructure.logging import get_module_logger

logger = get_module_logger()

DEFAULT_TTL_SECONDS = 600


class RemoteLocaleSupportCache:
    """Answers "does the platform support this locale?" with caching.

    On a cache miss the platform is probed once and the outcome, whatever it
    is, is written to the cache with the same TTL, so a flapping remote
    service is probed at most once per tag and TTL window. Concurrent misses
    may probe twice; the last write wins.

    Usage:
        support = RemoteLocaleSupportCache(cache=InMemorySupportCache(), probe=probe)
        if support.is_supported(RegionTag.parse("fr_FR")):
            ...
    """

    def __init__(
        self,
        cache: SupportCache,
        probe: LocaleProbe,
        ttl_seconds: int = DEFAULT_TTL_SECONDS,
    ):
        """Initialize the support cache.

        Args:
            cache: Cache backend storing the support flags.
            probe: Probe issuing the HTTP request on a miss.
            ttl_seconds: Lifetime of every cached outcome.
        """
        self._cache = cache
        self._probe = probe
        self.ttl_seconds = ttl_seconds
        self.log = logger

    def is_supported(
        self, candidate: Union[RegionTag, str], logger: Optional[Any] = None
    ) -> bool:
        """Check whether the platform supports a region tag.

        Args:
            candidate: Region tag to check.
            logger: Optional caller logger receiving the probe events
                instead of the module logger.

        Returns:
            True if supported. Any transport, HTTP or cache failure yields
            False.

        Raises:
            TypeError: If candidate is neither a RegionTag nor a string.
        """
        if not isinstance(candidate, (RegionTag, str)):
            raise TypeError("is_supported() expects a RegionTag or tag string")
        key = str(candidate)
        log = logger if logger is not None else self.log

        try:
            cached = self._cache.get(key)
        except Exception as e:
            self.log.warning("locale_support_cache_unavailable", key=key, error=str(e))
            cached = None

        if cached is not None:
            return bool(cached)

        result = self._probe.probe(key, logger=logger)
        supported = result.is_supported

        try:
            self._cache.set(key, supported, self.ttl_seconds)
        except Exception as e:
            self.log.warning("locale_support_cache_write_failed", key=key, error=str(e))

        log.info(
            "locale_support_probed",
            key=key,
            supported=supported,
            probe_status=result.status.value,
        )
        return supported

    @property
    def cache(self) -> SupportCache:
        """Access the underlying cache backend."""
        return self._cache

    def close(self) -> None:
        """Release the probe's HTTP connections."""
        self._probe.close()
