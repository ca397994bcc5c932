"""In-process locale support cache with TTL."""

import threading
import time
from dataclasses import dataclass
from typing import Any, Callable, Dict, Optional

from infrastructure.locale_support.cache import SupportCache
from infrastructure.logging import get_module_logger

logger = get_module_logger()


@dataclass(frozen=True)
class SupportCacheEntry:
    """Cached probe outcome for one region tag."""

    tag: str
    supported: bool
    expires_at: float


class InMemorySupportCache(SupportCache):
    """Thread-safe in-memory cache for a single process.

    Expired entries are dropped when read. Suitable for single-instance
    deployments and tests; use the Redis backend to share results across
    processes.
    """

    def __init__(self, clock: Callable[[], float] = time.monotonic):
        """Initialize in-memory cache.

        Args:
            clock: Monotonic time source in seconds (injectable for tests).
        """
        self._clock = clock
        self._entries: Dict[str, SupportCacheEntry] = {}
        self._lock = threading.Lock()

    def get(self, key: str) -> Optional[bool]:
        with self._lock:
            entry = self._entries.get(key)
            if entry is None:
                logger.debug("locale_support_cache_miss", key=key)
                return None
            if entry.expires_at <= self._clock():
                del self._entries[key]
                logger.debug("locale_support_cache_expired", key=key)
                return None
        logger.debug("locale_support_cache_hit", key=key, supported=entry.supported)
        return entry.supported

    def set(self, key: str, value: bool, ttl_seconds: int) -> None:
        entry = SupportCacheEntry(
            tag=key,
            supported=bool(value),
            expires_at=self._clock() + ttl_seconds,
        )
        with self._lock:
            self._entries[key] = entry
        logger.debug(
            "locale_support_cache_set",
            key=key,
            supported=entry.supported,
            ttl_seconds=ttl_seconds,
        )

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()

    def get_stats(self) -> Dict[str, Any]:
        with self._lock:
            return {"backend": "memory", "entries": len(self._entries)}
