"""Locale support cache factory."""

from typing import Optional

from infrastructure.configuration import Settings
from infrastructure.locale_support.cache import SupportCache
from infrastructure.locale_support.memory import InMemorySupportCache
from infrastructure.logging import get_module_logger

logger = get_module_logger()

# Singleton cache instance
_cache_instance: Optional[SupportCache] = None


def get_cache(settings: Settings) -> SupportCache:
    """Get the locale support cache singleton.

    The backend is chosen by ``LOCALE_SUPPORT_CACHE_BACKEND``: "memory" keeps
    results per process, "redis" shares them across instances.

    Args:
        settings: Settings instance.

    Returns:
        SupportCache instance shared by all requests in this process.
    """
    global _cache_instance

    if _cache_instance is not None:
        return _cache_instance

    backend = settings.locale.LOCALE_SUPPORT_CACHE_BACKEND
    if backend == "redis":
        from infrastructure.locale_support.redis_cache import RedisSupportCache

        _cache_instance = RedisSupportCache(settings=settings)
    else:
        _cache_instance = InMemorySupportCache()

    logger.info("initialized_locale_support_cache", backend=backend)
    return _cache_instance


def reset_cache() -> None:
    """Reset the cache singleton (for testing only)."""
    global _cache_instance
    _cache_instance = None
    logger.debug("reset_cache_singleton")
