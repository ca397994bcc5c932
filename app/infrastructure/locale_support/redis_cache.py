"""Redis-backed locale support cache.

Shares probe outcomes across processes and instances. Expiry is delegated to
Redis (SETEX). Redis being unavailable never breaks page rendering: reads
degrade to a cache miss and writes are dropped.
"""

from typing import Any, Dict, Optional

from redis import ConnectionPool, Redis, RedisError  # type: ignore

from infrastructure.configuration import Settings
from infrastructure.locale_support.cache import SupportCache
from infrastructure.logging import get_module_logger

logger = get_module_logger()


class RedisSupportCache(SupportCache):
    """Redis/Valkey locale support cache.

    Values are stored as "1"/"0" under ``<prefix><tag>``.
    """

    def __init__(
        self,
        settings: Settings,
        client: Optional[Redis] = None,
    ):
        """Initialize Redis cache.

        Args:
            settings: Settings instance (Redis endpoint and key prefix).
            client: Optional pre-configured Redis client. Created from
                settings on first use if omitted.
        """
        self.prefix = settings.locale.LOCALE_SUPPORT_CACHE_PREFIX
        self._redis_settings = settings.redis
        self._client = client

    @property
    def client(self) -> Redis:
        if self._client is None:
            pool = ConnectionPool(
                host=self._redis_settings.REDIS_HOST,
                port=self._redis_settings.REDIS_PORT,
                db=self._redis_settings.REDIS_DB,
                decode_responses=True,
                socket_timeout=self._redis_settings.REDIS_SOCKET_TIMEOUT,
                socket_connect_timeout=self._redis_settings.REDIS_SOCKET_TIMEOUT,
            )
            self._client = Redis(connection_pool=pool)
            logger.info(
                "redis_support_cache_connected",
                host=self._redis_settings.REDIS_HOST,
                port=self._redis_settings.REDIS_PORT,
            )
        return self._client

    def _key(self, key: str) -> str:
        return f"{self.prefix}{key}"

    def get(self, key: str) -> Optional[bool]:
        try:
            value = self.client.get(self._key(key))
        except RedisError as e:
            logger.warning("locale_support_cache_get_error", key=key, error=str(e))
            return None
        if value is None:
            logger.debug("locale_support_cache_miss", key=key)
            return None
        if isinstance(value, bytes):
            value = value.decode()
        return value == "1"

    def set(self, key: str, value: bool, ttl_seconds: int) -> None:
        try:
            self.client.setex(self._key(key), ttl_seconds, "1" if value else "0")
        except RedisError as e:
            logger.warning("locale_support_cache_set_error", key=key, error=str(e))
            return
        logger.debug(
            "locale_support_cache_set",
            key=key,
            supported=bool(value),
            ttl_seconds=ttl_seconds,
        )

    def clear(self) -> None:
        """Delete every key under the cache prefix."""
        logger.warning("locale_support_cache_clear_called", backend="redis")
        try:
            keys = list(self.client.scan_iter(match=f"{self.prefix}*"))
            if keys:
                self.client.delete(*keys)
        except RedisError as e:
            logger.error("locale_support_cache_clear_error", error=str(e))

    def get_stats(self) -> Dict[str, Any]:
        return {
            "backend": "redis",
            "host": self._redis_settings.REDIS_HOST,
            "port": self._redis_settings.REDIS_PORT,
            "prefix": self.prefix,
        }
