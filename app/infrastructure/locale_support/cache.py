"""Locale support cache abstract base class."""

from abc import ABC, abstractmethod
from typing import Any, Dict, Optional


class SupportCache(ABC):
    """Abstract base class for locale support cache implementations.

    Stores whether the remote platform supports a region tag, so the
    platform is probed at most once per tag and TTL window. Implementations
    enforce expiry themselves; callers only ever get and set single keys.
    """

    @abstractmethod
    def get(self, key: str) -> Optional[bool]:
        """Get the cached support flag for a region tag.

        Args:
            key: Region tag string (e.g., "fr_FR").

        Returns:
            Cached flag, or None if not found/expired.
        """
        pass

    @abstractmethod
    def set(self, key: str, value: bool, ttl_seconds: int) -> None:
        """Cache the support flag for a region tag.

        Args:
            key: Region tag string.
            value: Whether the platform supports the tag.
            ttl_seconds: Time-to-live in seconds.
        """
        pass

    @abstractmethod
    def clear(self) -> None:
        """Clear all cached entries (for testing)."""
        pass

    @abstractmethod
    def get_stats(self) -> Dict[str, Any]:
        """Get cache statistics.

        Returns:
            Dict with cache statistics (implementation-specific).
        """
        pass
