"""Per-request memo of resolved locales."""

from dataclasses import dataclass
from typing import Callable, Optional

from infrastructure.i18n import RegionTag


@dataclass
class ResolverState:
    """Holds the region tag and platform locale of one request.

    Each value is computed on first access and kept for the lifetime of the
    owning object, even if the underlying signals could change.
    """

    _region_tag: Optional[RegionTag] = None
    _platform_locale: Optional[RegionTag] = None

    def region_tag(self, compute: Callable[[], RegionTag]) -> RegionTag:
        if self._region_tag is None:
            self._region_tag = compute()
        return self._region_tag

    def platform_locale(self, compute: Callable[[], RegionTag]) -> RegionTag:
        if self._platform_locale is None:
            self._platform_locale = compute()
        return self._platform_locale

    @property
    def is_resolved(self) -> bool:
        return self._region_tag is not None

    @property
    def is_verified(self) -> bool:
        return self._platform_locale is not None
