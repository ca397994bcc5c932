"""Locale resolution infrastructure settings."""

from typing import Literal

from pydantic import Field

from infrastructure.configuration.base import InfrastructureSettings


class LocaleSettings(InfrastructureSettings):
    """Locale resolution and support cache configuration.

    Environment Variables:
        LOCALE_DEFAULT_REGION_TAG: Region tag used when the visitor's locale
            cannot be determined (default: en_GB)
        LOCALE_SUPPORT_CACHE_BACKEND: "memory" or "redis" (default: memory)
        LOCALE_SUPPORT_TTL_SECONDS: Lifetime of a cached probe result
            (default: 600s = 10 minutes)
        LOCALE_SUPPORT_CACHE_PREFIX: Key prefix for shared cache backends
        LOCALE_COUNTRY_HEADER: Edge header carrying the visitor's country

    Example:
        ```python
        from infrastructure.services import get_settings

        settings = get_settings()
        ttl = settings.locale.LOCALE_SUPPORT_TTL_SECONDS
        ```
    """

    LOCALE_DEFAULT_REGION_TAG: str = Field(
        default="en_GB", alias="LOCALE_DEFAULT_REGION_TAG"
    )
    LOCALE_SUPPORT_CACHE_BACKEND: Literal["memory", "redis"] = Field(
        default="memory", alias="LOCALE_SUPPORT_CACHE_BACKEND"
    )
    LOCALE_SUPPORT_TTL_SECONDS: int = Field(
        default=600, alias="LOCALE_SUPPORT_TTL_SECONDS"
    )
    LOCALE_SUPPORT_CACHE_PREFIX: str = Field(
        default="locale_support:", alias="LOCALE_SUPPORT_CACHE_PREFIX"
    )
    LOCALE_COUNTRY_HEADER: str = Field(
        default="CloudFront-Viewer-Country", alias="LOCALE_COUNTRY_HEADER"
    )
