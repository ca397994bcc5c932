"""
Factory functions for dependency injection.

Provides application-scoped singleton providers for the locale resolution
services.
"""

from functools import lru_cache

from infrastructure.configuration import Settings
from infrastructure.i18n import LocaleResolver, RegionTag, RequestLocaleSource
from infrastructure.locale_support import LocaleProbe, RemoteLocaleSupportCache, get_cache
from integrations.maxmind import CountryLookup


@lru_cache
def get_settings() -> Settings:
    """
    Get application-scoped settings singleton.

    The @lru_cache decorator ensures only ONE instance is created per process.

    Application code should use the DI type alias for testability:
        from infrastructure.services import SettingsDep
        @router.get("/locale")
        def get_locale(settings: SettingsDep):
            ...

    Returns:
        Settings: Cached settings instance loaded from environment.
    """
    return Settings()


@lru_cache
def get_locale_resolver() -> LocaleResolver:
    """
    Get application-scoped locale resolver singleton.

    Returns:
        LocaleResolver: Resolver falling back to LOCALE_DEFAULT_REGION_TAG.
    """
    settings = get_settings()
    return LocaleResolver(
        default_tag=RegionTag.parse(settings.locale.LOCALE_DEFAULT_REGION_TAG)
    )


@lru_cache
def get_locale_support() -> RemoteLocaleSupportCache:
    """
    Get application-scoped Facebook locale support singleton.

    Returns:
        RemoteLocaleSupportCache: Support lookups sharing the configured
            cache backend and one HTTP session.
    """
    settings = get_settings()
    return RemoteLocaleSupportCache(
        cache=get_cache(settings),
        probe=LocaleProbe(settings.facebook),
        ttl_seconds=settings.locale.LOCALE_SUPPORT_TTL_SECONDS,
    )


@lru_cache
def get_country_lookup() -> CountryLookup:
    """
    Get application-scoped MaxMind country lookup singleton.

    One database reader is shared by every request in the process.

    Returns:
        CountryLookup: Lookup over MAXMIND_DB_PATH.
    """
    return CountryLookup(get_settings().maxmind.MAXMIND_DB_PATH)


@lru_cache
def get_locale_source() -> RequestLocaleSource:
    """
    Get application-scoped request locale source singleton.

    Returns:
        RequestLocaleSource: Source reading Accept-Language, the country
            header and, failing that, the MaxMind database.
    """
    settings = get_settings()
    return RequestLocaleSource(
        country_header=settings.locale.LOCALE_COUNTRY_HEADER,
        country_lookup=get_country_lookup(),
    )
