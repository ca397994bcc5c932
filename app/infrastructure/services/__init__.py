"""
Dependency injection services.

Provides type aliases and provider functions for FastAPI dependency injection.
"""

from infrastructure.services.dependencies import (
    LocaleResolverDep,
    LocaleSourceDep,
    LocaleSupportDep,
    SettingsDep,
)
from infrastructure.services.providers import (
    get_country_lookup,
    get_locale_resolver,
    get_locale_source,
    get_locale_support,
    get_settings,
)

__all__ = [
    "SettingsDep",
    "LocaleResolverDep",
    "LocaleSupportDep",
    "LocaleSourceDep",
    "get_settings",
    "get_locale_resolver",
    "get_locale_support",
    "get_locale_source",
    "get_country_lookup",
]
