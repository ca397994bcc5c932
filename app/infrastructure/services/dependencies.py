"""
Type aliases for FastAPI dependency injection.

Provides annotated type hints for common infrastructure dependencies.
"""

from typing import Annotated

from fastapi import Depends

from infrastructure.configuration import Settings
from infrastructure.i18n import LocaleResolver, RequestLocaleSource
from infrastructure.locale_support import RemoteLocaleSupportCache
from infrastructure.services.providers import (
    get_locale_resolver,
    get_locale_source,
    get_locale_support,
    get_settings,
)

# Settings dependency
SettingsDep = Annotated[Settings, Depends(get_settings)]

# Locale resolution dependencies
LocaleResolverDep = Annotated[LocaleResolver, Depends(get_locale_resolver)]
LocaleSupportDep = Annotated[RemoteLocaleSupportCache, Depends(get_locale_support)]
LocaleSourceDep = Annotated[RequestLocaleSource, Depends(get_locale_source)]

__all__ = [
    "SettingsDep",
    "LocaleResolverDep",
    "LocaleSupportDep",
    "LocaleSourceDep",
]
