"""Infrastructure configuration module - public API.

This module provides centralized configuration management for the social
media buttons service using Pydantic BaseSettings with domain-based
organization.

Exports:
    Settings: Main settings class (for testing/overrides)
    LocaleSettings: Locale resolution settings class
    FacebookSettings: Facebook SDK settings class

Example:
    ```python
    from infrastructure.services import get_settings

    settings = get_settings()

    sdk_url = settings.facebook.FACEBOOK_SDK_BASE_URL
    backend = settings.locale.LOCALE_SUPPORT_CACHE_BACKEND
    ```
"""

from infrastructure.configuration.settings import Settings
from infrastructure.configuration.infrastructure.locale import LocaleSettings
from infrastructure.configuration.integrations.facebook import FacebookSettings

__all__ = ["Settings", "LocaleSettings", "FacebookSettings"]
