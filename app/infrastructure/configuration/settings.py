"""Social media buttons configuration settings - main aggregator."""

from pydantic_settings import BaseSettings, SettingsConfigDict

# Integration settings
from infrastructure.configuration.integrations import (
    FacebookSettings,
    MaxMindSettings,
    RedisSettings,
    XSettings,
)

# Infrastructure settings
from infrastructure.configuration.infrastructure import LocaleSettings


class Settings(BaseSettings):
    """Application configuration settings - main aggregator.

    Aggregates all domain-specific settings into a single configuration object.
    Settings are organized by concern:

    - **Integrations**: External service configurations (Facebook, X, MaxMind, Redis)
    - **Infrastructure**: Core system configurations (locale resolution and caching)

    Environment Variables:
        PREFIX: Environment prefix for non-production deployments
        LOG_LEVEL: Logging level (DEBUG, INFO, WARNING, ERROR)
        GIT_SHA: Git commit SHA for deployment tracking

    Example:
        ```python
        from infrastructure.services import get_settings

        settings = get_settings()

        default_locale = settings.facebook.FACEBOOK_DEFAULT_LOCALE
        ttl = settings.locale.LOCALE_SUPPORT_TTL_SECONDS

        if settings.is_production:
            # Production-specific logic...
        ```
    """

    # Application-level settings
    PREFIX: str = ""
    LOG_LEVEL: str = "INFO"
    GIT_SHA: str = "Unknown"

    # Integration settings
    facebook: FacebookSettings
    x: XSettings
    maxmind: MaxMindSettings
    redis: RedisSettings

    # Infrastructure settings
    locale: LocaleSettings

    @property
    def is_production(self) -> bool:
        """Check if the application is running in production.

        Returns:
            True if PREFIX is empty (production), False otherwise.
        """
        return not bool(self.PREFIX)

    def __init__(self, **kwargs):
        """Initialize Settings with automatic subsettings instantiation.

        Args:
            **kwargs: Optional overrides for specific settings sections.
        """
        settings_map = {
            # Integrations
            "facebook": FacebookSettings,
            "x": XSettings,
            "maxmind": MaxMindSettings,
            "redis": RedisSettings,
            # Infrastructure
            "locale": LocaleSettings,
        }

        for setting_name, setting_class in settings_map.items():
            if setting_name not in kwargs:
                kwargs[setting_name] = setting_class()

        super().__init__(**kwargs)

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="ignore",
    )
