"""Infrastructure modules for the social media buttons service.

Centralized infrastructure components:
- configuration: Settings management (Settings, LocaleSettings, FacebookSettings)
- logging: Structured logging (configure_logging, get_module_logger)
- i18n: Visitor locale resolution (RegionTag, LocaleSignals, LocaleResolver)
- locale_support: Cached Facebook locale support probes
- services: Dependency injection services (SettingsDep, get_settings)
"""
