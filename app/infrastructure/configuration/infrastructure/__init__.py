"""Infrastructure settings __init__ - exports all infrastructure settings."""

from infrastructure.configuration.infrastructure.locale import LocaleSettings

__all__ = ["LocaleSettings"]
