"""Integration settings __init__ - exports all integration settings."""

from infrastructure.configuration.integrations.facebook import FacebookSettings
from infrastructure.configuration.integrations.maxmind import MaxMindSettings
from infrastructure.configuration.integrations.redis import RedisSettings
from infrastructure.configuration.integrations.x import XSettings

__all__ = [
    "FacebookSettings",
    "MaxMindSettings",
    "RedisSettings",
    "XSettings",
]
