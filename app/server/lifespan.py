from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI
from structlog.stdlib import BoundLogger

from infrastructure.configuration import Settings
from infrastructure.logging import configure_logging
from infrastructure.services import get_country_lookup, get_locale_support, get_settings


def _list_configs(settings: Settings, logger: BoundLogger) -> None:
    config_settings: dict[str, list[object]] = {"settings": []}

    for key, value in settings.model_dump().items():
        if isinstance(value, dict):
            config_settings[key] = list(value.keys())
        else:
            config_settings["settings"].append({key: value})

    logger.info("configuration_initialized", base_settings=config_settings["settings"])
    for key, value in config_settings.items():
        if key != "settings":
            logger.info("configuration_loaded", config_setting=key, keys=value)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    settings = get_settings()
    logger = configure_logging(settings=settings)
    logger.info("application_startup")
    _list_configs(settings, logger)

    support = get_locale_support()
    logger.info("locale_support_cache_ready", **support.cache.get_stats())

    yield

    support.close()
    get_country_lookup().close()
    logger.info("application_shutdown")
