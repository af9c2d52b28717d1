from contextlib import asynccontextmanager
from typing import AsyncIterator, TYPE_CHECKING

from fastapi import FastAPI
from structlog.stdlib import BoundLogger

from infrastructure.i18n import Surface
from infrastructure.logging.setup import configure_logging
from infrastructure.services import get_settings, get_translator

if TYPE_CHECKING:
    from infrastructure.configuration import Settings


def _get_logger(settings: "Settings") -> BoundLogger:
    return configure_logging(log_level=settings.LOG_LEVEL)


def _list_configs(settings: "Settings", logger: BoundLogger) -> None:
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


def _preload_translations(
    app: FastAPI, settings: "Settings", logger: BoundLogger
) -> None:
    if not settings.i18n.PRELOAD:
        logger.info("translation_preload_skipped")
        return

    app.state.translators = {}
    for surface in Surface:
        try:
            translator = get_translator(surface)
        except (FileNotFoundError, ValueError) as exc:
            logger.error(
                "translation_preload_failed", surface=surface.value, error=str(exc)
            )
            raise
        app.state.translators[surface.value] = translator
    logger.info("translations_preloaded", surfaces=list(app.state.translators.keys()))


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    settings = get_settings()
    logger = _get_logger(settings)

    app.state.settings = settings
    app.state.logger = logger

    logger.info("application_startup")
    _list_configs(settings, logger)
    _preload_translations(app, settings, logger)

    yield

    logger.info("application_shutdown")
