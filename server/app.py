from __future__ import annotations

import copy
import logging.config

from fastapi import APIRouter, FastAPI

from config.settings import app_settings
from server.api.relay import router as relay_router
from server.api.weather import router as weather_router


def build_logging_config(log_level: str) -> dict:
    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "default": {
                "format": "%(asctime)s %(levelname)s %(name)s: %(message)s",
            },
        },
        "handlers": {
            "console": {
                "class": "logging.StreamHandler",
                "level": log_level,
                "formatter": "default",
            },
        },
        "root": {
            "handlers": ["console"],
            "level": log_level,
        },
    }


logging_config = build_logging_config(app_settings.log_level)


class AppBuilder:
    def __init__(self, title: str = 'Weather service'):
        self._app = FastAPI(title=title)
        self._api_prefix = "/api"
        self._routers: list[tuple[APIRouter, list[str]]] = []
        self._log_to_file = False
        self._log_file_path = None
        self._file_log_level = None

    def set_api_prefix(self, prefix: str) -> AppBuilder:
        self._api_prefix = prefix
        return self

    def add_router(self, router: APIRouter, tags: list[str]) -> AppBuilder:
        self._routers.append((router, tags))
        return self

    def enable_file_logging(self, filename: str, log_level: str) -> AppBuilder:
        self._log_to_file = True
        self._log_file_path = filename
        self._file_log_level = log_level
        return self

    def _configure_file_logging(self) -> dict:
        config = copy.deepcopy(logging_config)
        config['handlers']['file'] = {
            "class": "logging.FileHandler",
            "level": self._file_log_level,
            "filename": self._log_file_path,
            "formatter": "default",
        }
        config['root']['handlers'].append('file')
        logging.config.dictConfig(config)
        return config

    def build(self) -> FastAPI:
        if self._log_to_file:
            self._configure_file_logging()
        for router, tags in self._routers:
            self._app.include_router(
                router, prefix=self._api_prefix, tags=tags
            )
        return self._app


def _new_builder(title: str, prefix: str) -> AppBuilder:
    logging.config.dictConfig(logging_config)
    builder = AppBuilder(title).set_api_prefix(prefix)
    if app_settings.enable_file_logging:
        builder.enable_file_logging(
            filename=app_settings.log_file_path,
            log_level=app_settings.log_level,
        )
    return builder


def create_target_app() -> FastAPI:
    builder = _new_builder('Target service', app_settings.target_api_prefix)
    return builder.add_router(weather_router, tags=['WeatherForecast']).build()


def create_client_app() -> FastAPI:
    builder = _new_builder('Client service', app_settings.client_api_prefix)
    return builder.add_router(relay_router, tags=['WeatherRelay']).build()
