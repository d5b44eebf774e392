"""
Конфигурация приложения и настройка логирования.
"""

import logging
import logging.config
from enum import Enum
from functools import lru_cache
from typing import Any, Dict, Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class StorageBackend(str, Enum):
    """Поддерживаемые хранилища бронирований."""

    MEMORY = "memory"
    JSON = "json"


class LogLevel(str, Enum):
    """Уровни логирования."""

    CRITICAL = "CRITICAL"
    ERROR = "ERROR"
    WARNING = "WARNING"
    INFO = "INFO"
    DEBUG = "DEBUG"


class LogFormat(str, Enum):
    PLAIN = "plain"
    JSON = "json"


class BookingSettings(BaseSettings):
    """Настройки системы бронирования (переменные окружения HOTEL_BOOKING_*)."""

    model_config = SettingsConfigDict(
        env_prefix="HOTEL_BOOKING_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    storage: StorageBackend = Field(default=StorageBackend.MEMORY)
    bookings_file: str = Field(default="data/bookings.json")
    rooms_file: Optional[str] = Field(default=None)
    log_level: LogLevel = Field(default=LogLevel.INFO)
    log_format: LogFormat = Field(default=LogFormat.PLAIN)


@lru_cache()
def get_settings() -> BookingSettings:
    """Кэшированный экземпляр настроек."""
    return BookingSettings()


def build_logging_config(settings: BookingSettings) -> Dict[str, Any]:
    """Собирает словарь для logging.config.dictConfig."""
    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "plain": {
                "format": "%(asctime)s [%(levelname)s] %(name)s: %(message)s",
            },
            "json": {
                "()": "pythonjsonlogger.json.JsonFormatter",
                "fmt": "%(asctime)s %(levelname)s %(name)s %(message)s",
            },
        },
        "handlers": {
            "console": {
                "class": "logging.StreamHandler",
                "formatter": settings.log_format.value,
                "stream": "ext://sys.stderr",
            },
        },
        "loggers": {
            "hotel_booking": {
                "handlers": ["console"],
                "level": settings.log_level.value,
                "propagate": False,
            },
        },
    }


def setup_logging(settings: BookingSettings) -> logging.Logger:
    """Настраивает логирование приложения."""
    logging.config.dictConfig(build_logging_config(settings))
    logger = logging.getLogger("hotel_booking")
    logger.debug(f"Logging initialized with level: {settings.log_level.value}")
    return logger
