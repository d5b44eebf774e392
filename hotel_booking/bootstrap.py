from typing import Any, Dict, Optional

from .booking.application import BookingManager
from .booking.domain import OverlapAvailabilityStrategy
from .booking.infrastructure import (
    InMemoryBookingRepository,
    JsonFileBookingRepository,
    StandardLogger,
)
from .config import BookingSettings, StorageBackend, get_settings, setup_logging


def create_repository(settings: BookingSettings) -> InMemoryBookingRepository:
    if settings.storage == StorageBackend.JSON:
        return JsonFileBookingRepository(
            bookings_file=settings.bookings_file, rooms_file=settings.rooms_file
        )
    return InMemoryBookingRepository()


def bootstrap_app(settings: Optional[BookingSettings] = None) -> Dict[str, Any]:
    """Создает и настраивает все компоненты приложения."""
    settings = settings or get_settings()

    # 1. Настраиваем логирование
    logger = StandardLogger(setup_logging(settings))

    # 2. Создаем хранилище по настройкам
    repository = create_repository(settings)

    # 3. Создаем сервис, передавая ему зависимости
    booking_manager = BookingManager(
        repository=repository,
        logger=logger,
        availability_strategy=OverlapAvailabilityStrategy(),
    )

    return {
        "settings": settings,
        "repository": repository,
        "booking_manager": booking_manager,
    }
