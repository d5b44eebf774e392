"""
Общие фикстуры для тестов системы бронирования.
"""
from datetime import date
from unittest.mock import MagicMock

import pytest

from hotel_booking.booking.application import BookingManager
from hotel_booking.booking.domain import Booking, OverlapAvailabilityStrategy, Room
from hotel_booking.booking.infrastructure import InMemoryBookingRepository
from hotel_booking.shared_kernel import RoomType

# Текущая дата в тестах - до всех дат бронирований из примеров
TODAY = date(2024, 1, 1)


@pytest.fixture
def rooms():
    return [
        Room(id=1, number="101", type=RoomType.STANDARD, capacity=2),
        Room(id=2, number="201", type=RoomType.DELUXE, capacity=2),
        Room(id=3, number="301", type=RoomType.SUITE, capacity=4),
    ]


@pytest.fixture
def repository(rooms) -> InMemoryBookingRepository:
    """Пустое хранилище с тремя номерами."""
    return InMemoryBookingRepository(rooms=rooms)


@pytest.fixture
def seeded_repository(rooms) -> InMemoryBookingRepository:
    """Хранилище с двумя бронированиями номера 1: [10, 15) и [20, 25) января."""
    return InMemoryBookingRepository(
        rooms=rooms,
        bookings=[
            Booking(
                id=1,
                room_id=1,
                guest_id=100,
                check_in=date(2024, 1, 10),
                check_out=date(2024, 1, 15),
            ),
            Booking(
                id=2,
                room_id=1,
                guest_id=101,
                check_in=date(2024, 1, 20),
                check_out=date(2024, 1, 25),
            ),
        ],
    )


@pytest.fixture
def logger() -> MagicMock:
    return MagicMock()


@pytest.fixture
def manager(repository, logger) -> BookingManager:
    return BookingManager(
        repository=repository,
        logger=logger,
        availability_strategy=OverlapAvailabilityStrategy(),
        clock=lambda: TODAY,
    )


@pytest.fixture
def seeded_manager(seeded_repository, logger) -> BookingManager:
    return BookingManager(
        repository=seeded_repository,
        logger=logger,
        availability_strategy=OverlapAvailabilityStrategy(),
        clock=lambda: TODAY,
    )
