"""
Прикладной слой контекста бронирования.

BookingManager координирует хранилище, стратегию доступности и логгер.
Состояние бронирований не кэшируется: каждая операция заново читает
полный список из хранилища.
"""

import threading
from datetime import date
from typing import Callable, List, Optional

from ..shared_kernel import (
    BookingConflict,
    EntityId,
    InvalidDateRange,
    RoomUnavailable,
    today,
)
from . import interfaces as ports
from .domain import Booking, BookingPolicy, Room, next_booking_id


class BookingManager:
    """Сервис приложения для работы с бронированиями."""

    def __init__(
        self,
        repository: ports.IBookingRepository,
        logger: ports.ILogger,
        availability_strategy: ports.IAvailabilityStrategy,
        clock: Callable[[], date] = today,
    ):
        """Инициализирует сервис. Все зависимости обязательны."""
        if repository is None:
            raise ValueError("repository is required")
        if logger is None:
            raise ValueError("logger is required")
        if availability_strategy is None:
            raise ValueError("availability_strategy is required")

        self._repository = repository
        self._logger = logger
        self._availability_strategy = availability_strategy
        self._clock = clock
        # Проверка доступности и запись выполняются под одной блокировкой
        self._lock = threading.RLock()

    def create_booking(
        self,
        room_id: EntityId,
        guest_id: EntityId,
        check_in: date,
        check_out: date,
    ) -> Booking:
        """Создает новое бронирование."""
        self._validate_dates(check_in, check_out)

        with self._lock:
            existing = self._repository.get_all()
            if not self._availability_strategy.is_room_available(
                room_id, check_in, check_out, existing
            ):
                self._logger.error(
                    f"Failed booking: room {room_id} not available "
                    f"{check_in.isoformat()} - {check_out.isoformat()}",
                    room_id=room_id,
                    guest_id=guest_id,
                )
                raise RoomUnavailable(room_id, check_in, check_out)

            booking = Booking(
                id=next_booking_id(existing),
                room_id=room_id,
                guest_id=guest_id,
                check_in=check_in,
                check_out=check_out,
            )

            self._repository.add(booking)
            self._repository.save()

        self._logger.info(
            f"Created booking ID {booking.id} for room {room_id} "
            f"from {check_in.isoformat()} to {check_out.isoformat()}",
            booking_id=booking.id,
        )
        return booking

    def cancel_booking(self, booking_id: EntityId) -> bool:
        """Отменяет бронирование. Возвращает False, если бронирования нет."""
        with self._lock:
            if self._repository.get_by_id(booking_id) is None:
                self._logger.error(
                    f"Cancel failed: no booking with ID {booking_id}",
                    booking_id=booking_id,
                )
                return False

            self._repository.delete(booking_id)
            self._repository.save()

        self._logger.info(f"Cancelled booking ID {booking_id}", booking_id=booking_id)
        return True

    def get_booking(self, booking_id: EntityId) -> Optional[Booking]:
        return self._repository.get_by_id(booking_id)

    def get_all_bookings(self) -> List[Booking]:
        return list(self._repository.get_all())

    def get_bookings_for_room(self, room_id: EntityId) -> List[Booking]:
        return [b for b in self._repository.get_all() if b.room_id == room_id]

    def get_bookings_for_guest(self, guest_id: EntityId) -> List[Booking]:
        return [b for b in self._repository.get_all() if b.guest_id == guest_id]

    def is_room_available(
        self, room_id: EntityId, date_from: date, date_to: date
    ) -> bool:
        """Проверяет, что ни одно бронирование номера не пересекается с [date_from, date_to)."""
        return not any(
            b.room_id == room_id and b.overlaps(date_from, date_to)
            for b in self._repository.get_all()
        )

    def update_booking(self, updated: Booking) -> None:
        """Обновляет даты, номер или гостя существующего бронирования."""
        self._validate_dates(updated.check_in, updated.check_out)

        with self._lock:
            conflict = next(
                (b for b in self._repository.get_all() if updated.conflicts_with(b)),
                None,
            )
            if conflict is not None:
                self._logger.error(
                    f"Update failed: booking conflict for ID {updated.id}",
                    booking_id=updated.id,
                    conflicting_id=conflict.id,
                )
                raise BookingConflict(updated.id, conflict.id)

            self._repository.update(updated)
            self._repository.save()

        self._logger.info(f"Updated booking ID {updated.id}", booking_id=updated.id)

    def filter_bookings(
        self,
        date_from: Optional[date] = None,
        date_to: Optional[date] = None,
        room_id: Optional[EntityId] = None,
    ) -> List[Booking]:
        """
        Фильтрует бронирования по вхождению в границы.

        В отличие от проверки доступности, здесь сравниваются собственные
        даты бронирования: заезд не раньше date_from и выезд не позже date_to.
        """
        return [
            b
            for b in self._repository.get_all()
            if (date_from is None or b.check_in >= date_from)
            and (date_to is None or b.check_out <= date_to)
            and (room_id is None or b.room_id == room_id)
        ]

    def get_available_rooms(self) -> List[Room]:
        """Возвращает все номера хранилища, без учёта текущих бронирований."""
        return list(self._repository.get_rooms())

    def _validate_dates(self, check_in: date, check_out: date) -> None:
        try:
            BookingPolicy.validate_booking_dates(check_in, check_out, self._clock())
        except InvalidDateRange as e:
            self._logger.error(f"Invalid booking dates: {e}")
            raise
