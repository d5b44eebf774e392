"""
Интерфейсы (порты) для контекста бронирования.
"""

from __future__ import annotations

from datetime import date
from typing import Any, Iterable, List, Optional, Protocol

from ..shared_kernel import EntityId
from .domain import Booking, Room


class ILogger(Protocol):
    """Интерфейс для логгера."""

    def info(self, message: str, **kwargs: Any) -> None: ...
    def error(self, message: str, **kwargs: Any) -> None: ...
    def warning(self, message: str, **kwargs: Any) -> None: ...
    def debug(self, message: str, **kwargs: Any) -> None: ...


class IBookingRepository(Protocol):
    """Интерфейс хранилища бронирований и номеров."""

    def get_all(self) -> List[Booking]: ...
    def get_by_id(self, booking_id: EntityId) -> Optional[Booking]: ...
    def add(self, booking: Booking) -> None: ...
    def update(self, booking: Booking) -> None: ...
    def delete(self, booking_id: EntityId) -> None: ...
    def save(self) -> None: ...
    def get_rooms(self) -> List[Room]: ...


class IAvailabilityStrategy(Protocol):
    """Интерфейс стратегии проверки доступности номера."""

    def is_room_available(
        self,
        room_id: EntityId,
        check_in: date,
        check_out: date,
        existing: Iterable[Booking],
    ) -> bool: ...
