"""
Доменная модель контекста бронирования.

Содержит сущности бронирования и номера, политику проверки дат
и стратегию проверки доступности номера.
"""

from datetime import date
from typing import Iterable, List

from pydantic import BaseModel, Field

from ..shared_kernel import (
    DateRange,
    EntityId,
    InvalidDateRange,
    RoomType,
    dates_overlap,
)


class Room(BaseModel):
    """Номер в отеле."""

    id: EntityId
    number: str  # Номер комнаты (например, "101", "202A")
    type: RoomType = RoomType.STANDARD
    capacity: int = Field(2, gt=0)
    amenities: List[str] = Field(default_factory=list)  # Удобства в номере


class Booking(BaseModel):
    """
    Бронирование номера в отеле.

    Порядок дат здесь не проверяется: бронирование с некорректными датами
    можно построить и передать в update_booking, который отклонит его
    с InvalidDateRange.
    """

    id: EntityId = 0
    room_id: EntityId
    guest_id: EntityId
    check_in: date
    check_out: date

    @property
    def period(self) -> DateRange:
        return DateRange(check_in=self.check_in, check_out=self.check_out)

    @property
    def nights(self) -> int:
        return (self.check_out - self.check_in).days

    def overlaps(self, check_in: date, check_out: date) -> bool:
        """Проверяет, пересекается ли бронирование с [check_in, check_out)."""
        return dates_overlap(self.check_in, self.check_out, check_in, check_out)

    def conflicts_with(self, other: "Booking") -> bool:
        """Другое бронирование того же номера с пересекающимися датами."""
        return (
            other.id != self.id
            and other.room_id == self.room_id
            and self.overlaps(other.check_in, other.check_out)
        )


class BookingPolicy:
    """Политики и бизнес-правила для бронирований."""

    @classmethod
    def validate_booking_dates(
        cls, check_in: date, check_out: date, today: date
    ) -> None:
        """Проверяет даты заезда и выезда относительно текущей даты."""
        if check_in < today:
            raise InvalidDateRange("Дата заезда не может быть в прошлом")
        if check_out <= check_in:
            raise InvalidDateRange("Дата выезда должна быть позже даты заезда")


class OverlapAvailabilityStrategy:
    """Номер свободен, если ни одно бронирование этого номера не пересекается с периодом."""

    def is_room_available(
        self,
        room_id: EntityId,
        check_in: date,
        check_out: date,
        existing: Iterable[Booking],
    ) -> bool:
        return not any(
            booking.room_id == room_id and booking.overlaps(check_in, check_out)
            for booking in existing
        )


def next_booking_id(existing: Iterable[Booking]) -> EntityId:
    """Следующий идентификатор: максимальный существующий + 1, либо 1."""
    return max((booking.id for booking in existing), default=0) + 1
