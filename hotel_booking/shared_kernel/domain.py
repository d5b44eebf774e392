"""
Основные доменные типы и утилиты общего ядра.
"""

from datetime import date
from enum import Enum

from pydantic import BaseModel, model_validator

# Идентификаторы бронирований, номеров и гостей - целые числа
EntityId = int


def dates_overlap(
    first_start: date, first_end: date, second_start: date, second_end: date
) -> bool:
    """
    Проверяет пересечение двух полуоткрытых интервалов дат.

    Интервалы [first_start, first_end) и [second_start, second_end)
    пересекаются тогда и только тогда, когда
    first_start < second_end и second_start < first_end.
    Касание границ (выезд одного гостя в день заезда другого)
    пересечением не считается.
    """
    return first_start < second_end and second_start < first_end


class DateRange(BaseModel):
    """Диапазон дат [check_in, check_out)."""

    check_in: date
    check_out: date

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def check_out_after_check_in(self) -> "DateRange":
        if self.check_out <= self.check_in:
            raise ValueError("Дата выезда должна быть позже даты заезда")
        return self

    @property
    def nights(self) -> int:
        """Количество ночей в бронировании."""
        return (self.check_out - self.check_in).days

    def overlaps(self, other: "DateRange") -> bool:
        return dates_overlap(
            self.check_in, self.check_out, other.check_in, other.check_out
        )

    def contains(self, day: date) -> bool:
        return self.check_in <= day < self.check_out


# Общие перечисления
class RoomType(str, Enum):
    """Типы номеров в отеле."""

    STANDARD = "standard"
    DELUXE = "deluxe"
    SUITE = "suite"
    FAMILY = "family"


# Общие исключения
class DomainException(Exception):
    """Базовое исключение для доменных ошибок."""

    pass


class BusinessRuleValidationException(DomainException):
    """Исключение при нарушении бизнес-правил."""

    pass


class InvalidDateRange(BusinessRuleValidationException):
    """Некорректные даты заезда или выезда."""

    pass


class RoomUnavailable(BusinessRuleValidationException):
    """Номер уже забронирован на пересекающиеся даты."""

    def __init__(self, room_id: EntityId, check_in: date, check_out: date):
        super().__init__(
            f"Номер {room_id} недоступен с {check_in.isoformat()} "
            f"по {check_out.isoformat()}"
        )
        self.room_id = room_id
        self.check_in = check_in
        self.check_out = check_out


class BookingConflict(BusinessRuleValidationException):
    """Изменённое бронирование пересекается с другим бронированием номера."""

    def __init__(self, booking_id: EntityId, conflicting_id: EntityId):
        super().__init__(
            f"Бронирование {booking_id} конфликтует с бронированием {conflicting_id}"
        )
        self.booking_id = booking_id
        self.conflicting_id = conflicting_id


# Общие утилиты
def today() -> date:
    """Возвращает текущую дату."""
    return date.today()
