"""
Общее ядро (Shared Kernel) системы бронирования отеля.

Содержит общие типы данных, предикат пересечения дат и иерархию исключений.
"""

from .domain import (
    BookingConflict,
    BusinessRuleValidationException,
    DateRange,
    # Исключения
    DomainException,
    # Базовые типы
    EntityId,
    InvalidDateRange,
    RoomType,
    RoomUnavailable,
    dates_overlap,
    # Утилиты
    today,
)

__all__ = [
    # Базовые типы
    "EntityId",
    "DateRange",
    # Перечисления
    "RoomType",
    # Исключения
    "DomainException",
    "BusinessRuleValidationException",
    "InvalidDateRange",
    "RoomUnavailable",
    "BookingConflict",
    # Утилиты
    "dates_overlap",
    "today",
]
