"""
Инфраструктурный слой контекста бронирования.

Содержит реализации хранилищ и логгера,
зависимые от конкретных технологий (файлы, модуль logging).
"""
import json
import logging
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional, Type, TypeVar

from pydantic import BaseModel, TypeAdapter

from ..shared_kernel import EntityId
from . import interfaces as ports
from .domain import Booking, Room

T = TypeVar("T", bound=BaseModel)


class InMemoryBookingRepository(ports.IBookingRepository):
    """
    Реализация хранилища бронирований в памяти.

    Хранит и возвращает копии, поэтому изменение полученного объекта
    не меняет сохранённую запись без вызова update.
    """

    def __init__(
        self,
        rooms: Optional[Iterable[Room]] = None,
        bookings: Optional[Iterable[Booking]] = None,
    ):
        self._bookings: Dict[EntityId, Booking] = {}
        self._rooms: Dict[EntityId, Room] = {room.id: room for room in rooms or []}
        self.commits = 0
        for booking in bookings or []:
            self.add(booking)

    def get_all(self) -> List[Booking]:
        return [booking.model_copy() for booking in self._bookings.values()]

    def get_by_id(self, booking_id: EntityId) -> Optional[Booking]:
        booking = self._bookings.get(booking_id)
        return booking.model_copy() if booking is not None else None

    def add(self, booking: Booking) -> None:
        if booking.id in self._bookings:
            raise ValueError(f"Booking with id {booking.id} already exists")
        self._bookings[booking.id] = booking.model_copy()

    def update(self, booking: Booking) -> None:
        if booking.id not in self._bookings:
            raise KeyError(f"Booking with id {booking.id} not found")
        self._bookings[booking.id] = booking.model_copy()

    def delete(self, booking_id: EntityId) -> None:
        self._bookings.pop(booking_id, None)

    def save(self) -> None:
        # Изменения уже применены, фиксируется только факт commit
        self.commits += 1

    def get_rooms(self) -> List[Room]:
        return list(self._rooms.values())


class JsonFileBookingRepository(InMemoryBookingRepository):
    """
    Хранилище бронирований в JSON-файлах.

    Файлы читаются при создании хранилища; add, update и delete
    меняют состояние в памяти, а save записывает бронирования на диск.
    """

    def __init__(self, bookings_file: str, rooms_file: Optional[str] = None):
        """
        Инициализирует хранилище.

        Args:
            bookings_file: Путь к JSON-файлу с бронированиями
            rooms_file: Путь к JSON-файлу с номерами (только чтение)
        """
        self._file_path = Path(bookings_file)
        rooms = _load_items(Path(rooms_file), Room) if rooms_file else []
        super().__init__(rooms=rooms, bookings=_load_items(self._file_path, Booking))

    def save(self) -> None:
        """Сохраняет бронирования в JSON-файл."""
        # Создаем директорию, если она не существует
        self._file_path.parent.mkdir(parents=True, exist_ok=True)

        data = [
            booking.model_dump(mode="json")
            for booking in sorted(self._bookings.values(), key=lambda b: b.id)
        ]
        with open(self._file_path, "w", encoding="utf-8") as f:
            json.dump(data, f, indent=2, ensure_ascii=False)
        super().save()


def _load_items(file_path: Path, model_class: Type[T]) -> List[T]:
    """Загружает список моделей из JSON-файла; пустой или отсутствующий файл даёт []."""
    if not file_path.exists():
        return []

    with open(file_path, "r", encoding="utf-8") as f:
        raw_data = f.read()

    if not raw_data.strip():
        return []

    return TypeAdapter(List[model_class]).validate_json(raw_data)


class StandardLogger(ports.ILogger):
    """Логгер поверх модуля logging; контекст передается через extra."""

    def __init__(self, logger: Optional[logging.Logger] = None):
        self._logger = logger or logging.getLogger("hotel_booking")

    def info(self, message: str, **kwargs: Any) -> None:
        self._log(logging.INFO, message, kwargs)

    def error(self, message: str, **kwargs: Any) -> None:
        self._log(logging.ERROR, message, kwargs)

    def warning(self, message: str, **kwargs: Any) -> None:
        self._log(logging.WARNING, message, kwargs)

    def debug(self, message: str, **kwargs: Any) -> None:
        self._log(logging.DEBUG, message, kwargs)

    def _log(self, level: int, message: str, context: Dict[str, Any]) -> None:
        if context:
            message = f"{message} | context={json.dumps(context, default=str)}"
        self._logger.log(level, message, extra={"context": context})
