"""
Тесты инфраструктурного слоя: хранилища бронирований и логгер.
"""
import json
import logging
from datetime import date

import pytest

from hotel_booking.booking.domain import Booking, Room
from hotel_booking.booking.infrastructure import (
    InMemoryBookingRepository,
    JsonFileBookingRepository,
    StandardLogger,
)
from hotel_booking.shared_kernel import RoomType


@pytest.fixture
def booking() -> Booking:
    return Booking(
        id=1,
        room_id=1,
        guest_id=10,
        check_in=date(2024, 1, 10),
        check_out=date(2024, 1, 15),
    )


class TestInMemoryBookingRepository:
    def test_add_and_get(self, booking):
        repo = InMemoryBookingRepository()
        repo.add(booking)

        assert repo.get_by_id(1) == booking
        assert repo.get_all() == [booking]
        assert repo.get_by_id(2) is None

    def test_add_duplicate_id(self, booking):
        repo = InMemoryBookingRepository(bookings=[booking])

        with pytest.raises(ValueError, match="already exists"):
            repo.add(booking)

    def test_update_missing(self, booking):
        repo = InMemoryBookingRepository()

        with pytest.raises(KeyError):
            repo.update(booking)

    def test_delete_missing_is_noop(self, booking):
        repo = InMemoryBookingRepository(bookings=[booking])
        repo.delete(42)
        assert len(repo.get_all()) == 1

    def test_returned_objects_are_copies(self, booking):
        repo = InMemoryBookingRepository(bookings=[booking])

        fetched = repo.get_by_id(1)
        fetched.check_out = date(2024, 2, 1)
        booking.room_id = 9

        stored = repo.get_by_id(1)
        assert stored.check_out == date(2024, 1, 15)
        assert stored.room_id == 1

    def test_save_counts_commits(self):
        repo = InMemoryBookingRepository()
        repo.save()
        repo.save()
        assert repo.commits == 2

    def test_get_rooms(self):
        rooms = [Room(id=1, number="101"), Room(id=2, number="201", type=RoomType.SUITE)]
        repo = InMemoryBookingRepository(rooms=rooms)
        assert repo.get_rooms() == rooms


class TestJsonFileBookingRepository:
    def test_missing_files_load_empty(self, tmp_path):
        repo = JsonFileBookingRepository(
            bookings_file=str(tmp_path / "bookings.json"),
            rooms_file=str(tmp_path / "rooms.json"),
        )
        assert repo.get_all() == []
        assert repo.get_rooms() == []

    def test_empty_file_loads_empty(self, tmp_path):
        path = tmp_path / "bookings.json"
        path.write_text("  \n", encoding="utf-8")

        repo = JsonFileBookingRepository(bookings_file=str(path))
        assert repo.get_all() == []

    def test_changes_are_written_on_save(self, tmp_path, booking):
        path = tmp_path / "nested" / "bookings.json"
        repo = JsonFileBookingRepository(bookings_file=str(path))

        repo.add(booking)
        assert not path.exists()

        repo.save()

        data = json.loads(path.read_text(encoding="utf-8"))
        assert data == [
            {
                "id": 1,
                "room_id": 1,
                "guest_id": 10,
                "check_in": "2024-01-10",
                "check_out": "2024-01-15",
            }
        ]

    def test_reload_after_save(self, tmp_path, booking):
        path = str(tmp_path / "bookings.json")
        repo = JsonFileBookingRepository(bookings_file=path)
        repo.add(booking)
        repo.add(booking.model_copy(update={"id": 2, "room_id": 2}))
        repo.delete(1)
        repo.save()

        reloaded = JsonFileBookingRepository(bookings_file=path)

        assert [b.id for b in reloaded.get_all()] == [2]
        assert reloaded.get_by_id(2).check_in == date(2024, 1, 10)

    def test_rooms_are_loaded(self, tmp_path):
        rooms_file = tmp_path / "rooms.json"
        rooms_file.write_text(
            json.dumps(
                [
                    {"id": 1, "number": "101", "type": "deluxe", "capacity": 3},
                    {"id": 2, "number": "102", "amenities": ["TV"]},
                ]
            ),
            encoding="utf-8",
        )

        repo = JsonFileBookingRepository(
            bookings_file=str(tmp_path / "bookings.json"), rooms_file=str(rooms_file)
        )

        rooms = repo.get_rooms()
        assert [r.number for r in rooms] == ["101", "102"]
        assert rooms[0].type == RoomType.DELUXE
        assert rooms[1].amenities == ["TV"]


class TestStandardLogger:
    @pytest.fixture
    def std_logger(self):
        return logging.getLogger("tests.standard_logger")

    def test_levels(self, std_logger, caplog):
        logger = StandardLogger(std_logger)

        with caplog.at_level(logging.DEBUG, logger=std_logger.name):
            logger.debug("debug message")
            logger.info("info message")
            logger.warning("warning message")
            logger.error("error message")

        assert [r.levelno for r in caplog.records] == [
            logging.DEBUG,
            logging.INFO,
            logging.WARNING,
            logging.ERROR,
        ]

    def test_context_is_attached(self, std_logger, caplog):
        logger = StandardLogger(std_logger)

        with caplog.at_level(logging.INFO, logger=std_logger.name):
            logger.info("Cancelled booking ID 3", booking_id=3)

        record = caplog.records[0]
        assert record.context == {"booking_id": 3}
        assert record.getMessage() == 'Cancelled booking ID 3 | context={"booking_id": 3}'

    def test_default_logger_name(self):
        assert StandardLogger()._logger.name == "hotel_booking"
