"""
Система бронирования номеров отеля.
"""

from .booking.application import BookingManager
from .booking.domain import Booking, OverlapAvailabilityStrategy, Room
from .bootstrap import bootstrap_app

__all__ = [
    "Booking",
    "BookingManager",
    "OverlapAvailabilityStrategy",
    "Room",
    "bootstrap_app",
]
