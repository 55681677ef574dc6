"""Reservation booking services"""

from app.services.booking import BookingValidator
from app.services.reservations import ReservationService
from app.services.store import ReservationStore
from app.services.table_client import TableInfoClient

__all__ = [
    "BookingValidator",
    "ReservationService",
    "ReservationStore",
    "TableInfoClient",
]
