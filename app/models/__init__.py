"""Database models"""

from app.models.reservation import Reservation, ReservationStatus

__all__ = [
    "Reservation",
    "ReservationStatus",
]
