"""Booking rules checked before a reservation is written"""

from typing import Optional
import structlog

from app.exceptions import CapacityExceeded, DoubleBooking, TableInactive, TableNotFound
from app.schemas.reservation import ReservationCreate, TableInfo
from app.services.slots import parse_slot_time
from app.services.store import ReservationStore

logger = structlog.get_logger()


def check_table(table_id: int, guest_count: int, table: Optional[TableInfo]) -> None:
    """Table must exist, be active and seat the whole party"""
    if table is None:
        raise TableNotFound(table_id)
    if not table.is_active:
        raise TableInactive(table_id)
    if guest_count > table.seating_capacity:
        raise CapacityExceeded(guest_count, table.seating_capacity)


class BookingValidator:
    """
    Runs the booking checks in order and raises on the first failure:
    table exists, table active, party fits, slot not already confirmed.

    The conflict read is not locked. A concurrent writer that slips in
    between this check and the insert is caught by the store's unique index.
    """

    def __init__(self, store: ReservationStore):
        self.store = store

    async def validate(self, request: ReservationCreate, table: Optional[TableInfo]) -> None:
        check_table(request.table_id, request.guest_count, table)

        existing = await self.store.find_confirmed(
            request.table_id,
            request.reservation_date,
            parse_slot_time(request.slot_start_time),
        )
        if existing is not None:
            logger.info(
                "Slot already booked",
                table_id=request.table_id,
                date=str(request.reservation_date),
                slot_start_time=request.slot_start_time,
                existing_reservation_id=existing.id,
            )
            raise DoubleBooking()
