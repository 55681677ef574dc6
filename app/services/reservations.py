"""Reservation workflows: create, list, fetch, cancel, availability"""

import math
from datetime import date, datetime, timedelta
from typing import Any, Callable, Dict, List, Sequence, Tuple
import structlog

from app.exceptions import AlreadyCancelled, CancellationWindowViolation, NotFoundError
from app.models.reservation import Reservation, ReservationStatus
from app.schemas.reservation import AvailabilitySlot, ReservationCreate, ReservationQuery
from app.services.booking import BookingValidator
from app.services.slots import compute_end_time, parse_slot_time, resolve_availability
from app.services.store import ReservationStore
from app.services.table_client import TableInfoClient

logger = structlog.get_logger()

CANCELLATION_WINDOW = timedelta(hours=1)


def total_pages(total: int, limit: int) -> int:
    return math.ceil(total / limit)


def table_placeholder(table_id: int) -> Dict[str, Any]:
    return {"id": table_id, "info": "Table details unavailable"}


class ReservationService:
    """Composes table lookups, booking rules and the store"""

    def __init__(
        self,
        store: ReservationStore,
        table_client: TableInfoClient,
        clock: Callable[[], datetime] = datetime.now,
    ):
        self.store = store
        self.table_client = table_client
        self.validator = BookingValidator(store)
        self.clock = clock

    async def create(self, request: ReservationCreate) -> Reservation:
        """Validate against the table and existing bookings, then persist as confirmed"""
        table = await self.table_client.get_table(request.table_id)
        await self.validator.validate(request, table)

        start = parse_slot_time(request.slot_start_time)
        reservation = Reservation(
            table_id=request.table_id,
            customer_name=request.customer_name,
            customer_email=request.customer_email,
            customer_phone=request.customer_phone,
            guest_count=request.guest_count,
            reservation_date=request.reservation_date,
            slot_start_time=start,
            slot_end_time=compute_end_time(start),
            special_requests=request.special_requests,
            status=ReservationStatus.CONFIRMED,
        )
        reservation = await self.store.add(reservation)

        logger.info(
            "Reservation created",
            reservation_id=reservation.id,
            table_id=reservation.table_id,
            date=str(reservation.reservation_date),
            slot_start_time=request.slot_start_time,
        )
        return reservation

    async def list(self, query: ReservationQuery) -> Tuple[Sequence[Reservation], int, int]:
        """Return (page, total, total pages)"""
        reservations, total = await self.store.list(query)
        return reservations, total, total_pages(total, query.limit)

    async def get(self, reservation_id: int) -> Reservation:
        reservation = await self.store.get(reservation_id)
        if reservation is None:
            raise NotFoundError("Reservation not found")
        return reservation

    async def get_with_table(self, reservation_id: int) -> Tuple[Reservation, Dict[str, Any]]:
        """Fetch a reservation plus its table; table lookup failures degrade to a placeholder"""
        reservation = await self.get(reservation_id)

        table = await self.table_client.get_table(reservation.table_id)
        if table is None:
            return reservation, table_placeholder(reservation.table_id)
        return reservation, table.model_dump()

    async def cancel(self, reservation_id: int) -> Reservation:
        """Cancel a confirmed reservation at least an hour before it starts"""
        reservation = await self.get(reservation_id)

        if reservation.is_cancelled:
            raise AlreadyCancelled()

        starts_at = datetime.combine(reservation.reservation_date, reservation.slot_start_time)
        if starts_at - self.clock() < CANCELLATION_WINDOW:
            logger.info(
                "Cancellation inside window",
                reservation_id=reservation.id,
                starts_at=starts_at.isoformat(),
            )
            raise CancellationWindowViolation()

        reservation.status = ReservationStatus.CANCELLED
        reservation.updated_at = self.clock()
        reservation = await self.store.save(reservation)

        logger.info("Reservation cancelled", reservation_id=reservation.id)
        return reservation

    async def availability(self, table_id: int, on_date: date) -> List[AvailabilitySlot]:
        booked = await self.store.booked_start_times(table_id, on_date)
        return resolve_availability(table_id, on_date, booked)
