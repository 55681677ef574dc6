"""Reservation persistence"""

from datetime import date, time
from typing import List, Optional, Sequence, Tuple

from sqlalchemy import func, select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
import structlog

from app.exceptions import DoubleBooking, InternalError
from app.models.reservation import MAX_ID, Reservation, ReservationStatus
from app.schemas.reservation import ReservationQuery

logger = structlog.get_logger()

CONFIRMED_SLOT_INDEX = "uq_reservations_confirmed_slot"


def _is_slot_conflict(exc: IntegrityError) -> bool:
    """True when the insert tripped the one-confirmed-booking-per-slot index"""
    message = str(exc.orig)
    # PostgreSQL names the index; SQLite lists the indexed columns
    return CONFIRMED_SLOT_INDEX in message or "UNIQUE constraint failed: reservations.table_id" in message


class ReservationStore:
    """Reads and writes reservation rows through one session"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get(self, reservation_id: int) -> Optional[Reservation]:
        # ids outside the column range can never have been assigned
        if not 0 < reservation_id <= MAX_ID:
            return None
        return await self.session.get(Reservation, reservation_id)

    async def find_confirmed(
        self,
        table_id: int,
        reservation_date: date,
        slot_start_time: time,
    ) -> Optional[Reservation]:
        result = await self.session.execute(
            select(Reservation).where(
                Reservation.table_id == table_id,
                Reservation.reservation_date == reservation_date,
                Reservation.slot_start_time == slot_start_time,
                Reservation.status == ReservationStatus.CONFIRMED,
            ).limit(1)
        )
        return result.scalar_one_or_none()

    async def booked_start_times(self, table_id: int, reservation_date: date) -> List[time]:
        """Start times of confirmed bookings for a table on a date"""
        result = await self.session.execute(
            select(Reservation.slot_start_time).where(
                Reservation.table_id == table_id,
                Reservation.reservation_date == reservation_date,
                Reservation.status == ReservationStatus.CONFIRMED,
            )
        )
        return list(result.scalars().all())

    async def list(self, query: ReservationQuery) -> Tuple[Sequence[Reservation], int]:
        """Return one page of reservations and the total matching count"""
        page_query = select(Reservation)
        count_query = select(func.count(Reservation.id))

        if query.reservation_date:
            page_query = page_query.where(Reservation.reservation_date == query.reservation_date)
            count_query = count_query.where(Reservation.reservation_date == query.reservation_date)

        if query.table_id:
            page_query = page_query.where(Reservation.table_id == query.table_id)
            count_query = count_query.where(Reservation.table_id == query.table_id)

        if query.status:
            page_query = page_query.where(Reservation.status == query.status)
            count_query = count_query.where(Reservation.status == query.status)

        # Get total
        total_result = await self.session.execute(count_query)
        total = total_result.scalar() or 0

        # Get paginated results
        offset = (query.page - 1) * query.limit
        page_query = (
            page_query
            .order_by(
                Reservation.reservation_date.asc(),
                Reservation.slot_start_time.asc(),
                Reservation.id.asc(),
            )
            .offset(offset)
            .limit(query.limit)
        )
        result = await self.session.execute(page_query)
        return result.scalars().all(), total

    async def add(self, reservation: Reservation) -> Reservation:
        """Insert a reservation; a second confirmed booking of the slot raises DoubleBooking"""
        self.session.add(reservation)
        try:
            await self.session.commit()
        except IntegrityError as exc:
            await self.session.rollback()
            if _is_slot_conflict(exc):
                logger.info(
                    "Slot taken by concurrent booking",
                    table_id=reservation.table_id,
                    date=str(reservation.reservation_date),
                )
                raise DoubleBooking() from exc
            logger.error("Reservation insert rejected", table_id=reservation.table_id, error=str(exc.orig))
            raise InternalError("Reservation could not be stored") from exc
        except SQLAlchemyError as exc:
            await self.session.rollback()
            logger.error("Reservation insert failed", table_id=reservation.table_id, error=str(exc))
            raise InternalError("Reservation could not be stored") from exc
        await self.session.refresh(reservation)
        return reservation

    async def save(self, reservation: Reservation) -> Reservation:
        reservation_id = reservation.id
        try:
            await self.session.commit()
        except SQLAlchemyError as exc:
            await self.session.rollback()
            logger.error("Reservation update failed", reservation_id=reservation_id, error=str(exc))
            raise InternalError("Reservation could not be updated") from exc
        await self.session.refresh(reservation)
        return reservation
