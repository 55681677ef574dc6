"""Slot arithmetic and availability"""

from datetime import date, time, timedelta
from typing import Iterable, List
import structlog

from app.schemas.reservation import AvailabilitySlot

logger = structlog.get_logger()

SLOT_DURATION = timedelta(hours=2)

# Bookable start times across the 10:00-22:00 service window
SERVICE_SLOTS = (
    time(10, 0),
    time(12, 0),
    time(14, 0),
    time(16, 0),
    time(18, 0),
    time(20, 0),
)


def parse_slot_time(value: str) -> time:
    """Parse an already validated HH:MM string"""
    hours, minutes = value.split(":")
    return time(int(hours), int(minutes))


def format_slot_time(value: time) -> str:
    return value.strftime("%H:%M")


def compute_end_time(start: time) -> time:
    """
    End of the slot beginning at `start`.

    Wraps past midnight, so a 23:00 start ends at 01:00.
    """
    minutes = (start.hour * 60 + start.minute + SLOT_DURATION.seconds // 60) % (24 * 60)
    return time(minutes // 60, minutes % 60)


def resolve_availability(
    table_id: int,
    on_date: date,
    booked_start_times: Iterable[time],
) -> List[AvailabilitySlot]:
    """Mark each service slot free unless a confirmed booking starts at it"""
    booked = {(t.hour, t.minute) for t in booked_start_times}
    logger.debug("Resolving availability", table_id=table_id, date=str(on_date), booked=len(booked))
    return [
        AvailabilitySlot(
            start_time=format_slot_time(start),
            end_time=format_slot_time(compute_end_time(start)),
            available=(start.hour, start.minute) not in booked,
        )
        for start in SERVICE_SLOTS
    ]
