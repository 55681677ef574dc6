"""FastAPI dependencies wiring request handlers to services"""

from datetime import datetime
from typing import Callable

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from app.database import get_db
from app.services.reservations import ReservationService
from app.services.store import ReservationStore
from app.services.table_client import TableInfoClient


def get_table_client(request: Request) -> TableInfoClient:
    return request.app.state.table_client


def get_clock() -> Callable[[], datetime]:
    """Source of 'now' for the cancellation window"""
    return datetime.now


def get_reservation_service(
    db: AsyncSession = Depends(get_db),
    table_client: TableInfoClient = Depends(get_table_client),
    clock: Callable[[], datetime] = Depends(get_clock),
) -> ReservationService:
    return ReservationService(ReservationStore(db), table_client, clock=clock)
