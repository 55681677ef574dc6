"""Reservation management API endpoints"""

from datetime import date as date_type
from typing import Optional

from fastapi import APIRouter, Depends, Query

from app.dependencies import get_reservation_service
from app.models.reservation import MAX_ID, ReservationStatus
from app.schemas.reservation import (
    DEFAULT_PAGE_SIZE,
    MAX_PAGE_SIZE,
    ReservationCreate,
    ReservationQuery,
    ReservationResponse,
    ReservationDetail,
    ReservationEnvelope,
    ReservationDetailEnvelope,
    ReservationListResponse,
)
from app.services.reservations import ReservationService

router = APIRouter()


@router.post(
    "",
    response_model=ReservationEnvelope,
    status_code=201,
    responses={400: {"description": "Validation error"}, 409: {"description": "Double-booking conflict"}},
)
async def create_reservation(
    reservation_data: ReservationCreate,
    service: ReservationService = Depends(get_reservation_service),
):
    """Book a table for a two-hour slot"""
    reservation = await service.create(reservation_data)

    return ReservationEnvelope(
        message="Reservation created successfully",
        reservation=ReservationResponse.model_validate(reservation),
    )


@router.get("", response_model=ReservationListResponse)
async def list_reservations(
    date: Optional[date_type] = None,
    table_id: Optional[int] = Query(None, gt=0, le=MAX_ID),
    status: Optional[ReservationStatus] = None,
    page: int = Query(1, ge=1),
    limit: int = Query(DEFAULT_PAGE_SIZE, ge=1, le=MAX_PAGE_SIZE),
    service: ReservationService = Depends(get_reservation_service),
):
    """List reservations with filters, ordered by date and start time"""
    query = ReservationQuery(
        reservation_date=date,
        table_id=table_id,
        status=status,
        page=page,
        limit=limit,
    )
    reservations, total, pages = await service.list(query)

    return ReservationListResponse(
        reservations=[ReservationResponse.model_validate(r) for r in reservations],
        total=total,
        page=page,
        totalPages=pages,
    )


@router.get(
    "/{reservation_id}",
    response_model=ReservationDetailEnvelope,
    responses={404: {"description": "Reservation not found"}},
)
async def get_reservation(
    reservation_id: int,
    service: ReservationService = Depends(get_reservation_service),
):
    """Get reservation details with table info"""
    reservation, table = await service.get_with_table(reservation_id)

    detail = ReservationResponse.model_validate(reservation).model_dump()
    return ReservationDetailEnvelope(reservation=ReservationDetail(**detail, table=table))


@router.patch(
    "/{reservation_id}/cancel",
    response_model=ReservationEnvelope,
    responses={
        400: {"description": "Already cancelled or within 1 hour of the slot"},
        404: {"description": "Reservation not found"},
    },
)
async def cancel_reservation(
    reservation_id: int,
    service: ReservationService = Depends(get_reservation_service),
):
    """Cancel a reservation (1hr+ before slot)"""
    reservation = await service.cancel(reservation_id)

    return ReservationEnvelope(
        message="Reservation cancelled successfully",
        reservation=ReservationResponse.model_validate(reservation),
    )
