"""Table availability API endpoints"""

from datetime import date as date_type
from typing import Optional

from fastapi import APIRouter, Depends, Path

from app.dependencies import get_reservation_service
from app.exceptions import ValidationError
from app.models.reservation import MAX_ID
from app.schemas.reservation import AvailabilityResponse
from app.services.reservations import ReservationService

router = APIRouter()


@router.get(
    "/{table_id}/availability",
    response_model=AvailabilityResponse,
    responses={400: {"description": "Missing date parameter"}},
)
async def check_availability(
    table_id: int = Path(..., gt=0, le=MAX_ID),
    date: Optional[date_type] = None,
    service: ReservationService = Depends(get_reservation_service),
):
    """Check which service slots are still free for a table on a date"""
    if date is None:
        raise ValidationError(["date query parameter is required"])

    slots = await service.availability(table_id, date)

    return AvailabilityResponse(
        table_id=table_id,
        date=date.isoformat(),
        slots=slots,
    )
