"""Reservation schemas"""

from datetime import date, datetime, time
from typing import Any, Dict, List, Optional
from pydantic import BaseModel, EmailStr, Field, field_serializer, field_validator

from app.models.reservation import MAX_ID, ReservationStatus

SLOT_TIME_PATTERN = r"^([01]\d|2[0-3]):([0-5]\d)$"

DEFAULT_PAGE_SIZE = 20
MAX_PAGE_SIZE = 50


class ReservationCreate(BaseModel):
    """Create reservation request"""
    table_id: int = Field(..., gt=0, le=MAX_ID)
    customer_name: str = Field(..., min_length=1, max_length=100)
    customer_email: EmailStr
    customer_phone: str = Field(..., min_length=7, max_length=20)
    guest_count: int = Field(..., ge=1, le=20)
    reservation_date: date
    slot_start_time: str = Field(..., pattern=SLOT_TIME_PATTERN, examples=["18:00"])
    special_requests: Optional[str] = Field(None, max_length=500)

    @field_validator("reservation_date")
    @classmethod
    def not_in_past(cls, value: date) -> date:
        if value < date.today():
            raise ValueError("Reservation date must be today or in the future")
        return value


class ReservationQuery(BaseModel):
    """Filters and pagination for listing reservations"""
    reservation_date: Optional[date] = None
    table_id: Optional[int] = Field(None, gt=0, le=MAX_ID)
    status: Optional[ReservationStatus] = None
    page: int = Field(1, ge=1)
    limit: int = Field(DEFAULT_PAGE_SIZE, ge=1, le=MAX_PAGE_SIZE)


class ReservationResponse(BaseModel):
    """Reservation response"""
    id: int
    table_id: int
    customer_name: str
    customer_email: str
    customer_phone: str
    guest_count: int
    reservation_date: date
    slot_start_time: time
    slot_end_time: time
    status: ReservationStatus
    special_requests: Optional[str]
    created_at: datetime
    updated_at: datetime

    @field_serializer("slot_start_time", "slot_end_time")
    def serialize_slot_time(self, value: time) -> str:
        return value.strftime("%H:%M")

    class Config:
        from_attributes = True


class ReservationDetail(ReservationResponse):
    """Reservation enriched with table details from the table service"""
    table: Dict[str, Any]


class ReservationEnvelope(BaseModel):
    """Single reservation wrapped with an optional status message"""
    message: Optional[str] = None
    reservation: ReservationResponse


class ReservationDetailEnvelope(BaseModel):
    reservation: ReservationDetail


class ReservationListResponse(BaseModel):
    """Paginated reservation list"""
    reservations: List[ReservationResponse]
    total: int
    page: int
    totalPages: int


class TableInfo(BaseModel):
    """Table record as served by the table service"""
    id: int
    seating_capacity: int
    is_active: bool

    class Config:
        extra = "allow"


class AvailabilitySlot(BaseModel):
    """Fixed service slot and whether it can still be booked"""
    start_time: str
    end_time: str
    available: bool


class AvailabilityResponse(BaseModel):
    """Availability check response"""
    table_id: int
    date: str
    slots: List[AvailabilitySlot] = []
