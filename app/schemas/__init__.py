"""Pydantic schemas for request/response validation"""

from app.schemas.reservation import (
    ReservationCreate,
    ReservationQuery,
    ReservationResponse,
    ReservationDetail,
    ReservationEnvelope,
    ReservationDetailEnvelope,
    ReservationListResponse,
    TableInfo,
    AvailabilitySlot,
    AvailabilityResponse,
)

__all__ = [
    "ReservationCreate",
    "ReservationQuery",
    "ReservationResponse",
    "ReservationDetail",
    "ReservationEnvelope",
    "ReservationDetailEnvelope",
    "ReservationListResponse",
    "TableInfo",
    "AvailabilitySlot",
    "AvailabilityResponse",
]
