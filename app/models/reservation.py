"""Reservation model"""

from datetime import datetime
from sqlalchemy import Column, String, Integer, Date, Time, DateTime, Text, Enum, Index, text
import enum

from app.database import Base


# Largest value an Integer (int4) id column can hold
MAX_ID = 2**31 - 1


class ReservationStatus(str, enum.Enum):
    """Reservation lifecycle: confirmed -> cancelled"""
    CONFIRMED = "confirmed"
    CANCELLED = "cancelled"


class Reservation(Base):
    """Table reservations"""
    __tablename__ = "reservations"
    __table_args__ = (
        # At most one confirmed booking per table slot; cancelled rows free it again
        Index(
            "uq_reservations_confirmed_slot",
            "table_id",
            "reservation_date",
            "slot_start_time",
            unique=True,
            postgresql_where=text("status = 'confirmed'"),
            sqlite_where=text("status = 'confirmed'"),
        ),
        Index("ix_reservations_date_start", "reservation_date", "slot_start_time"),
    )

    id = Column(Integer, primary_key=True, autoincrement=True)
    table_id = Column(Integer, nullable=False, index=True)

    # Customer information
    customer_name = Column(String(100), nullable=False)
    customer_email = Column(String(255), nullable=False)
    customer_phone = Column(String(20), nullable=False)

    # Reservation details
    guest_count = Column(Integer, nullable=False)
    reservation_date = Column(Date, nullable=False)
    slot_start_time = Column(Time, nullable=False)
    slot_end_time = Column(Time, nullable=False)

    # Status
    status = Column(
        Enum(
            ReservationStatus,
            name="reservation_status",
            values_callable=lambda statuses: [s.value for s in statuses],
            create_constraint=True,
        ),
        nullable=False,
        default=ReservationStatus.CONFIRMED,
    )

    # Notes
    special_requests = Column(Text)

    # Metadata
    created_at = Column(DateTime, default=datetime.now, nullable=False)
    updated_at = Column(DateTime, default=datetime.now, onupdate=datetime.now, nullable=False)

    @property
    def is_cancelled(self) -> bool:
        return self.status == ReservationStatus.CANCELLED
