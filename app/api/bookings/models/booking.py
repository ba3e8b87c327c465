from __future__ import annotations

from datetime import date, datetime
from decimal import Decimal
import uuid

from sqlalchemy import Boolean, Column, Date, DateTime, Index, Integer, Numeric, String, Text
from sqlalchemy.sql import func
from sqlmodel import Field, SQLModel

from app.core.common.constants import BookingStatus
from app.utils.clock import utcnow


class Booking(SQLModel, table=True):
    __tablename__ = "bookings"
    __table_args__ = (
        Index("idx_booking_customer_id", "customer_id"),
        Index("idx_booking_status", "status"),
    )

    id: uuid.UUID = Field(default_factory=uuid.uuid4, primary_key=True, nullable=False)
    customer_id: str = Field(sa_column=Column(String(64), nullable=False))

    event_name: str = Field(sa_column=Column(String(200), nullable=False))
    event_type: str = Field(sa_column=Column(String(100), nullable=False))
    event_start_date: date = Field(sa_column=Column(Date, nullable=False))
    event_start_time: str = Field(sa_column=Column(String(20), nullable=False))
    event_end_date: date | None = Field(default=None, sa_column=Column(Date))
    event_end_time: str | None = Field(default=None, sa_column=Column(String(20)))
    venue: str = Field(sa_column=Column(String(255), nullable=False))
    customer_address: str | None = Field(default=None, sa_column=Column(Text))
    guest_count: int = Field(sa_column=Column(Integer, nullable=False))
    food_included: bool = Field(
        default=False, sa_column=Column(Boolean, nullable=False, server_default="0")
    )
    special_requests: str | None = Field(default=None, sa_column=Column(Text))

    contact_name: str = Field(sa_column=Column(String(120), nullable=False))
    contact_phone: str = Field(sa_column=Column(String(30), nullable=False))
    contact_email: str | None = Field(default=None, sa_column=Column(String(255)))

    total_amount: Decimal = Field(sa_column=Column(Numeric(12, 2), nullable=False))
    status: str = Field(
        default=BookingStatus.PENDING.value,
        sa_column=Column(String(20), nullable=False, server_default="PENDING"),
    )

    cancellation_reason: str | None = Field(default=None, sa_column=Column(Text))
    cancellation_date: date | None = Field(default=None, sa_column=Column(Date))
    refund_amount: Decimal | None = Field(default=None, sa_column=Column(Numeric(12, 2)))
    delay_reason: str | None = Field(default=None, sa_column=Column(Text))
    delay_date: date | None = Field(default=None, sa_column=Column(Date))

    created_at: datetime = Field(
        default_factory=utcnow,
        sa_column=Column(DateTime(timezone=True), nullable=False, server_default=func.now()),
    )
    updated_at: datetime = Field(
        default_factory=utcnow,
        sa_column=Column(
            DateTime(timezone=True),
            nullable=False,
            server_default=func.now(),
            onupdate=utcnow,
        ),
    )
