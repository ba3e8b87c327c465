from __future__ import annotations

from datetime import date, datetime
from decimal import Decimal
import uuid

from sqlalchemy import Column, Date, DateTime, Index, Integer, Numeric, String, Text
from sqlalchemy.sql import func
from sqlmodel import Field, SQLModel

from app.core.common.constants import PaymentStatus
from app.utils.clock import utcnow


class BookingPayment(SQLModel, table=True):
    __tablename__ = "booking_payments"
    __table_args__ = (
        Index("uq_booking_payment_booking_kind", "booking_id", "installment_kind", unique=True),
    )

    id: uuid.UUID = Field(default_factory=uuid.uuid4, primary_key=True, nullable=False)
    booking_id: uuid.UUID = Field(foreign_key="bookings.id", nullable=False, index=True)

    installment_kind: str = Field(sa_column=Column(String(10), nullable=False))
    percentage: int = Field(sa_column=Column(Integer, nullable=False))
    amount: Decimal = Field(sa_column=Column(Numeric(12, 2), nullable=False))
    due_date: date = Field(sa_column=Column(Date, nullable=False))

    status: str = Field(
        default=PaymentStatus.PENDING.value,
        sa_column=Column(String(20), nullable=False, server_default="PENDING"),
    )
    paid_date: date | None = Field(default=None, sa_column=Column(Date))
    payment_method: str | None = Field(default=None, sa_column=Column(String(50)))
    transaction_id: str | None = Field(default=None, sa_column=Column(String(100)))
    notes: str | None = Field(default=None, sa_column=Column(Text))

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
