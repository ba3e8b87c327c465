from __future__ import annotations

from decimal import Decimal
import uuid

from sqlalchemy import Column, Integer, Numeric
from sqlmodel import Field, SQLModel


class BookingServiceItem(SQLModel, table=True):
    __tablename__ = "booking_service_items"

    id: uuid.UUID = Field(default_factory=uuid.uuid4, primary_key=True, nullable=False)
    booking_id: uuid.UUID = Field(foreign_key="bookings.id", nullable=False, index=True)
    service_id: uuid.UUID = Field(foreign_key="services.id", nullable=False)

    quantity: int = Field(sa_column=Column(Integer, nullable=False, server_default="1"))
    price: Decimal = Field(sa_column=Column(Numeric(12, 2), nullable=False))
