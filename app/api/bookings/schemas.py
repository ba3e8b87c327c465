from __future__ import annotations

from datetime import date, datetime
from decimal import Decimal
from typing import Annotated
from uuid import UUID

from pydantic import BaseModel, Field

from app.api.bookings.payment_schedule import MAX_AMOUNT, InstallmentKind
from app.core.common.constants import BookingStatus


class BookingServiceLine(BaseModel):
    service_id: Annotated[UUID, Field(alias="serviceId")]
    quantity: Annotated[int, Field(ge=1)] = 1
    price: Annotated[Decimal, Field(ge=0, le=MAX_AMOUNT)] | None = None

    model_config = {"populate_by_name": True}


class CreateBookingRequest(BaseModel):
    event_name: Annotated[str, Field(alias="eventName", min_length=3)]
    event_type: Annotated[str, Field(alias="eventType", min_length=1)]
    event_start_date: Annotated[date, Field(alias="eventStartDate")]
    event_start_time: Annotated[str, Field(alias="eventStartTime", min_length=1)]
    event_end_date: Annotated[date | None, Field(alias="eventEndDate")] = None
    event_end_time: Annotated[str | None, Field(alias="eventEndTime")] = None
    venue: Annotated[str, Field(min_length=3)]
    customer_address: Annotated[str | None, Field(alias="customerAddress")] = None
    guest_count: Annotated[int, Field(alias="guestCount", ge=1)]
    food_included: Annotated[bool, Field(alias="foodIncluded")] = False
    special_requests: Annotated[str | None, Field(alias="specialRequests")] = None
    contact_name: Annotated[str, Field(alias="contactName", min_length=2)]
    contact_phone: Annotated[str, Field(alias="contactPhone", min_length=10)]
    contact_email: Annotated[str | None, Field(alias="contactEmail")] = None
    services: list[BookingServiceLine] = []

    model_config = {"populate_by_name": True}


class UpdateBookingStatusRequest(BaseModel):
    status: BookingStatus
    cancellation_reason: Annotated[str | None, Field(alias="cancellationReason")] = None
    delay_reason: Annotated[str | None, Field(alias="delayReason")] = None

    model_config = {"populate_by_name": True}


class CancelBookingRequest(BaseModel):
    reason: str | None = None


class ScheduleQuoteRequest(BaseModel):
    # Loosely typed on purpose: the scheduler owns amount and date validation.
    total_amount: Annotated[Decimal | str, Field(alias="totalAmount")]
    event_date: Annotated[date | str, Field(alias="eventDate")]

    model_config = {"populate_by_name": True}


class ScheduleItemResponse(BaseModel):
    installment_kind: Annotated[InstallmentKind, Field(alias="installmentKind")]
    amount: Decimal
    due_date: Annotated[date, Field(alias="dueDate")]
    percentage_of_total: Annotated[int, Field(alias="percentageOfTotal")]

    model_config = {"populate_by_name": True}


class ScheduleQuoteResponse(BaseModel):
    total_amount: Annotated[Decimal, Field(alias="totalAmount")]
    schedule: list[ScheduleItemResponse]

    model_config = {"populate_by_name": True}


class BookingServiceItemResponse(BaseModel):
    id: UUID
    service_id: Annotated[UUID, Field(alias="serviceId")]
    quantity: int
    price: Decimal

    model_config = {"populate_by_name": True}


class BookingPaymentResponse(BaseModel):
    id: UUID
    installment_kind: Annotated[InstallmentKind, Field(alias="installmentKind")]
    percentage: int
    amount: Decimal
    due_date: Annotated[date, Field(alias="dueDate")]
    status: str
    paid_date: Annotated[date | None, Field(alias="paidDate")] = None
    payment_method: Annotated[str | None, Field(alias="paymentMethod")] = None
    transaction_id: Annotated[str | None, Field(alias="transactionId")] = None
    notes: str | None = None

    model_config = {"populate_by_name": True}


class BookingResponse(BaseModel):
    id: UUID
    customer_id: Annotated[str, Field(alias="customerId")]
    event_name: Annotated[str, Field(alias="eventName")]
    event_type: Annotated[str, Field(alias="eventType")]
    event_start_date: Annotated[date, Field(alias="eventStartDate")]
    event_start_time: Annotated[str, Field(alias="eventStartTime")]
    event_end_date: Annotated[date | None, Field(alias="eventEndDate")] = None
    event_end_time: Annotated[str | None, Field(alias="eventEndTime")] = None
    venue: str
    guest_count: Annotated[int, Field(alias="guestCount")]
    food_included: Annotated[bool, Field(alias="foodIncluded")]
    special_requests: Annotated[str | None, Field(alias="specialRequests")] = None
    contact_name: Annotated[str, Field(alias="contactName")]
    contact_phone: Annotated[str, Field(alias="contactPhone")]
    contact_email: Annotated[str | None, Field(alias="contactEmail")] = None
    total_amount: Annotated[Decimal, Field(alias="totalAmount")]
    status: str
    cancellation_reason: Annotated[str | None, Field(alias="cancellationReason")] = None
    cancellation_date: Annotated[date | None, Field(alias="cancellationDate")] = None
    refund_amount: Annotated[Decimal | None, Field(alias="refundAmount")] = None
    delay_reason: Annotated[str | None, Field(alias="delayReason")] = None
    delay_date: Annotated[date | None, Field(alias="delayDate")] = None
    created_at: Annotated[datetime, Field(alias="createdAt")]
    services: list[BookingServiceItemResponse]
    payments: list[BookingPaymentResponse]

    model_config = {"populate_by_name": True}


class RefundQuoteResponse(BaseModel):
    booking_id: Annotated[UUID, Field(alias="bookingId")]
    total_amount: Annotated[Decimal, Field(alias="totalAmount")]
    refund_amount: Annotated[Decimal, Field(alias="refundAmount")]
    cancellation_fee: Annotated[Decimal, Field(alias="cancellationFee")]
    days_until_event: Annotated[int, Field(alias="daysUntilEvent")]
    full_refund: Annotated[bool, Field(alias="fullRefund")]
    cancellation_date: Annotated[date, Field(alias="cancellationDate")]
    event_date: Annotated[date, Field(alias="eventDate")]

    model_config = {"populate_by_name": True}
