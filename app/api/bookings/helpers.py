from __future__ import annotations

from collections.abc import Sequence

from app.api.bookings.models import BookingPayment, BookingServiceItem
from app.api.bookings.payment_schedule import PaymentScheduleItem
from app.api.bookings.schemas import (
    BookingPaymentResponse,
    BookingResponse,
    BookingServiceItemResponse,
    RefundQuoteResponse,
    ScheduleItemResponse,
)
from app.api.bookings.service import BookingDetails, RefundQuote


def to_schedule_items(
    schedule: Sequence[PaymentScheduleItem],
) -> list[ScheduleItemResponse]:
    return [
        ScheduleItemResponse(
            installmentKind=item.installment_kind,
            amount=item.amount,
            dueDate=item.due_date,
            percentageOfTotal=item.percentage_of_total,
        )
        for item in schedule
    ]


def to_payment_response(payment: BookingPayment) -> BookingPaymentResponse:
    return BookingPaymentResponse(
        id=payment.id,
        installmentKind=payment.installment_kind,
        percentage=payment.percentage,
        amount=payment.amount,
        dueDate=payment.due_date,
        status=payment.status,
        paidDate=payment.paid_date,
        paymentMethod=payment.payment_method,
        transactionId=payment.transaction_id,
        notes=payment.notes,
    )


def _to_service_item(item: BookingServiceItem) -> BookingServiceItemResponse:
    return BookingServiceItemResponse(
        id=item.id,
        serviceId=item.service_id,
        quantity=item.quantity,
        price=item.price,
    )


def to_booking_response(details: BookingDetails) -> BookingResponse:
    booking = details.booking
    return BookingResponse(
        id=booking.id,
        customerId=booking.customer_id,
        eventName=booking.event_name,
        eventType=booking.event_type,
        eventStartDate=booking.event_start_date,
        eventStartTime=booking.event_start_time,
        eventEndDate=booking.event_end_date,
        eventEndTime=booking.event_end_time,
        venue=booking.venue,
        guestCount=booking.guest_count,
        foodIncluded=booking.food_included,
        specialRequests=booking.special_requests,
        contactName=booking.contact_name,
        contactPhone=booking.contact_phone,
        contactEmail=booking.contact_email,
        totalAmount=booking.total_amount,
        status=booking.status,
        cancellationReason=booking.cancellation_reason,
        cancellationDate=booking.cancellation_date,
        refundAmount=booking.refund_amount,
        delayReason=booking.delay_reason,
        delayDate=booking.delay_date,
        createdAt=booking.created_at,
        services=[_to_service_item(item) for item in details.services],
        payments=[to_payment_response(payment) for payment in details.payments],
    )


def to_refund_quote_response(quote: RefundQuote) -> RefundQuoteResponse:
    return RefundQuoteResponse(
        bookingId=quote.booking_id,
        totalAmount=quote.total_amount,
        refundAmount=quote.refund_amount,
        cancellationFee=quote.cancellation_fee,
        daysUntilEvent=quote.days_until_event,
        fullRefund=quote.full_refund,
        cancellationDate=quote.cancellation_date,
        eventDate=quote.event_date,
    )
