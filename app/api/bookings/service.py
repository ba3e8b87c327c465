from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal
import uuid

from sqlalchemy import func
from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import select

from app.api.bookings.models import Booking, BookingPayment, BookingServiceItem
from app.api.bookings.payment_schedule import (
    FULL_REFUND_NOTICE_DAYS,
    compute_cancellation_refund,
    compute_installment_schedule,
    days_until_event,
    round_money,
    round_schedule,
)
from app.api.bookings.schemas import CreateBookingRequest, UpdateBookingStatusRequest
from app.api.services.models import Service
from app.core.common.constants import CLOSED_BOOKING_STATUSES, BookingStatus, PaymentStatus
from app.core.exceptions import BookingNotCancellable, BookingNotFound, InvalidServiceSelection
from app.core.middlewares import logger
from app.core.request_context import UserContext
from app.utils.clock import today, utcnow
from app.utils.event_publisher import (
    publish_booking_cancelled_event,
    publish_booking_created_event,
)


@dataclass
class BookingDetails:
    booking: Booking
    services: list[BookingServiceItem] = field(default_factory=list)
    payments: list[BookingPayment] = field(default_factory=list)


@dataclass(frozen=True)
class RefundQuote:
    booking_id: uuid.UUID
    total_amount: Decimal
    refund_amount: Decimal
    days_until_event: int
    cancellation_date: date
    event_date: date

    @property
    def cancellation_fee(self) -> Decimal:
        return self.total_amount - self.refund_amount

    @property
    def full_refund(self) -> bool:
        return self.days_until_event >= FULL_REFUND_NOTICE_DAYS


async def _load_services(
    db: AsyncSession, service_ids: set[uuid.UUID]
) -> dict[uuid.UUID, Service]:
    result = await db.execute(select(Service).where(Service.id.in_(service_ids)))
    services = {service.id: service for service in result.scalars().all()}

    missing = sorted(str(service_id) for service_id in service_ids - services.keys())
    if missing:
        raise InvalidServiceSelection(f"Invalid service IDs: {', '.join(missing)}")

    inactive = sorted(str(s.id) for s in services.values() if not s.is_active)
    if inactive:
        raise InvalidServiceSelection(f"Inactive service IDs: {', '.join(inactive)}")
    return services


async def create_booking(
    db: AsyncSession,
    customer_id: str,
    payload: CreateBookingRequest,
    clock: Callable[[], date] = today,
) -> BookingDetails:
    if not payload.services:
        raise InvalidServiceSelection()

    catalogue = await _load_services(db, {line.service_id for line in payload.services})

    booking_id = uuid.uuid4()
    items: list[BookingServiceItem] = []
    total_amount = Decimal("0")
    for line in payload.services:
        price = round_money(
            line.price if line.price is not None else catalogue[line.service_id].price
        )
        total_amount += price * line.quantity
        items.append(
            BookingServiceItem(
                id=uuid.uuid4(),
                booking_id=booking_id,
                service_id=line.service_id,
                quantity=line.quantity,
                price=price,
            )
        )

    schedule = round_schedule(
        compute_installment_schedule(total_amount, payload.event_start_date, clock=clock)
    )

    booking = Booking(
        id=booking_id,
        customer_id=customer_id,
        event_name=payload.event_name,
        event_type=payload.event_type,
        event_start_date=payload.event_start_date,
        event_start_time=payload.event_start_time,
        event_end_date=payload.event_end_date,
        event_end_time=payload.event_end_time,
        venue=payload.venue,
        customer_address=payload.customer_address,
        guest_count=payload.guest_count,
        food_included=payload.food_included,
        special_requests=payload.special_requests,
        contact_name=payload.contact_name,
        contact_phone=payload.contact_phone,
        contact_email=payload.contact_email or None,
        total_amount=round_money(total_amount),
        status=BookingStatus.PENDING.value,
    )
    payments = [
        BookingPayment(
            id=uuid.uuid4(),
            booking_id=booking_id,
            installment_kind=item.installment_kind.value,
            percentage=item.percentage_of_total,
            amount=item.amount,
            due_date=item.due_date,
            status=PaymentStatus.PENDING.value,
        )
        for item in schedule
    ]

    db.add(booking)
    # Parent row first so the child foreign keys resolve on flush.
    await db.flush()
    db.add_all(items)
    db.add_all(payments)
    await db.commit()

    logger.info(
        f"Booking created id={booking.id} customer={customer_id} total={booking.total_amount}"
    )
    await publish_booking_created_event(
        {
            "event_type": "booking.created",
            "booking_id": str(booking.id),
            "customer_id": customer_id,
            "total_amount": str(booking.total_amount),
            "event_start_date": booking.event_start_date.isoformat(),
            "payments": [
                {
                    "installment_kind": payment.installment_kind,
                    "amount": str(payment.amount),
                    "due_date": payment.due_date.isoformat(),
                }
                for payment in payments
            ],
        }
    )
    return BookingDetails(booking=booking, services=items, payments=payments)


async def get_booking(db: AsyncSession, booking_id: uuid.UUID) -> Booking:
    booking = await db.get(Booking, booking_id)
    if not booking:
        raise BookingNotFound()
    return booking


async def load_booking_details(
    db: AsyncSession, bookings: list[Booking]
) -> list[BookingDetails]:
    if not bookings:
        return []

    details = {booking.id: BookingDetails(booking=booking) for booking in bookings}
    booking_ids = list(details)

    items = await db.execute(
        select(BookingServiceItem).where(BookingServiceItem.booking_id.in_(booking_ids))
    )
    for item in items.scalars().all():
        details[item.booking_id].services.append(item)

    payments = await db.execute(
        select(BookingPayment)
        .where(BookingPayment.booking_id.in_(booking_ids))
        .order_by(BookingPayment.due_date)
    )
    for payment in payments.scalars().all():
        details[payment.booking_id].payments.append(payment)

    return [details[booking.id] for booking in bookings]


async def list_bookings(
    db: AsyncSession,
    user_ctx: UserContext,
    status: BookingStatus | None = None,
    customer_id: str | None = None,
    page: int = 1,
    limit: int = 10,
) -> tuple[list[BookingDetails], int]:
    conditions = []
    if not user_ctx.is_admin:
        conditions.append(Booking.customer_id == user_ctx.user_id)
    elif customer_id:
        conditions.append(Booking.customer_id == customer_id)
    if status:
        conditions.append(Booking.status == status.value)

    count_stmt = select(func.count()).select_from(Booking).where(*conditions)
    total = (await db.execute(count_stmt)).scalar_one()

    stmt = (
        select(Booking)
        .where(*conditions)
        .order_by(Booking.created_at.desc())
        .offset((page - 1) * limit)
        .limit(limit)
    )
    bookings = list((await db.execute(stmt)).scalars().all())
    return await load_booking_details(db, bookings), total


def quote_refund(booking: Booking, clock: Callable[[], date] = today) -> RefundQuote:
    cancellation_date = clock()
    refund = compute_cancellation_refund(
        booking.total_amount, cancellation_date, booking.event_start_date
    )
    return RefundQuote(
        booking_id=booking.id,
        total_amount=round_money(booking.total_amount),
        refund_amount=round_money(refund),
        days_until_event=days_until_event(cancellation_date, booking.event_start_date),
        cancellation_date=cancellation_date,
        event_date=booking.event_start_date,
    )


async def cancel_booking(
    db: AsyncSession,
    booking: Booking,
    reason: str | None = None,
    clock: Callable[[], date] = today,
) -> RefundQuote:
    if booking.status in CLOSED_BOOKING_STATUSES:
        raise BookingNotCancellable(
            f"Booking is {booking.status.lower()} and can no longer be cancelled"
        )

    quote = quote_refund(booking, clock=clock)

    booking.status = BookingStatus.CANCELLED.value
    booking.cancellation_reason = reason
    booking.cancellation_date = quote.cancellation_date
    booking.refund_amount = quote.refund_amount
    booking.updated_at = utcnow()
    db.add(booking)
    await db.commit()

    logger.info(
        f"Booking cancelled id={booking.id} notice_days={quote.days_until_event} "
        f"refund={quote.refund_amount}"
    )
    await publish_booking_cancelled_event(
        {
            "event_type": "booking.cancelled",
            "booking_id": str(booking.id),
            "customer_id": booking.customer_id,
            "total_amount": str(quote.total_amount),
            "refund_amount": str(quote.refund_amount),
            "cancellation_date": quote.cancellation_date.isoformat(),
            "reason": reason,
        }
    )
    return quote


async def update_booking_status(
    db: AsyncSession,
    booking: Booking,
    payload: UpdateBookingStatusRequest,
    clock: Callable[[], date] = today,
) -> Booking:
    if payload.status == BookingStatus.CANCELLED:
        await cancel_booking(db, booking, reason=payload.cancellation_reason, clock=clock)
        return booking

    booking.status = payload.status.value
    if payload.delay_reason:
        booking.delay_reason = payload.delay_reason
        booking.delay_date = clock()
    booking.updated_at = utcnow()
    db.add(booking)
    await db.commit()

    logger.info(f"Booking status updated id={booking.id} status={booking.status}")
    return booking
