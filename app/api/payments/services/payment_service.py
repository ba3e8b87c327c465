from __future__ import annotations

from collections.abc import Callable
from datetime import date
import uuid

from sqlalchemy.ext.asyncio import AsyncSession

from app.api.bookings.models import Booking, BookingPayment
from app.api.bookings.schemas import BookingPaymentResponse
from app.api.bookings.helpers import to_payment_response
from app.api.payments.schemas import PaymentUpdateRequest
from app.core.common.constants import PaymentStatus
from app.core.exceptions import PaymentNotFound
from app.core.middlewares import logger
from app.core.request_context import UserContext, ensure_owner_or_admin
from app.utils.clock import today, utcnow


async def update_payment_service(
    payment_id: uuid.UUID,
    payload: PaymentUpdateRequest,
    user_ctx: UserContext,
    session: AsyncSession,
    clock: Callable[[], date] = today,
) -> BookingPaymentResponse:
    payment = await session.get(BookingPayment, payment_id)
    if not payment:
        raise PaymentNotFound()

    booking = await session.get(Booking, payment.booking_id)
    if not booking:
        raise PaymentNotFound()
    ensure_owner_or_admin(user_ctx, booking.customer_id)

    payment.status = payload.status.value
    if payload.paid_date:
        payment.paid_date = payload.paid_date
    elif payload.status == PaymentStatus.PAID and not payment.paid_date:
        payment.paid_date = clock()
    if payload.payment_method:
        payment.payment_method = payload.payment_method
    if payload.transaction_id:
        payment.transaction_id = payload.transaction_id
    if payload.notes:
        payment.notes = payload.notes
    payment.updated_at = utcnow()

    session.add(payment)
    await session.commit()

    logger.info(
        f"Payment updated id={payment.id} booking={payment.booking_id} "
        f"kind={payment.installment_kind} status={payment.status}"
    )
    return to_payment_response(payment)
