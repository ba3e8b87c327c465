from __future__ import annotations

from collections.abc import Callable
from datetime import date
from uuid import UUID

from fastapi import APIRouter, Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.bookings.schemas import BookingPaymentResponse
from app.api.payments.schemas import PaymentUpdateRequest
from app.api.payments.services.payment_service import update_payment_service
from app.core.messages import SuccessMessage
from app.core.request_context import get_trace_id, is_valid_user
from app.db.main import get_session
from app.utils.clock import get_clock
from app.utils.response import ApiResponse, success_response

payments_router = APIRouter()


@payments_router.patch(
    "/{payment_id}",
    response_model=ApiResponse[BookingPaymentResponse],
)
async def update_payment(
    request: Request,
    payment_id: UUID,
    payload: PaymentUpdateRequest,
    session: AsyncSession = Depends(get_session),
    clock: Callable[[], date] = Depends(get_clock),
):
    user_ctx = is_valid_user(request)
    payment = await update_payment_service(
        payment_id, payload, user_ctx, session, clock=clock
    )
    return success_response(
        data=payment,
        message=SuccessMessage.PAYMENT_UPDATED,
        trace_id=get_trace_id(request),
    )
