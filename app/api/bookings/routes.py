from __future__ import annotations

from collections.abc import Callable
from datetime import date
from uuid import UUID

from fastapi import APIRouter, Depends, Query, Request, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.bookings.helpers import (
    to_booking_response,
    to_refund_quote_response,
    to_schedule_items,
)
from app.api.bookings.payment_schedule import (
    compute_installment_schedule,
    round_money,
    round_schedule,
)
from app.api.bookings.schemas import (
    BookingResponse,
    CancelBookingRequest,
    CreateBookingRequest,
    RefundQuoteResponse,
    ScheduleQuoteRequest,
    ScheduleQuoteResponse,
    UpdateBookingStatusRequest,
)
from app.api.bookings.service import (
    cancel_booking,
    create_booking,
    get_booking,
    list_bookings,
    load_booking_details,
    quote_refund,
    update_booking_status,
)
from app.core.common.constants import BookingStatus
from app.core.config import Config
from app.core.messages import SuccessMessage
from app.core.request_context import (
    ensure_owner_or_admin,
    get_trace_id,
    is_admin_user,
    is_valid_user,
)
from app.db.main import get_session
from app.utils.clock import get_clock
from app.utils.response import ApiResponse, build_pagination, success_response

bookings_router = APIRouter()


@bookings_router.post(
    "/payment-schedule/quote",
    response_model=ApiResponse[ScheduleQuoteResponse],
)
async def quote_payment_schedule(
    request: Request,
    payload: ScheduleQuoteRequest,
    clock: Callable[[], date] = Depends(get_clock),
):
    schedule = round_schedule(
        compute_installment_schedule(payload.total_amount, payload.event_date, clock=clock)
    )
    return success_response(
        data=ScheduleQuoteResponse(
            totalAmount=round_money(payload.total_amount),
            schedule=to_schedule_items(schedule),
        ),
        trace_id=get_trace_id(request),
    )


@bookings_router.post(
    "",
    response_model=ApiResponse[BookingResponse],
    status_code=status.HTTP_201_CREATED,
)
async def create_event_booking(
    request: Request,
    payload: CreateBookingRequest,
    session: AsyncSession = Depends(get_session),
    clock: Callable[[], date] = Depends(get_clock),
):
    user_ctx = is_valid_user(request)
    details = await create_booking(session, user_ctx.user_id, payload, clock=clock)
    return success_response(
        data=to_booking_response(details),
        message=SuccessMessage.BOOKING_CREATED,
        status_code=status.HTTP_201_CREATED,
        trace_id=get_trace_id(request),
    )


@bookings_router.get("", response_model=ApiResponse[list[BookingResponse]])
async def get_bookings(
    request: Request,
    booking_status: BookingStatus | None = Query(None, alias="status"),
    customer_id: str | None = Query(None, alias="customerId"),
    page: int = Query(1, ge=1),
    limit: int = Query(Config.DEFAULT_PAGE_SIZE, ge=1, le=Config.MAX_PAGE_SIZE),
    session: AsyncSession = Depends(get_session),
):
    user_ctx = is_valid_user(request)
    bookings, total = await list_bookings(
        session,
        user_ctx,
        status=booking_status,
        customer_id=customer_id,
        page=page,
        limit=limit,
    )
    return success_response(
        data=[to_booking_response(details) for details in bookings],
        meta=build_pagination(page, limit, total),
        trace_id=get_trace_id(request),
    )


@bookings_router.get("/{booking_id}", response_model=ApiResponse[BookingResponse])
async def get_booking_by_id(
    request: Request,
    booking_id: UUID,
    session: AsyncSession = Depends(get_session),
):
    user_ctx = is_valid_user(request)
    booking = await get_booking(session, booking_id)
    ensure_owner_or_admin(user_ctx, booking.customer_id)

    [details] = await load_booking_details(session, [booking])
    return success_response(
        data=to_booking_response(details),
        trace_id=get_trace_id(request),
    )


@bookings_router.get(
    "/{booking_id}/refund-quote",
    response_model=ApiResponse[RefundQuoteResponse],
)
async def get_refund_quote(
    request: Request,
    booking_id: UUID,
    session: AsyncSession = Depends(get_session),
    clock: Callable[[], date] = Depends(get_clock),
):
    user_ctx = is_valid_user(request)
    booking = await get_booking(session, booking_id)
    ensure_owner_or_admin(user_ctx, booking.customer_id)

    return success_response(
        data=to_refund_quote_response(quote_refund(booking, clock=clock)),
        trace_id=get_trace_id(request),
    )


@bookings_router.post(
    "/{booking_id}/cancel",
    response_model=ApiResponse[RefundQuoteResponse],
)
async def cancel_event_booking(
    request: Request,
    booking_id: UUID,
    payload: CancelBookingRequest | None = None,
    session: AsyncSession = Depends(get_session),
    clock: Callable[[], date] = Depends(get_clock),
):
    user_ctx = is_valid_user(request)
    booking = await get_booking(session, booking_id)
    ensure_owner_or_admin(user_ctx, booking.customer_id)

    quote = await cancel_booking(
        session,
        booking,
        reason=payload.reason if payload else None,
        clock=clock,
    )
    return success_response(
        data=to_refund_quote_response(quote),
        message=SuccessMessage.BOOKING_CANCELLED,
        trace_id=get_trace_id(request),
    )


@bookings_router.patch(
    "/{booking_id}/status",
    response_model=ApiResponse[BookingResponse],
)
async def update_event_booking_status(
    request: Request,
    booking_id: UUID,
    payload: UpdateBookingStatusRequest,
    session: AsyncSession = Depends(get_session),
    clock: Callable[[], date] = Depends(get_clock),
):
    is_admin_user(request)
    booking = await get_booking(session, booking_id)
    booking = await update_booking_status(session, booking, payload, clock=clock)

    [details] = await load_booking_details(session, [booking])
    return success_response(
        data=to_booking_response(details),
        message=SuccessMessage.BOOKING_UPDATED,
        trace_id=get_trace_id(request),
    )
