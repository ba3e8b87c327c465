from __future__ import annotations

from collections.abc import Callable
from datetime import date, datetime, time, timedelta, timezone
from decimal import Decimal

from sqlalchemy import func
from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import select

from app.api.bookings.models import Booking, BookingPayment
from app.api.bookings.payment_schedule import round_money
from app.api.dashboard.schemas import DashboardStatsResponse
from app.core.common.constants import BookingStatus, PaymentStatus
from app.utils.clock import today

RECENT_BOOKING_DAYS = 7
UPCOMING_STATUSES = (BookingStatus.PENDING.value, BookingStatus.CONFIRMED.value)


async def get_dashboard_stats(
    db: AsyncSession, clock: Callable[[], date] = today
) -> DashboardStatsResponse:
    """Booking counts and collected revenue for the admin dashboard.

    Revenue is the sum of installments marked PAID. Upcoming events are
    PENDING or CONFIRMED bookings whose event starts today or later.
    """
    current_day = clock()

    rows = await db.execute(
        select(Booking.status, func.count()).group_by(Booking.status)
    )
    by_status = {status: count for status, count in rows.all()}

    revenue = (
        await db.execute(
            select(func.coalesce(func.sum(BookingPayment.amount), 0)).where(
                BookingPayment.status == PaymentStatus.PAID.value
            )
        )
    ).scalar_one()

    upcoming = (
        await db.execute(
            select(func.count())
            .select_from(Booking)
            .where(
                Booking.status.in_(UPCOMING_STATUSES),
                Booking.event_start_date >= current_day,
            )
        )
    ).scalar_one()

    recent_since = datetime.combine(
        current_day - timedelta(days=RECENT_BOOKING_DAYS), time.min, tzinfo=timezone.utc
    )
    recent = (
        await db.execute(
            select(func.count())
            .select_from(Booking)
            .where(Booking.created_at >= recent_since)
        )
    ).scalar_one()

    return DashboardStatsResponse(
        totalBookings=sum(by_status.values()),
        pendingBookings=by_status.get(BookingStatus.PENDING.value, 0),
        confirmedBookings=by_status.get(BookingStatus.CONFIRMED.value, 0),
        completedBookings=by_status.get(BookingStatus.COMPLETED.value, 0),
        totalRevenue=round_money(Decimal(str(revenue))),
        upcomingEvents=upcoming,
        recentBookings=recent,
    )
