from __future__ import annotations

from decimal import Decimal
from typing import Annotated

from pydantic import BaseModel, Field


class DashboardStatsResponse(BaseModel):
    total_bookings: Annotated[int, Field(alias="totalBookings")]
    pending_bookings: Annotated[int, Field(alias="pendingBookings")]
    confirmed_bookings: Annotated[int, Field(alias="confirmedBookings")]
    completed_bookings: Annotated[int, Field(alias="completedBookings")]
    total_revenue: Annotated[Decimal, Field(alias="totalRevenue")]
    upcoming_events: Annotated[int, Field(alias="upcomingEvents")]
    recent_bookings: Annotated[int, Field(alias="recentBookings")]

    model_config = {"populate_by_name": True}
