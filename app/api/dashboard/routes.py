from __future__ import annotations

from collections.abc import Callable
from datetime import date

from fastapi import APIRouter, Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.dashboard.schemas import DashboardStatsResponse
from app.api.dashboard.service import get_dashboard_stats
from app.core.request_context import get_trace_id, is_admin_user
from app.db.main import get_session
from app.utils.clock import get_clock
from app.utils.response import ApiResponse, success_response

dashboard_router = APIRouter()


@dashboard_router.get("/stats", response_model=ApiResponse[DashboardStatsResponse])
async def get_stats(
    request: Request,
    session: AsyncSession = Depends(get_session),
    clock: Callable[[], date] = Depends(get_clock),
):
    is_admin_user(request)
    stats = await get_dashboard_stats(session, clock=clock)
    return success_response(data=stats, trace_id=get_trace_id(request))
