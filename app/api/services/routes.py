from __future__ import annotations

from fastapi import APIRouter, Depends, Query, Request
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.services.schemas import ServiceResponse
from app.api.services.service import list_services, to_service_response
from app.core.request_context import _get_user_context, get_trace_id
from app.db.main import get_session
from app.utils.response import ApiResponse, success_response

services_router = APIRouter()


@services_router.get("", response_model=ApiResponse[list[ServiceResponse]])
async def get_services(
    request: Request,
    include_inactive: bool = Query(False, alias="includeInactive"),
    session: AsyncSession = Depends(get_session),
):
    user_ctx = _get_user_context(request)
    services = await list_services(
        session, include_inactive=include_inactive and user_ctx.is_admin
    )
    return success_response(
        data=[to_service_response(service) for service in services],
        trace_id=get_trace_id(request),
    )
