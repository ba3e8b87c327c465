from __future__ import annotations

from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import select

from app.api.services.models import Service
from app.api.services.schemas import ServiceResponse


async def list_services(
    db: AsyncSession, include_inactive: bool = False
) -> list[Service]:
    stmt = select(Service).order_by(Service.name)
    if not include_inactive:
        stmt = stmt.where(Service.is_active == True)  # noqa: E712
    result = await db.execute(stmt)
    return list(result.scalars().all())


def to_service_response(service: Service) -> ServiceResponse:
    return ServiceResponse(
        id=service.id,
        name=service.name,
        description=service.description,
        price=service.price,
        isActive=service.is_active,
    )
