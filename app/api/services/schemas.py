from __future__ import annotations

from decimal import Decimal
from typing import Annotated
from uuid import UUID

from pydantic import BaseModel, Field


class ServiceResponse(BaseModel):
    id: UUID
    name: str
    description: str | None = None
    price: Decimal
    is_active: Annotated[bool, Field(alias="isActive")]

    model_config = {"populate_by_name": True}
