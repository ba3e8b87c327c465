from __future__ import annotations

from datetime import date
from typing import Annotated

from pydantic import BaseModel, Field

from app.core.common.constants import PaymentStatus


class PaymentUpdateRequest(BaseModel):
    status: PaymentStatus
    paid_date: Annotated[date | None, Field(alias="paidDate")] = None
    payment_method: Annotated[str | None, Field(alias="paymentMethod", max_length=50)] = None
    transaction_id: Annotated[str | None, Field(alias="transactionId", max_length=100)] = None
    notes: str | None = None

    model_config = {"populate_by_name": True}
