"""Installment schedule and cancellation refund rules for event bookings.

Every booking is paid in three installments:

    FIRST   20%  due the day the booking is made
    SECOND  50%  due 5 days before the event
    FINAL   30%  due the day after the event

A cancellation made 7 or more days before the event is refunded in full.
Anything later, including a cancellation on or after the event date, keeps
a 20% fee and refunds 80%.

Both calculations are pure. The only outside input is "today" for the FIRST
installment, which callers pass in as ``clock``. Amounts are handled as
``Decimal`` and left unrounded; use ``round_schedule`` / ``round_money``
where amounts are stored or shown.
"""
from __future__ import annotations

from collections.abc import Callable, Sequence
from datetime import date, datetime, timedelta
from decimal import Decimal, InvalidOperation, ROUND_HALF_UP
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict

from app.core.exceptions import InvalidArgument
from app.core.messages import ErrorMessage


class InstallmentKind(str, Enum):
    FIRST = "FIRST"
    SECOND = "SECOND"
    FINAL = "FINAL"


INSTALLMENT_PERCENTAGES: dict[InstallmentKind, int] = {
    InstallmentKind.FIRST: 20,
    InstallmentKind.SECOND: 50,
    InstallmentKind.FINAL: 30,
}
SECOND_DUE_DAYS_BEFORE_EVENT = 5
FINAL_DUE_DAYS_AFTER_EVENT = 1

FULL_REFUND_NOTICE_DAYS = 7
LATE_CANCELLATION_REFUND_RATE = Decimal("0.80")

MONEY_QUANTUM = Decimal("0.01")
# Largest value a Numeric(12, 2) column holds.
MAX_AMOUNT = Decimal("9999999999.99")


class PaymentScheduleItem(BaseModel):
    installment_kind: InstallmentKind
    amount: Decimal
    due_date: date
    percentage_of_total: int

    model_config = ConfigDict(frozen=True)


def _to_amount(value: Any, field: str = "totalAmount") -> Decimal:
    if isinstance(value, bool) or value is None:
        raise InvalidArgument(f"{field}: {ErrorMessage.INVALID_AMOUNT}")
    try:
        amount = value if isinstance(value, Decimal) else Decimal(str(value))
    except (InvalidOperation, ValueError, TypeError) as exc:
        raise InvalidArgument(f"{field}: {ErrorMessage.INVALID_AMOUNT}") from exc

    if not amount.is_finite() or amount < 0:
        raise InvalidArgument(f"{field}: {ErrorMessage.INVALID_AMOUNT}")
    if amount > MAX_AMOUNT:
        raise InvalidArgument(f"{field}: {ErrorMessage.AMOUNT_TOO_LARGE}")
    return amount


def _to_date(value: Any, field: str) -> date:
    # datetime is a subclass of date, so it has to be checked first.
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        try:
            return date.fromisoformat(value)
        except ValueError:
            pass
        try:
            return datetime.fromisoformat(value).date()
        except ValueError as exc:
            raise InvalidArgument(f"{field}: {ErrorMessage.INVALID_DATE}") from exc
    raise InvalidArgument(f"{field}: {ErrorMessage.INVALID_DATE}")


def _shift(day: date, days: int, field: str) -> date:
    try:
        return day + timedelta(days=days)
    except OverflowError as exc:
        raise InvalidArgument(f"{field}: {ErrorMessage.INVALID_DATE}") from exc


def _share(total: Decimal, percentage: int) -> Decimal:
    return total * percentage / 100


def compute_installment_schedule(
    total_amount: Decimal | int | float | str,
    event_date: date | datetime | str,
    clock: Callable[[], date] = date.today,
) -> list[PaymentScheduleItem]:
    """Split ``total_amount`` into the FIRST / SECOND / FINAL installments.

    Args:
        total_amount: Booking total. Zero is allowed and gives three zero
            installments.
        event_date: Day the event starts. Anchors the SECOND and FINAL due
            dates.
        clock: Returns today's date; the FIRST installment is due on it.

    Returns:
        Exactly three items, always ordered FIRST, SECOND, FINAL. Amounts are
        exact fractions of the total and sum back to it.

    Raises:
        InvalidArgument: negative, non-finite or non-numeric amount, an
            amount above ``MAX_AMOUNT``, or a date that is not a valid
            calendar date.
    """
    total = _to_amount(total_amount)
    event_day = _to_date(event_date, "eventDate")
    today = _to_date(clock(), "clock")

    due_dates = {
        InstallmentKind.FIRST: today,
        InstallmentKind.SECOND: _shift(
            event_day, -SECOND_DUE_DAYS_BEFORE_EVENT, "eventDate"
        ),
        InstallmentKind.FINAL: _shift(
            event_day, FINAL_DUE_DAYS_AFTER_EVENT, "eventDate"
        ),
    }

    return [
        PaymentScheduleItem(
            installment_kind=kind,
            amount=_share(total, percentage),
            due_date=due_dates[kind],
            percentage_of_total=percentage,
        )
        for kind, percentage in INSTALLMENT_PERCENTAGES.items()
    ]


def days_until_event(
    cancellation_date: date | datetime | str,
    event_date: date | datetime | str,
) -> int:
    """Whole calendar days from cancellation to event; negative once the event has passed."""
    cancel_day = _to_date(cancellation_date, "cancellationDate")
    event_day = _to_date(event_date, "eventDate")
    return (event_day - cancel_day).days


def compute_cancellation_refund(
    total_amount: Decimal | int | float | str,
    cancellation_date: date | datetime | str,
    event_date: date | datetime | str,
) -> Decimal:
    """Refund owed when a booking worth ``total_amount`` is cancelled.

    Cancelling at least ``FULL_REFUND_NOTICE_DAYS`` before the event returns
    the whole total. Shorter notice, same-day and post-event cancellations
    return 80% of it.
    """
    total = _to_amount(total_amount)
    notice_days = days_until_event(cancellation_date, event_date)

    if notice_days < FULL_REFUND_NOTICE_DAYS:
        return total * LATE_CANCELLATION_REFUND_RATE

    return total


def round_money(value: Decimal | int | float | str) -> Decimal:
    try:
        return _to_amount(value, "amount").quantize(MONEY_QUANTUM, rounding=ROUND_HALF_UP)
    except InvalidOperation as exc:
        raise InvalidArgument(f"amount: {ErrorMessage.INVALID_AMOUNT}") from exc


def round_schedule(items: Sequence[PaymentScheduleItem]) -> list[PaymentScheduleItem]:
    """Round a schedule to cents while keeping its rounded total intact.

    Every installment but the last is rounded half-up; the last one takes
    whatever is left of the rounded total.
    """
    if not items:
        return []

    total = round_money(sum((item.amount for item in items), Decimal("0")))
    rounded = [
        item.model_copy(update={"amount": round_money(item.amount)})
        for item in items[:-1]
    ]
    remainder = total - sum((item.amount for item in rounded), Decimal("0"))
    rounded.append(items[-1].model_copy(update={"amount": remainder}))
    return rounded
