from collections.abc import Callable
from datetime import date, datetime, timezone


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def today() -> date:
    """Calendar day used for due dates and cancellation notice."""
    return date.today()


def get_clock() -> Callable[[], date]:
    """FastAPI dependency handing routes the calendar they compute dates against."""
    return today
