import os

# Point settings at throwaway values before the app package is imported.
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite://")
os.environ.setdefault("BOOKING_EVENTS_QUEUE_URL", "")

from datetime import date
from decimal import Decimal

import httpx
import pytest
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool
from sqlmodel import SQLModel

from app import app as fastapi_app
from app.api.bookings import service as booking_service
from app.api.bookings.models import Booking, BookingPayment, BookingServiceItem  # noqa: F401
from app.api.services.models import Service
from app.db.main import get_session
from app.utils.clock import get_clock

TODAY = date(2024, 12, 1)

CUSTOMER_ID = "customer-1"
OTHER_CUSTOMER_ID = "customer-2"

CUSTOMER_HEADERS = {
    "AuthStatus": "AUTHENTICATED",
    "UserId": CUSTOMER_ID,
    "UserType": "CUSTOMER",
}
OTHER_CUSTOMER_HEADERS = {
    "AuthStatus": "AUTHENTICATED",
    "UserId": OTHER_CUSTOMER_ID,
    "UserType": "CUSTOMER",
}
ADMIN_HEADERS = {
    "AuthStatus": "AUTHENTICATED",
    "UserId": "admin-1",
    "UserType": "ADMIN",
}
ANONYMOUS_HEADERS = {"AuthStatus": "ANONYMOUS"}


def fixed_clock() -> date:
    return TODAY


@pytest.fixture
async def engine():
    engine = create_async_engine(
        "sqlite+aiosqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_maker(engine):
    return async_sessionmaker(bind=engine, class_=AsyncSession, expire_on_commit=False)


@pytest.fixture
async def session(session_maker):
    async with session_maker() as session:
        yield session


@pytest.fixture
def published_events(monkeypatch):
    events = []

    async def _record(event_data: dict) -> None:
        events.append(event_data)

    monkeypatch.setattr(booking_service, "publish_booking_created_event", _record)
    monkeypatch.setattr(booking_service, "publish_booking_cancelled_event", _record)
    return events


@pytest.fixture
async def catalogue(session):
    services = {
        "catering": Service(name="Catering", description="Per-head buffet", price=Decimal("1500.00")),
        "tent": Service(name="Tent Service", description="Marquee with sidewalls", price=Decimal("40000.00")),
        "lighting": Service(name="Lighting", price=Decimal("12500.00")),
        "retired": Service(name="Fireworks", price=Decimal("9000.00"), is_active=False),
    }
    session.add_all(services.values())
    await session.commit()
    return services


@pytest.fixture
async def client(session_maker, published_events):
    async def _get_session():
        async with session_maker() as session:
            yield session

    fastapi_app.dependency_overrides[get_session] = _get_session
    fastapi_app.dependency_overrides[get_clock] = lambda: fixed_clock

    transport = httpx.ASGITransport(app=fastapi_app)
    async with httpx.AsyncClient(transport=transport, base_url="http://testserver") as client:
        yield client

    fastapi_app.dependency_overrides.clear()


def booking_payload(services: list[dict], **overrides) -> dict:
    payload = {
        "eventName": "Ayesha & Omar Walima",
        "eventType": "Wedding",
        "eventStartDate": "2024-12-25",
        "eventStartTime": "19:00",
        "venue": "Garden Marquee, DHA Phase 6",
        "guestCount": 250,
        "foodIncluded": True,
        "contactName": "Ayesha Khan",
        "contactPhone": "03001234567",
        "contactEmail": "ayesha@example.com",
        "services": services,
    }
    payload.update(overrides)
    return payload
