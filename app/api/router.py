from fastapi import APIRouter
from app.api.health.routes import health_router
from app.api.bookings.routes import bookings_router
from app.api.payments.routes import payments_router
from app.api.services.routes import services_router
from app.api.dashboard.routes import dashboard_router
api_router = APIRouter()

api_router.include_router(health_router, prefix="/health", tags=["health"])
api_router.include_router(services_router, prefix="/services", tags=["services"])
api_router.include_router(bookings_router, prefix="/bookings", tags=["bookings"])
api_router.include_router(payments_router, prefix="/payments", tags=["payments"])
api_router.include_router(dashboard_router, prefix="/dashboard", tags=["dashboard"])
