from contextlib import asynccontextmanager

from fastapi import FastAPI
from app.api.router import api_router
from app.core.exception_handlers import register_exception_handlers
from app.core.middlewares import logger, register_middleware
from app.db.main import init_db


version = "v1"

description = """
Event and catering bookings for Choice Menu: service catalogue, bookings,
three-installment payment schedules and cancellation refunds.
    """

version_prefix =f"/api/{version}"


@asynccontextmanager
async def lifespan(app: FastAPI):
    await init_db()
    logger.info("choice-menu started")
    yield


app = FastAPI(
    title="choice-menu-booking-service",
    description=description,
    version=version,
    license_info={"name": "MIT License", "url": "https://opensource.org/license/mit"},
    openapi_url=f"{version_prefix}/openapi.json",
    docs_url=f"{version_prefix}/docs",
    redoc_url=f"{version_prefix}/redoc",
    lifespan=lifespan,
)

register_exception_handlers(app)


register_middleware(app)


app.include_router(api_router, prefix=f"{version_prefix}")
