import logging
import time
import uuid

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from starlette.middleware.base import BaseHTTPMiddleware

from app.core.config import Config
from app.core.request_context import GatewayAuthContextMiddleware

logging.basicConfig(
    level=Config.LOG_LEVEL.upper(),
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
)
logger = logging.getLogger("choice_menu")

REQUEST_ID_HEADER = "X-Request-Id"


class RequestTimingMiddleware(BaseHTTPMiddleware):
    """Tag each request with an id and log how long it took."""

    async def dispatch(self, request: Request, call_next):
        request_id = request.headers.get(REQUEST_ID_HEADER) or uuid.uuid4().hex
        request.state.request_id = request_id

        start_time = time.perf_counter()
        response = await call_next(request)
        process_time = (time.perf_counter() - start_time) * 1000

        response.headers[REQUEST_ID_HEADER] = request_id
        response.headers["X-Process-Time"] = f"{process_time:.2f}ms"

        if process_time > Config.SLOW_REQUEST_MS:
            logger.warning(
                f"Slow request: {request.method} {request.url.path} "
                f"took {process_time:.2f}ms request_id={request_id}"
            )
        else:
            logger.info(
                f"{request.method} {request.url.path} -> {response.status_code} "
                f"({process_time:.2f}ms) request_id={request_id}"
            )
        return response


def register_middleware(app: FastAPI):
    app.add_middleware(GatewayAuthContextMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )
    # Added last so it wraps everything, including auth rejections.
    app.add_middleware(RequestTimingMiddleware)
