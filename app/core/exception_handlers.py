from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from app.core.exceptions import GlobalException
from app.core.errors import ErrorCode
from app.core.messages import ErrorMessage
from app.core.middlewares import logger
from app.core.request_context import get_trace_id
from app.utils.response import ErrorDetail, error_response


def _field_path(loc) -> str | None:
    parts = [str(part) for part in loc if part not in ("body", "query", "path")]
    return ".".join(parts) or None


def register_exception_handlers(app: FastAPI):
    # ---------- Custom Domain Errors ----------
    @app.exception_handler(GlobalException)
    async def handle_global_exception(
        request: Request, exc: GlobalException
    ):
        return JSONResponse(
            status_code=exc.status_code,
            content=error_response(
                message=exc.message,
                status_code=exc.status_code,
                errors=[
                    ErrorDetail(
                        code=exc.error_code,
                        message=exc.message,
                    )
                ],
                trace_id=get_trace_id(request),
            ).model_dump(mode="json"),
        )

    # ---------- Request Validation ----------
    @app.exception_handler(RequestValidationError)
    async def handle_request_validation_error(
        request: Request, exc: RequestValidationError
    ):
        return JSONResponse(
            status_code=422,
            content=error_response(
                message=ErrorMessage.REQUEST_VALIDATION_FAILED,
                status_code=422,
                errors=[
                    ErrorDetail(
                        code=ErrorCode.VALIDATION_ERROR,
                        field=_field_path(error.get("loc", ())),
                        message=error.get("msg", ""),
                    )
                    for error in exc.errors()
                ],
                trace_id=get_trace_id(request),
            ).model_dump(mode="json"),
        )

    # ---------- Database Errors ----------
    @app.exception_handler(SQLAlchemyError)
    async def handle_database_error(
        request: Request, exc: SQLAlchemyError
    ):
        logger.exception(f"Database error on {request.method} {request.url.path}")
        return JSONResponse(
            status_code=500,
            content=error_response(
                message=ErrorMessage.DATABASE_FAILURE,
                status_code=500,
                errors=[
                    ErrorDetail(
                        code=ErrorCode.DATABASE_ERROR,
                        message=ErrorMessage.DATABASE_FAILURE,
                    )
                ],
                trace_id=get_trace_id(request),
            ).model_dump(mode="json"),
        )

    # ---------- Catch-all (500) ----------
    @app.exception_handler(Exception)
    async def handle_unhandled_exception(
        request: Request, exc: Exception
    ):
        logger.exception(f"Unhandled error on {request.method} {request.url.path}")
        return JSONResponse(
            status_code=500,
            content=error_response(
                message=ErrorMessage.SERVER_ERROR,
                status_code=500,
                errors=[
                    ErrorDetail(
                        code=ErrorCode.INTERNAL_SERVER_ERROR,
                        message=ErrorMessage.SERVER_ERROR,
                    )
                ],
                trace_id=get_trace_id(request),
            ).model_dump(mode="json"),
        )
