from fastapi import Request, status
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware

from app.core.common.constants import Roles
from app.core.exceptions import AccessDenied
from app.core.messages import ErrorMessage
from app.utils.response import ErrorDetail, error_response
from app.core.errors import ErrorCode

from typing import Optional
from pydantic import BaseModel
from enum import Enum

# Paths reachable without gateway headers (probes and API docs).
PUBLIC_PATH_SUFFIXES = ("/health", "/health/", "/docs", "/redoc", "/openapi.json")


class AuthStatus(str, Enum):
    AUTHENTICATED = "AUTHENTICATED"
    ANONYMOUS = "ANONYMOUS"


class UserContext(BaseModel):
    auth_status: AuthStatus
    user_id: Optional[str] = None
    type: Optional[str] = None
    session_id: Optional[str] = None

    @property
    def is_admin(self) -> bool:
        return self.type == Roles.ADMIN


def _unauthorized(message: str, request: Request) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_401_UNAUTHORIZED,
        content=error_response(
            message=ErrorMessage.AUTH_CONTEXT_MISSING,
            status_code=401,
            errors=[
                ErrorDetail(
                    code=ErrorCode.AUTH_CONTEXT_REQUIRED,
                    message=message,
                )
            ],
            trace_id=getattr(request.state, "request_id", None),
        ).model_dump(),
    )


class GatewayAuthContextMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next):
        if request.method == "OPTIONS" or request.url.path.endswith(PUBLIC_PATH_SUFFIXES):
            return await call_next(request)

        auth_status = request.headers.get("AuthStatus")
        user_id = request.headers.get("UserId")
        user_type = request.headers.get("UserType")
        session_id = request.headers.get("X-Session-Id")

        # Enforce gateway presence
        if not auth_status:
            return _unauthorized("Request must pass through gateway", request)

        if auth_status not in AuthStatus.__members__:
            return _unauthorized("Invalid AuthStatus header", request)

        request.state.user_context = UserContext(
            auth_status=AuthStatus[auth_status],
            user_id=user_id,
            type=user_type.upper() if user_type else None,
            session_id=session_id,
        )

        return await call_next(request)

def _get_user_context(request: Request) -> UserContext:
    user_ctx = getattr(request.state, "user_context", None)

    if not user_ctx:
        raise AccessDenied(ErrorMessage.AUTH_CONTEXT_MISSING)

    return user_ctx



def is_valid_user(request: Request) -> UserContext:
    user_ctx = _get_user_context(request)

    if user_ctx.auth_status != AuthStatus.AUTHENTICATED:
        raise AccessDenied(ErrorMessage.USER_NOT_AUTHENTICATED)

    if not user_ctx.user_id:
        raise AccessDenied(ErrorMessage.USER_ID_MISSING)

    return user_ctx


def is_admin_user(request: Request) -> UserContext:
    user_ctx = is_valid_user(request)

    if not user_ctx.is_admin:
        raise AccessDenied(ErrorMessage.ADMIN_ACCESS_REQUIRED)

    return user_ctx


def ensure_owner_or_admin(user_ctx: UserContext, owner_id: str) -> None:
    if user_ctx.is_admin:
        return
    if user_ctx.user_id != owner_id:
        raise AccessDenied(ErrorMessage.OWNER_ACCESS_REQUIRED)


def get_trace_id(request: Request) -> Optional[str]:
    return getattr(request.state, "request_id", None)
