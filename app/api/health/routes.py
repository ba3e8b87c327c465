from fastapi import APIRouter, Response, status
from app.api.health import (
    check_database,
    check_disk,
    check_memory
)
from app.utils.clock import utcnow

SERVICE_NAME = "choice-menu"

health_router = APIRouter()
@health_router.get("/")
async def health_check(response: Response):
    db_status = await check_database()

    if db_status == "down":
        response.status_code = status.HTTP_503_SERVICE_UNAVAILABLE

    return {
        "status": "ok" if db_status == "up" else "unhealthy",
        "service": SERVICE_NAME,
        "timestamp": utcnow().isoformat(),
        "checks": {
            "database": db_status,
            "disk": check_disk(),
            "memory": check_memory()
        }
    }
