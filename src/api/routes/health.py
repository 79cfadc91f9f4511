"""Health check endpoint."""

import logging
from datetime import datetime, timezone
from fastapi import APIRouter, Request, status
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/health", tags=["health"])


@router.get("")
async def health(request: Request):
    """Health check endpoint with word store status."""
    health_status = {
        "status": "healthy",
        "timestamp": datetime.now(timezone.utc).isoformat().replace('+00:00', 'Z'),
        "services": {}
    }

    repo = getattr(request.app.state, "word_repo", None)
    if repo is None:
        health_status["services"]["word_store"] = {
            "status": "unhealthy",
            "message": "Word store not configured or unreachable at startup"
        }
        health_status["status"] = "degraded"
    elif repo.ping():
        health_status["services"]["word_store"] = {
            "status": "healthy",
            "message": "Connection successful"
        }
    else:
        logger.warning("Word store health check failed", extra={"store": type(repo).__name__})
        health_status["services"]["word_store"] = {
            "status": "unhealthy",
            "message": "Ping failed"
        }
        health_status["status"] = "degraded"

    status_code = (
        status.HTTP_200_OK if health_status["status"] == "healthy"
        else status.HTTP_503_SERVICE_UNAVAILABLE
    )
    return JSONResponse(content=health_status, status_code=status_code)
