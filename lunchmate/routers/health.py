"""Health check endpoint.

Returns service status including scheduler state, the number of open
matching sessions and the cached weather condition.
"""

import logging
from typing import Any

from fastapi import APIRouter
from starlette.responses import JSONResponse

from lunchmate.scheduler.jobs import is_scheduler_running
from lunchmate.services.session import session_count
from lunchmate.services.weather import get_cached_weather

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/health")
async def health_check() -> Any:
    """Return health status.

    The service is ``ok`` while the weather scheduler runs and ``degraded``
    (503) otherwise.  A weather ``error`` reading is reported but does not
    degrade the service.
    """
    cached = get_cached_weather()
    scheduler_status = "running" if is_scheduler_running() else "stopped"

    payload: dict[str, Any] = {
        "status": "ok" if scheduler_status == "running" else "degraded",
        "scheduler": scheduler_status,
        "sessions": session_count(),
        "weather": cached.condition.value if cached is not None else None,
        "weather_fetched_at": cached.fetched_at.isoformat() if cached is not None else None,
    }

    if scheduler_status != "running":
        logger.warning("Health check: scheduler not running")
        return JSONResponse(status_code=503, content=payload)

    return payload
