"""FastAPI application entry point.

Configures CORS, logging, lifespan events (including APScheduler and
matching-session teardown), and router registration.
"""

import logging
from contextlib import asynccontextmanager
from collections.abc import AsyncIterator

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from lunchmate.core.config import settings
from lunchmate.core.logging import setup_logging
from lunchmate.routers import candidates, chat, health, matching, recommendations, weather
from lunchmate.scheduler.jobs import shutdown_scheduler, start_scheduler
from lunchmate.services.session import close_all_sessions

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(application: FastAPI) -> AsyncIterator[None]:
    """Application lifespan: startup and shutdown hooks.

    Starts the weather scheduler on startup.  On exit every open session is
    closed, cancelling its pending draws and chat replies.
    """
    setup_logging()
    logger.info("Application starting up")
    start_scheduler()
    yield
    closed = close_all_sessions()
    shutdown_scheduler()
    logger.info("Application shutting down", extra={"sessions_closed": closed})


app = FastAPI(
    title="Lunchmate API",
    description="Lunch buddy matching: candidate filtering, group selection and random matching",
    version="0.1.0",
    lifespan=lifespan,
)

# ---------------------------------------------------------------------------
# CORS Configuration
# ---------------------------------------------------------------------------
_raw_origins = settings.ALLOWED_ORIGINS.strip()
if _raw_origins == "*":
    _allowed_origins: list[str] = ["*"]
else:
    _allowed_origins = [o.strip() for o in _raw_origins.split(",") if o.strip()]

app.add_middleware(
    CORSMiddleware,
    allow_origins=_allowed_origins,
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"],
)

# ---------------------------------------------------------------------------
# Router Registration
# ---------------------------------------------------------------------------
app.include_router(health.router, tags=["Health"])
app.include_router(candidates.router, prefix="/api/v1/candidates", tags=["Candidates"])
app.include_router(matching.router, prefix="/api/v1/matching", tags=["Matching"])
app.include_router(chat.router, prefix="/api/v1/matching", tags=["Chat"])
app.include_router(weather.router, prefix="/api/v1", tags=["Weather"])
app.include_router(
    recommendations.router, prefix="/api/v1/recommendations", tags=["Recommendations"]
)
