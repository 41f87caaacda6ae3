"""APScheduler job definitions and scheduler management.

Initializes a BackgroundScheduler with an IntervalTrigger that refreshes the
cached weather for the default location, and provides start/shutdown/status
helpers for the FastAPI lifespan.
"""

from __future__ import annotations

import logging
from datetime import datetime, timezone

from apscheduler.schedulers.background import BackgroundScheduler
from apscheduler.triggers.interval import IntervalTrigger

from lunchmate.core.config import settings
from lunchmate.services.weather import refresh_default_weather

logger = logging.getLogger(__name__)

# Module-level scheduler instance (singleton)
scheduler = BackgroundScheduler()


def _weather_job() -> None:
    """Wrapper that APScheduler calls on each interval tick."""
    reading = refresh_default_weather()
    logger.info(
        "weather_refreshed",
        extra={
            "condition": reading.condition.value,
            "temperature": reading.temperature,
        },
    )


def start_scheduler() -> None:
    """Configure and start the background scheduler.

    The first refresh runs immediately; later ones follow
    WEATHER_POLL_INTERVAL_MINUTES from settings.
    """
    scheduler.add_job(
        _weather_job,
        IntervalTrigger(minutes=settings.WEATHER_POLL_INTERVAL_MINUTES),
        id="weather_refresh",
        replace_existing=True,
        next_run_time=datetime.now(timezone.utc),
    )
    scheduler.start()
    logger.info(
        "scheduler_started",
        extra={
            "interval_minutes": settings.WEATHER_POLL_INTERVAL_MINUTES,
        },
    )


def shutdown_scheduler() -> None:
    """Shutdown the scheduler gracefully.

    Called during FastAPI lifespan cleanup.
    """
    if scheduler.running:
        scheduler.shutdown(wait=False)
        logger.info("scheduler_stopped")


def is_scheduler_running() -> bool:
    """Check if the scheduler is currently running."""
    return scheduler.running
