"""Weather lookup service (Open-Meteo).

Fetches the current temperature and WMO weather code for a coordinate and
maps the code onto a small set of condition labels used to bias restaurant
recommendations.  Lookup failures never propagate: they produce a reading
whose condition is ``error``.

The most recent reading for the default location is cached at module level.
The scheduler refreshes it from a background thread, hence the lock.
"""

from __future__ import annotations

import asyncio
import logging
import threading
from datetime import datetime, timezone
from typing import Any

import httpx

from lunchmate.core.config import settings
from lunchmate.core.constants import (
    CLEAR_CODES,
    CLOUDY_CODES,
    FOG_CODES,
    RAIN_CODES,
    SNOW_CODES,
    WEATHER_DESCRIPTIONS_KO,
    WEATHER_LABELS_KO,
)
from lunchmate.models.enums import WeatherCondition
from lunchmate.models.weather import WeatherReading

logger = logging.getLogger(__name__)

_cache_lock = threading.Lock()
_latest: WeatherReading | None = None


# ---------------------------------------------------------------------------
# Code mapping
# ---------------------------------------------------------------------------

def classify_weather(code: int, temperature: float | None = None) -> WeatherCondition:
    """Map a WMO weather code to a condition label.

    A clear sky above ``settings.WEATHER_HOT_THRESHOLD`` is reported as hot.
    Unknown codes fall back to cloudy.
    """
    if code in CLEAR_CODES:
        if temperature is not None and temperature > settings.WEATHER_HOT_THRESHOLD:
            return WeatherCondition.hot
        return WeatherCondition.clear
    if code in FOG_CODES:
        return WeatherCondition.foggy
    if code in RAIN_CODES:
        return WeatherCondition.rain
    if code in SNOW_CODES:
        return WeatherCondition.snow
    if code in CLOUDY_CODES:
        return WeatherCondition.cloudy
    return WeatherCondition.cloudy


def _build_reading(
    latitude: float,
    longitude: float,
    condition: WeatherCondition,
    temperature: float | None = None,
    weather_code: int | None = None,
) -> WeatherReading:
    return WeatherReading(
        latitude=latitude,
        longitude=longitude,
        temperature=temperature,
        weather_code=weather_code,
        condition=condition,
        label=WEATHER_LABELS_KO[condition.value],
        description=WEATHER_DESCRIPTIONS_KO[condition.value],
        fetched_at=datetime.now(timezone.utc),
    )


def error_reading(latitude: float, longitude: float) -> WeatherReading:
    """Return the degraded reading used when the lookup fails."""
    return _build_reading(latitude, longitude, WeatherCondition.error)


def _parse_response(
    data: dict[str, Any],
    latitude: float,
    longitude: float,
) -> WeatherReading:
    """Turn an Open-Meteo ``current_weather`` body into a reading.

    Raises ``KeyError`` / ``TypeError`` / ``ValueError`` on a malformed body.
    """
    current = data["current_weather"]
    temperature = float(current["temperature"])
    code = int(current["weathercode"])
    return _build_reading(
        latitude,
        longitude,
        classify_weather(code, temperature),
        temperature=temperature,
        weather_code=code,
    )


# ---------------------------------------------------------------------------
# Fetching
# ---------------------------------------------------------------------------

async def fetch_weather(latitude: float, longitude: float) -> WeatherReading:
    """Query the weather API for (*latitude*, *longitude*).

    Never raises for network or payload problems; returns an ``error``
    reading instead.
    """
    params = {
        "latitude": latitude,
        "longitude": longitude,
        "current_weather": "true",
    }
    try:
        async with httpx.AsyncClient(timeout=settings.WEATHER_TIMEOUT_SECONDS) as client:
            response = await client.get(settings.WEATHER_API_URL, params=params)
            response.raise_for_status()
            reading = _parse_response(response.json(), latitude, longitude)
    except (httpx.HTTPError, KeyError, TypeError, ValueError) as exc:
        logger.warning(
            "weather_fetch_failed",
            extra={
                "latitude": latitude,
                "longitude": longitude,
                "error_message": str(exc),
            },
            exc_info=True,
        )
        return error_reading(latitude, longitude)

    logger.info(
        "weather_fetched",
        extra={
            "latitude": latitude,
            "longitude": longitude,
            "temperature": reading.temperature,
            "condition": reading.condition.value,
        },
    )
    return reading


# ---------------------------------------------------------------------------
# Cache
# ---------------------------------------------------------------------------

def get_cached_weather() -> WeatherReading | None:
    """Return the last reading stored by ``store_weather``, if any."""
    with _cache_lock:
        return _latest


def store_weather(reading: WeatherReading) -> None:
    global _latest
    with _cache_lock:
        _latest = reading


def clear_cached_weather() -> None:
    """Forget the cached reading."""
    global _latest
    with _cache_lock:
        _latest = None


async def current_weather() -> WeatherReading:
    """Return the cached reading, fetching the default location if empty."""
    cached = get_cached_weather()
    if cached is not None:
        return cached
    reading = await fetch_weather(settings.DEFAULT_LATITUDE, settings.DEFAULT_LONGITUDE)
    store_weather(reading)
    return reading


def refresh_default_weather() -> WeatherReading:
    """Fetch and cache the default location's weather synchronously.

    Called by the scheduler from a worker thread with no running event loop.
    """
    reading = asyncio.run(
        fetch_weather(settings.DEFAULT_LATITUDE, settings.DEFAULT_LONGITUDE)
    )
    store_weather(reading)
    return reading
