"""Weather and location endpoints.

GET  /weather            -- live weather for an explicit coordinate.
GET  /weather/current    -- cached weather for the active location.
POST /location           -- resolve the user's position and refresh weather.
"""

from __future__ import annotations

import logging

from fastapi import APIRouter, Query

from lunchmate.models.weather import LocationRequest, LocationResult, WeatherReading
from lunchmate.services.location import locate_and_refresh_weather
from lunchmate.services.weather import current_weather, fetch_weather

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/weather", response_model=WeatherReading)
async def weather_at(
    lat: float = Query(..., ge=-90.0, le=90.0),
    lng: float = Query(..., ge=-180.0, le=180.0),
) -> WeatherReading:
    """Query the weather provider for a coordinate.

    Provider failures come back as an ``error`` reading, not an HTTP error.
    """
    return await fetch_weather(lat, lng)


@router.get("/weather/current", response_model=WeatherReading)
async def weather_current() -> WeatherReading:
    return await current_weather()


@router.post("/location", response_model=LocationResult)
async def update_location(body: LocationRequest | None = None) -> LocationResult:
    """Resolve the user's position, falling back to the default location."""
    body = body or LocationRequest()
    result = await locate_and_refresh_weather(body.latitude, body.longitude)
    logger.info(
        "location_resolved",
        extra={
            "is_fallback": result.is_fallback,
            "condition": result.weather.condition.value if result.weather else None,
        },
    )
    return result
