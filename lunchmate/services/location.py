"""User location resolution.

Clients may send coordinates obtained from the browser's geolocation API.
When they are missing the service falls back to a fixed default coordinate
and tells the user so.  Reverse geocoding is mocked: the address label is
derived from the coordinates themselves.
"""

from __future__ import annotations

import logging

from lunchmate.core.config import settings
from lunchmate.core.constants import DEFAULT_ADDRESS_LABEL, LOCATION_FALLBACK_MESSAGE
from lunchmate.models.weather import LocationResult
from lunchmate.services.weather import fetch_weather, store_weather

logger = logging.getLogger(__name__)


def _valid_coordinates(latitude: float | None, longitude: float | None) -> bool:
    if latitude is None or longitude is None:
        return False
    return -90.0 <= latitude <= 90.0 and -180.0 <= longitude <= 180.0


def mock_address(latitude: float, longitude: float) -> str:
    """Fabricate an address label for a coordinate (no real geocoding)."""
    return f"현재 위치 (위도 {latitude:.4f}, 경도 {longitude:.4f}) 부근"


def resolve_location(
    latitude: float | None = None,
    longitude: float | None = None,
) -> LocationResult:
    """Return the coordinates to use, falling back to the default location."""
    if _valid_coordinates(latitude, longitude):
        assert latitude is not None and longitude is not None
        return LocationResult(
            latitude=latitude,
            longitude=longitude,
            address=mock_address(latitude, longitude),
        )

    logger.info(
        "location_fallback",
        extra={"latitude": latitude, "longitude": longitude},
    )
    return LocationResult(
        latitude=settings.DEFAULT_LATITUDE,
        longitude=settings.DEFAULT_LONGITUDE,
        address=DEFAULT_ADDRESS_LABEL,
        is_fallback=True,
        message=LOCATION_FALLBACK_MESSAGE,
    )


async def locate_and_refresh_weather(
    latitude: float | None = None,
    longitude: float | None = None,
) -> LocationResult:
    """Resolve the location and re-query the weather for it.

    A successful reading replaces the cached weather so recommendations
    follow the user's position.
    """
    location = resolve_location(latitude, longitude)
    reading = await fetch_weather(location.latitude, location.longitude)
    if reading.temperature is not None:
        store_weather(reading)
    return location.model_copy(update={"weather": reading})
