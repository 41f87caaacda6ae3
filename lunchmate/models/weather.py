"""Models for weather readings and resolved user location."""

from datetime import datetime

from pydantic import BaseModel, Field

from lunchmate.models.enums import WeatherCondition


class WeatherReading(BaseModel):
    """Current weather at a coordinate.

    ``temperature`` and ``weather_code`` are ``None`` when the lookup failed
    and ``condition`` is ``error``.
    """
    latitude: float
    longitude: float
    temperature: float | None = None
    weather_code: int | None = None
    condition: WeatherCondition
    label: str
    description: str
    fetched_at: datetime


class LocationRequest(BaseModel):
    """Optional client coordinates; omitted values trigger the fallback."""
    latitude: float | None = Field(default=None, ge=-90.0, le=90.0)
    longitude: float | None = Field(default=None, ge=-180.0, le=180.0)


class LocationResult(BaseModel):
    """Coordinates the app will use plus a display label."""
    latitude: float
    longitude: float
    address: str
    is_fallback: bool = False
    message: str | None = None
    weather: WeatherReading | None = None
