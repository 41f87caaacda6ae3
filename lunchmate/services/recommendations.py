"""Restaurant recommendation service.

Serves the mock restaurant catalogue grouped by tab.  Only the ``weather``
tab and the reason text on today's salad pick depend on live data.
"""

from __future__ import annotations

from lunchmate.core.config import settings
from lunchmate.db.restaurants import COLD_WEATHER, HOT_WEATHER, LUNCHBOX, TODAY
from lunchmate.models.enums import RecommendationCategory, WeatherCondition
from lunchmate.models.recommendation import RecommendationResponse, Restaurant
from lunchmate.models.weather import WeatherReading


def is_hot(weather: WeatherReading) -> bool:
    """Return True when cold dishes should be recommended."""
    if weather.condition == WeatherCondition.hot:
        return True
    return (
        weather.temperature is not None
        and weather.temperature > settings.WEATHER_HOT_THRESHOLD
    )


def _today(weather: WeatherReading) -> list[Restaurant]:
    picks = list(TODAY)
    if weather.temperature is not None:
        reason = (
            f"{weather.temperature:g}°C의 {weather.label} 날씨에 "
            "시원하고 건강한 샐러드가 좋겠어요!"
        )
    else:
        reason = "가볍고 건강한 샐러드로 점심을 채워보세요!"
    picks[0] = picks[0].model_copy(update={"reason": reason})
    return picks


def recommend(
    category: RecommendationCategory,
    weather: WeatherReading,
) -> list[Restaurant]:
    """Return the restaurants listed under *category*."""
    today = _today(weather)

    if category == RecommendationCategory.weather:
        return list(HOT_WEATHER if is_hot(weather) else COLD_WEATHER)
    if category == RecommendationCategory.korean:
        return [r for r in today if "한" in r.category] + list(LUNCHBOX)
    if category == RecommendationCategory.international:
        return [r for r in today if "이탈" in r.category or "중" in r.category]
    if category == RecommendationCategory.healthy:
        return [r for r in today if "샐러드" in r.category or "건강식" in r.tags]
    if category == RecommendationCategory.quick:
        quick = [r for r in today if r.wait_time == "즉시" or "간편" in r.tags]
        return quick + list(LUNCHBOX)
    return today


def build_recommendations(
    category: RecommendationCategory,
    weather: WeatherReading,
) -> RecommendationResponse:
    return RecommendationResponse(
        category=category,
        restaurants=recommend(category, weather),
        temperature=weather.temperature,
        condition=weather.condition,
    )
