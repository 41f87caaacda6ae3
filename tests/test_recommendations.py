"""Unit tests for weather-aware restaurant recommendations."""

from __future__ import annotations

from datetime import datetime, timezone

import pytest

from lunchmate.models.enums import RecommendationCategory, WeatherCondition
from lunchmate.models.weather import WeatherReading


def _reading(
    condition: WeatherCondition = WeatherCondition.clear,
    temperature: float | None = 20.0,
    label: str = "맑음",
) -> WeatherReading:
    return WeatherReading(
        latitude=37.5172,
        longitude=127.0473,
        temperature=temperature,
        weather_code=0,
        condition=condition,
        label=label,
        description="",
        fetched_at=datetime.now(timezone.utc),
    )


class TestIsHot:
    """Hot means cold dishes are recommended."""

    def test_hot_condition(self) -> None:
        from lunchmate.services.recommendations import is_hot

        assert is_hot(_reading(WeatherCondition.hot, 30.0))

    def test_temperature_above_threshold(self) -> None:
        from lunchmate.services.recommendations import is_hot

        assert is_hot(_reading(WeatherCondition.cloudy, 26.0))
        assert not is_hot(_reading(WeatherCondition.cloudy, 25.0))

    def test_missing_temperature_is_not_hot(self) -> None:
        from lunchmate.services.recommendations import is_hot

        assert not is_hot(_reading(WeatherCondition.error, None))


class TestRecommend:
    """Category tabs over the restaurant catalogue."""

    def test_weather_tab_hot(self) -> None:
        from lunchmate.services.recommendations import recommend

        result = recommend(RecommendationCategory.weather, _reading(WeatherCondition.hot, 31.0))
        assert [r.id for r in result] == ["4", "5"]

    def test_weather_tab_cold(self) -> None:
        from lunchmate.services.recommendations import recommend

        result = recommend(RecommendationCategory.weather, _reading(WeatherCondition.snow, -2.0))
        assert [r.id for r in result] == ["6"]

    @pytest.mark.parametrize(
        "category,expected",
        [
            (RecommendationCategory.today, ["1", "2", "3"]),
            (RecommendationCategory.korean, ["3", "7"]),
            (RecommendationCategory.international, ["2"]),
            (RecommendationCategory.healthy, ["1"]),
            (RecommendationCategory.quick, ["3", "7"]),
        ],
    )
    def test_static_tabs(self, category: RecommendationCategory, expected: list[str]) -> None:
        from lunchmate.services.recommendations import recommend

        assert [r.id for r in recommend(category, _reading())] == expected

    def test_today_reason_mentions_weather(self) -> None:
        from lunchmate.services.recommendations import recommend

        result = recommend(RecommendationCategory.today, _reading(temperature=23.5))
        assert result[0].reason == "23.5°C의 맑음 날씨에 시원하고 건강한 샐러드가 좋겠어요!"

    def test_today_reason_without_temperature(self) -> None:
        from lunchmate.db.restaurants import TODAY
        from lunchmate.services.recommendations import recommend

        result = recommend(
            RecommendationCategory.today,
            _reading(WeatherCondition.error, None, "날씨 정보 없음"),
        )
        assert result[0].reason
        assert "°C" not in result[0].reason
        assert TODAY[0].reason != result[0].reason

    def test_build_response(self) -> None:
        from lunchmate.services.recommendations import build_recommendations

        response = build_recommendations(RecommendationCategory.healthy, _reading())
        assert response.category == RecommendationCategory.healthy
        assert response.temperature == 20.0
        assert response.condition == WeatherCondition.clear
        assert len(response.restaurants) == 1
