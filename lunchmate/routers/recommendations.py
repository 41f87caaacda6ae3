"""Restaurant recommendation endpoints.

GET /             -- restaurants for a category tab (default ``today``).
GET /categories   -- the tab list.
"""

from __future__ import annotations

from fastapi import APIRouter, Query

from lunchmate.db.restaurants import CATEGORIES
from lunchmate.models.enums import RecommendationCategory
from lunchmate.models.recommendation import CategoryInfo, RecommendationResponse
from lunchmate.services.recommendations import build_recommendations
from lunchmate.services.weather import current_weather

router = APIRouter()


@router.get("", response_model=RecommendationResponse)
async def list_recommendations(
    category: RecommendationCategory = Query(default=RecommendationCategory.today),
) -> RecommendationResponse:
    """Return the restaurants for *category* given the cached weather."""
    weather = await current_weather()
    return build_recommendations(category, weather)


@router.get("/categories", response_model=list[CategoryInfo])
async def list_categories() -> list[CategoryInfo]:
    return list(CATEGORIES)
