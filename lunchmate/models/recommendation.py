"""Response models for restaurant recommendations."""

from pydantic import BaseModel

from lunchmate.models.enums import RecommendationCategory, WeatherCondition


class Restaurant(BaseModel):
    """A recommended restaurant."""
    id: str
    name: str
    category: str
    rating: float
    distance: str
    wait_time: str
    price_range: str
    special_menu: str
    image: str = ""
    review_count: int = 0
    tags: list[str] = []
    allergy_warning: list[str] = []
    reason: str | None = None


class CategoryInfo(BaseModel):
    """A recommendation tab."""
    id: RecommendationCategory
    name: str
    description: str


class RecommendationResponse(BaseModel):
    """Full response for GET /api/v1/recommendations."""
    category: RecommendationCategory
    restaurants: list[Restaurant] = []
    temperature: float | None = None
    condition: WeatherCondition
