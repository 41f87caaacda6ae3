"""Enum types for candidate attributes, matching state and weather."""

from enum import Enum


class CandidateStatus(str, Enum):
    """Availability of a colleague for lunch."""
    available = "available"
    matched = "matched"
    eating = "eating"


class AgeGroup(str, Enum):
    """Age bucket shown on a candidate card."""
    twenties = "20대"
    thirties = "30대"
    forties_plus = "40대 이상"


class Gender(str, Enum):
    """Gender tag; ``any`` is the filter sentinel and never set on a candidate."""
    male = "남성"
    female = "여성"
    any = "상관없음"


class LocationTag(str, Enum):
    """Location-proximity bucket."""
    gangnam = "강남 근처"
    within_3km = "내 위치 반경 3km"
    same_building = "같은 건물"
    walk_10min = "도보 10분 이내"


class EatingStyle(str, Enum):
    """Preferred lunch-table manner."""
    chatty = "말 많은 사람"
    quiet = "조용한 식사 선호"
    foodie = "맛집 탐방 좋아함"
    quick = "빠른 식사 선호"


class MatchingMode(str, Enum):
    """How a match is produced."""
    solo = "solo"
    select = "select"
    random = "random"


class MatchingStatus(str, Enum):
    """Derived matching state of a session."""
    idle = "idle"
    searching = "searching"
    matched = "matched"


class WeatherCondition(str, Enum):
    """Condition label derived from a WMO weather code."""
    clear = "clear"
    hot = "hot"
    foggy = "foggy"
    rain = "rain"
    snow = "snow"
    cloudy = "cloudy"
    error = "error"


class MessageType(str, Enum):
    """Kind of group chat message."""
    text = "text"
    location = "location"
    restaurant = "restaurant"
    system = "system"


class RecommendationCategory(str, Enum):
    """Restaurant recommendation tabs."""
    today = "today"
    weather = "weather"
    korean = "korean"
    international = "international"
    healthy = "healthy"
    quick = "quick"
