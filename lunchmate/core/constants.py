"""Application constants.

Contains group-size bounds, weather code tables, and the canned texts used by
the group chat simulation.
"""

# ---------------------------------------------------------------------------
# Group size bounds
# ---------------------------------------------------------------------------
MIN_GROUP_SIZE: int = 1
MAX_GROUP_SIZE: int = 8

# ---------------------------------------------------------------------------
# WMO weather codes (Open-Meteo ``weathercode``)
# Anything not listed here is reported as cloudy.
# ---------------------------------------------------------------------------
CLEAR_CODES: frozenset[int] = frozenset({0})
CLOUDY_CODES: frozenset[int] = frozenset({1, 2, 3})
FOG_CODES: frozenset[int] = frozenset({45, 48})
RAIN_CODES: frozenset[int] = frozenset(
    {51, 53, 55, 56, 57, 61, 63, 65, 66, 67, 80, 81, 82, 95, 96, 99}
)
SNOW_CODES: frozenset[int] = frozenset({71, 73, 75, 77, 85, 86})

# ---------------------------------------------------------------------------
# Korean labels for weather conditions (display in the frontend)
# ---------------------------------------------------------------------------
WEATHER_LABELS_KO: dict[str, str] = {
    "clear": "맑음",
    "hot": "더움",
    "foggy": "안개",
    "rain": "비",
    "snow": "눈",
    "cloudy": "흐림",
    "error": "날씨 정보 없음",
}

WEATHER_DESCRIPTIONS_KO: dict[str, str] = {
    "clear": "화창한 날씨예요. 가볍게 걸어서 나가 보세요!",
    "hot": "더운 날씨예요. 시원한 메뉴를 추천해요!",
    "foggy": "안개가 꼈어요. 가까운 식당이 좋겠어요.",
    "rain": "비가 와요. 우산 챙기시고 따뜻한 국물 어때요?",
    "snow": "눈이 와요. 미끄럼 조심하세요!",
    "cloudy": "흐린 날씨예요. 든든한 한 끼 어때요?",
    "error": "날씨 정보를 불러오지 못했어요.",
}

# ---------------------------------------------------------------------------
# Location fallback
# ---------------------------------------------------------------------------
DEFAULT_ADDRESS_LABEL: str = "서울 강남구 강남역 일대"
LOCATION_FALLBACK_MESSAGE: str = (
    "위치 정보를 가져올 수 없어 기본 위치(강남역)를 사용합니다."
)

# ---------------------------------------------------------------------------
# Group chat simulation
# ---------------------------------------------------------------------------
CHAT_SYSTEM_NAME: str = "시스템"
CHAT_SYSTEM_AVATAR: str = "🤖"
CHAT_SELF_ID: str = "me"
CHAT_SELF_NAME: str = "나"
CHAT_SELF_AVATAR: str = "👤"

CANNED_RESPONSES: tuple[str, ...] = (
    "좋아요! 어디로 갈까요?",
    "저도 괜찮아요 😊",
    "맛있는 곳 추천해주세요!",
    "빨리 가요 배고파요 😋",
)

SUGGESTED_RESTAURANTS: tuple[str, ...] = (
    "샐러드야",
    "놀링파스타",
    "푸근한한식집",
    "라멘이지예",
)
