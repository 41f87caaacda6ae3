"""In-memory mock restaurant catalogue used by the recommendation service."""

from lunchmate.models.enums import RecommendationCategory
from lunchmate.models.recommendation import CategoryInfo, Restaurant

CATEGORIES: tuple[CategoryInfo, ...] = (
    CategoryInfo(
        id=RecommendationCategory.today,
        name="오늘의 추천",
        description="날씨와 상황을 고려한 맞춤 추천",
    ),
    CategoryInfo(
        id=RecommendationCategory.weather,
        name="날씨별",
        description="현재 날씨에 어울리는 메뉴",
    ),
    CategoryInfo(
        id=RecommendationCategory.korean,
        name="한식",
        description="든든한 한식 메뉴",
    ),
    CategoryInfo(
        id=RecommendationCategory.international,
        name="양식/중식",
        description="이탈리안, 중식 등",
    ),
    CategoryInfo(
        id=RecommendationCategory.healthy,
        name="건강식",
        description="샐러드, 저칼로리 메뉴",
    ),
    CategoryInfo(
        id=RecommendationCategory.quick,
        name="간편식",
        description="빠르고 간단한 식사",
    ),
)

# The salad entry's ``reason`` is filled in with the live weather.
TODAY: tuple[Restaurant, ...] = (
    Restaurant(
        id="1",
        name="샐러드야 강남점",
        category="샐러드/건강식",
        rating=4.6,
        distance="도보 3분",
        wait_time="5분",
        price_range="8,000-12,000원",
        special_menu="시저 샐러드, 그릴드 치킨 샐러드",
        image="🥗",
        review_count=234,
        tags=["건강식", "다이어트", "신선한"],
    ),
    Restaurant(
        id="2",
        name="놀링파스타",
        category="이탈리안",
        rating=4.4,
        distance="도보 5분",
        wait_time="10분",
        price_range="12,000-18,000원",
        special_menu="알리오올리오, 까르보나라",
        image="🍝",
        review_count=189,
        tags=["이탈리안", "파스타", "분위기"],
        allergy_warning=["유제품", "계란"],
        reason="동료들과 함께 먹기 좋은 분위기 있는 파스타집이에요!",
    ),
    Restaurant(
        id="3",
        name="푸근한한식집",
        category="한정식",
        rating=4.7,
        distance="도보 2분",
        wait_time="즉시",
        price_range="9,000-15,000원",
        special_menu="김치찌개, 된장찌개 정식",
        image="🍲",
        review_count=456,
        tags=["한식", "든든한", "집밥"],
        reason="바쁜 하루에 따뜻하고 든든한 한식으로 에너지 충전하세요!",
    ),
)

HOT_WEATHER: tuple[Restaurant, ...] = (
    Restaurant(
        id="4",
        name="시원한냉면집",
        category="냉면/국수",
        rating=4.5,
        distance="도보 4분",
        wait_time="7분",
        price_range="8,000-12,000원",
        special_menu="물냉면, 비빔냉면",
        image="🍜",
        review_count=312,
        tags=["시원한", "냉면", "여름"],
        reason="더운 날씨에 시원한 냉면으로 더위를 식혀보세요!",
    ),
    Restaurant(
        id="5",
        name="아이스크림카페",
        category="디저트",
        rating=4.3,
        distance="도보 6분",
        wait_time="3분",
        price_range="5,000-8,000원",
        special_menu="젤라또, 빙수",
        image="🍦",
        review_count=98,
        tags=["시원한", "디저트", "여름"],
        reason="점심 후 시원한 디저트로 마무리해보세요!",
    ),
)

COLD_WEATHER: tuple[Restaurant, ...] = (
    Restaurant(
        id="6",
        name="따뜻한국밥집",
        category="국밥",
        rating=4.6,
        distance="도보 3분",
        wait_time="5분",
        price_range="7,000-10,000원",
        special_menu="돼지국밥, 순대국밥",
        image="🍲",
        review_count=278,
        tags=["따뜻한", "국밥", "든든한"],
        reason="쌀쌀한 날씨에 따뜻한 국밥으로 몸을 데워보세요!",
    ),
)

LUNCHBOX: tuple[Restaurant, ...] = (
    Restaurant(
        id="7",
        name="한솥도시락",
        category="도시락",
        rating=4.2,
        distance="도보 2분",
        wait_time="즉시",
        price_range="4,500-7,000원",
        special_menu="제육볶음, 불고기",
        image="🍱",
        review_count=534,
        tags=["한식", "도시락", "간편"],
        reason="바쁜 직장인을 위한 든든한 한식 도시락!",
    ),
)
