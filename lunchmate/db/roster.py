"""In-memory mock roster.

Provides ``get_roster()`` which returns the process-wide, read-only list of
colleagues available for lunch matching.
"""

from lunchmate.models.candidate import Candidate
from lunchmate.models.enums import AgeGroup, EatingStyle, Gender, LocationTag

_ROSTER: tuple[Candidate, ...] = (
    Candidate(
        id="1",
        name="오일남",
        role="개발팀",
        lunch_time="12:00-13:00",
        interests=("이탈리안", "샐러드/건강식", "카페"),
        avatar="👨‍💻",
        age_group=AgeGroup.twenties,
        gender=Gender.male,
        location=LocationTag.gangnam,
        eating_style=EatingStyle.quiet,
        allergies=("견과류",),
        dislikes=("매운음식",),
        diet_type="건강식 선호",
    ),
    Candidate(
        id="2",
        name="오이남",
        role="디자인팀",
        lunch_time="12:30-13:30",
        interests=("일식/라멘", "카페", "트렌디"),
        avatar="👨‍🎨",
        age_group=AgeGroup.thirties,
        gender=Gender.male,
        location=LocationTag.within_3km,
        eating_style=EatingStyle.chatty,
        dislikes=("생선",),
        diet_type="아무거나 잘 먹음",
    ),
    Candidate(
        id="3",
        name="오삼남",
        role="마케팅팀",
        lunch_time="11:30-12:30",
        interests=("한정식", "도시락/간편식", "혼밥"),
        avatar="👨‍💼",
        age_group=AgeGroup.forties_plus,
        gender=Gender.male,
        location=LocationTag.same_building,
        eating_style=EatingStyle.quick,
        allergies=("갑각류",),
        diet_type="단백질 위주",
    ),
    Candidate(
        id="4",
        name="오사남",
        role="영업팀",
        lunch_time="12:00-13:00",
        interests=("샐러드/건강식", "한정식", "건강식"),
        avatar="👨‍🔧",
        age_group=AgeGroup.thirties,
        gender=Gender.male,
        location=LocationTag.walk_10min,
        eating_style=EatingStyle.foodie,
        dislikes=("매운음식",),
        diet_type="다이어트 중",
    ),
    Candidate(
        id="5",
        name="오일녀",
        role="기획팀",
        lunch_time="12:15-13:15",
        interests=("베트남음식", "샌드위치", "디저트"),
        avatar="👩‍💼",
        age_group=AgeGroup.twenties,
        gender=Gender.female,
        location=LocationTag.gangnam,
        eating_style=EatingStyle.chatty,
        allergies=("유제품",),
        dislikes=("내장류",),
        diet_type="채식주의자",
    ),
    Candidate(
        id="6",
        name="오이녀",
        role="인사팀",
        lunch_time="11:45-12:45",
        interests=("중식", "분식", "커피"),
        avatar="👩‍💻",
        age_group=AgeGroup.thirties,
        gender=Gender.female,
        location=LocationTag.within_3km,
        eating_style=EatingStyle.quiet,
        dislikes=("향신료",),
        diet_type="아무거나 잘 먹음",
    ),
    Candidate(
        id="7",
        name="오삼녀",
        role="재무팀",
        lunch_time="12:45-13:45",
        interests=("양식", "샐러드/건강식", "주스"),
        avatar="👩‍🎨",
        age_group=AgeGroup.twenties,
        gender=Gender.female,
        location=LocationTag.same_building,
        eating_style=EatingStyle.foodie,
        allergies=("계란",),
        diet_type="건강식 선호",
    ),
    Candidate(
        id="8",
        name="오사녀",
        role="고객지원팀",
        lunch_time="12:30-13:30",
        interests=("한식", "국밥", "차"),
        avatar="👩‍🔧",
        age_group=AgeGroup.forties_plus,
        gender=Gender.female,
        location=LocationTag.walk_10min,
        eating_style=EatingStyle.quick,
        allergies=("대두",),
        dislikes=("파",),
        diet_type="단백질 위주",
    ),
)


def get_roster() -> list[Candidate]:
    """Return the full roster in display order.

    A fresh list is returned on every call; the candidates themselves are
    frozen and shared.
    """
    return list(_ROSTER)


def get_candidate(candidate_id: str) -> Candidate | None:
    """Look up a single roster entry by id."""
    for candidate in _ROSTER:
        if candidate.id == candidate_id:
            return candidate
    return None
