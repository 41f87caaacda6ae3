"""Pydantic models for roster candidates.

Candidates are immutable for the lifetime of the process; matching never
mutates them.
"""

from pydantic import BaseModel, ConfigDict

from lunchmate.models.enums import (
    AgeGroup,
    CandidateStatus,
    EatingStyle,
    Gender,
    LocationTag,
)


class Candidate(BaseModel):
    """A prospective lunch-matching counterpart."""
    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    role: str
    lunch_time: str
    interests: tuple[str, ...] = ()
    avatar: str = ""
    status: CandidateStatus = CandidateStatus.available
    age_group: AgeGroup
    gender: Gender
    location: LocationTag
    eating_style: EatingStyle
    allergies: tuple[str, ...] = ()
    dislikes: tuple[str, ...] = ()
    diet_type: str = ""


class CandidateOptions(BaseModel):
    """Every value a filter field can take, in display order."""
    age_groups: list[AgeGroup]
    genders: list[Gender]
    locations: list[LocationTag]
    eating_styles: list[EatingStyle]
