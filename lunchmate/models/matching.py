"""Request / response models for the matching engine and sessions."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, Field

from lunchmate.core.constants import MAX_GROUP_SIZE, MIN_GROUP_SIZE
from lunchmate.models.candidate import Candidate
from lunchmate.models.enums import (
    AgeGroup,
    EatingStyle,
    Gender,
    LocationTag,
    MatchingMode,
    MatchingStatus,
)


class FilterConditions(BaseModel):
    """User-chosen constraints narrowing the eligible candidate set.

    An empty list, or ``Gender.any`` for gender, accepts every candidate for
    that field.
    """
    age_groups: list[AgeGroup] = []
    gender: Gender = Gender.any
    locations: list[LocationTag] = []
    eating_styles: list[EatingStyle] = []

    @property
    def active_count(self) -> int:
        """Number of checks that actually narrow the roster."""
        return sum(
            (
                bool(self.age_groups),
                self.gender != Gender.any,
                bool(self.locations),
                bool(self.eating_styles),
            )
        )


class FilterResponse(BaseModel):
    """Response for POST /api/v1/matching/filter."""
    candidates: list[Candidate] = []
    total: int = 0
    active_conditions: int = 0


class SessionCreate(BaseModel):
    """Payload for opening a matching session."""
    mode: MatchingMode = MatchingMode.select
    max_group_size: int | None = None


class ModeUpdate(BaseModel):
    """Payload for switching the matching mode."""
    mode: MatchingMode


class GroupSizeUpdate(BaseModel):
    """Payload for changing the group-size cap.

    Values outside the allowed range are clamped, not rejected.
    """
    max_group_size: int


class SessionState(BaseModel):
    """Snapshot of a matching session."""
    id: UUID
    mode: MatchingMode
    status: MatchingStatus
    max_group_size: int = Field(ge=MIN_GROUP_SIZE, le=MAX_GROUP_SIZE)
    conditions: FilterConditions
    active_conditions: int = 0
    candidates: list[Candidate] = []
    selected_ids: list[str] = []
    matched: list[Candidate] = []
    at_capacity: bool = False
    chat_open: bool = False
    created_at: datetime


class SelectionResult(BaseModel):
    """Outcome of an add / remove on the selection set."""
    accepted: bool
    candidate_id: str
    selected_ids: list[str] = []
    status: MatchingStatus
    max_group_size: int
