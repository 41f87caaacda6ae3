"""Roster endpoints.

GET /            -- the full mock roster.
GET /options     -- every value each filter field accepts.
GET /{id}        -- a single candidate.
"""

from __future__ import annotations

from fastapi import APIRouter, HTTPException

from lunchmate.db.roster import get_candidate, get_roster
from lunchmate.models.candidate import Candidate, CandidateOptions
from lunchmate.models.enums import AgeGroup, EatingStyle, Gender, LocationTag

router = APIRouter()


@router.get("", response_model=list[Candidate])
async def list_candidates() -> list[Candidate]:
    """Return the full roster, unfiltered."""
    return get_roster()


@router.get("/options", response_model=CandidateOptions)
async def candidate_options() -> CandidateOptions:
    """Return the option sets shown in the matching-conditions dialog."""
    return CandidateOptions(
        age_groups=list(AgeGroup),
        genders=list(Gender),
        locations=list(LocationTag),
        eating_styles=list(EatingStyle),
    )


@router.get("/{candidate_id}", response_model=Candidate)
async def candidate_detail(candidate_id: str) -> Candidate:
    candidate = get_candidate(candidate_id)
    if candidate is None:
        raise HTTPException(status_code=404, detail=f"Candidate not found: {candidate_id}")
    return candidate
