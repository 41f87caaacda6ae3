"""Matching endpoints.

POST /filter                              -- stateless filter over the roster.
POST /sessions                            -- open a matching session.
GET/DELETE /sessions/{id}                 -- inspect / close it.
PUT /sessions/{id}/mode                   -- solo | select | random.
PUT/DELETE /sessions/{id}/conditions      -- apply / reset filter conditions.
PUT /sessions/{id}/group-size             -- change the cap (clamped).
POST/DELETE /sessions/{id}/selection/{c}  -- add / remove a lunch mate.
POST /sessions/{id}/cancel                -- drop the current match.
POST /sessions/{id}/random                -- schedule a random draw (202).
"""

from __future__ import annotations

import logging
from uuid import UUID

from fastapi import APIRouter, HTTPException

from lunchmate.core.exceptions import (
    CandidateNotFoundError,
    InvalidModeError,
    MatchInProgressError,
    SessionNotFoundError,
)
from lunchmate.db.roster import get_roster
from lunchmate.models.matching import (
    FilterConditions,
    FilterResponse,
    GroupSizeUpdate,
    ModeUpdate,
    SelectionResult,
    SessionCreate,
    SessionState,
)
from lunchmate.services.matching import filter_candidates
from lunchmate.services.session import (
    MatchingSession,
    close_session,
    create_session,
    get_session,
)

logger = logging.getLogger(__name__)

router = APIRouter()


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _session_or_404(session_id: UUID) -> MatchingSession:
    try:
        return get_session(session_id)
    except SessionNotFoundError as exc:
        logger.warning("session_not_found", extra={"session_id": str(session_id)})
        raise HTTPException(
            status_code=404, detail=f"Session not found: {session_id}"
        ) from exc


def _selection_result(
    session: MatchingSession, candidate_id: str, accepted: bool
) -> SelectionResult:
    return SelectionResult(
        accepted=accepted,
        candidate_id=candidate_id,
        selected_ids=session.selection.ids,
        status=session.status,
        max_group_size=session.selection.max_group_size,
    )


# ---------------------------------------------------------------------------
# Stateless filter
# ---------------------------------------------------------------------------

@router.post("/filter", response_model=FilterResponse)
async def filter_roster(conditions: FilterConditions) -> FilterResponse:
    """Return the roster entries matching *conditions*."""
    candidates = filter_candidates(get_roster(), conditions)
    return FilterResponse(
        candidates=candidates,
        total=len(candidates),
        active_conditions=conditions.active_count,
    )


# ---------------------------------------------------------------------------
# Session lifecycle
# ---------------------------------------------------------------------------

@router.post("/sessions", response_model=SessionState, status_code=201)
async def open_session(body: SessionCreate | None = None) -> SessionState:
    body = body or SessionCreate()
    session = create_session(mode=body.mode, max_group_size=body.max_group_size)
    return session.snapshot()


@router.get("/sessions/{session_id}", response_model=SessionState)
async def session_detail(session_id: UUID) -> SessionState:
    return _session_or_404(session_id).snapshot()


@router.delete("/sessions/{session_id}", status_code=204)
async def delete_session(session_id: UUID) -> None:
    try:
        close_session(session_id)
    except SessionNotFoundError as exc:
        logger.warning("session_not_found", extra={"session_id": str(session_id)})
        raise HTTPException(
            status_code=404, detail=f"Session not found: {session_id}"
        ) from exc


@router.put("/sessions/{session_id}/mode", response_model=SessionState)
async def update_mode(session_id: UUID, body: ModeUpdate) -> SessionState:
    session = _session_or_404(session_id)
    session.set_mode(body.mode)
    return session.snapshot()


# ---------------------------------------------------------------------------
# Conditions and group size
# ---------------------------------------------------------------------------

@router.put("/sessions/{session_id}/conditions", response_model=SessionState)
async def update_conditions(
    session_id: UUID, conditions: FilterConditions
) -> SessionState:
    session = _session_or_404(session_id)
    session.apply_conditions(conditions)
    return session.snapshot()


@router.delete("/sessions/{session_id}/conditions", response_model=SessionState)
async def reset_conditions(session_id: UUID) -> SessionState:
    session = _session_or_404(session_id)
    session.reset_conditions()
    return session.snapshot()


@router.put("/sessions/{session_id}/group-size", response_model=SessionState)
async def update_group_size(session_id: UUID, body: GroupSizeUpdate) -> SessionState:
    session = _session_or_404(session_id)
    session.set_max_group_size(body.max_group_size)
    return session.snapshot()


# ---------------------------------------------------------------------------
# Selection
# ---------------------------------------------------------------------------

@router.post(
    "/sessions/{session_id}/selection/{candidate_id}",
    response_model=SelectionResult,
)
async def add_to_selection(session_id: UUID, candidate_id: str) -> SelectionResult:
    """Add a lunch mate.  Returns 409 when the group is already full."""
    session = _session_or_404(session_id)
    try:
        accepted = session.select(candidate_id)
    except InvalidModeError as exc:
        logger.warning(
            "selection_rejected",
            extra={"session_id": str(session_id), "mode": session.mode.value},
        )
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    except CandidateNotFoundError as exc:
        logger.warning(
            "candidate_not_visible",
            extra={"session_id": str(session_id), "candidate_id": candidate_id},
        )
        raise HTTPException(
            status_code=404, detail=f"Candidate not available: {candidate_id}"
        ) from exc

    if not accepted:
        raise HTTPException(
            status_code=409,
            detail=(
                f"최대 {session.selection.max_group_size}명까지만 선택할 수 있습니다."
            ),
        )
    return _selection_result(session, candidate_id, accepted)


@router.delete(
    "/sessions/{session_id}/selection/{candidate_id}",
    response_model=SelectionResult,
)
async def remove_from_selection(session_id: UUID, candidate_id: str) -> SelectionResult:
    session = _session_or_404(session_id)
    session.deselect(candidate_id)
    return _selection_result(session, candidate_id, True)


@router.post("/sessions/{session_id}/cancel", response_model=SessionState)
async def cancel_match(session_id: UUID) -> SessionState:
    session = _session_or_404(session_id)
    session.cancel()
    return session.snapshot()


# ---------------------------------------------------------------------------
# Random matching
# ---------------------------------------------------------------------------

@router.post("/sessions/{session_id}/random", response_model=SessionState, status_code=202)
async def start_random_match(session_id: UUID) -> SessionState:
    """Schedule a random draw; poll the session to see the result.

    Returns 400 outside random mode and 409 while a draw is pending.
    """
    session = _session_or_404(session_id)
    try:
        session.start_random_match()
    except InvalidModeError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    except MatchInProgressError as exc:
        logger.info("random_match_rejected", extra={"session_id": str(session_id)})
        raise HTTPException(
            status_code=409, detail="Random matching already in progress"
        ) from exc
    return session.snapshot()
