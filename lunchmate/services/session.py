"""Matching sessions.

A ``MatchingSession`` is the single authoritative owner of one user's
matching state: mode, candidate pool, filter conditions, selection set, the
pending random draw and the group chat.  Every timer a session starts is an
``asyncio`` task it owns, and ``close()`` cancels all of them.

Sessions are kept in a process-wide in-memory registry; there is no
persistence.
"""

from __future__ import annotations

import asyncio
import logging
import random
from collections.abc import Callable
from datetime import datetime, timezone
from uuid import UUID, uuid4

from lunchmate.core.config import settings
from lunchmate.core.exceptions import (
    CandidateNotFoundError,
    ChatNotStartedError,
    EmptyGroupError,
    InvalidModeError,
    MatchInProgressError,
    SessionNotFoundError,
)
from lunchmate.db.roster import get_roster
from lunchmate.models.candidate import Candidate
from lunchmate.models.enums import MatchingMode, MatchingStatus
from lunchmate.models.matching import FilterConditions, SessionState
from lunchmate.services.chat import GroupChat
from lunchmate.services.matching import SelectionSet, filter_candidates, random_select

logger = logging.getLogger(__name__)

RosterSource = Callable[[], list[Candidate]]


class MatchingSession:
    """One user's matching state machine."""

    def __init__(
        self,
        mode: MatchingMode = MatchingMode.select,
        max_group_size: int | None = None,
        *,
        roster_source: RosterSource = get_roster,
        rng: random.Random | None = None,
    ) -> None:
        self.id: UUID = uuid4()
        self.created_at = datetime.now(timezone.utc)
        self.mode = mode
        self.conditions = FilterConditions()
        self.selection = SelectionSet(
            settings.DEFAULT_MAX_GROUP_SIZE if max_group_size is None else max_group_size
        )
        self.chat: GroupChat | None = None
        self.closed = False
        self._roster_source = roster_source
        self._rng = rng or random.Random()
        self._match_task: asyncio.Task[None] | None = None
        self.pool: list[Candidate] = (
            [] if mode == MatchingMode.solo else self._roster_source()
        )

    # -- derived state ------------------------------------------------------

    @property
    def is_searching(self) -> bool:
        return self._match_task is not None and not self._match_task.done()

    @property
    def status(self) -> MatchingStatus:
        if self.is_searching:
            return MatchingStatus.searching
        return self.selection.status

    def visible_candidates(self) -> list[Candidate]:
        """The pool narrowed by the current filter conditions."""
        return filter_candidates(self.pool, self.conditions)

    def matched_candidates(self) -> list[Candidate]:
        """Selected candidates in selection order."""
        by_id = {c.id: c for c in self.pool}
        return [by_id[i] for i in self.selection.ids if i in by_id]

    def snapshot(self) -> SessionState:
        return SessionState(
            id=self.id,
            mode=self.mode,
            status=self.status,
            max_group_size=self.selection.max_group_size,
            conditions=self.conditions,
            active_conditions=self.conditions.active_count,
            candidates=self.visible_candidates(),
            selected_ids=self.selection.ids,
            matched=self.matched_candidates(),
            at_capacity=self.selection.at_capacity,
            chat_open=self.chat is not None,
            created_at=self.created_at,
        )

    # -- mode ---------------------------------------------------------------

    def set_mode(self, mode: MatchingMode) -> None:
        """Switch mode; solo empties the pool, other modes reload the roster.

        Any actual change clears the selection, cancels a pending draw and
        closes the chat.
        """
        if mode == self.mode:
            return
        previous = self.mode
        self._cancel_match_task()
        self.close_chat()
        self.selection.clear()
        self.mode = mode
        self.pool = [] if mode == MatchingMode.solo else self._roster_source()
        logger.info(
            "mode_switched",
            extra={
                "session_id": str(self.id),
                "from_mode": previous.value,
                "to_mode": mode.value,
            },
        )

    # -- conditions -----------------------------------------------------------

    def apply_conditions(self, conditions: FilterConditions) -> None:
        self.conditions = conditions

    def reset_conditions(self) -> None:
        self.conditions = FilterConditions()

    # -- selection ------------------------------------------------------------

    def set_max_group_size(self, size: int) -> int:
        return self.selection.set_max_group_size(size)

    def select(self, candidate_id: str) -> bool:
        """Add a visible candidate; False means the group is full."""
        if self.mode == MatchingMode.solo:
            raise InvalidModeError("Selection is not available in solo mode")
        if candidate_id not in {c.id for c in self.visible_candidates()}:
            raise CandidateNotFoundError(candidate_id)

        accepted = self.selection.add(candidate_id)
        if not accepted:
            logger.info(
                "selection_capacity_exceeded",
                extra={
                    "session_id": str(self.id),
                    "candidate_id": candidate_id,
                    "max_group_size": self.selection.max_group_size,
                },
            )
        return accepted

    def deselect(self, candidate_id: str) -> None:
        self.selection.remove(candidate_id)

    def cancel(self) -> None:
        """Drop the current match: selection, pending draw and chat."""
        self._cancel_match_task()
        self.close_chat()
        self.selection.clear()

    # -- random matching ------------------------------------------------------

    def draw_random(self) -> list[str]:
        """Draw a random group from the visible pool and make it the selection."""
        ids = random_select(
            self.visible_candidates(),
            self.selection.max_group_size,
            rng=self._rng,
        )
        self.selection.replace(ids)
        logger.info(
            "random_match_drawn",
            extra={
                "session_id": str(self.id),
                "selected": len(ids),
                "max_group_size": self.selection.max_group_size,
            },
        )
        return ids

    def start_random_match(self, delay: float | None = None) -> None:
        """Schedule a random draw after *delay* seconds.

        ``delay`` defaults to a uniform value between the configured bounds.
        Must be called from a running event loop.
        """
        if self.mode != MatchingMode.random:
            raise InvalidModeError("Random matching requires random mode")
        if self.is_searching:
            raise MatchInProgressError(str(self.id))

        if delay is None:
            delay = self._rng.uniform(
                settings.MATCH_DELAY_MIN_SECONDS,
                settings.MATCH_DELAY_MAX_SECONDS,
            )
        self._match_task = asyncio.get_running_loop().create_task(
            self._draw_after(delay)
        )

    async def _draw_after(self, delay: float) -> None:
        await asyncio.sleep(delay)
        self.draw_random()

    def _cancel_match_task(self) -> None:
        if self._match_task is not None and not self._match_task.done():
            self._match_task.cancel()
            logger.info("random_match_cancelled", extra={"session_id": str(self.id)})
        self._match_task = None

    # -- chat -----------------------------------------------------------------

    def start_chat(self, *, reply_delay: tuple[float, float] | None = None) -> GroupChat:
        """Open a group chat with the matched members, replacing any open one."""
        members = self.matched_candidates()
        if not members:
            raise EmptyGroupError("Select at least one lunch mate first")
        self.close_chat()
        self.chat = GroupChat(members, rng=self._rng, reply_delay=reply_delay)
        logger.info(
            "chat_started",
            extra={"session_id": str(self.id), "members": [m.id for m in members]},
        )
        return self.chat

    def require_chat(self) -> GroupChat:
        if self.chat is None:
            raise ChatNotStartedError(str(self.id))
        return self.chat

    def close_chat(self) -> None:
        if self.chat is not None:
            self.chat.close()
            self.chat = None

    # -- teardown -------------------------------------------------------------

    def close(self) -> None:
        """Tear the session down, cancelling every timer it owns."""
        if self.closed:
            return
        self._cancel_match_task()
        self.close_chat()
        self.closed = True


# ---------------------------------------------------------------------------
# Registry
# ---------------------------------------------------------------------------

_sessions: dict[UUID, MatchingSession] = {}


def create_session(
    mode: MatchingMode = MatchingMode.select,
    max_group_size: int | None = None,
) -> MatchingSession:
    session = MatchingSession(mode=mode, max_group_size=max_group_size)
    _sessions[session.id] = session
    logger.info(
        "session_created",
        extra={"session_id": str(session.id), "mode": mode.value},
    )
    return session


def get_session(session_id: UUID) -> MatchingSession:
    try:
        return _sessions[session_id]
    except KeyError:
        raise SessionNotFoundError(str(session_id)) from None


def close_session(session_id: UUID) -> None:
    session = _sessions.pop(session_id, None)
    if session is None:
        raise SessionNotFoundError(str(session_id))
    session.close()
    logger.info("session_closed", extra={"session_id": str(session_id)})


def close_all_sessions() -> int:
    """Close every open session; returns how many were closed."""
    count = len(_sessions)
    for session in list(_sessions.values()):
        session.close()
    _sessions.clear()
    return count


def session_count() -> int:
    return len(_sessions)
