"""Unit tests for matching sessions and the session registry.

Covers mode switching, selection inside a session, random draws scheduled
as cancellable tasks, and teardown.
"""

from __future__ import annotations

import asyncio
import random
from uuid import uuid4

import pytest

from lunchmate.models.enums import AgeGroup, Gender, MatchingMode, MatchingStatus

# ---------------------------------------------------------------------------
# Mode switching
# ---------------------------------------------------------------------------


class TestModeSwitch:
    """Mode changes reset the selection and reload the pool."""

    def test_select_to_solo_empties_selection_and_pool(self) -> None:
        """Given selection=[1, 2] in select mode, switching to solo clears both."""
        from lunchmate.services.session import MatchingSession

        session = MatchingSession(mode=MatchingMode.select)
        session.select("1")
        session.select("2")
        assert session.selection.ids == ["1", "2"]

        session.set_mode(MatchingMode.solo)

        assert session.selection.ids == []
        assert session.pool == []
        assert session.visible_candidates() == []
        assert session.status == MatchingStatus.idle

    def test_solo_back_to_select_reloads_roster(self) -> None:
        from lunchmate.services.session import MatchingSession

        session = MatchingSession(mode=MatchingMode.solo)
        assert session.pool == []

        session.set_mode(MatchingMode.select)
        assert len(session.pool) == 8

    def test_same_mode_keeps_selection(self) -> None:
        from lunchmate.services.session import MatchingSession

        session = MatchingSession(mode=MatchingMode.select)
        session.select("3")
        session.set_mode(MatchingMode.select)
        assert session.selection.ids == ["3"]

    def test_select_to_random_clears_selection(self) -> None:
        from lunchmate.services.session import MatchingSession

        session = MatchingSession(mode=MatchingMode.select)
        session.select("3")
        session.set_mode(MatchingMode.random)
        assert session.selection.ids == []
        assert len(session.pool) == 8

    def test_roster_source_is_injectable(self) -> None:
        from lunchmate.db.roster import get_roster
        from lunchmate.services.session import MatchingSession

        subset = get_roster()[:2]
        session = MatchingSession(roster_source=lambda: list(subset))
        assert [c.id for c in session.pool] == ["1", "2"]


# ---------------------------------------------------------------------------
# Selection
# ---------------------------------------------------------------------------


class TestSessionSelection:
    """Selection accepts visible candidates only and honours the cap."""

    def test_capacity_rejection(self) -> None:
        from lunchmate.services.session import MatchingSession

        session = MatchingSession(max_group_size=2)
        assert session.select("1") is True
        assert session.select("2") is True
        assert session.select("3") is False
        assert session.selection.ids == ["1", "2"]
        assert session.snapshot().at_capacity is True

    def test_solo_mode_rejects_selection(self) -> None:
        from lunchmate.core.exceptions import InvalidModeError
        from lunchmate.services.session import MatchingSession

        session = MatchingSession(mode=MatchingMode.solo)
        with pytest.raises(InvalidModeError):
            session.select("1")

    def test_filtered_out_candidate_rejected(self) -> None:
        from lunchmate.core.exceptions import CandidateNotFoundError
        from lunchmate.models.matching import FilterConditions
        from lunchmate.services.session import MatchingSession

        session = MatchingSession()
        session.apply_conditions(FilterConditions(gender=Gender.female))
        with pytest.raises(CandidateNotFoundError):
            session.select("1")
        assert session.select("5") is True

    def test_unknown_candidate_rejected(self) -> None:
        from lunchmate.core.exceptions import CandidateNotFoundError
        from lunchmate.services.session import MatchingSession

        with pytest.raises(CandidateNotFoundError):
            MatchingSession().select("999")

    def test_conditions_reset(self) -> None:
        from lunchmate.models.matching import FilterConditions
        from lunchmate.services.session import MatchingSession

        session = MatchingSession()
        session.apply_conditions(FilterConditions(age_groups=[AgeGroup.twenties]))
        assert [c.id for c in session.visible_candidates()] == ["1", "5", "7"]
        assert session.snapshot().active_conditions == 1

        session.reset_conditions()
        assert len(session.visible_candidates()) == 8

    def test_matched_candidates_in_selection_order(self) -> None:
        from lunchmate.services.session import MatchingSession

        session = MatchingSession()
        session.select("4")
        session.select("2")
        assert [c.id for c in session.matched_candidates()] == ["4", "2"]

    def test_cancel_clears_selection(self) -> None:
        from lunchmate.services.session import MatchingSession

        session = MatchingSession()
        session.select("1")
        session.cancel()
        assert session.status == MatchingStatus.idle

    def test_default_group_size_from_settings(self) -> None:
        from lunchmate.core.config import settings
        from lunchmate.services.session import MatchingSession

        assert MatchingSession().selection.max_group_size == settings.DEFAULT_MAX_GROUP_SIZE


# ---------------------------------------------------------------------------
# Random matching
# ---------------------------------------------------------------------------


class TestRandomMatch:
    """Random draws run as session-owned tasks."""

    def test_draw_random_respects_filter_and_cap(self) -> None:
        from lunchmate.models.matching import FilterConditions
        from lunchmate.services.session import MatchingSession

        session = MatchingSession(
            mode=MatchingMode.random, max_group_size=2, rng=random.Random(5)
        )
        session.apply_conditions(FilterConditions(gender=Gender.female))
        ids = session.draw_random()

        assert len(ids) == 2
        assert set(ids) <= {"5", "6", "7", "8"}
        assert session.selection.ids == ids

    def test_draw_random_empty_pool(self) -> None:
        from lunchmate.models.matching import FilterConditions
        from lunchmate.models.enums import EatingStyle
        from lunchmate.services.session import MatchingSession

        session = MatchingSession(mode=MatchingMode.random)
        session.apply_conditions(
            FilterConditions(
                age_groups=[AgeGroup.forties_plus],
                eating_styles=[EatingStyle.chatty],
            )
        )
        assert session.draw_random() == []
        assert session.status == MatchingStatus.idle

    @pytest.mark.asyncio
    async def test_start_random_match_completes(self) -> None:
        from lunchmate.services.session import MatchingSession

        session = MatchingSession(mode=MatchingMode.random, rng=random.Random(3))
        session.start_random_match(delay=0)
        assert session.status == MatchingStatus.searching

        await asyncio.sleep(0.01)

        assert session.status == MatchingStatus.matched
        assert len(session.selection) == 3

    @pytest.mark.asyncio
    async def test_start_random_match_requires_random_mode(self) -> None:
        from lunchmate.core.exceptions import InvalidModeError
        from lunchmate.services.session import MatchingSession

        session = MatchingSession(mode=MatchingMode.select)
        with pytest.raises(InvalidModeError):
            session.start_random_match(delay=0)

    @pytest.mark.asyncio
    async def test_second_start_while_pending_rejected(self) -> None:
        from lunchmate.core.exceptions import MatchInProgressError
        from lunchmate.services.session import MatchingSession

        session = MatchingSession(mode=MatchingMode.random)
        session.start_random_match(delay=10)
        with pytest.raises(MatchInProgressError):
            session.start_random_match(delay=10)
        session.close()

    @pytest.mark.asyncio
    async def test_mode_switch_cancels_pending_draw(self) -> None:
        from lunchmate.services.session import MatchingSession

        session = MatchingSession(mode=MatchingMode.random)
        session.start_random_match(delay=0.05)
        session.set_mode(MatchingMode.select)

        await asyncio.sleep(0.1)

        assert session.selection.ids == []
        assert session.status == MatchingStatus.idle

    @pytest.mark.asyncio
    async def test_close_cancels_pending_draw(self) -> None:
        from lunchmate.services.session import MatchingSession

        session = MatchingSession(mode=MatchingMode.random)
        session.start_random_match(delay=0.05)
        session.close()

        await asyncio.sleep(0.1)

        assert session.closed is True
        assert session.selection.ids == []


# ---------------------------------------------------------------------------
# Chat lifecycle
# ---------------------------------------------------------------------------


class TestSessionChat:
    """A chat belongs to the session and closes with it."""

    @pytest.mark.asyncio
    async def test_start_chat_requires_members(self) -> None:
        from lunchmate.core.exceptions import EmptyGroupError
        from lunchmate.services.session import MatchingSession

        with pytest.raises(EmptyGroupError):
            MatchingSession().start_chat()

    @pytest.mark.asyncio
    async def test_require_chat_without_chat(self) -> None:
        from lunchmate.core.exceptions import ChatNotStartedError
        from lunchmate.services.session import MatchingSession

        with pytest.raises(ChatNotStartedError):
            MatchingSession().require_chat()

    @pytest.mark.asyncio
    async def test_close_cancels_chat_replies(self) -> None:
        from lunchmate.services.session import MatchingSession

        session = MatchingSession()
        session.select("1")
        chat = session.start_chat(reply_delay=(0.05, 0.05))
        chat.send_message("안녕하세요")
        assert chat.is_typing is True

        session.close()
        await asyncio.sleep(0.1)

        assert chat.closed is True
        assert len(chat.messages) == 2
        assert session.chat is None

    @pytest.mark.asyncio
    async def test_cancel_closes_chat(self) -> None:
        from lunchmate.services.session import MatchingSession

        session = MatchingSession()
        session.select("2")
        session.start_chat()
        session.cancel()
        assert session.chat is None


# ---------------------------------------------------------------------------
# Registry
# ---------------------------------------------------------------------------


class TestRegistry:
    """In-memory registry of open sessions."""

    def test_create_and_get(self) -> None:
        from lunchmate.services.session import create_session, get_session, session_count

        session = create_session(mode=MatchingMode.random, max_group_size=4)
        assert get_session(session.id) is session
        assert session.selection.max_group_size == 4
        assert session_count() == 1

    def test_get_unknown_raises(self) -> None:
        from lunchmate.core.exceptions import SessionNotFoundError
        from lunchmate.services.session import get_session

        with pytest.raises(SessionNotFoundError):
            get_session(uuid4())

    def test_close_session_removes_it(self) -> None:
        from lunchmate.core.exceptions import SessionNotFoundError
        from lunchmate.services.session import close_session, create_session, get_session

        session = create_session()
        close_session(session.id)
        assert session.closed is True
        with pytest.raises(SessionNotFoundError):
            get_session(session.id)
        with pytest.raises(SessionNotFoundError):
            close_session(session.id)

    def test_close_all_sessions(self) -> None:
        from lunchmate.services.session import close_all_sessions, create_session, session_count

        first = create_session()
        second = create_session()
        assert close_all_sessions() == 2
        assert session_count() == 0
        assert first.closed and second.closed
