"""Group chat simulation.

A chat is opened for the members of a match.  Every text the user sends is
answered, after a short random delay, by a canned reply from a random
member.  Pending replies are ``asyncio`` tasks owned by the chat and are
cancelled when it closes, so no reply lands after teardown.
"""

from __future__ import annotations

import asyncio
import logging
import random
from collections.abc import Sequence
from datetime import datetime, timezone
from uuid import uuid4

from lunchmate.core.config import settings
from lunchmate.core.constants import (
    CANNED_RESPONSES,
    CHAT_SELF_AVATAR,
    CHAT_SELF_ID,
    CHAT_SELF_NAME,
    CHAT_SYSTEM_AVATAR,
    CHAT_SYSTEM_NAME,
    SUGGESTED_RESTAURANTS,
)
from lunchmate.core.exceptions import EmptyGroupError
from lunchmate.models.candidate import Candidate
from lunchmate.models.chat import ChatMessage, ChatState
from lunchmate.models.enums import MessageType

logger = logging.getLogger(__name__)


def _now() -> datetime:
    return datetime.now(timezone.utc)


def _own_message(text: str, message_type: MessageType) -> ChatMessage:
    return ChatMessage(
        id=uuid4().hex,
        user_id=CHAT_SELF_ID,
        user_name=CHAT_SELF_NAME,
        user_avatar=CHAT_SELF_AVATAR,
        message=text,
        timestamp=_now(),
        type=message_type,
    )


class GroupChat:
    """Chat room among the matched members and the current user."""

    def __init__(
        self,
        members: Sequence[Candidate],
        *,
        rng: random.Random | None = None,
        reply_delay: tuple[float, float] | None = None,
    ) -> None:
        if not members:
            raise EmptyGroupError("A group chat needs at least one member")
        self.members = list(members)
        self._rng = rng or random.Random()
        self._reply_delay = reply_delay or (
            settings.CHAT_REPLY_DELAY_MIN_SECONDS,
            settings.CHAT_REPLY_DELAY_MAX_SECONDS,
        )
        self._pending: set[asyncio.Task[None]] = set()
        self.closed = False
        names = ", ".join(m.name for m in self.members)
        self.messages: list[ChatMessage] = [
            ChatMessage(
                id=uuid4().hex,
                user_id="system",
                user_name=CHAT_SYSTEM_NAME,
                user_avatar=CHAT_SYSTEM_AVATAR,
                message=f"{names}님이 그룹 채팅을 시작했습니다!",
                timestamp=_now(),
                type=MessageType.system,
            )
        ]

    @property
    def is_typing(self) -> bool:
        return any(not task.done() for task in self._pending)

    def state(self) -> ChatState:
        return ChatState(
            members=[m.id for m in self.members],
            messages=list(self.messages),
            is_typing=self.is_typing,
        )

    # -- sending ------------------------------------------------------------

    def send_message(self, text: str) -> ChatMessage | None:
        """Post *text* as the user and schedule a canned reply.

        Blank messages are ignored and return None.  Must be called from a
        running event loop.
        """
        if self.closed or not text.strip():
            return None

        message = _own_message(text, MessageType.text)
        self.messages.append(message)

        delay = self._rng.uniform(*self._reply_delay)
        task = asyncio.get_running_loop().create_task(self._reply_after(delay))
        self._pending.add(task)
        task.add_done_callback(self._pending.discard)
        return message

    async def _reply_after(self, delay: float) -> None:
        await asyncio.sleep(delay)
        if self.closed:
            return
        member = self._rng.choice(self.members)
        self.messages.append(
            ChatMessage(
                id=uuid4().hex,
                user_id=member.id,
                user_name=member.name,
                user_avatar=member.avatar,
                message=self._rng.choice(CANNED_RESPONSES),
                timestamp=_now(),
                type=MessageType.text,
            )
        )

    def share_location(self, latitude: float, longitude: float) -> ChatMessage:
        message = _own_message(
            f"📍 내 위치: {latitude:.4f}, {longitude:.4f}",
            MessageType.location,
        )
        self.messages.append(message)
        return message

    def suggest_restaurant(self) -> ChatMessage:
        restaurant = self._rng.choice(SUGGESTED_RESTAURANTS)
        message = _own_message(f"🍽️ {restaurant} 어때요?", MessageType.restaurant)
        self.messages.append(message)
        return message

    # -- teardown -----------------------------------------------------------

    def close(self) -> None:
        """Close the chat and cancel every pending reply."""
        if self.closed:
            return
        self.closed = True
        cancelled = 0
        for task in list(self._pending):
            if not task.done():
                task.cancel()
                cancelled += 1
        self._pending.clear()
        logger.debug("chat_closed", extra={"cancelled_replies": cancelled})
