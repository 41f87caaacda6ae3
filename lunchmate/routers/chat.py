"""Group chat endpoints, nested under a matching session.

POST /sessions/{id}/chat              -- open a chat with the matched group.
GET  /sessions/{id}/chat              -- transcript and typing indicator.
POST /sessions/{id}/chat/messages     -- send a text message.
POST /sessions/{id}/chat/location     -- share a position.
POST /sessions/{id}/chat/restaurant   -- suggest a random restaurant.
"""

from __future__ import annotations

import logging
from uuid import UUID

from fastapi import APIRouter, HTTPException

from lunchmate.core.exceptions import (
    ChatNotStartedError,
    EmptyGroupError,
    SessionNotFoundError,
)
from lunchmate.models.chat import ChatMessage, ChatState, LocationShare, MessageCreate
from lunchmate.services.chat import GroupChat
from lunchmate.services.session import get_session

logger = logging.getLogger(__name__)

router = APIRouter()


def _chat_or_404(session_id: UUID) -> GroupChat:
    try:
        return get_session(session_id).require_chat()
    except SessionNotFoundError as exc:
        logger.warning("session_not_found", extra={"session_id": str(session_id)})
        raise HTTPException(
            status_code=404, detail=f"Session not found: {session_id}"
        ) from exc
    except ChatNotStartedError as exc:
        logger.warning("chat_not_started", extra={"session_id": str(session_id)})
        raise HTTPException(
            status_code=404, detail="Group chat has not been started"
        ) from exc


@router.post("/sessions/{session_id}/chat", response_model=ChatState, status_code=201)
async def open_chat(session_id: UUID) -> ChatState:
    """Open a group chat with the session's matched members."""
    try:
        chat = get_session(session_id).start_chat()
    except SessionNotFoundError as exc:
        logger.warning("session_not_found", extra={"session_id": str(session_id)})
        raise HTTPException(
            status_code=404, detail=f"Session not found: {session_id}"
        ) from exc
    except EmptyGroupError as exc:
        logger.warning("chat_open_rejected", extra={"session_id": str(session_id)})
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    return chat.state()


@router.get("/sessions/{session_id}/chat", response_model=ChatState)
async def chat_state(session_id: UUID) -> ChatState:
    return _chat_or_404(session_id).state()


@router.post(
    "/sessions/{session_id}/chat/messages",
    response_model=ChatMessage,
    status_code=201,
)
async def send_message(session_id: UUID, body: MessageCreate) -> ChatMessage:
    """Send a text message; a member replies after a short delay."""
    chat = _chat_or_404(session_id)
    message = chat.send_message(body.message)
    if message is None:
        raise HTTPException(status_code=400, detail="Message must not be blank")
    return message


@router.post(
    "/sessions/{session_id}/chat/location",
    response_model=ChatMessage,
    status_code=201,
)
async def share_location(session_id: UUID, body: LocationShare) -> ChatMessage:
    chat = _chat_or_404(session_id)
    return chat.share_location(body.latitude, body.longitude)


@router.post(
    "/sessions/{session_id}/chat/restaurant",
    response_model=ChatMessage,
    status_code=201,
)
async def suggest_restaurant(session_id: UUID) -> ChatMessage:
    chat = _chat_or_404(session_id)
    return chat.suggest_restaurant()
