"""Models for the group chat simulation."""

from datetime import datetime

from pydantic import BaseModel, Field

from lunchmate.models.enums import MessageType


class ChatMessage(BaseModel):
    """A single message in a group chat."""
    id: str
    user_id: str
    user_name: str
    user_avatar: str
    message: str
    timestamp: datetime
    type: MessageType = MessageType.text


class ChatState(BaseModel):
    """Full chat transcript for a session."""
    members: list[str] = []
    messages: list[ChatMessage] = []
    is_typing: bool = False


class MessageCreate(BaseModel):
    """Payload for sending a text message."""
    message: str


class LocationShare(BaseModel):
    """Payload for sharing a position in the chat."""
    latitude: float = Field(..., ge=-90.0, le=90.0)
    longitude: float = Field(..., ge=-180.0, le=180.0)
