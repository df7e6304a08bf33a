"""GET /chat/history - Get the conversation log."""

from fastapi import Depends, Query
from pydantic import BaseModel, Field

from dependencies import get_session
from services import ChatSession


class ChatHistoryMessage(BaseModel):
    """A message in chat history response."""

    role: str = Field(..., description="Message role (user/assistant/system)")
    content: str = Field(..., description="Message content")


class ChatHistoryResponse(BaseModel):
    """Response for chat history endpoint."""

    messages: list[ChatHistoryMessage]
    total_count: int = Field(..., description="Total message count")
    has_more: bool = Field(default=False, description="Whether there are more messages")


async def get_chat_history(
    limit: int = Query(default=50, ge=1, description="Max messages to return"),
    session: ChatSession = Depends(get_session),
) -> ChatHistoryResponse:
    """Get the most recent messages, oldest first."""
    total_count = len(session.history)
    messages = [
        ChatHistoryMessage(role=m.role.value, content=m.content)
        for m in session.history.recent(limit)
    ]
    return ChatHistoryResponse(
        messages=messages,
        total_count=total_count,
        has_more=total_count > limit,
    )
