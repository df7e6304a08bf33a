"""POST /chat - Send a message and get the assistant reply."""

import logging
import uuid

from fastapi import Depends
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field

from dependencies import get_session
from llm import NetworkError, UpstreamError
from responses import ResponseCode, error_response, success_response
from services import ChatSession

logger = logging.getLogger(__name__)

CHAT_ERROR_MAP = {
    UpstreamError: ResponseCode.UPSTREAM_ERROR,
    NetworkError: ResponseCode.NETWORK_ERROR,
}


# --- Request/Response Schemas (API-specific) ---


class ChatRequest(BaseModel):
    """Request body for chat endpoint."""

    question: str = Field(
        ...,
        min_length=1,
        description="Message to send; answered from documents when relevant",
    )


class ChatReply(BaseModel):
    """Assistant reply for one message."""

    role: str = Field(..., description="Always 'assistant'")
    content: str = Field(..., description="Reply text, or error text if failed")
    mode: str = Field(..., description="'document' or 'chat'")
    failed: bool = Field(
        default=False, description="True when the reply reports an upstream failure"
    )
    error_code: str | None = Field(
        None, description="Response code of the upstream failure, if any"
    )
    upstream_status: int | None = Field(
        None, description="HTTP status returned by the completion API, if any"
    )


# --- Handler ---


async def send_message(
    request: ChatRequest,
    session: ChatSession = Depends(get_session),
) -> JSONResponse:
    """Send a message.

    Completion failures are returned as a normal reply with failed=true;
    the same text is appended to the conversation.
    """
    request_id = str(uuid.uuid4())[:8]

    if not request.question.strip():
        return error_response(
            ResponseCode.VALIDATION_ERROR, "Question cannot be blank", request_id
        )

    turn = await session.send_message(request.question)
    if turn is None:
        return error_response(ResponseCode.CHAT_BUSY, request_id=request_id)

    reply = ChatReply(
        role=turn.reply.role.value,
        content=turn.reply.content,
        mode=turn.mode.value,
        failed=turn.failed,
    )

    if turn.error is not None:
        code = CHAT_ERROR_MAP.get(type(turn.error), ResponseCode.UPSTREAM_ERROR)
        reply.error_code = code.value
        reply.upstream_status = getattr(turn.error, "status_code", None)
        logger.info("[%s] Reply carries %s", request_id, code.name)
        return success_response(
            ResponseCode.REPLY_WITH_ERROR, reply.model_dump(), request_id
        )

    return success_response(ResponseCode.SUCCESS, reply.model_dump(), request_id)
