"""GET /health - Report service status."""

from datetime import UTC, datetime

from fastapi import Depends
from pydantic import BaseModel, Field

from config import get_app_config, get_settings
from dependencies import get_session
from services import ChatSession


class HealthResponse(BaseModel):
    """Health check response."""

    status: str = Field(..., description="Overall status")
    version: str = Field(..., description="Application version")
    environment: str = Field(..., description="Environment name")
    model: str = Field(..., description="Completion model in use")
    documents: int = Field(..., description="Documents in the session")
    messages: int = Field(..., description="Messages in the conversation")
    timestamp: datetime


async def check_health(
    session: ChatSession = Depends(get_session),
) -> HealthResponse:
    """Report configuration and session counters.

    The completion API is not called here.
    """
    settings = get_settings()
    return HealthResponse(
        status="healthy",
        version=get_app_config()["version"],
        environment=settings.environment,
        model=settings.llm_model,
        documents=len(session.documents),
        messages=len(session.history),
        timestamp=datetime.now(UTC),
    )
