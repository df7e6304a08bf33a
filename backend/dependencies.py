"""FastAPI dependency injection for services.

The process serves exactly one chat session. Services are cached with
@lru_cache() so every request sees the same session.
"""

from functools import lru_cache

from config import get_settings
from llm import BaseLLMService, LLMService
from services.session import ChatSession

# --- Cached Singletons ---


@lru_cache
def get_llm_service() -> BaseLLMService:
    """Get cached completion client (holds an HTTP connection pool)."""
    return LLMService(get_settings())


@lru_cache
def get_session() -> ChatSession:
    """Get the chat session owning this process's documents and history."""
    return ChatSession(settings=get_settings(), llm=get_llm_service())
