"""LLM module - unified interface for language model interactions.

Usage:
    from llm import CompletionMode, LLMService

    llm = LLMService(settings)
    reply = await llm.complete(messages, CompletionMode.CHAT)

Structure:
    - base.py: Abstract interface (BaseLLMService) and errors
    - chat_completions.py: OpenAI-compatible HTTP implementation
"""

from llm.base import (
    BaseLLMService,
    CompletionMode,
    LLMError,
    NetworkError,
    UpstreamError,
)
from llm.chat_completions import ChatCompletionsService

# Default provider - can be swapped by changing this alias
LLMService = ChatCompletionsService

__all__ = [
    "BaseLLMService",
    "ChatCompletionsService",
    "CompletionMode",
    "LLMError",
    "LLMService",
    "NetworkError",
    "UpstreamError",
]
