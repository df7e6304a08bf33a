"""Base LLM service interface.

Defines the contract that all completion providers must implement.
"""

from abc import ABC, abstractmethod
from collections.abc import Sequence
from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from services.types import Message


class LLMError(Exception):
    """Raised when LLM generation fails."""


class NetworkError(LLMError):
    """Raised when the completion endpoint cannot be reached."""


class UpstreamError(LLMError):
    """Raised when the completion endpoint answers with an error."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class CompletionMode(str, Enum):
    """Selects sampling settings for a request."""

    DOCUMENT = "document"
    CHAT = "chat"


class BaseLLMService(ABC):
    """Abstract base class for completion providers."""

    @abstractmethod
    async def complete(
        self,
        messages: Sequence["Message"],
        mode: CompletionMode,
    ) -> str:
        """Generate a single non-streaming reply.

        Args:
            messages: Full request conversation, system message first if any.
            mode: DOCUMENT for grounded answers, CHAT otherwise.

        Returns:
            Assistant reply text.

        Raises:
            NetworkError: The request never got a response.
            UpstreamError: The API returned an error or an unusable body.
        """

    async def aclose(self) -> None:
        """Release network resources."""
