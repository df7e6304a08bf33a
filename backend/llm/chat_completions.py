"""OpenAI-compatible chat-completion client (Groq by default)."""

import logging
from collections.abc import Sequence
from typing import TYPE_CHECKING, Any

import httpx

from config import ConfigurationError, Settings

from .base import BaseLLMService, CompletionMode, NetworkError, UpstreamError

if TYPE_CHECKING:
    from services.types import Message

logger = logging.getLogger(__name__)


def _error_message(response: httpx.Response) -> str:
    """Pull error.message out of a failed response, else describe the status."""
    try:
        body = response.json()
    except ValueError:
        body = None

    if isinstance(body, dict):
        error = body.get("error")
        if isinstance(error, dict) and error.get("message"):
            return str(error["message"])

    return f"API Error: {response.status_code}"


class ChatCompletionsService(BaseLLMService):
    """Chat completions over plain HTTPS with a bearer credential."""

    def __init__(
        self,
        settings: Settings,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        if not settings.groq_api_key:
            raise ConfigurationError("Completion API key is not configured")

        self.settings = settings
        self.model = settings.llm_model
        self.url = settings.completion_api_url

        self._client = client or httpx.AsyncClient(
            timeout=httpx.Timeout(settings.llm_timeout),
        )

    def temperature_for(self, mode: CompletionMode) -> float:
        if mode is CompletionMode.DOCUMENT:
            return self.settings.document_temperature
        return self.settings.chat_temperature

    def build_payload(
        self, messages: Sequence["Message"], mode: CompletionMode
    ) -> dict[str, Any]:
        return {
            "model": self.model,
            "messages": [m.to_api() for m in messages],
            "temperature": self.temperature_for(mode),
            "max_tokens": self.settings.llm_max_tokens,
        }

    async def complete(
        self,
        messages: Sequence["Message"],
        mode: CompletionMode,
    ) -> str:
        """Send one request and return the first choice's content."""
        payload = self.build_payload(messages, mode)
        headers = {
            "Content-Type": "application/json",
            "Authorization": f"Bearer {self.settings.groq_api_key}",
        }

        try:
            response = await self._client.post(self.url, json=payload, headers=headers)
        except httpx.RequestError as e:
            logger.error("Completion request failed: %s", e)
            raise NetworkError(f"Network error: {e}") from e

        if not response.is_success:
            message = _error_message(response)
            logger.warning("Completion API error %d: %s", response.status_code, message)
            raise UpstreamError(message, status_code=response.status_code)

        try:
            data = response.json()
            content = data["choices"][0]["message"]["content"]
        except (ValueError, KeyError, IndexError, TypeError) as e:
            logger.error("Malformed completion response: %s", e)
            raise UpstreamError(
                "Malformed response from completion API",
                status_code=response.status_code,
            ) from e

        if not isinstance(content, str):
            logger.error("Completion content is %s, not text", type(content).__name__)
            raise UpstreamError(
                "Malformed response from completion API",
                status_code=response.status_code,
            )

        return content

    async def aclose(self) -> None:
        await self._client.aclose()
