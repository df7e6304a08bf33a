"""Tests for the chat-completion client."""

import json

import httpx
import pytest

from config import ConfigurationError
from llm import ChatCompletionsService, CompletionMode, NetworkError, UpstreamError
from services.types import Message, Role


def _service(settings, handler):
    client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
    return ChatCompletionsService(settings, client=client)


MESSAGES = [
    Message(role=Role.SYSTEM, content="You are an AI assistant with access to documents."),
    Message(role=Role.USER, content="What does the document say?"),
]


class TestChatCompletionsService:
    """Tests for ChatCompletionsService."""

    @pytest.mark.asyncio
    async def test_request_shape(self, settings):
        """Test the request carries model, messages, sampling and bearer key."""
        captured = {}

        def handler(request: httpx.Request) -> httpx.Response:
            captured["url"] = str(request.url)
            captured["auth"] = request.headers["Authorization"]
            captured["body"] = json.loads(request.content)
            return httpx.Response(
                200, json={"choices": [{"message": {"content": "Refunds take 30 days."}}]}
            )

        service = _service(settings, handler)
        reply = await service.complete(MESSAGES, CompletionMode.DOCUMENT)

        assert reply == "Refunds take 30 days."
        assert captured["url"] == settings.completion_api_url
        assert captured["auth"] == "Bearer test-groq-key"
        assert captured["body"] == {
            "model": "llama-3.3-70b-versatile",
            "messages": [
                {"role": "system", "content": MESSAGES[0].content},
                {"role": "user", "content": MESSAGES[1].content},
            ],
            "temperature": 0.2,
            "max_tokens": 3000,
        }

    @pytest.mark.asyncio
    async def test_chat_mode_temperature(self, settings):
        """Test chat mode samples at 0.7."""
        temperatures = []

        def handler(request: httpx.Request) -> httpx.Response:
            temperatures.append(json.loads(request.content)["temperature"])
            return httpx.Response(200, json={"choices": [{"message": {"content": "hi"}}]})

        await _service(settings, handler).complete(MESSAGES[1:], CompletionMode.CHAT)
        assert temperatures == [0.7]

    @pytest.mark.asyncio
    async def test_structured_error(self, settings):
        """Test an error body's message is surfaced."""

        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(401, json={"error": {"message": "invalid key"}})

        with pytest.raises(UpstreamError) as exc_info:
            await _service(settings, handler).complete(MESSAGES, CompletionMode.CHAT)

        assert str(exc_info.value) == "invalid key"
        assert exc_info.value.status_code == 401

    @pytest.mark.asyncio
    async def test_unparseable_error(self, settings):
        """Test an opaque error body falls back to the status code."""

        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(503, text="<html>Service Unavailable</html>")

        with pytest.raises(UpstreamError) as exc_info:
            await _service(settings, handler).complete(MESSAGES, CompletionMode.CHAT)

        assert str(exc_info.value) == "API Error: 503"
        assert exc_info.value.status_code == 503

    @pytest.mark.asyncio
    async def test_error_without_message(self, settings):
        """Test JSON error bodies of another shape also fall back."""

        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(429, json={"detail": "slow down"})

        with pytest.raises(UpstreamError, match="API Error: 429"):
            await _service(settings, handler).complete(MESSAGES, CompletionMode.CHAT)

    @pytest.mark.asyncio
    async def test_network_error(self, settings):
        """Test transport failures become NetworkError."""

        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        with pytest.raises(NetworkError):
            await _service(settings, handler).complete(MESSAGES, CompletionMode.CHAT)

    @pytest.mark.asyncio
    async def test_malformed_success(self, settings):
        """Test a 200 without choices is reported as an upstream error."""

        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(200, json={"choices": []})

        with pytest.raises(UpstreamError):
            await _service(settings, handler).complete(MESSAGES, CompletionMode.CHAT)

    @pytest.mark.asyncio
    async def test_null_content(self, settings):
        """Test a 200 whose message content is null is an upstream error."""

        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(200, json={"choices": [{"message": {"content": None}}]})

        with pytest.raises(UpstreamError, match="Malformed response"):
            await _service(settings, handler).complete(MESSAGES, CompletionMode.CHAT)

    @pytest.mark.asyncio
    async def test_no_retry(self, settings):
        """Test a failure is reported after a single attempt."""
        calls = []

        def handler(request: httpx.Request) -> httpx.Response:
            calls.append(request)
            return httpx.Response(500, json={"error": {"message": "boom"}})

        with pytest.raises(UpstreamError):
            await _service(settings, handler).complete(MESSAGES, CompletionMode.CHAT)
        assert len(calls) == 1

    def test_blank_key_rejected(self, settings):
        """Test the client refuses to start without a credential."""
        settings = settings.model_copy(update={"groq_api_key": ""})
        with pytest.raises(ConfigurationError):
            ChatCompletionsService(settings)
