"""Pytest configuration and fixtures for DocChat tests."""

import os
import sys

# Set required env vars BEFORE any imports that might trigger Settings
os.environ.setdefault("GROQ_API_KEY", "test-groq-key")

import io
from collections.abc import Sequence

import pytest

# Add backend to path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from config import Settings
from llm import BaseLLMService, CompletionMode
from services.types import Document, DocumentType, Message


class FakeLLMService(BaseLLMService):
    """Records requests and replays a canned reply or error."""

    def __init__(self, reply: str = "Sample reply", error: Exception | None = None):
        self.reply = reply
        self.error = error
        self.calls: list[tuple[list[Message], CompletionMode]] = []

    async def complete(
        self, messages: Sequence[Message], mode: CompletionMode
    ) -> str:
        self.calls.append((list(messages), mode))
        if self.error is not None:
            raise self.error
        return self.reply


@pytest.fixture
def settings():
    """Application settings with a test API key and no .env lookup."""
    return Settings(groq_api_key="test-groq-key", _env_file=None)


@pytest.fixture
def fake_llm():
    """Completion client that never touches the network."""
    return FakeLLMService()


@pytest.fixture
def make_document():
    """Factory for stored documents."""

    def _make(name="notes.txt", content="Sample document content", doc_type=DocumentType.TEXT):
        return Document(
            name=name,
            content=content,
            size=len(content.encode()),
            type=doc_type,
        )

    return _make


@pytest.fixture
def pdf_bytes():
    """Build a real PDF with one line of text per page."""
    import fitz

    def _build(*pages: str) -> bytes:
        doc = fitz.open()
        for text in pages:
            page = doc.new_page()
            if text:
                page.insert_text((72, 72), text)
        data = doc.tobytes()
        doc.close()
        return data

    return _build


@pytest.fixture
def docx_bytes():
    """Build a real DOCX from paragraphs and an optional table."""
    from docx import Document as DocxDocument

    def _build(paragraphs: Sequence[str], table: Sequence[Sequence[str]] = ()) -> bytes:
        doc = DocxDocument()
        for text in paragraphs:
            doc.add_paragraph(text)
        if table:
            grid = doc.add_table(rows=len(table), cols=len(table[0]))
            for r, row in enumerate(table):
                for c, value in enumerate(row):
                    grid.cell(r, c).text = value
        buffer = io.BytesIO()
        doc.save(buffer)
        return buffer.getvalue()

    return _build


@pytest.fixture
def sample_text():
    """Sample document text for testing."""
    return """Refund policy

Customers may request a refund within 30 days of purchase.
Refunds are issued to the original payment method.
"""
