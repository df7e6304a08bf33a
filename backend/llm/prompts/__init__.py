"""LLM prompts for various use cases."""

from llm.prompts.document_qa import (
    DOCUMENT_QA_HEADER,
    DOCUMENT_QA_INSTRUCTIONS,
    DOCUMENT_SECTION,
    TRUNCATION_MARKER,
)

__all__ = [
    "DOCUMENT_QA_HEADER",
    "DOCUMENT_QA_INSTRUCTIONS",
    "DOCUMENT_SECTION",
    "TRUNCATION_MARKER",
]
