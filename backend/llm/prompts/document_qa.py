"""Prompt templates for document-grounded answers."""

DOCUMENT_QA_HEADER = """You are an AI assistant with access to documents. Answer based on these documents.

AVAILABLE DOCUMENTS ({count}):
"""

DOCUMENT_SECTION = "\n=== DOCUMENT {index}: {name} ===\n{content}\n\n"

TRUNCATION_MARKER = "\n[content truncated]"

DOCUMENT_QA_INSTRUCTIONS = """
QUESTION: {question}

Provide detailed answers based on documents. If not found, say so clearly."""
