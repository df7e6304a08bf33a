"""Services module for document and conversation logic.

Contains:
- Document text extraction (PDF, Word, text)
- In-memory document store
- Relevance classification of queries
- Prompt assembly
- Conversation log and the session that ties them together

Note: The session instance is managed via dependencies.py using FastAPI DI.
"""

from services.chat_history import ConversationLog
from services.classifier import DOCUMENT_KEYWORDS, RelevanceClassifier
from services.document import (
    DependencyUnavailableError,
    DocumentParseError,
    DocumentParser,
    EmptyContentError,
    ExtractionError,
    UnsupportedFormatError,
    detect_document_type,
)
from services.prompt_builder import PromptAssembler
from services.session import ChatSession, ChatTurn, UploadInProgressError
from services.store import DocumentStore
from services.types import (
    Document,
    DocumentType,
    FileHandle,
    Message,
    Notification,
    Role,
    Severity,
    UploadFailure,
    UploadResult,
)

__all__ = [
    # Core services
    "ChatSession",
    "ChatTurn",
    "UploadInProgressError",
    "ConversationLog",
    "DocumentStore",
    "PromptAssembler",
    "RelevanceClassifier",
    "DOCUMENT_KEYWORDS",
    # Document services
    "DocumentParser",
    "detect_document_type",
    "ExtractionError",
    "DependencyUnavailableError",
    "DocumentParseError",
    "EmptyContentError",
    "UnsupportedFormatError",
    # Types
    "Document",
    "DocumentType",
    "FileHandle",
    "Message",
    "Notification",
    "Role",
    "Severity",
    "UploadFailure",
    "UploadResult",
]
