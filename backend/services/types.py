"""Shared types and dataclasses for services.

Provides typed alternatives to dict[str, Any] for better type safety.
"""

import uuid
from dataclasses import dataclass, field
from enum import Enum

from utils import format_file_size


class DocumentType(str, Enum):
    """Detected format of an uploaded document."""

    PDF = "PDF"
    WORD = "Word"
    TEXT = "Text"


class Role(str, Enum):
    """Author of a conversation message."""

    USER = "user"
    ASSISTANT = "assistant"
    SYSTEM = "system"


class Severity(str, Enum):
    """Severity tag for notifications shown by the UI."""

    SUCCESS = "success"
    ERROR = "error"
    INFO = "info"


def new_document_id() -> str:
    """Generate a unique document identifier."""
    return uuid.uuid4().hex


@dataclass(frozen=True)
class FileHandle:
    """An uploaded file as received from the UI."""

    name: str
    content: bytes
    content_type: str = ""

    @property
    def size(self) -> int:
        return len(self.content)


@dataclass(frozen=True)
class Document:
    """Extracted text of an uploaded file plus its metadata."""

    name: str
    content: str
    size: int
    type: DocumentType
    id: str = field(default_factory=new_document_id)

    @property
    def char_count(self) -> int:
        return len(self.content)

    @property
    def size_label(self) -> str:
        return format_file_size(self.size)


@dataclass(frozen=True)
class Message:
    """A single conversation message."""

    role: Role
    content: str

    def to_api(self) -> dict[str, str]:
        """Serialize to the chat-completion wire format."""
        return {"role": self.role.value, "content": self.content}


@dataclass(frozen=True)
class Notification:
    """Transient event for the UI (toast)."""

    message: str
    severity: Severity


@dataclass(frozen=True)
class UploadFailure:
    """A file that produced no document, with the reason."""

    filename: str
    error: Exception


@dataclass
class UploadResult:
    """Outcome of processing one upload batch."""

    added: list[Document] = field(default_factory=list)
    failures: list[UploadFailure] = field(default_factory=list)
    notifications: list[Notification] = field(default_factory=list)
