"""Response schemas shared by document handlers."""

from pydantic import BaseModel, Field

from services.types import Document, Notification


class DocumentSummary(BaseModel):
    """Metadata for an uploaded document."""

    doc_id: str = Field(..., description="Unique document identifier")
    name: str = Field(..., description="Original filename")
    type: str = Field(..., description="Detected type (PDF, Word, Text)")
    size: int = Field(..., description="File size in bytes")
    size_label: str = Field(..., description="Human-readable file size")
    char_count: int = Field(..., description="Characters of extracted text")

    @classmethod
    def from_document(cls, document: Document) -> "DocumentSummary":
        return cls(
            doc_id=document.id,
            name=document.name,
            type=document.type.value,
            size=document.size,
            size_label=document.size_label,
            char_count=document.char_count,
        )


class NotificationItem(BaseModel):
    """Toast notification for the UI."""

    message: str
    severity: str = Field(..., description="success, error, or info")

    @classmethod
    def from_notification(cls, notification: Notification) -> "NotificationItem":
        return cls(message=notification.message, severity=notification.severity.value)
