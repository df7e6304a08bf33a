"""GET /documents - List documents in the session."""

from fastapi import Depends
from pydantic import BaseModel, Field

from apps.documents.handlers.schemas import DocumentSummary
from dependencies import get_session
from services import ChatSession


class DocumentListResponse(BaseModel):
    """Response for document listing."""

    documents: list[DocumentSummary]
    total: int = Field(..., description="Number of documents")
    processing: bool = Field(
        default=False, description="Whether an upload batch is being processed"
    )


async def list_documents(
    session: ChatSession = Depends(get_session),
) -> DocumentListResponse:
    """List documents in display order."""
    documents = [DocumentSummary.from_document(d) for d in session.documents]
    return DocumentListResponse(
        documents=documents,
        total=len(documents),
        processing=session.processing_files,
    )
