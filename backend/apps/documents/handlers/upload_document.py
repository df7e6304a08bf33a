"""POST /documents/upload - Upload and extract one or more documents."""

import logging
import uuid

from fastapi import Depends, File, UploadFile
from fastapi.responses import JSONResponse

from apps.documents.handlers.schemas import DocumentSummary, NotificationItem
from dependencies import get_session
from responses import ResponseCode, error_response, success_response
from services import ChatSession, FileHandle, UploadFailure, UploadInProgressError
from services.document import (
    DependencyUnavailableError,
    DocumentParseError,
    EmptyContentError,
    UnsupportedFormatError,
)

logger = logging.getLogger(__name__)


# --- Error mapping ---

UPLOAD_ERROR_MAP = {
    UnsupportedFormatError: ResponseCode.UNSUPPORTED_FILE_TYPE,
    EmptyContentError: ResponseCode.EMPTY_DOCUMENT,
    DocumentParseError: ResponseCode.CORRUPTED_FILE,
    DependencyUnavailableError: ResponseCode.DEPENDENCY_UNAVAILABLE,
}


def _failure_dict(failure: UploadFailure) -> dict[str, str]:
    code = UPLOAD_ERROR_MAP.get(type(failure.error), ResponseCode.INTERNAL_ERROR)
    return {
        "filename": failure.filename,
        "code": code.value,
        "message": str(failure.error),
    }


# --- Handler ---


async def upload_document(
    files: list[UploadFile] = File(...),
    session: ChatSession = Depends(get_session),
) -> JSONResponse:
    """Upload documents (PDF, DOC/DOCX, TXT).

    Files are processed one at a time in the order sent. A file that fails
    is reported as an error notification; the others still go through.
    """
    request_id = str(uuid.uuid4())[:8]

    if session.processing_files:
        return error_response(ResponseCode.UPLOAD_IN_PROGRESS, request_id=request_id)

    handles = []
    for file in files:
        content = await file.read()
        handles.append(
            FileHandle(
                name=file.filename or "document",
                content=content,
                content_type=file.content_type or "",
            )
        )
        logger.info("[%s] Upload: %s (%d bytes)", request_id, file.filename, len(content))

    try:
        result = await session.upload(handles)
    except UploadInProgressError:
        logger.info("[%s] Upload refused, another batch is running", request_id)
        return error_response(ResponseCode.UPLOAD_IN_PROGRESS, request_id=request_id)

    data = {
        "documents": [
            DocumentSummary.from_document(d).model_dump() for d in result.added
        ],
        "failures": [_failure_dict(f) for f in result.failures],
        "notifications": [
            NotificationItem.from_notification(n).model_dump()
            for n in result.notifications
        ],
        "total_documents": len(session.documents),
    }

    if not result.added:
        if result.failures and all(
            isinstance(f.error, DependencyUnavailableError) for f in result.failures
        ):
            code = ResponseCode.DEPENDENCY_UNAVAILABLE
        else:
            code = ResponseCode.NO_DOCUMENTS_EXTRACTED
        return error_response(
            code,
            request_id=request_id,
            error_details=data,
        )

    logger.info(
        "[%s] Stored %d of %d files", request_id, len(result.added), len(handles)
    )
    return success_response(ResponseCode.DOCUMENT_UPLOADED, data, request_id)
