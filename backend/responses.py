"""Standardized response infrastructure for API endpoints.

Provides consistent response format with structured codes and messages.
"""

from datetime import UTC, datetime
from enum import Enum
from typing import Any

from fastapi.responses import JSONResponse


class ResponseCode(str, Enum):
    """Response codes for API responses.

    Ranges: 0xxx=Success, 1xxx=Client Error, 2xxx=Server Error, 3xxx=External Service
    """

    # Success codes
    SUCCESS = "0000"
    DOCUMENT_UPLOADED = "0002"
    DOCUMENT_DELETED = "0003"
    DOCUMENTS_CLEARED = "0004"
    REPLY_WITH_ERROR = "0005"

    # Client errors
    VALIDATION_ERROR = "1000"
    UNSUPPORTED_FILE_TYPE = "1001"
    DOCUMENT_NOT_FOUND = "1003"
    EMPTY_DOCUMENT = "1004"
    CORRUPTED_FILE = "1005"
    NO_DOCUMENTS_EXTRACTED = "1007"
    CHAT_BUSY = "1008"
    UPLOAD_IN_PROGRESS = "1009"

    # Server errors
    INTERNAL_ERROR = "2000"
    CONFIGURATION_ERROR = "2003"
    DEPENDENCY_UNAVAILABLE = "2004"

    # External service errors
    UPSTREAM_ERROR = "3000"
    NETWORK_ERROR = "3002"


# Response messages mapped to codes
RESPONSE_MESSAGES: dict[ResponseCode, str] = {
    ResponseCode.SUCCESS: "Operation completed successfully",
    ResponseCode.DOCUMENT_UPLOADED: "Documents uploaded and processed",
    ResponseCode.DOCUMENT_DELETED: "Document removed",
    ResponseCode.DOCUMENTS_CLEARED: "All documents cleared",
    ResponseCode.REPLY_WITH_ERROR: "Completion failed; error added to conversation",
    ResponseCode.VALIDATION_ERROR: "Request validation failed",
    ResponseCode.UNSUPPORTED_FILE_TYPE: "Unsupported format. Use PDF, Word, or Text.",
    ResponseCode.DOCUMENT_NOT_FOUND: "Not found",
    ResponseCode.EMPTY_DOCUMENT: "Document contains no extractable text",
    ResponseCode.CORRUPTED_FILE: "File appears corrupted",
    ResponseCode.NO_DOCUMENTS_EXTRACTED: "None of the uploaded files could be read",
    ResponseCode.CHAT_BUSY: "A message is already being answered",
    ResponseCode.UPLOAD_IN_PROGRESS: "Another upload is still being processed",
    ResponseCode.INTERNAL_ERROR: "An internal error occurred",
    ResponseCode.CONFIGURATION_ERROR: "Server is missing required configuration",
    ResponseCode.DEPENDENCY_UNAVAILABLE: "A document parsing engine is unavailable",
    ResponseCode.UPSTREAM_ERROR: "Completion API returned an error",
    ResponseCode.NETWORK_ERROR: "Completion API could not be reached",
}

# HTTP status codes for each response code
HTTP_STATUS_MAP: dict[ResponseCode, int] = {
    ResponseCode.SUCCESS: 200,
    ResponseCode.DOCUMENT_UPLOADED: 201,
    ResponseCode.DOCUMENT_DELETED: 200,
    ResponseCode.DOCUMENTS_CLEARED: 200,
    ResponseCode.REPLY_WITH_ERROR: 200,
    ResponseCode.VALIDATION_ERROR: 422,
    ResponseCode.UNSUPPORTED_FILE_TYPE: 400,
    ResponseCode.DOCUMENT_NOT_FOUND: 404,
    ResponseCode.EMPTY_DOCUMENT: 400,
    ResponseCode.CORRUPTED_FILE: 400,
    ResponseCode.NO_DOCUMENTS_EXTRACTED: 400,
    ResponseCode.CHAT_BUSY: 409,
    ResponseCode.UPLOAD_IN_PROGRESS: 409,
    ResponseCode.INTERNAL_ERROR: 500,
    ResponseCode.CONFIGURATION_ERROR: 500,
    ResponseCode.DEPENDENCY_UNAVAILABLE: 503,
    ResponseCode.UPSTREAM_ERROR: 502,
    ResponseCode.NETWORK_ERROR: 504,
}


def get_message(code: ResponseCode) -> str:
    """Get the message for a response code."""
    return RESPONSE_MESSAGES.get(code, "Unknown error")


def get_http_status(code: ResponseCode) -> int:
    """Get HTTP status code for a response code."""
    return HTTP_STATUS_MAP.get(code, 500)


def success_dict(
    code: ResponseCode,
    data: Any = None,
    custom_message: str | None = None,
    request_id: str | None = None,
) -> dict[str, Any]:
    """Build a standardized success response dictionary."""
    return {
        "code": code.value,
        "success": True,
        "message": custom_message or get_message(code),
        "timestamp": datetime.now(UTC).isoformat(),
        "request_id": request_id,
        "data": data,
    }


def error_dict(
    code: ResponseCode,
    custom_message: str | None = None,
    error_details: dict[str, Any] | None = None,
    request_id: str | None = None,
) -> dict[str, Any]:
    """Build a standardized error response dictionary."""
    return {
        "code": code.value,
        "success": False,
        "message": custom_message or get_message(code),
        "timestamp": datetime.now(UTC).isoformat(),
        "request_id": request_id,
        "error_details": error_details,
    }


# --- JSONResponse helpers ---


def success_response(
    code: ResponseCode,
    data: Any = None,
    request_id: str | None = None,
) -> JSONResponse:
    """Create a JSONResponse with success format."""
    return JSONResponse(
        content=success_dict(code, data, request_id=request_id),
        status_code=get_http_status(code),
    )


def error_response(
    code: ResponseCode,
    custom_message: str | None = None,
    request_id: str | None = None,
    error_details: dict[str, Any] | None = None,
) -> JSONResponse:
    """Create a JSONResponse with error format."""
    return JSONResponse(
        content=error_dict(code, custom_message, error_details, request_id),
        status_code=get_http_status(code),
    )
