"""DELETE /documents/{doc_id} - Remove a document from the session."""

import logging
import uuid

from fastapi import Depends
from fastapi.responses import JSONResponse

from apps.documents.handlers.schemas import NotificationItem
from dependencies import get_session
from responses import ResponseCode, success_response
from services import ChatSession

logger = logging.getLogger(__name__)


async def delete_document(
    doc_id: str,
    session: ChatSession = Depends(get_session),
) -> JSONResponse:
    """Remove a document. Unknown ids are not an error."""
    request_id = str(uuid.uuid4())[:8]
    logger.info("[%s] Delete request for doc: %s", request_id, doc_id)

    notification = session.remove_document(doc_id)

    return success_response(
        ResponseCode.DOCUMENT_DELETED,
        {
            "doc_id": doc_id,
            "total_documents": len(session.documents),
            "notification": NotificationItem.from_notification(notification).model_dump(),
        },
        request_id,
    )
