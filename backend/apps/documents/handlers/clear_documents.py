"""DELETE /documents - Remove every document from the session."""

import logging
import uuid

from fastapi import Depends
from fastapi.responses import JSONResponse

from apps.documents.handlers.schemas import NotificationItem
from dependencies import get_session
from responses import ResponseCode, success_response
from services import ChatSession

logger = logging.getLogger(__name__)


async def clear_documents(
    session: ChatSession = Depends(get_session),
) -> JSONResponse:
    """Clear all documents."""
    request_id = str(uuid.uuid4())[:8]
    cleared = len(session.documents)
    logger.info("[%s] Clearing %d documents", request_id, cleared)

    notification = session.clear_documents()

    return success_response(
        ResponseCode.DOCUMENTS_CLEARED,
        {
            "documents_cleared": cleared,
            "notification": NotificationItem.from_notification(notification).model_dump(),
        },
        request_id,
    )
