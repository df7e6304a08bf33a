"""Chat session: the single owner of documents and conversation state.

Flow for a message:
1. Classify the query (document question or not)
2. Assemble the bounded request from documents and history
3. Call the completion API
4. Append the reply, or the error text, to the conversation log
"""

import logging
import uuid
from collections.abc import Iterable
from dataclasses import dataclass

from config import Settings
from llm import BaseLLMService, CompletionMode, LLMError
from services.chat_history import ConversationLog
from services.classifier import RelevanceClassifier
from services.document import DocumentParser, ExtractionError
from services.prompt_builder import PromptAssembler
from services.store import DocumentStore
from services.types import (
    FileHandle,
    Message,
    Notification,
    Role,
    Severity,
    UploadFailure,
    UploadResult,
)
from utils import truncate_text

logger = logging.getLogger(__name__)


class UploadInProgressError(Exception):
    """Raised when an upload batch starts while another is still running."""


@dataclass(frozen=True)
class ChatTurn:
    """Result of sending one message."""

    reply: Message
    mode: CompletionMode
    error: LLMError | None = None

    @property
    def failed(self) -> bool:
        return self.error is not None


class ChatSession:
    """Session context holding the Document Store and Conversation Log.

    All state lives on this object; nothing is persisted.
    """

    def __init__(
        self,
        settings: Settings,
        llm: BaseLLMService,
        parser: DocumentParser | None = None,
        classifier: RelevanceClassifier | None = None,
        assembler: PromptAssembler | None = None,
    ) -> None:
        self.settings = settings
        self.llm = llm
        self.parser = parser or DocumentParser(settings.min_content_chars)
        self.classifier = classifier or RelevanceClassifier()
        self.assembler = assembler or PromptAssembler(
            document_char_limit=settings.document_char_limit,
            document_history_window=settings.document_history_window,
            chat_history_window=settings.chat_history_window,
        )
        self.documents = DocumentStore()
        self.history = ConversationLog(greeting=settings.greeting)
        self.processing_files = False
        self.busy = False

    # --- Documents ---

    async def upload(self, files: Iterable[FileHandle]) -> UploadResult:
        """Extract and store files one at a time, in the given order.

        A failing file produces an error notification and does not stop
        the rest of the batch.

        Raises:
            UploadInProgressError: If another batch is still being processed
        """
        # check and set with no await in between
        if self.processing_files:
            raise UploadInProgressError("Another upload is still being processed")
        self.processing_files = True
        result = UploadResult()
        try:
            for file in files:
                try:
                    document = await self.parser.parse(file)
                except ExtractionError as e:
                    logger.warning("Upload failed for %s: %s", file.name, e)
                    result.failures.append(UploadFailure(file.name, e))
                    result.notifications.append(
                        Notification(f"{file.name}: {e}", Severity.ERROR)
                    )
                    continue

                self.documents.add(document)
                result.added.append(document)
                result.notifications.append(
                    Notification(f"{file.name} uploaded successfully!", Severity.SUCCESS)
                )
        finally:
            self.processing_files = False

        logger.info(
            "Upload batch done: %d added, %d documents in session",
            len(result.added),
            len(self.documents),
        )
        return result

    def remove_document(self, doc_id: str) -> Notification:
        removed = self.documents.remove(doc_id)
        if removed:
            logger.info("Removed document %s", doc_id)
        return Notification("Document removed", Severity.INFO)

    def clear_documents(self) -> Notification:
        self.documents.clear()
        logger.info("Cleared all documents")
        return Notification("All documents cleared", Severity.INFO)

    # --- Chat ---

    async def send_message(self, text: str) -> ChatTurn | None:
        """Send a user message and append the reply to the log.

        Returns None without doing anything when text is blank or another
        send is still in flight.
        """
        if not text.strip() or self.busy:
            return None

        request_id = str(uuid.uuid4())[:8]
        user_message = Message(role=Role.USER, content=text)
        prior = self.history.messages()
        self.history.append(user_message)

        documents = self.documents.snapshot()
        use_documents = self.classifier.classify(text, len(documents))
        mode = CompletionMode.DOCUMENT if use_documents else CompletionMode.CHAT
        messages = self.assembler.assemble(documents, use_documents, prior, user_message)

        logger.info(
            "[%s] Chat (%s, %d messages): %s",
            request_id,
            mode.value,
            len(messages),
            truncate_text(text),
        )

        self.busy = True
        try:
            content = await self.llm.complete(messages, mode)
            reply = Message(role=Role.ASSISTANT, content=content)
            error = None
        except LLMError as e:
            logger.warning("[%s] Completion failed: %s", request_id, e)
            reply = Message(role=Role.ASSISTANT, content=f"Error: {e}")
            error = e
        except Exception as e:
            logger.exception("[%s] Unexpected completion failure", request_id)
            error = LLMError(f"Unexpected error: {type(e).__name__}")
            reply = Message(role=Role.ASSISTANT, content=f"Error: {error}")
        finally:
            self.busy = False

        self.history.append(reply)
        return ChatTurn(reply=reply, mode=mode, error=error)
