"""Builds the bounded message list sent to the completion API.

Two modes:
- Document mode: one system message carrying every stored document (each cut
  to a character cap) and the question, plus a short slice of history.
- Chat mode: a slightly longer slice of history and nothing else.
"""

from collections.abc import Sequence

from llm.prompts import (
    DOCUMENT_QA_HEADER,
    DOCUMENT_QA_INSTRUCTIONS,
    DOCUMENT_SECTION,
    TRUNCATION_MARKER,
)
from services.types import Document, Message, Role

DEFAULT_DOCUMENT_CHAR_LIMIT = 12000
DEFAULT_DOCUMENT_HISTORY_WINDOW = 4
DEFAULT_CHAT_HISTORY_WINDOW = 6


def truncate_document(content: str, limit: int) -> str:
    """Cut content to limit characters, marking the cut."""
    if len(content) > limit:
        return content[:limit] + TRUNCATION_MARKER
    return content


def _tail(messages: Sequence[Message], count: int) -> list[Message]:
    if count <= 0:
        return []
    return list(messages[-count:])


class PromptAssembler:
    """Assembles chat-completion messages from documents and history."""

    def __init__(
        self,
        document_char_limit: int = DEFAULT_DOCUMENT_CHAR_LIMIT,
        document_history_window: int = DEFAULT_DOCUMENT_HISTORY_WINDOW,
        chat_history_window: int = DEFAULT_CHAT_HISTORY_WINDOW,
    ) -> None:
        self.document_char_limit = document_char_limit
        self.document_history_window = document_history_window
        self.chat_history_window = chat_history_window

    def build_system_prompt(self, documents: Sequence[Document], question: str) -> str:
        """Render every document and the question into one system prompt."""
        prompt = DOCUMENT_QA_HEADER.format(count=len(documents)) + "\n"
        for index, document in enumerate(documents, start=1):
            prompt += DOCUMENT_SECTION.format(
                index=index,
                name=document.name,
                content=truncate_document(document.content, self.document_char_limit),
            )
        prompt += DOCUMENT_QA_INSTRUCTIONS.format(question=question)
        return prompt

    def assemble(
        self,
        documents: Sequence[Document],
        use_documents: bool,
        history: Sequence[Message],
        user_message: Message,
    ) -> list[Message]:
        """Build the request messages.

        Args:
            documents: Stored documents in display order.
            use_documents: Relevance classifier verdict for the new message.
            history: Conversation log before the new message.
            user_message: The new user message.

        Returns:
            Messages to dispatch, ending with user_message.
        """
        if documents and use_documents:
            system = Message(
                role=Role.SYSTEM,
                content=self.build_system_prompt(documents, user_message.content),
            )
            recent = [
                m
                for m in _tail(history, self.document_history_window)
                if m.role != Role.SYSTEM
            ]
            return [system, *recent, user_message]

        return [*_tail(history, self.chat_history_window), user_message]
