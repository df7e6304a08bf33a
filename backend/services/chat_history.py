"""Conversation log for the current session.

Append-only; only a bounded suffix is ever sent upstream.
"""

import logging
from collections.abc import Iterator

from services.types import Message, Role

logger = logging.getLogger(__name__)


class ConversationLog:
    """Ordered, append-only list of messages."""

    def __init__(self, greeting: str | None = None) -> None:
        self._messages: list[Message] = []
        if greeting:
            self.append(Message(role=Role.ASSISTANT, content=greeting))

    def __len__(self) -> int:
        return len(self._messages)

    def __iter__(self) -> Iterator[Message]:
        return iter(tuple(self._messages))

    def append(self, message: Message) -> None:
        if not isinstance(message.content, str):
            raise TypeError(
                f"Message content must be str, got {type(message.content).__name__}"
            )
        self._messages.append(message)
        logger.debug("Log +%s (%d chars)", message.role.value, len(message.content))

    def messages(self) -> tuple[Message, ...]:
        return tuple(self._messages)

    def recent(self, count: int) -> tuple[Message, ...]:
        """Return the last count messages."""
        if count <= 0:
            return ()
        return tuple(self._messages[-count:])
