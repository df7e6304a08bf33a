"""Chat handlers."""

from apps.chat.handlers.get_chat_history import get_chat_history
from apps.chat.handlers.send_message import send_message

__all__ = [
    "send_message",
    "get_chat_history",
]
