"""Chat module - message handling and history."""

from apps.chat.routes import router

__all__ = ["router"]
