"""Documents module - upload, listing and removal."""

from apps.documents.routes import router

__all__ = ["router"]
