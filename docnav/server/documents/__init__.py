"""Document catalog service package."""

from .router import router, get_document_service

__all__ = ["router", "get_document_service"]
