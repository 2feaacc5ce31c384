from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException

from docnav.server.documents.service import DocumentService
from docnav.server.settings import Settings, get_settings


router = APIRouter(prefix="/api/docs", tags=["docs"])


def _resolve_service(settings: Settings) -> DocumentService:
    global _DOCUMENT_SERVICE
    if _DOCUMENT_SERVICE is None:
        _DOCUMENT_SERVICE = DocumentService(settings)
    return _DOCUMENT_SERVICE


def get_document_service(settings: Settings = Depends(get_settings)) -> DocumentService:
    return _resolve_service(settings)


_DOCUMENT_SERVICE: DocumentService | None = None


@router.get("")
def list_documents(service: DocumentService = Depends(get_document_service)):
    return {"documents": [doc.to_summary() for doc in service.list_documents()]}


@router.get("/{slug:path}")
def get_document(slug: str, service: DocumentService = Depends(get_document_service)):
    loaded = service.get_document(slug)
    if loaded is None:
        raise HTTPException(status_code=404, detail="Document not found")
    return loaded.to_public_dict()


__all__ = ["router", "get_document_service"]
