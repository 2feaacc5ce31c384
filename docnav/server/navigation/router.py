from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Query

from docnav.navigation.renderer import to_dicts
from docnav.navigation.state import initial_state, normalize_slug
from docnav.server.documents import get_document_service
from docnav.server.documents.service import DocumentService
from docnav.server.models import RouteChange, SessionCreate, SessionSnapshot, ToggleRequest
from . import sessions

router = APIRouter(prefix="/api/navigation", tags=["navigation"])


@router.get("")
def get_navigation(
    active: str | None = Query(default=None, description="Slug of the document currently displayed"),
    service: DocumentService = Depends(get_document_service),
):
    active = normalize_slug(active)
    rendered = service.render(initial_state(active), active)
    return {
        "active": active,
        "items": to_dicts(rendered.items),
        "issues": [issue.to_public_dict() for issue in rendered.issues],
    }


@router.post("/sessions", response_model=SessionSnapshot)
async def open_session(
    payload: SessionCreate,
    service: DocumentService = Depends(get_document_service),
) -> SessionSnapshot:
    session = await sessions.create_session(payload, ttl_seconds=service.settings.session_ttl_seconds)
    return sessions.snapshot(session, service)


@router.get("/sessions/{session_id}", response_model=SessionSnapshot)
async def get_session(
    session_id: str,
    service: DocumentService = Depends(get_document_service),
) -> SessionSnapshot:
    try:
        session = await sessions.get_session(session_id, ttl_seconds=service.settings.session_ttl_seconds)
    except KeyError as exc:
        raise HTTPException(status_code=404, detail=f"Session not found: {exc.args[0]}") from exc
    return sessions.snapshot(session, service)


@router.post("/sessions/{session_id}/route", response_model=SessionSnapshot)
async def change_route(
    session_id: str,
    payload: RouteChange,
    service: DocumentService = Depends(get_document_service),
) -> SessionSnapshot:
    try:
        session = await sessions.change_route(
            session_id, payload, ttl_seconds=service.settings.session_ttl_seconds
        )
    except KeyError as exc:
        raise HTTPException(status_code=404, detail=f"Session not found: {exc.args[0]}") from exc
    return sessions.snapshot(session, service)


@router.post("/sessions/{session_id}/toggle", response_model=SessionSnapshot)
async def toggle_folder(
    session_id: str,
    payload: ToggleRequest,
    service: DocumentService = Depends(get_document_service),
) -> SessionSnapshot:
    try:
        session = await sessions.toggle_folder(
            session_id,
            payload,
            known_paths=service.folder_paths(),
            ttl_seconds=service.settings.session_ttl_seconds,
        )
    except KeyError as exc:
        raise HTTPException(status_code=404, detail=f"Session not found: {exc.args[0]}") from exc
    return sessions.snapshot(session, service)


@router.delete("/sessions/{session_id}")
async def close_session(session_id: str) -> dict[str, str]:
    try:
        await sessions.close_session(session_id)
    except KeyError as exc:
        raise HTTPException(status_code=404, detail=f"Session not found: {exc.args[0]}") from exc
    return {"status": "closed"}


__all__ = ["router"]
