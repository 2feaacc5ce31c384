from __future__ import annotations

import asyncio
import logging
from datetime import datetime, timedelta, timezone
from typing import AbstractSet, Any, Dict, Optional

from docnav.navigation.renderer import to_dicts
from docnav.navigation.state import SidebarStateMachine
from docnav.server.documents.service import DocumentService
from docnav.server.models import RouteChange, SessionCreate, SessionSnapshot, SidebarSession, ToggleRequest

logger = logging.getLogger(__name__)

_SESSIONS: dict[str, SidebarSession] = {}
_SESSION_LOCK = asyncio.Lock()


def _prune_expired(ttl_seconds: Optional[int]) -> None:
    """Drop sessions idle for longer than ``ttl_seconds``. Caller holds the lock."""

    if not ttl_seconds:
        return
    cutoff = datetime.now(timezone.utc) - timedelta(seconds=ttl_seconds)
    expired = [session_id for session_id, session in _SESSIONS.items() if session.updated_at < cutoff]
    for session_id in expired:
        _SESSIONS.pop(session_id, None)
    if expired:
        logger.info("Evicted %d idle sidebar sessions", len(expired))


async def create_session(
    payload: SessionCreate | Dict[str, Any],
    ttl_seconds: Optional[int] = None,
) -> SidebarSession:
    """Open a sidebar view, expanding the folders that lead to the active document."""

    request_model = payload if isinstance(payload, SessionCreate) else SessionCreate.model_validate(payload)
    async with _SESSION_LOCK:
        _prune_expired(ttl_seconds)
        if request_model.session_id and request_model.session_id in _SESSIONS:
            session = _SESSIONS[request_model.session_id]
            session.touch()
            return session
        session = SidebarSession(machine=SidebarStateMachine(request_model.active))
        if request_model.session_id:
            session.session_id = request_model.session_id
        _SESSIONS[session.session_id] = session
    logger.info("Opened sidebar session %s (active=%r)", session.session_id, request_model.active)
    return session


async def get_session(session_id: str, ttl_seconds: Optional[int] = None) -> SidebarSession:
    async with _SESSION_LOCK:
        _prune_expired(ttl_seconds)
        if session_id not in _SESSIONS:
            raise KeyError(session_id)
        return _SESSIONS[session_id]


async def change_route(
    session_id: str,
    payload: RouteChange,
    ttl_seconds: Optional[int] = None,
) -> SidebarSession:
    async with _SESSION_LOCK:
        _prune_expired(ttl_seconds)
        session = _SESSIONS.get(session_id)
        if session is None:
            raise KeyError(session_id)
        session.machine.on_route_change(payload.active)
        session.touch()
    return session


async def toggle_folder(
    session_id: str,
    payload: ToggleRequest,
    known_paths: Optional[AbstractSet[str]] = None,
    ttl_seconds: Optional[int] = None,
) -> SidebarSession:
    """Apply a toggle event; paths outside ``known_paths`` leave the session untouched."""

    async with _SESSION_LOCK:
        _prune_expired(ttl_seconds)
        session = _SESSIONS.get(session_id)
        if session is None:
            raise KeyError(session_id)
        session.machine.toggle(payload.path, known_paths)
        session.touch()
    return session


async def close_session(session_id: str) -> None:
    async with _SESSION_LOCK:
        if _SESSIONS.pop(session_id, None) is None:
            raise KeyError(session_id)
    logger.info("Closed sidebar session %s", session_id)


def snapshot(session: SidebarSession, service: DocumentService) -> SessionSnapshot:
    machine = session.machine
    rendered = service.render(machine.state, machine.active_slug)
    return SessionSnapshot(
        session_id=session.session_id,
        active=machine.active_slug,
        expanded=sorted(machine.state),
        items=to_dicts(rendered.items),
    )


__all__ = [
    "change_route",
    "close_session",
    "create_session",
    "get_session",
    "snapshot",
    "toggle_folder",
]
