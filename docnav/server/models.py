from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Dict, List

from pydantic import BaseModel, Field

from docnav.navigation.state import SidebarStateMachine


class SessionCreate(BaseModel):
    """Client payload for opening a sidebar view."""

    active: str | None = Field(default=None, description="Slug of the document currently displayed")
    session_id: str | None = Field(default=None, description="Optional client-provided id for idempotency")


class RouteChange(BaseModel):
    active: str | None = None


class ToggleRequest(BaseModel):
    path: str = Field(description="Folder path to open or close, e.g. guide/advanced")


class SessionSnapshot(BaseModel):
    session_id: str
    active: str | None
    expanded: List[str]
    items: List[Dict[str, Any]]


@dataclass(slots=True)
class SidebarSession:
    """In-memory sidebar view owning its own expansion state machine."""

    session_id: str = field(default_factory=lambda: str(uuid.uuid4()))
    machine: SidebarStateMachine = field(default_factory=SidebarStateMachine)
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def touch(self) -> None:
        self.updated_at = datetime.now(timezone.utc)


__all__ = [
    "RouteChange",
    "SessionCreate",
    "SessionSnapshot",
    "SidebarSession",
    "ToggleRequest",
]
