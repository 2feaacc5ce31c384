"""Expand/collapse state for the documentation sidebar.

The expansion state is an immutable set of folder paths. ``toggle`` is a pure
transition; :class:`SidebarStateMachine` holds the current state for one
live sidebar view and applies route changes and toggle events to it.
"""

from __future__ import annotations

import logging
from typing import AbstractSet, FrozenSet, Optional, Tuple

from docnav.navigation.tree_builder import SEPARATOR

logger = logging.getLogger(__name__)

ExpansionState = FrozenSet[str]

EMPTY_STATE: ExpansionState = frozenset()


def depth(path: str) -> int:
    """Nesting level of a folder path: ``"a"`` is 1, ``"a/b"`` is 2."""

    return path.count(SEPARATOR) + 1


def normalize_slug(slug: Optional[str]) -> Optional[str]:
    """Drop empty segments, such as a leading slash copied from a URL.

    Returns ``None`` when nothing is left.
    """

    if not slug:
        return None
    return SEPARATOR.join(segment for segment in slug.split(SEPARATOR) if segment) or None


def ancestor_paths(slug: Optional[str]) -> Tuple[str, ...]:
    """Folder paths leading to ``slug``, shortest first: ``"a/b/c"`` yields ``("a", "a/b")``."""

    normalized = normalize_slug(slug)
    if normalized is None:
        return ()
    segments = normalized.split(SEPARATOR)
    return tuple(SEPARATOR.join(segments[:end]) for end in range(1, len(segments)))


def initial_state(active_slug: Optional[str]) -> ExpansionState:
    return frozenset(ancestor_paths(active_slug))


def toggle(
    state: ExpansionState,
    path: str,
    known_paths: Optional[AbstractSet[str]] = None,
) -> ExpansionState:
    """Open or close ``path``, closing any other open folder at the same depth.

    Paths at other depths keep their status. When ``known_paths`` is given,
    a path outside it leaves the state unchanged.
    """

    path = normalize_slug(path)
    if path is None:
        return state
    if known_paths is not None and path not in known_paths:
        return state
    level = depth(path)
    remaining = {other for other in state if other != path and depth(other) != level}
    if path not in state:
        remaining.add(path)
    return frozenset(remaining)


class SidebarStateMachine:
    """Tracks which folders are expanded for a single sidebar view."""

    def __init__(self, active_slug: Optional[str] = None) -> None:
        self._active_slug: Optional[str] = None
        self._state: ExpansionState = EMPTY_STATE
        self._initialized = False
        if active_slug is not None:
            self.on_route_change(active_slug)

    @property
    def state(self) -> ExpansionState:
        return self._state

    @property
    def active_slug(self) -> Optional[str]:
        return self._active_slug

    def on_route_change(self, active_slug: Optional[str]) -> ExpansionState:
        """Reset the expansion set to the ancestors of the newly active document."""

        active_slug = normalize_slug(active_slug)
        if self._initialized and active_slug == self._active_slug:
            return self._state
        self._active_slug = active_slug
        self._state = initial_state(active_slug)
        self._initialized = True
        logger.debug("Route changed to %r; expanded %s", active_slug, sorted(self._state))
        return self._state

    def toggle(self, path: str, known_paths: Optional[AbstractSet[str]] = None) -> ExpansionState:
        self._state = toggle(self._state, path, known_paths)
        logger.debug("Toggled %r; expanded %s", path, sorted(self._state))
        return self._state

    def is_open(self, path: str) -> bool:
        return path in self._state


__all__ = [
    "EMPTY_STATE",
    "ExpansionState",
    "SidebarStateMachine",
    "ancestor_paths",
    "depth",
    "initial_state",
    "normalize_slug",
    "toggle",
]
