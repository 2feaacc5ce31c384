from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Literal, Optional

from docnav.models.tree import Folder
from docnav.navigation.order import OrderResolver
from docnav.navigation.state import ExpansionState, normalize_slug

ItemType = Literal["leaf", "folder"]


@dataclass(slots=True)
class SidebarItem:
    """One row of the rendered sidebar.

    Leaves carry ``is_active``; folders carry ``is_open`` and, when open,
    their rendered children.
    """

    type: ItemType
    title: str
    path: str
    is_open: Optional[bool] = None
    is_active: Optional[bool] = None
    children: List["SidebarItem"] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        if self.type == "leaf":
            return {
                "type": "leaf",
                "title": self.title,
                "slug": self.path,
                "is_active": bool(self.is_active),
            }
        return {
            "type": "folder",
            "display_name": self.title,
            "path": self.path,
            "is_open": bool(self.is_open),
            "children": [child.to_dict() for child in self.children],
        }


def render_sidebar(
    root: Folder,
    state: ExpansionState,
    active_slug: Optional[str] = None,
    resolver: OrderResolver | None = None,
) -> List[SidebarItem]:
    """Render the ordered sidebar rows for ``root`` under the given expansion state."""

    return _render_level(root, state, normalize_slug(active_slug), resolver or OrderResolver())


def _render_level(
    folder: Folder,
    state: ExpansionState,
    active_slug: Optional[str],
    resolver: OrderResolver,
) -> List[SidebarItem]:
    ordered = resolver.order_children(folder)
    items = [
        SidebarItem(
            type="leaf",
            title=leaf.document.title,
            path=leaf.slug,
            is_active=active_slug is not None and leaf.slug == active_slug,
        )
        for leaf in ordered.leaves
    ]
    for child in ordered.folders:
        is_open = child.path in state
        items.append(
            SidebarItem(
                type="folder",
                title=resolver.folder_meta(child).display_name,
                path=child.path,
                is_open=is_open,
                children=_render_level(child, state, active_slug, resolver) if is_open else [],
            )
        )
    return items


def to_dicts(items: List[SidebarItem]) -> List[Dict[str, Any]]:
    return [item.to_dict() for item in items]


__all__ = ["ItemType", "SidebarItem", "render_sidebar", "to_dicts"]
