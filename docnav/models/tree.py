from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Union

from docnav.models.document import Document


class MalformedSlugError(ValueError):
    """Raised when a slug is empty or contains an empty segment."""

    def __init__(self, slug: str, reason: str) -> None:
        super().__init__(f"Malformed slug {slug!r}: {reason}")
        self.slug = slug
        self.reason = reason


@dataclass(frozen=True, slots=True)
class Leaf:
    """Tree node wrapping exactly one document."""

    name: str
    document: Document
    position: int = 0

    @property
    def slug(self) -> str:
        return self.document.slug


@dataclass(frozen=True, slots=True)
class Folder:
    """Tree node grouping children under a shared slug prefix.

    ``path`` is the ``/``-joined chain of segment names from the root; the
    root folder has an empty name and path. ``children`` keeps insertion
    order and is owned by this folder alone.
    """

    name: str
    path: str
    children: Dict[str, "TreeNode"] = field(default_factory=dict)

    def child_path(self, name: str) -> str:
        return f"{self.path}/{name}" if self.path else name


TreeNode = Union[Leaf, Folder]


class IssueKind(str, Enum):
    MALFORMED_SLUG = "malformed_slug"
    NODE_KIND_CONFLICT = "node_kind_conflict"
    DUPLICATE_SLUG = "duplicate_slug"


@dataclass(frozen=True, slots=True)
class BuildIssue:
    """A catalog entry the tree builder rejected, reported next to the tree."""

    kind: IssueKind
    slug: str
    path: str
    message: str

    def to_public_dict(self) -> Dict[str, str]:
        return {
            "kind": self.kind.value,
            "slug": self.slug,
            "path": self.path,
            "message": self.message,
        }


__all__ = [
    "BuildIssue",
    "Folder",
    "IssueKind",
    "Leaf",
    "MalformedSlugError",
    "TreeNode",
]
