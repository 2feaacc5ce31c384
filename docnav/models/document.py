from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Optional

logger = logging.getLogger(__name__)

DEFAULT_TITLE = "Untitled"
DEFAULT_INDEX = 0


@dataclass(frozen=True, slots=True)
class Document:
    """A catalog entry: one content document addressed by its slug."""

    slug: str
    title: str = DEFAULT_TITLE
    index: float = DEFAULT_INDEX
    description: Optional[str] = None
    metadata: Dict[str, Any] = field(default_factory=dict, compare=False, repr=False)

    @classmethod
    def from_metadata(cls, slug: str, metadata: Mapping[str, Any] | None) -> "Document":
        """Build a Document from parsed front matter, applying title/index defaults."""

        data = dict(metadata or {})
        title = data.get("title")
        description = data.get("description")
        return cls(
            slug=slug,
            title=str(title) if title else DEFAULT_TITLE,
            index=_coerce_index(slug, data.get("index")),
            description=str(description) if description is not None else None,
            metadata=data,
        )

    def to_summary(self) -> Dict[str, Any]:
        return {
            "slug": self.slug,
            "title": self.title,
            "index": self.index,
            "description": self.description,
        }


@dataclass(frozen=True, slots=True)
class LoadedDocument:
    """A single document with its raw markdown body, as served to a page."""

    document: Document
    body: str

    def to_public_dict(self) -> Dict[str, Any]:
        return {
            "slug": self.document.slug,
            "title": self.document.title,
            "description": self.document.description,
            "body": self.body,
            "metadata": self.document.metadata,
        }


def _coerce_index(slug: str, raw: object) -> float:
    if raw is None:
        return DEFAULT_INDEX
    if isinstance(raw, bool):
        logger.warning("Ignoring boolean index %r on document %s", raw, slug)
        return DEFAULT_INDEX
    if isinstance(raw, int):
        return raw
    if isinstance(raw, float):
        value = raw
    else:
        try:
            value = float(str(raw).strip())
        except ValueError:
            value = math.nan
    if not math.isfinite(value):
        logger.warning("Ignoring non-numeric index %r on document %s", raw, slug)
        return DEFAULT_INDEX
    return int(value) if value.is_integer() else value


__all__ = ["DEFAULT_INDEX", "DEFAULT_TITLE", "Document", "LoadedDocument"]
