from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Iterator, List, Tuple

import yaml

from docnav.ingest.utils import slug_from_path
from docnav.models.document import Document, LoadedDocument
from docnav.models.tree import MalformedSlugError
from docnav.navigation.tree_builder import split_slug

logger = logging.getLogger(__name__)

DEFAULT_PATTERN = "**/*.md"
_FRONT_MATTER_PATTERN = re.compile(r"\A---[ \t]*\r?\n(?P<meta>.*?)^---[ \t]*(?:\r?\n|\Z)", re.DOTALL | re.MULTILINE)


@dataclass(slots=True)
class CatalogConfig:
    """Where documents live and how they are recognised."""

    pattern: str = DEFAULT_PATTERN
    extension: str = ".md"
    skip_hidden: bool = True


def parse_front_matter(text: str, source: str = "<string>") -> Tuple[Dict[str, Any], str]:
    """Split a leading ``---`` YAML block from the markdown body.

    Unparsable or non-mapping front matter is logged and treated as empty.
    """

    match = _FRONT_MATTER_PATTERN.match(text)
    if not match:
        return {}, text

    body = text[match.end():]
    try:
        data = yaml.safe_load(match.group("meta"))
    except yaml.YAMLError as exc:
        logger.warning("Invalid front matter in %s: %s", source, exc)
        return {}, body
    if data is None:
        return {}, body
    if not isinstance(data, dict):
        logger.warning("Front matter in %s is not a mapping; ignoring it", source)
        return {}, body
    return data, body


class MarkdownCatalog:
    """Reads markdown documents below a docs directory into a catalog."""

    def __init__(self, docs_dir: Path, config: CatalogConfig | None = None) -> None:
        self.docs_dir = Path(docs_dir)
        self.config = config or CatalogConfig()

    def iter_paths(self) -> Iterator[Path]:
        if not self.docs_dir.is_dir():
            raise FileNotFoundError(f"Docs directory not found: {self.docs_dir}")
        for path in sorted(self.docs_dir.glob(self.config.pattern)):
            if not path.is_file():
                continue
            relative = path.relative_to(self.docs_dir)
            if self.config.skip_hidden and any(part.startswith(".") for part in relative.parts):
                continue
            yield path

    def scan(self) -> List[Document]:
        """Return the catalog in a stable, path-sorted order."""

        documents: List[Document] = []
        for path in self.iter_paths():
            try:
                document, _ = self._read(path)
            except (UnicodeDecodeError, OSError) as exc:
                logger.warning("Skipping unreadable document %s: %s", path, exc)
                continue
            documents.append(document)
        logger.info("Scanned %d documents under %s", len(documents), self.docs_dir)
        return documents

    def load(self, slug: str) -> LoadedDocument:
        """Load one document and its raw markdown body by slug."""

        path = self.path_for(slug)
        if not path.is_file():
            raise FileNotFoundError(f"Document not found: {slug}")
        document, body = self._read(path)
        return LoadedDocument(document=document, body=body)

    def path_for(self, slug: str) -> Path:
        segments = split_slug(slug)
        if any(segment in {".", ".."} for segment in segments):
            raise MalformedSlugError(slug, "relative segments are not allowed")
        *parents, name = segments
        return self.docs_dir.joinpath(*parents, f"{name}{self.config.extension}")

    def _read(self, path: Path) -> Tuple[Document, str]:
        text = path.read_text(encoding="utf-8")
        metadata, body = parse_front_matter(text, source=str(path))
        slug = slug_from_path(path, self.docs_dir)
        return Document.from_metadata(slug, metadata), body


__all__ = [
    "DEFAULT_PATTERN",
    "CatalogConfig",
    "MarkdownCatalog",
    "parse_front_matter",
]
