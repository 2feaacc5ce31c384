from __future__ import annotations

import re
from pathlib import Path, PurePath


_WORD_SEPARATOR_PATTERN = re.compile(r"[-_]")


def humanize(segment: str) -> str:
    """Turn a slug segment such as ``getting-started`` into ``getting started``."""

    return _WORD_SEPARATOR_PATTERN.sub(" ", segment)


def slug_from_path(path: Path, root: Path) -> str:
    """Derive a document slug from its location below the docs root.

    The extension is dropped and OS separators become ``/``.
    """

    relative = PurePath(path).relative_to(root)
    return relative.with_name(relative.stem).as_posix()


__all__ = ["humanize", "slug_from_path"]
