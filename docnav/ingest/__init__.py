"""Catalog collaborators: turn a docs directory into Document records."""

from .utils import humanize, slug_from_path
from .catalog import DEFAULT_PATTERN, CatalogConfig, MarkdownCatalog, parse_front_matter

__all__ = [
    "DEFAULT_PATTERN",
    "CatalogConfig",
    "MarkdownCatalog",
    "humanize",
    "parse_front_matter",
    "slug_from_path",
]
