from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import FrozenSet, List, Optional

from docnav.ingest.catalog import DEFAULT_PATTERN, CatalogConfig, MarkdownCatalog
from docnav.models.configs import NavigationConfig
from docnav.models.document import Document, LoadedDocument
from docnav.models.tree import BuildIssue, MalformedSlugError
from docnav.navigation.order import FolderConfig, OrderResolver
from docnav.navigation.renderer import SidebarItem, render_sidebar
from docnav.navigation.state import ExpansionState
from docnav.navigation.tree_builder import TreeBuildResult, build_tree, iter_folders
from docnav.orchestration.config_loader import load_navigation_config
from docnav.server.settings import Settings

logger = logging.getLogger(__name__)

DEFAULT_DOCS_DIR = Path("docs")


@dataclass(slots=True)
class RenderedSidebar:
    items: List[SidebarItem]
    issues: List[BuildIssue] = field(default_factory=list)


class DocumentService:
    """Serves the document catalog and renders the sidebar over it.

    The docs directory is rescanned on every call so edits show up without a
    restart; the navigation config is read once at startup. Explicit settings
    win over ``docs_dir``/``pattern`` from the config file.
    """

    def __init__(self, settings: Settings) -> None:
        self.settings = settings
        nav_config = (
            load_navigation_config(settings.nav_folders_file)
            if settings.nav_folders_file is not None
            else NavigationConfig()
        )
        docs_dir = settings.docs_dir or nav_config.docs_dir or DEFAULT_DOCS_DIR
        pattern = settings.docs_pattern or nav_config.pattern or DEFAULT_PATTERN
        self.catalog = MarkdownCatalog(docs_dir, CatalogConfig(pattern=pattern))
        self.resolver = OrderResolver(FolderConfig.from_navigation_config(nav_config))
        logger.info("Serving documents from %s (pattern=%s)", docs_dir, pattern)

    # ------------------------------------------------------------------ public API
    def list_documents(self) -> List[Document]:
        return self.catalog.scan()

    def get_document(self, slug: str) -> Optional[LoadedDocument]:
        try:
            return self.catalog.load(slug)
        except MalformedSlugError as exc:
            logger.info("Rejected document request: %s", exc)
            return None
        except FileNotFoundError:
            return None
        except (UnicodeDecodeError, OSError) as exc:
            logger.warning("Unreadable document %r: %s", slug, exc)
            return None

    def build_tree(self) -> TreeBuildResult:
        return build_tree(self.list_documents())

    def folder_paths(self) -> FrozenSet[str]:
        """Paths of every folder currently in the tree."""

        return frozenset(folder.path for folder in iter_folders(self.build_tree().root))

    def render(self, state: ExpansionState, active_slug: Optional[str]) -> RenderedSidebar:
        result = self.build_tree()
        items = render_sidebar(result.root, state, active_slug, self.resolver)
        return RenderedSidebar(items=items, issues=result.issues)


__all__ = ["DocumentService", "RenderedSidebar"]
