from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Mapping

from docnav.ingest.utils import humanize
from docnav.models.configs import DEFAULT_FOLDER_ORDER, NavigationConfig
from docnav.models.tree import Folder, Leaf


@dataclass(frozen=True, slots=True)
class FolderMeta:
    display_name: str
    order: int = DEFAULT_FOLDER_ORDER


class FolderConfig:
    """Static lookup of folder labels and ranks, keyed by a single segment name."""

    def __init__(self, entries: Mapping[str, FolderMeta] | None = None) -> None:
        self.entries: Dict[str, FolderMeta] = dict(entries or {})

    @classmethod
    def from_navigation_config(cls, config: NavigationConfig) -> "FolderConfig":
        return cls(
            {
                name: FolderMeta(
                    display_name=entry.display_name or humanize(name),
                    order=entry.order,
                )
                for name, entry in config.folders.items()
            }
        )

    def resolve(self, name: str) -> FolderMeta:
        meta = self.entries.get(name)
        if meta is not None:
            return meta
        return FolderMeta(display_name=humanize(name), order=DEFAULT_FOLDER_ORDER)


@dataclass(slots=True)
class OrderedChildren:
    """One folder level in display order: leaves first, then sub-folders."""

    leaves: List[Leaf] = field(default_factory=list)
    folders: List[Folder] = field(default_factory=list)


class OrderResolver:
    """Compute the rendering order of a folder's children without touching the tree."""

    def __init__(self, config: FolderConfig | None = None) -> None:
        self.config = config if config is not None else FolderConfig()

    def folder_meta(self, folder: Folder) -> FolderMeta:
        return self.config.resolve(folder.name)

    def order_children(self, folder: Folder) -> OrderedChildren:
        leaves: List[Leaf] = []
        folders: List[Folder] = []
        for node in folder.children.values():
            if isinstance(node, Leaf):
                leaves.append(node)
            else:
                folders.append(node)

        # Ties on index fall back to catalog position, never to the title.
        leaves.sort(key=lambda leaf: (leaf.document.index, leaf.position))
        folders.sort(key=lambda child: (self.folder_meta(child).order, child.name))
        return OrderedChildren(leaves=leaves, folders=folders)


__all__ = ["FolderConfig", "FolderMeta", "OrderResolver", "OrderedChildren"]
