"""Sidebar navigation: tree building, ordering, expansion state, and rendering."""

from .tree_builder import TreeBuildResult, build_tree, iter_folders, iter_leaves, split_slug
from .order import FolderConfig, FolderMeta, OrderResolver, OrderedChildren
from .state import SidebarStateMachine, ancestor_paths, depth, initial_state, normalize_slug, toggle
from .renderer import SidebarItem, render_sidebar, to_dicts

__all__ = [
    "FolderConfig",
    "FolderMeta",
    "OrderResolver",
    "OrderedChildren",
    "SidebarItem",
    "SidebarStateMachine",
    "TreeBuildResult",
    "ancestor_paths",
    "build_tree",
    "depth",
    "initial_state",
    "iter_folders",
    "iter_leaves",
    "normalize_slug",
    "render_sidebar",
    "split_slug",
    "to_dicts",
    "toggle",
]
