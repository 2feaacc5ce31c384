from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Dict, Iterable, Iterator, List, Sequence, Tuple

from docnav.models.document import Document
from docnav.models.tree import BuildIssue, Folder, IssueKind, Leaf, MalformedSlugError, TreeNode

logger = logging.getLogger(__name__)

SEPARATOR = "/"

# (remaining segments, catalog position, document)
_Entry = Tuple[Tuple[str, ...], int, Document]


@dataclass(slots=True)
class TreeBuildResult:
    """The built tree plus every catalog entry that could not be placed in it."""

    root: Folder
    issues: List[BuildIssue] = field(default_factory=list)


def split_slug(slug: str) -> Tuple[str, ...]:
    """Split a slug into its path segments, rejecting empty ones."""

    if not slug:
        raise MalformedSlugError(slug, "slug is empty")
    segments = tuple(slug.split(SEPARATOR))
    if any(not segment for segment in segments):
        raise MalformedSlugError(slug, "slug contains an empty segment")
    return segments


def build_tree(documents: Iterable[Document]) -> TreeBuildResult:
    """Fold a flat document catalog into a root Folder.

    Malformed slugs, duplicate slugs, and leaves shadowed by a folder of the
    same name are left out of the tree and reported as issues instead. The
    structure does not depend on catalog order: a folder always wins over a
    leaf at the same path, and the first document wins among duplicates.
    """

    issues: List[BuildIssue] = []
    entries: List[_Entry] = []
    for position, document in enumerate(documents):
        try:
            segments = split_slug(document.slug)
        except MalformedSlugError as exc:
            issues.append(
                BuildIssue(
                    kind=IssueKind.MALFORMED_SLUG,
                    slug=document.slug,
                    path=document.slug,
                    message=exc.reason,
                )
            )
            continue
        entries.append((segments, position, document))

    root = _build_folder("", "", entries, issues)
    for issue in issues:
        logger.warning("Skipped document %r (%s): %s", issue.slug, issue.kind.value, issue.message)
    return TreeBuildResult(root=root, issues=issues)


def _build_folder(name: str, path: str, entries: Sequence[_Entry], issues: List[BuildIssue]) -> Folder:
    leaves: Dict[str, Tuple[int, Document]] = {}
    groups: Dict[str, List[_Entry]] = {}
    order: List[str] = []

    for segments, position, document in entries:
        head, rest = segments[0], segments[1:]
        if head not in leaves and head not in groups:
            order.append(head)
        if rest:
            groups.setdefault(head, []).append((rest, position, document))
            continue
        existing = leaves.get(head)
        if existing is not None:
            # Entries arrive in catalog order, so the earlier document keeps the slot.
            issues.append(
                BuildIssue(
                    kind=IssueKind.DUPLICATE_SLUG,
                    slug=document.slug,
                    path=document.slug,
                    message=f"slug already used by catalog entry {existing[0]}",
                )
            )
            continue
        leaves[head] = (position, document)

    children: Dict[str, TreeNode] = {}
    for head in order:
        child_path = f"{path}{SEPARATOR}{head}" if path else head
        if head in groups:
            children[head] = _build_folder(head, child_path, groups[head], issues)
            if head in leaves:
                dropped = leaves[head][1]
                issues.append(
                    BuildIssue(
                        kind=IssueKind.NODE_KIND_CONFLICT,
                        slug=dropped.slug,
                        path=child_path,
                        message=f"{child_path!r} is both a document and a folder; the folder is kept",
                    )
                )
            continue
        position, document = leaves[head]
        children[head] = Leaf(name=head, document=document, position=position)

    return Folder(name=name, path=path, children=children)


def iter_leaves(folder: Folder) -> Iterator[Tuple[str, Document]]:
    """Yield ``(path, document)`` for every leaf below ``folder``, depth first."""

    for name, node in folder.children.items():
        if isinstance(node, Leaf):
            yield folder.child_path(name), node.document
        else:
            yield from iter_leaves(node)


def iter_folders(folder: Folder) -> Iterator[Folder]:
    for node in folder.children.values():
        if isinstance(node, Folder):
            yield node
            yield from iter_folders(node)


__all__ = ["SEPARATOR", "TreeBuildResult", "build_tree", "iter_folders", "iter_leaves", "split_slug"]
