"""Path-addressed operations over an in-memory file tree.

A tree is a plain list of root-level :class:`~filetree.models.File` and
:class:`~filetree.models.Folder` nodes owned by the caller. Every operation
works on that structure in place; nothing here copies a node.

``path`` on a node is derived data. Call :func:`assign_file_paths` after any
structural edit made outside :func:`add_node` to bring it back in sync.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Sequence

from .errors import DuplicateName, NotAFolder, PathNotFound
from .models import File, Folder

logger = logging.getLogger(__name__)

SEPARATOR = "/"


@dataclass(frozen=True)
class ChildLookup:
    """Position of a node inside its parent's child list.

    ``index`` is -1 and ``node`` is None when nothing matched.
    """

    index: int
    node: File | Folder | None = None

    @property
    def found(self) -> bool:
        return self.index != -1


NOT_FOUND = ChildLookup(index=-1)


def linearize_files(tree: Sequence[File | Folder]) -> list[File]:
    """Return the files of ``tree`` in depth-first order, without folders."""
    files: list[File] = []
    for node in tree:
        if isinstance(node, Folder):
            files.extend(linearize_files(node.children))
        else:
            files.append(node)
    return files


def assign_file_paths(tree: list[File | Folder], parent_path: str = "") -> list[File | Folder]:
    """Recompute ``path`` on every node of ``tree`` from the node names.

    ``parent_path`` is the prefix for the nodes of ``tree``; an empty prefix
    means they sit at the root. Returns ``tree`` itself.
    """
    count = _assign_paths(tree, parent_path)
    logger.debug(f"Synchronized paths of {count} nodes")
    return tree


def _assign_paths(tree: list[File | Folder], parent_path: str) -> int:
    count = 0
    for node in tree:
        node.path = f"{parent_path}{SEPARATOR}{node.name}" if parent_path else node.name
        count += 1
        if isinstance(node, Folder):
            count += _assign_paths(node.children, node.path)
    return count


def get_child_file_from_name(children: Sequence[File | Folder], name: str) -> ChildLookup:
    """Find the first immediate child called ``name``."""
    for index, node in enumerate(children):
        if node.name == name:
            return ChildLookup(index=index, node=node)
    return NOT_FOUND


def _walk_to_parent(tree: list[File | Folder], path: str) -> tuple[list[File | Folder], str]:
    """Descend through every segment of ``path`` but the last.

    Returns the child list that should hold the last segment, and that segment.
    """
    *folders, leaf = path.split(SEPARATOR)
    current = tree
    for segment in folders:
        match = get_child_file_from_name(current, segment)
        if match.node is None:
            raise PathNotFound(path, segment, log=True)
        if not isinstance(match.node, Folder):
            raise NotAFolder(path, segment, log=True)
        current = match.node.children
    return current, leaf


def get_file_from_path(tree: list[File | Folder], path: str) -> ChildLookup:
    """Resolve ``path`` to a node and its index in its parent's child list.

    A missing last segment gives ``index == -1``. A missing or non-folder
    intermediate segment raises :class:`PathNotFound` or :class:`NotAFolder`.
    """
    children, leaf = _walk_to_parent(tree, path)
    return get_child_file_from_name(children, leaf)


def remove_file_at_path(tree: list[File | Folder], path: str) -> None:
    """Remove the node at ``path`` from its parent's child list.

    Raises :class:`PathNotFound` without touching the tree when ``path`` does
    not resolve. Paths of the remaining nodes are left as they were.
    """
    children, leaf = _walk_to_parent(tree, path)
    match = get_child_file_from_name(children, leaf)
    if not match.found:
        raise PathNotFound(path, leaf, log=True)
    del children[match.index]
    logger.debug(f"Removed {path!r} (index {match.index})")


def does_file_exist_in_folder(folder: Folder, name: str) -> bool:
    if not isinstance(folder, Folder):
        raise NotAFolder(folder.path or folder.name, folder.name, log=True)
    return get_child_file_from_name(folder.children, name).found


def add_node(
    tree: list[File | Folder],
    node: File | Folder,
    folder_path: str | None = None,
    index: int | None = None,
) -> File | Folder:
    """Insert ``node`` at the root or into the folder at ``folder_path``.

    Sibling names are checked first; a clash raises :class:`DuplicateName`
    and leaves the tree unchanged. Paths of the inserted subtree are
    synchronized. ``index`` follows :meth:`list.insert`; None appends.
    """
    if folder_path:
        target = get_file_from_path(tree, folder_path)
        if target.node is None:
            raise PathNotFound(folder_path, folder_path.rsplit(SEPARATOR, 1)[-1], log=True)
        if not isinstance(target.node, Folder):
            raise NotAFolder(folder_path, target.node.name, log=True)
        parent: Folder | None = target.node
        siblings = target.node.children
        parent_path = folder_path
    else:
        parent = None
        siblings = tree
        parent_path = ""

    taken = (
        does_file_exist_in_folder(parent, node.name)
        if parent is not None
        else get_child_file_from_name(siblings, node.name).found
    )
    if taken:
        raise DuplicateName(parent_path, node.name, log=True)

    if index is None:
        siblings.append(node)
    else:
        siblings.insert(index, node)
    assign_file_paths([node], parent_path)
    logger.debug(f"Added {node.path!r}")
    return node


__all__ = [
    "ChildLookup",
    "add_node",
    "assign_file_paths",
    "does_file_exist_in_folder",
    "get_child_file_from_name",
    "get_file_from_path",
    "linearize_files",
    "remove_file_at_path",
]
