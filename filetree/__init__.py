"""In-memory virtual file tree with path-addressed operations."""

from .errors import DuplicateName, FileTreeError, NotAFolder, PathNotFound
from .models import File, Folder, Node, Tree, coerce_tree, dump_tree
from .tree import (
    ChildLookup,
    add_node,
    assign_file_paths,
    does_file_exist_in_folder,
    get_child_file_from_name,
    get_file_from_path,
    linearize_files,
    remove_file_at_path,
)

__all__ = [
    "ChildLookup",
    "DuplicateName",
    "File",
    "FileTreeError",
    "Folder",
    "Node",
    "NotAFolder",
    "PathNotFound",
    "Tree",
    "add_node",
    "assign_file_paths",
    "coerce_tree",
    "does_file_exist_in_folder",
    "dump_tree",
    "get_child_file_from_name",
    "get_file_from_path",
    "linearize_files",
    "remove_file_at_path",
]
