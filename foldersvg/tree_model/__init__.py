"""Filesystem tree model: node types, scan options, and the tree builder.

The tree is built once per run and is read-only afterwards.
"""

from __future__ import annotations

from .build import DirectoryChild, build_tree, display_name, list_directory_children, root_display_name, sort_key
from .options import EXCLUDE_IGNORED_WARNING, BuildOptions, normalize_exclude, parse_exclude_list
from .types import NodeKind, TreeNode, directory_node, file_node

__all__ = [
    "NodeKind",
    "TreeNode",
    "directory_node",
    "file_node",
    "BuildOptions",
    "EXCLUDE_IGNORED_WARNING",
    "normalize_exclude",
    "parse_exclude_list",
    "DirectoryChild",
    "build_tree",
    "display_name",
    "list_directory_children",
    "root_display_name",
    "sort_key",
]
