"""Directory scanning and immutable tree construction."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path

from .options import BuildOptions
from .types import NodeKind, TreeNode

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DirectoryChild:
    """One visible directory child discovered during a scan."""

    name: str
    path: Path
    is_dir: bool


def sort_key(name: str) -> tuple[str, str]:
    """Ordinal case-insensitive key; raw name breaks ties deterministically."""
    return name.upper(), name


def display_name(name: str) -> str:
    """Decode a filesystem name for display.

    Bytes that are not valid UTF-8 arrive surrogate-escaped from ``os`` APIs
    and become U+FFFD here.
    """
    return os.fsencode(name).decode("utf-8", "replace")


def root_display_name(path: Path) -> str:
    """Return the final path segment, or the whole path for roots like ``/``."""
    return display_name(path.name or str(path))


def list_directory_children(
    directory: Path,
    options: BuildOptions,
) -> tuple[list[DirectoryChild], Exception | None]:
    """List visible children of ``directory``: directories first, then files.

    Returns ``(children, scan_error)``. ``scan_error`` is set when the
    directory cannot be enumerated, in which case ``children`` is empty.
    """
    directories: list[DirectoryChild] = []
    files: list[DirectoryChild] = []
    try:
        with os.scandir(directory) as entries:
            for child in entries:
                try:
                    is_dir = child.is_dir(follow_symlinks=False)
                except OSError:
                    is_dir = False

                if is_dir:
                    directories.append(DirectoryChild(display_name(child.name), Path(child.path), True))
                else:
                    name = display_name(child.name)
                    if options.includes_file(name):
                        files.append(DirectoryChild(name, Path(child.path), False))
    except (PermissionError, OSError) as exc:
        return [], exc

    directories.sort(key=lambda item: sort_key(item.name))
    files.sort(key=lambda item: sort_key(item.name))
    return directories + files, None


def build_tree(path: Path | str, options: BuildOptions | None = None) -> TreeNode:
    """Scan ``path`` recursively and return the root ``TreeNode``.

    Subdirectories that cannot be read still appear, with no children.
    """
    # abspath keeps a symlinked root under the name it was given.
    root = Path(os.path.abspath(path))
    requested = options if options is not None else BuildOptions()
    effective, warnings = requested.normalized()
    for message in warnings:
        logger.warning(message)

    def build_children(directory: Path) -> tuple[TreeNode, ...]:
        children, scan_error = list_directory_children(directory, effective)
        if scan_error is not None:
            logger.debug("skipping unreadable directory %s: %s", directory, scan_error)
            return ()

        nodes: list[TreeNode] = []
        for child in children:
            if child.is_dir:
                nodes.append(TreeNode(child.name, NodeKind.DIRECTORY, build_children(child.path)))
            else:
                nodes.append(TreeNode(child.name, NodeKind.FILE))
        return tuple(nodes)

    return TreeNode(root_display_name(root), NodeKind.DIRECTORY, build_children(root))


__all__ = [
    "DirectoryChild",
    "build_tree",
    "list_directory_children",
    "display_name",
    "root_display_name",
    "sort_key",
]
