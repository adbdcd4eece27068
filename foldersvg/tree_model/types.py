"""Tree node datatypes shared by the builder and the SVG renderer."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from enum import Enum


class NodeKind(str, Enum):
    """Filesystem entry kind for one tree node."""

    DIRECTORY = "directory"
    FILE = "file"


@dataclass(frozen=True)
class TreeNode:
    """One filesystem entry with its ordered, visible children.

    ``name`` is the display name (final path segment, never a full path).
    File nodes never carry children.
    """

    name: str
    kind: NodeKind
    children: tuple["TreeNode", ...] = ()

    def __post_init__(self) -> None:
        if self.kind is NodeKind.FILE and self.children:
            raise ValueError(f"file node {self.name!r} cannot have children")

    @property
    def is_dir(self) -> bool:
        return self.kind is NodeKind.DIRECTORY

    @property
    def has_children(self) -> bool:
        return bool(self.children)

    def iter_nodes(self) -> Iterator["TreeNode"]:
        """Yield this node and all descendants in pre-order."""
        stack: list[TreeNode] = [self]
        while stack:
            node = stack.pop()
            yield node
            stack.extend(reversed(node.children))

    def node_count(self) -> int:
        return sum(1 for _node in self.iter_nodes())


def directory_node(name: str, children: tuple[TreeNode, ...] = ()) -> TreeNode:
    return TreeNode(name, NodeKind.DIRECTORY, children)


def file_node(name: str) -> TreeNode:
    return TreeNode(name, NodeKind.FILE)


__all__ = [
    "NodeKind",
    "TreeNode",
    "directory_node",
    "file_node",
]
