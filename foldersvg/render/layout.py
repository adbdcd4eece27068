"""Row flattening and canvas metrics for SVG tree output.

``flatten_rows`` turns the tree into depth-first ``RenderRow`` records with
connector continuation flags. ``measure_tree`` is the sizing pre-pass used
before any markup is emitted.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from ..text_width import display_width
from ..tree_model import TreeNode
from .theme import (
    CHAR_WIDTH,
    ICON_WIDTH,
    INDENT_WIDTH,
    PADDING_BOTTOM,
    PADDING_LEFT,
    PADDING_TOP,
    RIGHT_MARGIN,
    ROW_HEIGHT,
    TOGGLE_WIDTH,
)


@dataclass(frozen=True)
class RenderRow:
    """One visual line: a node plus its connector context and vertical slot.

    ``continuations[k]`` tells whether the ancestor branch owned by level
    ``k`` still has a later sibling below this row.
    """

    node: TreeNode
    depth: int
    index: int
    is_last: bool
    continuations: tuple[bool, ...] = ()

    @property
    def offset(self) -> int:
        return self.index * ROW_HEIGHT

    @property
    def collapsible(self) -> bool:
        """Whether the row gets a toggle glyph (the root never does)."""
        return self.depth > 0 and self.node.is_dir and self.node.has_children


@dataclass(frozen=True)
class CanvasMetrics:
    """Canvas size computed ahead of rendering."""

    row_count: int
    max_depth: int
    max_row_width: float

    @property
    def width(self) -> int:
        return int(math.ceil(PADDING_LEFT + self.max_row_width + RIGHT_MARGIN))

    @property
    def height(self) -> int:
        return canvas_height(self.row_count)


def canvas_height(row_count: int) -> int:
    return PADDING_TOP + row_count * ROW_HEIGHT + PADDING_BOTTOM


def row_width(depth: int, label: str) -> float:
    """Estimated horizontal extent of one row, excluding left padding."""
    return TOGGLE_WIDTH + depth * INDENT_WIDTH + ICON_WIDTH + display_width(label) * CHAR_WIDTH


def flatten_rows(root: TreeNode) -> list[RenderRow]:
    """Return every node as a ``RenderRow`` in depth-first order."""
    rows: list[RenderRow] = []

    def walk(node: TreeNode, depth: int, is_last: bool, continuations: tuple[bool, ...]) -> None:
        rows.append(RenderRow(node, depth, len(rows), is_last, continuations))
        # The root owns no branch line, so its level is not a continuation slot.
        child_continuations = continuations + (not is_last,) if depth > 0 else continuations
        last_idx = len(node.children) - 1
        for idx, child in enumerate(node.children):
            walk(child, depth + 1, idx == last_idx, child_continuations)

    walk(root, 0, True, ())
    return rows


def measure_tree(root: TreeNode) -> CanvasMetrics:
    """Single traversal collecting row count, depth, and widest row."""
    row_count = 0
    max_depth = 0
    max_width = 0.0
    stack: list[tuple[TreeNode, int]] = [(root, 0)]
    while stack:
        node, depth = stack.pop()
        row_count += 1
        max_depth = max(max_depth, depth)
        max_width = max(max_width, row_width(depth, node.name))
        stack.extend((child, depth + 1) for child in node.children)
    return CanvasMetrics(row_count=row_count, max_depth=max_depth, max_row_width=max_width)


__all__ = [
    "RenderRow",
    "CanvasMetrics",
    "canvas_height",
    "row_width",
    "flatten_rows",
    "measure_tree",
]
