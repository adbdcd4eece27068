"""SVG document emission for directory trees.

Rows are absolutely positioned with ``translate(0, y)`` inside one content
group. Collapsible folders wrap their descendants in an addressable
``children`` group that the embedded script hides and shows.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from xml.sax.saxutils import escape

from ..tree_model import TreeNode
from .layout import CanvasMetrics, RenderRow, flatten_rows, measure_tree
from .script import build_toggle_script
from .theme import (
    DEFAULT_THEME,
    GLYPH_EXPANDED,
    ICON_WIDTH,
    LABEL_BASELINE,
    PADDING_TOP,
    ROW_HEIGHT,
    TOGGLE_WIDTH,
    SvgTheme,
    guide_x,
    icon_x,
)

SVG_ID = "foldersvg"
TREE_ID = "tree"
BACKGROUND_ID = "background"

_MARKUP_ENTITIES = {'"': "&quot;"}
# Code points XML 1.0 does not allow anywhere in a document.
_XML_ILLEGAL_RE = re.compile(r"[\x00-\x08\x0b\x0c\x0e-\x1f\ud800-\udfff\ufffe\uffff]")


def escape_markup(text: str) -> str:
    """Escape ``&``, ``<``, ``>`` and ``"`` for text and attribute values.

    Characters XML cannot carry are replaced with U+FFFD.
    """
    return escape(_XML_ILLEGAL_RE.sub("\ufffd", text), _MARKUP_ENTITIES)


def _fmt(value: float) -> str:
    """Format a coordinate without a trailing ``.0``."""
    if float(value).is_integer():
        return str(int(value))
    return f"{value:.2f}".rstrip("0").rstrip(".")


def _line(x1: float, y1: float, x2: float, y2: float) -> str:
    return f'<line class="connector" x1="{_fmt(x1)}" y1="{_fmt(y1)}" x2="{_fmt(x2)}" y2="{_fmt(y2)}"/>'


@dataclass
class _RenderContext:
    """Mutable state for one ``render_svg`` call."""

    metrics: CanvasMetrics
    lines: list[str] = field(default_factory=list)
    next_group_id: int = 1
    open_groups: list[int] = field(default_factory=list)

    def allocate_group_id(self) -> str:
        group_id = f"c{self.next_group_id}"
        self.next_group_id += 1
        return group_id

    def emit(self, level: int, text: str) -> None:
        self.lines.append("  " * (level + 2) + text)

    def close_group(self) -> None:
        self.open_groups.pop()
        level = 2 * len(self.open_groups)
        self.emit(level + 1, "</g>")
        self.emit(level, "</g>")


def connector_segments(row: RenderRow) -> list[tuple[float, float, float, float]]:
    """Return ``(x1, y1, x2, y2)`` connector lines for ``row`` in row-local units."""
    if row.depth == 0:
        return []
    mid = ROW_HEIGHT / 2
    segments: list[tuple[float, float, float, float]] = []
    for level, continues in enumerate(row.continuations):
        if continues:
            x = guide_x(level)
            segments.append((x, 0, x, ROW_HEIGHT))

    parent_x = guide_x(row.depth - 1)
    segments.append((parent_x, 0, parent_x, mid if row.is_last else ROW_HEIGHT))
    # Stop short of the toggle glyph column on collapsible rows.
    branch_end = icon_x(row.depth) - (TOGGLE_WIDTH - 1 if row.collapsible else 2)
    segments.append((parent_x, mid, branch_end, mid))
    return segments


def _row_markup(row: RenderRow, width: int, group_id: str | None) -> list[str]:
    node = row.node
    x = icon_x(row.depth)
    css_class = "row folder-row" if group_id is not None else "row"
    target = f' data-target="{group_id}"' if group_id is not None else ""
    out = [f'<g class="{css_class}"{target} transform="translate(0,{row.offset})">']
    out.append(f'  <rect class="row-bg" x="0" y="0" width="{width}" height="{ROW_HEIGHT}"/>')
    for x1, y1, x2, y2 in connector_segments(row):
        out.append("  " + _line(x1, y1, x2, y2))

    if group_id is not None:
        out.append(
            f'  <text class="toggle" x="{_fmt(x - TOGGLE_WIDTH / 2)}" y="{LABEL_BASELINE}" '
            f'text-anchor="middle">{GLYPH_EXPANDED}</text>'
        )

    if node.is_dir:
        out.append(f'  <rect class="folder" x="{_fmt(x)}" y="4" width="14" height="4" rx="1"/>')
        out.append(f'  <rect class="folder" x="{_fmt(x)}" y="6" width="16" height="10" rx="1"/>')
    else:
        out.append(f'  <rect class="file" x="{_fmt(x + 1)}" y="3" width="12" height="14" rx="1"/>')
        out.append(f'  <polyline class="file-fold" points="{_fmt(x + 9)},3 {_fmt(x + 13)},7"/>')

    weight = "bold" if node.is_dir else "normal"
    out.append(
        f'  <text class="label" x="{_fmt(x + ICON_WIDTH)}" y="{LABEL_BASELINE}" '
        f'font-weight="{weight}">{escape_markup(node.name)}</text>'
    )
    out.append("</g>")
    return out


def _emit_rows(ctx: _RenderContext, rows: list[RenderRow]) -> None:
    """Emit rows in order, nesting collapsible subtrees in their own groups."""
    for row in rows:
        while ctx.open_groups and ctx.open_groups[-1] >= row.depth:
            ctx.close_group()

        level = 2 * len(ctx.open_groups)
        group_id: str | None = None
        if row.collapsible:
            group_id = ctx.allocate_group_id()
            ctx.emit(level, f'<g class="node" data-name="{escape_markup(row.node.name)}">')
            level += 1

        for text in _row_markup(row, ctx.metrics.width, group_id):
            ctx.emit(level, text)

        if group_id is not None:
            ctx.emit(level, f'<g class="children" id="{group_id}">')
            ctx.open_groups.append(row.depth)

    while ctx.open_groups:
        ctx.close_group()


def _style_block(theme: SvgTheme) -> list[str]:
    return [
        "  <style>",
        f"    .folder {{ fill: {theme.folder}; }}",
        f"    .file {{ fill: {theme.file}; }}",
        f"    .file-fold {{ fill: none; stroke: {theme.file_fold}; stroke-width: 1; }}",
        f"    .label {{ font-family: {theme.font_family}; font-size: {theme.font_size}px; fill: {theme.label}; }}",
        f"    .connector {{ stroke: {theme.connector}; stroke-width: 1; fill: none; }}",
        "    .row-bg { fill: transparent; }",
        "    .folder-row { cursor: pointer; }",
        f"    .folder-row:hover .row-bg {{ fill: {theme.hover}; }}",
        f"    .toggle {{ font-family: sans-serif; font-size: 9px; fill: {theme.toggle}; user-select: none; }}",
        "  </style>",
    ]


def render_svg(root: TreeNode, theme: SvgTheme | None = None) -> str:
    """Render ``root`` as a standalone, collapsible SVG document."""
    active_theme = theme or DEFAULT_THEME
    metrics = measure_tree(root)
    rows = flatten_rows(root)
    width = metrics.width
    height = metrics.height

    ctx = _RenderContext(metrics=metrics)
    _emit_rows(ctx, rows)

    out: list[str] = [
        '<?xml version="1.0" encoding="UTF-8"?>',
        f'<svg xmlns="http://www.w3.org/2000/svg" id="{SVG_ID}" width="{width}" height="{height}" '
        f'viewBox="0 0 {width} {height}">',
    ]
    out.extend(_style_block(active_theme))
    out.append(
        f'  <rect id="{BACKGROUND_ID}" width="{width}" height="{height}" rx="8" '
        f'fill="{active_theme.background}" stroke="{active_theme.border}" stroke-width="1"/>'
    )
    out.append(f'  <g id="{TREE_ID}" class="tree" transform="translate(0,{PADDING_TOP})">')
    out.extend(ctx.lines)
    out.append("  </g>")
    out.append("  <script><![CDATA[")
    out.append(build_toggle_script(SVG_ID, TREE_ID, BACKGROUND_ID))
    out.append("  ]]></script>")
    out.append("</svg>")
    return "\n".join(out) + "\n"


__all__ = [
    "SVG_ID",
    "TREE_ID",
    "BACKGROUND_ID",
    "escape_markup",
    "connector_segments",
    "render_svg",
]
