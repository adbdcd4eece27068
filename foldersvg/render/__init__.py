"""SVG rendering: layout pre-pass, markup emission, and the toggle script."""

from __future__ import annotations

from .layout import CanvasMetrics, RenderRow, canvas_height, flatten_rows, measure_tree, row_width
from .script import build_toggle_script
from .svg import connector_segments, escape_markup, render_svg
from .theme import DEFAULT_THEME, SvgTheme

__all__ = [
    "CanvasMetrics",
    "RenderRow",
    "canvas_height",
    "flatten_rows",
    "measure_tree",
    "row_width",
    "build_toggle_script",
    "connector_segments",
    "escape_markup",
    "render_svg",
    "DEFAULT_THEME",
    "SvgTheme",
]
