"""Fixed geometry and palette for SVG tree output.

All sizes are in SVG user units (pixels at 100% zoom).
"""

from __future__ import annotations

from dataclasses import dataclass

ROW_HEIGHT = 24
INDENT_WIDTH = 20
PADDING_LEFT = 16
PADDING_TOP = 12
PADDING_BOTTOM = 12
RIGHT_MARGIN = 40
TOGGLE_WIDTH = 12
ICON_WIDTH = 18
# Approximate advance of one monospace glyph at 14px.
CHAR_WIDTH = 8.5
LABEL_BASELINE = 16
ICON_CENTER = 7

GLYPH_EXPANDED = "▼"
GLYPH_COLLAPSED = "▶"


@dataclass(frozen=True)
class SvgTheme:
    """Semantic colour palette used by the SVG renderer."""

    background: str
    border: str
    folder: str
    file: str
    file_fold: str
    label: str
    connector: str
    toggle: str
    hover: str
    font_family: str
    font_size: int


DEFAULT_THEME = SvgTheme(
    background="#FAFAFA",
    border="#E0E0E0",
    folder="#E8A87C",
    file="#95AABE",
    file_fold="#FFFFFF",
    label="#333333",
    connector="#999999",
    toggle="#666666",
    hover="#EEF3F8",
    font_family="'Consolas', 'Courier New', monospace",
    font_size=14,
)


def icon_x(depth: int) -> float:
    """Left edge of the icon column for a row at ``depth``."""
    return PADDING_LEFT + TOGGLE_WIDTH + depth * INDENT_WIDTH


def guide_x(level: int) -> float:
    """Horizontal position of the vertical connector owned by ``level``."""
    return icon_x(level) + ICON_CENTER


__all__ = [
    "ROW_HEIGHT",
    "INDENT_WIDTH",
    "PADDING_LEFT",
    "PADDING_TOP",
    "PADDING_BOTTOM",
    "RIGHT_MARGIN",
    "TOGGLE_WIDTH",
    "ICON_WIDTH",
    "CHAR_WIDTH",
    "LABEL_BASELINE",
    "ICON_CENTER",
    "GLYPH_EXPANDED",
    "GLYPH_COLLAPSED",
    "SvgTheme",
    "DEFAULT_THEME",
    "icon_x",
    "guide_x",
]
