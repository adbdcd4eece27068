"""Heuristic label measurement in monospace display columns.

Widths are estimates used to size the SVG canvas; they are not font metrics.
"""

from __future__ import annotations

import unicodedata

TAB_STOP = 8


def char_display_width(ch: str, col: int) -> int:
    """Columns one label character occupies when it starts at column ``col``.

    CJK wide and fullwidth glyphs take two columns, accents that combine with
    the previous character take none, and a tab pads to the next tab stop.
    """
    if ch == "\t":
        return TAB_STOP - (col % TAB_STOP)
    if unicodedata.combining(ch):
        return 0
    if unicodedata.east_asian_width(ch) in {"W", "F"}:
        return 2
    return 1


def display_width(text: str) -> int:
    """Columns needed to draw ``text`` as a tree label."""
    col = 0
    for ch in text:
        col += char_display_width(ch, col)
    return col
