"""Client-side collapse/expand script embedded into generated SVG files.

The script never sees the source tree. It reads the rendered group structure,
so every toggle re-derives row offsets from current ``display`` state alone.
"""

from __future__ import annotations

import json
from string import Template

from .theme import GLYPH_COLLAPSED, GLYPH_EXPANDED, PADDING_BOTTOM, PADDING_TOP, ROW_HEIGHT

_SCRIPT_TEMPLATE = Template(
    """(function () {
  var ROW_HEIGHT = $row_height;
  var PADDING_TOP = $padding_top;
  var PADDING_BOTTOM = $padding_bottom;
  var EXPANDED = $glyph_expanded;
  var COLLAPSED = $glyph_collapsed;

  var svg = document.getElementById("$svg_id");
  var tree = document.getElementById("$tree_id");
  var background = document.getElementById("$background_id");
  if (!svg || !tree) {
    return;
  }

  function hasClass(el, name) {
    var value = el.getAttribute("class") || "";
    return (" " + value + " ").indexOf(" " + name + " ") >= 0;
  }

  function isHidden(el) {
    return el.getAttribute("display") === "none";
  }

  function layoutRows(container, index) {
    var nodes = container.childNodes;
    for (var i = 0; i < nodes.length; i++) {
      var el = nodes[i];
      if (el.nodeType !== 1 || el.tagName.toLowerCase() !== "g") {
        continue;
      }
      if (hasClass(el, "row")) {
        el.setAttribute("transform", "translate(0," + index * ROW_HEIGHT + ")");
        index += 1;
      } else if (!isHidden(el)) {
        index = layoutRows(el, index);
      }
    }
    return index;
  }

  function relayout() {
    var rowCount = layoutRows(tree, 0);
    var height = PADDING_TOP + rowCount * ROW_HEIGHT + PADDING_BOTTOM;
    var width = svg.getAttribute("width");
    svg.setAttribute("height", height);
    svg.setAttribute("viewBox", "0 0 " + width + " " + height);
    if (background) {
      background.setAttribute("height", height);
    }
  }

  function toggle(row) {
    var group = document.getElementById(row.getAttribute("data-target"));
    if (!group) {
      return;
    }
    var collapse = !isHidden(group);
    if (collapse) {
      group.setAttribute("display", "none");
    } else {
      group.removeAttribute("display");
    }
    var glyph = row.querySelector(".toggle");
    if (glyph) {
      glyph.textContent = collapse ? COLLAPSED : EXPANDED;
    }
    relayout();
  }

  var rows = svg.querySelectorAll(".folder-row");
  for (var i = 0; i < rows.length; i++) {
    rows[i].addEventListener("click", (function (row) {
      return function () {
        toggle(row);
      };
    })(rows[i]));
  }
})();"""
)


def build_toggle_script(svg_id: str, tree_id: str, background_id: str) -> str:
    """Return the toggle/relayout script with layout constants filled in."""
    return _SCRIPT_TEMPLATE.substitute(
        row_height=ROW_HEIGHT,
        padding_top=PADDING_TOP,
        padding_bottom=PADDING_BOTTOM,
        glyph_expanded=json.dumps(GLYPH_EXPANDED),
        glyph_collapsed=json.dumps(GLYPH_COLLAPSED),
        svg_id=svg_id,
        tree_id=tree_id,
        background_id=background_id,
    )


__all__ = ["build_toggle_script"]
