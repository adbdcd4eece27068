"""Embedded toggle script template tests."""

import json
import unittest

from foldersvg.render import build_toggle_script
from foldersvg.render.theme import GLYPH_COLLAPSED, GLYPH_EXPANDED


class ToggleScriptTests(unittest.TestCase):
    def test_constants_and_ids_are_injected(self) -> None:
        script = build_toggle_script("svg-id", "tree-id", "bg-id")

        self.assertIn("var ROW_HEIGHT = 24;", script)
        self.assertIn("var PADDING_TOP = 12;", script)
        self.assertIn("var PADDING_BOTTOM = 12;", script)
        self.assertIn(f"var EXPANDED = {json.dumps(GLYPH_EXPANDED)};", script)
        self.assertIn(f"var COLLAPSED = {json.dumps(GLYPH_COLLAPSED)};", script)
        self.assertIn('document.getElementById("svg-id")', script)
        self.assertIn('document.getElementById("tree-id")', script)
        self.assertIn('document.getElementById("bg-id")', script)
        self.assertNotIn("$", script)

    def test_script_cannot_terminate_cdata_section(self) -> None:
        self.assertNotIn("]]>", build_toggle_script("a", "b", "c"))


if __name__ == "__main__":
    unittest.main()
