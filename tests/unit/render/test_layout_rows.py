"""Row flattening and canvas sizing tests for SVG layout."""

from __future__ import annotations

import unittest

from foldersvg.render import CanvasMetrics, canvas_height, flatten_rows, measure_tree, row_width
from foldersvg.render.theme import ROW_HEIGHT
from foldersvg.tree_model import directory_node, file_node


def _sample_tree():
    return directory_node(
        "root",
        (
            directory_node(
                "src",
                (
                    directory_node("pkg", (file_node("mod.py"),)),
                    file_node("main.py"),
                ),
            ),
            directory_node("empty"),
            file_node("README.md"),
        ),
    )


class FlattenRowsTests(unittest.TestCase):
    def test_rows_follow_depth_first_order_with_offsets(self) -> None:
        rows = flatten_rows(_sample_tree())

        self.assertEqual(
            [(row.node.name, row.depth) for row in rows],
            [
                ("root", 0),
                ("src", 1),
                ("pkg", 2),
                ("mod.py", 3),
                ("main.py", 2),
                ("empty", 1),
                ("README.md", 1),
            ],
        )
        self.assertEqual([row.index for row in rows], list(range(7)))
        self.assertEqual([row.offset for row in rows], [i * ROW_HEIGHT for i in range(7)])

    def test_last_sibling_and_continuation_flags(self) -> None:
        rows = {row.node.name: row for row in flatten_rows(_sample_tree())}

        self.assertTrue(rows["root"].is_last)
        self.assertEqual(rows["root"].continuations, ())
        self.assertFalse(rows["src"].is_last)
        self.assertEqual(rows["src"].continuations, ())
        self.assertEqual(rows["pkg"].continuations, (True,))
        self.assertEqual(rows["mod.py"].continuations, (True, True))
        self.assertTrue(rows["main.py"].is_last)
        self.assertTrue(rows["README.md"].is_last)

    def test_only_non_root_directories_with_children_are_collapsible(self) -> None:
        rows = {row.node.name: row for row in flatten_rows(_sample_tree())}

        self.assertFalse(rows["root"].collapsible)
        self.assertTrue(rows["src"].collapsible)
        self.assertTrue(rows["pkg"].collapsible)
        self.assertFalse(rows["empty"].collapsible)
        self.assertFalse(rows["main.py"].collapsible)

    def test_row_count_matches_node_count(self) -> None:
        tree = _sample_tree()
        self.assertEqual(len(flatten_rows(tree)), tree.node_count())


class MeasureTreeTests(unittest.TestCase):
    def test_metrics_for_three_node_tree(self) -> None:
        tree = directory_node("root", (directory_node("sub", (file_node("file.txt"),)),))

        metrics = measure_tree(tree)

        self.assertEqual(metrics.row_count, 3)
        self.assertEqual(metrics.max_depth, 2)
        self.assertEqual(metrics.max_row_width, 138.0)
        self.assertEqual(metrics.width, 194)
        self.assertEqual(metrics.height, 96)

    def test_width_is_rounded_up(self) -> None:
        metrics = CanvasMetrics(row_count=1, max_depth=0, max_row_width=10.5)
        self.assertEqual(metrics.width, 67)

    def test_wide_characters_count_double(self) -> None:
        self.assertEqual(row_width(0, "日本") - row_width(0, ""), 4 * 8.5)

    def test_canvas_height_includes_padding(self) -> None:
        self.assertEqual(canvas_height(0), 24)
        self.assertEqual(canvas_height(5), 24 + 5 * ROW_HEIGHT)


if __name__ == "__main__":
    unittest.main()
