"""Public package surface for foldersvg.

Exports ``main`` for programmatic CLI invocation plus the build/render pair.
"""

from __future__ import annotations

from .render import render_svg
from .tree_model import BuildOptions, NodeKind, TreeNode, build_tree


def main(*args, **kwargs):
    """Lazily import CLI entrypoint to keep package imports lightweight."""
    from .cli import main as _main

    return _main(*args, **kwargs)


__all__ = [
    "BuildOptions",
    "NodeKind",
    "TreeNode",
    "build_tree",
    "render_svg",
    "main",
]
