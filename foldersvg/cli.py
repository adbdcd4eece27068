"""Command-line front door for foldersvg.

Parses CLI options, validates the target folder, and merges config defaults.
Then builds the tree, renders it, and writes the SVG file.
"""

from __future__ import annotations

import argparse
import logging
import os
import sys
from pathlib import Path

from . import config
from .render import render_svg
from .tree_model import BuildOptions, build_tree, parse_exclude_list

logger = logging.getLogger(__name__)


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="foldersvg",
        description="Render a folder structure as a collapsible SVG tree.",
    )
    parser.add_argument("path", help="Path to the folder to visualize.")
    parser.add_argument(
        "output",
        nargs="?",
        default=None,
        help=f"Output SVG file path (default: {config.DEFAULT_OUTPUT}). Use '-' for stdout.",
    )
    parser.add_argument(
        "--folders-only",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Only include folders; omit files entirely (--no-folders-only overrides a saved default).",
    )
    parser.add_argument(
        "--exclude",
        metavar="LIST",
        default=None,
        help="Comma-separated file names or extensions to skip (case-insensitive), e.g. '.dll,thumbs.db'.",
    )
    parser.add_argument(
        "--save-defaults",
        action="store_true",
        help="Persist the given output, --folders-only and --exclude values as defaults.",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging.")
    return parser


def resolve_options(args: argparse.Namespace, defaults: config.Defaults) -> tuple[BuildOptions, tuple[str, ...]]:
    """Merge CLI flags over config defaults and resolve option conflicts."""
    folders_only = defaults.folders_only if args.folders_only is None else bool(args.folders_only)
    exclude = defaults.exclude if args.exclude is None else parse_exclude_list(args.exclude)
    return BuildOptions(folders_only=folders_only, exclude=exclude).normalized()


def _save_defaults(args: argparse.Namespace) -> None:
    data = config.load_config()
    if args.output is not None and args.output != "-":
        data["output"] = args.output
    if args.folders_only is not None:
        data["folders_only"] = bool(args.folders_only)
    if args.exclude is not None:
        data["exclude"] = sorted(parse_exclude_list(args.exclude))
    config.save_config(data)


def write_output(svg: str, output: str) -> Path | None:
    """Write ``svg`` to ``output`` (``-`` means stdout) and return the file path."""
    if output == "-":
        sys.stdout.write(svg)
        return None
    target = Path(output)
    try:
        target.write_text(svg, encoding="utf-8")
    except OSError as exc:
        raise SystemExit(f"Error: could not write {target}: {exc}") from exc
    return target.resolve()


def main(argv: list[str] | None = None) -> None:
    """Parse CLI arguments and write the SVG for the requested folder."""
    args = _build_parser().parse_args(argv)
    _configure_logging(args.verbose)

    folder = Path(os.path.abspath(Path(args.path).expanduser()))
    if not folder.is_dir():
        raise SystemExit(f'Error: The path "{folder}" does not exist or is not a directory.')

    if args.save_defaults:
        _save_defaults(args)

    defaults = config.load_defaults()
    options, warnings = resolve_options(args, defaults)
    for message in warnings:
        print(f"Warning: {message}", file=sys.stderr)

    root = build_tree(folder, options)
    logger.debug("built tree for %s with %d nodes", folder, root.node_count())
    svg = render_svg(root)

    written = write_output(svg, args.output or defaults.output)
    if written is not None:
        print(f"SVG written to: {written}")


if __name__ == "__main__":
    main()
