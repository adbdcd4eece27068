"""Builder options and the include/exclude policy for directory entries."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from pathlib import PurePath

EXCLUDE_IGNORED_WARNING = "--exclude is ignored when --folders-only is set (files are already omitted)."


def normalize_exclude(entries: Iterable[str]) -> frozenset[str]:
    """Lowercase and strip exclude entries, dropping empty ones."""
    normalized: set[str] = set()
    for raw in entries:
        item = str(raw).strip().lower()
        if item:
            normalized.add(item)
    return frozenset(normalized)


def parse_exclude_list(value: str | None) -> frozenset[str]:
    """Parse a comma-separated list of file names/extensions."""
    if not value:
        return frozenset()
    return normalize_exclude(value.split(","))


@dataclass(frozen=True)
class BuildOptions:
    """Entry filters applied while scanning.

    ``exclude`` holds lowercase file names (``thumbs.db``) or extensions
    (``.dll``). It only ever drops files, never directories.
    """

    folders_only: bool = False
    exclude: frozenset[str] = field(default_factory=frozenset)

    def __post_init__(self) -> None:
        object.__setattr__(self, "exclude", normalize_exclude(self.exclude))

    def normalized(self) -> tuple["BuildOptions", tuple[str, ...]]:
        """Resolve conflicting options and return ``(options, warnings)``.

        With ``folders_only`` set there are no files left to exclude, so a
        non-empty ``exclude`` is dropped and reported.
        """
        if self.folders_only and self.exclude:
            return BuildOptions(folders_only=True), (EXCLUDE_IGNORED_WARNING,)
        return self, ()

    def includes_file(self, name: str) -> bool:
        """Return whether a file called ``name`` survives the filters."""
        if self.folders_only:
            return False
        if not self.exclude:
            return True
        folded = name.lower()
        if folded in self.exclude:
            return False
        suffix = PurePath(folded).suffix
        return not (suffix and suffix in self.exclude)


__all__ = [
    "EXCLUDE_IGNORED_WARNING",
    "BuildOptions",
    "normalize_exclude",
    "parse_exclude_list",
]
