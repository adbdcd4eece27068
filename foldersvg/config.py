"""Saved defaults for the output file name and scan filters.

CLI flags win over anything stored here. A missing or unreadable config file
means the built-in defaults apply.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path

from platformdirs import user_config_dir

from .tree_model import normalize_exclude, parse_exclude_list

logger = logging.getLogger(__name__)

APP_NAME = "foldersvg"
CONFIG_FILENAME = "config.json"
CONFIG_PATH = Path(user_config_dir(APP_NAME, appauthor=False)) / CONFIG_FILENAME
DEFAULT_OUTPUT = "structure.svg"


@dataclass(frozen=True)
class Defaults:
    """Config-provided defaults for one CLI run."""

    output: str = DEFAULT_OUTPUT
    folders_only: bool = False
    exclude: frozenset[str] = field(default_factory=frozenset)


def load_config() -> dict[str, object]:
    """Read saved foldersvg defaults; an absent or broken file reads as ``{}``."""
    try:
        data = json.loads(CONFIG_PATH.read_text(encoding="utf-8"))
    except (OSError, ValueError):
        return {}
    return data if isinstance(data, dict) else {}


def save_config(data: dict[str, object]) -> None:
    """Write defaults for later runs. A failed write leaves the run unaffected."""
    try:
        payload = json.dumps(data, indent=2, sort_keys=True)
        CONFIG_PATH.parent.mkdir(parents=True, exist_ok=True)
        CONFIG_PATH.write_text(payload + "\n", encoding="utf-8")
    except (OSError, TypeError, ValueError) as exc:
        logger.debug("could not save config to %s: %s", CONFIG_PATH, exc)


def _coerce_exclude(value: object) -> frozenset[str]:
    """Accept either a JSON list of strings or one comma-separated string."""
    if isinstance(value, str):
        return parse_exclude_list(value)
    if isinstance(value, list):
        return normalize_exclude(item for item in value if isinstance(item, str))
    return frozenset()


def load_defaults() -> Defaults:
    """Return validated defaults; invalid values fall back per key."""
    data = load_config()

    output = data.get("output")
    if not isinstance(output, str) or not output.strip():
        output = DEFAULT_OUTPUT

    folders_only = data.get("folders_only")
    return Defaults(
        output=output.strip(),
        folders_only=folders_only if isinstance(folders_only, bool) else False,
        exclude=_coerce_exclude(data.get("exclude")),
    )


__all__ = [
    "APP_NAME",
    "CONFIG_PATH",
    "DEFAULT_OUTPUT",
    "Defaults",
    "load_config",
    "save_config",
    "load_defaults",
]
