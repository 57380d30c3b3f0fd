"""JSON config helpers.

Reads report defaults: indent step, symlink handling, and the suffix used
for derived report names. Malformed or missing config falls back safely.
"""

from __future__ import annotations

import json
from pathlib import Path

from platformdirs import user_config_dir

from .report.output import DEFAULT_NAME_SUFFIX
from .report.render import DEFAULT_INDENT_STEP

APP_NAME = "sizetree"
CONFIG_FILENAME = "config.json"
DEFAULT_CONFIG_PATH = Path(user_config_dir(APP_NAME, appauthor=False)) / CONFIG_FILENAME
CONFIG_PATH = DEFAULT_CONFIG_PATH


def load_config() -> dict[str, object]:
    """Load the persisted JSON config object.

    Returns an empty dict when the file is missing, unreadable, malformed, or
    does not decode to a top-level JSON object.
    """
    try:
        data = json.loads(CONFIG_PATH.read_text(encoding="utf-8"))
    except (OSError, ValueError):
        return {}
    return data if isinstance(data, dict) else {}


def load_indent_step() -> int:
    """Return the persisted indent step, or the default when absent or invalid."""
    value = load_config().get("indent_step")
    if isinstance(value, bool) or not isinstance(value, int) or value < 1:
        return DEFAULT_INDENT_STEP
    return value


def load_follow_symlinks() -> bool:
    """Return persisted symlink preference; only explicit booleans count.

    Symlinked directories are followed unless the config sets ``false``.
    """
    value = load_config().get("follow_symlinks")
    return value if isinstance(value, bool) else True


def load_output_suffix() -> str:
    """Return the suffix appended to the root name for default report names.

    Values containing path separators are rejected so the default report
    always lands beside the scanned root.
    """
    value = load_config().get("output_suffix")
    if not isinstance(value, str) or "/" in value or "\\" in value:
        return DEFAULT_NAME_SUFFIX
    return value
