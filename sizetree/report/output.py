"""Report destination naming and persistence."""

from __future__ import annotations

import logging
from pathlib import Path

logger = logging.getLogger(__name__)

REPORT_SUFFIX = ".txt"
DEFAULT_NAME_SUFFIX = "_sizes"


def default_output_name(root_name: str, name_suffix: str = DEFAULT_NAME_SUFFIX) -> str:
    """Derive the report filename used when none is supplied."""
    return f"{root_name}{name_suffix}{REPORT_SUFFIX}"


def ensure_txt_suffix(name: str) -> str:
    """Append ``.txt`` unless ``name`` already ends with it (any case)."""
    if name.lower().endswith(REPORT_SUFFIX):
        return name
    return name + REPORT_SUFFIX


def resolve_output_path(
    output: str | None,
    scan_root: Path,
    root_name: str,
    name_suffix: str = DEFAULT_NAME_SUFFIX,
) -> Path:
    """Resolve the report destination for a scan of ``scan_root``.

    Blank or missing ``output`` falls back to ``default_output_name``. Only a
    user-supplied name gets ``~`` expansion. Relative destinations are placed
    under ``scan_root``; absolute ones are kept.
    """
    name = (output or "").strip()
    if name:
        destination = Path(ensure_txt_suffix(name)).expanduser()
    else:
        destination = Path(default_output_name(root_name, name_suffix))
    if not destination.is_absolute():
        destination = scan_root / destination
    return destination


def write_report(lines: list[str], destination: Path) -> None:
    """Write one report row per line using platform line separators.

    Filesystem errors propagate; callers decide how to surface them.
    """
    logger.debug("Writing %d report lines to %s", len(lines), destination)
    with destination.open("w", encoding="utf-8") as handle:
        for line in lines:
            handle.write(line)
            handle.write("\n")
