"""Command-line front door for sizetree.

Resolves the directory to scan (from arguments or an interactive prompt),
builds and sorts the size tree, then writes the rendered report to a text
file or stdout.
"""

from __future__ import annotations

import argparse
import logging
import sys
import time
from pathlib import Path

from .config import load_follow_symlinks, load_indent_step, load_output_suffix
from .logs import configure_logging
from .report import render_report_lines, render_report_text, resolve_output_path, write_report
from .size_tree import build_size_tree, sort_descending_by_size

logger = logging.getLogger(__name__)

DIRECTORY_PROMPT = "Directory to scan: "
OUTPUT_PROMPT = "Report file name (blank for default): "


def _positive_int(value: str) -> int:
    """argparse type for positive integer values."""
    try:
        parsed = int(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid integer value: {value!r}") from exc
    if parsed <= 0:
        raise argparse.ArgumentTypeError("value must be >= 1")
    return parsed


def scan_root_error(path: Path) -> str | None:
    """Return a user-facing reason ``path`` cannot be scanned, else ``None``."""
    if not path.exists():
        return f"Path not found: {path}"
    if not path.is_dir():
        return f"Not a directory: {path}"
    return None


def prompt_for_directory() -> Path:
    """Ask for a directory until an existing one is entered.

    End of input aborts with ``SystemExit``.
    """
    while True:
        try:
            answer = input(DIRECTORY_PROMPT)
        except EOFError:
            raise SystemExit("No directory given.") from None
        text = answer.strip()
        if not text:
            continue
        candidate = Path(text).expanduser()
        error = scan_root_error(candidate)
        if error is None:
            return candidate
        print(error, file=sys.stderr)


def prompt_for_output_name() -> str:
    """Ask for the report file name; blank or end of input selects the default."""
    try:
        return input(OUTPUT_PROMPT).strip()
    except EOFError:
        return ""


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Scan a directory tree and write an indented report of sizes, largest first."
    )
    parser.add_argument("path", nargs="?", default=None, help="Directory to scan. Prompts when omitted.")
    parser.add_argument(
        "-o",
        "--output",
        default=None,
        help="Report file name. '.txt' is appended when missing; relative names resolve inside the scanned directory.",
    )
    parser.add_argument(
        "--indent-step",
        type=_positive_int,
        default=None,
        help="Spaces of indentation per nesting level (default: config value or 2).",
    )
    parser.add_argument("--stdout", action="store_true", help="Print the report instead of writing a file.")
    parser.add_argument(
        "--follow-symlinks",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Descend into symlinked directories (default: config value or on). There is no cycle detection.",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="count",
        default=0,
        help="Show progress (-v) or skipped entries as well (-vv).",
    )
    return parser


def main(argv: list[str] | None = None) -> None:
    """Parse CLI arguments, scan the requested directory, and emit the report.

    ``argv`` defaults to ``sys.argv[1:]``. Without a positional path the root
    and report name are read interactively.
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(args.verbose)

    if args.stdout and args.output is not None:
        raise SystemExit("Cannot combine --stdout with --output.")

    if args.path is None:
        root = prompt_for_directory()
        output = args.output
        if output is None and not args.stdout:
            output = prompt_for_output_name()
    else:
        root = Path(args.path).expanduser()
        error = scan_root_error(root)
        if error is not None:
            raise SystemExit(error)
        output = args.output

    indent_step = args.indent_step if args.indent_step is not None else load_indent_step()
    follow_symlinks = args.follow_symlinks if args.follow_symlinks is not None else load_follow_symlinks()

    started = time.monotonic()
    logger.info("Reading directories...")
    tree = build_size_tree(root, follow_symlinks=follow_symlinks)
    logger.info("Sorting...")
    sort_descending_by_size(tree)
    lines = render_report_lines(tree, indent_step=indent_step)

    if args.stdout:
        sys.stdout.write(render_report_text(lines))
    else:
        destination = resolve_output_path(output, root, tree.name, load_output_suffix())
        logger.info("Writing to %s", destination)
        try:
            write_report(lines, destination)
        except PermissionError as exc:
            logger.warning("Could not write report to %s: %s", destination, exc)
            return
        sys.stdout.write(f"Report written to {destination}\n")

    logger.info(
        "Scanned %d directories and %d files (%d bytes) in %.2fs",
        tree.directory_count() + 1,
        tree.file_count(),
        tree.total_size,
        time.monotonic() - started,
    )


if __name__ == "__main__":
    main()
