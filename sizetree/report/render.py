"""Render a size tree into indented plain-text report lines.

Each directory emits its own row, then every subdirectory fully expanded,
then its own files, all children one ``indent_step`` deeper than the parent.
Sizes are raw decimal byte counts followed by a lowercase ``b``.
"""

from __future__ import annotations

from ..size_tree.types import DirectoryNode

DEFAULT_INDENT_STEP = 2
NAME_SIZE_SEPARATOR = "    "


def format_report_line(name: str, size: int, indent: int) -> str:
    """Format one report row as ``<indent><name>    <size>b``."""
    return f"{' ' * indent}{name}{NAME_SIZE_SEPARATOR}{size}b"


def render_report_lines(root: DirectoryNode, indent_step: int = DEFAULT_INDENT_STEP) -> list[str]:
    """Return report rows for ``root`` in pre-order.

    Child order is taken as-is; sort the tree beforehand for a size-ranked
    report.
    """
    if indent_step < 1:
        raise ValueError(f"indent_step must be >= 1, got {indent_step}")

    lines: list[str] = []

    def walk(node: DirectoryNode, indent: int) -> None:
        lines.append(format_report_line(node.name, node.total_size, indent))
        child_indent = indent + indent_step
        for subdirectory in node.subdirectories:
            walk(subdirectory, child_indent)
        for file_entry in node.files:
            lines.append(format_report_line(file_entry.name, file_entry.size, child_indent))

    walk(root, 0)
    return lines


def render_report_text(lines: list[str]) -> str:
    """Join report rows into newline-terminated text."""
    if not lines:
        return ""
    return "\n".join(lines) + "\n"
