"""Plain-text report rendering and report file output."""

from __future__ import annotations

from .render import (
    DEFAULT_INDENT_STEP,
    format_report_line,
    render_report_lines,
    render_report_text,
)
from .output import (
    default_output_name,
    ensure_txt_suffix,
    resolve_output_path,
    write_report,
)

__all__ = [
    "DEFAULT_INDENT_STEP",
    "format_report_line",
    "render_report_lines",
    "render_report_text",
    "default_output_name",
    "ensure_txt_suffix",
    "resolve_output_path",
    "write_report",
]
