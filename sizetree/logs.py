"""Console logging setup for the command-line tool.

Library modules only create module loggers; handlers are attached here when
the CLI starts.
"""

from __future__ import annotations

import logging
import sys

PACKAGE_LOGGER = "sizetree"


class ConsoleFormatter(logging.Formatter):
    """Message-only formatter that colours warnings and errors on a TTY."""

    COLORS = {
        logging.WARNING: "\033[33m",
        logging.ERROR: "\033[31m",
        logging.CRITICAL: "\033[41m",
    }
    RESET = "\033[0m"

    def __init__(self, use_color: bool) -> None:
        super().__init__("%(message)s")
        self.use_color = use_color

    def format(self, record: logging.LogRecord) -> str:
        message = super().format(record)
        color = self.COLORS.get(record.levelno, "") if self.use_color else ""
        if color:
            return f"{color}{message}{self.RESET}"
        return message


def level_for_verbosity(verbosity: int) -> int:
    """Map ``-v`` count to a logging level."""
    if verbosity >= 2:
        return logging.DEBUG
    if verbosity == 1:
        return logging.INFO
    return logging.WARNING


def configure_logging(verbosity: int = 0, stream=None) -> logging.Logger:
    """Attach a single stderr handler to the package logger.

    Calling again replaces the previous handler instead of stacking another.
    """
    stream = sys.stderr if stream is None else stream
    handler = logging.StreamHandler(stream)
    use_color = bool(getattr(stream, "isatty", lambda: False)())
    handler.setFormatter(ConsoleFormatter(use_color))

    logger = logging.getLogger(PACKAGE_LOGGER)
    for existing in list(logger.handlers):
        logger.removeHandler(existing)
    logger.addHandler(handler)
    logger.setLevel(level_for_verbosity(verbosity))
    logger.propagate = False
    return logger
