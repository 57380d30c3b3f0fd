"""Directory size reports, largest entries first.

``sizetree.size_tree`` builds and sorts the size tree, ``sizetree.report``
renders and writes it, and ``main`` runs the command-line tool.
"""

from __future__ import annotations


def main(*args, **kwargs):
    """Run the CLI; imported on first call so ``import sizetree`` stays cheap."""
    from .cli import main as _main

    return _main(*args, **kwargs)

__all__ = ["main"]
