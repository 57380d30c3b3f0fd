"""In-place descending size ordering for built directory trees."""

from __future__ import annotations

from .types import DirectoryNode


def sort_descending_by_size(node: DirectoryNode) -> None:
    """Order files and subdirectories of ``node`` and all descendants by size.

    ``list.sort`` is stable even with ``reverse=True``, so equal sizes keep the
    order the build walk produced.
    """
    for subdirectory in node.subdirectories:
        sort_descending_by_size(subdirectory)
    node.subdirectories.sort(key=lambda item: item.total_size, reverse=True)
    node.files.sort(key=lambda item: item.size, reverse=True)
