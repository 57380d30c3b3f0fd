"""Domain model for size-annotated directory trees.

This package contains the non-presentation tree primitives:
- file/directory datatypes with accumulated byte totals
- the filesystem build walk
- the recursive descending-size sort
"""

from __future__ import annotations

from .types import DirectoryFiles, DirectoryListing, DirectoryNode, FileEntry
from .build import (
    build_size_tree,
    is_recoverable_file_error,
    list_directory,
    node_name_for_path,
    read_directory_files,
)
from .sort import sort_descending_by_size

__all__ = [
    "FileEntry",
    "DirectoryNode",
    "DirectoryFiles",
    "DirectoryListing",
    "build_size_tree",
    "is_recoverable_file_error",
    "list_directory",
    "node_name_for_path",
    "read_directory_files",
    "sort_descending_by_size",
]
