"""Domain datatypes for size-annotated directory trees."""

from __future__ import annotations

import os
from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import NamedTuple


@dataclass(frozen=True)
class FileEntry:
    """One file observed during a scan, with its size in bytes."""

    name: str
    size: int


@dataclass
class DirectoryNode:
    """Directory record holding direct files, nested directories, and totals.

    ``total_size`` is accumulated by the build walk and always equals the sum
    of direct file sizes plus the totals of direct subdirectories. A node with
    ``accessible=False`` could not be enumerated and stays empty at size 0.
    """

    name: str
    files: list[FileEntry] = field(default_factory=list)
    subdirectories: list["DirectoryNode"] = field(default_factory=list)
    total_size: int = 0
    accessible: bool = True

    def iter_nodes(self) -> Iterator["DirectoryNode"]:
        """Yield this node and every nested directory node in pre-order."""
        yield self
        for subdirectory in self.subdirectories:
            yield from subdirectory.iter_nodes()

    def file_count(self) -> int:
        return sum(len(node.files) for node in self.iter_nodes())

    def directory_count(self) -> int:
        """Count nested directories, excluding this node."""
        return sum(1 for _node in self.iter_nodes()) - 1


class DirectoryFiles(NamedTuple):
    """Files read from one directory plus their combined byte count."""

    total_bytes: int
    entries: list[FileEntry]


class DirectoryListing(NamedTuple):
    """Immediate children of one directory, in filesystem order."""

    files: list[os.DirEntry[str]]
    subdirectory_paths: list[str]


__all__ = [
    "FileEntry",
    "DirectoryNode",
    "DirectoryFiles",
    "DirectoryListing",
]
