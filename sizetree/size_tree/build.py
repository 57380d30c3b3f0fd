"""Filesystem walk that builds a size-annotated directory tree.

The walk is depth-first and single-threaded. Only two failures are absorbed,
each at its own call site: a directory that refuses enumeration becomes an
inaccessible zero-size node, and a file whose metadata cannot be read is left
out of its directory. Every other ``OSError`` reaches the caller.

Symlinked directories are descended into by default; there is no cycle
detection.
"""

from __future__ import annotations

import errno
import logging
import os

from .types import DirectoryFiles, DirectoryListing, DirectoryNode, FileEntry

logger = logging.getLogger(__name__)

RECOVERABLE_FILE_ERRNOS = frozenset(
    {
        errno.ENAMETOOLONG,
        errno.ENOENT,
        errno.EACCES,
        errno.EPERM,
        errno.ELOOP,
    }
)


def is_recoverable_file_error(exc: OSError) -> bool:
    """Return whether a per-file metadata failure should skip just that file."""
    return exc.errno in RECOVERABLE_FILE_ERRNOS


def node_name_for_path(path: str | os.PathLike[str]) -> str:
    """Return the final segment of ``path``'s absolute form.

    Filesystem roots have no final segment, so the absolute path itself is
    used instead.
    """
    absolute = os.path.abspath(os.fspath(path))
    return os.path.basename(absolute.rstrip("\\/")) or absolute


def list_directory(path: str | os.PathLike[str], follow_symlinks: bool = True) -> DirectoryListing:
    """Enumerate immediate files and subdirectories of ``path``.

    The listing is fully materialised before returning. Files stay as
    ``os.DirEntry`` objects so their cached metadata can be reused.
    ``PermissionError`` from the enumeration itself propagates so the caller
    can mark the directory inaccessible.
    """
    files: list[os.DirEntry[str]] = []
    subdirectory_paths: list[str] = []
    with os.scandir(path) as entries:
        for entry in entries:
            try:
                is_dir = entry.is_dir(follow_symlinks=follow_symlinks)
            except OSError as exc:
                if not is_recoverable_file_error(exc):
                    raise
                is_dir = False
            if is_dir:
                subdirectory_paths.append(entry.path)
            else:
                files.append(entry)
    return DirectoryListing(files=files, subdirectory_paths=subdirectory_paths)


def read_directory_files(files: list[os.DirEntry[str]], follow_symlinks: bool = True) -> DirectoryFiles:
    """Stat each directory entry and return the readable files with their byte total."""
    entries: list[FileEntry] = []
    total_bytes = 0
    for file in files:
        try:
            size = int(file.stat(follow_symlinks=follow_symlinks).st_size)
        except OSError as exc:
            if not is_recoverable_file_error(exc):
                raise
            logger.debug("Skipping unreadable file %s: %s", file.path, exc)
            continue
        entries.append(FileEntry(name=file.name, size=size))
        total_bytes += size
    return DirectoryFiles(total_bytes=total_bytes, entries=entries)


def build_size_tree(path: str | os.PathLike[str], follow_symlinks: bool = True) -> DirectoryNode:
    """Walk ``path`` and return its fully populated ``DirectoryNode``.

    The root is treated like any nested directory: when it cannot be
    enumerated the result is an inaccessible node with size 0.
    """
    node = DirectoryNode(name=node_name_for_path(path))

    try:
        listing = list_directory(path, follow_symlinks=follow_symlinks)
    except PermissionError as exc:
        logger.debug("Access denied to directory %s: %s", path, exc)
        node.accessible = False
        return node

    files = read_directory_files(listing.files, follow_symlinks=follow_symlinks)
    node.files = files.entries
    node.total_size += files.total_bytes

    for subdirectory_path in listing.subdirectory_paths:
        subdirectory = build_size_tree(subdirectory_path, follow_symlinks=follow_symlinks)
        node.subdirectories.append(subdirectory)
        node.total_size += subdirectory.total_size

    return node
