"""Filesystem access and directory listing construction."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path

from .types import DirectoryListing, FileEntry

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DirectoryChild:
    """One raw directory child plus the metadata needed to build an entry."""

    name: str
    path: Path
    is_dir: bool
    size_bytes: int
    mtime_ns: int
    readable: bool


class LocalFileSystem:
    """Filesystem accessor backed by ``os``.

    Permission checks use ``os.access`` so they reflect what the current
    process may read right now, following symlinks to their targets.
    """

    def list_children(self, directory: Path) -> list[DirectoryChild]:
        """Return direct children of ``directory`` in scan order.

        Raises ``OSError`` when the directory itself cannot be enumerated.
        """
        children: list[DirectoryChild] = []
        with os.scandir(directory) as entries:
            for child in entries:
                child_path = Path(child.path)
                try:
                    is_dir = child.is_dir()
                except OSError:
                    is_dir = False

                size_bytes = 0
                mtime_ns = 0
                readable = self.can_read(child_path)
                try:
                    stat = child.stat()
                    mtime_ns = int(stat.st_mtime_ns)
                    if not is_dir:
                        size_bytes = int(stat.st_size)
                except OSError:
                    # dangling symlink or vanished entry
                    readable = False

                children.append(
                    DirectoryChild(
                        name=child.name,
                        path=child_path,
                        is_dir=is_dir,
                        size_bytes=size_bytes,
                        mtime_ns=mtime_ns,
                        readable=readable,
                    )
                )
        return children

    def read_bytes(self, path: Path) -> bytes:
        return path.read_bytes()

    def exists(self, path: Path) -> bool:
        return os.path.exists(path)

    def can_read(self, path: Path) -> bool:
        return os.access(path, os.R_OK)

    def is_dir(self, path: Path) -> bool:
        return os.path.isdir(path)

    def is_readable_directory(self, path: Path) -> bool:
        return self.is_dir(path) and self.can_read(path)

    def parent_of(self, path: Path) -> Path | None:
        """Return the parent directory, or ``None`` at a filesystem root."""
        parent = path.parent
        if parent == path:
            return None
        return parent


def stat_entry(path: Path) -> FileEntry:
    """Build an entry for a single path. Raises ``OSError`` if it cannot be stat'ed."""
    path = path.absolute()
    stat = path.stat()
    is_dir = os.path.isdir(path)
    return FileEntry(
        name=path.name,
        path=path,
        is_dir=is_dir,
        size_bytes=0 if is_dir else int(stat.st_size),
        mtime_ns=int(stat.st_mtime_ns),
    )


def entry_sort_key(entry: FileEntry) -> tuple[bool, str]:
    """Directories first, then case-insensitive name."""
    return (not entry.is_dir, entry.name.lower())


def list_directory(directory: Path, fs: LocalFileSystem | None = None) -> DirectoryListing:
    """Build the sorted listing of readable children of ``directory``.

    Unreadable children are skipped. A directory that cannot be scanned yields
    an empty listing carrying the scan error instead of raising.
    """
    fs = fs or LocalFileSystem()
    logger.debug("loading listing for %s", directory)
    try:
        children = fs.list_children(directory)
    except OSError as exc:
        logger.debug("cannot scan %s: %s", directory, exc)
        return DirectoryListing(directory=directory, entries=(), scan_error=exc)

    entries: list[FileEntry] = []
    for child in children:
        if not child.readable:
            logger.debug("skipping unreadable entry %s", child.path)
            continue
        entries.append(
            FileEntry(
                name=child.name,
                path=child.path.absolute(),
                is_dir=child.is_dir,
                size_bytes=0 if child.is_dir else child.size_bytes,
                mtime_ns=child.mtime_ns,
            )
        )
    entries.sort(key=entry_sort_key)
    logger.debug("loaded %d entries from %s", len(entries), directory)
    return DirectoryListing(directory=directory, entries=tuple(entries))


__all__ = [
    "DirectoryChild",
    "LocalFileSystem",
    "stat_entry",
    "entry_sort_key",
    "list_directory",
]
