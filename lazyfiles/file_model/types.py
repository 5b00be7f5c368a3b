"""Domain datatypes for directory listings."""

from __future__ import annotations

import time
from dataclasses import dataclass
from pathlib import Path

MTIME_DISPLAY_FORMAT = "%d/%m/%Y %H:%M:%S"


@dataclass(frozen=True)
class FileEntry:
    """One readable directory child observed at listing time."""

    name: str
    path: Path
    is_dir: bool
    size_bytes: int = 0
    mtime_ns: int = 0

    @property
    def last_modified_ms(self) -> int:
        return self.mtime_ns // 1_000_000

    @property
    def formatted_mtime(self) -> str:
        """Local modification time as ``dd/mm/YYYY HH:MM:SS``."""
        return time.strftime(MTIME_DISPLAY_FORMAT, time.localtime(self.mtime_ns / 1_000_000_000))


@dataclass(frozen=True)
class DirectoryListing:
    """Sorted readable children of ``directory``.

    ``scan_error`` is set when the directory itself could not be enumerated;
    ``entries`` is then empty.
    """

    directory: Path
    entries: tuple[FileEntry, ...] = ()
    scan_error: Exception | None = None

    def __len__(self) -> int:
        return len(self.entries)

    @property
    def is_empty(self) -> bool:
        return not self.entries


__all__ = [
    "FileEntry",
    "DirectoryListing",
]
