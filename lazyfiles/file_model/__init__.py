"""Domain model for directory listings.

This package contains non-UI listing primitives:
- file entry and listing datatypes
- the filesystem accessor and sorted listing builder
- size formatting for listing rows
"""

from __future__ import annotations

from .types import DirectoryListing, FileEntry
from .fs import DirectoryChild, LocalFileSystem, entry_sort_key, list_directory, stat_entry
from .formatting import SIZE_UNITS, format_size

__all__ = [
    "DirectoryListing",
    "FileEntry",
    "DirectoryChild",
    "LocalFileSystem",
    "entry_sort_key",
    "list_directory",
    "stat_entry",
    "SIZE_UNITS",
    "format_size",
]
