"""Navigation state: current directory, its listing, and back history.

This module intentionally has no UI concerns.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Callable, Iterable
from pathlib import Path
from typing import TYPE_CHECKING

from ..errors import NoAccessibleRootError, NotReadableError
from ..file_model.fs import LocalFileSystem, list_directory
from ..file_model.types import DirectoryListing, FileEntry

if TYPE_CHECKING:
    from ..preview.viewer import ViewerManager

logger = logging.getLogger(__name__)


def normalize_directory(path: Path | str) -> Path:
    """Absolute, ``..``-collapsed path without resolving symlinks."""
    return Path(os.path.abspath(os.fspath(path)))


class DirectoryHistory:
    """Stack of previously visited directories for back-navigation."""

    def __init__(self) -> None:
        self._stack: list[Path] = []

    def push(self, directory: Path) -> None:
        self._stack.append(directory)

    def pop(self) -> Path | None:
        if not self._stack:
            return None
        return self._stack.pop()

    def clear(self) -> None:
        self._stack.clear()

    def __len__(self) -> int:
        return len(self._stack)


class NavigationState:
    """Owns the current directory, its listing, and the history stack.

    With ``schedule_listing`` set, listings are loaded elsewhere and delivered
    back through ``apply_listing``; ``listing`` is ``None`` while a load for
    the current directory is in flight.
    """

    def __init__(
        self,
        fs: LocalFileSystem | None = None,
        schedule_listing: Callable[[Path], object] | None = None,
    ) -> None:
        self.fs = fs or LocalFileSystem()
        self.history = DirectoryHistory()
        self.current_directory: Path | None = None
        self.listing: DirectoryListing | None = None
        self._schedule_listing = schedule_listing

    @property
    def is_initialized(self) -> bool:
        return self.current_directory is not None

    @property
    def is_loading(self) -> bool:
        return self.current_directory is not None and self.listing is None

    @property
    def entries(self) -> tuple[FileEntry, ...]:
        if self.listing is None:
            return ()
        return self.listing.entries

    def initialize(self, candidate_paths: Iterable[Path | str]) -> Path:
        """Select the first existing, readable candidate directory and list it.

        Raises ``NoAccessibleRootError`` when no candidate qualifies.
        """
        candidates = [normalize_directory(path) for path in candidate_paths]
        for candidate in candidates:
            if self.fs.exists(candidate) and self.fs.is_readable_directory(candidate):
                logger.debug("initial directory %s", candidate)
                self.history.clear()
                self._show(candidate)
                return candidate
            logger.debug("root candidate %s is not accessible", candidate)
        raise NoAccessibleRootError(candidates)

    def navigate_into(self, path: Path | str) -> None:
        """Enter ``path``, recording the current directory in history.

        Raises ``NotReadableError`` and leaves state unchanged unless ``path``
        is a currently readable directory.
        """
        target = normalize_directory(path)
        if not self.fs.is_readable_directory(target):
            raise NotReadableError(target)
        if self.current_directory is not None:
            self.history.push(self.current_directory)
        self._show(target)

    def navigate_up(self) -> bool:
        """Move to the parent directory. Returns ``False`` when that is impossible."""
        current = self.current_directory
        if current is None:
            return False
        parent = self.fs.parent_of(current)
        if parent is None or not self.fs.can_read(parent):
            return False
        self.history.push(current)
        self._show(parent)
        return True

    def navigate_back(self, viewer: ViewerManager | None = None) -> bool:
        """Handle a back action.

        An open viewer is closed first and counts as the whole action. Otherwise
        the latest history entry becomes current. Returns ``False`` when there
        is nothing to go back to.
        """
        if viewer is not None and viewer.is_active:
            viewer.close()
            return True

        previous = self.history.pop()
        if previous is None:
            return False

        if not self.fs.is_readable_directory(previous):
            logger.info("history entry %s is no longer a readable directory", previous)
            self.current_directory = previous
            self.listing = DirectoryListing(
                directory=previous,
                entries=(),
                scan_error=NotReadableError(previous),
            )
            return True

        self._show(previous)
        return True

    def load_listing(self, directory: Path) -> DirectoryListing:
        """Enumerate readable children of ``directory``, directories first."""
        return list_directory(directory, self.fs)

    def reload(self) -> None:
        if self.current_directory is not None:
            self._show(self.current_directory)

    def apply_listing(self, listing: DirectoryListing) -> bool:
        """Store a listing loaded elsewhere if it is for the current directory."""
        if listing.directory != self.current_directory:
            logger.debug("discarding listing for %s (current is %s)", listing.directory, self.current_directory)
            return False
        self.listing = listing
        return True

    def _show(self, directory: Path) -> None:
        self.current_directory = directory
        if self._schedule_listing is None:
            self.listing = self.load_listing(directory)
            return
        self.listing = None
        self._schedule_listing(directory)


__all__ = [
    "normalize_directory",
    "DirectoryHistory",
    "NavigationState",
]
