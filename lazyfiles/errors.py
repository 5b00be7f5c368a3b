"""Exception types raised by navigation and initialization."""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path


class LazyFilesError(Exception):
    """Base class for lazyfiles errors."""


class NoAccessibleRootError(LazyFilesError):
    """No candidate root directory exists and is readable."""

    def __init__(self, candidates: Iterable[Path]) -> None:
        self.candidates = tuple(candidates)
        if self.candidates:
            tried = ", ".join(str(path) for path in self.candidates)
            message = f"no accessible root directory (tried: {tried})"
        else:
            message = "no accessible root directory (no candidates given)"
        super().__init__(message)


class NotReadableError(LazyFilesError):
    """Navigation target is not a directory that can currently be read."""

    def __init__(self, path: Path) -> None:
        self.path = path
        super().__init__(f"not a readable directory: {path}")


__all__ = [
    "LazyFilesError",
    "NoAccessibleRootError",
    "NotReadableError",
]
