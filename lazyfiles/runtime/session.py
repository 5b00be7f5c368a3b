"""Browser session: one owner for navigation and viewer state.

The session is the two-level state machine the presentation layer talks to.
The outer mode is ``browsing`` or ``previewing``; ``navigate_back`` leaves
``previewing`` before the directory history is ever touched.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from functools import partial
from pathlib import Path

from ..errors import NotReadableError
from ..file_model.fs import LocalFileSystem
from ..file_model.types import DirectoryListing, FileEntry
from ..preview.image import decode_image
from ..preview.viewer import ImageDecoder, TextPreview, ViewerManager
from .loader import CHANNEL_LISTING, CHANNEL_PREVIEW, BackgroundLoader
from .navigation import NavigationState

logger = logging.getLogger(__name__)

MODE_BROWSING = "browsing"
MODE_PREVIEWING = "previewing"

SessionListener = Callable[["BrowserSession"], None]


class BrowserSession:
    """Navigation plus viewer state for one browsing session.

    With a ``loader``, listing and preview I/O runs on its worker thread and
    ``poll`` applies finished loads. Without one, every operation completes
    synchronously.
    """

    def __init__(
        self,
        fs: LocalFileSystem | None = None,
        decoder: ImageDecoder = decode_image,
        loader: BackgroundLoader | None = None,
    ) -> None:
        self.fs = fs or LocalFileSystem()
        self.loader = loader
        self._listeners: list[SessionListener] = []
        self._listing_directories: dict[int, Path] = {}
        self.navigation = NavigationState(
            self.fs,
            schedule_listing=self._schedule_listing if loader is not None else None,
        )
        self.viewer = ViewerManager(
            self.navigation,
            self.fs,
            decoder,
            schedule_preview=self._schedule_preview if loader is not None else None,
        )

    @property
    def mode(self) -> str:
        return MODE_PREVIEWING if self.viewer.is_active else MODE_BROWSING

    @property
    def current_directory(self) -> Path | None:
        return self.navigation.current_directory

    @property
    def entries(self) -> tuple[FileEntry, ...]:
        return self.navigation.entries

    def add_listener(self, listener: SessionListener) -> None:
        self._listeners.append(listener)

    def remove_listener(self, listener: SessionListener) -> None:
        self._listeners.remove(listener)

    def _notify(self) -> None:
        for listener in list(self._listeners):
            listener(self)

    def _schedule_listing(self, directory: Path) -> int:
        assert self.loader is not None
        request_id = self.loader.schedule(CHANNEL_LISTING, partial(self.navigation.load_listing, directory))
        # only the newest listing request can still be delivered
        self._listing_directories = {request_id: directory}
        return request_id

    def _schedule_preview(self, entry: FileEntry) -> int:
        assert self.loader is not None
        return self.loader.schedule(CHANNEL_PREVIEW, partial(self.viewer.build_preview, entry))

    def initialize(self, candidate_paths: Iterable[Path | str]) -> Path:
        """Pick the first accessible root. Raises ``NoAccessibleRootError``."""
        root = self.navigation.initialize(candidate_paths)
        self.viewer.close()
        self._notify()
        return root

    def open(self, entry: FileEntry) -> bool:
        """Open a listing entry. Returns ``False`` if a directory is not readable."""
        try:
            self.viewer.open(entry)
        except NotReadableError as exc:
            logger.info("cannot open %s: %s", entry.path, exc)
            return False
        self._notify()
        return True

    def navigate_into(self, path: Path | str) -> bool:
        try:
            self.navigation.navigate_into(path)
        except NotReadableError as exc:
            logger.info("%s", exc)
            return False
        self._notify()
        return True

    def navigate_up(self) -> bool:
        moved = self.navigation.navigate_up()
        if moved:
            self._notify()
        return moved

    def navigate_back(self) -> bool:
        """Close the viewer, else pop history. ``False`` means nothing was left."""
        handled = self.navigation.navigate_back(viewer=self.viewer)
        if handled:
            self._notify()
        return handled

    def close_viewer(self) -> None:
        was_active = self.viewer.is_active
        self.viewer.close()
        if was_active:
            self._notify()

    def poll(self) -> bool:
        """Apply finished background loads. Returns whether state changed."""
        if self.loader is None:
            return False
        changed = False
        for result in self.loader.drain_results():
            request = result.request
            if request.channel == CHANNEL_LISTING:
                directory = self._listing_directories.pop(request.request_id, None)
                listing = result.value
                if result.error is not None:
                    if directory is None:
                        continue
                    listing = DirectoryListing(directory=directory, entries=(), scan_error=result.error)
                changed = self.navigation.apply_listing(listing) or changed
            elif request.channel == CHANNEL_PREVIEW:
                state = result.value
                if result.error is not None:
                    state = TextPreview(f"Error opening file: {result.error}")
                changed = self.viewer.apply_preview(request.request_id, state) or changed
        if changed:
            self._notify()
        return changed


__all__ = [
    "MODE_BROWSING",
    "MODE_PREVIEWING",
    "BrowserSession",
]
