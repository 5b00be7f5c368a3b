"""Viewer state: which inline preview is active and what it shows.

Opening an entry dispatches on its kind. Directories are handed to the
navigation state; files become a text or image preview. Read and decode
failures never escape: they become diagnostic text inside ``TextPreview``.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import TYPE_CHECKING

from ..file_model.formatting import format_size
from ..file_model.fs import LocalFileSystem
from ..file_model.types import FileEntry
from .image import ImageDecodeError, decode_image
from .kinds import KIND_DIRECTORY, KIND_IMAGE, KIND_OTHER, KIND_TEXT, classify_entry
from .text import decode_text, text_or_empty_marker

if TYPE_CHECKING:
    from ..runtime.navigation import NavigationState

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class NoPreview:
    """No viewer is open; the listing is shown."""


@dataclass(frozen=True)
class TextPreview:
    content: str


@dataclass(frozen=True)
class ImagePreview:
    image: object


ViewerState = NoPreview | TextPreview | ImagePreview
NO_PREVIEW = NoPreview()

ImageDecoder = Callable[[bytes], object]


def build_image_preview(
    entry: FileEntry,
    fs: LocalFileSystem,
    decoder: ImageDecoder = decode_image,
) -> ViewerState:
    path = entry.path
    if not (fs.exists(path) and fs.can_read(path)):
        logger.info("image not accessible: %s", path)
        return TextPreview(f"Cannot access the image.\nPath: {path}")
    try:
        data = fs.read_bytes(path)
    except OSError as exc:
        logger.info("error opening image %s: %s", path, exc)
        return TextPreview(f"Error opening the image: {exc}\nPath: {path}")
    try:
        image = decoder(data)
    except ImageDecodeError as exc:
        logger.info("cannot decode image %s: %s", path, exc)
        return TextPreview(f"Could not load the image. The format may not be supported.\nPath: {path}")
    return ImagePreview(image)


def build_text_preview(entry: FileEntry, fs: LocalFileSystem, decoder: ImageDecoder = decode_image) -> ViewerState:
    path = entry.path
    if not fs.exists(path):
        logger.info("text file missing: %s", path)
        return TextPreview(f"The file does not exist.\nPath: {path}")
    if not fs.can_read(path):
        logger.info("text file not readable: %s", path)
        return TextPreview(f"The file exists but cannot be read due to insufficient permissions.\nPath: {path}")
    try:
        content = decode_text(fs.read_bytes(path))
    except OSError as exc:
        logger.info("error reading %s: %s", path, exc)
        return TextPreview(f"Error reading file: {exc}\nType: {type(exc).__name__}\nPath: {path}")
    return TextPreview(text_or_empty_marker(content))


def build_unsupported_preview(
    entry: FileEntry,
    fs: LocalFileSystem,
    decoder: ImageDecoder = decode_image,
) -> ViewerState:
    return TextPreview(
        "This file type cannot be previewed directly.\n"
        f"Path: {entry.path}\n"
        f"Size: {format_size(entry.size_bytes)}"
    )


_PREVIEW_BUILDERS: dict[str, Callable[[FileEntry, LocalFileSystem, ImageDecoder], ViewerState]] = {
    KIND_IMAGE: build_image_preview,
    KIND_TEXT: build_text_preview,
    KIND_OTHER: build_unsupported_preview,
}


def build_preview(
    entry: FileEntry,
    fs: LocalFileSystem | None = None,
    decoder: ImageDecoder = decode_image,
) -> ViewerState:
    """Build the viewer state for a file entry. Never raises for I/O failures."""
    kind = classify_entry(entry)
    if kind == KIND_DIRECTORY:
        raise ValueError(f"directories have no preview: {entry.path}")
    return _PREVIEW_BUILDERS[kind](entry, fs or LocalFileSystem(), decoder)


class ViewerManager:
    """Owns the active preview and the name of the file being viewed.

    With ``schedule_preview`` set, file previews are built elsewhere (usually
    on a worker thread). The callable returns a token, and only a result
    delivered through ``apply_preview`` with the latest token is shown.
    """

    def __init__(
        self,
        navigation: NavigationState,
        fs: LocalFileSystem | None = None,
        decoder: ImageDecoder = decode_image,
        schedule_preview: Callable[[FileEntry], int] | None = None,
    ) -> None:
        self.navigation = navigation
        self.fs = fs or LocalFileSystem()
        self.decoder = decoder
        self.state: ViewerState = NO_PREVIEW
        self.file_name = ""
        self._schedule_preview = schedule_preview
        self._pending_token: int | None = None

    @property
    def is_loading(self) -> bool:
        return self._pending_token is not None

    @property
    def is_active(self) -> bool:
        """Whether a preview is shown or being loaded."""
        return self.is_loading or not isinstance(self.state, NoPreview)

    @property
    def content(self) -> str:
        if isinstance(self.state, TextPreview):
            return self.state.content
        return ""

    @property
    def image(self) -> object | None:
        if isinstance(self.state, ImagePreview):
            return self.state.image
        return None

    def build_preview(self, entry: FileEntry) -> ViewerState:
        return build_preview(entry, self.fs, self.decoder)

    def open(self, entry: FileEntry) -> None:
        """Open ``entry``: enter a directory or preview a file.

        Directory entries raise ``NotReadableError`` like ``navigate_into`` and
        leave the viewer untouched; a directory that opens closes the viewer.
        """
        if classify_entry(entry) == KIND_DIRECTORY:
            self.navigation.navigate_into(entry.path)
            self.close()
            return

        self.file_name = entry.name
        if self._schedule_preview is None:
            self.state = self.build_preview(entry)
            return
        self.state = NO_PREVIEW
        self._pending_token = self._schedule_preview(entry)

    def apply_preview(self, token: int, state: ViewerState) -> bool:
        """Show a preview built in the background if ``token`` is still current."""
        if token != self._pending_token:
            logger.debug("discarding stale preview result %s", token)
            return False
        self._pending_token = None
        self.state = state
        return True

    def close(self) -> None:
        self.state = NO_PREVIEW
        self.file_name = ""
        self._pending_token = None


__all__ = [
    "NoPreview",
    "TextPreview",
    "ImagePreview",
    "ViewerState",
    "NO_PREVIEW",
    "build_image_preview",
    "build_text_preview",
    "build_unsupported_preview",
    "build_preview",
    "ViewerManager",
]
