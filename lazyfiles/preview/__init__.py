"""Public preview API.

Implementation lives in small focused modules: extension classification,
text and image decoding, and the viewer state manager.
"""

from __future__ import annotations

from .image import ImageDecodeError, decode_image, describe_image
from .kinds import (
    IMAGE_EXTENSIONS,
    KIND_DIRECTORY,
    KIND_IMAGE,
    KIND_OTHER,
    KIND_TEXT,
    TEXT_EXTENSIONS,
    classify_entry,
    file_extension,
    is_image_file,
    is_text_file,
)
from .text import EMPTY_FILE_MARKER, decode_text, sanitize_terminal_text
from .viewer import (
    NO_PREVIEW,
    ImagePreview,
    NoPreview,
    TextPreview,
    ViewerManager,
    ViewerState,
    build_preview,
)

__all__ = [
    "ImageDecodeError",
    "decode_image",
    "describe_image",
    "IMAGE_EXTENSIONS",
    "TEXT_EXTENSIONS",
    "KIND_DIRECTORY",
    "KIND_IMAGE",
    "KIND_TEXT",
    "KIND_OTHER",
    "classify_entry",
    "file_extension",
    "is_image_file",
    "is_text_file",
    "EMPTY_FILE_MARKER",
    "decode_text",
    "sanitize_terminal_text",
    "NO_PREVIEW",
    "NoPreview",
    "TextPreview",
    "ImagePreview",
    "ViewerState",
    "ViewerManager",
    "build_preview",
]
