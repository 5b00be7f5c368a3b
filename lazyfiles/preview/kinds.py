"""Extension-based classification of listing entries.

Only the substring after the last ``.`` of the name is considered; content is
never sniffed. Matching is case-insensitive.
"""

from __future__ import annotations

from ..file_model.types import FileEntry

KIND_DIRECTORY = "directory"
KIND_IMAGE = "image"
KIND_TEXT = "text"
KIND_OTHER = "other"

IMAGE_EXTENSIONS = frozenset({"jpg", "jpeg", "png", "gif", "bmp", "webp"})
TEXT_EXTENSIONS = frozenset(
    {
        "txt",
        "md",
        "json",
        "xml",
        "html",
        "css",
        "js",
        "kt",
        "java",
        "py",
        "c",
        "cpp",
        "h",
        "hpp",
        "csv",
        "log",
        "ini",
        "properties",
        "yaml",
        "yml",
        "toml",
        "gradle",
        "gitignore",
        "sh",
        "bat",
        "config",
    }
)


def file_extension(name: str) -> str:
    """Return the lowercased extension of ``name``, or ``""`` when it has no dot."""
    _stem, dot, extension = name.rpartition(".")
    if not dot:
        return ""
    return extension.lower()


def is_image_file(name: str) -> bool:
    return file_extension(name) in IMAGE_EXTENSIONS


def is_text_file(name: str) -> bool:
    return file_extension(name) in TEXT_EXTENSIONS


def classify_entry(entry: FileEntry) -> str:
    """Return one of the ``KIND_*`` constants for ``entry``."""
    if entry.is_dir:
        return KIND_DIRECTORY
    extension = file_extension(entry.name)
    if extension in IMAGE_EXTENSIONS:
        return KIND_IMAGE
    if extension in TEXT_EXTENSIONS:
        return KIND_TEXT
    return KIND_OTHER


__all__ = [
    "KIND_DIRECTORY",
    "KIND_IMAGE",
    "KIND_TEXT",
    "KIND_OTHER",
    "IMAGE_EXTENSIONS",
    "TEXT_EXTENSIONS",
    "file_extension",
    "is_image_file",
    "is_text_file",
    "classify_entry",
]
