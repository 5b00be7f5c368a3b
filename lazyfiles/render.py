"""Plain-text rendering of session state for terminal output.

Rows are numbered from 1 so shell commands can refer to entries by index.
"""

from __future__ import annotations

from .file_model.formatting import format_size
from .file_model.types import FileEntry
from .preview.highlight import DEFAULT_STYLE, colorize_text
from .preview.image import describe_image
from .preview.kinds import is_text_file
from .preview.text import sanitize_terminal_text
from .preview.viewer import ImagePreview, TextPreview, ViewerManager
from .runtime.navigation import NavigationState
from .runtime.session import MODE_PREVIEWING, BrowserSession

DIRECTORY_MARKER = "[D]"
FILE_MARKER = "[F]"
NAME_COLUMN_WIDTH = 32


def status_line(session: BrowserSession) -> str:
    """Status text: entry count while browsing, viewer title while previewing."""
    viewer = session.viewer
    if session.mode == MODE_PREVIEWING:
        if viewer.is_loading:
            return f"Loading: {viewer.file_name}"
        if isinstance(viewer.state, ImagePreview):
            return f"Image viewer: {viewer.file_name}"
        return f"Text viewer: {viewer.file_name}"
    navigation = session.navigation
    if navigation.is_loading:
        return "Loading..."
    count = len(navigation.entries)
    if count == 0:
        return "No files"
    return f"{count} items"


def render_entry_row(index: int, entry: FileEntry) -> str:
    name = sanitize_terminal_text(entry.name)
    if entry.is_dir:
        return f"{index:>4} {DIRECTORY_MARKER} {name}/"
    size = format_size(entry.size_bytes)
    return f"{index:>4} {FILE_MARKER} {name:<{NAME_COLUMN_WIDTH}} {size:>10}  {entry.formatted_mtime}"


def render_listing(navigation: NavigationState) -> list[str]:
    lines = [str(navigation.current_directory or "/")]
    listing = navigation.listing
    if listing is not None and listing.scan_error is not None:
        lines.append(f"<cannot list directory: {listing.scan_error}>")
    for index, entry in enumerate(navigation.entries, start=1):
        lines.append(render_entry_row(index, entry))
    return lines


def render_viewer(viewer: ViewerManager, style: str = DEFAULT_STYLE, color: bool = False) -> list[str]:
    lines = [viewer.file_name, ""]
    state = viewer.state
    if isinstance(state, ImagePreview):
        lines.append(f"<image {describe_image(state.image)}>")
        return lines
    if isinstance(state, TextPreview):
        content = sanitize_terminal_text(state.content)
        if color and is_text_file(viewer.file_name):
            content = colorize_text(content, viewer.file_name, style)
        lines.extend(content.splitlines())
    return lines


def render_session(session: BrowserSession, style: str = DEFAULT_STYLE, color: bool = False) -> str:
    """Render the active view followed by the status line."""
    if session.mode == MODE_PREVIEWING:
        lines = render_viewer(session.viewer, style=style, color=color)
    else:
        lines = render_listing(session.navigation)
    lines.append("")
    lines.append(status_line(session))
    return "\n".join(lines) + "\n"


__all__ = [
    "status_line",
    "render_entry_row",
    "render_listing",
    "render_viewer",
    "render_session",
]
