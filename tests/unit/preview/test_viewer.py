"""Tests for viewer state transitions and in-band diagnostics.

Opening files never raises: read and decode failures become text content.
"""

from __future__ import annotations

import tempfile
import unittest
from pathlib import Path
from unittest import mock

from PIL import Image

from lazyfiles.errors import NotReadableError
from lazyfiles.file_model import FileEntry, LocalFileSystem, stat_entry
from lazyfiles.preview import (
    EMPTY_FILE_MARKER,
    NO_PREVIEW,
    ImagePreview,
    TextPreview,
    ViewerManager,
)
from lazyfiles.runtime.navigation import NavigationState


def _viewer_for(root: Path) -> ViewerManager:
    navigation = NavigationState()
    navigation.initialize([root])
    return ViewerManager(navigation)


class ViewerTextTests(unittest.TestCase):
    def test_text_file_content_is_loaded(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp)
            target = root / "notes.md"
            target.write_text("# Title\nbody\n", encoding="utf-8")
            viewer = _viewer_for(root)

            viewer.open(stat_entry(target))

            self.assertEqual(viewer.state, TextPreview("# Title\nbody\n"))
            self.assertEqual(viewer.content, "# Title\nbody\n")
            self.assertEqual(viewer.file_name, "notes.md")
            self.assertTrue(viewer.is_active)

    def test_non_utf8_text_falls_back_to_latin1(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp)
            target = root / "legacy.txt"
            target.write_bytes("café".encode("latin-1"))
            viewer = _viewer_for(root)

            viewer.open(stat_entry(target))

            self.assertEqual(viewer.content, "café")

    def test_empty_and_whitespace_files_show_empty_marker(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp)
            empty = root / "empty.txt"
            empty.write_text("", encoding="utf-8")
            blank = root / "blank.log"
            blank.write_text(" \n\t\n", encoding="utf-8")
            viewer = _viewer_for(root)

            viewer.open(stat_entry(empty))
            self.assertEqual(viewer.content, EMPTY_FILE_MARKER)

            viewer.open(stat_entry(blank))
            self.assertEqual(viewer.content, EMPTY_FILE_MARKER)

    def test_missing_text_file_yields_diagnostic(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp)
            ghost = FileEntry(name="ghost.txt", path=root / "ghost.txt", is_dir=False)
            viewer = _viewer_for(root)

            viewer.open(ghost)

            self.assertIsInstance(viewer.state, TextPreview)
            self.assertIn("does not exist", viewer.content)
            self.assertIn(str(root / "ghost.txt"), viewer.content)

    def test_unreadable_text_file_yields_permission_diagnostic(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp)
            target = root / "secret.txt"
            target.write_text("hidden", encoding="utf-8")
            viewer = _viewer_for(root)
            entry = stat_entry(target)

            with mock.patch.object(LocalFileSystem, "can_read", return_value=False):
                viewer.open(entry)

            self.assertIn("insufficient permissions", viewer.content)
            self.assertNotIn("hidden", viewer.content)

    def test_read_error_reports_exception_type(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp)
            target = root / "flaky.txt"
            target.write_text("data", encoding="utf-8")
            viewer = _viewer_for(root)

            with mock.patch.object(LocalFileSystem, "read_bytes", side_effect=OSError("disk on fire")):
                viewer.open(stat_entry(target))

            self.assertIn("Error reading file: disk on fire", viewer.content)
            self.assertIn("Type: OSError", viewer.content)

    def test_unknown_extension_shows_placeholder_with_size(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp)
            target = root / "archive.zip"
            target.write_bytes(b"\x00" * 1536)
            viewer = _viewer_for(root)

            viewer.open(stat_entry(target))

            self.assertEqual(
                viewer.content,
                "This file type cannot be previewed directly.\n"
                f"Path: {target.absolute()}\n"
                "Size: 1.5 KB",
            )


class ViewerImageTests(unittest.TestCase):
    def test_valid_png_becomes_image_preview(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp)
            target = root / "dot.PNG"
            Image.new("RGB", (3, 2), color=(255, 0, 0)).save(target, format="PNG")
            viewer = _viewer_for(root)

            viewer.open(stat_entry(target))

            self.assertIsInstance(viewer.state, ImagePreview)
            self.assertEqual(viewer.image.size, (3, 2))
            self.assertEqual(viewer.content, "")
            self.assertEqual(viewer.file_name, "dot.PNG")

    def test_corrupt_png_becomes_decode_diagnostic(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp)
            target = root / "broken.png"
            target.write_bytes(b"\x89PNG\r\n\x1a\nnot really an image")
            viewer = _viewer_for(root)

            viewer.open(stat_entry(target))

            self.assertIsInstance(viewer.state, TextPreview)
            self.assertIn("Could not load the image", viewer.content)
            self.assertIsNone(viewer.image)

    def test_unreadable_image_yields_access_diagnostic(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp)
            target = root / "locked.jpg"
            target.write_bytes(b"whatever")
            viewer = _viewer_for(root)
            entry = stat_entry(target)

            with mock.patch.object(LocalFileSystem, "can_read", return_value=False):
                viewer.open(entry)

            self.assertIn("Cannot access the image", viewer.content)


class ViewerDirectoryAndCloseTests(unittest.TestCase):
    def test_opening_directory_navigates_and_keeps_viewer_closed(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp)
            child = root / "child"
            child.mkdir()
            viewer = _viewer_for(root)

            viewer.open(stat_entry(child))

            self.assertIs(viewer.state, NO_PREVIEW)
            self.assertFalse(viewer.is_active)
            self.assertEqual(viewer.file_name, "")
            self.assertEqual(viewer.navigation.current_directory, child.absolute())

    def test_opening_directory_closes_open_preview(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp)
            child = root / "child"
            child.mkdir()
            target = root / "a.txt"
            target.write_text("text", encoding="utf-8")
            viewer = _viewer_for(root)
            viewer.open(stat_entry(target))

            viewer.open(stat_entry(child))

            self.assertIs(viewer.state, NO_PREVIEW)
            self.assertEqual(viewer.file_name, "")
            self.assertEqual(viewer.navigation.current_directory, child.absolute())

    def test_opening_unreadable_directory_keeps_open_preview(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp)
            child = root / "child"
            child.mkdir()
            target = root / "a.txt"
            target.write_text("text", encoding="utf-8")
            viewer = _viewer_for(root)
            viewer.open(stat_entry(target))
            entry = stat_entry(child)

            with mock.patch.object(LocalFileSystem, "can_read", return_value=False):
                with self.assertRaises(NotReadableError):
                    viewer.open(entry)

            self.assertEqual(viewer.state, TextPreview("text"))
            self.assertEqual(viewer.file_name, "a.txt")

    def test_opening_unreadable_directory_raises_not_readable(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp)
            child = root / "child"
            child.mkdir()
            viewer = _viewer_for(root)
            entry = stat_entry(child)

            with mock.patch.object(LocalFileSystem, "can_read", return_value=False):
                with self.assertRaises(NotReadableError):
                    viewer.open(entry)

            self.assertEqual(viewer.navigation.current_directory, root.absolute())

    def test_close_resets_state_and_is_idempotent(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp)
            target = root / "a.txt"
            target.write_text("text", encoding="utf-8")
            viewer = _viewer_for(root)
            viewer.open(stat_entry(target))

            viewer.close()
            after_first = (viewer.state, viewer.file_name, viewer.content, viewer.is_active)
            viewer.close()
            after_second = (viewer.state, viewer.file_name, viewer.content, viewer.is_active)

            self.assertEqual(after_first, (NO_PREVIEW, "", "", False))
            self.assertEqual(after_second, after_first)

    def test_stale_background_preview_is_ignored_after_close(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp)
            target = root / "a.txt"
            target.write_text("text", encoding="utf-8")
            navigation = NavigationState()
            navigation.initialize([root])
            tokens = iter([7, 8])
            viewer = ViewerManager(navigation, schedule_preview=lambda _entry: next(tokens))

            viewer.open(stat_entry(target))
            self.assertTrue(viewer.is_loading)
            self.assertTrue(viewer.is_active)
            viewer.close()

            self.assertFalse(viewer.apply_preview(7, TextPreview("late")))
            self.assertIs(viewer.state, NO_PREVIEW)

            viewer.open(stat_entry(target))
            self.assertTrue(viewer.apply_preview(8, TextPreview("fresh")))
            self.assertEqual(viewer.content, "fresh")
            self.assertFalse(viewer.is_loading)


if __name__ == "__main__":
    unittest.main()
