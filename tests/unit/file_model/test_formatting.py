"""Tests for base-1024 size labels."""

from __future__ import annotations

import unittest

from lazyfiles.file_model import format_size


class FormatSizeTests(unittest.TestCase):
    def test_non_positive_sizes_render_as_zero_bytes(self) -> None:
        self.assertEqual(format_size(0), "0 B")
        self.assertEqual(format_size(-5), "0 B")

    def test_small_sizes_stay_in_bytes(self) -> None:
        self.assertEqual(format_size(1), "1.0 B")
        self.assertEqual(format_size(1023), "1023.0 B")

    def test_scaled_units_use_one_decimal(self) -> None:
        self.assertEqual(format_size(1024), "1.0 KB")
        self.assertEqual(format_size(1536), "1.5 KB")
        self.assertEqual(format_size(1024**2 * 5 // 2), "2.5 MB")
        self.assertEqual(format_size(1073741824), "1.0 GB")

    def test_halves_round_up(self) -> None:
        self.assertEqual(format_size(1280), "1.3 KB")
        self.assertEqual(format_size(2304), "2.3 KB")
        self.assertEqual(format_size(1024**2 * 21 // 20), "1.1 MB")

    def test_exact_powers_pick_the_larger_unit(self) -> None:
        self.assertEqual(format_size(1024**3), "1.0 GB")
        self.assertEqual(format_size(1024**4), "1.0 TB")

    def test_units_stop_at_terabytes(self) -> None:
        self.assertEqual(format_size(1024**5), "1024.0 TB")


if __name__ == "__main__":
    unittest.main()
