# Copyright (C) 2026 Alex Stoyanov
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation; either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License along with this program.
# If not, see <https://www.gnu.org/licenses/>.

import unittest

from onepager.layout.paper import (
    PAPER_SIZES_PX,
    build_layout_config,
    normalize_orientation,
    normalize_paper_size,
    paper_size_px,
)


class TestPaperSizes(unittest.TestCase):
    def test_sizes_are_96_dpi_portrait(self) -> None:
        self.assertEqual(PAPER_SIZES_PX["LETTER"], (816, 1056))
        self.assertEqual(PAPER_SIZES_PX["A4"], (794, 1123))
        self.assertEqual(PAPER_SIZES_PX["LEGAL"], (816, 1344))
        for width, height in PAPER_SIZES_PX.values():
            self.assertLess(width, height)

    def test_normalize_paper_size(self) -> None:
        self.assertEqual(normalize_paper_size(" letter "), "LETTER")
        self.assertEqual(paper_size_px("a4"), (794, 1123))
        with self.assertRaisesRegex(ValueError, "unknown paper size"):
            normalize_paper_size("tabloid")

    def test_normalize_orientation(self) -> None:
        self.assertEqual(normalize_orientation("Landscape"), "landscape")
        self.assertEqual(normalize_orientation("portrait "), "portrait")
        with self.assertRaises(ValueError):
            normalize_orientation("sideways")


class TestBuildLayoutConfig(unittest.TestCase):
    def test_builds_config(self) -> None:
        config = build_layout_config(
            "a4",
            max_pages=2,
            orientation="LANDSCAPE",
            font_size_override=12.5,
        )
        self.assertEqual((config.page_width, config.page_height), (794, 1123))
        self.assertEqual(config.max_pages, 2)
        self.assertEqual(config.orientation, "landscape")
        self.assertEqual(config.font_size_override, 12.5)

    def test_defaults(self) -> None:
        config = build_layout_config("LETTER")
        self.assertEqual(config.max_pages, 1)
        self.assertEqual(config.orientation, "portrait")
        self.assertIsNone(config.font_size_override)

    def test_rejects_invalid_values(self) -> None:
        cases = (
            {"max_pages": 0},
            {"max_pages": -1},
            {"max_pages": True},
            {"max_pages": 1.5},
            {"font_size_override": 0},
            {"font_size_override": -3},
            {"orientation": "diagonal"},
        )
        for kwargs in cases:
            with self.subTest(kwargs=kwargs):
                with self.assertRaises(ValueError):
                    build_layout_config("LETTER", **kwargs)


if __name__ == "__main__":
    unittest.main()
