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

from onepager.render.themes import DEFAULT_THEME, THEME_NAMES, get_theme, list_themes


class TestThemes(unittest.TestCase):
    def test_registry(self) -> None:
        self.assertEqual(THEME_NAMES, ("minimal", "modern", "classic"))
        self.assertEqual(DEFAULT_THEME, "minimal")
        self.assertEqual([theme.name for theme in list_themes()], list(THEME_NAMES))

    def test_get_theme_is_case_insensitive(self) -> None:
        theme = get_theme(" Classic ")
        self.assertEqual(theme.name, "classic")
        self.assertEqual(theme.css_class, "theme-classic")

    def test_css_classes_are_unique(self) -> None:
        classes = {theme.css_class for theme in list_themes()}
        self.assertEqual(len(classes), len(THEME_NAMES))

    def test_unknown_theme_raises(self) -> None:
        with self.assertRaisesRegex(ValueError, "unknown theme"):
            get_theme("neon")


if __name__ == "__main__":
    unittest.main()
