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

import json
import unittest
from unittest import mock

from typer.testing import CliRunner

from onepager.cli import app
from tests.test_support import isolated_user_config, strip_ansi


class TestCliTyper(unittest.TestCase):
    def setUp(self) -> None:
        self.runner = CliRunner()
        startup_patch = mock.patch("onepager.cli.app.run_startup", return_value=False)
        startup_patch.start()
        self.addCleanup(startup_patch.stop)
        config_env = isolated_user_config()
        config_env.__enter__()
        self.addCleanup(config_env.__exit__, None, None, None)

    def test_root_info_commands(self) -> None:
        cases = (
            {
                "args": ["--help"],
                "expected_exit_code": 0,
                "contains": ("render", "layout", "themes", "templates", "config"),
            },
            {
                "args": ["--version"],
                "expected_exit_code": 0,
                "contains": ("onepager",),
            },
        )
        for case in cases:
            with self.subTest(args=case["args"]):
                result = self.runner.invoke(app, case["args"])
                self.assertEqual(result.exit_code, case["expected_exit_code"])
                output = strip_ansi(result.output).lower()
                for expected in case["contains"]:
                    self.assertIn(expected, output)

    def test_root_no_subcommand_references_help(self) -> None:
        result = self.runner.invoke(app, [])
        self.assertEqual(result.exit_code, 2)
        self.assertIn("onepager --help", strip_ansi(result.output))

    def test_startup_exit_skips_subcommand_check(self) -> None:
        with mock.patch("onepager.cli.app.run_startup", return_value=True):
            result = self.runner.invoke(app, ["--init-config"])
        self.assertEqual(result.exit_code, 0)

    def test_startup_error_exits_with_code_2(self) -> None:
        with mock.patch("onepager.cli.app.run_startup", side_effect=OSError("read-only")):
            result = self.runner.invoke(app, ["themes"])
        self.assertEqual(result.exit_code, 2)
        self.assertIn("read-only", strip_ansi(result.output))

    def test_render_help_lists_layout_options(self) -> None:
        result = self.runner.invoke(app, ["render", "--help"])
        self.assertEqual(result.exit_code, 0)
        output = strip_ansi(result.output)
        for option in ("--pages", "--orientation", "--font-size", "--theme", "--template"):
            self.assertIn(option, output)

    def test_layout_json(self) -> None:
        result = self.runner.invoke(app, ["layout", "2500", "--json"])
        self.assertEqual(result.exit_code, 0, result.output)
        payload = json.loads(strip_ansi(result.output))
        self.assertEqual(payload["columns"], 3)
        self.assertEqual(payload["margin_px"], 24)
        self.assertEqual(payload["font_size"], 16.0)
        self.assertEqual(payload["page_width"], 816)
        self.assertFalse(payload["overflow"])

    def test_layout_json_with_options(self) -> None:
        result = self.runner.invoke(
            app,
            ["layout", "50000", "--pages", "2", "--orientation", "landscape", "--json"],
        )
        self.assertEqual(result.exit_code, 0, result.output)
        payload = json.loads(strip_ansi(result.output))
        self.assertEqual((payload["page_width"], payload["page_height"]), (1056, 816))
        self.assertEqual(payload["font_size"], 9.0)
        self.assertTrue(payload["overflow"])

    def test_layout_global_paper_option(self) -> None:
        result = self.runner.invoke(app, ["--paper", "a4", "layout", "100", "--json"])
        self.assertEqual(result.exit_code, 0, result.output)
        payload = json.loads(strip_ansi(result.output))
        self.assertEqual((payload["page_width"], payload["page_height"]), (794, 1123))

    def test_layout_table_and_overflow_warning(self) -> None:
        result = self.runner.invoke(app, ["layout", "50000"])
        self.assertEqual(result.exit_code, 0, result.output)
        output = strip_ansi(result.output)
        self.assertIn("Warning:", output)
        self.assertIn("Font size", output)
        self.assertIn("9 px", output)

    def test_layout_font_size_override(self) -> None:
        result = self.runner.invoke(app, ["layout", "5000", "--font-size", "14", "--json"])
        self.assertEqual(result.exit_code, 0, result.output)
        self.assertEqual(json.loads(strip_ansi(result.output))["font_size"], 14.0)

    def test_invalid_options_are_rejected(self) -> None:
        cases = (
            ["layout", "100", "--paper", "tabloid"],
            ["layout", "100", "--orientation", "sideways"],
            ["layout", "100", "--pages", "0"],
            ["layout", "-5"],
            ["render", "--format", "docx"],
        )
        for args in cases:
            with self.subTest(args=args):
                result = self.runner.invoke(app, args)
                self.assertEqual(result.exit_code, 2)

    def test_themes_lists_registry(self) -> None:
        result = self.runner.invoke(app, ["themes"])
        self.assertEqual(result.exit_code, 0)
        output = strip_ansi(result.output)
        for name in ("minimal (default)", "modern", "classic", "theme-classic"):
            self.assertIn(name, output)

    def test_templates_lists_registry(self) -> None:
        result = self.runner.invoke(app, ["templates"])
        self.assertEqual(result.exit_code, 0)
        output = strip_ansi(result.output)
        for name in ("auto", "none", "lyrics", "recipe", "template-lyrics"):
            self.assertIn(name, output)

    def test_config_print_path(self) -> None:
        result = self.runner.invoke(app, ["--paper", "A4", "config", "--print-path"])
        self.assertEqual(result.exit_code, 0)
        self.assertIn("a4.toml", strip_ansi(result.output).replace("\n", ""))


if __name__ == "__main__":
    unittest.main()
