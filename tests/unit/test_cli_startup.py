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

import os
import tempfile
import unittest
from pathlib import Path
from types import SimpleNamespace
from unittest import mock

from onepager.cli import startup


class TestCliStartup(unittest.TestCase):
    def test_run_startup_flow_matrix(self) -> None:
        cases = (
            {
                "name": "init-config-exits",
                "init_config": True,
                "needs_init": False,
                "quiet": False,
                "expect_result": True,
                "expect_init_calls": 1,
                "expect_needs_calls": 0,
                "expect_print_calls": 1,
            },
            {
                "name": "missing-config-initialized",
                "init_config": False,
                "needs_init": True,
                "quiet": True,
                "expect_result": False,
                "expect_init_calls": 1,
                "expect_needs_calls": 1,
                "expect_print_calls": 0,
            },
            {
                "name": "config-already-present",
                "init_config": False,
                "needs_init": False,
                "quiet": True,
                "expect_result": False,
                "expect_init_calls": 0,
                "expect_needs_calls": 1,
                "expect_print_calls": 0,
            },
        )
        for case in cases:
            with self.subTest(case=case["name"]):
                with mock.patch.object(startup, "configure_ui") as configure_mock:
                    with mock.patch.object(
                        startup,
                        "init_user_config",
                        return_value="/tmp/cfg",
                    ) as init_mock:
                        with mock.patch.object(
                            startup,
                            "user_config_needs_init",
                            return_value=case["needs_init"],
                        ) as needs_mock:
                            with mock.patch.object(startup.console, "print") as print_mock:
                                result = startup.run_startup(
                                    quiet=bool(case["quiet"]),
                                    no_color=True,
                                    no_animations=True,
                                    debug=False,
                                    init_config=bool(case["init_config"]),
                                )
                self.assertEqual(result, case["expect_result"])
                configure_mock.assert_called_once_with(no_color=True, no_animations=True)
                self.assertEqual(init_mock.call_count, case["expect_init_calls"])
                self.assertEqual(needs_mock.call_count, case["expect_needs_calls"])
                self.assertEqual(print_mock.call_count, case["expect_print_calls"])

    def test_run_startup_does_not_touch_playwright(self) -> None:
        with mock.patch.object(startup, "configure_ui"):
            with mock.patch.object(startup, "user_config_needs_init", return_value=False):
                with mock.patch.object(startup, "ensure_playwright_browsers") as ensure_mock:
                    startup.run_startup(
                        quiet=True,
                        no_color=False,
                        no_animations=False,
                        debug=False,
                        init_config=False,
                    )
        ensure_mock.assert_not_called()

    def test_run_startup_debug_and_auto_init_prints_message(self) -> None:
        with mock.patch.object(startup, "configure_ui"):
            with mock.patch.object(startup, "install_rich_traceback") as traceback_mock:
                with mock.patch.object(startup, "user_config_needs_init", return_value=True):
                    with mock.patch.object(startup, "init_user_config", return_value="/tmp/cfg"):
                        with mock.patch.object(startup.console, "print") as print_mock:
                            result = startup.run_startup(
                                quiet=False,
                                no_color=True,
                                no_animations=True,
                                debug=True,
                                init_config=False,
                            )
        self.assertFalse(result)
        traceback_mock.assert_called_once_with(show_locals=True)
        self.assertEqual(print_mock.call_count, 1)
        self.assertIn("Initialized user config", str(print_mock.call_args[0][0]))

    def test_ensure_playwright_browsers_skip_env(self) -> None:
        with mock.patch.dict(os.environ, {startup._PLAYWRIGHT_SKIP_ENV: "1"}, clear=False):
            with mock.patch.object(startup, "_playwright_precheck") as precheck:
                startup.ensure_playwright_browsers(quiet=True)
        precheck.assert_not_called()

    def test_ensure_playwright_browsers_installed_short_circuits(self) -> None:
        with mock.patch.dict(os.environ, {}, clear=False):
            os.environ.pop(startup._PLAYWRIGHT_SKIP_ENV, None)
            with mock.patch.object(startup, "_playwright_precheck", return_value=True):
                with mock.patch.object(startup, "_playwright_install") as install:
                    startup.ensure_playwright_browsers(quiet=True)
        install.assert_not_called()

    def test_ensure_playwright_browsers_installs_quietly(self) -> None:
        with mock.patch.dict(os.environ, {}, clear=False):
            os.environ.pop(startup._PLAYWRIGHT_SKIP_ENV, None)
            with mock.patch.object(startup, "_playwright_precheck", return_value=False):
                with mock.patch.object(startup, "_playwright_install") as install:
                    startup.ensure_playwright_browsers(quiet=True)
        install.assert_called_once_with(None)

    def test_configure_playwright_env_respects_existing_path(self) -> None:
        with mock.patch.dict(
            os.environ, {startup._PLAYWRIGHT_BROWSERS_ENV: "/already"}, clear=False
        ):
            with mock.patch.object(startup, "user_cache_dir") as cache_mock:
                startup._configure_playwright_env()
                self.assertEqual(os.environ[startup._PLAYWRIGHT_BROWSERS_ENV], "/already")
        cache_mock.assert_not_called()

    def test_configure_playwright_env_sets_default_cache_path(self) -> None:
        with mock.patch.dict(os.environ, {}, clear=False):
            os.environ.pop(startup._PLAYWRIGHT_BROWSERS_ENV, None)
            with mock.patch.object(startup, "user_cache_dir", return_value="/cache/ms-playwright"):
                startup._configure_playwright_env()
                self.assertEqual(
                    os.environ[startup._PLAYWRIGHT_BROWSERS_ENV],
                    "/cache/ms-playwright",
                )

    def test_playwright_driver_command_platform_variants_and_override(self) -> None:
        with mock.patch.object(startup.inspect, "getfile", return_value="/opt/pw/__init__.py"):
            with mock.patch.object(startup.sys, "platform", "darwin"):
                with mock.patch.dict(os.environ, {}, clear=False):
                    os.environ.pop("PLAYWRIGHT_NODEJS_PATH", None)
                    node_path, cli_path = startup._playwright_driver_command()
        self.assertEqual(Path(node_path), Path("/opt/pw") / "driver" / "node")
        self.assertEqual(Path(cli_path), Path("/opt/pw") / "driver" / "package" / "cli.js")

        with mock.patch.object(startup.inspect, "getfile", return_value="/opt/pw/__init__.py"):
            with mock.patch.object(startup.sys, "platform", "win32"):
                with mock.patch.dict(
                    os.environ, {"PLAYWRIGHT_NODEJS_PATH": "C:/node.exe"}, clear=False
                ):
                    node_path, cli_path = startup._playwright_driver_command()
        self.assertEqual(node_path, "C:/node.exe")

    def test_playwright_chromium_installed_success_and_error(self) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            executable = Path(tmpdir) / "chromium"
            executable.write_text("bin", encoding="utf-8")
            fake_pw = mock.MagicMock()
            fake_pw.chromium.executable_path = str(executable)
            fake_context = mock.MagicMock()
            fake_context.__enter__.return_value = fake_pw
            fake_context.__exit__.return_value = False
            with mock.patch.object(startup, "sync_playwright", return_value=fake_context):
                self.assertTrue(startup._playwright_chromium_installed())

        with mock.patch.object(startup, "sync_playwright", side_effect=RuntimeError("boom")):
            self.assertFalse(startup._playwright_chromium_installed())

    def test_progress_update_branches(self) -> None:
        progress = mock.Mock()
        startup._progress_update(progress, None, 1, 10, "desc")
        progress.update.assert_not_called()

        startup._progress_update(progress, 9, 3, 7, "installing")
        progress.update.assert_has_calls(
            [
                mock.call(9, total=7),
                mock.call(9, description="installing"),
                mock.call(9, completed=3),
            ]
        )

    def test_progress_finalize_branches(self) -> None:
        progress = mock.Mock()
        progress.tasks = {
            1: SimpleNamespace(total=5, completed=0),
            2: SimpleNamespace(total=None, completed=0),
            3: SimpleNamespace(total=None, completed=2),
        }

        startup._progress_finalize(progress, 1)
        startup._progress_finalize(progress, 2)
        startup._progress_finalize(progress, 3)

        progress.update.assert_has_calls([mock.call(1, completed=5), mock.call(2, completed=1)])
        self.assertEqual(progress.update.call_count, 2)

    def test_playwright_install_quiet_failure_raises(self) -> None:
        result = SimpleNamespace(returncode=1, stdout="", stderr="no space left")
        with mock.patch.object(startup, "_playwright_driver_command", return_value=("n", "c")):
            with mock.patch.object(startup, "_playwright_driver_env", return_value={}):
                with mock.patch.object(startup.subprocess, "run", return_value=result) as run:
                    with self.assertRaisesRegex(RuntimeError, "no space left"):
                        startup._playwright_install(None)
        self.assertEqual(run.call_args.args[0], ["n", "c", "install", "chromium"])

    def test_playwright_install_reports_progress(self) -> None:
        process = mock.Mock()
        process.stdout = iter(["downloading 10%\n", "chatter\n", "downloading 50%\n"])
        process.wait.return_value = 0
        updates: list[int | None] = []
        with mock.patch.object(startup, "_playwright_driver_command", return_value=("n", "c")):
            with mock.patch.object(startup, "_playwright_driver_env", return_value={}):
                with mock.patch.object(startup.subprocess, "Popen", return_value=process):
                    startup._playwright_install(lambda done, total, desc: updates.append(done))
        self.assertEqual(updates, [0, 10, 11, 50])

    def test_parse_playwright_progress(self) -> None:
        self.assertEqual(startup._parse_playwright_progress("|■■■■   | 42% of 100 Mb"), 42)
        self.assertEqual(startup._parse_playwright_progress("250%"), 100)
        self.assertIsNone(startup._parse_playwright_progress("no percent here"))


if __name__ == "__main__":
    unittest.main()
