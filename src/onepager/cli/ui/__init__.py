#!/usr/bin/env python3
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


from __future__ import annotations

import sys
from collections.abc import Sequence
from contextlib import contextmanager
from dataclasses import dataclass

from rich import box
from rich.console import Console
from rich.live import Live
from rich.progress import (
    BarColumn,
    Progress,
    SpinnerColumn,
    TaskProgressColumn,
    TextColumn,
    TimeElapsedColumn,
)
from rich.spinner import Spinner
from rich.table import Table
from rich.text import Text
from rich.theme import Theme

THEME = Theme(
    {
        "title": "bold cyan",
        "subtitle": "dim",
        "accent": "cyan",
        "success": "green",
        "warning": "yellow",
        "error": "red",
        "muted": "dim",
    }
)


def stream_is_terminal(stream, fallback) -> bool:
    """Report whether ``stream`` is a TTY, asking ``fallback`` when it is missing."""
    if stream is None:
        return bool(getattr(fallback, "isatty", lambda: False)())
    try:
        return bool(stream.isatty())
    except (OSError, ValueError, AttributeError):
        return False


@dataclass
class ConsoleContext:
    console: Console
    console_err: Console
    animations_enabled: bool = True


def _make_console(*, stderr: bool) -> Console:
    raw = sys.__stderr__ if stderr else sys.__stdout__
    fallback = sys.stderr if stderr else sys.stdout
    return Console(stderr=stderr, theme=THEME, force_terminal=stream_is_terminal(raw, fallback))


def new_console_context() -> ConsoleContext:
    return ConsoleContext(
        console=_make_console(stderr=False),
        console_err=_make_console(stderr=True),
    )


DEFAULT_CONTEXT = new_console_context()
console = DEFAULT_CONTEXT.console
console_err = DEFAULT_CONTEXT.console_err


def configure_ui(
    *,
    no_color: bool,
    no_animations: bool,
    context: ConsoleContext | None = None,
) -> None:
    context = context or DEFAULT_CONTEXT
    context.animations_enabled = not no_animations
    context.console.no_color = no_color
    context.console_err.no_color = no_color


@contextmanager
def progress(*, quiet: bool, context: ConsoleContext | None = None):
    context = context or DEFAULT_CONTEXT
    if quiet:
        yield None
        return
    columns = [TextColumn("[progress.description]{task.description}")]
    if context.animations_enabled:
        columns = [
            SpinnerColumn(style="accent"),
            *columns,
            BarColumn(),
            TaskProgressColumn(),
            TimeElapsedColumn(),
        ]
    progress_bar = Progress(
        *columns,
        console=context.console,
        transient=True,
        refresh_per_second=10 if context.animations_enabled else 2,
        disable=not stream_is_terminal(sys.__stdout__, sys.stdout),
    )
    with progress_bar:
        yield progress_bar


@contextmanager
def status(message: str, *, quiet: bool, context: ConsoleContext | None = None):
    """Show ``message`` while a step runs: a spinner on a terminal, one plain line otherwise."""
    context = context or DEFAULT_CONTEXT
    if quiet:
        yield None
        return
    if not context.animations_enabled or not context.console.is_terminal:
        context.console_err.print(f"[subtitle]{message}[/subtitle]")
        yield None
        return
    spinner = Spinner("dots", text=Text(message, style="subtitle"))
    with Live(
        spinner,
        console=context.console_err,
        transient=True,
        refresh_per_second=12,
    ) as live:
        yield live


def build_kv_table(rows: Sequence[tuple[str, str]], *, title: str | None = None) -> Table:
    table = Table(title=title, show_header=False, box=box.SIMPLE, show_lines=False)
    table.add_column("Field", style="bold", no_wrap=True)
    table.add_column("Value")
    for key, value in rows:
        table.add_row(str(key), str(value))
    return table


def build_registry_table(title: str, rows: Sequence[tuple[str, str, str]]) -> Table:
    table = Table(title=title, box=box.SIMPLE, show_lines=False)
    table.add_column("Name", style="accent", no_wrap=True)
    table.add_column("Label")
    table.add_column("CSS class", style="muted")
    for name, label, css_class in rows:
        table.add_row(name, label, css_class)
    return table


__all__ = [
    "THEME",
    "ConsoleContext",
    "build_kv_table",
    "build_registry_table",
    "configure_ui",
    "console",
    "console_err",
    "new_console_context",
    "progress",
    "status",
    "stream_is_terminal",
]
