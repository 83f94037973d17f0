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
from pathlib import Path

import typer

from ...config import load_app_config
from ...render.service import RenderPlan, RenderService
from ..api import build_kv_table, console, status
from ..core.common import (
    _ctx_value,
    _format_callback,
    _orientation_callback,
    _paper_callback,
    _resolve_config_and_paper,
    _run_cli,
)
from ..core.log import _warn
from ..startup import ensure_playwright_browsers

_RENDER_HELP = (
    "Render pasted text into a print-ready one- or two-page document.\n\n"
    "Examples:\n"
    "  onepager render notes.md -o notes.pdf\n"
    "  pbpaste | onepager render - --pages 2 --theme classic -o notes.pdf\n"
    "  onepager render song.txt --template lyrics --format html -o song.html\n"
)


def register(app: typer.Typer) -> None:
    app.command(help=_RENDER_HELP)(render)


def render(
    ctx: typer.Context,
    input_path: str = typer.Argument(
        "-",
        metavar="INPUT",
        help="Text or markdown file to render ('-' reads stdin).",
    ),
    output: Path | None = typer.Option(
        None,
        "--output",
        "-o",
        help="Output file path (defaults to <input>.<format> or document.<format>).",
        rich_help_panel="Outputs",
    ),
    format: str = typer.Option(
        "pdf",
        "--format",
        "-f",
        help="Output format (pdf/html).",
        callback=_format_callback,
        rich_help_panel="Outputs",
    ),
    title: str | None = typer.Option(
        None,
        "--title",
        help="Document title (defaults to the input file name).",
        rich_help_panel="Outputs",
    ),
    paper: str | None = typer.Option(
        None,
        "--paper",
        help="Paper size override (Letter/A4/Legal).",
        callback=_paper_callback,
        rich_help_panel="Layout",
    ),
    pages: int | None = typer.Option(
        None,
        "--pages",
        min=1,
        help="Number of pages the content may use.",
        rich_help_panel="Layout",
    ),
    orientation: str | None = typer.Option(
        None,
        "--orientation",
        help="Page orientation (portrait/landscape).",
        callback=_orientation_callback,
        rich_help_panel="Layout",
    ),
    font_size: float | None = typer.Option(
        None,
        "--font-size",
        min=1.0,
        help="Pin the font size (px) instead of fitting it.",
        rich_help_panel="Layout",
    ),
    theme: str | None = typer.Option(
        None,
        "--theme",
        help="Theme name (see `onepager themes`).",
        rich_help_panel="Style",
    ),
    template: str | None = typer.Option(
        None,
        "--template",
        help="Content template: auto, none, lyrics or recipe.",
        rich_help_panel="Style",
    ),
) -> None:
    config_value, paper_value = _resolve_config_and_paper(ctx, None, paper)
    quiet_value = bool(_ctx_value(ctx, "quiet"))
    debug_value = bool(_ctx_value(ctx, "debug"))

    def _run() -> None:
        app_config = load_app_config(config_value, paper_size=paper_value)
        text = _read_input(input_path)
        output_path = output or _default_output_path(input_path, format)
        document_title = title or _default_title(input_path)

        service = RenderService(app_config)
        prepared = service.prepare(text, template=template)
        ensure_playwright_browsers(quiet=quiet_value)
        with status("Measuring content...", quiet=quiet_value):
            plan = service.plan(
                prepared,
                max_pages=pages,
                orientation=orientation,
                font_size=font_size,
                theme=theme,
            )
        if plan.overflow:
            _warn(
                "content does not fit the page budget even at the smallest layout; "
                "it will overflow onto extra pages",
                quiet=quiet_value,
            )
        if format == "pdf":
            with status("Printing PDF...", quiet=quiet_value):
                written = service.render_pdf(plan, output_path, title=document_title)
        else:
            written = service.write_html(plan, output_path, title=document_title)
        if not quiet_value:
            console.print(build_kv_table(_plan_rows(plan), title="Layout"))
            console.print(str(written))

    _run_cli(_run, debug=debug_value)


def _read_input(input_path: str) -> str:
    if input_path == "-":
        return sys.stdin.read()
    path = Path(input_path).expanduser()
    if not path.is_file():
        raise FileNotFoundError(f"input file not found: {path}")
    return path.read_text(encoding="utf-8")


def _default_output_path(input_path: str, format: str) -> Path:
    if input_path == "-":
        return Path.cwd() / f"document.{format}"
    source = Path(input_path).expanduser()
    output = source.with_suffix(f".{format}")
    if output == source:
        return source.with_name(f"{source.stem}-print.{format}")
    return output


def _default_title(input_path: str) -> str | None:
    if input_path == "-":
        return None
    return Path(input_path).stem


def _plan_rows(plan: RenderPlan) -> list[tuple[str, str]]:
    layout = plan.layout
    template_name = plan.content.template.name if plan.content.template else "none"
    return [
        ("Theme", plan.theme.name),
        ("Template", template_name),
        ("Pages", str(plan.layout_config.max_pages)),
        ("Page size", f"{layout.page_width:g} x {layout.page_height:g} px"),
        ("Content height", f"{plan.content_height:g} px"),
        ("Font size", f"{layout.font_size:g} px"),
        ("Columns", str(layout.columns)),
        ("Margin", f"{layout.margin_px} px"),
    ]
