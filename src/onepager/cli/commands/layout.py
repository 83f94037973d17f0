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

import json
from dataclasses import asdict

import typer

from ...config import load_app_config
from ...layout.engine import compute_layout, layout_overflows
from ...layout.paper import build_layout_config
from ..api import build_kv_table, console
from ..core.common import (
    _ctx_value,
    _orientation_callback,
    _paper_callback,
    _resolve_config_and_paper,
    _run_cli,
)
from ..core.log import _warn

_LAYOUT_HELP = (
    "Fit a measured content height to the page budget and print the layout.\n\n"
    "HEIGHT is the content height in px at 16px text in a single column.\n\n"
    "Examples:\n"
    "  onepager layout 2500\n"
    "  onepager layout 2000 --pages 2 --orientation landscape\n"
    "  onepager layout 5000 --font-size 14 --json\n"
)


def register(app: typer.Typer) -> None:
    app.command(help=_LAYOUT_HELP)(layout)


def layout(
    ctx: typer.Context,
    height: float = typer.Argument(..., min=0.0, help="Measured content height in px."),
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
    as_json: bool = typer.Option(
        False,
        "--json",
        help="Print the result as JSON.",
        rich_help_panel="Outputs",
    ),
) -> None:
    config_value, paper_value = _resolve_config_and_paper(ctx, None, paper)
    quiet_value = bool(_ctx_value(ctx, "quiet"))
    debug_value = bool(_ctx_value(ctx, "debug"))

    def _run() -> None:
        app_config = load_app_config(config_value, paper_size=paper_value)
        defaults = app_config.layout
        layout_config = build_layout_config(
            app_config.paper_size,
            max_pages=defaults.max_pages if pages is None else pages,
            orientation=orientation or defaults.orientation,
            font_size_override=defaults.font_size if font_size is None else font_size,
        )
        result = compute_layout(height, layout_config)
        overflow = layout_overflows(height, layout_config, result)
        if as_json:
            payload = {**asdict(result), "overflow": overflow}
            console.print_json(json.dumps(payload))
            return
        if overflow:
            _warn("content still overflows at the most compact layout", quiet=quiet_value)
        rows = [
            ("Paper", f"{app_config.paper_size} ({layout_config.orientation})"),
            ("Pages", str(layout_config.max_pages)),
            ("Page size", f"{result.page_width:g} x {result.page_height:g} px"),
            ("Font size", f"{result.font_size:g} px"),
            ("Columns", str(result.columns)),
            ("Margin", f"{result.margin_px} px"),
            ("Fits", "no" if overflow else "yes"),
        ]
        console.print(build_kv_table(rows, title="Layout"))

    _run_cli(_run, debug=debug_value)
