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

import typer

from ...content.templates import TEMPLATES
from ...render.themes import DEFAULT_THEME, list_themes
from ..api import build_registry_table, console


def register(app: typer.Typer) -> None:
    app.command(help="List the available document themes.")(themes)
    app.command(help="List the content templates used to restyle lyrics and recipes.")(templates)


def themes() -> None:
    rows = []
    for theme in list_themes():
        name = f"{theme.name} (default)" if theme.name == DEFAULT_THEME else theme.name
        rows.append((name, theme.label, theme.css_class))
    console.print(build_registry_table("Themes", rows))


def templates() -> None:
    rows = [("auto", "Detect from content", "-"), ("none", "Plain text", "-")]
    rows.extend((template.name, template.label, template.css_class) for template in TEMPLATES)
    console.print(build_registry_table("Content templates", rows))
