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

from pathlib import Path

from ..layout.engine import DEFAULT_FONT_SIZE, DEFAULT_MARGIN, LayoutResult
from .templating import DOCUMENT_TEMPLATE_PATH, render_template
from .themes import ThemeConfig

CONTENT_ELEMENT_ID = "onepager-content"
COLUMN_GAP_PX = 24
DEFAULT_TITLE = "Document"


def document_context(
    content_html: str,
    layout: LayoutResult,
    *,
    theme: ThemeConfig,
    template_class: str | None = None,
    max_pages: int = 1,
    title: str | None = None,
    measure: bool = False,
) -> dict[str, object]:
    return {
        "title": title or DEFAULT_TITLE,
        "content_id": CONTENT_ELEMENT_ID,
        "content_html": content_html,
        "theme_class": theme.css_class,
        "template_class": template_class or "",
        "font_size_px": _css_number(layout.font_size),
        "columns": int(layout.columns),
        "column_gap_px": COLUMN_GAP_PX,
        "margin_px": int(layout.margin_px),
        "page_width_px": _css_number(layout.page_width),
        "page_height_px": _css_number(layout.page_height),
        "content_width_px": _css_number(layout.page_width - 2 * layout.margin_px),
        "max_pages": int(max_pages),
        "measure": measure,
    }


def reference_layout(page_width: float, page_height: float) -> LayoutResult:
    """Layout used for measuring: default font size, one column, default margins."""
    return LayoutResult(
        font_size=DEFAULT_FONT_SIZE,
        columns=1,
        margin_px=DEFAULT_MARGIN,
        page_width=page_width,
        page_height=page_height,
    )


def render_document_html(
    content_html: str,
    layout: LayoutResult,
    *,
    theme: ThemeConfig,
    template_class: str | None = None,
    max_pages: int = 1,
    title: str | None = None,
    measure: bool = False,
    template_path: str | Path = DOCUMENT_TEMPLATE_PATH,
) -> str:
    context = document_context(
        content_html,
        layout,
        theme=theme,
        template_class=template_class,
        max_pages=max_pages,
        title=title,
        measure=measure,
    )
    return render_template(template_path, context)


def _css_number(value: float) -> str:
    number = float(value)
    if number.is_integer():
        return str(int(number))
    return f"{number:g}"


__all__ = [
    "COLUMN_GAP_PX",
    "CONTENT_ELEMENT_ID",
    "document_context",
    "reference_layout",
    "render_document_html",
]
