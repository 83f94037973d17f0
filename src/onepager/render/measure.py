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

import math

from .browser import open_page
from .document import CONTENT_ELEMENT_ID, reference_layout, render_document_html
from .themes import ThemeConfig

_SCROLL_HEIGHT_SCRIPT = "(id) => document.getElementById(id).scrollHeight"


def measurement_html(
    content_html: str,
    *,
    page_width: float,
    page_height: float,
    theme: ThemeConfig,
    template_class: str | None = None,
) -> str:
    return render_document_html(
        content_html,
        reference_layout(page_width, page_height),
        theme=theme,
        template_class=template_class,
        measure=True,
    )


def measure_content_height(
    content_html: str,
    *,
    page_width: float,
    page_height: float,
    theme: ThemeConfig,
    template_class: str | None = None,
) -> float:
    """Measure the rendered content height in CSS pixels at the reference layout.

    The content is laid out in headless Chromium at the default font size, in a single
    column as wide as the page minus the default margins. This is the height
    ``compute_layout`` expects as its input.
    """
    if not content_html.strip():
        return 0.0
    html = measurement_html(
        content_html,
        page_width=page_width,
        page_height=page_height,
        theme=theme,
        template_class=template_class,
    )
    with open_page(html, viewport_width=int(math.ceil(page_width))) as page:
        height = page.evaluate(_SCROLL_HEIGHT_SCRIPT, CONTENT_ELEMENT_ID)
    if not isinstance(height, (int, float)) or isinstance(height, bool):
        raise RuntimeError(f"unexpected content height from browser: {height!r}")
    return float(height)


__all__ = ["measure_content_height", "measurement_html"]
