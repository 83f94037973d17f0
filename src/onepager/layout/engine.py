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

from dataclasses import dataclass
from typing import Literal

Orientation = Literal["portrait", "landscape"]

DEFAULT_FONT_SIZE = 16.0
MIN_FONT_SIZE = 9.0
FONT_SIZE_STEP = 0.5

DEFAULT_MARGIN = 48
MIN_MARGIN = 24
MARGIN_STEP = 4

MAX_COLUMNS = 3


@dataclass(frozen=True)
class LayoutConfig:
    page_width: float
    page_height: float
    max_pages: int = 1
    orientation: Orientation = "portrait"
    font_size_override: float | None = None


@dataclass(frozen=True)
class LayoutResult:
    font_size: float
    columns: int
    margin_px: int
    page_width: float
    page_height: float


def resolve_page_size(config: LayoutConfig) -> tuple[float, float]:
    if config.orientation == "landscape":
        return config.page_height, config.page_width
    return config.page_width, config.page_height


def available_height(page_height: float, max_pages: int, margin_px: int) -> float:
    # Top and bottom margin are charged once against the whole budget, not per page.
    return page_height * max_pages - margin_px * 2


def scaled_height(content_height: float, font_size: float, columns: int) -> float:
    return content_height * (font_size / DEFAULT_FONT_SIZE) / columns


def compute_layout(content_height: float, config: LayoutConfig) -> LayoutResult:
    """Pick font size, column count and margin so the content fits the page budget.

    ``content_height`` is the height measured at the default font size in a single
    column. Degradations are applied in a fixed order, each running until the content
    fits or its bound is reached: margins shrink first, then columns are added, then
    the font size is reduced (unless ``config.font_size_override`` pins it). When every
    stage is exhausted the extremal values are returned and the content may still
    overflow; callers decide what to do about that.
    """
    page_width, page_height = resolve_page_size(config)

    font_size = (
        DEFAULT_FONT_SIZE if config.font_size_override is None else config.font_size_override
    )
    margin_px = DEFAULT_MARGIN
    columns = 1

    def overflows() -> bool:
        return scaled_height(content_height, font_size, columns) > available_height(
            page_height, config.max_pages, margin_px
        )

    while overflows() and margin_px > MIN_MARGIN:
        margin_px -= MARGIN_STEP

    while overflows() and columns < MAX_COLUMNS:
        columns += 1

    if config.font_size_override is None:
        while overflows() and font_size > MIN_FONT_SIZE:
            font_size -= FONT_SIZE_STEP
        font_size = max(font_size, MIN_FONT_SIZE)

    return LayoutResult(
        font_size=font_size,
        columns=columns,
        margin_px=margin_px,
        page_width=page_width,
        page_height=page_height,
    )


def layout_overflows(content_height: float, config: LayoutConfig, result: LayoutResult) -> bool:
    """Return True when ``result`` still leaves the content taller than the budget."""
    return scaled_height(content_height, result.font_size, result.columns) > available_height(
        result.page_height, config.max_pages, result.margin_px
    )


__all__ = [
    "DEFAULT_FONT_SIZE",
    "DEFAULT_MARGIN",
    "FONT_SIZE_STEP",
    "LayoutConfig",
    "LayoutResult",
    "MARGIN_STEP",
    "MAX_COLUMNS",
    "MIN_FONT_SIZE",
    "MIN_MARGIN",
    "Orientation",
    "available_height",
    "compute_layout",
    "layout_overflows",
    "resolve_page_size",
    "scaled_height",
]
