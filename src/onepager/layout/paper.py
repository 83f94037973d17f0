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

from .engine import LayoutConfig, Orientation

# Portrait page sizes in CSS pixels at 96 dpi.
LETTER_WIDTH_PX = 816
LETTER_HEIGHT_PX = 1056
A4_WIDTH_PX = 794
A4_HEIGHT_PX = 1123
LEGAL_WIDTH_PX = 816
LEGAL_HEIGHT_PX = 1344

PAPER_SIZES_PX: dict[str, tuple[int, int]] = {
    "LETTER": (LETTER_WIDTH_PX, LETTER_HEIGHT_PX),
    "A4": (A4_WIDTH_PX, A4_HEIGHT_PX),
    "LEGAL": (LEGAL_WIDTH_PX, LEGAL_HEIGHT_PX),
}
ORIENTATIONS: tuple[Orientation, ...] = ("portrait", "landscape")


def normalize_paper_size(name: str) -> str:
    key = name.strip().upper()
    if key not in PAPER_SIZES_PX:
        raise ValueError(f"unknown paper size: {name}")
    return key


def paper_size_px(name: str) -> tuple[int, int]:
    return PAPER_SIZES_PX[normalize_paper_size(name)]


def normalize_orientation(value: str) -> Orientation:
    normalized = value.strip().lower()
    if normalized == "portrait":
        return "portrait"
    if normalized == "landscape":
        return "landscape"
    raise ValueError(f"orientation must be 'portrait' or 'landscape', got {value!r}")


def build_layout_config(
    paper: str,
    *,
    max_pages: int = 1,
    orientation: str = "portrait",
    font_size_override: float | None = None,
) -> LayoutConfig:
    """Validate user-facing layout options and build a ``LayoutConfig``.

    ``compute_layout`` does not check its inputs, so this is where page counts,
    orientations and font overrides coming from config files or the CLI get rejected.
    """
    width, height = paper_size_px(paper)
    if isinstance(max_pages, bool) or not isinstance(max_pages, int) or max_pages < 1:
        raise ValueError("max_pages must be a positive integer")
    if font_size_override is not None and font_size_override <= 0:
        raise ValueError("font size override must be a positive number")
    return LayoutConfig(
        page_width=width,
        page_height=height,
        max_pages=max_pages,
        orientation=normalize_orientation(orientation),
        font_size_override=font_size_override,
    )


__all__ = [
    "A4_HEIGHT_PX",
    "A4_WIDTH_PX",
    "LEGAL_HEIGHT_PX",
    "LEGAL_WIDTH_PX",
    "LETTER_HEIGHT_PX",
    "LETTER_WIDTH_PX",
    "ORIENTATIONS",
    "PAPER_SIZES_PX",
    "build_layout_config",
    "normalize_orientation",
    "normalize_paper_size",
    "paper_size_px",
]
