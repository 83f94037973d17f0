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

"""Page layout fitting."""

from .engine import (
    DEFAULT_FONT_SIZE,
    DEFAULT_MARGIN,
    MAX_COLUMNS,
    MIN_FONT_SIZE,
    MIN_MARGIN,
    LayoutConfig,
    LayoutResult,
    Orientation,
    compute_layout,
    layout_overflows,
)
from .paper import (
    ORIENTATIONS,
    PAPER_SIZES_PX,
    build_layout_config,
    normalize_orientation,
    normalize_paper_size,
    paper_size_px,
)

__all__ = [
    "DEFAULT_FONT_SIZE",
    "DEFAULT_MARGIN",
    "LayoutConfig",
    "LayoutResult",
    "MAX_COLUMNS",
    "MIN_FONT_SIZE",
    "MIN_MARGIN",
    "ORIENTATIONS",
    "Orientation",
    "PAPER_SIZES_PX",
    "build_layout_config",
    "compute_layout",
    "layout_overflows",
    "normalize_orientation",
    "normalize_paper_size",
    "paper_size_px",
]
