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

"""Text preparation: content templates and markdown conversion."""

from .parser import normalize_bullets, parse_content, split_sections
from .templates import (
    TEMPLATE_NAMES,
    TEMPLATES,
    ContentTemplate,
    apply_template,
    detect_template,
    get_template,
    resolve_template,
)

__all__ = [
    "ContentTemplate",
    "TEMPLATES",
    "TEMPLATE_NAMES",
    "apply_template",
    "detect_template",
    "get_template",
    "normalize_bullets",
    "parse_content",
    "resolve_template",
    "split_sections",
]
