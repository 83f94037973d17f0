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

import re
from collections.abc import Callable
from dataclasses import dataclass

_LYRICS_SECTIONS = r"Verse\s*\d*|Chorus|Bridge|Intro|Outro|Pre-Chorus|Hook|Refrain|Interlude"
_LYRICS_MARKER_RE = re.compile(rf"^\[({_LYRICS_SECTIONS})\]", re.IGNORECASE | re.MULTILINE)
_LYRICS_REWRITE_RE = re.compile(rf"^\[({_LYRICS_SECTIONS})\]\s*", re.IGNORECASE | re.MULTILINE)

_RECIPE_SECTIONS = r"Ingredients|Instructions|Directions|Method|Steps|Preparation|Notes|Tips"
_RECIPE_SECTION_RE = re.compile(rf"^({_RECIPE_SECTIONS})[ \t]*$", re.IGNORECASE | re.MULTILINE)
_RECIPE_META_RE = re.compile(
    r"^(Prep\s*time|Cook\s*time|Total\s*time|Servings|Serves|Yield)[ \t]*[:：][ \t]*(.+)$",
    re.IGNORECASE | re.MULTILINE,
)

AUTO_TEMPLATE = "auto"
NO_TEMPLATE = "none"


@dataclass(frozen=True)
class ContentTemplate:
    name: str
    label: str
    css_class: str
    detect: Callable[[str], bool]
    transform: Callable[[str], str]


def _detect_lyrics(text: str) -> bool:
    return _LYRICS_MARKER_RE.search(text) is not None


def _transform_lyrics(text: str) -> str:
    # The marker's trailing whitespace includes its newline, so add it back.
    return _LYRICS_REWRITE_RE.sub(lambda match: f"## {match.group(1)}\n", text)


def _detect_recipe(text: str) -> bool:
    return _RECIPE_SECTION_RE.search(text) is not None


def _transform_recipe(text: str) -> str:
    result = _RECIPE_SECTION_RE.sub(lambda match: f"## {match.group(1)}", text)
    return _RECIPE_META_RE.sub(
        lambda match: f"**{match.group(1)}:** {match.group(2).strip()}",
        result,
    )


LYRICS_TEMPLATE = ContentTemplate(
    name="lyrics",
    label="Lyrics",
    css_class="template-lyrics",
    detect=_detect_lyrics,
    transform=_transform_lyrics,
)
RECIPE_TEMPLATE = ContentTemplate(
    name="recipe",
    label="Recipe",
    css_class="template-recipe",
    detect=_detect_recipe,
    transform=_transform_recipe,
)

TEMPLATES: tuple[ContentTemplate, ...] = (LYRICS_TEMPLATE, RECIPE_TEMPLATE)
TEMPLATE_NAMES: tuple[str, ...] = (NO_TEMPLATE, *(template.name for template in TEMPLATES))


def get_template(name: str) -> ContentTemplate | None:
    normalized = name.strip().lower()
    for template in TEMPLATES:
        if template.name == normalized:
            return template
    return None


def detect_template(text: str) -> ContentTemplate | None:
    for template in TEMPLATES:
        if template.detect(text):
            return template
    return None


def resolve_template(name: str, text: str) -> ContentTemplate | None:
    """Resolve a template choice (``auto``, ``none`` or a template name) for ``text``."""
    normalized = name.strip().lower()
    if normalized == AUTO_TEMPLATE:
        return detect_template(text)
    if normalized == NO_TEMPLATE:
        return None
    template = get_template(normalized)
    if template is None:
        choices = ", ".join((AUTO_TEMPLATE, *TEMPLATE_NAMES))
        raise ValueError(f"unknown content template: {name} (choose from {choices})")
    return template


def apply_template(template: ContentTemplate | None, text: str) -> str:
    if template is None:
        return text
    return template.transform(text)


__all__ = [
    "AUTO_TEMPLATE",
    "ContentTemplate",
    "LYRICS_TEMPLATE",
    "NO_TEMPLATE",
    "RECIPE_TEMPLATE",
    "TEMPLATES",
    "TEMPLATE_NAMES",
    "apply_template",
    "detect_template",
    "get_template",
    "resolve_template",
]
