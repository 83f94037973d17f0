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

from markdown_it import MarkdownIt

# Bullet glyphs that show up when copying from web pages, word processors and slides.
_PASTED_BULLET_RE = re.compile(r"^(\s*)[■▪▸▹►▻●○◦◽◾•–—→»‣⁃∙]", re.MULTILINE)
_SECTION_BOUNDARY_RE = re.compile(r"(?=<h[12][\s>])")

SECTION_CLASS = "section"

_MD_PARSER: MarkdownIt | None = None


def _build_markdown_parser() -> MarkdownIt:
    md = MarkdownIt("commonmark", {"html": False, "breaks": True})
    md.enable(["table", "strikethrough"])
    return md


def _get_markdown_parser() -> MarkdownIt:
    global _MD_PARSER
    if _MD_PARSER is None:
        _MD_PARSER = _build_markdown_parser()
    return _MD_PARSER


def normalize_bullets(text: str) -> str:
    return _PASTED_BULLET_RE.sub(r"\1-", text)


def render_markdown(text: str) -> str:
    return _get_markdown_parser().render(text)


def split_sections(html: str) -> list[str]:
    """Split rendered HTML in front of every ``<h1>``/``<h2>``, dropping empty pieces."""
    return [piece for piece in _SECTION_BOUNDARY_RE.split(html) if piece.strip()]


def parse_content(text: str) -> str:
    """Render pasted text as HTML, wrapping each top-level heading in a section div."""
    if not text.strip():
        return ""

    html = render_markdown(normalize_bullets(text))
    sections = split_sections(html)
    if len(sections) <= 1:
        return html
    return "\n".join(f'<div class="{SECTION_CLASS}">{section}</div>' for section in sections)


__all__ = [
    "SECTION_CLASS",
    "normalize_bullets",
    "parse_content",
    "render_markdown",
    "split_sections",
]
