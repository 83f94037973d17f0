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

from functools import lru_cache
from pathlib import Path

from jinja2 import Environment, FileSystemLoader, StrictUndefined

TEMPLATES_ROOT = Path(__file__).resolve().parent.parent / "templates"
DOCUMENT_TEMPLATE_PATH = TEMPLATES_ROOT / "document.html.j2"
_PACKAGED_SHARED_DIR = TEMPLATES_ROOT / "_shared"


def _discover_shared_dir(template_dir: Path) -> Path | None:
    candidate = template_dir / "_shared"
    if candidate.is_dir():
        return candidate
    candidate = template_dir.parent / "_shared"
    if candidate.is_dir():
        return candidate
    return None


def _build_search_paths(template_dir: Path) -> tuple[Path, ...]:
    template_dir = template_dir.resolve()
    shared_dir = _discover_shared_dir(template_dir)
    packaged_shared_dir = _PACKAGED_SHARED_DIR if _PACKAGED_SHARED_DIR.is_dir() else None

    paths: list[Path] = [template_dir]
    for candidate in (shared_dir, packaged_shared_dir):
        if candidate is None:
            continue
        candidate = candidate.resolve()
        if candidate not in paths:
            paths.append(candidate)
    return tuple(paths)


@lru_cache(maxsize=16)
def _get_env(template_dir: Path) -> Environment:
    search_paths = _build_search_paths(template_dir)
    return Environment(
        loader=FileSystemLoader([str(path) for path in search_paths]),
        autoescape=False,
        trim_blocks=True,
        lstrip_blocks=True,
        undefined=StrictUndefined,
        auto_reload=True,
    )


def render_template(path: str | Path, context: dict[str, object]) -> str:
    template_path = Path(path)
    env = _get_env(template_path.parent.resolve())
    template = env.get_template(template_path.name)
    return template.render(**context)


__all__ = ["DOCUMENT_TEMPLATE_PATH", "TEMPLATES_ROOT", "render_template"]
