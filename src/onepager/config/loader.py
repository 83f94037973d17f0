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

import os
import tomllib
from dataclasses import dataclass, field
from pathlib import Path

from ..content.templates import AUTO_TEMPLATE, TEMPLATE_NAMES
from ..layout.engine import Orientation
from ..layout.paper import normalize_orientation, normalize_paper_size
from ..render.themes import DEFAULT_THEME, THEME_NAMES
from .installer import DEFAULT_PAPER_SIZE, PAPER_SIZE_ENV, resolve_config_path


@dataclass(frozen=True)
class LayoutDefaults:
    max_pages: int = 1
    orientation: Orientation = "portrait"
    font_size: float | None = None


@dataclass(frozen=True)
class StyleDefaults:
    theme: str = DEFAULT_THEME
    template: str = AUTO_TEMPLATE


@dataclass(frozen=True)
class UiDefaults:
    quiet: bool = False
    no_color: bool = False
    no_animations: bool = False


@dataclass(frozen=True)
class AppConfig:
    paper_size: str = DEFAULT_PAPER_SIZE
    layout: LayoutDefaults = field(default_factory=LayoutDefaults)
    style: StyleDefaults = field(default_factory=StyleDefaults)
    ui: UiDefaults = field(default_factory=UiDefaults)
    source_path: Path | None = None


def load_app_config(path: str | Path | None = None, *, paper_size: str | None = None) -> AppConfig:
    config_path = resolve_config_path(path, paper_size=paper_size)
    data = _load_toml(config_path)

    page_cfg = _get_dict(data, "page")
    requested_paper = paper_size
    if requested_paper is None and not path:
        requested_paper = os.environ.get(PAPER_SIZE_ENV) or None
    file_paper = _parse_optional_str(page_cfg.get("size"), field="page.size")
    resolved_paper = _parse_paper_size(
        requested_paper or file_paper or DEFAULT_PAPER_SIZE,
        field="page.size",
    )

    return AppConfig(
        paper_size=resolved_paper,
        layout=_parse_layout_defaults(_get_dict(data, "layout")),
        style=_parse_style_defaults(_get_dict(data, "style")),
        ui=_parse_ui_defaults(_get_dict(data, "ui")),
        source_path=config_path,
    )


def load_ui_defaults(
    path: str | Path | None = None,
    *,
    paper_size: str | None = None,
) -> UiDefaults:
    config_path = resolve_config_path(path, paper_size=paper_size)
    data = _load_toml(config_path)
    return _parse_ui_defaults(_get_dict(data, "ui"))


def _parse_layout_defaults(cfg: dict[str, object]) -> LayoutDefaults:
    max_pages = _parse_optional_positive_int(cfg.get("max_pages"), field="layout.max_pages")
    orientation = _parse_optional_str(cfg.get("orientation"), field="layout.orientation")
    return LayoutDefaults(
        max_pages=1 if max_pages is None else max_pages,
        orientation=_parse_orientation(orientation or "portrait", field="layout.orientation"),
        font_size=_parse_optional_font_size(cfg.get("font_size"), field="layout.font_size"),
    )


def _parse_style_defaults(cfg: dict[str, object]) -> StyleDefaults:
    theme = _parse_optional_str(cfg.get("theme"), field="style.theme") or DEFAULT_THEME
    template = _parse_optional_str(cfg.get("template"), field="style.template") or AUTO_TEMPLATE
    theme = theme.lower()
    template = template.lower()
    if theme not in THEME_NAMES:
        raise ValueError(f"style.theme must be one of: {', '.join(THEME_NAMES)}")
    template_choices = (AUTO_TEMPLATE, *TEMPLATE_NAMES)
    if template not in template_choices:
        raise ValueError(f"style.template must be one of: {', '.join(template_choices)}")
    return StyleDefaults(theme=theme, template=template)


def _parse_ui_defaults(cfg: dict[str, object]) -> UiDefaults:
    return UiDefaults(
        quiet=_parse_bool(cfg.get("quiet"), field="ui.quiet", default=False),
        no_color=_parse_bool(cfg.get("no_color"), field="ui.no_color", default=False),
        no_animations=_parse_bool(
            cfg.get("no_animations"),
            field="ui.no_animations",
            default=False,
        ),
    )


def _load_toml(path: Path) -> dict[str, object]:
    with path.open("rb") as handle:
        return tomllib.load(handle)


def _get_dict(data: dict[str, object], key: str) -> dict[str, object]:
    value = data.get(key)
    if isinstance(value, dict):
        return value
    return {}


def _parse_optional_str(value: object, *, field: str) -> str | None:
    if value is None:
        return None
    if not isinstance(value, str):
        raise ValueError(f"{field} must be a string")
    normalized = value.strip()
    return normalized or None


def _parse_paper_size(value: str, *, field: str) -> str:
    try:
        return normalize_paper_size(value)
    except ValueError as exc:
        raise ValueError(f"{field}: {exc}") from exc


def _parse_orientation(value: str, *, field: str) -> Orientation:
    try:
        return normalize_orientation(value)
    except ValueError as exc:
        raise ValueError(f"{field}: {exc}") from exc


def _parse_bool(value: object, *, field: str, default: bool) -> bool:
    if value is None:
        return default
    if isinstance(value, bool):
        return value
    if isinstance(value, int):
        if value in (0, 1):
            return bool(value)
        raise ValueError(f"{field} must be a boolean")
    if isinstance(value, str):
        normalized = value.strip().lower()
        if normalized in {"1", "true", "yes", "on"}:
            return True
        if normalized in {"0", "false", "no", "off"}:
            return False
        raise ValueError(f"{field} must be a boolean")
    raise ValueError(f"{field} must be a boolean")


def _parse_optional_positive_int(value: object, *, field: str) -> int | None:
    if value is None:
        return None
    parsed = _parse_int_strict(value, field=field)
    if parsed <= 0:
        raise ValueError(f"{field} must be a positive integer")
    return parsed


def _parse_optional_font_size(value: object, *, field: str) -> float | None:
    if value is None:
        return None
    if isinstance(value, bool):
        raise ValueError(f"{field} must be a number")
    if isinstance(value, str):
        text = value.strip().lower()
        if not text or text == "auto":
            return None
        try:
            value = float(text)
        except ValueError as exc:
            raise ValueError(f"{field} must be a number") from exc
    if not isinstance(value, (int, float)):
        raise ValueError(f"{field} must be a number")
    if value == 0:
        return None
    if value < 0:
        raise ValueError(f"{field} must be a positive number or 0")
    return float(value)


def _parse_int_strict(value: object, *, field: str) -> int:
    if isinstance(value, bool):
        raise ValueError(f"{field} must be an integer")
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        if not value.is_integer():
            raise ValueError(f"{field} must be an integer")
        return int(value)
    if isinstance(value, str):
        text = value.strip()
        if not text:
            raise ValueError(f"{field} must be an integer")
        try:
            return int(text)
        except ValueError as exc:
            raise ValueError(f"{field} must be an integer") from exc
    raise ValueError(f"{field} must be an integer")
