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


@dataclass(frozen=True)
class ThemeConfig:
    name: str
    label: str
    css_class: str


THEMES: tuple[ThemeConfig, ...] = (
    ThemeConfig(name="minimal", label="Minimal", css_class="theme-minimal"),
    ThemeConfig(name="modern", label="Modern", css_class="theme-modern"),
    ThemeConfig(name="classic", label="Classic", css_class="theme-classic"),
)
THEME_NAMES: tuple[str, ...] = tuple(theme.name for theme in THEMES)
DEFAULT_THEME = "minimal"


def list_themes() -> tuple[ThemeConfig, ...]:
    return THEMES


def get_theme(name: str) -> ThemeConfig:
    normalized = name.strip().lower()
    for theme in THEMES:
        if theme.name == normalized:
            return theme
    raise ValueError(f"unknown theme: {name} (choose from {', '.join(THEME_NAMES)})")


__all__ = [
    "DEFAULT_THEME",
    "THEMES",
    "THEME_NAMES",
    "ThemeConfig",
    "get_theme",
    "list_themes",
]
