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
import shutil
import sys
from dataclasses import dataclass
from pathlib import Path

from platformdirs import user_config_dir

from ..layout.paper import normalize_paper_size

APP_NAME = "onepager"
CONFIG_ROOT = Path(__file__).resolve().parent
PAPER_CONFIGS = {
    "LETTER": CONFIG_ROOT / "letter.toml",
    "A4": CONFIG_ROOT / "a4.toml",
}
DEFAULT_PAPER_SIZE = "LETTER"
DEFAULT_CONFIG_PATH = PAPER_CONFIGS[DEFAULT_PAPER_SIZE]
PAPER_SIZE_ENV = "ONEPAGER_PAPER_SIZE"
XDG_CONFIG_ENV = "XDG_CONFIG_HOME"


@dataclass(frozen=True)
class ConfigPaths:
    user_config_dir: Path
    user_paper_configs: dict[str, Path]
    user_required_files: tuple[Path, ...]


def _user_config_dir() -> Path:
    xdg_override = os.environ.get(XDG_CONFIG_ENV)
    if xdg_override:
        return Path(xdg_override) / APP_NAME
    if sys.platform == "darwin":
        return Path.home() / ".config" / APP_NAME
    return Path(user_config_dir(APP_NAME, appauthor=False))


def _build_paths() -> ConfigPaths:
    config_dir = _user_config_dir()
    user_paper_configs = {key: config_dir / path.name for key, path in PAPER_CONFIGS.items()}
    return ConfigPaths(
        user_config_dir=config_dir,
        user_paper_configs=user_paper_configs,
        user_required_files=tuple(user_paper_configs.values()),
    )


def init_user_config() -> Path:
    paths = _build_paths()
    if not _ensure_user_config(paths):
        raise OSError(f"unable to create config dir at {paths.user_config_dir}")
    return paths.user_config_dir


def user_config_needs_init() -> bool:
    paths = _build_paths()
    return any(not path.exists() for path in paths.user_required_files)


def resolve_config_path(path: str | Path | None = None, *, paper_size: str | None = None) -> Path:
    """Pick the config file: explicit path, paper size, environment, user copy, default."""
    if path:
        return Path(path)

    paths = _build_paths()
    user_configs = {key: dest for key, dest in paths.user_paper_configs.items() if dest.exists()}

    requested = paper_size or os.environ.get(PAPER_SIZE_ENV)
    if requested:
        config_path = _paper_config_path(requested, user_configs)
        if config_path is not None:
            return config_path

    default_user_config = user_configs.get(DEFAULT_PAPER_SIZE)
    if default_user_config is not None:
        return default_user_config
    return DEFAULT_CONFIG_PATH


def _paper_config_path(paper_size: str, user_configs: dict[str, Path]) -> Path | None:
    # Sizes without a dedicated file use the default config; the loader overrides the size.
    key = normalize_paper_size(paper_size)
    return user_configs.get(key) or PAPER_CONFIGS.get(key)


def _ensure_user_config(paths: ConfigPaths) -> bool:
    try:
        paths.user_config_dir.mkdir(parents=True, exist_ok=True)
        for key, src in PAPER_CONFIGS.items():
            _copy_if_missing(src, paths.user_paper_configs[key])
    except OSError:
        return False
    return True


def _copy_if_missing(source: Path, dest: Path) -> None:
    if dest.exists():
        return
    dest.parent.mkdir(parents=True, exist_ok=True)
    shutil.copyfile(source, dest)
