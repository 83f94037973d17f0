#!/usr/bin/env python3
from __future__ import annotations

import typer

from .commands import (
    config as config_command,
    layout as layout_command,
    registry as registry_command,
    render as render_command,
)


def register(app: typer.Typer) -> None:
    render_command.register(app)
    layout_command.register(app)
    registry_command.register(app)
    config_command.register(app)
