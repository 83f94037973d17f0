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
from pathlib import Path

from ..config import AppConfig
from ..content.parser import parse_content
from ..content.templates import ContentTemplate, apply_template, resolve_template
from ..layout.engine import (
    LayoutConfig,
    LayoutResult,
    compute_layout,
    layout_overflows,
    resolve_page_size,
)
from ..layout.paper import build_layout_config
from .document import render_document_html
from .html_to_pdf import render_html_to_pdf
from .measure import measure_content_height
from .themes import ThemeConfig, get_theme


@dataclass(frozen=True)
class PreparedContent:
    source_text: str
    text: str
    html: str
    template: ContentTemplate | None

    @property
    def template_class(self) -> str | None:
        if self.template is None:
            return None
        return self.template.css_class


@dataclass(frozen=True)
class RenderPlan:
    content: PreparedContent
    theme: ThemeConfig
    layout_config: LayoutConfig
    content_height: float
    layout: LayoutResult
    overflow: bool


@dataclass(frozen=True)
class RenderService:
    config: AppConfig

    def prepare(self, text: str, *, template: str | None = None) -> PreparedContent:
        choice = template or self.config.style.template
        content_template = resolve_template(choice, text)
        transformed = apply_template(content_template, text)
        return PreparedContent(
            source_text=text,
            text=transformed,
            html=parse_content(transformed),
            template=content_template,
        )

    def layout_config(
        self,
        *,
        paper: str | None = None,
        max_pages: int | None = None,
        orientation: str | None = None,
        font_size: float | None = None,
    ) -> LayoutConfig:
        defaults = self.config.layout
        return build_layout_config(
            paper or self.config.paper_size,
            max_pages=defaults.max_pages if max_pages is None else max_pages,
            orientation=orientation or defaults.orientation,
            font_size_override=defaults.font_size if font_size is None else font_size,
        )

    def plan(
        self,
        content: PreparedContent,
        *,
        paper: str | None = None,
        max_pages: int | None = None,
        orientation: str | None = None,
        font_size: float | None = None,
        theme: str | None = None,
    ) -> RenderPlan:
        """Measure the prepared content and fit it to the requested page budget."""
        layout_config = self.layout_config(
            paper=paper,
            max_pages=max_pages,
            orientation=orientation,
            font_size=font_size,
        )
        theme_config = get_theme(theme or self.config.style.theme)
        page_width, page_height = resolve_page_size(layout_config)
        content_height = measure_content_height(
            content.html,
            page_width=page_width,
            page_height=page_height,
            theme=theme_config,
            template_class=content.template_class,
        )
        layout = compute_layout(content_height, layout_config)
        return RenderPlan(
            content=content,
            theme=theme_config,
            layout_config=layout_config,
            content_height=content_height,
            layout=layout,
            overflow=layout_overflows(content_height, layout_config, layout),
        )

    def render_html(self, plan: RenderPlan, *, title: str | None = None) -> str:
        return render_document_html(
            plan.content.html,
            plan.layout,
            theme=plan.theme,
            template_class=plan.content.template_class,
            max_pages=plan.layout_config.max_pages,
            title=title,
        )

    def write_html(
        self,
        plan: RenderPlan,
        output_path: str | Path,
        *,
        title: str | None = None,
    ) -> Path:
        output_path = Path(output_path)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(self.render_html(plan, title=title), encoding="utf-8")
        return output_path

    def render_pdf(
        self,
        plan: RenderPlan,
        output_path: str | Path,
        *,
        title: str | None = None,
    ) -> Path:
        return render_html_to_pdf(self.render_html(plan, title=title), output_path)


__all__ = ["PreparedContent", "RenderPlan", "RenderService"]
