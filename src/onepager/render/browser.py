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

import atexit
from collections.abc import Iterator
from contextlib import contextmanager

from playwright.sync_api import Browser, Page, Playwright, sync_playwright
from playwright.sync_api import Error as PlaywrightError

_PLAYWRIGHT: Playwright | None = None
_BROWSER: Browser | None = None


def _shutdown_playwright() -> None:
    global _BROWSER, _PLAYWRIGHT
    browser = _BROWSER
    playwright = _PLAYWRIGHT
    _BROWSER = None
    _PLAYWRIGHT = None
    if browser is not None:
        browser.close()
    if playwright is not None:
        playwright.stop()


def get_browser() -> Browser:
    global _BROWSER, _PLAYWRIGHT
    if _BROWSER is not None:
        return _BROWSER
    try:
        _PLAYWRIGHT = sync_playwright().start()
        _BROWSER = _PLAYWRIGHT.chromium.launch()
    except PlaywrightError as exc:
        _shutdown_playwright()
        raise RuntimeError(f"unable to start Chromium: {exc}") from exc
    atexit.register(_shutdown_playwright)
    return _BROWSER


@contextmanager
def open_page(html: str, *, viewport_width: int | None = None) -> Iterator[Page]:
    """Load ``html`` into a fresh print-media page of the shared browser."""
    browser = get_browser()
    try:
        page = browser.new_page()
    except PlaywrightError as exc:
        raise RuntimeError(f"unable to open a browser page: {exc}") from exc
    try:
        if viewport_width is not None:
            page.set_viewport_size({"width": int(viewport_width), "height": 800})
        page.emulate_media(media="print")
        page.set_content(html, wait_until="networkidle")
        yield page
    except PlaywrightError as exc:
        raise RuntimeError(f"browser rendering failed: {exc}") from exc
    finally:
        page.close()


__all__ = ["get_browser", "open_page"]
