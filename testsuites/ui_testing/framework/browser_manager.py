"""
================================================================================
Browser Manager
================================================================================

Browser lifecycle management for UI automation.

Features:
    - One browser process per test worker
    - One isolated context + page (a "session") per scenario
    - Maximized window / fixed viewport presets
    - Teardown that never masks the scenario's own result

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

import threading
from contextlib import contextmanager
from typing import Any, Dict, Iterator, List, Optional

from loguru import logger
from playwright.sync_api import (
    Browser,
    BrowserContext,
    Page,
    Playwright,
    sync_playwright,
)

from .exceptions import SessionError
from .settings import UISettings


class BrowserSession:
    """
    One browser context and its single page, alive for one scenario.

    The session belongs to the thread that created it; asking for the page
    from another thread raises SessionError. After dispose() the session
    cannot be used again.
    """

    def __init__(self, context: BrowserContext, page: Page):
        self._context = context
        self._page = page
        self._owner = threading.get_ident()
        self._disposed = False

    @property
    def page(self) -> Page:
        if self._disposed:
            raise SessionError("Browser session has already been disposed")
        if threading.get_ident() != self._owner:
            raise SessionError("Browser session is owned by another thread")
        return self._page

    @property
    def disposed(self) -> bool:
        return self._disposed

    def open(self, url: str, wait_until: str = "load") -> Page:
        """Navigate the session page to url and return the page."""
        page = self.page
        logger.debug(f"Opening {url}")
        page.goto(url, wait_until=wait_until)
        return page

    def dispose(self) -> None:
        """Close the context. Errors are logged and suppressed."""
        if self._disposed:
            return
        self._disposed = True
        try:
            self._context.close()
            logger.debug("Browser session disposed")
        except Exception as e:
            logger.warning(f"Failed to dispose browser session: {e}")


class BrowserManager:
    """
    Manages the browser process and hands out per-scenario sessions.

    Usage:
        with BrowserManager(UISettings.from_config()) as manager:
            session = manager.new_session()
            session.open("https://www.saucedemo.com/")
            ...
            session.dispose()
    """

    # Default browser launch arguments (chromium only)
    CHROMIUM_ARGS: List[str] = [
        "--ignore-certificate-errors",
    ]

    def __init__(self, settings: Optional[UISettings] = None):
        """
        Initialize browser manager.

        Args:
            settings: Browser settings. Loaded from configuration if None.
        """
        self.settings = settings or UISettings.from_config()

        self._playwright: Optional[Playwright] = None
        self._browser: Optional[Browser] = None
        self._sessions: List[BrowserSession] = []

    def __enter__(self) -> "BrowserManager":
        self.start()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()

    @property
    def _maximized_window(self) -> bool:
        # A real window can only be maximized in headed chromium
        return self.settings.maximize and not self.settings.headless and self.settings.browser == "chromium"

    def launch_options(self) -> Dict[str, Any]:
        """Build Playwright launch options from settings."""
        options: Dict[str, Any] = {"headless": self.settings.headless}
        if self.settings.browser == "chromium":
            args = list(self.CHROMIUM_ARGS)
            if self._maximized_window:
                args.append("--start-maximized")
            options["args"] = args
        return options

    def context_options(self) -> Dict[str, Any]:
        """Build Playwright context options from settings."""
        options: Dict[str, Any] = {"ignore_https_errors": True}
        if self._maximized_window:
            options["no_viewport"] = True
        else:
            options["viewport"] = dict(self.settings.viewport)
        return options

    def start(self) -> None:
        """Start Playwright and launch browser."""
        self._playwright = sync_playwright().start()
        browser_launcher = getattr(self._playwright, self.settings.browser)
        self._browser = browser_launcher.launch(**self.launch_options())
        logger.debug(
            f"Browser started: {self.settings.browser} "
            f"(headless={self.settings.headless})"
        )

    def close(self) -> None:
        """Dispose remaining sessions, then close browser and Playwright."""
        for session in self._sessions:
            session.dispose()
        self._sessions.clear()

        if self._browser:
            try:
                self._browser.close()
            except Exception as e:
                logger.warning(f"Failed to close browser: {e}")
            self._browser = None

        if self._playwright:
            self._playwright.stop()
            self._playwright = None

        logger.debug("Browser closed")

    def new_session(self, **context_options: Any) -> BrowserSession:
        """
        Create a new isolated session (context + page).

        Args:
            **context_options: Overrides for the Playwright context options

        Returns:
            New BrowserSession owned by the calling thread
        """
        if not self._browser:
            raise SessionError("Browser not started. Call start() first.")

        options = {**self.context_options(), **context_options}
        context = self._browser.new_context(**options)
        context.set_default_timeout(self.settings.default_timeout_ms)
        session = BrowserSession(context, context.new_page())

        self._sessions = [s for s in self._sessions if not s.disposed]
        self._sessions.append(session)
        return session

    @property
    def browser(self) -> Optional[Browser]:
        """Get browser instance."""
        return self._browser


@contextmanager
def scenario_session(manager: BrowserManager, base_url: Optional[str] = None) -> Iterator[BrowserSession]:
    """
    Scenario lifecycle: acquire a session, open the base URL, always dispose.

    Disposal failures are logged by BrowserSession.dispose() and never
    replace an error raised by the scenario body.

    Args:
        manager: Started BrowserManager
        base_url: URL to open; defaults to the manager's configured base URL
    """
    session: Optional[BrowserSession] = None
    try:
        session = manager.new_session()
        session.open(base_url or manager.settings.base_url)
        yield session
    finally:
        if session is not None:
            session.dispose()


__all__ = [
    "BrowserManager",
    "BrowserSession",
    "scenario_session",
]
