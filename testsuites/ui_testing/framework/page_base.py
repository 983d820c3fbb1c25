"""
================================================================================
Base Page Object
================================================================================

Foundation class for Page Object Model implementation.

Provides:
    - Navigation and URL handling
    - An ElementActions instance bound to the page (self.actions)
    - Load-state waits

Page objects compose the element interaction layer rather than inheriting
its methods: a page calls self.actions.click(...), never self.click(...).

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

from typing import Optional

import allure
from loguru import logger
from playwright.sync_api import Page

from .element_actions import ElementActions
from .settings import UISettings


class BasePage:
    """
    Base class for all page objects.

    Usage:
        class LoginPage(BasePage):
            URL_PATH = "/"
            SUBMIT = Locator.by_id("login-button")

            def submit(self):
                self.actions.click(self.SUBMIT)
    """

    # Override in subclasses
    URL_PATH: str = "/"

    def __init__(
        self,
        page: Page,
        base_url: str = "",
        timeout: Optional[int] = None,
        actions: Optional[ElementActions] = None,
    ):
        """
        Initialize page object.

        Args:
            page: Playwright Page of the current session
            base_url: Base URL for the application (configuration if empty)
            timeout: Default element timeout in milliseconds (configuration if None)
            actions: Pre-built interaction layer to share between page objects
        """
        self.page = page
        if not base_url or (actions is None and timeout is None):
            settings = UISettings.from_config()
            base_url = base_url or settings.base_url
            if timeout is None:
                timeout = settings.default_timeout_ms
        self.base_url = base_url.rstrip("/")

        if actions is None:
            actions = ElementActions(page, default_timeout=timeout)
        self.actions = actions

    @property
    def url(self) -> str:
        """Get full page URL."""
        return f"{self.base_url}{self.URL_PATH}"

    @property
    def current_url(self) -> str:
        """URL the browser is currently showing."""
        return self.page.url

    def navigate(self, wait_for: str = "load") -> None:
        """
        Navigate to this page.

        Args:
            wait_for: Wait condition - 'load', 'domcontentloaded', 'networkidle'
        """
        with allure.step(f"Navigate to {self.URL_PATH}"):
            self.page.goto(self.url, wait_until=wait_for)
            logger.debug(f"Navigated to: {self.url}")

    def wait_for_page_load(
        self,
        state: str = "load",
        timeout: Optional[int] = None,
    ) -> None:
        """
        Wait for the page to reach a stable load state.

        Args:
            state: Playwright load state ('load', 'domcontentloaded', 'networkidle')
            timeout: Timeout in milliseconds
        """
        self.page.wait_for_load_state(state, timeout=timeout or self.actions.default_timeout)


__all__ = [
    "BasePage",
]
