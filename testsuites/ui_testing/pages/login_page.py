"""
================================================================================
Login Page Object
================================================================================

Sauce Demo login screen.

The screen exposes two different checks on purpose:
  - is_error_shown(): the error region is present in the DOM right now
  - is_form_displayed(): form controls become visible within a short wait

================================================================================
"""

from __future__ import annotations

from typing import Optional

import allure
from loguru import logger

from testsuites.ui_testing.framework.locator import Locator
from testsuites.ui_testing.framework.page_base import BasePage


class LoginPage(BasePage):
    """Login page object."""

    URL_PATH = "/"

    USERNAME_INPUT = Locator.by_id("user-name", "Username field")
    PASSWORD_INPUT = Locator.by_id("password", "Password field")
    LOGIN_BUTTON = Locator.by_id("login-button", "Login button")
    ERROR_REGION = Locator.by_css(".error-message-container", "Error region")
    ERROR_MESSAGE = Locator.by_test_id("error", "Error message")

    @allure.step("Open login page")
    def open(self) -> "LoginPage":
        """Navigate to the login page."""
        self.navigate()
        return self

    def enter_username(self, username: str) -> None:
        self.actions.enter_text(self.USERNAME_INPUT, username)

    def enter_password(self, password: str) -> None:
        self.actions.enter_text(self.PASSWORD_INPUT, password)

    def submit(self) -> None:
        self.actions.click(self.LOGIN_BUTTON)

    def login(self, username: str, password: str) -> None:
        """
        Fill the form and submit it.

        No retry and no validation between steps; callers decide what the
        outcome means.
        """
        with allure.step(f"Login (username={username})"):
            logger.info(f"Logging in as '{username}'")
            self.enter_username(username)
            self.enter_password(password)
            self.submit()

    @allure.step("Check login error is shown")
    def is_error_shown(self) -> bool:
        """True iff the error region currently resolves to at least one element."""
        return self.actions.is_present(self.ERROR_REGION)

    def error_text(self) -> Optional[str]:
        """Text of the error message, or None when there is none."""
        return self.actions.text_from(self.ERROR_MESSAGE)

    @allure.step("Verify login form is displayed")
    def is_form_displayed(self) -> bool:
        return all(
            self.actions.exists(locator)
            for locator in (self.USERNAME_INPUT, self.PASSWORD_INPUT, self.LOGIN_BUTTON)
        )


__all__ = [
    "LoginPage",
]
