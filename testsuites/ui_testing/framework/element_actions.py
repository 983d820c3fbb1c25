# ================================================================================
# Element Actions Module
# ================================================================================
#
# Element interaction layer used by every page object. Each operation takes a
# Locator and an optional timeout (milliseconds) and wraps Playwright's sync
# API with a single synchronization policy: wait for visibility, then act.
#
# Key Features:
#   - Bounded visibility waits before every interaction
#   - Boolean probes (exists, is_clickable, is_present) that never raise
#   - Bounds-checked list access
#   - Playwright errors translated into the framework error taxonomy
#   - Allure step integration
#
# ================================================================================

from typing import List, Optional

import allure
from loguru import logger
from playwright.sync_api import Error as PlaywrightError
from playwright.sync_api import Locator as PlaywrightLocator
from playwright.sync_api import Page
from playwright.sync_api import TimeoutError as PlaywrightTimeoutError

from .exceptions import (
    ElementError,
    ElementNotFoundError,
    ElementNotInteractableError,
    ElementNotVisibleError,
    IndexOutOfRangeError,
)
from .locator import Locator


DEFAULT_TIMEOUT_MS = 15000
EXISTS_TIMEOUT_MS = 5000
CLICKABLE_TIMEOUT_MS = 10000


class ElementActions:
    """
    Wait-then-act wrapper around a Playwright page.

    Probes report absence as a boolean; actions raise ElementError
    subclasses and leave the verdict to the test.

    Example:
        actions = ElementActions(page)
        actions.enter_text(Locator.by_id("user-name"), "standard_user")
        actions.click(Locator.by_id("login-button"))
        assert actions.exists(Locator.by_css(".inventory_list"))
    """

    def __init__(self, page: Page, default_timeout: int = DEFAULT_TIMEOUT_MS):
        """
        Args:
            page: Playwright Page owned by the current session
            default_timeout: Timeout for waits and actions in milliseconds
        """
        self.page = page
        self.default_timeout = default_timeout

    # =========================================================================
    # Waits and probes
    # =========================================================================

    @allure.step("Wait until visible: {locator}")
    def wait_until_visible(
        self,
        locator: Locator,
        timeout: Optional[int] = None,
    ) -> PlaywrightLocator:
        """
        Block until at least one element matching the locator is visible.

        Args:
            locator: Element locator
            timeout: Wait timeout in milliseconds

        Returns:
            Playwright locator pinned to the first visible match

        Raises:
            ElementNotFoundError: Nothing matched when the wait expired
            ElementNotVisibleError: Matches exist but none became visible
        """
        return self._wait_visible(locator, self._timeout(timeout))

    def exists(self, locator: Locator) -> bool:
        """
        Check whether the element becomes visible within a short fixed window.

        Never raises. Probing does not touch page state, so repeated calls on
        a stable page return the same answer.
        """
        try:
            self._wait_visible(locator, EXISTS_TIMEOUT_MS)
            return True
        except (ElementError, PlaywrightError) as e:
            logger.debug(f"Element does not exist: {locator} ({type(e).__name__})")
            return False

    @allure.step("Check displayed: {locator}")
    def is_displayed(self, locator: Locator, timeout: Optional[int] = None) -> bool:
        """
        Return the displayed state of the first visible match.

        Raises:
            ElementNotFoundError: Nothing matches the locator
        """
        target = self._wait_visible(locator, self._timeout(timeout))
        return target.is_visible()

    def _wait_visible(self, locator: Locator, timeout: int) -> PlaywrightLocator:
        target = self._first_visible(locator)

        logger.debug(f"Waiting up to {timeout} ms for {locator} to be visible")
        try:
            target.wait_for(state="visible", timeout=timeout)
        except PlaywrightTimeoutError as e:
            if self.count(locator) == 0:
                raise ElementNotFoundError(
                    f"No element matches {locator} after {timeout} ms", locator
                ) from e
            raise ElementNotVisibleError(
                f"Element {locator} not visible after {timeout} ms", locator
            ) from e
        return target

    def is_clickable(self, locator: Locator, timeout: int = CLICKABLE_TIMEOUT_MS) -> bool:
        """
        Check whether the element becomes actionable within the timeout.

        Uses a trial click: Playwright runs its actionability checks
        (visible, stable, enabled, receives events) without clicking.
        """
        try:
            self._first_visible(locator).click(trial=True, timeout=timeout)
            return True
        except PlaywrightError as e:
            logger.debug(f"Element not clickable: {locator} ({e})")
            return False

    def is_present(self, locator: Locator) -> bool:
        """Raw presence check: the locator currently resolves to at least one element."""
        return self.count(locator) > 0

    def count(self, locator: Locator) -> int:
        """Number of elements currently matching the locator (no waiting)."""
        return self._resolve(locator).count()

    # =========================================================================
    # Actions
    # =========================================================================

    @allure.step("Click: {locator}")
    def click(self, locator: Locator, timeout: Optional[int] = None) -> None:
        """
        Wait for visibility, then click.

        Raises:
            ElementNotFoundError / ElementNotVisibleError: Visibility wait failed
            ElementNotInteractableError: Click could not be dispatched
        """
        timeout = self._timeout(timeout)
        target = self._wait_visible(locator, timeout)

        logger.info(f"Clicking element: {locator}")
        try:
            target.click(timeout=timeout)
        except PlaywrightError as e:
            raise ElementNotInteractableError(f"Could not click {locator}: {e}", locator) from e

    def enter_text(self, locator: Locator, text: str, timeout: Optional[int] = None) -> None:
        """
        Wait for visibility, then type text into the element.

        Existing content is replaced. The value is kept out of logs and
        report step parameters.
        """
        timeout = self._timeout(timeout)
        with allure.step(f"Enter text: {locator}"):
            target = self._wait_visible(locator, timeout)

            logger.info(f"Entering text into: {locator} ({len(text)} chars)")
            try:
                target.fill(text, timeout=timeout)
            except PlaywrightError as e:
                raise ElementNotInteractableError(f"Could not type into {locator}: {e}", locator) from e

    @allure.step("Select list entry {index}: {locator}")
    def select_from_list_by_index(self, locator: Locator, index: int) -> None:
        """
        Click the entry at index among all current matches.

        Raises:
            IndexOutOfRangeError: index outside [0, count)
            ElementNotInteractableError: Click could not be dispatched
        """
        entry = self._entry_at(locator, index)

        logger.info(f"Selecting entry {index} of {locator}")
        try:
            entry.click(timeout=self.default_timeout)
        except PlaywrightError as e:
            raise ElementNotInteractableError(
                f"Could not click entry {index} of {locator}: {e}", locator
            ) from e

    @allure.step("Get list entry text {index}: {locator}")
    def text_from_list_by_index(self, locator: Locator, index: int) -> str:
        """
        Return the text of the entry at index among all current matches.

        Raises:
            IndexOutOfRangeError: index outside [0, count)
        """
        entry = self._entry_at(locator, index)
        try:
            text = entry.inner_text(timeout=self.default_timeout)
        except PlaywrightError as e:
            raise ElementNotFoundError(
                f"Entry {index} of {locator} is no longer available: {e}", locator
            ) from e

        logger.debug(f"Got text from entry {index} of {locator}: '{text}'")
        return text

    def text_from(self, locator: Locator, timeout: Optional[int] = None) -> Optional[str]:
        """
        Return the text of the first match, or None when it cannot be resolved.
        """
        try:
            text = self._resolve(locator).first.inner_text(timeout=self._timeout(timeout))
        except PlaywrightError as e:
            logger.error(f"Failed to get text from element {locator}: {e}")
            return None

        logger.debug(f"Got text from {locator}: '{text}'")
        return text

    # =========================================================================
    # Helpers
    # =========================================================================

    def _timeout(self, timeout: Optional[int]) -> int:
        return self.default_timeout if timeout is None else timeout

    def _resolve(self, locator: Locator) -> PlaywrightLocator:
        return self.page.locator(locator.selector)

    def _first_visible(self, locator: Locator) -> PlaywrightLocator:
        return self.page.locator(f"{locator.selector} >> visible=true").first

    def _entry_at(self, locator: Locator, index: int) -> PlaywrightLocator:
        entries: List[PlaywrightLocator] = self._resolve(locator).all()
        if not 0 <= index < len(entries):
            raise IndexOutOfRangeError(
                f"Invalid index {index} for {locator}: {len(entries)} element(s) matched",
                locator,
                index=index,
                count=len(entries),
            )
        return entries[index]


__all__ = [
    "ElementActions",
    "DEFAULT_TIMEOUT_MS",
    "EXISTS_TIMEOUT_MS",
    "CLICKABLE_TIMEOUT_MS",
]
