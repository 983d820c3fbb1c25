"""
================================================================================
Locator
================================================================================

Immutable (strategy, value) descriptor identifying zero or more elements.

Page objects declare locators as class attributes:

    USERNAME_INPUT = Locator.by_id("user-name", "Username field")
    ERROR_REGION = Locator.by_css(".error-message-container", "Error region")

A locator renders to a Playwright selector string and is resolved against a
page only when an action runs, so the same declaration is reused by every
session without sharing resolved elements between them.

================================================================================
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict


# Strategy name -> Playwright selector engine prefix
SELECTOR_ENGINES: Dict[str, str] = {
    "id": "id",
    "css": "css",
    "xpath": "xpath",
    "text": "text",
    "test_id": "data-test",
}


@dataclass(frozen=True)
class Locator:
    """
    Strategy + value pair for locating page elements.

    Attributes:
        strategy: One of SELECTOR_ENGINES keys
        value: Selector value for the strategy
        description: Human-readable name used in logs and Allure steps
    """

    strategy: str
    value: str
    description: str = ""

    def __post_init__(self):
        if self.strategy not in SELECTOR_ENGINES:
            raise ValueError(
                f"Unknown locator strategy '{self.strategy}'. "
                f"Expected one of: {', '.join(SELECTOR_ENGINES)}"
            )
        if not self.value:
            raise ValueError("Locator value must not be empty")

    @property
    def selector(self) -> str:
        """Playwright selector string, e.g. 'id=user-name'."""
        return f"{SELECTOR_ENGINES[self.strategy]}={self.value}"

    @classmethod
    def by_id(cls, value: str, description: str = "") -> "Locator":
        return cls("id", value, description)

    @classmethod
    def by_css(cls, value: str, description: str = "") -> "Locator":
        return cls("css", value, description)

    @classmethod
    def by_xpath(cls, value: str, description: str = "") -> "Locator":
        return cls("xpath", value, description)

    @classmethod
    def by_text(cls, value: str, description: str = "") -> "Locator":
        return cls("text", value, description)

    @classmethod
    def by_test_id(cls, value: str, description: str = "") -> "Locator":
        return cls("test_id", value, description)

    def __str__(self) -> str:
        if self.description:
            return f"{self.description} [{self.selector}]"
        return self.selector


__all__ = [
    "Locator",
    "SELECTOR_ENGINES",
]
