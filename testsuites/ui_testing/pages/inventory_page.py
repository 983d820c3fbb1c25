"""
================================================================================
Inventory Page Object
================================================================================

Product list shown after a successful login.

================================================================================
"""

from __future__ import annotations

import allure
from loguru import logger

from testsuites.ui_testing.framework.exceptions import ElementError
from testsuites.ui_testing.framework.locator import Locator
from testsuites.ui_testing.framework.page_base import BasePage


class InventoryPage(BasePage):
    """Inventory page object."""

    URL_PATH = "/inventory.html"
    # Heading text returned by title()
    PAGE_TITLE = "Products"

    INVENTORY_LIST = Locator.by_css(".inventory_list", "Inventory list")
    ITEM_NAMES = Locator.by_css(".inventory_item_name", "Item names")
    TITLE = Locator.by_css(".title", "Page title")
    ITEM_DETAILS_NAME = Locator.by_css(".inventory_details_name", "Item detail name")

    @allure.step("Verify inventory loaded")
    def is_loaded(self) -> bool:
        """
        Wait for the load state, then up to the default timeout for the list.

        Slow accounts (performance_glitch_user) take longer than the short
        exists() window to render the inventory.
        """
        self.wait_for_page_load()
        try:
            self.actions.wait_until_visible(self.INVENTORY_LIST)
            return True
        except ElementError as e:
            logger.debug(f"Inventory not loaded: {e}")
            return False

    def title(self):
        return self.actions.text_from(self.TITLE)

    def item_count(self) -> int:
        return self.actions.count(self.ITEM_NAMES)

    def item_name(self, index: int) -> str:
        return self.actions.text_from_list_by_index(self.ITEM_NAMES, index)

    @allure.step("Open inventory item {index}")
    def open_item(self, index: int) -> None:
        """Open the detail view of the item at index."""
        self.actions.select_from_list_by_index(self.ITEM_NAMES, index)

    def detail_name(self):
        """Name shown on the item detail view."""
        return self.actions.text_from(self.ITEM_DETAILS_NAME)


__all__ = [
    "InventoryPage",
]
