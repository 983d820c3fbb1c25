"""
================================================================================
UI Testing Pytest Configuration
================================================================================

Fixtures implementing the scenario lifecycle:

    browser_manager (session)  - one browser per test worker
    session (function)         - setUp: new context, maximized, base URL opened
                                 tearDown: context disposed, errors logged
    page / login_page / inventory_page (function)

Every scenario gets its own session; nothing survives between scenarios.

================================================================================
"""

from pathlib import Path
from typing import Generator

import pytest
from loguru import logger
from playwright.sync_api import Error as PlaywrightError
from playwright.sync_api import Page

from testsuites.ui_testing.framework.browser_manager import (
    BrowserManager,
    BrowserSession,
    scenario_session,
)
from testsuites.ui_testing.framework.credential_loader import CredentialLoader
from testsuites.ui_testing.framework.settings import UISettings
from testsuites.ui_testing.pages.inventory_page import InventoryPage
from testsuites.ui_testing.pages.login_page import LoginPage


DATA_DIR = Path(__file__).resolve().parents[1] / "data"


# ================================================================================
# Browser Fixtures
# ================================================================================

@pytest.fixture(scope="session")
def ui_settings(pytestconfig) -> UISettings:
    """Settings from config/config.yaml, env overrides and CLI options."""
    return UISettings.from_config(
        browser=pytestconfig.getoption("--ui-browser"),
        headless=False if pytestconfig.getoption("--ui-headed") else None,
        base_url=pytestconfig.getoption("--ui-base-url"),
    )


@pytest.fixture(scope="session")
def browser_manager(ui_settings: UISettings) -> Generator[BrowserManager, None, None]:
    """
    Session-scoped browser manager fixture.

    Launches one browser for the worker. Scenarios never share a session;
    only the browser process is reused.
    """
    manager = BrowserManager(ui_settings)
    try:
        manager.start()
    except PlaywrightError as e:
        manager.close()
        pytest.skip(f"Browser '{ui_settings.browser}' is not available: {e}")
    yield manager
    manager.close()


@pytest.fixture(scope="function")
def session(browser_manager: BrowserManager) -> Generator[BrowserSession, None, None]:
    """
    Function-scoped scenario session.

    setUp opens the configured base URL in a fresh maximized context;
    tearDown disposes it even when the scenario body failed.
    """
    with scenario_session(browser_manager) as scenario:
        yield scenario


@pytest.fixture(scope="function")
def page(session: BrowserSession) -> Page:
    return session.page


# ================================================================================
# Page Object Fixtures
# ================================================================================

@pytest.fixture
def login_page(page: Page, ui_settings: UISettings) -> LoginPage:
    """LoginPage bound to the current scenario session."""
    return LoginPage(page, base_url=ui_settings.base_url, timeout=ui_settings.default_timeout_ms)


@pytest.fixture
def inventory_page(page: Page, ui_settings: UISettings) -> InventoryPage:
    """InventoryPage bound to the current scenario session."""
    return InventoryPage(page, base_url=ui_settings.base_url, timeout=ui_settings.default_timeout_ms)


# ================================================================================
# Data Fixtures
# ================================================================================

@pytest.fixture(scope="session")
def credential_loader() -> CredentialLoader:
    loader = CredentialLoader(DATA_DIR)
    loader.load_all()
    return loader


@pytest.fixture
def standard_user(credential_loader: CredentialLoader):
    """The canonical valid credential record."""
    for record in credential_loader.loaded_records:
        if record.username == "standard_user":
            return record
    logger.error(f"No standard_user record found in {DATA_DIR}")
    pytest.fail("standard_user credential record is missing")
