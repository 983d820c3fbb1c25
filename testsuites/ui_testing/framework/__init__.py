"""
================================================================================
UI Testing Framework
================================================================================

Playwright-based UI automation framework.

Components:
    - locator: Immutable strategy + value element descriptors
    - element_actions: Wait-then-act element interaction layer
    - page_base: Base page object composing the interaction layer
    - browser_manager: Browser process and per-scenario session lifecycle
    - credential_loader: YAML-driven login scenario data
    - exceptions: Element and session error taxonomy

Author: Automation Team
License: MIT
================================================================================
"""

from .browser_manager import BrowserManager, BrowserSession, scenario_session
from .credential_loader import CredentialLoader, CredentialRecord
from .element_actions import ElementActions
from .exceptions import (
    ElementError,
    ElementNotFoundError,
    ElementNotInteractableError,
    ElementNotVisibleError,
    IndexOutOfRangeError,
    SessionError,
)
from .locator import Locator
from .page_base import BasePage
from .settings import UISettings

__all__ = [
    "BasePage",
    "BrowserManager",
    "BrowserSession",
    "CredentialLoader",
    "CredentialRecord",
    "ElementActions",
    "ElementError",
    "ElementNotFoundError",
    "ElementNotInteractableError",
    "ElementNotVisibleError",
    "IndexOutOfRangeError",
    "Locator",
    "SessionError",
    "UISettings",
    "scenario_session",
]
