"""
Repository-level pytest configuration.

Responsibilities:
  - Provide demo-safe environment defaults (Sauce Demo publishes its password)
  - Initialize the process-wide loguru logger once, before collection
"""

from __future__ import annotations

import os
from pathlib import Path

import pytest

from harness_tools.common import init_logger
from testsuites.ui_testing.framework.settings import SUPPORTED_BROWSERS


DEMO_SAFE_ENV_DEFAULTS = {
    # Public demo credential documented on the Sauce Demo login screen
    "SAUCE_PASSWORD": "secret_sauce",
}


def pytest_addoption(parser):
    group = parser.getgroup("ui", "Sauce Demo UI options")
    group.addoption(
        "--ui-browser",
        action="store",
        default=None,
        choices=SUPPORTED_BROWSERS,
        help="Browser for UI scenarios (default: ui.browser from config)",
    )
    group.addoption(
        "--ui-headed",
        action="store_true",
        default=False,
        help="Run the browser with a visible window",
    )
    group.addoption(
        "--ui-base-url",
        action="store",
        default=None,
        help="Application base URL (default: ui.base_url from config)",
    )


def pytest_configure(config):
    """Apply env defaults and logging before test modules are imported."""
    for k, v in DEMO_SAFE_ENV_DEFAULTS.items():
        os.environ.setdefault(k, v)
    init_logger()


@pytest.fixture(scope="session")
def project_root() -> Path:
    """Return repo root path."""
    return Path(__file__).parent
