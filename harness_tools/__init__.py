"""
================================================================================
Harness Tools
================================================================================

Shared infrastructure for the Sauce Demo UI automation harness.

Modules:
    - common: Configuration loading and loguru logger setup
    - report_tools: Scenario start/pass/fail event emission for pytest runs

Example:
    from harness_tools.common import get_config, init_logger

    init_logger()
    base_url = get_config("ui.base_url", "https://www.saucedemo.com/")

================================================================================
"""

__version__ = "1.0.0"

__all__ = [
    "common",
    "report_tools",
]
