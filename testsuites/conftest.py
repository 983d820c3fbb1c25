"""
================================================================================
Root Pytest Configuration
================================================================================

This module provides the pytest configuration for the entire test suite.
It registers common markers and the scenario event emitter.

================================================================================
"""

from typing import List

import pytest

from harness_tools.report_tools import LoggingScenarioListener, ScenarioEventEmitter


def pytest_configure(config):
    """Configure pytest with project-wide custom markers and event listeners."""

    # Priority markers
    config.addinivalue_line(
        "markers", "P0: Critical priority tests - must pass for deployment"
    )
    config.addinivalue_line(
        "markers", "P1: High priority tests - important functionality"
    )
    config.addinivalue_line(
        "markers", "P2: Medium priority tests - edge cases and minor features"
    )
    config.addinivalue_line(
        "markers", "P3: Low priority tests - extensive validation"
    )

    # Test type markers
    config.addinivalue_line(
        "markers", "smoke: Quick verification tests"
    )
    config.addinivalue_line(
        "markers", "regression: Full regression test suite"
    )
    config.addinivalue_line(
        "markers", "unit: Framework tests that need no browser"
    )
    config.addinivalue_line(
        "markers", "ui: UI-specific tests"
    )
    config.addinivalue_line(
        "markers", "e2e: End-to-end tests driving a real browser"
    )

    # Feature markers
    config.addinivalue_line(
        "markers", "auth: Tests related to authentication"
    )
    config.addinivalue_line(
        "markers", "inventory: Tests related to the product inventory"
    )

    if not config.pluginmanager.has_plugin("scenario_event_emitter"):
        emitter = ScenarioEventEmitter()
        emitter.subscribe(LoggingScenarioListener())
        config.pluginmanager.register(emitter, "scenario_event_emitter")


def location_markers(nodeid: str) -> List[str]:
    """Marker names implied by a test's directory, from its rootdir-relative node id."""
    parts = nodeid.split("::", 1)[0].split("/")[:-1]
    if "ui_testing" in parts:
        return ["ui", "e2e"]
    if "unit" in parts:
        return ["unit"]
    return []


@pytest.hookimpl(tryfirst=True)
def pytest_collection_modifyitems(config, items):
    """
    Add markers based on location.

    Browser scenarios live under ui_testing/tests and always carry `e2e`,
    so `-m "not e2e"` keeps a run browser-free.
    """
    for item in items:
        for name in location_markers(item.nodeid):
            item.add_marker(getattr(pytest.mark, name))


def pytest_report_header(config):
    """Add custom header to pytest output."""
    return [
        "",
        "=" * 60,
        "Sauce Demo UI Automation Harness",
        "=" * 60,
        "",
    ]
