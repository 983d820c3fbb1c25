"""
UI settings resolved from harness configuration.

Environment overrides arrive as strings, so values are converted to the
type of their defaults here rather than at every call site.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict

from loguru import logger

from harness_tools.common import get_config

from .element_actions import DEFAULT_TIMEOUT_MS


DEFAULT_BASE_URL = "https://www.saucedemo.com/"
SUPPORTED_BROWSERS = ("chromium", "firefox", "webkit")


def _as_bool(value: Any) -> bool:
    if isinstance(value, bool):
        return value
    return str(value).strip().lower() in ("true", "1", "yes", "on")


def _as_int(value: Any, default: int) -> int:
    try:
        return int(value)
    except (TypeError, ValueError):
        return default


@dataclass(frozen=True)
class UISettings:
    """Browser and application settings for one test run."""

    base_url: str = DEFAULT_BASE_URL
    default_timeout_ms: int = DEFAULT_TIMEOUT_MS
    browser: str = "chromium"
    headless: bool = True
    maximize: bool = True
    viewport: Dict[str, int] = field(default_factory=lambda: {"width": 1920, "height": 1080})

    def __post_init__(self):
        if self.browser not in SUPPORTED_BROWSERS:
            raise ValueError(
                f"Unsupported browser '{self.browser}'. "
                f"Expected one of: {', '.join(SUPPORTED_BROWSERS)}"
            )

    @classmethod
    def from_config(cls, **overrides: Any) -> "UISettings":
        """
        Build settings from harness configuration.

        Args:
            **overrides: Values that win over configuration (e.g. CLI options).
                None values are ignored.
        """
        viewport = get_config("ui.viewport", {}) or {}
        if not isinstance(viewport, dict):
            logger.warning(f"Ignoring ui.viewport={viewport!r}: expected width/height keys")
            viewport = {}
        values = {
            "base_url": str(get_config("ui.base_url", DEFAULT_BASE_URL)),
            "default_timeout_ms": _as_int(get_config("ui.default_timeout_ms"), DEFAULT_TIMEOUT_MS),
            "browser": str(get_config("ui.browser", "chromium")).lower(),
            "headless": _as_bool(get_config("ui.headless", True)),
            "maximize": _as_bool(get_config("ui.maximize", True)),
            "viewport": {
                "width": _as_int(viewport.get("width"), 1920),
                "height": _as_int(viewport.get("height"), 1080),
            },
        }
        values.update({k: v for k, v in overrides.items() if v is not None})
        return cls(**values)
