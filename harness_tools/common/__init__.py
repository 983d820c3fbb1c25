"""
================================================================================
Harness Tools Common Utilities
================================================================================

Configuration management and logging setup shared by the framework, the
pytest fixtures and the command line runner.

Exports:
    - get_config / set_config / reload_config: dot-notation configuration access
    - init_logger: explicit loguru initialization
    - ConfigurationError: raised for malformed configuration files

Usage:
    from harness_tools.common import get_config, init_logger

    init_logger()
    timeout = get_config("ui.default_timeout_ms", 15000)

================================================================================
"""

from .global_config import (
    ConfigurationError,
    get_config,
    init_logger,
    reload_config,
    set_config,
)

__all__ = [
    "ConfigurationError",
    "get_config",
    "init_logger",
    "reload_config",
    "set_config",
]
