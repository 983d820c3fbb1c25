"""
================================================================================
Global Configuration for the UI Harness
================================================================================

Centralized configuration management and logging setup.

Features:
    - YAML-based configuration loading (config/config.yaml)
    - Environment-specific overlays (config/{ENVIRONMENT}.yaml)
    - Environment variable overrides
    - Centralized Loguru logging configuration

Author: Automation Team
License: MIT
================================================================================
"""

import os
import sys
from pathlib import Path
from typing import Any, Dict, Optional

import yaml
from loguru import logger

# Global configuration storage
_config: Dict[str, Any] = {}
_config_loaded: bool = False
_logger_initialized: bool = False

# Explicit environment variable names and the keys they override
ENV_MAPPING: Dict[str, str] = {
    "UI_BASE_URL": "ui.base_url",
    "UI_DEFAULT_TIMEOUT_MS": "ui.default_timeout_ms",
    "UI_BROWSER": "ui.browser",
    "UI_HEADLESS": "ui.headless",
    "LOG_LEVEL": "logging.level",
}

DEFAULT_LOG_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> | "
    "<level>{message}</level>"
)


class ConfigurationError(Exception):
    """Raised when a configuration file cannot be parsed."""
    pass


def init_logger(level: str = None, format_str: str = None) -> None:
    """
    Initializes the global Loguru logger with consistent configuration.

    Called once by the root conftest and by run_tests.py. Repeated calls
    are no-ops until reload_config() resets the state.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR). Defaults to config value.
        format_str: Custom log format string. Defaults to config value.
    """
    global _logger_initialized

    if _logger_initialized:
        return

    log_level = str(level or get_config("logging.level", "INFO")).upper()
    log_format = format_str or get_config("logging.format", DEFAULT_LOG_FORMAT)

    logger.remove()
    logger.add(
        sys.stderr,
        level=log_level,
        format=log_format,
        colorize=True,
        backtrace=True,
        diagnose=False,
    )

    # Optional: Add file logging
    log_file = get_config("logging.file", None)
    if log_file:
        Path(log_file).parent.mkdir(parents=True, exist_ok=True)
        logger.add(
            log_file,
            level=log_level,
            format=log_format,
            rotation=get_config("logging.rotation", "10 MB"),
            retention=get_config("logging.retention", "7 days"),
            compression="zip",
        )

    _logger_initialized = True
    logger.debug(f"Logger initialized with level: {log_level}")


def _ensure_config_loaded() -> None:
    """Ensures the configuration is loaded."""
    if not _config_loaded:
        _load_config()


def _find_config_dir() -> Optional[Path]:
    """Return the first existing configuration directory."""
    override = os.getenv("HARNESS_CONFIG_DIR")
    if override:
        return Path(override)

    possible_config_dirs = [
        Path("config"),
        Path(__file__).parent.parent.parent / "config",
    ]
    for dir_path in possible_config_dirs:
        if dir_path.exists():
            return dir_path
    return None


def _read_yaml(path: Path) -> Dict[str, Any]:
    try:
        with open(path, "r", encoding="utf-8") as f:
            return yaml.safe_load(f) or {}
    except yaml.YAMLError as e:
        raise ConfigurationError(f"Invalid YAML in configuration file {path}: {e}") from e


def _load_config() -> None:
    """
    Loads configuration from YAML files and environment variables.

    Configuration loading order:
        1. Built-in defaults
        2. Default configuration file (config/config.yaml)
        3. Environment-specific configuration (config/{ENVIRONMENT}.yaml)
        4. Environment variables (override YAML settings)
    """
    global _config, _config_loaded

    _config = _get_defaults()
    config_dir = _find_config_dir()

    if config_dir is None:
        logger.warning("No configuration directory found. Using defaults.")
    else:
        default_config_path = config_dir / "config.yaml"
        if default_config_path.exists():
            _config = _deep_merge(_config, _read_yaml(default_config_path))
            logger.debug(f"Loaded configuration from {default_config_path}")

        env = os.getenv("ENVIRONMENT", os.getenv("ENV", "dev"))
        env_config_path = config_dir / f"{env}.yaml"
        if env_config_path.exists():
            _config = _deep_merge(_config, _read_yaml(env_config_path))
            logger.debug(f"Merged environment config: {env_config_path}")

    _apply_env_overrides()
    _config_loaded = True


def _get_defaults() -> Dict[str, Any]:
    """Returns default configuration values."""
    return {
        "logging": {
            "level": "INFO",
            "format": DEFAULT_LOG_FORMAT,
        },
        "ui": {
            "base_url": "https://www.saucedemo.com/",
            "default_timeout_ms": 15000,
            "browser": "chromium",
            "headless": True,
            "maximize": True,
            "viewport": {"width": 1920, "height": 1080},
        },
    }


def _deep_merge(base: Dict, override: Dict) -> Dict:
    """Deep merges two dictionaries, with override taking precedence."""
    result = base.copy()
    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = _deep_merge(result[key], value)
        else:
            result[key] = value
    return result


def _apply_env_overrides() -> None:
    """
    Applies environment variable overrides to the configuration.

    Two forms are supported:
        - Explicit names from ENV_MAPPING (UI_BASE_URL -> ui.base_url)
        - Double underscore nesting (UI__DEFAULT_TIMEOUT_MS -> ui.default_timeout_ms)
    """
    for key, value in os.environ.items():
        if "__" in key and not key.startswith("_"):
            parts = [p.lower() for p in key.split("__")]
            _set_nested(_config, parts, value)

    for env_key, config_key in ENV_MAPPING.items():
        if env_key in os.environ:
            _set_nested(_config, config_key.split("."), os.environ[env_key])


def _set_nested(d: Dict, keys: list, value: Any) -> None:
    """Sets a nested dictionary value using a list of keys."""
    for key in keys[:-1]:
        node = d.get(key)
        if not isinstance(node, dict):
            node = {}
            d[key] = node
        d = node
    d[keys[-1]] = value


def get_config(key: str, default: Any = None) -> Any:
    """
    Retrieves a configuration value using a dot-separated key path.

    Args:
        key: Dot-separated key path (e.g., "logging.level", "ui.base_url").
        default: Default value to return if key is not found.

    Returns:
        The configuration value, or the default if not found.

    Examples:
        >>> get_config("ui.default_timeout_ms", 15000)
        15000
    """
    _ensure_config_loaded()

    value = _config
    for k in key.split("."):
        if isinstance(value, dict) and k in value:
            value = value[k]
        else:
            return default

    return value


def set_config(key: str, value: Any) -> None:
    """
    Sets a configuration value at runtime.

    Args:
        key: Dot-separated key path.
        value: Value to set.
    """
    _ensure_config_loaded()
    _set_nested(_config, key.split("."), value)


def reload_config() -> None:
    """Drops cached configuration and logger state and reloads from files."""
    global _config, _config_loaded, _logger_initialized
    _config = {}
    _config_loaded = False
    _logger_initialized = False
    _load_config()
    logger.info("Configuration reloaded.")
