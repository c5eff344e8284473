"""
================================================================================
Configuration Loader
================================================================================

YAML-based configuration management with environment variable override support.

Features:
    - Built-in defaults for the Automation Exercise site
    - YAML configuration loading (testsuites/config/config.yaml)
    - Environment variable override (UI_BASE_URL overrides ui.base_url)
    - Dot notation path access

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

import copy
import os
from pathlib import Path
from typing import Any, Dict, Optional

import yaml
from loguru import logger


# Default configuration file path
DEFAULT_CONFIG_PATH = Path(__file__).resolve().parents[2] / "testsuites" / "config" / "config.yaml"

DEFAULT_BASE_URL = "https://www.automationexercise.com"

# Values used when the YAML file is missing or omits a key
DEFAULTS: Dict[str, Any] = {
    "ui": {
        "base_url": DEFAULT_BASE_URL,
        "headless": True,
        "slow_mo": 0,
        "retries": 2,
        "screenshot": "only-on-failure",
        "browsers": ["chromium", "firefox", "webkit"],
        "viewport": {"width": 1280, "height": 720},
        "timeouts": {
            "test": 45000,
            "expect": 15000,
            "action": 15000,
            "navigation": 45000,
            "reachability": 10,
        },
    },
    "logging": {
        "level": "INFO",
        "rotation": "10 MB",
        "retention": "7 days",
    },
}

# Short env var names accepted in addition to the dotted-path mapping
ENV_ALIASES: Dict[str, str] = {
    "ui.base_url": "BASE_URL",
    "logging.level": "LOG_LEVEL",
}


class ConfigurationError(Exception):
    """Raised when configuration loading or access fails."""
    pass


def _deep_merge(base: Dict, override: Dict) -> Dict:
    """Deep merge two dictionaries, with override taking precedence."""
    result = copy.deepcopy(base)
    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = _deep_merge(result[key], value)
        else:
            result[key] = value
    return result


class ConfigLoader:
    """
    Configuration loader with YAML and environment variable support.

    Configuration hierarchy (highest to lowest priority):
        1. Environment variables (UI_BASE_URL, then the BASE_URL alias)
        2. YAML configuration file
        3. Built-in DEFAULTS
        4. Default passed to get()

    Usage:
        >>> config = ConfigLoader()
        >>> config.get("ui.base_url")
        'https://www.automationexercise.com'

        >>> config.get("ui.timeouts.action", 15000)
        15000

    Environment Variable Mapping:
        - ui.base_url -> UI_BASE_URL (or BASE_URL)
        - ui.timeouts.action -> UI_TIMEOUTS_ACTION
        - logging.level -> LOGGING_LEVEL (or LOG_LEVEL)
    """

    _instance: Optional["ConfigLoader"] = None
    _config: Dict[str, Any] = {}

    def __new__(cls, config_path: Optional[Path] = None) -> "ConfigLoader":
        """Singleton: configuration is loaded once per process."""
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance._initialized = False
        return cls._instance

    def __init__(self, config_path: Optional[Path] = None) -> None:
        """
        Initialize configuration loader.

        Args:
            config_path: Path to YAML configuration file.
                        Uses DEFAULT_CONFIG_PATH if not specified.
        """
        if getattr(self, "_initialized", False):
            return

        self._config_path = Path(config_path) if config_path else DEFAULT_CONFIG_PATH
        self._load_config()
        self._initialized = True

    def _load_config(self) -> None:
        """Load configuration from YAML file on top of DEFAULTS."""
        if not self._config_path.exists():
            logger.warning(
                f"Configuration file not found: {self._config_path}. "
                f"Using defaults and environment variables only."
            )
            self._config = copy.deepcopy(DEFAULTS)
            return

        try:
            with open(self._config_path, "r", encoding="utf-8") as f:
                file_config = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ConfigurationError(
                f"Invalid YAML in configuration file: {e}"
            ) from e

        if not isinstance(file_config, dict):
            raise ConfigurationError(
                f"Configuration root must be a mapping: {self._config_path}"
            )

        self._config = _deep_merge(DEFAULTS, file_config)
        logger.debug(f"Loaded configuration from: {self._config_path}")

    def get(self, key: str, default: Any = None) -> Any:
        """
        Get configuration value by dot-notation path.

        First checks environment variables, then YAML config, then default.

        Args:
            key: Dot-notation path (e.g., "ui.base_url")
            default: Default value if key not found

        Returns:
            Configuration value or default
        """
        env_value = self._env_value(key)

        value: Any = self._config
        for part in key.split("."):
            if isinstance(value, dict):
                value = value.get(part)
            else:
                value = None

            if value is None:
                break

        if env_value is not None:
            reference = value if value is not None else default
            return self._convert_type(env_value, reference)

        return default if value is None else value

    def get_section(self, section: str) -> Dict[str, Any]:
        """
        Get entire configuration section.

        Args:
            section: Section name (e.g., "ui", "logging")

        Returns:
            Section dictionary or empty dict if not found
        """
        return copy.deepcopy(self._config.get(section, {}))

    def reload(self) -> None:
        """Reload configuration from file."""
        self._load_config()
        logger.info(f"Configuration reloaded from: {self._config_path}")

    @staticmethod
    def _env_value(key: str) -> Optional[str]:
        env_key = key.upper().replace(".", "_")
        value = os.environ.get(env_key)
        if value is None and key in ENV_ALIASES:
            value = os.environ.get(ENV_ALIASES[key])
        return value

    def _convert_type(self, value: str, reference: Any) -> Any:
        """
        Convert string value to match reference type.

        Used for environment variables which are always strings.
        """
        if reference is None:
            return value

        if isinstance(reference, bool):
            return value.lower() in ("true", "1", "yes", "on")
        if isinstance(reference, int):
            try:
                return int(value)
            except ValueError:
                return value
        if isinstance(reference, float):
            try:
                return float(value)
            except ValueError:
                return value
        if isinstance(reference, list):
            return [item.strip() for item in value.split(",") if item.strip()]

        return value

    @classmethod
    def reset(cls) -> None:
        """
        Reset singleton instance.

        Useful for testing when configuration needs to be reloaded
        with different settings.
        """
        cls._instance = None
        cls._config = {}


def get_config(key: str, default: Any = None) -> Any:
    """Shortcut for ``ConfigLoader().get(key, default)``."""
    return ConfigLoader().get(key, default)


__all__ = [
    "ConfigLoader",
    "ConfigurationError",
    "DEFAULT_BASE_URL",
    "DEFAULTS",
    "get_config",
]
