"""
================================================================================
Autotest Tools Common Utilities
================================================================================

Configuration loading and logging setup shared by the runner, the pytest
hooks and the UI framework.

Usage:
    from autotest_tools.common import get_config, init_logger

    get_config("ui.base_url")

    init_logger()
    init_logger(level="DEBUG", log_file="reports/logs/run.log")

================================================================================
"""

from .config_loader import ConfigLoader, ConfigurationError, get_config
from .global_config import (
    get_logger,
    init_logger,
    is_logger_initialized,
    reset_logger,
)


__all__ = [
    "ConfigLoader",
    "ConfigurationError",
    "get_config",
    "get_logger",
    "init_logger",
    "is_logger_initialized",
    "reset_logger",
]
