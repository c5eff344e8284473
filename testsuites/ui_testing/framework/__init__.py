"""
================================================================================
UI Testing Framework
================================================================================

Playwright-based UI automation framework for the Automation Exercise shop.

Components:
    - browser_manager: Browser lifecycle management
    - smart_locator: Element location with fallback strategies
    - page_base: Base page object for common operations

Author: Automation Team
License: MIT
================================================================================
"""

from autotest_tools.common.config_loader import ConfigLoader, ConfigurationError

from .smart_locator import SmartLocator, ElementNotFoundError
from .page_base import BasePage
from .browser_manager import BrowserManager

__all__ = [
    "ConfigLoader",
    "ConfigurationError",
    "SmartLocator",
    "ElementNotFoundError",
    "BasePage",
    "BrowserManager",
]
