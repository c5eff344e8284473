"""
================================================================================
Browser Manager
================================================================================

Browser lifecycle management for UI automation.

Features:
    - One browser instance per session (chromium, firefox or webkit)
    - Isolated contexts per test
    - Viewport, base URL and timeouts taken from the suite configuration

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from loguru import logger
from playwright.async_api import (
    async_playwright,
    Browser,
    BrowserContext,
    Page,
    Playwright,
)

from autotest_tools.common.config_loader import ConfigLoader


SUPPORTED_BROWSERS = ("chromium", "firefox", "webkit")


class BrowserManager:
    """
    Manages browser instances and contexts for UI testing.

    Usage:
        async with BrowserManager(browser_type="firefox") as manager:
            page = await manager.new_page()
            await page.goto("/products")
    """

    # Default browser launch options
    DEFAULT_LAUNCH_OPTIONS: Dict[str, Any] = {
        "headless": True,
    }

    def __init__(
        self,
        headless: Optional[bool] = None,
        browser_type: str = "chromium",
        slow_mo: Optional[int] = None,
        base_url: Optional[str] = None,
        config: Optional[ConfigLoader] = None,
    ):
        """
        Initialize browser manager.

        Args:
            headless: Run browser in headless mode (config `ui.headless` if None)
            browser_type: Browser to use - 'chromium', 'firefox', 'webkit'
            slow_mo: Delay in ms between driver operations (config `ui.slow_mo` if None)
            base_url: Base URL for relative navigation (config `ui.base_url` if None)
            config: ConfigLoader to read defaults from
        """
        if browser_type not in SUPPORTED_BROWSERS:
            raise ValueError(
                f"Unsupported browser: {browser_type}. "
                f"Choose one of {', '.join(SUPPORTED_BROWSERS)}"
            )

        self.config = config or ConfigLoader()
        self.browser_type = browser_type
        self.headless = self.config.get("ui.headless", True) if headless is None else headless
        self.slow_mo = self.config.get("ui.slow_mo", 0) if slow_mo is None else slow_mo
        self.base_url = (base_url or self.config.get("ui.base_url")).rstrip("/")
        self.action_timeout = self.config.get("ui.timeouts.action", 15000)
        self.navigation_timeout = self.config.get("ui.timeouts.navigation", 45000)

        self._playwright: Optional[Playwright] = None
        self._browser: Optional[Browser] = None
        self._contexts: List[BrowserContext] = []

    async def __aenter__(self) -> "BrowserManager":
        await self.start()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()

    def default_context_options(self) -> Dict[str, Any]:
        """Context options derived from configuration."""
        return {
            "viewport": {
                "width": self.config.get("ui.viewport.width", 1280),
                "height": self.config.get("ui.viewport.height", 720),
            },
            "base_url": self.base_url,
            "ignore_https_errors": True,
        }

    async def start(self) -> None:
        """Start Playwright and launch browser."""
        self._playwright = await async_playwright().start()
        browser_launcher = getattr(self._playwright, self.browser_type)

        launch_options = {
            **self.DEFAULT_LAUNCH_OPTIONS,
            "headless": self.headless,
            "slow_mo": self.slow_mo,
        }

        try:
            self._browser = await browser_launcher.launch(**launch_options)
        except Exception:
            await self._playwright.stop()
            self._playwright = None
            raise

        logger.debug(
            f"Browser started: {self.browser_type} "
            f"(headless={self.headless}, slow_mo={self.slow_mo})"
        )

    async def close(self) -> None:
        """Close all contexts and browser."""
        for context in self._contexts:
            try:
                await context.close()
            except Exception as e:
                logger.debug(f"Context already closed: {e}")
        self._contexts.clear()

        if self._browser:
            await self._browser.close()
            self._browser = None

        if self._playwright:
            await self._playwright.stop()
            self._playwright = None

        logger.debug("Browser closed")

    async def new_context(self, **options: Any) -> BrowserContext:
        """
        Create new browser context.

        Each context is isolated - separate cookies, localStorage, etc.

        Args:
            **options: Context options overriding the configured defaults

        Returns:
            New BrowserContext
        """
        if not self._browser:
            raise RuntimeError("Browser not started. Call start() first.")

        context_options = {**self.default_context_options(), **options}
        context = await self._browser.new_context(**context_options)
        context.set_default_timeout(self.action_timeout)
        context.set_default_navigation_timeout(self.navigation_timeout)
        self._contexts.append(context)

        return context

    async def new_page(
        self,
        context: Optional[BrowserContext] = None,
        **context_options: Any,
    ) -> Page:
        """
        Create new page in new or existing context.

        Args:
            context: Existing context to use (creates new if None)
            **context_options: Options for new context

        Returns:
            New Page
        """
        if context is None:
            context = await self.new_context(**context_options)

        return await context.new_page()

    async def close_context(self, context: BrowserContext) -> None:
        """Close a context created by new_context() and stop tracking it."""
        if context in self._contexts:
            self._contexts.remove(context)
        await context.close()

    @property
    def browser(self) -> Optional[Browser]:
        """Get browser instance."""
        return self._browser


__all__ = [
    "BrowserManager",
    "SUPPORTED_BROWSERS",
]
