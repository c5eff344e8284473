"""
================================================================================
Base Page Object
================================================================================

Foundation class for Page Object Model implementation.

Provides:
    - Navigation relative to the configured base URL
    - Fill / click / select wrappers that return the page object for chaining
    - Visibility, text and value assertions (Playwright `expect`)
    - Fallback-aware element location (SmartLocator)
    - Screenshot and failure capture for Allure

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

import time
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

import allure
from loguru import logger
from playwright.async_api import Locator, Page, Response, expect

from autotest_tools.common.config_loader import ConfigLoader
from autotest_tools.report_tools.allure_utils import attach_json, attach_png, attach_text
from testsuites.ui_testing.support.utils import generate_random_email, generate_random_name

from .smart_locator import SmartLocator


# Default output directory for screenshots
SCREENSHOT_DIR = Path(__file__).resolve().parents[3] / "screenshots"

# Failed responses kept for failure reports
MAX_CAPTURED_RESPONSES = 20


def resolve_base_url(base_url: str = "") -> str:
    """
    Constructor argument, then `ui.base_url` from ConfigLoader.

    ConfigLoader applies the env overrides (UI_BASE_URL, then BASE_URL), so
    page objects and BrowserManager always agree on the host.
    """
    if not base_url:
        base_url = ConfigLoader().get("ui.base_url")
    return base_url.rstrip("/")


def record_failed_responses(page: Page) -> List[Dict[str, Any]]:
    """
    Record HTTP responses with status >= 400 on page.

    Register once per Playwright page; the returned list keeps the last
    MAX_CAPTURED_RESPONSES entries and is what capture_failure() attaches.
    """
    failed: List[Dict[str, Any]] = []

    def on_response(response: Response) -> None:
        if response.status < 400:
            return
        failed.append({
            "timestamp": datetime.now().isoformat(),
            "url": response.url,
            "status": response.status,
        })
        if len(failed) > MAX_CAPTURED_RESPONSES:
            failed.pop(0)

    page.on("response", on_response)
    return failed


class BasePage:
    """
    Base class for all page objects.

    Subclasses declare `URL_PATH` and a `SELECTORS` mapping; tests talk to
    page methods and never to raw selectors.

    Usage:
        class LoginPage(BasePage):
            URL_PATH = "/login"
            SELECTORS = {"login_email": "[data-qa='login-email']"}

            async def login(self, email: str, password: str):
                await self.type_text(self.selectors["login_email"], email)
                ...
    """

    # Override in subclasses
    URL_PATH: str = "/"
    PAGE_TITLE: str = ""
    SELECTORS: Dict[str, str] = {}

    def __init__(
        self,
        page: Page,
        base_url: str = "",
    ):
        """
        Initialize page object.

        Args:
            page: Playwright Page object
            base_url: Base URL for the application (resolved from env/config if empty)
        """
        self.page = page
        self.base_url = resolve_base_url(base_url)
        self.selectors: Dict[str, str] = dict(self.SELECTORS)
        self.smart = SmartLocator(page)

    @property
    def url(self) -> str:
        """Get full page URL."""
        return f"{self.base_url}{self.URL_PATH}"

    @property
    def current_url(self) -> str:
        return self.page.url

    # =========================================================================
    # Navigation
    # =========================================================================

    async def visit(self, path: str = "", wait_until: str = "load") -> "BasePage":
        """
        Navigate to base URL + path.

        Args:
            path: Path relative to the base URL ("" for the home page)
            wait_until: 'load', 'domcontentloaded' or 'networkidle'
        """
        target = f"{self.base_url}{path}"
        with allure.step(f"Navigate to {path or '/'}"):
            await self.page.goto(target, wait_until=wait_until)
            logger.debug(f"Navigated to: {target}")
        return self

    async def navigate(self, wait_until: str = "load") -> "BasePage":
        """Navigate to this page's URL_PATH."""
        return await self.visit(self.URL_PATH, wait_until=wait_until)

    async def wait_for_page_load(self) -> "BasePage":
        """Wait until the document body is visible."""
        await expect(self.page.locator("body")).to_be_visible()
        return self

    async def wait_for_url(self, url_pattern: str, timeout: int = 15000) -> "BasePage":
        """
        Wait for URL to match pattern.

        Args:
            url_pattern: URL glob (e.g. "**/category_products/1")
            timeout: Timeout in milliseconds
        """
        with allure.step(f"Wait for URL: {url_pattern}"):
            await self.page.wait_for_url(url_pattern, timeout=timeout)
        return self

    # =========================================================================
    # Element Interactions
    # =========================================================================

    def get_element(self, selector: str) -> Locator:
        return self.page.locator(selector)

    async def click_element(self, selector: str, **kwargs: Any) -> "BasePage":
        with allure.step(f"Click: {selector}"):
            await self.page.click(selector, **kwargs)
        return self

    async def type_text(self, selector: str, text: str) -> "BasePage":
        """Fill an input (replaces existing content)."""
        shown = "*" * len(text) if "password" in selector.lower() else text
        with allure.step(f"Fill {selector}: {shown}"):
            await self.page.fill(selector, text)
        return self

    async def clear_and_type(self, selector: str, text: str) -> "BasePage":
        await self.page.fill(selector, "")
        await self.page.fill(selector, text)
        return self

    async def select_option(self, selector: str, option: Union[str, List[str]]) -> "BasePage":
        with allure.step(f"Select {option} in {selector}"):
            await self.page.select_option(selector, option)
        return self

    async def scroll_to_element(self, selector: str) -> "BasePage":
        await self.page.locator(selector).first.scroll_into_view_if_needed()
        return self

    async def wait_for_element(
        self,
        selector: str,
        timeout: int = 10000,
        state: str = "visible",
    ) -> "BasePage":
        """
        Wait for element to reach specified state.

        Args:
            selector: CSS selector
            timeout: Timeout in milliseconds
            state: Target state - 'visible', 'hidden', 'attached', 'detached'
        """
        await self.page.wait_for_selector(selector, state=state, timeout=timeout)
        return self

    async def get_element_text(self, selector: str) -> Optional[str]:
        return await self.page.text_content(selector)

    # =========================================================================
    # Assertions
    # =========================================================================

    async def is_element_visible(self, selector: str) -> "BasePage":
        """Assert the first match of selector is visible."""
        await expect(self.page.locator(selector).first).to_be_visible()
        return self

    assert_element_visible = is_element_visible

    async def element_exists(self, selector: str) -> "BasePage":
        """Assert exactly one element matches selector."""
        await expect(self.page.locator(selector)).to_have_count(1)
        return self

    async def assert_element_contains_text(self, selector: str, text: str) -> "BasePage":
        await expect(self.page.locator(selector).first).to_contain_text(text)
        return self

    async def assert_element_has_value(self, selector: str, value: str) -> "BasePage":
        await expect(self.page.locator(selector)).to_have_value(value)
        return self

    async def assert_url_contains(self, fragment: str) -> "BasePage":
        assert fragment in self.page.url, f"Expected '{fragment}' in URL, got {self.page.url}"
        return self

    # =========================================================================
    # Utilities
    # =========================================================================

    def get_random_email(self) -> str:
        return generate_random_email()

    def get_random_name(self) -> str:
        return generate_random_name()

    async def measure_page_load_time(self) -> float:
        """
        Wait for DOMContentLoaded and return the elapsed milliseconds.

        The wait starts when this method is called, so call it right after
        triggering navigation.
        """
        start = time.perf_counter()
        await self.page.wait_for_load_state("domcontentloaded")
        elapsed_ms = (time.perf_counter() - start) * 1000
        logger.info(f"{type(self).__name__} loaded in {elapsed_ms:.0f}ms")
        return elapsed_ms

    async def take_screenshot(
        self,
        name: str,
        full_page: bool = True,
        attach_to_allure: bool = True,
    ) -> Path:
        """
        Save `screenshots/<name>.png` and optionally attach it to Allure.

        Returns:
            Path to saved screenshot
        """
        SCREENSHOT_DIR.mkdir(parents=True, exist_ok=True)
        filepath = SCREENSHOT_DIR / f"{name}.png"

        data = await self.page.screenshot(path=str(filepath), full_page=full_page)

        if attach_to_allure:
            attach_png(data, name=name)

        logger.debug(f"Screenshot saved: {filepath}")
        return filepath

    async def capture_failure(
        self,
        test_name: str,
        failed_responses: Optional[List[Dict[str, Any]]] = None,
    ) -> None:
        """
        Capture debugging information on test failure.

        Saves screenshot, current URL and recent failed responses.

        Args:
            test_name: Used in the screenshot file name
            failed_responses: List filled by record_failed_responses()
        """
        with allure.step("Capture failure details"):
            timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
            await self.take_screenshot(f"failure_{test_name}_{timestamp}")

            attach_text(self.page.url, name="Current URL")

            if failed_responses:
                attach_json(failed_responses[-10:], name="Failed Responses")

    def get_locator_health_report(self) -> str:
        """Get smart locator health report."""
        return self.smart.get_health_report()


__all__ = [
    "BasePage",
    "PageBase",
    "SCREENSHOT_DIR",
    "record_failed_responses",
    "resolve_base_url",
]

# Alias kept for page objects that prefer the PageBase spelling
PageBase = BasePage
