"""
================================================================================
Smart Locator
================================================================================

Element location with ordered fallback selectors.

The shop's markup is not consistent across pages: the same "View Cart" or
"Continue Shopping" control is rendered as an <a> on one page and a <button>
on another, and some dialogs carry no stable id at all. SmartLocator tries
each candidate selector in order and records which one matched.

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Union

from loguru import logger
from playwright.async_api import Locator, Page


class ElementNotFoundError(Exception):
    """Raised when all locator strategies fail to find element."""
    pass


@dataclass
class LocatorHealth:
    """
    Tracks which strategy resolved an element.

    Attributes:
        element_name: Human-readable element name
        primary_selector: The preferred selector
        used_fallback: Whether a fallback was used
        fallback_name: Name of fallback used (if any)
        fallback_selector: The fallback selector used (if any)
    """
    element_name: str
    primary_selector: str
    used_fallback: bool = False
    fallback_name: Optional[str] = None
    fallback_selector: Optional[str] = None


LocatorMap = Dict[str, str]


class SmartLocator:
    """
    Element locator with fallback strategies.

    Usage:
        >>> smart = SmartLocator(page)
        >>> await smart.click("modal_view_cart")
        >>> await smart.click({"primary": "#close", "fallback_1": ".close"},
        ...                   element_name="Close button")

    Locators are defined in the LOCATORS dictionary. Order of the inner
    mapping is the order in which strategies are tried.
    """

    LOCATORS: Dict[str, LocatorMap] = {
        # Cart modal shown after "Add to cart"
        "modal_view_cart": {
            "primary": ".modal-content a:has-text('View Cart')",
            "fallback_1": "a:has-text('View Cart')",
            "fallback_2": "button:has-text('View Cart')",
            "fallback_3": "text=View Cart",
        },
        "modal_continue_shopping": {
            "primary": ".modal-content button:has-text('Continue Shopping')",
            "fallback_1": "button:has-text('Continue Shopping')",
            "fallback_2": "a:has-text('Continue Shopping')",
            "fallback_3": "text=Continue Shopping",
        },
        "modal_close": {
            "primary": ".modal-content .btn-success",
            "fallback_1": ".modal-content .close",
            "fallback_2": ".modal-content .close-modal",
        },
        # Account flows
        "continue_button": {
            "primary": "a[data-qa='continue-button']",
            "fallback_1": "a.btn-primary:has-text('Continue')",
            "fallback_2": ".btn-success:has-text('Continue')",
        },
        "delete_account_button": {
            "primary": "a[href='/delete_account']",
            "fallback_1": "a:has-text('Delete Account')",
            "fallback_2": ".btn-danger",
        },
        "logout_link": {
            "primary": "a[href='/logout']",
            "fallback_1": "a:has-text('Logout')",
        },
        "register_login_checkout": {
            "primary": ".modal-content a[href='/login']",
            "fallback_1": "a:has-text('Register / Login')",
        },
    }

    def __init__(
        self,
        page: Page,
        element_name: Optional[str] = None,
        locators: Optional[LocatorMap] = None,
    ):
        """
        Initialize SmartLocator with Playwright page.

        Two usage styles:
        1) Library mode: `SmartLocator(page)` then `await smart.click("modal_close")`
           using the class-level `LOCATORS` map plus runtime registrations.
        2) Element mode: `SmartLocator(page, element_name="X", locators={...})`
           then `await element.locate()`.

        Args:
            page: Playwright Page object
            element_name: Optional human-readable element name (element mode)
            locators: Optional locator map (element mode)
        """
        self.page = page
        self._element_name = element_name
        self._element_locators = locators
        self._registered: Dict[str, LocatorMap] = {}
        self._health_records: List[LocatorHealth] = []
        self._fallback_used: Dict[str, LocatorHealth] = {}

    def _resolve(
        self,
        target: Optional[Union[str, LocatorMap]],
        element_name: Optional[str],
    ) -> tuple[LocatorMap, str]:
        if isinstance(target, dict):
            return target, element_name or self._element_name or "custom_element"
        if isinstance(target, str):
            locators = self._registered.get(target) or self.LOCATORS.get(target, {})
            return locators, target
        return (
            self._element_locators or {},
            element_name or self._element_name or "custom_element",
        )

    async def locate(
        self,
        target: Optional[Union[str, LocatorMap]] = None,
        timeout: int = 5000,
        element_name: Optional[str] = None,
    ) -> Locator:
        """
        Locate element using smart fallback strategy.

        Tries each locator strategy in order until one becomes visible.

        Args:
            target: Element key (str) looked up in registered/class locators,
                a locator map (dict), or None for element mode.
            timeout: Timeout in milliseconds for each attempt
            element_name: Optional human-readable name for dict targets

        Returns:
            Playwright Locator for the found element (first match)

        Raises:
            ElementNotFoundError: When all strategies fail
        """
        locators, display_name = self._resolve(target, element_name)

        if not locators:
            raise ElementNotFoundError(
                f"No locators defined for element: {display_name}"
            )

        primary = locators.get("primary", next(iter(locators.values())))
        errors = []

        for strategy_name, selector in locators.items():
            try:
                locator = self.page.locator(selector).first
                await locator.wait_for(state="visible", timeout=timeout)
            except Exception as e:
                errors.append(f"{strategy_name}: {selector} -> {str(e)[:80]}")
                continue

            is_primary = selector == primary
            health = LocatorHealth(
                element_name=display_name,
                primary_selector=primary,
                used_fallback=not is_primary,
                fallback_name=None if is_primary else strategy_name,
                fallback_selector=None if is_primary else selector,
            )
            self._health_records.append(health)

            if is_primary:
                logger.debug(f"Element '{display_name}' found: {selector}")
            else:
                logger.warning(
                    f"Element '{display_name}' used fallback: "
                    f"{strategy_name} -> {selector}"
                )
                self._fallback_used[display_name] = health

            return locator

        error_msg = (
            f"All locators failed for '{display_name}':\n" +
            "\n".join(f"  - {err}" for err in errors)
        )
        logger.error(error_msg)
        raise ElementNotFoundError(error_msg)

    async def click(
        self,
        target: Union[str, LocatorMap],
        timeout: int = 5000,
        element_name: Optional[str] = None,
        **kwargs: Any,
    ) -> None:
        """Click the first strategy that resolves; kwargs go to Locator.click()."""
        locator = await self.locate(target, timeout=timeout, element_name=element_name)
        await locator.click(**kwargs)

    async def fill(
        self,
        target: Union[str, LocatorMap],
        value: str,
        timeout: int = 5000,
        element_name: Optional[str] = None,
        **kwargs: Any,
    ) -> None:
        locator = await self.locate(target, timeout=timeout, element_name=element_name)
        await locator.fill(value, **kwargs)

    async def get_text(
        self,
        target: Union[str, LocatorMap],
        timeout: int = 5000,
        element_name: Optional[str] = None,
    ) -> str:
        locator = await self.locate(target, timeout=timeout, element_name=element_name)
        return await locator.text_content() or ""

    async def is_visible(
        self,
        target: Union[str, LocatorMap],
        timeout: int = 2000,
        element_name: Optional[str] = None,
    ) -> bool:
        """
        Check if element is visible.

        Returns:
            True if any strategy resolves, False otherwise
        """
        try:
            await self.locate(target, timeout=timeout, element_name=element_name)
            return True
        except ElementNotFoundError:
            return False

    @property
    def health_records(self) -> List[LocatorHealth]:
        return list(self._health_records)

    def get_health_report(self) -> str:
        """
        Generate locator health report.

        Lists elements that needed a fallback (primary selector is stale).
        """
        if not self._fallback_used:
            return "All elements used primary locators. No maintenance needed."

        report_lines = [
            "Locator Health Report - Fallbacks Used:",
            "",
            "The following elements used fallback locators.",
            "Consider updating the primary selectors:",
            "",
        ]

        for element_name, health in self._fallback_used.items():
            report_lines.extend([
                f"  [{element_name}]",
                f"    Failed primary: {health.primary_selector}",
                f"    Used: {health.fallback_name} -> {health.fallback_selector}",
                "",
            ])

        return "\n".join(report_lines)

    def register_locator(
        self,
        element_name: str,
        locators: LocatorMap,
    ) -> None:
        """
        Register a locator map for this instance only.

        Args:
            element_name: Unique name for the element
            locators: Dictionary of strategy -> selector
        """
        self._registered[element_name] = dict(locators)
        logger.debug(f"Registered new locator: {element_name}")


__all__ = [
    "SmartLocator",
    "ElementNotFoundError",
    "LocatorHealth",
]
