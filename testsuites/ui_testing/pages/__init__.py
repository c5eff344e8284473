"""
================================================================================
Page Objects
================================================================================

Page Object Model implementations for the Automation Exercise shop.

Each page class encapsulates:
    - Element locators
    - Page-specific actions
    - Verification methods

`PageObjects` bundles one instance of every page for a single Playwright
page, so a test can move between pages without rebuilding objects.

Author: Automation Team
License: MIT
================================================================================
"""

from playwright.async_api import Page

from testsuites.ui_testing.framework.page_base import BasePage

from .cart_page import CartPage
from .home_page import HomePage
from .login_page import LoginPage
from .products_page import ProductsPage


class PageObjects:
    """All page objects bound to one Playwright page."""

    def __init__(self, page: Page, base_url: str = ""):
        self.page = page
        self.home = HomePage(page, base_url)
        self.products = ProductsPage(page, base_url)
        self.cart = CartPage(page, base_url)
        self.login = LoginPage(page, base_url)
        self.base = BasePage(page, base_url)


def initialize_page_objects(page: Page, base_url: str = "") -> PageObjects:
    """Build a fresh PageObjects registry for page."""
    return PageObjects(page, base_url)


__all__ = [
    "BasePage",
    "CartPage",
    "HomePage",
    "LoginPage",
    "PageObjects",
    "ProductsPage",
    "initialize_page_objects",
]
