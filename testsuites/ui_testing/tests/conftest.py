"""
================================================================================
UI Testing Pytest Configuration
================================================================================

This module configures pytest for UI tests, providing fixtures for browser
management, page objects, and test setup/teardown.

Key Features:
- Reachability probe: UI tests are skipped (not failed) when the shop is down
- One browser per session, fresh context + page per test
- Page Object fixtures for all pages
- Screenshot capture on failure
- Throw-away registered account for login flows

================================================================================
"""

import re
from typing import Any, AsyncGenerator, Dict

import httpx
import pytest
import pytest_asyncio
from loguru import logger
from playwright.async_api import BrowserContext, Error as PlaywrightError, Page, expect

from autotest_tools.common.config_loader import ConfigLoader
from testsuites.ui_testing.framework.browser_manager import BrowserManager
from testsuites.ui_testing.framework.page_base import (
    BasePage,
    record_failed_responses,
    resolve_base_url,
)
from testsuites.ui_testing.framework.smart_locator import ElementNotFoundError
from testsuites.ui_testing.pages import (
    CartPage,
    HomePage,
    LoginPage,
    PageObjects,
    ProductsPage,
    initialize_page_objects,
)
from testsuites.ui_testing.support.utils import generate_random_user, load_fixture


# ================================================================================
# Configuration Fixtures
# ================================================================================

@pytest.fixture(scope="session")
def ui_config() -> ConfigLoader:
    return ConfigLoader()


@pytest.fixture(scope="session")
def base_url(pytestconfig) -> str:
    """`--base-url`, then UI_BASE_URL / BASE_URL env, then config."""
    return resolve_base_url(pytestconfig.getoption("base_url") or "")


@pytest.fixture(scope="session")
def site_reachable(base_url: str, ui_config: ConfigLoader) -> str:
    """
    Probe the shop once per session.

    Network errors and 5xx responses skip every UI test instead of failing it.
    """
    timeout = ui_config.get("ui.timeouts.reachability", 10)
    try:
        response = httpx.get(base_url, timeout=timeout, follow_redirects=True)
    except httpx.HTTPError as e:
        pytest.skip(f"{base_url} is unreachable: {e}")

    if response.status_code >= 500:
        pytest.skip(f"{base_url} answered {response.status_code}")

    logger.info(f"Site reachable: {base_url} ({response.status_code})")
    return base_url


# ================================================================================
# Browser Fixtures
# ================================================================================

@pytest_asyncio.fixture(scope="session", loop_scope="session")
async def browser_manager(
    pytestconfig,
    site_reachable: str,
    ui_config: ConfigLoader,
) -> AsyncGenerator[BrowserManager, None]:
    """
    Session-scoped browser manager fixture.

    Provides a single browser for all tests in the session (per xdist worker),
    reducing browser launch overhead.
    """
    expect.set_options(timeout=ui_config.get("ui.timeouts.expect", 15000))

    manager = BrowserManager(
        headless=False if pytestconfig.getoption("headed") else None,
        browser_type=pytestconfig.getoption("ui_browser"),
        base_url=site_reachable,
    )
    try:
        await manager.start()
    except PlaywrightError as e:
        pytest.skip(f"Cannot launch {manager.browser_type}: {e}")

    yield manager
    await manager.close()


@pytest_asyncio.fixture(loop_scope="session")
async def context(browser_manager: BrowserManager) -> AsyncGenerator[BrowserContext, None]:
    """
    Function-scoped browser context fixture.

    Creates a new browser context for each test, providing isolation
    (cookies, cart session, login state).
    """
    context = await browser_manager.new_context()
    yield context
    await browser_manager.close_context(context)


@pytest_asyncio.fixture(loop_scope="session")
async def page(
    request,
    context: BrowserContext,
    ui_config: ConfigLoader,
) -> AsyncGenerator[Page, None]:
    """
    Function-scoped page fixture.

    On failure the screenshot, URL and failed responses are attached to Allure
    before the page is closed.
    """
    page = await context.new_page()
    failed_responses = record_failed_responses(page)
    yield page

    report = getattr(request.node, "rep_call", None)
    if report is not None and report.failed and ui_config.get("ui.screenshot") != "off":
        test_name = re.sub(r"[^\w.-]+", "_", request.node.name)
        try:
            await BasePage(page).capture_failure(test_name, failed_responses)
        except PlaywrightError as e:
            logger.warning(f"Failed to capture screenshot on failure: {e}")

    await page.close()


# ================================================================================
# Page Object Fixtures
# ================================================================================

@pytest.fixture
def pages(page: Page, base_url: str) -> PageObjects:
    """All page objects bound to the test's page."""
    return initialize_page_objects(page, base_url)


@pytest.fixture
def home_page(pages: PageObjects) -> HomePage:
    return pages.home


@pytest.fixture
def products_page(pages: PageObjects) -> ProductsPage:
    return pages.products


@pytest.fixture
def cart_page(pages: PageObjects) -> CartPage:
    return pages.cart


@pytest.fixture
def login_page(pages: PageObjects) -> LoginPage:
    return pages.login


# ================================================================================
# Test Data Fixtures
# ================================================================================

@pytest.fixture
def users() -> Dict[str, Any]:
    """Contents of support/fixtures/users.json."""
    return load_fixture("users")


@pytest.fixture
def products() -> Dict[str, Any]:
    """Contents of support/fixtures/products.json."""
    return load_fixture("products")


@pytest.fixture
def random_user() -> Dict[str, Any]:
    return generate_random_user()


@pytest_asyncio.fixture(loop_scope="session")
async def registered_user(
    login_page: LoginPage,
    random_user: Dict[str, Any],
) -> AsyncGenerator[Dict[str, Any], None]:
    """
    A freshly registered account, logged out, on /login.

    The account is deleted after the test (logging back in if needed).
    """
    await login_page.navigate_to_login()
    await login_page.quick_registration(
        random_user["name"], random_user["email"], random_user["password"]
    )
    await login_page.assert_account_created()
    await login_page.continue_after_account_creation()
    await login_page.logout()

    yield random_user

    try:
        if not await login_page.is_user_logged_in():
            await login_page.navigate_to_login()
            await login_page.login(random_user["email"], random_user["password"])
        await login_page.delete_account()
    except (PlaywrightError, AssertionError, ElementNotFoundError) as e:
        logger.warning(f"Could not delete test account {random_user['email']}: {e}")


# ================================================================================
# Test Lifecycle Hooks
# ================================================================================

@pytest.hookimpl(hookwrapper=True)
def pytest_runtest_makereport(item, call):
    """Expose each phase's report on the item (`rep_setup`, `rep_call`, ...)."""
    outcome = yield
    report = outcome.get_result()
    setattr(item, f"rep_{report.when}", report)
