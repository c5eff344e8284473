from unittest.mock import AsyncMock, MagicMock

import pytest

from testsuites.ui_testing.framework import browser_manager
from testsuites.ui_testing.framework.browser_manager import BrowserManager


def fake_playwright(monkeypatch, launch):
    """Patch async_playwright() to hand out a mock Playwright driver."""
    driver = MagicMock(name="playwright")
    driver.stop = AsyncMock()
    for name in browser_manager.SUPPORTED_BROWSERS:
        getattr(driver, name).launch = launch

    starter = MagicMock()
    starter.start = AsyncMock(return_value=driver)
    monkeypatch.setattr(browser_manager, "async_playwright", lambda: starter)
    return driver


def test_unsupported_browser():
    with pytest.raises(ValueError, match="Unsupported browser"):
        BrowserManager(browser_type="opera")


def test_defaults_come_from_config():
    manager = BrowserManager()

    assert manager.headless is True
    assert manager.slow_mo == 0
    assert manager.base_url == "https://www.automationexercise.com"
    assert manager.default_context_options() == {
        "viewport": {"width": 1280, "height": 720},
        "base_url": "https://www.automationexercise.com",
        "ignore_https_errors": True,
    }


def test_explicit_arguments_override_config():
    manager = BrowserManager(headless=False, slow_mo=50, base_url="http://shop.test/")

    assert manager.headless is False
    assert manager.slow_mo == 50
    assert manager.base_url == "http://shop.test"


@pytest.mark.asyncio
async def test_new_context_requires_start():
    with pytest.raises(RuntimeError, match="not started"):
        await BrowserManager().new_context()


@pytest.mark.asyncio
async def test_launch_failure_stops_playwright(monkeypatch):
    driver = fake_playwright(monkeypatch, AsyncMock(side_effect=RuntimeError("no browser")))
    manager = BrowserManager(browser_type="webkit")

    with pytest.raises(RuntimeError, match="no browser"):
        await manager.start()

    driver.stop.assert_awaited_once()
    assert manager.browser is None


@pytest.mark.asyncio
async def test_context_lifecycle(monkeypatch):
    context = MagicMock(name="context")
    context.close = AsyncMock()
    context.new_page = AsyncMock(return_value="page")
    browser = MagicMock(name="browser")
    browser.new_context = AsyncMock(return_value=context)
    browser.close = AsyncMock()
    driver = fake_playwright(monkeypatch, AsyncMock(return_value=browser))

    async with BrowserManager(browser_type="firefox", headless=True) as manager:
        driver.firefox.launch.assert_awaited_once_with(headless=True, slow_mo=0)

        page = await manager.new_page(viewport={"width": 375, "height": 667})
        assert page == "page"
        options = browser.new_context.await_args.kwargs
        assert options["viewport"] == {"width": 375, "height": 667}
        assert options["ignore_https_errors"] is True
        context.set_default_timeout.assert_called_once_with(15000)
        context.set_default_navigation_timeout.assert_called_once_with(45000)

        await manager.close_context(context)
        context.close.assert_awaited_once()

    browser.close.assert_awaited_once()
    driver.stop.assert_awaited_once()
    # already closed by close_context, so close() does not touch it again
    context.close.assert_awaited_once()
