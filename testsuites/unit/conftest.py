"""
Fixtures for offline unit tests: no browser, no network.

Playwright pages are replaced by MagicMock objects whose locator methods are
AsyncMocks, which is enough to exercise selector building and control flow.
"""

from typing import Iterable, Optional
from unittest.mock import AsyncMock, MagicMock

import pytest

from autotest_tools.common.config_loader import ConfigLoader
from autotest_tools.common.global_config import reset_logger


@pytest.fixture(autouse=True)
def _isolated_config(monkeypatch):
    """Fresh ConfigLoader singleton and no URL overrides for every test."""
    for name in ("BASE_URL", "UI_BASE_URL"):
        monkeypatch.delenv(name, raising=False)
    ConfigLoader.reset()
    yield
    ConfigLoader.reset()
    reset_logger()


def make_locator(selector: str, visible: bool = True, text: str = "") -> MagicMock:
    """Mock Locator; `.first` returns itself."""
    locator = MagicMock(name=f"locator({selector})")
    locator.selector = selector
    locator.first = locator
    if visible:
        locator.wait_for = AsyncMock()
    else:
        locator.wait_for = AsyncMock(side_effect=TimeoutError(f"Timeout waiting for {selector}"))
    locator.click = AsyncMock()
    locator.fill = AsyncMock()
    locator.text_content = AsyncMock(return_value=text)
    locator.scroll_into_view_if_needed = AsyncMock()
    return locator


def make_page(
    visible: Optional[Iterable[str]] = None,
    url: str = "https://www.automationexercise.com/",
) -> MagicMock:
    """
    Mock Playwright Page.

    Args:
        visible: Selectors that resolve; None means every selector does
        url: Value of page.url
    """
    visible_set = None if visible is None else set(visible)
    page = MagicMock(name="page")
    page.url = url
    page.locator.side_effect = lambda selector, **kwargs: make_locator(
        selector, visible_set is None or selector in visible_set
    )
    page.click = AsyncMock()
    page.fill = AsyncMock()
    page.select_option = AsyncMock()
    page.goto = AsyncMock()
    page.wait_for_url = AsyncMock()
    page.wait_for_selector = AsyncMock()
    page.wait_for_load_state = AsyncMock()
    page.wait_for_timeout = AsyncMock()
    page.input_value = AsyncMock(return_value="")
    page.screenshot = AsyncMock(return_value=b"\x89PNG")
    return page


@pytest.fixture
def fake_page() -> MagicMock:
    return make_page()


@pytest.fixture
def page_factory():
    """Build mock pages with a chosen set of resolvable selectors."""
    return make_page
