"""Fixtures for browser-free unit tests of page objects."""

from unittest.mock import AsyncMock, MagicMock

import pytest

from testsuites.ui_testing.framework.config import RuntimeConfig


def make_locator(visible: bool = True) -> MagicMock:
    """A locator double whose async methods are awaitable."""
    locator = MagicMock()
    for name in (
        "wait_for", "scroll_into_view_if_needed", "click", "clear", "fill",
        "select_option", "check", "uncheck", "is_checked", "is_visible",
        "text_content", "input_value", "get_attribute", "bounding_box",
        "count", "all",
    ):
        setattr(locator, name, AsyncMock())
    locator.is_visible.return_value = visible
    locator.first = locator
    return locator


@pytest.fixture
def runtime_config() -> RuntimeConfig:
    return RuntimeConfig()


@pytest.fixture
def locator() -> MagicMock:
    return make_locator()


@pytest.fixture
def fake_page(locator) -> MagicMock:
    """A Playwright page double; every `page.locator(...)` returns `locator`."""
    page = MagicMock()
    page.url = "https://demo.nopcommerce.com/"
    page.locator.return_value = locator
    page.goto = AsyncMock()
    page.reload = AsyncMock()
    page.wait_for_load_state = AsyncMock()
    page.wait_for_url = AsyncMock()
    page.wait_for_timeout = AsyncMock()
    page.mouse.click = AsyncMock()
    return page
