from unittest.mock import AsyncMock, call

import pytest
from playwright.async_api import Error as PlaywrightError
from playwright.async_api import TimeoutError as PlaywrightTimeoutError

from testsuites.ui_testing.framework.config import RuntimeConfig
from testsuites.ui_testing.framework.page_base import (
    NAVIGATION_RETRY_TIMEOUT,
    NAVIGATION_TIMEOUT,
    BasePage,
    ElementNotFoundError,
)


def test_build_url(fake_page):
    page = BasePage(fake_page, RuntimeConfig(base_url="http://shop.local/"))

    assert page.build_url("/login") == "http://shop.local/login"
    assert page.build_url("") == "http://shop.local"
    assert page.build_url("https://other.example/x") == "https://other.example/x"


@pytest.mark.asyncio
async def test_goto_retries_once_on_timeout(fake_page, runtime_config):
    fake_page.goto.side_effect = [PlaywrightTimeoutError("slow"), None]
    page = BasePage(fake_page, runtime_config)

    await page.goto("/login")

    url = f"{runtime_config.base_url}/login"
    assert fake_page.goto.await_args_list == [
        call(url, wait_until="domcontentloaded", timeout=NAVIGATION_TIMEOUT),
        call(url, wait_until="domcontentloaded", timeout=NAVIGATION_RETRY_TIMEOUT),
    ]


@pytest.mark.asyncio
async def test_goto_second_timeout_propagates(fake_page, runtime_config):
    fake_page.goto.side_effect = PlaywrightTimeoutError("down")
    page = BasePage(fake_page, runtime_config)

    with pytest.raises(PlaywrightTimeoutError):
        await page.goto("/")
    assert fake_page.goto.await_count == 2


@pytest.mark.asyncio
async def test_goto_retries_when_page_load_times_out(fake_page, runtime_config):
    fake_page.wait_for_load_state.side_effect = [PlaywrightTimeoutError("dom"), None, None]
    page = BasePage(fake_page, runtime_config)

    await page.goto("/")

    assert fake_page.goto.await_count == 2
    assert fake_page.goto.await_args.kwargs["timeout"] == NAVIGATION_RETRY_TIMEOUT
    assert fake_page.wait_for_load_state.await_count == 3


@pytest.mark.asyncio
async def test_page_load_degrades_when_network_never_idles(fake_page, runtime_config):
    fake_page.wait_for_load_state.side_effect = [None, PlaywrightTimeoutError("busy"), None]
    page = BasePage(fake_page, runtime_config)

    await page.wait_for_page_load()

    states = [c.args[0] for c in fake_page.wait_for_load_state.await_args_list]
    assert states == ["domcontentloaded", "networkidle", "domcontentloaded"]


@pytest.mark.asyncio
async def test_probes_report_absence_as_false(fake_page, locator, runtime_config):
    locator.wait_for.side_effect = PlaywrightTimeoutError("not there")
    page = BasePage(fake_page, runtime_config)

    assert await page.is_visible(locator) is False
    assert await page.exists(locator) is False
    assert await page.get_error_message() == ""
    assert await page.has_validation_errors() is False


@pytest.mark.asyncio
async def test_probe_swallows_detached_element_errors(fake_page, locator, runtime_config):
    locator.wait_for.side_effect = PlaywrightError("Target closed")
    page = BasePage(fake_page, runtime_config)

    assert await page.is_visible(locator) is False


@pytest.mark.asyncio
async def test_probe_uses_probe_timeout(fake_page, locator, runtime_config):
    page = BasePage(fake_page, runtime_config)

    assert await page.is_visible(locator) is True
    locator.wait_for.assert_awaited_with(
        state="visible", timeout=runtime_config.browser.probe_timeout
    )


@pytest.mark.asyncio
async def test_explicit_zero_timeout_is_passed_through(fake_page, locator, runtime_config):
    page = BasePage(fake_page, runtime_config)

    await page.is_visible(locator, timeout=0)
    locator.wait_for.assert_awaited_with(state="visible", timeout=0)

    await page.wait_for_url("/login", timeout=0)
    fake_page.wait_for_url.assert_awaited_with("**/login**", timeout=0)


@pytest.mark.asyncio
async def test_wait_for_element_raises_element_not_found(fake_page, locator, runtime_config):
    locator.wait_for.side_effect = PlaywrightTimeoutError("timeout")
    page = BasePage(fake_page, runtime_config)

    with pytest.raises(ElementNotFoundError):
        await page.click_element(locator)
    locator.click.assert_not_awaited()


@pytest.mark.asyncio
async def test_fill_input_clears_before_filling(fake_page, locator, runtime_config):
    order = []
    locator.clear = AsyncMock(side_effect=lambda: order.append("clear"))
    locator.fill = AsyncMock(side_effect=lambda text: order.append(f"fill:{text}"))
    page = BasePage(fake_page, runtime_config)

    await page.fill_input(locator, "john@example.com")

    assert order == ["clear", "fill:john@example.com"]


@pytest.mark.asyncio
async def test_get_text_is_trimmed(fake_page, locator, runtime_config):
    locator.text_content.return_value = "  Email not found  \n"
    page = BasePage(fake_page, runtime_config)

    assert await page.get_error_message() == "Email not found"


@pytest.mark.asyncio
async def test_get_all_texts_skips_blank_entries(fake_page, locator, runtime_config):
    first, blank, last = AsyncMock(), AsyncMock(), AsyncMock()
    first.text_content.return_value = " Email is required "
    blank.text_content.return_value = "   "
    last.text_content.return_value = "Password is required"
    locator.all.return_value = [first, blank, last]
    page = BasePage(fake_page, runtime_config)

    assert await page.get_field_validation_errors() == [
        "Email is required",
        "Password is required",
    ]
