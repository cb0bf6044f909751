from unittest.mock import AsyncMock, MagicMock

import pytest
from playwright.async_api import Error as PlaywrightError

from testsuites.ui_testing.framework.browser_manager import BrowserManager, check_site_accessible


def make_context() -> MagicMock:
    context = MagicMock()
    context.close = AsyncMock()
    context.new_page = AsyncMock()
    context.new_page.return_value.goto = AsyncMock()
    return context


@pytest.fixture
def manager(runtime_config) -> BrowserManager:
    manager = BrowserManager(runtime_config)
    manager._browser = MagicMock()
    manager._browser.new_context = AsyncMock(side_effect=lambda **_: make_context())
    manager._browser.close = AsyncMock()
    return manager


@pytest.mark.asyncio
async def test_closed_contexts_are_released(manager):
    contexts = [await manager.new_context() for _ in range(50)]
    assert len(manager.open_contexts) == 50

    for context in contexts:
        await manager.close_context(context)

    assert manager.open_contexts == []
    await manager.close()
    for context in contexts:
        assert context.close.await_count == 1


@pytest.mark.asyncio
async def test_close_releases_remaining_contexts(manager):
    kept = await manager.new_context()
    released = await manager.new_context()
    await manager.close_context(released)

    await manager.close()

    kept.close.assert_awaited_once()
    released.close.assert_awaited_once()
    assert manager.open_contexts == []
    assert manager.browser is None


@pytest.mark.asyncio
async def test_close_context_tolerates_already_closed(manager):
    context = await manager.new_context()
    context.close.side_effect = PlaywrightError("Target closed")

    await manager.close_context(context)

    assert manager.open_contexts == []


@pytest.mark.asyncio
async def test_new_context_applies_configured_timeout(manager, runtime_config):
    context = await manager.new_context()

    context.set_default_timeout.assert_called_once_with(runtime_config.browser.timeout)
    kwargs = manager._browser.new_context.await_args.kwargs
    assert kwargs["base_url"] == runtime_config.base_url
    assert kwargs["viewport"] == {"width": 1920, "height": 1080}


@pytest.mark.asyncio
async def test_new_context_requires_started_browser(runtime_config):
    with pytest.raises(RuntimeError):
        await BrowserManager(runtime_config).new_context()


@pytest.mark.asyncio
async def test_site_check_releases_its_context(manager):
    assert await check_site_accessible(manager) is True
    assert manager.open_contexts == []


@pytest.mark.asyncio
async def test_site_check_reports_unreachable_site(manager):
    page = MagicMock()
    page.goto = AsyncMock(side_effect=PlaywrightError("net::ERR_NAME_NOT_RESOLVED"))
    context = make_context()
    context.new_page.return_value = page
    manager._browser.new_context = AsyncMock(return_value=context)

    assert await check_site_accessible(manager) is False
    context.close.assert_awaited_once()
    assert manager.open_contexts == []
