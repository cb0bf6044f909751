"""
================================================================================
Base Page Object
================================================================================

Foundation class for Page Object Model implementation.

Provides:
    - Navigation with a single bounded retry
    - Load-state waiting that degrades to DOM-ready
    - Visibility-gated element actions (click, fill, select, check)
    - Non-raising probes (visibility, existence, notification text)
    - Scoped browser dialog handling
    - Screenshot utilities with Allure attachment

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

import asyncio
from contextlib import asynccontextmanager
from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path
from typing import AsyncIterator, List, Mapping, Optional

import allure
from loguru import logger
from playwright.async_api import Dialog, Locator, Page
from playwright.async_api import Error as PlaywrightError
from playwright.async_api import TimeoutError as PlaywrightTimeoutError

from testsuites.ui_testing.framework.config import RuntimeConfig
from testsuites.ui_testing.framework.locators import COMMON_LOCATORS, COMMON_MESSAGES


# Default output directory for screenshots
SCREENSHOT_DIR = Path(__file__).parent.parent / "screenshots"

# Navigation timeouts (ms)
NAVIGATION_TIMEOUT = 30000
NAVIGATION_RETRY_TIMEOUT = 15000
DOM_READY_TIMEOUT = 15000
NETWORK_IDLE_TIMEOUT = 10000
DOM_READY_FALLBACK_TIMEOUT = 5000

# Settle time after scrolling an element into view (ms)
SCROLL_SETTLE_MS = 500


class ElementNotFoundError(Exception):
    """Raised when a required element does not become visible in time."""
    pass


@dataclass
class DialogCapture:
    """Messages of browser dialogs handled inside an `expect_dialog` block."""

    messages: List[str] = field(default_factory=list)
    _received: asyncio.Event = field(default_factory=asyncio.Event, repr=False)

    def record(self, message: str) -> None:
        self.messages.append(message)
        self._received.set()

    @property
    def last_message(self) -> str:
        return self.messages[-1] if self.messages else ""

    async def wait_for_message(self, timeout: int = 5000) -> bool:
        """Wait until at least one dialog was handled. Returns False on timeout."""
        try:
            await asyncio.wait_for(self._received.wait(), timeout / 1000)
            return True
        except asyncio.TimeoutError:
            return False


class BasePage:
    """
    Base class for all page objects.

    Page objects hold a reference to a Playwright page owned by the test's
    browser context and a shared, immutable `RuntimeConfig`.

    Usage:
        class LoginPage(BasePage):
            URL_PATH = "/login"

            async def login(self, email: str, password: str):
                await self.fill_input(self.email_input, email)
                await self.fill_input(self.password_input, password)
                await self.click_element(self.login_button)
    """

    # Override in subclasses
    URL_PATH: str = "/"

    def __init__(self, page: Page, config: RuntimeConfig):
        """
        Initialize page object.

        Args:
            page: Playwright Page object
            config: Runtime configuration shared by the test session
        """
        self.page = page
        self.config = config
        self.base_url = config.base_url.rstrip("/")
        self.locators: Mapping[str, str] = COMMON_LOCATORS
        self.messages: Mapping[str, str] = COMMON_MESSAGES

    def locate(self, name: str) -> Locator:
        """Bind a common locator by symbolic name to this page."""
        return self.page.locator(self.locators[name])

    @property
    def action_timeout(self) -> int:
        return self.config.browser.timeout

    @property
    def probe_timeout(self) -> int:
        return self.config.browser.probe_timeout

    def _action_timeout(self, timeout: Optional[int]) -> int:
        return self.action_timeout if timeout is None else timeout

    def _probe_timeout(self, timeout: Optional[int]) -> int:
        return self.probe_timeout if timeout is None else timeout

    # =========================================================================
    # Navigation
    # =========================================================================

    def build_url(self, path: str = "") -> str:
        """Absolute URL for `path`; absolute URLs pass through unchanged."""
        if path.startswith("http"):
            return path
        return f"{self.base_url}{path}"

    async def goto(self, path: str = "") -> None:
        """
        Navigate to `path` under the configured base URL.

        A timeout while navigating or waiting for the page to load is retried
        once with a shorter navigation timeout; a second failure propagates to
        the caller.
        """
        full_url = self.build_url(path)
        with allure.step(f"Navigate to {full_url}"):
            try:
                await self.page.goto(
                    full_url,
                    wait_until="domcontentloaded",
                    timeout=NAVIGATION_TIMEOUT,
                )
                await self.wait_for_page_load()
            except PlaywrightTimeoutError:
                logger.warning(f"Navigation to {full_url} timed out, retrying...")
                await self.page.goto(
                    full_url,
                    wait_until="domcontentloaded",
                    timeout=NAVIGATION_RETRY_TIMEOUT,
                )
                await self.wait_for_page_load()
            logger.debug(f"Navigated to: {full_url}")

    async def navigate(self) -> None:
        """Navigate to this page's `URL_PATH`."""
        await self.goto(self.URL_PATH)

    async def wait_for_page_load(self) -> None:
        """
        Wait for DOM readiness, then for network quiescence.

        If the network never goes idle, DOM-ready is treated as sufficient.
        """
        await self.page.wait_for_load_state("domcontentloaded", timeout=DOM_READY_TIMEOUT)
        try:
            await self.page.wait_for_load_state("networkidle", timeout=NETWORK_IDLE_TIMEOUT)
        except PlaywrightTimeoutError:
            logger.warning("Network idle timeout, continuing with DOM content loaded state")
            await self.page.wait_for_load_state(
                "domcontentloaded", timeout=DOM_READY_FALLBACK_TIMEOUT
            )

    async def wait_for_url(self, fragment: str, timeout: Optional[int] = None) -> None:
        """Wait until the current URL contains `fragment`."""
        await self.page.wait_for_url(f"**{fragment}**", timeout=self._action_timeout(timeout))

    @property
    def current_url(self) -> str:
        return self.page.url

    async def refresh(self) -> None:
        await self.page.reload()
        await self.wait_for_page_load()

    async def go_back(self) -> None:
        await self.page.go_back()
        await self.wait_for_page_load()

    async def wait_for_network_idle(self, timeout: Optional[int] = None) -> None:
        await self.page.wait_for_load_state("networkidle", timeout=self._action_timeout(timeout))

    # =========================================================================
    # Waits
    # =========================================================================

    async def wait_for_element(self, locator: Locator, timeout: Optional[int] = None) -> None:
        """
        Wait for element to become visible.

        Raises:
            ElementNotFoundError: When the element is not visible in time
        """
        timeout = self._action_timeout(timeout)
        try:
            await locator.wait_for(state="visible", timeout=timeout)
        except PlaywrightTimeoutError as e:
            raise ElementNotFoundError(
                f"Element {locator} was not visible after {timeout}ms"
            ) from e

    async def wait_for_element_and_scroll(
        self,
        locator: Locator,
        timeout: Optional[int] = None,
    ) -> None:
        """Wait for element visibility, scroll it into view and let it settle."""
        await self.wait_for_element(locator, timeout)
        await locator.scroll_into_view_if_needed()
        await self.page.wait_for_timeout(SCROLL_SETTLE_MS)

    async def wait_for_element_hidden(self, locator: Locator, timeout: Optional[int] = None) -> None:
        await locator.wait_for(state="hidden", timeout=self._action_timeout(timeout))

    # =========================================================================
    # Element Actions
    # =========================================================================

    async def click_element(self, locator: Locator, timeout: Optional[int] = None) -> None:
        await self.wait_for_element_and_scroll(locator, timeout)
        await locator.click()

    async def fill_input(self, locator: Locator, text: str, timeout: Optional[int] = None) -> None:
        """Clear the input, then fill it with `text`."""
        await self.wait_for_element_and_scroll(locator, timeout)
        await locator.clear()
        await locator.fill(text)

    async def select_option(self, locator: Locator, value: str, timeout: Optional[int] = None) -> None:
        """Select a dropdown option by value or label."""
        await self.wait_for_element_and_scroll(locator, timeout)
        await locator.select_option(value)

    async def check_checkbox(self, locator: Locator, timeout: Optional[int] = None) -> None:
        await self.wait_for_element_and_scroll(locator, timeout)
        await locator.check()

    async def uncheck_checkbox(self, locator: Locator, timeout: Optional[int] = None) -> None:
        await self.wait_for_element_and_scroll(locator, timeout)
        await locator.uncheck()

    async def get_text(self, locator: Locator, timeout: Optional[int] = None) -> str:
        """
        Get text content of a visible element.

        Raises:
            ElementNotFoundError: When the element is not visible in time
        """
        await self.wait_for_element(locator, timeout)
        return (await locator.text_content() or "").strip()

    async def get_all_texts(self, locator: Locator) -> List[str]:
        """Trimmed, non-empty text of every element matched by `locator`."""
        texts: List[str] = []
        for element in await locator.all():
            text = await element.text_content()
            if text and text.strip():
                texts.append(text.strip())
        return texts

    # =========================================================================
    # Probes
    # =========================================================================

    async def is_visible(self, locator: Locator, timeout: Optional[int] = None) -> bool:
        """
        Check if element becomes visible within `timeout`.

        Never raises: absence is reported as False.
        """
        try:
            await locator.wait_for(state="visible", timeout=self._probe_timeout(timeout))
            return True
        except PlaywrightError:
            return False

    async def exists(self, locator: Locator, timeout: Optional[int] = None) -> bool:
        """Check if element is attached to the DOM within `timeout`."""
        try:
            await locator.wait_for(state="attached", timeout=self._probe_timeout(timeout))
            return True
        except PlaywrightError:
            return False

    async def _probe_text(self, locator: Locator) -> str:
        if await self.is_visible(locator):
            return await self.get_text(locator)
        return ""

    # =========================================================================
    # Notifications and Validation
    # =========================================================================

    async def get_success_message(self) -> str:
        """Text of the success notification, or "" when none is shown."""
        return await self._probe_text(self.locate("success_message").first)

    async def get_error_message(self) -> str:
        """Text of the error notification, or "" when none is shown."""
        return await self._probe_text(self.locate("error_message").first)

    async def get_validation_errors(self) -> List[str]:
        return await self.get_all_texts(self.locate("validation_errors"))

    async def get_field_validation_errors(self) -> List[str]:
        return await self.get_all_texts(self.locate("field_validation_errors"))

    async def is_success_message_visible(self) -> bool:
        return await self.is_visible(self.locate("success_message").first)

    async def is_error_message_visible(self) -> bool:
        return await self.is_visible(self.locate("error_message").first)

    async def has_validation_errors(self) -> bool:
        return (
            await self.is_visible(self.locate("validation_errors").first)
            or await self.is_visible(self.locate("field_validation_errors").first)
        )

    # =========================================================================
    # Dialogs
    # =========================================================================

    @asynccontextmanager
    async def expect_dialog(self, accept: bool = True) -> AsyncIterator[DialogCapture]:
        """
        Handle browser dialogs raised inside the `async with` block.

        The handler is registered on entry and removed on exit, so it never
        outlives the block.

        Usage:
            async with search_page.expect_dialog() as dialogs:
                await search_page.search_from_header("")
                await dialogs.wait_for_message()
            assert "Please enter" in dialogs.last_message
        """
        capture = DialogCapture()

        async def handle(dialog: Dialog) -> None:
            capture.record(dialog.message)
            logger.debug(f"Dialog ({dialog.type}): {dialog.message}")
            if accept:
                await dialog.accept()
            else:
                await dialog.dismiss()

        self.page.on("dialog", handle)
        try:
            yield capture
        finally:
            self.page.remove_listener("dialog", handle)

    # =========================================================================
    # Screenshot Utilities
    # =========================================================================

    async def take_screenshot(
        self,
        name: str,
        full_page: bool = False,
        attach_to_allure: bool = True,
    ) -> Path:
        """
        Take screenshot and optionally attach to Allure.

        Args:
            name: Screenshot name (without extension)
            full_page: Capture full scrollable page
            attach_to_allure: Whether to attach to Allure report

        Returns:
            Path to saved screenshot
        """
        SCREENSHOT_DIR.mkdir(parents=True, exist_ok=True)

        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        filepath = SCREENSHOT_DIR / f"{name}_{timestamp}.png"

        await self.page.screenshot(path=str(filepath), full_page=full_page)

        if attach_to_allure:
            allure.attach.file(
                str(filepath),
                name=name,
                attachment_type=allure.attachment_type.PNG,
            )

        logger.debug(f"Screenshot saved: {filepath}")
        return filepath


__all__ = [
    "BasePage",
    "DialogCapture",
    "ElementNotFoundError",
    "PageBase",
]

# Backward-compatible alias (many Page Objects prefer PageBase naming)
PageBase = BasePage
