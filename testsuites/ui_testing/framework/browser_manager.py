"""
================================================================================
Browser Manager
================================================================================

Browser lifecycle management for the storefront UI suite.

Features:
    - One browser per test session, isolated contexts per test
    - Browser engine and headless mode taken from RuntimeConfig
    - Container-friendly launch flags in headless mode
    - Pre-run storefront reachability check

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from loguru import logger
from playwright.async_api import (
    async_playwright,
    Browser,
    BrowserContext,
    BrowserType,
    Page,
    Playwright,
)
from playwright.async_api import Error as PlaywrightError

from testsuites.ui_testing.framework.config import RuntimeConfig


# Reachability check timeout (ms)
SITE_CHECK_TIMEOUT = 30000


class BrowserManager:
    """
    Manages the browser instance and contexts for UI testing.

    Usage:
        async with BrowserManager(get_config()) as manager:
            page = await manager.new_page()
            await page.goto(manager.config.base_url)
    """

    # Extra launch arguments for headless runs inside containers
    HEADLESS_ARGS: List[str] = [
        "--no-sandbox",
        "--disable-dev-shm-usage",
    ]

    # Default context options
    DEFAULT_CONTEXT_OPTIONS: Dict[str, Any] = {
        "viewport": {"width": 1920, "height": 1080},
        "ignore_https_errors": True,
    }

    def __init__(self, config: RuntimeConfig):
        """
        Initialize browser manager.

        Args:
            config: Runtime configuration (engine, headless, timeouts, base URL)
        """
        self.config = config
        self.headless = config.browser.headless
        self.browser_type = config.browser.name

        self._playwright: Optional[Playwright] = None
        self._browser: Optional[Browser] = None
        self._contexts: List[BrowserContext] = []

    async def __aenter__(self) -> "BrowserManager":
        await self.start()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()

    def _launcher(self) -> BrowserType:
        if self.browser_type == "firefox":
            return self._playwright.firefox
        if self.browser_type == "webkit":
            return self._playwright.webkit
        return self._playwright.chromium

    def launch_options(self) -> Dict[str, Any]:
        """Launch options for the configured engine."""
        options: Dict[str, Any] = {"headless": self.headless}
        # Chromium-only switches
        if self.headless and self.browser_type == "chromium":
            options["args"] = list(self.HEADLESS_ARGS)
        return options

    async def start(self) -> None:
        """Start Playwright and launch browser."""
        self._playwright = await async_playwright().start()
        self._browser = await self._launcher().launch(**self.launch_options())
        logger.debug(
            f"Browser started: {self.browser_type} "
            f"(headless={self.headless})"
        )

    async def close(self) -> None:
        """Close all contexts and browser."""
        for context in self._contexts:
            try:
                await context.close()
            except PlaywrightError as e:
                logger.debug(f"Context already closed: {e}")
        self._contexts.clear()

        if self._browser:
            await self._browser.close()
            self._browser = None

        if self._playwright:
            await self._playwright.stop()
            self._playwright = None

        logger.debug("Browser closed")

    async def new_context(self, **options: Any) -> BrowserContext:
        """
        Create new browser context.

        Each context is isolated: separate cookies, storage and cart.
        The configured action timeout becomes the context default.

        Args:
            **options: Additional context options

        Returns:
            New BrowserContext
        """
        if not self._browser:
            raise RuntimeError("Browser not started. Call start() first.")

        context_options = {
            **self.DEFAULT_CONTEXT_OPTIONS,
            "base_url": self.config.base_url,
            **options,
        }
        context = await self._browser.new_context(**context_options)
        context.set_default_timeout(self.config.browser.timeout)
        self._contexts.append(context)
        return context

    async def close_context(self, context: BrowserContext) -> None:
        """Close a context created by this manager and stop tracking it."""
        if context in self._contexts:
            self._contexts.remove(context)
        try:
            await context.close()
        except PlaywrightError as e:
            logger.debug(f"Context already closed: {e}")

    async def new_page(
        self,
        context: Optional[BrowserContext] = None,
        **context_options: Any,
    ) -> Page:
        """
        Create new page in new or existing context.

        Args:
            context: Existing context to use (creates new if None)
            **context_options: Options for new context

        Returns:
            New Page
        """
        if context is None:
            context = await self.new_context(**context_options)
        return await context.new_page()

    @property
    def browser(self) -> Optional[Browser]:
        """Get browser instance."""
        return self._browser

    @property
    def open_contexts(self) -> List[BrowserContext]:
        return list(self._contexts)


# =============================================================================
# Convenience Functions
# =============================================================================

async def check_site_accessible(manager: BrowserManager) -> bool:
    """
    Open the storefront home page once before the suite starts.

    Unreachability is logged as a warning and never fails the run.

    Args:
        manager: Started browser manager

    Returns:
        True if the home page loaded
    """
    base_url = manager.config.base_url
    context = await manager.new_context()
    try:
        page = await context.new_page()
        await page.goto(base_url, wait_until="domcontentloaded", timeout=SITE_CHECK_TIMEOUT)
        logger.info(f"Site is accessible: {base_url}")
        return True
    except PlaywrightError as e:
        logger.warning(f"Site accessibility check failed for {base_url}: {e}")
        return False
    finally:
        await manager.close_context(context)


__all__ = [
    "BrowserManager",
    "check_site_accessible",
]
