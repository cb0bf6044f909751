"""
================================================================================
UI Testing Pytest Configuration
================================================================================

This module configures pytest for the storefront UI tests, providing
fixtures for browser management, page objects, and test setup/teardown.

Key Features:
- One browser per session (per xdist worker), one context per test
- Playwright tracing per test, kept only for failures
- Screenshot, URL and trace attached to Allure on failure
- Page Object fixtures for all pages
- Registered-user precondition fixture

All async fixtures and tests share the session event loop.

================================================================================
"""

from __future__ import annotations

import re
from pathlib import Path
from typing import AsyncGenerator

import pytest
import pytest_asyncio
from loguru import logger
from playwright.async_api import Browser, BrowserContext, Page

from storefront_tools.report_tools.allure_utils import attach_failure_artifacts, attach_file
from testsuites.ui_testing.data.datasets import UserData, generate_random_user
from testsuites.ui_testing.framework.browser_manager import BrowserManager, check_site_accessible
from testsuites.ui_testing.framework.config import RuntimeConfig, get_config
from testsuites.ui_testing.pages import (
    ForgotPasswordPage,
    HomePage,
    LoginPage,
    ProductPage,
    RegisterPage,
    SearchPage,
)
from testsuites.ui_testing.utils.scenario_helpers import register_new_user


# Trace archives of failed tests
TRACE_DIR = Path(__file__).parent.parent / "traces"


def _safe_name(name: str) -> str:
    return re.sub(r"[^\w.-]+", "_", name)


def _call_failed(request: pytest.FixtureRequest) -> bool:
    report = getattr(request.node, "rep_call", None)
    return bool(report and report.failed)


# ================================================================================
# Browser Fixtures
# ================================================================================

@pytest.fixture(scope="session")
def runtime_config() -> RuntimeConfig:
    """Configuration read once from the environment for the whole session."""
    return get_config()


@pytest_asyncio.fixture(scope="session", loop_scope="session")
async def browser_manager(runtime_config: RuntimeConfig) -> AsyncGenerator[BrowserManager, None]:
    """
    Session-scoped browser manager fixture.

    Launches the configured browser once and checks that the storefront
    answers. An unreachable site is logged, not fatal.
    """
    async with BrowserManager(runtime_config) as manager:
        await check_site_accessible(manager)
        yield manager


@pytest_asyncio.fixture(scope="session", loop_scope="session")
async def browser(browser_manager: BrowserManager) -> Browser:
    return browser_manager.browser


@pytest_asyncio.fixture(loop_scope="session")
async def context(
    browser_manager: BrowserManager,
    request: pytest.FixtureRequest,
) -> AsyncGenerator[BrowserContext, None]:
    """
    Function-scoped browser context with tracing.

    The trace archive is written and attached only when the test failed.
    """
    context = await browser_manager.new_context()
    await context.tracing.start(screenshots=True, snapshots=True, sources=True)

    yield context

    if _call_failed(request):
        TRACE_DIR.mkdir(parents=True, exist_ok=True)
        trace_path = TRACE_DIR / f"{_safe_name(request.node.name)}.zip"
        await context.tracing.stop(path=str(trace_path))
        attach_file(trace_path, name=f"{request.node.name} - trace")
        logger.info(f"Trace saved: {trace_path}")
    else:
        await context.tracing.stop()
    await browser_manager.close_context(context)


@pytest_asyncio.fixture(loop_scope="session")
async def page(
    context: BrowserContext,
    request: pytest.FixtureRequest,
) -> AsyncGenerator[Page, None]:
    """Function-scoped page; screenshot and URL are attached on failure."""
    page = await context.new_page()

    yield page

    if _call_failed(request):
        await attach_failure_artifacts(page, request.node.name)
    await page.close()


# ================================================================================
# Page Object Fixtures
# ================================================================================

@pytest.fixture
def home_page(page: Page, runtime_config: RuntimeConfig) -> HomePage:
    return HomePage(page, runtime_config)


@pytest.fixture
def login_page(page: Page, runtime_config: RuntimeConfig) -> LoginPage:
    return LoginPage(page, runtime_config)


@pytest.fixture
def register_page(page: Page, runtime_config: RuntimeConfig) -> RegisterPage:
    return RegisterPage(page, runtime_config)


@pytest.fixture
def forgot_password_page(page: Page, runtime_config: RuntimeConfig) -> ForgotPasswordPage:
    return ForgotPasswordPage(page, runtime_config)


@pytest.fixture
def search_page(page: Page, runtime_config: RuntimeConfig) -> SearchPage:
    return SearchPage(page, runtime_config)


@pytest.fixture
def product_page(page: Page, runtime_config: RuntimeConfig) -> ProductPage:
    return ProductPage(page, runtime_config)


# ================================================================================
# Precondition Fixtures
# ================================================================================

@pytest_asyncio.fixture(loop_scope="session")
async def registered_user(register_page: RegisterPage) -> UserData:
    """
    A freshly registered customer, signed out again.

    Raises:
        RegistrationSetupError: The storefront did not confirm registration
    """
    user = await register_new_user(register_page, generate_random_user())
    # Registration signs the customer in; scenarios start signed out
    await register_page.goto("/logout")
    return user


# ================================================================================
# Test Lifecycle Hooks
# ================================================================================

@pytest.hookimpl(tryfirst=True, hookwrapper=True)
def pytest_runtest_makereport(item, call):
    """Store phase reports on the item for failure-aware fixture teardown."""
    outcome = yield
    rep = outcome.get_result()
    setattr(item, f"rep_{rep.when}", rep)
