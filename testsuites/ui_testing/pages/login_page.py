"""
================================================================================
Login Page Object (Async / Playwright)
================================================================================

Customer sign-in form of the storefront.

Login success is never inferred from the login page itself: the storefront
redirects on success, so `is_login_successful()` navigates home and looks
for the "My account" header link.

================================================================================
"""

from __future__ import annotations

import allure
from loguru import logger
from playwright.async_api import Locator

from testsuites.ui_testing.framework.page_base import PageBase


# Wait applied after the home page navigation in `is_login_successful` (ms)
HOME_READY_TIMEOUT = 10000


class LoginPage(PageBase):
    """Login page object (async)."""

    URL_PATH = "/login"

    @property
    def email_input(self) -> Locator:
        return self.locate("email_input")

    @property
    def password_input(self) -> Locator:
        return self.locate("password_input")

    @property
    def login_button(self) -> Locator:
        return self.locate("login_button")

    @property
    def remember_me_checkbox(self) -> Locator:
        return self.locate("remember_me_checkbox")

    @property
    def forgot_password_link(self) -> Locator:
        return self.locate("forgot_password_link")

    @property
    def register_button(self) -> Locator:
        return self.locate("register_button")

    @property
    def my_account_link(self) -> Locator:
        return self.locate("my_account_link")

    @allure.step("Open login page")
    async def open(self) -> "LoginPage":
        """Navigate to the login page."""
        await self.navigate()
        return self

    @allure.step("Verify login form is displayed")
    async def verify_form_displayed(self) -> bool:
        """Verify login form elements are visible."""
        email_ok = await self.is_visible(self.email_input)
        password_ok = await self.is_visible(self.password_input)
        button_ok = await self.is_visible(self.login_button)
        return email_ok and password_ok and button_ok

    @allure.step("Login (email={email})")
    async def login(self, email: str, password: str, remember_me: bool = False) -> None:
        """
        Fill the sign-in form and submit it.

        Args:
            email: Account email
            password: Account password
            remember_me: Tick "Remember me?" before submitting
        """
        await self.fill_input(self.email_input, email)
        await self.fill_input(self.password_input, password)

        if remember_me:
            await self.check_checkbox(self.remember_me_checkbox)

        await self.click_element(self.login_button)

    async def login_with_test_user(self) -> None:
        """Login with the configured test user credentials."""
        user = self.config.test_user
        await self.login(user.email, user.password)

    @allure.step("Click forgot password link")
    async def click_forgot_password(self) -> None:
        await self.click_element(self.forgot_password_link)

    @allure.step("Click register button")
    async def click_register(self) -> None:
        await self.click_element(self.register_button)

    @allure.step("Verify login succeeded")
    async def is_login_successful(self) -> bool:
        """
        Navigate home and check the "My account" link.

        Returns:
            True if the header shows the signed-in account link
        """
        await self.goto("/")
        await self.page.wait_for_load_state("domcontentloaded", timeout=HOME_READY_TIMEOUT)
        logged_in = await self.is_visible(self.my_account_link.first)
        logger.debug(f"Login state after redirect: {logged_in}")
        return logged_in

    async def clear_form(self) -> None:
        await self.email_input.clear()
        await self.password_input.clear()
        if await self.remember_me_checkbox.is_checked():
            await self.uncheck_checkbox(self.remember_me_checkbox)

    async def is_remember_me_checked(self) -> bool:
        return await self.remember_me_checkbox.is_checked()

    async def get_email_value(self) -> str:
        return await self.email_input.input_value()

    async def get_password_value(self) -> str:
        return await self.password_input.input_value()

    async def assert_login_page_loaded(self) -> None:
        """Hard assertion helper used by tests."""
        assert await self.verify_form_displayed(), "Login form should be visible"


__all__ = ["LoginPage"]
