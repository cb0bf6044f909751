"""
================================================================================
Forgot Password Page Object
================================================================================

Password recovery form: submits an email address and reports the
storefront's confirmation or validation feedback.

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

import allure
from playwright.async_api import Locator

from testsuites.ui_testing.framework.page_base import BasePage


class ForgotPasswordPage(BasePage):
    """Password recovery page object (async)."""

    URL_PATH = "/passwordrecovery"

    @property
    def email_input(self) -> Locator:
        return self.locate("email_input")

    @property
    def recover_button(self) -> Locator:
        return self.page.locator(".password-recovery-button")

    @property
    def result_success(self) -> Locator:
        return self.page.locator(".success")

    @property
    def result_error(self) -> Locator:
        return self.page.locator(".error")

    @property
    def field_validation_errors(self) -> Locator:
        return self.locate("field_validation_errors")

    @allure.step("Open password recovery page")
    async def open(self) -> "ForgotPasswordPage":
        await self.navigate()
        return self

    @allure.step("Request password recovery: {email}")
    async def request_password_recovery(self, email: str) -> None:
        await self.fill_input(self.email_input, email)
        await self.click_element(self.recover_button)

    async def request_password_recovery_for_test_user(self) -> None:
        await self.request_password_recovery(self.config.test_user.email)

    @allure.step("Go back to login page")
    async def go_back_to_login(self) -> None:
        """Use browser history to return to the previous (login) page."""
        await self.page.go_back()

    async def get_success_message(self) -> str:
        return await self.get_text(self.result_success)

    async def get_error_message(self) -> str:
        """Error block text, else the field validation text, else ""."""
        if await self.is_visible(self.result_error):
            return await self.get_text(self.result_error)
        if await self.is_visible(self.field_validation_errors.first):
            return await self.get_text(self.field_validation_errors.first)
        return ""

    async def is_recovery_request_successful(self) -> bool:
        return await self.is_visible(self.result_success)

    async def has_validation_errors(self) -> bool:
        return await self.is_visible(self.field_validation_errors.first)

    async def clear_email(self) -> None:
        await self.email_input.clear()

    async def get_email_value(self) -> str:
        return await self.email_input.input_value()

    async def is_email_input_empty(self) -> bool:
        return await self.get_email_value() == ""


__all__ = ["ForgotPasswordPage"]
