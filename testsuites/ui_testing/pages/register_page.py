"""
================================================================================
Register Page Object
================================================================================

Customer registration form of the storefront.

Features:
    - Partial form filling (only provided fields are touched)
    - Three-valued registration outcome (message, redirect only, failed)
    - Error aggregation across the error block and validation summary

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Tuple

import allure
from loguru import logger
from playwright.async_api import Locator
from playwright.async_api import TimeoutError as PlaywrightTimeoutError

from testsuites.ui_testing.framework.page_base import BasePage


# Redirect target after a successful registration
REGISTER_RESULT_PATTERN = "**/registerresult/**"
REGISTER_RESULT_TIMEOUT = 10000

# Probed in order; first visible wins
SUCCESS_SELECTORS: Tuple[str, ...] = (
    ".result",
    ".message-success",
    ".success-message",
    ".registration-success",
    "[class*='success']",
)


@dataclass(frozen=True)
class RegistrationData:
    """
    Values for the registration form.

    Empty strings and `None` mean "leave the field untouched".
    """

    first_name: str = ""
    last_name: str = ""
    email: str = ""
    password: str = ""
    confirm_password: str = ""
    gender: str = ""
    newsletter: Optional[bool] = None
    company: str = ""


class RegistrationOutcome(Enum):
    """Result of a registration submit."""

    SUCCESS_WITH_MESSAGE = "success_with_message"
    SUCCESS_REDIRECT_ONLY = "success_redirect_only"
    FAILED = "failed"

    @property
    def succeeded(self) -> bool:
        return self is not RegistrationOutcome.FAILED


class RegisterPage(BasePage):
    """Registration page object (async)."""

    URL_PATH = "/register"

    # -------------------------------------------------------------------------
    # Personal information
    # -------------------------------------------------------------------------

    @property
    def first_name_input(self) -> Locator:
        return self.locate("first_name_input")

    @property
    def last_name_input(self) -> Locator:
        return self.locate("last_name_input")

    @property
    def email_input(self) -> Locator:
        return self.locate("email_input")

    @property
    def password_input(self) -> Locator:
        return self.locate("password_input")

    @property
    def confirm_password_input(self) -> Locator:
        return self.locate("confirm_password_input")

    @property
    def gender_male_radio(self) -> Locator:
        return self.locate("gender_male_radio")

    @property
    def gender_female_radio(self) -> Locator:
        return self.locate("gender_female_radio")

    @property
    def newsletter_checkbox(self) -> Locator:
        return self.locate("newsletter_checkbox")

    @property
    def company_input(self) -> Locator:
        return self.locate("company_input")

    @property
    def register_button(self) -> Locator:
        return self.page.locator("#register-button")

    # -------------------------------------------------------------------------
    # Messages
    # -------------------------------------------------------------------------

    @property
    def error_block(self) -> Locator:
        return self.page.locator(".message-error")

    @property
    def validation_summary(self) -> Locator:
        return self.locate("validation_errors")

    @property
    def field_validation_errors(self) -> Locator:
        return self.locate("field_validation_errors")

    @property
    def result_message(self) -> Locator:
        return self.page.locator(".result")

    # -------------------------------------------------------------------------
    # Actions
    # -------------------------------------------------------------------------

    @allure.step("Open registration page")
    async def open(self) -> "RegisterPage":
        await self.navigate()
        return self

    @allure.step("Fill personal information")
    async def fill_personal_information(self, data: RegistrationData) -> None:
        """
        Fill the personal section in page order.

        Only non-empty fields are filled. `newsletter` is checked or
        unchecked when set, left alone when None.
        """
        if data.gender:
            await self.select_gender(data.gender)
        if data.first_name:
            await self.fill_input(self.first_name_input, data.first_name)
        if data.last_name:
            await self.fill_input(self.last_name_input, data.last_name)
        if data.email:
            await self.fill_input(self.email_input, data.email)
        if data.newsletter is not None:
            if data.newsletter:
                await self.check_checkbox(self.newsletter_checkbox)
            else:
                await self.uncheck_checkbox(self.newsletter_checkbox)
        if data.password:
            await self.fill_input(self.password_input, data.password)
        if data.confirm_password:
            await self.fill_input(self.confirm_password_input, data.confirm_password)

    async def fill_company_information(self, data: RegistrationData) -> None:
        if data.company:
            await self.fill_input(self.company_input, data.company)

    @allure.step("Register user: {data.email}")
    async def register_user(self, data: RegistrationData) -> None:
        """Fill both sections and submit."""
        await self.fill_personal_information(data)
        await self.fill_company_information(data)
        await self.click_element(self.register_button)

    async def register_with_test_data(self) -> None:
        """Register the configured test user with the newsletter ticked."""
        user = self.config.test_user
        await self.register_user(RegistrationData(
            first_name=user.first_name,
            last_name=user.last_name,
            email=user.email,
            password=user.password,
            confirm_password=user.password,
            gender=user.gender,
            newsletter=True,
            company=user.company,
        ))

    async def register_minimal(
        self,
        first_name: str,
        last_name: str,
        email: str,
        password: str,
    ) -> None:
        """Register with required fields only."""
        await self.register_user(RegistrationData(
            first_name=first_name,
            last_name=last_name,
            email=email,
            password=password,
            confirm_password=password,
        ))

    async def clear_form(self) -> None:
        # Gender and newsletter keep their current state
        for locator in (
            self.first_name_input,
            self.last_name_input,
            self.email_input,
            self.password_input,
            self.confirm_password_input,
            self.company_input,
        ):
            await locator.clear()

    async def select_gender(self, gender: str) -> None:
        """Click the radio matching `gender` ("male"/"female", any case)."""
        normalized = gender.lower()
        if normalized == "male":
            await self.click_element(self.gender_male_radio)
        elif normalized == "female":
            await self.click_element(self.gender_female_radio)
        else:
            logger.warning(f"Unknown gender option ignored: {gender!r}")

    # -------------------------------------------------------------------------
    # State
    # -------------------------------------------------------------------------

    async def get_selected_gender(self) -> str:
        if await self.gender_male_radio.is_checked():
            return "Male"
        if await self.gender_female_radio.is_checked():
            return "Female"
        return ""

    async def is_newsletter_checked(self) -> bool:
        return await self.newsletter_checkbox.is_checked()

    async def get_error_message(self) -> str:
        """Error block text, else validation summary text, else ""."""
        if await self.is_visible(self.error_block):
            return await self.get_text(self.error_block)
        if await self.is_visible(self.validation_summary):
            return await self.get_text(self.validation_summary)
        return ""

    async def get_field_validation_errors(self) -> List[str]:
        return await self.get_all_texts(self.field_validation_errors)

    async def get_success_message(self) -> str:
        return await self.get_text(self.result_message)

    @allure.step("Determine registration outcome")
    async def registration_outcome(self) -> RegistrationOutcome:
        """
        Classify the result of the last registration submit.

        Returns:
            SUCCESS_WITH_MESSAGE when the result page shows a success element,
            SUCCESS_REDIRECT_ONLY when only the redirect happened,
            FAILED when the result page was never reached
        """
        try:
            await self.page.wait_for_url(REGISTER_RESULT_PATTERN, timeout=REGISTER_RESULT_TIMEOUT)
        except PlaywrightTimeoutError:
            return RegistrationOutcome.FAILED

        if "/registerresult" not in self.page.url:
            return RegistrationOutcome.FAILED

        for selector in SUCCESS_SELECTORS:
            if await self.page.locator(selector).first.is_visible():
                return RegistrationOutcome.SUCCESS_WITH_MESSAGE

        logger.warning(f"Reached {self.page.url} but no success message was shown")
        return RegistrationOutcome.SUCCESS_REDIRECT_ONLY

    async def is_registration_successful(self) -> bool:
        return (await self.registration_outcome()).succeeded

    async def has_validation_errors(self) -> bool:
        return (
            await self.is_visible(self.validation_summary)
            or await self.is_visible(self.field_validation_errors.first)
        )


__all__ = [
    "RegisterPage",
    "RegistrationData",
    "RegistrationOutcome",
]
