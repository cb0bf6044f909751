"""
================================================================================
Scenario Helpers
================================================================================

Reusable assertions, flows and case tables for the storefront scenarios.

Helpers accept any object with the capability they use (see the Protocol
classes below), so they work with the page objects as well as with light
test doubles.

Usage:
    await perform_login_flow(login_page, user.email, user.password)
    await assert_login_success(login_page)

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Protocol, Sequence

import allure
from loguru import logger

from testsuites.ui_testing.data.datasets import UserData
from testsuites.ui_testing.framework.extractors import is_sorted, numeric_prices
from testsuites.ui_testing.pages.register_page import RegistrationData, RegistrationOutcome


class RegistrationSetupError(RuntimeError):
    """Raised when a scenario precondition (user registration) cannot be met."""
    pass


# =============================================================================
# Capabilities
# =============================================================================

class LoginStateProbe(Protocol):
    async def is_login_successful(self) -> bool: ...


class RegistrationProbe(Protocol):
    async def is_registration_successful(self) -> bool: ...


class ValidationProbe(Protocol):
    async def has_validation_errors(self) -> bool: ...


class ErrorMessageSource(Protocol):
    async def get_error_message(self) -> str: ...


class LoginForm(Protocol):
    async def navigate(self) -> None: ...

    async def login(self, email: str, password: str, remember_me: bool = False) -> None: ...


class RegistrationForm(Protocol):
    async def navigate(self) -> None: ...

    async def register_user(self, data: RegistrationData) -> None: ...

    async def registration_outcome(self) -> RegistrationOutcome: ...


# =============================================================================
# Assertions
# =============================================================================

async def assert_login_success(page: LoginStateProbe) -> None:
    if not await page.is_login_successful():
        raise AssertionError("Login was not successful")


async def assert_registration_success(page: RegistrationProbe) -> None:
    if not await page.is_registration_successful():
        raise AssertionError("Registration was not successful")


async def assert_validation_errors(page: ValidationProbe) -> None:
    if not await page.has_validation_errors():
        raise AssertionError("Expected validation errors but none were found")


async def assert_error_message(page: ErrorMessageSource, expected_message: str) -> None:
    """Assert the page's error text contains `expected_message`."""
    error_message = await page.get_error_message()
    if expected_message not in error_message:
        raise AssertionError(
            f'Expected error message to contain "{expected_message}" '
            f'but got "{error_message}"'
        )


def assert_sorted(values: Sequence[float], descending: bool = False) -> None:
    """Assert `values` is ordered; the message shows the offending list."""
    if not is_sorted(values, descending=descending):
        direction = "descending" if descending else "ascending"
        raise AssertionError(f"Expected values in {direction} order, got {list(values)}")


# =============================================================================
# Flows
# =============================================================================

async def perform_login_flow(
    login_page: LoginForm,
    email: str,
    password: str,
    remember_me: bool = False,
) -> None:
    """Open the login page and submit credentials."""
    with allure.step(f"Login flow for {email}"):
        await login_page.navigate()
        await login_page.login(email, password, remember_me)


async def perform_registration_flow(register_page: RegistrationForm, user: UserData) -> None:
    """Open the registration page and submit `user`."""
    with allure.step(f"Registration flow for {user.email}"):
        await register_page.navigate()
        await register_page.register_user(user.to_registration())


async def register_new_user(register_page: RegistrationForm, user: UserData) -> UserData:
    """
    Register `user` as a scenario precondition.

    Returns:
        The registered user

    Raises:
        RegistrationSetupError: The storefront did not confirm the registration
    """
    await perform_registration_flow(register_page, user)
    outcome = await register_page.registration_outcome()
    if not outcome.succeeded:
        logger.warning(f"Precondition registration failed for {user.email}")
        raise RegistrationSetupError(f"Could not register precondition user {user.email}")
    logger.info(f"Registered precondition user {user.email} ({outcome.value})")
    return user


# =============================================================================
# Case Tables
# =============================================================================

@dataclass(frozen=True)
class CredentialCase:
    """A named email/password pair for parametrized negative tests."""
    description: str
    email: str
    password: str


def validation_test_cases() -> List[CredentialCase]:
    """Inputs the login form rejects before authentication."""
    return [
        CredentialCase("empty email", "", "password"),
        CredentialCase("empty password", "test@example.com", ""),
        CredentialCase("invalid email format", "invalid-email", "password"),
    ]


def invalid_login_test_cases(registered_user: UserData) -> List[CredentialCase]:
    """Well-formed credentials that must not authenticate `registered_user`."""
    return [
        CredentialCase("special characters in password", registered_user.email, "Test@123#"),
        CredentialCase("very long password", registered_user.email, "a" * 100),
        CredentialCase("very long email", "a" * 50 + "@example.com", "password"),
    ]


__all__ = [
    "CredentialCase",
    "RegistrationSetupError",
    "assert_error_message",
    "assert_login_success",
    "assert_registration_success",
    "assert_sorted",
    "assert_validation_errors",
    "invalid_login_test_cases",
    "numeric_prices",
    "perform_login_flow",
    "perform_registration_flow",
    "register_new_user",
    "validation_test_cases",
]
