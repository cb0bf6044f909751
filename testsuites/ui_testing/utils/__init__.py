"""
================================================================================
Scenario Utilities
================================================================================

Shared assertions, flows and case tables for the storefront scenarios.

Author: Automation Team
License: MIT
================================================================================
"""

from .scenario_helpers import (
    CredentialCase,
    RegistrationSetupError,
    assert_error_message,
    assert_login_success,
    assert_registration_success,
    assert_sorted,
    assert_validation_errors,
    invalid_login_test_cases,
    numeric_prices,
    perform_login_flow,
    perform_registration_flow,
    register_new_user,
    validation_test_cases,
)

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
