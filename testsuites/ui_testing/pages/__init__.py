"""
================================================================================
Page Objects
================================================================================

Page Object Model implementations for the nopCommerce storefront.

Each page class encapsulates:
    - Element locators
    - Page-specific actions
    - Verification methods

Author: Automation Team
License: MIT
================================================================================
"""

from .home_page import HomePage
from .login_page import LoginPage
from .register_page import RegisterPage, RegistrationData, RegistrationOutcome
from .forgot_password_page import ForgotPasswordPage
from .search_page import SearchFilters, SearchPage
from .product_page import ProductPage, SliderClick

__all__ = [
    "ForgotPasswordPage",
    "HomePage",
    "LoginPage",
    "ProductPage",
    "RegisterPage",
    "RegistrationData",
    "RegistrationOutcome",
    "SearchFilters",
    "SearchPage",
    "SliderClick",
]
