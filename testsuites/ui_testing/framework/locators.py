"""
================================================================================
Common Locators and Messages
================================================================================

Centralized selector and UI copy definitions for the nopCommerce storefront.

Page objects resolve shared elements (form inputs, notification bars,
listing grids) through `COMMON_LOCATORS` instead of repeating selectors, and
scenarios assert against `COMMON_MESSAGES` instead of hard-coding copy.

Both registries are read-only mappings.

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping


class UnknownLocatorError(KeyError):
    """Raised when a symbolic name is missing from a registry."""
    pass


COMMON_LOCATORS: Mapping[str, str] = MappingProxyType({
    # Form elements
    "email_input": "#Email",
    "password_input": "#Password",
    "confirm_password_input": "#ConfirmPassword",
    "first_name_input": "#FirstName",
    "last_name_input": "#LastName",
    "company_input": "#Company",

    # Buttons
    "login_button": "button.login-button:has-text('Log in')",
    "register_button": "button.register-button",

    # Checkboxes and radio buttons
    "remember_me_checkbox": "#RememberMe",
    "newsletter_checkbox": "#Newsletter",
    "gender_male_radio": "#gender-male",
    "gender_female_radio": "#gender-female",

    # Links
    "forgot_password_link": "a[href='/passwordrecovery']",
    "my_account_link": "a[href='/customer/info']",
    "login_link": "a[href='/login']",
    "register_link": "a[href='/register']",

    # Notifications
    "success_message": (
        ".bar-notification.success, .notification.success, "
        ".message-success, .alert-success"
    ),
    "error_message": (
        ".message-error, .bar-notification.error, "
        ".notification.error, .alert-error"
    ),
    "validation_errors": ".validation-summary-errors",
    "field_validation_errors": ".field-validation-error",

    # Product actions
    "add_to_cart_button": "#add-to-cart-button",
    "add_to_wishlist_button": "#add-to-wishlist-button",
    "add_to_compare_button": "#add-to-compare-list-button",

    # Search
    "search_box_input": "#small-searchterms",
    "search_box_button": ".search-box-button",
    "advanced_search_checkbox": "#advs",
    "search_in_descriptions_checkbox": "#sid",

    # Product listing
    "product_items": ".item-box",
    "product_grid": ".product-grid",
    "product_item_grid": ".product-grid .item-grid",
    "product_item_box": ".product-grid .item-grid .item-box",
    "product_prices": ".product-grid .actual-price",
    "no_result": ".no-result",

    # Category navigation
    "category_navigation_block": ".block-category-navigation",
    "manufacturer_navigation_block": ".block-manufacturer-navigation",
    "category_grid": ".category-grid",
    "category_item_grid": ".category-grid .item-grid",
    "category_item_box": ".category-grid .item-grid .item-box",

    # Listing selectors
    "product_selectors": ".product-selectors",
    "product_view_mode": ".product-viewmode",
    "product_sorting": ".product-sorting",
    "product_page_size": ".product-page-size",
    "products_container": ".products-container",

    # Sorting and filtering
    "products_order_by": "#products-orderby",
    "products_page_size": "#products-pagesize",
    "grid_view_button": ".viewmode-icon.grid",
    "list_view_button": ".viewmode-icon.list",
    "price_range_slider": "#price-range-slider",
    "product_manufacturer_group": ".product-manufacturer-group",
    "manufacturer_filter_first": "#attribute-manufacturer-1",

    # Header counters
    "cart_count": (
        ".cart-qty, .cart-count, .shopping-cart-count, "
        "[class*='cart-count'], [class*='cart-qty']"
    ),
    "wishlist_count": (
        ".wishlist-qty, .wishlist-count, .wishlist-items-count, "
        "[class*='wishlist-count'], [class*='wishlist-qty']"
    ),
})


COMMON_MESSAGES: Mapping[str, str] = MappingProxyType({
    # Success
    "registration_success": "Your registration completed",
    "login_success": "Welcome back",
    "password_recovery_sent": "Email with instructions has been sent",
    "password_reset_success": "Password was changed",
    "product_added_to_cart": "The product has been added to your shopping cart",
    "product_added_to_wishlist": "The product has been added to your wishlist",
    "product_added_to_compare": "The product has been added to your product comparison",
    "newsletter_subscribed": "Thank you for signing up",

    # Errors
    "login_unsuccessful": "Login was unsuccessful",
    "email_already_exists": "The specified email already exists",
    "email_not_found": "Email not found",
    "password_mismatch": "The password and confirmation password do not match",
    "weak_password": "Password must meet the following requirements",
    "invalid_email": "Wrong email",
    "required_field": "is required",
    "search_term_min_length": "Search term minimum length is 3 characters",
    "enter_search_keyword": "Please enter some search keyword",
    "no_products_found": "No products were found",

    # Field validation
    "email_required": "Email is required",
    "password_required": "Password is required",
    "first_name_required": "First name is required",
    "last_name_required": "Last name is required",

    # Page titles
    "login_page_title": "Welcome, Please Sign In!",
    "register_page_title": "Register",
    "forgot_password_page_title": "Password Recovery",
    "home_page_title": "Welcome to our store",
})


def locator_for(name: str) -> str:
    """Return the selector registered under `name`."""
    try:
        return COMMON_LOCATORS[name]
    except KeyError:
        raise UnknownLocatorError(f"No locator registered for: {name}") from None


def message_for(name: str) -> str:
    """Return the expected UI text registered under `name`."""
    try:
        return COMMON_MESSAGES[name]
    except KeyError:
        raise UnknownLocatorError(f"No message registered for: {name}") from None


__all__ = [
    "COMMON_LOCATORS",
    "COMMON_MESSAGES",
    "UnknownLocatorError",
    "locator_for",
    "message_for",
]
