"""
================================================================================
Home Page Object
================================================================================

Storefront landing page: header search, account links, top-menu category
navigation, newsletter form and header counters.

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

import allure
from playwright.async_api import Locator

from testsuites.ui_testing.framework.extractors import slug_for
from testsuites.ui_testing.framework.page_base import BasePage


class HomePage(BasePage):
    """Home page object (async)."""

    URL_PATH = "/"

    # -------------------------------------------------------------------------
    # Header
    # -------------------------------------------------------------------------

    @property
    def header_logo(self) -> Locator:
        return self.page.locator(".header-logo")

    @property
    def search_box(self) -> Locator:
        return self.locate("search_box_input")

    @property
    def search_button(self) -> Locator:
        return self.locate("search_box_button")

    @property
    def cart_quantity(self) -> Locator:
        return self.page.locator(".cart-qty")

    @property
    def wishlist_quantity(self) -> Locator:
        return self.page.locator(".wishlist-qty")

    @property
    def account_button(self) -> Locator:
        return self.page.locator(".ico-account")

    @property
    def login_link(self) -> Locator:
        return self.locate("login_link")

    @property
    def register_link(self) -> Locator:
        return self.locate("register_link")

    # -------------------------------------------------------------------------
    # Footer
    # -------------------------------------------------------------------------

    @property
    def footer(self) -> Locator:
        return self.page.locator(".footer")

    @property
    def newsletter_email(self) -> Locator:
        return self.page.locator("#newsletter-email")

    @property
    def newsletter_subscribe_button(self) -> Locator:
        return self.page.locator("#newsletter-subscribe-button")

    @property
    def newsletter_result(self) -> Locator:
        return self.page.locator("#newsletter-result-block")

    def category_menu(self, name: str) -> Locator:
        """Top-menu link for a category, e.g. "Digital downloads"."""
        return self.page.locator(f'a[href="/{slug_for(name)}"]').first

    # -------------------------------------------------------------------------
    # Actions
    # -------------------------------------------------------------------------

    @allure.step("Open home page")
    async def open(self) -> "HomePage":
        await self.navigate()
        return self

    @allure.step("Search from header: {search_term}")
    async def search_product(self, search_term: str) -> None:
        await self.fill_input(self.search_box, search_term)
        await self.click_element(self.search_button)

    @allure.step("Go to login page")
    async def go_to_login(self) -> None:
        await self.click_element(self.login_link)

    @allure.step("Go to registration page")
    async def go_to_register(self) -> None:
        await self.click_element(self.register_link)

    @allure.step("Open category from top menu: {name}")
    async def go_to_category(self, name: str) -> None:
        await self.click_element(self.category_menu(name))

    async def go_to_computers(self) -> None:
        await self.go_to_category("Computers")

    async def go_to_electronics(self) -> None:
        await self.go_to_category("Electronics")

    async def go_to_apparel(self) -> None:
        await self.go_to_category("Apparel")

    async def go_to_digital_downloads(self) -> None:
        await self.go_to_category("Digital downloads")

    async def go_to_books(self) -> None:
        await self.go_to_category("Books")

    async def go_to_jewelry(self) -> None:
        await self.go_to_category("Jewelry")

    async def go_to_gift_cards(self) -> None:
        await self.go_to_category("Gift Cards")

    @allure.step("Subscribe to newsletter: {email}")
    async def subscribe_to_newsletter(self, email: str) -> None:
        await self.fill_input(self.newsletter_email, email)
        await self.click_element(self.newsletter_subscribe_button)

    # -------------------------------------------------------------------------
    # State
    # -------------------------------------------------------------------------

    async def get_cart_quantity(self) -> str:
        return await self.get_text(self.cart_quantity)

    async def get_wishlist_quantity(self) -> str:
        return await self.get_text(self.wishlist_quantity)

    async def is_user_logged_in(self) -> bool:
        return await self.is_visible(self.account_button)

    async def get_account_button_text(self) -> str:
        return await self.get_text(self.account_button)

    async def get_newsletter_result(self) -> str:
        """Subscription feedback shown under the footer form, or ""."""
        return await self._probe_text(self.newsletter_result)


__all__ = ["HomePage"]
