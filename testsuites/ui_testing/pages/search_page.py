"""
================================================================================
Search Page Object
================================================================================

Product search: basic and advanced search forms, result listing, sorting,
paging and product actions (cart, wishlist, compare) from the result grid.

Features:
    - Header search and on-page search
    - Advanced search filters (category, manufacturer, subcategories,
      descriptions)
    - Header counters parsed to integers
    - Pagination helpers

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional

import allure
from loguru import logger
from playwright.async_api import Locator

from testsuites.ui_testing.framework.extractors import extract_first_int
from testsuites.ui_testing.framework.page_base import BasePage, ElementNotFoundError


# `#products-orderby` option values
SORT_POSITION = "0"
SORT_NAME_ASC = "5"
SORT_NAME_DESC = "6"
SORT_PRICE_ASC = "10"
SORT_PRICE_DESC = "11"
SORT_CREATED_ON = "15"

# Wait for result-grid action buttons (ms)
RESULT_ACTION_TIMEOUT = 10000


@dataclass(frozen=True)
class SearchFilters:
    """Advanced search filters. Unset fields are left at the form defaults."""

    category: Optional[str] = None
    manufacturer: Optional[str] = None
    search_in_subcategories: bool = False
    search_in_descriptions: bool = False


class SearchPage(BasePage):
    """Search page object (async)."""

    URL_PATH = "/search"

    # -------------------------------------------------------------------------
    # Search form
    # -------------------------------------------------------------------------

    @property
    def search_input(self) -> Locator:
        return self.page.locator("#q")

    @property
    def search_button(self) -> Locator:
        return self.page.locator(".search-button")

    @property
    def search_box_input(self) -> Locator:
        return self.locate("search_box_input")

    @property
    def search_box_button(self) -> Locator:
        return self.locate("search_box_button")

    @property
    def category_select(self) -> Locator:
        return self.page.locator("#cid")

    @property
    def manufacturer_select(self) -> Locator:
        return self.page.locator("#mid")

    @property
    def search_in_subcategories_checkbox(self) -> Locator:
        return self.page.locator("#isc")

    @property
    def advanced_search_checkbox(self) -> Locator:
        return self.locate("advanced_search_checkbox")

    @property
    def search_in_descriptions_checkbox(self) -> Locator:
        return self.locate("search_in_descriptions_checkbox")

    # -------------------------------------------------------------------------
    # Listing controls
    # -------------------------------------------------------------------------

    @property
    def sort_by_select(self) -> Locator:
        return self.locate("products_order_by")

    @property
    def page_size_select(self) -> Locator:
        return self.locate("products_page_size")

    @property
    def view_mode_grid(self) -> Locator:
        return self.locate("grid_view_button")

    @property
    def view_mode_list(self) -> Locator:
        return self.locate("list_view_button")

    # -------------------------------------------------------------------------
    # Results
    # -------------------------------------------------------------------------

    @property
    def search_results(self) -> Locator:
        return self.page.locator(".search-results")

    @property
    def product_items(self) -> Locator:
        return self.page.locator(".search-results .item-box")

    @property
    def product_titles(self) -> Locator:
        return self.page.locator(".search-results .product-title a")

    @property
    def product_prices(self) -> Locator:
        return self.page.locator(".search-results .actual-price")

    @property
    def add_to_cart_buttons(self) -> Locator:
        return self.page.locator(".search-results .product-box-add-to-cart-button")

    @property
    def add_to_wishlist_buttons(self) -> Locator:
        return self.page.locator(".search-results .add-to-wishlist-button")

    @property
    def add_to_compare_buttons(self) -> Locator:
        return self.page.locator(".search-results .add-to-compare-list-button")

    @property
    def no_results_message(self) -> Locator:
        return self.locate("no_result")

    @property
    def warning_message(self) -> Locator:
        return self.page.locator(".warning")

    @property
    def cart_count(self) -> Locator:
        return self.locate("cart_count").first

    @property
    def wishlist_count(self) -> Locator:
        return self.locate("wishlist_count").first

    # -------------------------------------------------------------------------
    # Pagination
    # -------------------------------------------------------------------------

    @property
    def pagination(self) -> Locator:
        return self.page.locator(".pager")

    @property
    def next_page_button(self) -> Locator:
        return self.page.locator(".next-page")

    @property
    def previous_page_button(self) -> Locator:
        return self.page.locator(".previous-page")

    @property
    def page_numbers(self) -> Locator:
        return self.page.locator(".pager .individual-page")

    # =========================================================================
    # Search
    # =========================================================================

    @allure.step("Open search page")
    async def open(self) -> "SearchPage":
        await self.navigate()
        return self

    @allure.step("Search: {search_term}")
    async def search(self, search_term: str) -> None:
        await self.fill_input(self.search_input, search_term)
        await self.click_element(self.search_button)

    @allure.step("Search from header: {search_term}")
    async def search_from_header(self, search_term: str) -> None:
        await self.fill_input(self.search_box_input, search_term)
        await self.click_element(self.search_box_button)

    @allure.step("Advanced search: {search_term}")
    async def advanced_search(
        self,
        search_term: str,
        filters: Optional[SearchFilters] = None,
    ) -> None:
        """
        Fill the term, enable advanced mode, apply filters and submit.

        Args:
            search_term: Keyword to search for
            filters: Dropdown values are matched by option value or label
        """
        filters = filters or SearchFilters()
        await self.fill_input(self.search_input, search_term)
        await self.enable_advanced_search()

        if filters.category:
            await self.select_option(self.category_select, filters.category)
        if filters.manufacturer:
            await self.select_option(self.manufacturer_select, filters.manufacturer)
        if filters.search_in_subcategories:
            await self.check_checkbox(self.search_in_subcategories_checkbox)
        if filters.search_in_descriptions:
            await self.check_checkbox(self.search_in_descriptions_checkbox)

        await self.click_element(self.search_button)

    # =========================================================================
    # Sorting and display
    # =========================================================================

    @allure.step("Sort results by option value {sort_option}")
    async def sort_by(self, sort_option: str) -> None:
        await self.select_option(self.sort_by_select, sort_option)

    async def sort_by_price_ascending(self) -> None:
        await self.sort_by(SORT_PRICE_ASC)

    async def sort_by_price_descending(self) -> None:
        await self.sort_by(SORT_PRICE_DESC)

    async def sort_by_name_ascending(self) -> None:
        await self.sort_by(SORT_NAME_ASC)

    async def sort_by_name_descending(self) -> None:
        await self.sort_by(SORT_NAME_DESC)

    @allure.step("Change page size to {size}")
    async def change_page_size(self, size: str) -> None:
        await self.select_option(self.page_size_select, size)

    async def switch_to_grid_view(self) -> None:
        await self.click_element(self.view_mode_grid)

    async def switch_to_list_view(self) -> None:
        await self.click_element(self.view_mode_list)

    # =========================================================================
    # Results
    # =========================================================================

    async def get_search_results_count(self) -> int:
        return await self.product_items.count()

    async def get_product_titles(self) -> List[str]:
        return await self.get_all_texts(self.product_titles)

    async def get_product_prices(self) -> List[str]:
        return await self.get_all_texts(self.product_prices)

    @allure.step("Open product #{index}")
    async def click_product(self, index: int) -> None:
        await self.click_element(self.product_items.nth(index))

    @allure.step("Open product: {title}")
    async def click_product_by_title(self, title: str) -> None:
        await self.click_element(self.product_titles.filter(has_text=title).first)

    @allure.step("Add product #{index} to cart")
    async def add_to_cart(self, index: int) -> None:
        await self.click_element(self.add_to_cart_buttons.nth(index))

    @allure.step("Add product #{index} to wishlist")
    async def add_to_wishlist(self, index: int) -> None:
        await self.click_element(self.add_to_wishlist_buttons.nth(index), RESULT_ACTION_TIMEOUT)

    @allure.step("Add product #{index} to compare list")
    async def add_to_compare(self, index: int) -> None:
        await self.click_element(self.add_to_compare_buttons.nth(index), RESULT_ACTION_TIMEOUT)

    async def has_no_results(self) -> bool:
        return await self.is_visible(self.no_results_message)

    async def get_no_results_message(self) -> str:
        return await self.get_text(self.no_results_message)

    # =========================================================================
    # Notifications
    # =========================================================================

    async def get_error_message(self) -> str:
        """Search warning text (e.g. minimum term length), or ""."""
        return await self._probe_text(self.warning_message)

    async def is_error_message_visible(self) -> bool:
        return await self.is_visible(self.warning_message)

    # =========================================================================
    # Header counters
    # =========================================================================

    async def _read_count(self, locator: Locator) -> int:
        try:
            text = await self.get_text(locator, timeout=self.probe_timeout)
        except ElementNotFoundError:
            logger.debug(f"Counter {locator} not shown, treating as 0")
            return 0
        return extract_first_int(text)

    async def get_cart_count(self) -> int:
        """First integer in the cart counter, 0 when absent or unparseable."""
        return await self._read_count(self.cart_count)

    async def get_wishlist_count(self) -> int:
        return await self._read_count(self.wishlist_count)

    async def has_cart_count_increased_by(self, expected_increase: int, initial_count: int) -> bool:
        return await self.get_cart_count() == initial_count + expected_increase

    async def has_wishlist_count_increased_by(self, expected_increase: int, initial_count: int) -> bool:
        return await self.get_wishlist_count() == initial_count + expected_increase

    # =========================================================================
    # Pagination
    # =========================================================================

    async def go_to_next_page(self) -> None:
        await self.click_element(self.next_page_button)

    async def go_to_previous_page(self) -> None:
        await self.click_element(self.previous_page_button)

    @allure.step("Go to results page {page_number}")
    async def go_to_page(self, page_number: int) -> None:
        await self.click_element(self.page_numbers.filter(has_text=str(page_number)).first)

    async def has_pagination(self) -> bool:
        return await self.is_visible(self.pagination)

    # =========================================================================
    # Form state
    # =========================================================================

    async def clear_search_form(self) -> None:
        await self.search_input.clear()
        for checkbox in (
            self.search_in_descriptions_checkbox,
            self.search_in_subcategories_checkbox,
            self.advanced_search_checkbox,
        ):
            if await checkbox.is_checked():
                await self.uncheck_checkbox(checkbox)

    async def enable_advanced_search(self) -> None:
        await self.check_checkbox(self.advanced_search_checkbox)

    async def disable_advanced_search(self) -> None:
        await self.uncheck_checkbox(self.advanced_search_checkbox)

    async def is_advanced_search_enabled(self) -> bool:
        return await self.advanced_search_checkbox.is_checked()

    async def enable_search_in_descriptions(self) -> None:
        await self.check_checkbox(self.search_in_descriptions_checkbox)

    async def disable_search_in_descriptions(self) -> None:
        await self.uncheck_checkbox(self.search_in_descriptions_checkbox)

    async def is_search_in_descriptions_enabled(self) -> bool:
        return await self.search_in_descriptions_checkbox.is_checked()


__all__ = [
    "SORT_NAME_ASC",
    "SORT_NAME_DESC",
    "SORT_PRICE_ASC",
    "SORT_PRICE_DESC",
    "SearchFilters",
    "SearchPage",
]
