"""
================================================================================
Product Listing Page Object
================================================================================

Category, subcategory and manufacturer listing pages of the storefront.

Features:
    - Navigation through the category and manufacturer side blocks
    - Visibility probes for every listing block
    - Price slider driven by synthetic clicks
    - Manufacturer filter, sorting, page size and view mode controls

Price slider:
    The slider is a JS widget without inputs, so a price is applied by
    clicking at `price / price_slider_max * width` pixels from its left
    edge. `RuntimeConfig.price_slider_max` must match the storefront's
    slider maximum. Prices outside `[0, price_slider_max]` are still
    clicked but reported as out of range.

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Union

import allure
from loguru import logger
from playwright.async_api import Locator

from testsuites.ui_testing.framework.extractors import slider_offset, slug_for
from testsuites.ui_testing.framework.page_base import BasePage, ElementNotFoundError


# Slider interaction timings (ms)
SLIDER_WAIT_TIMEOUT = 5000
SLIDER_SETTLE_MS = 100

PriceValue = Union[str, float, int, None]


@dataclass(frozen=True)
class SliderClick:
    """One synthetic click applied to the price slider."""

    price: float
    offset: float
    slider_width: float
    out_of_range: bool


class ProductPage(BasePage):
    """Product listing page object (async)."""

    URL_PATH = "/"

    # -------------------------------------------------------------------------
    # Navigation blocks
    # -------------------------------------------------------------------------

    @property
    def category_navigation_block(self) -> Locator:
        return self.locate("category_navigation_block")

    @property
    def manufacturer_navigation_block(self) -> Locator:
        return self.locate("manufacturer_navigation_block")

    # -------------------------------------------------------------------------
    # Category grid (top-level categories)
    # -------------------------------------------------------------------------

    @property
    def category_grid(self) -> Locator:
        return self.locate("category_grid")

    @property
    def category_item_grid(self) -> Locator:
        return self.locate("category_item_grid")

    @property
    def category_item_box(self) -> Locator:
        return self.locate("category_item_box")

    # -------------------------------------------------------------------------
    # Product listing (subcategories and manufacturers)
    # -------------------------------------------------------------------------

    @property
    def product_selectors(self) -> Locator:
        return self.locate("product_selectors")

    @property
    def product_view_mode(self) -> Locator:
        return self.locate("product_view_mode")

    @property
    def product_sorting(self) -> Locator:
        return self.locate("product_sorting")

    @property
    def product_page_size(self) -> Locator:
        return self.locate("product_page_size")

    @property
    def products_container(self) -> Locator:
        return self.locate("products_container")

    @property
    def product_grid(self) -> Locator:
        return self.locate("product_grid")

    @property
    def product_item_grid(self) -> Locator:
        return self.locate("product_item_grid")

    @property
    def product_item_box(self) -> Locator:
        return self.locate("product_item_box")

    @property
    def product_prices(self) -> Locator:
        return self.locate("product_prices")

    @property
    def no_results_message(self) -> Locator:
        return self.locate("no_result")

    # -------------------------------------------------------------------------
    # Filters and controls
    # -------------------------------------------------------------------------

    @property
    def price_range_slider(self) -> Locator:
        return self.locate("price_range_slider")

    @property
    def product_manufacturer_group(self) -> Locator:
        return self.locate("product_manufacturer_group")

    @property
    def manufacturer_filter(self) -> Locator:
        return self.locate("manufacturer_filter_first")

    @property
    def products_order_by(self) -> Locator:
        return self.locate("products_order_by")

    @property
    def products_page_size(self) -> Locator:
        return self.locate("products_page_size")

    @property
    def grid_view_button(self) -> Locator:
        return self.locate("grid_view_button")

    @property
    def list_view_button(self) -> Locator:
        return self.locate("list_view_button")

    # =========================================================================
    # Navigation
    # =========================================================================

    async def goto(self, path: str = "") -> None:
        """
        Open a listing page by human-readable name or by path.

        "Cell phones" opens /cell-phones; paths and absolute URLs are used
        as given.
        """
        if path.startswith(("/", "http")) or not path:
            await super().goto(path)
        else:
            await super().goto(f"/{slug_for(path)}")

    @allure.step("Open category: {category_name}")
    async def navigate_to_category(self, category_name: str) -> None:
        link = self.category_navigation_block.locator(f'a:has-text("{category_name}")')
        await self.click_element(link.first)

    @allure.step("Open subcategory: {category_name} > {subcategory_name}")
    async def navigate_to_subcategory(self, category_name: str, subcategory_name: str) -> None:
        await self.navigate_to_category(category_name)
        link = self.category_navigation_block.locator(f'a:has-text("{subcategory_name}")')
        await self.click_element(link.first)

    @allure.step("Open manufacturer: {manufacturer_name}")
    async def navigate_to_manufacturer(self, manufacturer_name: str) -> None:
        link = self.manufacturer_navigation_block.locator(f'a:has-text("{manufacturer_name}")')
        await self.click_element(link.first)

    # =========================================================================
    # Visibility probes
    # =========================================================================

    async def is_category_navigation_visible(self) -> bool:
        return await self.is_visible(self.category_navigation_block)

    async def is_manufacturer_navigation_visible(self) -> bool:
        return await self.is_visible(self.manufacturer_navigation_block)

    async def is_category_grid_visible(self) -> bool:
        return await self.is_visible(self.category_grid)

    async def is_category_item_grid_visible(self) -> bool:
        return await self.is_visible(self.category_item_grid)

    async def is_product_selectors_visible(self) -> bool:
        return await self.is_visible(self.product_selectors)

    async def is_product_view_mode_visible(self) -> bool:
        return await self.is_visible(self.product_view_mode)

    async def is_product_sorting_visible(self) -> bool:
        return await self.is_visible(self.product_sorting)

    async def is_product_page_size_visible(self) -> bool:
        return await self.is_visible(self.product_page_size)

    async def is_products_container_visible(self) -> bool:
        return await self.is_visible(self.products_container)

    async def is_product_grid_visible(self) -> bool:
        return await self.is_visible(self.product_grid)

    async def is_product_item_grid_visible(self) -> bool:
        return await self.is_visible(self.product_item_grid)

    async def is_manufacturer_group_visible(self) -> bool:
        return await self.is_visible(self.product_manufacturer_group)

    async def is_sort_by_visible(self) -> bool:
        return await self.is_visible(self.products_order_by)

    async def is_page_size_visible(self) -> bool:
        return await self.is_visible(self.products_page_size)

    async def is_view_mode_visible(self) -> bool:
        return (
            await self.is_visible(self.grid_view_button)
            and await self.is_visible(self.list_view_button)
        )

    async def get_category_product_count(self) -> int:
        return await self.category_item_box.count()

    async def get_product_grid_count(self) -> int:
        return await self.product_item_box.count()

    # =========================================================================
    # Price slider
    # =========================================================================

    @staticmethod
    def _to_price(value: PriceValue) -> Optional[float]:
        if value is None or value == "":
            return None
        return float(value)

    @allure.step("Set price range: {price_from} - {price_to}")
    async def set_price_range(
        self,
        price_from: PriceValue = None,
        price_to: PriceValue = None,
    ) -> List[SliderClick]:
        """
        Click the slider at the positions of `price_from` then `price_to`.

        Inverted ranges are not checked. Prices outside the slider range
        are clicked anyway and flagged in the returned records.

        Args:
            price_from: Lower price, skipped when None or ""
            price_to: Upper price, skipped when None or ""

        Returns:
            One `SliderClick` per applied price, in click order

        Raises:
            ElementNotFoundError: Slider not visible or has no bounding box
        """
        prices = [
            price for price in (self._to_price(price_from), self._to_price(price_to))
            if price is not None
        ]
        if not prices:
            return []

        await self.wait_for_element_and_scroll(self.price_range_slider, SLIDER_WAIT_TIMEOUT)
        box = await self.price_range_slider.bounding_box()
        if box is None:
            raise ElementNotFoundError("Price range slider not found or not visible")

        max_price = self.config.price_slider_max
        slider_y = box["y"] + box["height"] / 2
        clicks: List[SliderClick] = []

        for price in prices:
            offset = slider_offset(price, box["width"], max_price)
            out_of_range = price < 0 or price > max_price
            if out_of_range:
                logger.warning(
                    f"Price {price} is outside slider range 0-{max_price}, "
                    f"clicking at offset {offset:.1f}px"
                )
            await self.page.mouse.click(box["x"] + offset, slider_y)
            await self.page.wait_for_timeout(SLIDER_SETTLE_MS)
            clicks.append(SliderClick(price, offset, box["width"], out_of_range))

        return clicks

    async def reset_price_slider(self) -> None:
        """Click the slider's left edge. No-op when the slider is absent."""
        box = await self.price_range_slider.bounding_box()
        if box:
            await self.page.mouse.click(box["x"], box["y"] + box["height"] / 2)
            await self.page.wait_for_timeout(SLIDER_SETTLE_MS)

    async def is_price_slider_visible(self) -> bool:
        return await self.is_visible(self.price_range_slider)

    # =========================================================================
    # Manufacturer filter
    # =========================================================================

    @allure.step("Apply first manufacturer filter")
    async def apply_manufacturer_filter(self) -> None:
        await self.click_element(self.manufacturer_filter, SLIDER_WAIT_TIMEOUT)

    async def is_manufacturer_filter_applied(self) -> bool:
        return await self.manufacturer_filter.is_checked()

    # =========================================================================
    # Sorting, page size and view mode
    # =========================================================================

    @allure.step("Sort products by: {sort_option}")
    async def sort_by(self, sort_option: str) -> None:
        """Select a sort option by label (e.g. "Price: Low to High") or value."""
        await self.select_option(self.products_order_by, sort_option)

    async def get_current_sort_option(self) -> str:
        text = await self.products_order_by.locator("option:checked").first.text_content()
        return (text or "").strip()

    async def get_sort_options(self) -> List[str]:
        return await self.get_all_texts(self.products_order_by.locator("option"))

    async def get_product_prices(self) -> List[str]:
        return await self.get_all_texts(self.product_prices)

    @allure.step("Change page size to {page_size}")
    async def change_page_size(self, page_size: str) -> None:
        await self.select_option(self.products_page_size, page_size)

    async def get_current_page_size(self) -> str:
        text = await self.products_page_size.locator("option:checked").first.text_content()
        return (text or "").strip()

    async def get_page_size_options(self) -> List[str]:
        return await self.get_all_texts(self.products_page_size.locator("option"))

    @allure.step("Switch to grid view")
    async def switch_to_grid_view(self) -> None:
        await self.click_element(self.grid_view_button, SLIDER_WAIT_TIMEOUT)

    @allure.step("Switch to list view")
    async def switch_to_list_view(self) -> None:
        await self.click_element(self.list_view_button, SLIDER_WAIT_TIMEOUT)

    @staticmethod
    async def _is_selected(button: Locator) -> bool:
        class_attr = await button.get_attribute("class")
        return "selected" in (class_attr or "")

    async def is_grid_view_active(self) -> bool:
        return await self._is_selected(self.grid_view_button)

    async def is_list_view_active(self) -> bool:
        return await self._is_selected(self.list_view_button)

    # =========================================================================
    # Empty listing
    # =========================================================================

    async def has_no_results(self) -> bool:
        return await self.is_visible(self.no_results_message)

    async def get_no_results_message(self) -> str:
        return await self.get_text(self.no_results_message)


__all__ = [
    "ProductPage",
    "SliderClick",
]
