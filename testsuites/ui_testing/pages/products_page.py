"""
================================================================================
Products Page Object (Async / Playwright)
================================================================================

All Products listing, search results, category / brand filters and the
product details page (quantity, add to cart, reviews).

NOTE:
  The "Added!" modal renders its View Cart / Continue Shopping controls
  as either links or buttons depending on the page; both are resolved
  through SmartLocator fallback chains.

================================================================================
"""

from __future__ import annotations

from typing import Dict, List, Union

import allure
from loguru import logger
from playwright.async_api import Locator, expect

from testsuites.ui_testing.framework.page_base import PageBase
from testsuites.ui_testing.support.constants import (
    ASSERTION_TEXTS,
    BRAND_ALIASES,
    CATEGORY_IDS,
    URL_PATHS,
)


class ProductsPage(PageBase):
    """Products page object (async)."""

    URL_PATH = URL_PATHS["PRODUCTS"]
    PAGE_TITLE = "Automation Exercise - All Products"

    SELECTORS = {
        "products_title": ".title.text-center",
        "search_input": "#search_product",
        "search_button": "#submit_search",
        "product_grid": ".features_items",
        "product_card": ".productinfo",
        "product_card_name": ".productinfo p",
        "single_product": ".single-products",
        "add_to_cart_link": "a:has-text('Add to cart')",
        "view_product_link": "a[href*='/product_details/']",
        "product_image_wrapper": ".product-image-wrapper",
        # Product details page
        "detail_name": ".product-information h2",
        "detail_price": ".product-information span span",
        "detail_info_line": ".product-information p",
        "detail_image": ".product-details .view-product img",
        "quantity_input": "#quantity",
        "add_to_cart_from_details": "button.btn.btn-default.cart",
        # Reviews
        "write_your_review": "a[href='#reviews']",
        "review_form": "#review-form",
        "review_name": "#name",
        "review_email": "#email",
        "review_text": "#review",
        "review_submit": "#button-review",
        "review_success": "#review-section .alert-success",
        # Modal
        "modal_content": ".modal-content",
    }

    def _category_toggle(self, category: str) -> str:
        return f"a[href='#{category}']"

    def _brand_link(self, brand: str) -> str:
        return f"a[href='{URL_PATHS['BRAND_PRODUCTS']}/{brand}']"

    def _card_by_name(self, product_name: str) -> Locator:
        return self.page.locator(self.selectors["single_product"]).filter(
            has_text=product_name
        ).first

    async def _wait_for_modal(self) -> None:
        await expect(self.get_modal_content()).to_be_visible(timeout=10000)

    # ============================================================
    # Navigation & Search
    # ============================================================

    @allure.step("Open products page")
    async def navigate_to_products(self) -> "ProductsPage":
        await self.navigate()
        return self

    @allure.step("Search products: {search_term}")
    async def search_product(self, search_term: str) -> "ProductsPage":
        await self.type_text(self.selectors["search_input"], search_term)
        await self.click_element(self.selectors["search_button"])
        return self

    # ============================================================
    # Filtering
    # ============================================================

    @allure.step("Filter by category: {category}")
    async def filter_by_category(self, category: str) -> "ProductsPage":
        """
        Expand a sidebar category panel.

        Args:
            category: Women, Men or Kids (any case)

        Raises:
            ValueError: for any other category
        """
        canonical = category.strip().capitalize()
        if canonical not in CATEGORY_IDS:
            raise ValueError(f"Unknown category: {category}")

        await self.click_element(self._category_toggle(canonical))
        return self

    @allure.step("Filter by brand: {brand}")
    async def filter_by_brand(self, brand: str) -> "ProductsPage":
        """
        Open /brand_products/<brand>.

        Accepts canonical names and the usual short spellings
        ("hm", "mast-harbour", "allen solly", "kookie-kids").

        Raises:
            ValueError: for a brand the shop does not list
        """
        canonical = BRAND_ALIASES.get(brand.strip().lower())
        if canonical is None:
            raise ValueError(f"Unknown brand: {brand}")

        await self.click_element(self._brand_link(canonical))
        return self

    # ============================================================
    # Product Interactions
    # ============================================================

    @allure.step("Add '{product_name}' to cart")
    async def click_add_to_cart_by_name(self, product_name: str) -> "ProductsPage":
        card = self._card_by_name(product_name)
        await card.wait_for(state="visible", timeout=10000)
        await card.scroll_into_view_if_needed()
        await expect(card).to_be_visible()

        add_link = card.locator(self.selectors["add_to_cart_link"]).first
        await add_link.wait_for(state="visible", timeout=5000)
        await add_link.click()

        await self._wait_for_modal()
        return self

    @allure.step("View product '{product_name}'")
    async def click_view_product_by_name(self, product_name: str) -> "ProductsPage":
        """Open the details page linked from the card that shows product_name."""
        card = self._card_by_name(product_name)
        await card.wait_for(state="visible", timeout=10000)
        await card.scroll_into_view_if_needed()

        wrapper = self.page.locator(self.selectors["product_image_wrapper"]).filter(has=card).first
        view_link = wrapper.locator(self.selectors["view_product_link"]).first
        await view_link.wait_for(state="visible", timeout=5000)
        await view_link.click()
        await self.wait_for_url(f"**{URL_PATHS['PRODUCT_DETAILS']}/**")
        return self

    async def set_product_quantity(self, quantity: Union[int, str]) -> "ProductsPage":
        await self.clear_and_type(self.selectors["quantity_input"], str(quantity))
        return self

    @allure.step("Add to cart from product details")
    async def add_to_cart_from_details(self) -> "ProductsPage":
        await self.page.locator(self.selectors["add_to_cart_from_details"]).click()
        await self._wait_for_modal()
        return self

    async def click_view_cart_on_modal(self) -> "ProductsPage":
        await self.smart.click("modal_view_cart")
        return self

    async def click_continue_shopping_on_modal(self) -> "ProductsPage":
        await self.smart.click("modal_continue_shopping")
        await expect(self.get_modal_content()).to_be_hidden()
        return self

    # ============================================================
    # Reviews
    # ============================================================

    @allure.step("Write review as {name}")
    async def write_review(self, name: str, email: str, review: str) -> "ProductsPage":
        await expect(self.get_write_your_review()).to_be_visible()
        await self.type_text(self.selectors["review_name"], name)
        await self.type_text(self.selectors["review_email"], email)
        await self.type_text(self.selectors["review_text"], review)
        await self.click_element(self.selectors["review_submit"])
        return self

    async def assert_review_success(self) -> "ProductsPage":
        await expect(self.get_review_success_message()).to_contain_text(
            ASSERTION_TEXTS["REVIEW_THANKS"]
        )
        return self

    # ============================================================
    # Assertions
    # ============================================================

    @allure.step("Verify products page loaded")
    async def assert_products_page_loaded(self) -> "ProductsPage":
        await expect(self.page.locator(self.selectors["products_title"]).first).to_contain_text(
            ASSERTION_TEXTS["ALL_PRODUCTS_TITLE"], ignore_case=True
        )
        await expect(self.page.locator(self.selectors["product_grid"])).to_be_visible()
        return self

    async def assert_on_products_page(self) -> "ProductsPage":
        await self.assert_url_contains(URL_PATHS["PRODUCTS"])
        await self.assert_products_page_loaded()
        return self

    async def assert_on_search_results_page(self) -> "ProductsPage":
        await self.assert_url_contains(f"{URL_PATHS['PRODUCTS']}?search=")
        await expect(self.page.locator(self.selectors["products_title"]).first).to_contain_text(
            ASSERTION_TEXTS["SEARCHED_PRODUCTS"], ignore_case=True
        )
        return self

    async def assert_search_results_contain(self, search_term: str) -> "ProductsPage":
        """At least one listed product name contains search_term (case-insensitive)."""
        await self.wait_for_products_to_load()
        names = await self.get_product_names()
        term = search_term.lower()
        assert any(term in name.lower() for name in names), (
            f"No product name contains '{search_term}': {names}"
        )
        return self

    async def assert_category_filtered(self, category: str) -> "ProductsPage":
        await expect(self.page.locator("body")).to_contain_text(category, ignore_case=True)
        return self

    async def assert_brand_filtered(self, brand: str) -> "ProductsPage":
        await self.assert_url_contains(URL_PATHS["BRAND_PRODUCTS"])
        await expect(self.page.locator(self.selectors["products_title"]).first).to_contain_text(
            brand, ignore_case=True
        )
        return self

    # ============================================================
    # Readers
    # ============================================================

    async def get_product_count(self) -> int:
        return await self.page.locator(self.selectors["product_card"]).count()

    async def get_product_names(self) -> List[str]:
        texts = await self.page.locator(self.selectors["product_card_name"]).all_text_contents()
        return [text.strip() for text in texts]

    async def wait_for_products_to_load(self) -> "ProductsPage":
        await expect(self.page.locator(self.selectors["product_grid"])).to_be_visible()
        await expect(self.page.locator(self.selectors["product_card"]).first).to_be_visible()
        return self

    async def get_product_details(self) -> Dict[str, str]:
        """
        Read the product details panel.

        Returns:
            Dict with name, price, category, availability, condition, brand
        """
        info = self.page.locator(self.selectors["detail_info_line"])

        async def info_line(label: str) -> str:
            line = info.filter(has_text=f"{label}:").first
            text = (await line.text_content() or "").strip()
            return text.split(":", 1)[-1].strip()

        details = {
            "name": (await self.page.locator(self.selectors["detail_name"]).text_content() or "").strip(),
            "price": (await self.page.locator(self.selectors["detail_price"]).first.text_content() or "").strip(),
            "category": await info_line("Category"),
            "availability": await info_line("Availability"),
            "condition": await info_line("Condition"),
            "brand": await info_line("Brand"),
        }
        logger.debug(f"Product details: {details}")
        return details

    # ============================================================
    # Locator Getters
    # ============================================================

    def get_modal_content(self) -> Locator:
        return self.page.locator(self.selectors["modal_content"])

    def get_product_quantity_input(self) -> Locator:
        return self.page.locator(self.selectors["quantity_input"])

    def get_review_form(self) -> Locator:
        return self.page.locator(self.selectors["review_form"])

    def get_review_success_message(self) -> Locator:
        return self.page.locator(self.selectors["review_success"])

    def get_write_your_review(self) -> Locator:
        return self.page.locator(self.selectors["write_your_review"])

    def get_product_image(self) -> Locator:
        return self.page.locator(self.selectors["detail_image"])
