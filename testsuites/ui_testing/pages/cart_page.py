"""
================================================================================
Cart Page Object (Async / Playwright)
================================================================================

Shopping cart table, the checkout pages that follow it (address review,
order comment, payment) and the cart footer subscription form.

Row layout (#cart_info_table tbody tr):
    .cart_description h4 a   product name
    .cart_price              unit price ("Rs. 500")
    .cart_quantity button    quantity
    .cart_total              row total
    .cart_delete a           remove link (AJAX, row disappears)

================================================================================
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

import allure
from loguru import logger
from playwright.async_api import Locator, expect

from testsuites.ui_testing.framework.page_base import PageBase
from testsuites.ui_testing.support.constants import ASSERTION_TEXTS, URL_PATHS
from testsuites.ui_testing.support.utils import load_fixture, parse_price


class CartPage(PageBase):
    """Cart and checkout page object (async)."""

    URL_PATH = URL_PATHS["CART"]
    PAGE_TITLE = "Automation Exercise - Checkout"

    SELECTORS = {
        "cart_table": "#cart_info_table",
        "cart_rows": "#cart_info_table tbody tr",
        "row_name": ".cart_description h4 a",
        "row_price": ".cart_price",
        "row_quantity": ".cart_quantity button",
        "row_total": ".cart_total",
        "row_delete": ".cart_delete a",
        "empty_cart": "#empty_cart",
        "proceed_to_checkout": "a.check_out",
        # Checkout page
        "delivery_address": "#address_delivery",
        "order_comment": "textarea[name='message']",
        "place_order": "a[href='/payment']",
        # Payment page
        "card_name": "[data-qa='name-on-card']",
        "card_number": "[data-qa='card-number']",
        "cvc": "[data-qa='cvc']",
        "expiry_month": "[data-qa='expiry-month']",
        "expiry_year": "[data-qa='expiry-year']",
        "pay_button": "[data-qa='pay-button']",
        "order_placed": "[data-qa='order-placed']",
        # Footer subscription
        "subscribe_input": "#susbscribe_email",
        "subscribe_button": "#subscribe",
        "subscribe_success": "#success-subscribe",
    }

    # ============================================================
    # Rows
    # ============================================================

    @allure.step("Open cart")
    async def navigate_to_cart(self) -> "CartPage":
        await self.navigate()
        return self

    def get_cart_rows(self) -> Locator:
        return self.page.locator(self.selectors["cart_rows"])

    async def get_cart_item_count(self) -> int:
        return await self.get_cart_rows().count()

    def get_cart_item_row(self, product_name: str) -> Locator:
        return self.get_cart_rows().filter(
            has=self.page.locator(self.selectors["row_name"], has_text=product_name)
        ).first

    @allure.step("Remove '{product_name}' from cart")
    async def remove_item(self, product_name: str) -> "CartPage":
        row = self.get_cart_item_row(product_name)
        await row.locator(self.selectors["row_delete"]).click()
        await expect(row).to_be_hidden()
        return self

    async def get_product_price(self, product_name: str) -> float:
        text = await self.get_cart_item_row(product_name).locator(self.selectors["row_price"]).text_content()
        return parse_price(text or "")

    async def get_product_quantity(self, product_name: str) -> int:
        text = await self.get_cart_item_row(product_name).locator(self.selectors["row_quantity"]).text_content()
        return int((text or "0").strip())

    async def get_product_total(self, product_name: str) -> float:
        text = await self.get_cart_item_row(product_name).locator(self.selectors["row_total"]).text_content()
        return parse_price(text or "")

    async def get_cart_product_names(self) -> List[str]:
        texts = await self.get_cart_rows().locator(self.selectors["row_name"]).all_text_contents()
        return [text.strip() for text in texts]

    # ============================================================
    # Checkout
    # ============================================================

    @allure.step("Proceed to checkout")
    async def proceed_to_checkout(self) -> "CartPage":
        await self.page.locator(self.selectors["proceed_to_checkout"]).click()
        return self

    async def register_login_from_checkout(self) -> "CartPage":
        """Guest checkout opens a modal; follow its Register / Login link."""
        await self.smart.click("register_login_checkout")
        await self.wait_for_url(f"**{URL_PATHS['LOGIN']}")
        return self

    @allure.step("Verify delivery address")
    async def assert_address_details(self, user: Dict[str, Any]) -> "CartPage":
        """
        Delivery address block on /checkout shows the registration data.

        Args:
            user: Registration record (firstName, lastName, address, city,
                state, zipcode, country, mobileNumber)
        """
        delivery = self.page.locator(self.selectors["delivery_address"])
        expected = [
            f"{user['firstName']} {user['lastName']}",
            user["address"],
            user["city"],
            user["state"],
            user["zipcode"],
            user["country"],
            user["mobileNumber"],
        ]
        for text in expected:
            await expect(delivery).to_contain_text(text)
        return self

    async def enter_order_comment(self, comment: str) -> "CartPage":
        await self.type_text(self.selectors["order_comment"], comment)
        return self

    @allure.step("Place order")
    async def place_order(self) -> "CartPage":
        await self.page.locator(self.selectors["place_order"]).click()
        await self.wait_for_url(f"**{URL_PATHS['PAYMENT']}")
        return self

    @allure.step("Fill payment form")
    async def fill_payment_form(self, payment: Dict[str, Any]) -> "CartPage":
        await self.type_text(self.selectors["card_name"], payment["cardName"])
        await self.type_text(self.selectors["card_number"], str(payment["cardNumber"]))
        await self.type_text(self.selectors["cvc"], str(payment["cvc"]))
        await self.type_text(self.selectors["expiry_month"], str(payment["expiryMonth"]))
        await self.type_text(self.selectors["expiry_year"], str(payment["expiryYear"]))
        return self

    async def pay_and_confirm(self) -> "CartPage":
        await self.page.locator(self.selectors["pay_button"]).click()
        return self

    async def assert_order_placed(self) -> "CartPage":
        await expect(self.page.locator(self.selectors["order_placed"])).to_contain_text(
            ASSERTION_TEXTS["ORDER_PLACED"], ignore_case=True
        )
        return self

    @allure.step("Quick checkout")
    async def quick_checkout(
        self,
        payment: Optional[Dict[str, Any]] = None,
        comment: str = "Automated test order",
    ) -> "CartPage":
        """
        Proceed, comment, place order, pay and confirm.

        Requires a logged-in user; payment defaults to the users.json card.
        """
        payment = payment or load_fixture("users")["payment"]
        await self.proceed_to_checkout()
        await self.enter_order_comment(comment)
        await self.place_order()
        await self.fill_payment_form(payment)
        await self.pay_and_confirm()
        await self.assert_order_placed()
        return self

    # ============================================================
    # Assertions
    # ============================================================

    async def assert_cart_is_empty(self) -> "CartPage":
        await expect(self.get_cart_empty_message()).to_be_visible()
        return self

    async def assert_product_in_cart(self, product_name: str) -> "CartPage":
        await expect(self.get_cart_item_row(product_name)).to_be_visible()
        return self

    async def assert_product_not_in_cart(self, product_name: str) -> "CartPage":
        await expect(self.get_cart_item_row(product_name)).to_have_count(0)
        return self

    async def assert_product_quantity(self, product_name: str, expected: int) -> "CartPage":
        await expect(
            self.get_cart_item_row(product_name).locator(self.selectors["row_quantity"])
        ).to_have_text(str(expected))
        return self

    @allure.step("Verify row totals")
    async def assert_row_totals(self) -> "CartPage":
        """Every row: unit price x quantity == row total."""
        for name in await self.get_cart_product_names():
            price = await self.get_product_price(name)
            quantity = await self.get_product_quantity(name)
            total = await self.get_product_total(name)
            assert price * quantity == total, (
                f"{name}: {price} x {quantity} != {total}"
            )
        return self

    # ============================================================
    # Utilities
    # ============================================================

    @allure.step("Clear cart")
    async def clear_cart(self) -> "CartPage":
        rows = self.get_cart_rows()
        remaining = await rows.count()
        while remaining:
            await rows.first.locator(self.selectors["row_delete"]).click()
            await expect(rows).to_have_count(remaining - 1)
            remaining -= 1
        logger.debug("Cart cleared")
        return self

    async def wait_for_cart_to_load(self) -> "CartPage":
        await self.wait_for_element(self.selectors["cart_table"])
        return self

    @allure.step("Subscribe from cart: {email}")
    async def subscribe(self, email: str) -> "CartPage":
        await self.type_text(self.selectors["subscribe_input"], email)
        await self.click_element(self.selectors["subscribe_button"])
        return self

    async def assert_subscription_success(self) -> "CartPage":
        await expect(self.get_cart_subscribe_success()).to_contain_text(ASSERTION_TEXTS["SUBSCRIBED"])
        return self

    # ============================================================
    # Locator Getters
    # ============================================================

    def get_cart_table(self) -> Locator:
        return self.page.locator(self.selectors["cart_table"])

    def get_cart_empty_message(self) -> Locator:
        return self.page.locator(self.selectors["empty_cart"]).filter(has_text=ASSERTION_TEXTS["CART_EMPTY"])

    def get_cart_subscribe_input(self) -> Locator:
        return self.page.locator(self.selectors["subscribe_input"])

    def get_cart_subscribe_button(self) -> Locator:
        return self.page.locator(self.selectors["subscribe_button"])

    def get_cart_subscribe_success(self) -> Locator:
        return self.page.locator(self.selectors["subscribe_success"])
