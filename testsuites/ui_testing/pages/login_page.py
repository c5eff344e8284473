"""
================================================================================
Login Page Object (Async / Playwright)
================================================================================

/login hosts two forms side by side: "Login to your account" and
"New User Signup!". A successful signup continues to the account
information form (/signup) and then to /account_created.

NOTE:
  Form fields carry stable `data-qa` attributes; those are the primary
  selectors. Continue / Delete Account / Logout go through SmartLocator
  because their markup differs between pages.

================================================================================
"""

from __future__ import annotations

from typing import Any, Dict, Optional

import allure
from loguru import logger
from playwright.async_api import expect

from testsuites.ui_testing.framework.page_base import PageBase
from testsuites.ui_testing.support.constants import ASSERTION_TEXTS, URL_PATHS
from testsuites.ui_testing.support.utils import generate_random_user, load_fixture


class LoginPage(PageBase):
    """Login / signup page object (async)."""

    URL_PATH = URL_PATHS["LOGIN"]
    PAGE_TITLE = "Automation Exercise - Signup / Login"

    SELECTORS = {
        # Login form
        "login_email": "[data-qa='login-email']",
        "login_password": "[data-qa='login-password']",
        "login_button": "[data-qa='login-button']",
        "login_form_title": ".login-form h2",
        "login_error": ".login-form p",
        # Signup form
        "signup_name": "[data-qa='signup-name']",
        "signup_email": "[data-qa='signup-email']",
        "signup_button": "[data-qa='signup-button']",
        "signup_form_title": ".signup-form h2",
        "signup_error": ".signup-form p",
        # Account information form
        "password": "input[name='password']",
        "first_name": "input[name='first_name']",
        "last_name": "input[name='last_name']",
        "address": "input[name='address1']",
        "country": "select[name='country']",
        "state": "input[name='state']",
        "city": "input[name='city']",
        "zipcode": "input[name='zipcode']",
        "mobile_number": "input[name='mobile_number']",
        "create_account_button": "button[data-qa='create-account']",
        # Result pages
        "account_created": "[data-qa='account-created']",
        "account_deleted": "[data-qa='account-deleted']",
        "logged_in_as": "a:has-text('Logged in as')",
    }

    # ============================================================
    # Navigation
    # ============================================================

    @allure.step("Open login page")
    async def navigate_to_login(self) -> "LoginPage":
        await self.navigate()
        return self

    # ============================================================
    # Forms
    # ============================================================

    @allure.step("Login as {email}")
    async def login(self, email: Optional[str], password: Optional[str]) -> "LoginPage":
        """Fill and submit the login form; None/empty values leave the field blank."""
        await self.type_text(self.selectors["login_email"], email or "")
        await self.type_text(self.selectors["login_password"], password or "")
        await self.click_element(self.selectors["login_button"])
        return self

    @allure.step("Sign up as {name} <{email}>")
    async def signup(self, name: Optional[str], email: Optional[str]) -> "LoginPage":
        await self.type_text(self.selectors["signup_name"], name or "")
        await self.type_text(self.selectors["signup_email"], email or "")
        await self.click_element(self.selectors["signup_button"])
        return self

    @allure.step("Complete registration")
    async def complete_registration(self, user: Dict[str, Any]) -> "LoginPage":
        """
        Fill the account information form shown after signup.

        Args:
            user: password, firstName, lastName, address, country, state,
                city, zipcode, mobileNumber
        """
        await self.type_text(self.selectors["password"], user["password"])
        await self.type_text(self.selectors["first_name"], user["firstName"])
        await self.type_text(self.selectors["last_name"], user["lastName"])
        await self.type_text(self.selectors["address"], user["address"])
        await self.select_option(self.selectors["country"], user["country"])
        await self.type_text(self.selectors["state"], user["state"])
        await self.type_text(self.selectors["city"], user["city"])
        await self.type_text(self.selectors["zipcode"], user["zipcode"])
        await self.type_text(self.selectors["mobile_number"], user["mobileNumber"])
        await self.click_element(self.selectors["create_account_button"])
        return self

    async def quick_registration(
        self,
        name: str,
        email: str,
        password: Optional[str] = None,
    ) -> "LoginPage":
        """Signup then register with the validUser address data."""
        user = load_fixture("users")["validUser"]
        if password:
            user["password"] = password

        await self.signup(name, email)
        await self.complete_registration(user)
        logger.info(f"Registered test account: {email}")
        return self

    async def clear_login_form(self) -> "LoginPage":
        await self.page.fill(self.selectors["login_email"], "")
        await self.page.fill(self.selectors["login_password"], "")
        return self

    async def clear_signup_form(self) -> "LoginPage":
        await self.page.fill(self.selectors["signup_name"], "")
        await self.page.fill(self.selectors["signup_email"], "")
        return self

    # ============================================================
    # Account Actions
    # ============================================================

    async def continue_after_account_creation(self) -> "LoginPage":
        await self.smart.click("continue_button")
        return self

    @allure.step("Delete account")
    async def delete_account(self) -> "LoginPage":
        await self.smart.click("delete_account_button")
        return self

    @allure.step("Logout")
    async def logout(self) -> "LoginPage":
        await self.smart.click("logout_link")
        await self.wait_for_url(f"**{URL_PATHS['LOGIN']}")
        return self

    # ============================================================
    # Assertions
    # ============================================================

    @allure.step("Verify login page loaded")
    async def assert_login_page_loaded(self) -> "LoginPage":
        await expect(self.page.locator(self.selectors["login_form_title"])).to_have_text(
            ASSERTION_TEXTS["LOGIN_FORM_TITLE"]
        )
        await expect(self.page.locator(self.selectors["signup_form_title"])).to_have_text(
            ASSERTION_TEXTS["SIGNUP_FORM_TITLE"]
        )
        return self

    async def assert_login_and_signup_forms_visible(self) -> "LoginPage":
        for name in (
            "login_email",
            "login_password",
            "login_button",
            "signup_name",
            "signup_email",
            "signup_button",
        ):
            await expect(self.page.locator(self.selectors[name])).to_be_visible()
        return self

    @allure.step("Verify login succeeded")
    async def assert_login_successful(self) -> "LoginPage":
        await expect(self.page.locator(self.selectors["logged_in_as"])).to_be_visible(timeout=10000)
        await expect(self.page.locator("a[href='/logout']")).to_be_visible()
        return self

    async def assert_login_failed(self) -> "LoginPage":
        await expect(self.page.locator(self.selectors["login_error"])).to_contain_text(
            ASSERTION_TEXTS["LOGIN_ERROR"]
        )
        return self

    async def assert_signup_failed(self) -> "LoginPage":
        await expect(self.page.locator(self.selectors["signup_error"])).to_contain_text(
            ASSERTION_TEXTS["EMAIL_EXISTS"]
        )
        return self

    async def assert_account_created(self) -> "LoginPage":
        await expect(self.page.locator(self.selectors["account_created"])).to_contain_text(
            ASSERTION_TEXTS["ACCOUNT_CREATED"], ignore_case=True
        )
        return self

    async def assert_account_deleted(self) -> "LoginPage":
        await self.wait_for_url(f"**{URL_PATHS['DELETE_ACCOUNT']}")
        await expect(self.page.locator(self.selectors["account_deleted"])).to_contain_text(
            ASSERTION_TEXTS["ACCOUNT_DELETED"], ignore_case=True
        )
        return self

    async def assert_email_field_validation(self) -> "LoginPage":
        await expect(self.page.locator(self.selectors["login_email"])).to_have_attribute("type", "email")
        return self

    async def assert_password_field_validation(self) -> "LoginPage":
        await expect(self.page.locator(self.selectors["login_password"])).to_have_attribute(
            "type", "password"
        )
        return self

    # ============================================================
    # Helpers
    # ============================================================

    async def get_login_email_value(self) -> str:
        return await self.page.input_value(self.selectors["login_email"])

    async def get_signup_email_value(self) -> str:
        return await self.page.input_value(self.selectors["signup_email"])

    async def is_user_logged_in(self) -> bool:
        body_text = await self.page.locator("body").text_content() or ""
        return ASSERTION_TEXTS["LOGGED_IN_AS"] in body_text

    async def logout_if_logged_in(self) -> "LoginPage":
        if await self.is_user_logged_in():
            await self.logout()
        return self

    def generate_random_user(self, **overrides: Any) -> Dict[str, Any]:
        return generate_random_user(**overrides)
