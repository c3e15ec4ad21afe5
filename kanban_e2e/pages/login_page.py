"""
Login Page Object

Encapsulates login page interactions.
"""
import re

from playwright.sync_api import expect

from . import elements
from .base_page import BasePage


class LoginPage(BasePage):
    """Page object for the login page."""

    # Selectors
    EMAIL_INPUT = elements.selector_for("login-email")
    PASSWORD_INPUT = elements.selector_for("login-password")
    SUBMIT_BUTTON = elements.selector_for("login-submit")
    ERROR_MESSAGE = elements.selector_for("login-error")
    SIGNUP_LINK = 'a[href="/signup"]'

    def visit(self) -> None:
        self.goto("/login")

    # =========================================================================
    # Actions
    # =========================================================================

    def fill_email(self, email: str) -> "LoginPage":
        self.clear_and_type(self.EMAIL_INPUT, email)
        return self

    def fill_password(self, password: str) -> "LoginPage":
        self.clear_and_type(self.PASSWORD_INPUT, password)
        return self

    def submit(self) -> "LoginPage":
        self.click(self.SUBMIT_BUTTON)
        return self

    def login(self, email: str, password: str) -> "LoginPage":
        """Fill both fields and submit."""
        return self.fill_email(email).fill_password(password).submit()

    def go_to_signup(self) -> None:
        self.click(self.SIGNUP_LINK)

    # =========================================================================
    # Assertions
    # =========================================================================

    def assert_login_page_visible(self) -> "LoginPage":
        self.expect_visible(self.EMAIL_INPUT)
        self.expect_visible(self.PASSWORD_INPUT)
        self.expect_visible(self.SUBMIT_BUTTON)
        return self

    def assert_login_error_visible(self) -> "LoginPage":
        self.expect_visible(self.ERROR_MESSAGE)
        return self

    def assert_on_login_page(self) -> "LoginPage":
        self.expect_url(re.compile(r"/login"))
        return self

    def assert_not_on_login_page(self) -> "LoginPage":
        expect(self.page).not_to_have_url(re.compile(r"/login"))
        return self
