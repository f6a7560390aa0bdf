"""Login page object for the Swag Labs sign-in form."""

from __future__ import annotations

import re

from playwright.sync_api import Error as PlaywrightError
from playwright.sync_api import Locator

from pages.base_page import BasePage

LOGGED_IN_URL = re.compile(r".*/inventory\.html")


class LoginPage(BasePage):
    """
    Page object for the login page.

    Provides methods for:
    - Entering credentials
    - Submitting the login form
    - Reading the error banner shown for rejected logins
    """

    URL_PATH = "/"

    @property
    def username_input(self) -> Locator:
        """Locator for the username input field."""
        return self.get_by_test_id("username")

    @property
    def password_input(self) -> Locator:
        """Locator for the password input field."""
        return self.get_by_test_id("password")

    @property
    def submit_button(self) -> Locator:
        """Locator for the login button."""
        return self.get_by_test_id("login-button")

    @property
    def error_banner(self) -> Locator:
        """Locator for the error shown after a rejected login."""
        return self.get_by_test_id("error")

    def login(self, username: str, password: str) -> None:
        """
        Fill credentials and submit the login form.

        Args:
            username: Username to enter.
            password: Password to enter.
        """
        self.username_input.fill(username)
        self.password_input.fill(password)
        self.submit_button.click()

    def wait_until_logged_in(self, timeout: int = 10000) -> None:
        """
        Wait until the store has redirected to the inventory and settled.

        Args:
            timeout: Maximum wait for the redirect in milliseconds.

        Raises:
            playwright.sync_api.TimeoutError: If the redirect never happens.
        """
        self.page.wait_for_url(LOGGED_IN_URL, timeout=timeout)
        self.wait_for_page_load("networkidle")

    def is_login_successful(self, timeout: int = 5000) -> bool:
        """Return True if the inventory page is reached within ``timeout`` ms."""
        try:
            self.page.wait_for_url(LOGGED_IN_URL, timeout=timeout)
        except PlaywrightError:
            return False
        return True

    def get_error_message(self) -> str | None:
        """
        Get the login error message, if one is displayed.

        Returns:
            Error message text or None if no error is shown.
        """
        if not self.is_visible(self.error_banner):
            return None
        return self.error_banner.inner_text().strip()
