"""
Default login procedure for the session state cache.

``FormLogin`` is the callable the cache runs on a fresh, unauthenticated
page whenever the persisted state has to be regenerated. It reads the
admin credentials at call time, drives the Swag Labs login form and
waits until the store has settled on the inventory page.
"""

from __future__ import annotations

import logging
from collections.abc import Callable

from playwright.sync_api import Error as PlaywrightError
from playwright.sync_api import Page

from pages.login_page import LoginPage
from session_cache.credentials import Credentials, load_credentials
from session_cache.errors import LoginFailure

logger = logging.getLogger(__name__)


class FormLogin:
    """
    Log in through the store's login form.

    Attributes:
        base_url: Base URL of the store.
        credentials_loader: Returns the credentials to submit.
        timeout: Default action timeout for the login page, also used for
            the post-login redirect, in milliseconds.
        navigation_timeout: Default navigation timeout for the login page
            in milliseconds.
    """

    def __init__(
        self,
        base_url: str,
        credentials_loader: Callable[[], Credentials] = load_credentials,
        timeout: int = 10000,
        navigation_timeout: int = 30000,
    ):
        self.base_url = base_url
        self.credentials_loader = credentials_loader
        self.timeout = timeout
        self.navigation_timeout = navigation_timeout

    def __call__(self, page: Page) -> None:
        """
        Perform the login on ``page``.

        Args:
            page: Unauthenticated page to log in with.

        Raises:
            ConfigurationError: If credentials are missing. Raised before
                the page navigates anywhere.
            LoginFailure: If any step of the form flow fails.
        """
        credentials = self.credentials_loader().require()
        page.set_default_timeout(self.timeout)
        page.set_default_navigation_timeout(self.navigation_timeout)
        login_page = LoginPage(page, self.base_url)

        logger.info("Logging in to %s as %s", self.base_url, credentials.username)
        try:
            login_page.navigate()
            login_page.login(credentials.username, credentials.password)
            login_page.wait_until_logged_in(timeout=self.timeout)
        except PlaywrightError as exc:
            raise LoginFailure(self._describe_failure(login_page, exc)) from exc

    @staticmethod
    def _describe_failure(login_page: LoginPage, exc: PlaywrightError) -> str:
        try:
            banner = login_page.get_error_message()
        except PlaywrightError:
            banner = None
        if banner:
            return f"Login rejected: {banner}"
        return f"Login did not complete: {exc.message}"
