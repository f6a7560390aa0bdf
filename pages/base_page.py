"""
Base Page class for the Page Object Model.

This class provides common functionality shared by all page objects,
including navigation, common locators, and utility methods.

Key Concepts Demonstrated:
- Base class pattern for code reuse
- Locator strategies (data-test, role, text)
- Common actions (wait, scroll, screenshot)
- Assertion helpers
"""

from __future__ import annotations

import os
import re
from typing import Literal

from playwright.sync_api import Locator, Page, expect

LoadState = Literal["load", "domcontentloaded", "networkidle"]


class BasePage:
    """
    Base class for all page objects.

    Attributes:
        page: Playwright page instance.
        base_url: Base URL of the application.
    """

    URL_PATH = "/"

    def __init__(self, page: Page, base_url: str):
        """
        Initialize the base page.

        Args:
            page: Playwright page instance.
            base_url: Base URL of the application.
        """
        self.page = page
        self.base_url = base_url.rstrip("/")

    # -------------------------------------------------------------------------
    # Navigation Methods
    # -------------------------------------------------------------------------

    def navigate_to(self, path: str = "") -> None:
        """
        Navigate to a specific path.

        Args:
            path: URL path relative to base URL.
        """
        self.page.goto(f"{self.base_url}{path}")

    def navigate(self) -> "BasePage":
        """
        Navigate to this page's ``URL_PATH`` and wait for it to load.

        Returns:
            Self for method chaining.
        """
        self.navigate_to(self.URL_PATH)
        self.wait_for_page_load()
        return self

    # -------------------------------------------------------------------------
    # Wait Methods
    # -------------------------------------------------------------------------

    def wait_for_page_load(self, state: LoadState = "domcontentloaded") -> None:
        """Wait for the page to reach the given load state."""
        self.page.wait_for_load_state(state)

    def wait_for_element(self, locator: Locator, timeout: int = 5000) -> None:
        """
        Wait for an element to be visible.

        Args:
            locator: Playwright locator for the element.
            timeout: Maximum wait time in milliseconds.
        """
        locator.wait_for(state="visible", timeout=timeout)

    # -------------------------------------------------------------------------
    # Page Information
    # -------------------------------------------------------------------------

    def get_title(self) -> str:
        return self.page.title()

    def get_url(self) -> str:
        return self.page.url

    def is_visible(self, locator: Locator) -> bool:
        """Return whether ``locator`` currently matches a visible element."""
        return locator.is_visible()

    # -------------------------------------------------------------------------
    # Locator Helpers
    # -------------------------------------------------------------------------

    def get_by_test_id(self, test_id: str) -> Locator:
        """
        Get element by its ``data-test`` attribute.

        Swag Labs marks its interactive elements with ``data-test``
        rather than Playwright's default ``data-testid``.

        Args:
            test_id: Value of the data-test attribute.

        Returns:
            Locator for the element.
        """
        return self.page.locator(f'[data-test="{test_id}"]')

    def get_by_role(self, role, name: str | re.Pattern | None = None, exact: bool = False) -> Locator:
        return self.page.get_by_role(role, name=name, exact=exact)

    def get_by_text(self, text: str | re.Pattern, exact: bool = False) -> Locator:
        return self.page.get_by_text(text, exact=exact)

    # -------------------------------------------------------------------------
    # Assertion Methods
    # -------------------------------------------------------------------------

    def assert_url_contains(self, expected: str) -> None:
        """
        Assert that current URL contains expected string.

        Args:
            expected: String expected to be in the URL.
        """
        expect(self.page).to_have_url(re.compile(re.escape(expected)))

    # -------------------------------------------------------------------------
    # Utility Methods
    # -------------------------------------------------------------------------

    def scroll_to(self, locator: Locator) -> None:
        locator.scroll_into_view_if_needed()

    def take_screenshot(
        self, name: str, full_page: bool = True, directory: str = "test-results/screenshots"
    ) -> str:
        """
        Take a screenshot of the current page.

        Args:
            name: Name for the screenshot file.
            full_page: Capture the full scrollable page.
            directory: Output directory, created if missing.

        Returns:
            Path to the saved screenshot.
        """
        os.makedirs(directory, exist_ok=True)
        path = f"{directory}/{name}.png"
        self.page.screenshot(path=path, full_page=full_page)
        return path
