"""
Inventory Page Object.

This page object encapsulates the product list shown after login,
including adding products to and removing them from the cart.
Products are addressed by their slug, e.g. ``"sauce-labs-backpack"``,
which Swag Labs embeds in the ``data-test`` ids of the cart buttons.
"""

from __future__ import annotations

from playwright.sync_api import Locator, expect

from pages.base_page import BasePage


class InventoryPage(BasePage):
    """
    Page object for the product inventory.

    Provides methods for:
    - Adding and removing products from the cart
    - Reading the cart badge
    - Listing product names
    """

    URL_PATH = "/inventory.html"

    # -------------------------------------------------------------------------
    # Page Locators
    # -------------------------------------------------------------------------

    @property
    def page_title(self) -> Locator:
        """Locator for the "Products" heading."""
        return self.get_by_test_id("title")

    @property
    def cart_badge(self) -> Locator:
        """Locator for the item count on the cart icon."""
        return self.get_by_test_id("shopping-cart-badge")

    @property
    def product_names(self) -> Locator:
        return self.get_by_test_id("inventory-item-name")

    def add_button(self, slug: str) -> Locator:
        return self.get_by_test_id(f"add-to-cart-{slug}")

    def remove_button(self, slug: str) -> Locator:
        return self.get_by_test_id(f"remove-{slug}")

    # -------------------------------------------------------------------------
    # Cart Actions
    # -------------------------------------------------------------------------

    def add_to_cart(self, slug: str) -> "InventoryPage":
        """
        Add a product to the cart.

        Args:
            slug: Product slug, e.g. ``"sauce-labs-bike-light"``.

        Returns:
            Self for method chaining.
        """
        self.add_button(slug).click()
        return self

    def remove_from_cart(self, slug: str) -> "InventoryPage":
        """
        Remove a product from the cart.

        Args:
            slug: Product slug, e.g. ``"sauce-labs-bike-light"``.

        Returns:
            Self for method chaining.
        """
        self.remove_button(slug).click()
        return self

    # -------------------------------------------------------------------------
    # Data Extraction
    # -------------------------------------------------------------------------

    def cart_count(self) -> int:
        """Number shown on the cart badge; 0 when the badge is hidden."""
        if self.cart_badge.count() == 0:
            return 0
        return int(self.cart_badge.inner_text())

    def is_in_cart(self, slug: str) -> bool:
        """A product is in the cart when its remove button is shown."""
        return self.is_visible(self.remove_button(slug))

    def get_product_names(self) -> list[str]:
        return [name.strip() for name in self.product_names.all_inner_texts()]

    def reveal_product(self, name: str) -> Locator:
        """
        Scroll the product called ``name`` into view.

        Args:
            name: Product name as displayed, e.g. ``"Sauce Labs Fleece Jacket"``.

        Returns:
            Locator for the visible product name.
        """
        item = self.get_by_text(name, exact=True)
        self.scroll_to(item)
        self.wait_for_element(item)
        return item

    # -------------------------------------------------------------------------
    # Assertions
    # -------------------------------------------------------------------------

    def assert_on_inventory(self) -> None:
        """Assert we are on the inventory page."""
        self.assert_url_contains(self.URL_PATH)
        expect(self.page_title).to_have_text("Products")

    def assert_cart_count(self, expected: int) -> None:
        """Assert the cart badge shows ``expected`` items (hidden when 0)."""
        if expected == 0:
            expect(self.cart_badge).to_have_count(0)
        else:
            expect(self.cart_badge).to_have_text(str(expected))
