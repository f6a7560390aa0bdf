"""
Page Object Model (POM) classes for the Swag Labs store.

This package contains page objects that encapsulate page-specific
locators and interactions, keeping selectors out of test logic.
"""

from pages.base_page import BasePage
from pages.inventory_page import InventoryPage
from pages.login_page import LoginPage

__all__ = ["BasePage", "InventoryPage", "LoginPage"]
