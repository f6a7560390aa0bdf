"""Playwright fixtures for Swag Labs E2E tests."""

from __future__ import annotations

import os
from collections.abc import Generator
from datetime import timedelta
from pathlib import Path

import pytest
from playwright.sync_api import Browser, BrowserContext, Page, expect

from config import Config, browser_launch_args, get_config
from pages.inventory_page import InventoryPage
from pages.login_page import LoginPage
from session_cache import ScopedContext, SessionStateCache
from session_cache.browser import PlaywrightSession
from session_cache.login import FormLogin
from shared.helpers import wait_for_site_reachable


@pytest.fixture(scope="session")
def app_config() -> type[Config]:
    """Configuration class for the current E2E_ENV."""
    config_class = get_config()
    expect.set_options(timeout=config_class.EXPECT_TIMEOUT_MS)
    return config_class


@pytest.fixture(scope="session")
def store_url(app_config: type[Config]) -> str:
    """
    Return the store URL once it is reachable.

    The whole E2E suite is skipped when the store cannot be reached,
    e.g. when running offline.
    """
    url = app_config.BASE_URL
    if not wait_for_site_reachable(url, timeout=15):
        pytest.skip(f"{url} is not reachable; set BASE_URL to run E2E tests")
    return url


@pytest.fixture(scope="session")
def browser_type_launch_args(browser_type_launch_args, app_config: type[Config], pytestconfig) -> dict:
    """Launch the browser headed or headless as the current config asks."""
    headed = bool(pytestconfig.getoption("headed"))
    return {**browser_type_launch_args, **browser_launch_args(app_config, headed=headed)}


@pytest.fixture(scope="session")
def browser_context_args() -> dict:
    return {
        "viewport": {"width": 1280, "height": 720},
        "ignore_https_errors": True,
    }


@pytest.fixture(scope="session")
def auth_state_path(app_config: type[Config]) -> Path:
    return app_config.AUTH_STATE_PATH


@pytest.fixture(scope="session")
def auth_state_max_age(app_config: type[Config]) -> timedelta:
    return timedelta(seconds=app_config.AUTH_STATE_MAX_AGE_SECONDS)


@pytest.fixture(scope="session")
def session_cache(
    browser: Browser,
    browser_context_args: dict,
    store_url: str,
    app_config: type[Config],
) -> SessionStateCache:
    """
    Session state cache for this worker.

    Each pytest-xdist worker gets its own cache instance; they share only
    the state file on disk.
    """
    return SessionStateCache(
        PlaywrightSession(browser, browser_context_args),
        FormLogin(
            store_url,
            timeout=app_config.ACTION_TIMEOUT_MS,
            navigation_timeout=app_config.NAVIGATION_TIMEOUT_MS,
        ),
    )


def _apply_timeouts(page: Page, app_config: type[Config]) -> None:
    page.set_default_timeout(app_config.ACTION_TIMEOUT_MS)
    page.set_default_navigation_timeout(app_config.NAVIGATION_TIMEOUT_MS)


@pytest.fixture
def authenticated_session(
    session_cache: SessionStateCache,
    auth_state_path: Path,
    auth_state_max_age: timedelta,
    app_config: type[Config],
) -> Generator[ScopedContext, None, None]:
    """Authenticated context and page, closed after the test."""
    with session_cache.acquire_context(auth_state_path, auth_state_max_age) as scoped:
        _apply_timeouts(scoped.page, app_config)
        yield scoped


@pytest.fixture
def page(authenticated_session: ScopedContext) -> Page:
    """
    Override the default page fixture with an authenticated page.

    Tests that ask for ``page`` start logged in as the admin user.
    """
    return authenticated_session.page


@pytest.fixture
def authenticated_page(page: Page) -> Page:
    """Alias for ``page`` for tests that want to be explicit about auth."""
    return page


@pytest.fixture
def authenticated_context(authenticated_session: ScopedContext) -> BrowserContext:
    return authenticated_session.context


@pytest.fixture
def anonymous_page(
    browser: Browser,
    browser_context_args: dict,
    app_config: type[Config],
) -> Generator[Page, None, None]:
    """Page in a fresh context without any stored auth state."""
    context = browser.new_context(**browser_context_args)
    page = context.new_page()
    _apply_timeouts(page, app_config)
    yield page
    context.close()


@pytest.fixture
def login_page(anonymous_page: Page, store_url: str) -> LoginPage:
    return LoginPage(anonymous_page, store_url)


@pytest.fixture
def inventory_page(page: Page, store_url: str) -> InventoryPage:
    """Inventory page object, navigated and logged in."""
    inventory = InventoryPage(page, store_url)
    inventory.navigate()
    return inventory


@pytest.hookimpl(tryfirst=True, hookwrapper=True)
def pytest_runtest_makereport(item, call):
    """Capture screenshot on UI test failure."""
    outcome = yield
    report = outcome.get_result()

    if report.when == "call" and report.failed:
        page = item.funcargs.get("page") or item.funcargs.get("anonymous_page")
        if page:
            screenshot_dir = get_config().SCREENSHOT_DIR
            os.makedirs(screenshot_dir, exist_ok=True)
            test_name = item.name.replace("/", "_").replace("::", "_")
            screenshot_path = f"{screenshot_dir}/{test_name}.png"
            try:
                page.screenshot(path=screenshot_path)
                print(f"\nScreenshot saved: {screenshot_path}")
            except Exception as exc:  # pragma: no cover - best effort logging
                print(f"\nFailed to capture screenshot: {exc}")
