"""Helper functions shared by the unit and E2E suites."""

from __future__ import annotations

import logging
import os
import random
import string
import time
from collections.abc import Callable
from datetime import datetime
from pathlib import Path

import requests
from faker import Faker
from playwright.sync_api import Error as PlaywrightError
from playwright.sync_api import Locator, Page

logger = logging.getLogger(__name__)

fake = Faker()

ALPHANUMERIC = string.ascii_letters + string.digits


class RetryError(RuntimeError):
    """A condition was still unmet after every retry."""


def retry_until(
    action: Callable[[], None],
    condition: Callable[[], bool],
    max_retries: int = 5,
    retry_delay: float = 1.0,
    sleep: Callable[[float], None] = time.sleep,
) -> None:
    """
    Run ``action`` until ``condition`` holds.

    Args:
        action: Step to perform on every attempt.
        condition: Returns True once the desired state is reached.
        max_retries: Maximum number of attempts.
        retry_delay: Seconds to wait between attempts.
        sleep: Sleep function (injectable for tests).

    Raises:
        RetryError: If the condition is not met after ``max_retries``.
    """
    for attempt in range(max_retries):
        action()
        if condition():
            return
        if attempt < max_retries - 1:
            sleep(retry_delay)
    raise RetryError(f"Condition not met after {max_retries} retries")


def fill_with_retry(
    locator: Locator,
    value: str,
    retries: int = 3,
    timeout: int = 5000,
    sleep: Callable[[float], None] = time.sleep,
) -> None:
    """
    Fill an input and verify the value stuck, retrying on failure.

    Args:
        locator: Input field to fill.
        value: Value to enter.
        retries: Number of attempts.
        timeout: Per-attempt fill timeout in milliseconds.
        sleep: Sleep function (injectable for tests).

    Raises:
        playwright.sync_api.Error: The last Playwright error if every
            attempt raised.
        RetryError: If the field never reported ``value``.
    """
    for attempt in range(retries):
        try:
            locator.fill(value, timeout=timeout)
            if locator.input_value() == value:
                return
        except PlaywrightError:
            if attempt == retries - 1:
                raise
        if attempt < retries - 1:
            sleep(1.0)
    raise RetryError(f"Field did not accept value after {retries} attempts")


def take_screenshot(
    page: Page,
    name: str,
    full_page: bool = False,
    directory: str = "test-results/screenshots",
) -> str:
    """
    Take a timestamped screenshot.

    Args:
        page: Playwright page instance.
        name: File name prefix (without extension).
        full_page: Capture the full scrollable page.
        directory: Output directory, created if missing.

    Returns:
        Path to the screenshot file.
    """
    os.makedirs(directory, exist_ok=True)
    timestamp = datetime.now().strftime("%Y-%m-%dT%H-%M-%S-%f")
    path = os.path.join(directory, f"{name}-{timestamp}.png")
    page.screenshot(path=path, full_page=full_page)
    return path


def random_string(length: int = 10, charset: str = ALPHANUMERIC) -> str:
    return "".join(random.choice(charset) for _ in range(length))


def random_email(domain: str = "example.com") -> str:
    """Random address at ``domain``, e.g. ``jane.doe4821@example.com``."""
    return f"{fake.user_name()}{random.randint(1000, 9999)}@{domain}"


def clear_auth_states(directory: Path) -> int:
    """
    Delete every persisted auth state in ``directory``.

    Args:
        directory: Auth state directory (e.g. ``.auth``).

    Returns:
        Number of files removed.
    """
    directory = Path(directory)
    if not directory.is_dir():
        return 0

    removed = 0
    for entry in directory.iterdir():
        if entry.is_file():
            entry.unlink()
            removed += 1
    logger.info("Cleared %d auth state file(s) from %s", removed, directory)
    return removed


def is_authenticated(page: Page, base_url: str) -> bool:
    """
    Return True when the page is somewhere other than the login form.

    Swag Labs serves its login form at the site root and redirects
    unauthenticated requests for inner pages back there.
    """
    root = base_url.rstrip("/")
    current = page.url.split("?", 1)[0].rstrip("/")
    return bool(current) and current != root and current != "about:blank"


def wait_for_site_reachable(url: str, timeout: float = 30, interval: float = 1) -> bool:
    """
    Poll ``url`` until it answers with a non-error status or timeout.

    Returns:
        True once reachable, False if the deadline passes first.
    """
    deadline = time.time() + timeout
    while time.time() < deadline:
        try:
            response = requests.get(url, timeout=5)
            if response.status_code < 400:
                return True
        except requests.RequestException:
            pass
        time.sleep(interval)
    return False
