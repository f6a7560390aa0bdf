"""
Playwright adapter for the session state cache.

Wraps a Playwright ``Browser`` so the cache can create contexts and
capture their storage state without knowing anything about Playwright.
The storage state crosses this boundary as JSON-encoded bytes; this is
the only place that encodes or decodes it.
"""

from __future__ import annotations

import json
from typing import Any, Protocol

from playwright.sync_api import Browser, BrowserContext


class BrowserSession(Protocol):
    """Browser capabilities required by the cache."""

    def new_context(self, state: bytes | None = None, **options: Any) -> BrowserContext:
        """Open a context, optionally seeded with a captured state blob."""

    def capture_state(self, context: BrowserContext) -> bytes:
        """Serialize the cookies and storage of ``context``."""


class PlaywrightSession:
    """
    ``BrowserSession`` backed by a Playwright sync-API browser.

    Attributes:
        browser: Playwright browser instance.
        context_args: Options applied to every context created here
            (viewport, timeouts, base URL, ...).
    """

    def __init__(self, browser: Browser, context_args: dict[str, Any] | None = None):
        self.browser = browser
        self.context_args = dict(context_args or {})

    def new_context(self, state: bytes | None = None, **options: Any) -> BrowserContext:
        """
        Create a new browser context.

        Args:
            state: Blob previously returned by ``capture_state``. When
                None the context starts unauthenticated.
            **options: Extra ``Browser.new_context`` keyword arguments,
                overriding ``context_args``.

        Returns:
            The new browser context.

        Raises:
            ValueError: If ``state`` is not a decodable storage state.
        """
        args = {**self.context_args, **options}
        if state is not None:
            args["storage_state"] = json.loads(state.decode("utf-8"))
        return self.browser.new_context(**args)

    def capture_state(self, context: BrowserContext) -> bytes:
        return json.dumps(context.storage_state(), indent=2).encode("utf-8")
