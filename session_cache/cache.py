"""
Session State Cache.

Decides, for every test, whether the persisted authenticated storage
state can be reused or must be regenerated by logging in again, and
hands out browser contexts seeded with that state.

Per state file the lifecycle is::

    ABSENT --login--> FRESH --time passes--> STALE --login--> FRESH ...

and ``invalidate`` forces any state back to ABSENT.

Key Concepts Demonstrated:
- Dependency injection (clock, filesystem, login procedure, browser)
- Fail-open freshness checks: any read problem means "log in again"
- Context managers for guaranteed browser-context cleanup
"""

from __future__ import annotations

import logging
import time
from collections.abc import Callable, Iterator
from contextlib import contextmanager
from dataclasses import dataclass
from datetime import timedelta
from pathlib import Path
from typing import Any

from playwright.sync_api import BrowserContext, Page
from playwright.sync_api import Error as PlaywrightError

from session_cache.browser import BrowserSession
from session_cache.errors import PersistenceFailure
from session_cache.filesystem import Filesystem, LocalFilesystem
from session_cache.state import PersistedSessionState, StateFreshness

logger = logging.getLogger(__name__)

DEFAULT_MAX_AGE = timedelta(hours=1)

LoginProcedure = Callable[[Page], None]


@dataclass
class ScopedContext:
    """
    An authenticated browser context handed to a single test.

    Attributes:
        context: Browser context seeded with the persisted state.
        page: Page opened inside ``context``.
        state: The persisted state the context was built from.
    """

    context: BrowserContext
    page: Page
    state: PersistedSessionState


class SessionStateCache:
    """
    Reuses or regenerates persisted login state.

    The cache holds no state of its own between calls: the file on disk
    is the only shared resource, so separate instances (e.g. one per
    pytest-xdist worker) cooperate without coordination. Two workers that
    both find the file stale will both log in and the last writer wins,
    which is harmless because every regenerated state is equally valid.

    Attributes:
        browser: Adapter used to open contexts and capture their state.
        login_procedure: Callable that logs in on a fresh page.
        clock: Returns the current time as a POSIX timestamp.
        filesystem: Storage used for the state file.
    """

    def __init__(
        self,
        browser: BrowserSession,
        login_procedure: LoginProcedure,
        *,
        clock: Callable[[], float] = time.time,
        filesystem: Filesystem | None = None,
    ):
        self.browser = browser
        self.login_procedure = login_procedure
        self.clock = clock
        self.filesystem = filesystem or LocalFilesystem()

    # -------------------------------------------------------------------------
    # Freshness
    # -------------------------------------------------------------------------

    def inspect(self, path: Path, max_age: timedelta, now: float | None = None) -> StateFreshness:
        """
        Classify the state file at ``path``.

        Args:
            path: Location of the state file.
            max_age: Maximum age before the state counts as stale.
            now: Reference time; defaults to the injected clock.

        Returns:
            ABSENT if there is no file, UNREADABLE if it cannot be
            stat'ed, otherwise FRESH or STALE depending on its age.
        """
        freshness, _ = self._classify(Path(path), max_age, now)
        return freshness

    def _classify(
        self, path: Path, max_age: timedelta, now: float | None
    ) -> tuple[StateFreshness, float | None]:
        try:
            modified = self.filesystem.modified_time(path)
        except FileNotFoundError:
            return StateFreshness.ABSENT, None
        except (OSError, ValueError) as exc:
            logger.warning("Auth state at %s is unreadable: %s", path, exc)
            return StateFreshness.UNREADABLE, None

        if now is None:
            now = self.clock()
        if now - modified > max_age.total_seconds():
            return StateFreshness.STALE, modified
        return StateFreshness.FRESH, modified

    def is_stale(self, path: Path, max_age: timedelta, now: float | None = None) -> bool:
        """Return True unless the state at ``path`` exists and is within ``max_age``."""
        return self.inspect(path, max_age, now).needs_login

    def invalidate(self, path: Path) -> None:
        """
        Delete the state file so the next acquisition logs in again.

        Safe to call repeatedly; failures are logged and ignored.
        """
        try:
            self.filesystem.remove(path)
        except FileNotFoundError:
            return
        except (OSError, ValueError) as exc:
            logger.warning("Could not remove auth state at %s: %s", path, exc)
            return
        logger.info("Removed auth state at %s", path)

    # -------------------------------------------------------------------------
    # Regeneration
    # -------------------------------------------------------------------------

    def ensure_fresh(
        self, path: Path, max_age: timedelta = DEFAULT_MAX_AGE, *, force: bool = False
    ) -> PersistedSessionState:
        """
        Return usable persisted state, logging in again when needed.

        When the existing state is fresh it is returned as-is; its
        content is not read until somebody asks for it. Otherwise the
        old file is removed, the login procedure runs in a throwaway
        unauthenticated context, and the captured state is written to
        ``path``.

        Args:
            path: Location of the state file.
            max_age: Maximum age before the state counts as stale.
            force: Regenerate even if the current state looks fresh.

        Returns:
            The persisted session state.

        Raises:
            ConfigurationError: Credentials are missing.
            LoginFailure: The login flow did not complete.
            PersistenceFailure: The captured state could not be written.
        """
        path = Path(path)
        freshness, modified = self._classify(path, max_age, self.clock())

        if not force and not freshness.needs_login:
            logger.debug("Reusing auth state at %s", path)
            return PersistedSessionState(
                path=path, modified_time=modified, filesystem=self.filesystem
            )

        reason = "forced" if force else freshness.value
        logger.info("Regenerating auth state at %s (%s)", path, reason)
        self.invalidate(path)
        return self._login_and_persist(path)

    @staticmethod
    def _close_setup_context(context: BrowserContext) -> None:
        # A failing close must not mask the login error being propagated
        try:
            context.close()
        except PlaywrightError as exc:
            logger.warning("Could not close login context: %s", exc)

    def _login_and_persist(self, path: Path) -> PersistedSessionState:
        context = self.browser.new_context()
        try:
            page = context.new_page()
            self.login_procedure(page)
            blob = self.browser.capture_state(context)
        finally:
            self._close_setup_context(context)

        try:
            modified = self.filesystem.write_bytes(path, blob)
        except (OSError, ValueError) as exc:
            raise PersistenceFailure(f"Could not write auth state to {path}: {exc}") from exc

        logger.info("Saved auth state to %s", path)
        return PersistedSessionState(
            path=path, modified_time=modified, filesystem=self.filesystem, _content=blob
        )

    # -------------------------------------------------------------------------
    # Acquisition
    # -------------------------------------------------------------------------

    @contextmanager
    def acquire_context(
        self, path: Path, max_age: timedelta = DEFAULT_MAX_AGE, **context_options: Any
    ) -> Iterator[ScopedContext]:
        """
        Yield an authenticated context and page, closing them afterwards.

        A state file that cannot be read or decoded (for example one that
        another worker is rewriting) is treated like a stale one: the
        cache logs in once more and retries with the new state.

        Args:
            path: Location of the state file.
            max_age: Maximum age before the state counts as stale.
            **context_options: Extra options for the new browser context.

        Yields:
            ScopedContext with the authenticated context and page.
        """
        state = self.ensure_fresh(path, max_age)
        try:
            context = self.browser.new_context(state.content, **context_options)
        except (OSError, ValueError) as exc:
            logger.warning("Auth state at %s could not be loaded (%s); logging in again", path, exc)
            state = self.ensure_fresh(path, max_age, force=True)
            context = self.browser.new_context(state.content, **context_options)

        try:
            page = context.new_page()
            yield ScopedContext(context=context, page=page, state=state)
        finally:
            context.close()
