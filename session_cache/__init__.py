"""
Authenticated Session State Cache.

Provides authenticated Playwright browser contexts to E2E tests while
keeping the number of real logins to a minimum. A successful login's
storage state (cookies, local storage) is persisted to disk and reused
by every test until it grows older than the configured freshness window,
at which point it is regenerated by driving the login form again.

Key Concepts Demonstrated:
- Service object with injected clock, filesystem and login procedure
- Fail-open staleness checks (unreadable state means "log in again")
- Scoped acquisition of browser contexts with guaranteed cleanup
"""

from __future__ import annotations

import logging

from session_cache.cache import ScopedContext, SessionStateCache
from session_cache.errors import (
    ConfigurationError,
    LoginFailure,
    PersistenceFailure,
    SessionCacheError,
)
from session_cache.state import PersistedSessionState, StateFreshness

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)

__all__ = [
    "ConfigurationError",
    "LoginFailure",
    "PersistedSessionState",
    "PersistenceFailure",
    "ScopedContext",
    "SessionCacheError",
    "SessionStateCache",
    "StateFreshness",
]
