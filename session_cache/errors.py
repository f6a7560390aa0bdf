"""Exception hierarchy for the session state cache."""

from __future__ import annotations


class SessionCacheError(Exception):
    """Base class for every error raised by the session state cache."""


class ConfigurationError(SessionCacheError):
    """Required configuration (e.g. login credentials) is missing."""


class LoginFailure(SessionCacheError):
    """The login flow could not be completed in the browser."""


class PersistenceFailure(SessionCacheError):
    """Captured session state could not be written to disk."""
