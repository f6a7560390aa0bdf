"""Admin credentials, read from the environment at login time."""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass, field

from session_cache.errors import ConfigurationError

USERNAME_ENV = "TEST_USER_ADMIN_USERNAME"
PASSWORD_ENV = "TEST_USER_ADMIN_PASSWORD"


@dataclass(frozen=True)
class Credentials:
    """Username/password pair used by the login procedure."""

    username: str
    password: str = field(repr=False)

    def require(self) -> "Credentials":
        """
        Return self if both values are present.

        Raises:
            ConfigurationError: If the username or password is empty.
        """
        missing = [
            name
            for name, value in ((USERNAME_ENV, self.username), (PASSWORD_ENV, self.password))
            if not value
        ]
        if missing:
            raise ConfigurationError(
                f"Credentials not found in environment variables: {', '.join(missing)}"
            )
        return self


def load_credentials(environ: Mapping[str, str] | None = None) -> Credentials:
    """
    Read the admin credentials from the process environment.

    Args:
        environ: Mapping to read from; defaults to ``os.environ`` as it is
            at call time.

    Returns:
        Credentials, possibly with empty values (see ``Credentials.require``).
    """
    if environ is None:
        environ = os.environ
    return Credentials(
        username=environ.get(USERNAME_ENV, "").strip(),
        password=environ.get(PASSWORD_ENV, ""),
    )
