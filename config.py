"""
E2E suite configuration module.

This module defines configuration classes for the environments the
suite runs in (local development, unit testing, CI). Values are loaded
from environment variables with sensible defaults; a local ``.env`` file
is honoured but never overrides variables that are already set.

Credentials are intentionally absent here: they are read from the
environment at login time by ``session_cache.credentials``.
"""

import os
from pathlib import Path

from dotenv import load_dotenv

# Base directory of the project
BASE_DIR = Path(__file__).resolve().parent

# Existing environment variables (e.g. CI secrets) take precedence
load_dotenv(BASE_DIR / ".env", override=False)


class Config:
    """Base configuration with default settings."""

    BASE_URL: str = os.environ.get("BASE_URL", "https://www.saucedemo.com")

    # Persisted browser storage state for the admin user
    AUTH_STATE_PATH: Path = Path(
        os.environ.get("AUTH_STATE_PATH", str(BASE_DIR / ".auth" / "user.json"))
    )
    AUTH_STATE_MAX_AGE_SECONDS: int = int(os.environ.get("AUTH_STATE_MAX_AGE_SECONDS", "3600"))

    ACTION_TIMEOUT_MS: int = int(os.environ.get("ACTION_TIMEOUT_MS", "10000"))
    NAVIGATION_TIMEOUT_MS: int = int(os.environ.get("NAVIGATION_TIMEOUT_MS", "30000"))
    EXPECT_TIMEOUT_MS: int = int(os.environ.get("EXPECT_TIMEOUT_MS", "5000"))

    SCREENSHOT_DIR: str = os.environ.get("SCREENSHOT_DIR", "test-results/screenshots")

    # Overridden per environment; --headed on the command line always wins
    HEADLESS: bool = True


class DevelopmentConfig(Config):
    """Local development configuration."""

    HEADLESS: bool = False


class TestingConfig(Config):
    """Unit-test configuration."""

    HEADLESS: bool = True

    # Keep unit test runs away from the developer's real auth state
    AUTH_STATE_PATH: Path = Path(
        os.environ.get("TEST_AUTH_STATE_PATH", str(BASE_DIR / ".auth" / "test_user.json"))
    )


class CIConfig(Config):
    """Continuous integration configuration."""

    HEADLESS: bool = True

    # Shared runners are slower than a workstation
    NAVIGATION_TIMEOUT_MS: int = int(os.environ.get("NAVIGATION_TIMEOUT_MS", "60000"))


# Configuration mapping for easy access
config = {
    "development": DevelopmentConfig,
    "testing": TestingConfig,
    "ci": CIConfig,
    "default": DevelopmentConfig,
}


def get_config(env: str | None = None) -> type[Config]:
    """
    Get the configuration class for the specified environment.

    Args:
        env: Environment name (development, testing, ci).
             If None, uses the E2E_ENV environment variable.

    Returns:
        Configuration class for the specified environment.
    """
    if env is None:
        env = os.environ.get("E2E_ENV", "development")
    return config.get(env, config["default"])


def browser_launch_args(config_class: type[Config], headed: bool = False) -> dict:
    """
    Browser launch options for ``config_class``.

    Args:
        config_class: Configuration class in use.
        headed: True when pytest was started with ``--headed``.

    Returns:
        Keyword arguments for ``BrowserType.launch``.
    """
    return {"headless": config_class.HEADLESS and not headed}

