"""
Shared pytest fixtures for the session cache test suite.

This module provides in-memory stand-ins for the collaborators the
session state cache depends on, so unit tests run without a browser,
a real clock or the real disk.

Key Concepts Demonstrated:
- Test doubles (fakes) for time, storage and the browser
- Fixture dependencies
- Call counters on stub collaborators
"""

from __future__ import annotations

import json
from datetime import timedelta
from pathlib import Path
from unittest.mock import MagicMock

import pytest

from session_cache import SessionStateCache


START_TIME = 1_700_000_000.0
STATE_PATH = Path("/virtual/.auth/user.json")


# -----------------------------------------------------------------------------
# Fakes
# -----------------------------------------------------------------------------

class ManualClock:
    """Clock that only moves when told to."""

    def __init__(self, now: float = START_TIME):
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, delta: timedelta) -> None:
        self.now += delta.total_seconds()


class InMemoryFilesystem:
    """Dict-backed filesystem whose modification times come from a clock."""

    def __init__(self, clock: ManualClock):
        self.clock = clock
        self.files: dict[Path, tuple[bytes, float]] = {}
        self.unreadable: set[Path] = set()
        self.fail_writes = False
        self.fail_removes = False
        self.reads = 0

    def put(self, path: Path, data: bytes, modified_time: float | None = None) -> None:
        mtime = self.clock() if modified_time is None else modified_time
        self.files[Path(path)] = (data, mtime)

    def modified_time(self, path: Path) -> float:
        path = Path(path)
        if path in self.unreadable:
            raise PermissionError(13, "Permission denied", str(path))
        if path not in self.files:
            raise FileNotFoundError(2, "No such file or directory", str(path))
        return self.files[path][1]

    def read_bytes(self, path: Path) -> bytes:
        self.reads += 1
        path = Path(path)
        if path not in self.files:
            raise FileNotFoundError(2, "No such file or directory", str(path))
        return self.files[path][0]

    def write_bytes(self, path: Path, data: bytes) -> float:
        if self.fail_writes:
            raise PermissionError(13, "Permission denied", str(path))
        self.put(path, data)
        return self.clock()

    def remove(self, path: Path) -> None:
        path = Path(path)
        if self.fail_removes:
            raise PermissionError(13, "Permission denied", str(path))
        if path not in self.files:
            raise FileNotFoundError(2, "No such file or directory", str(path))
        del self.files[path]


class FakeContext:
    """Browser context double that records how it was built and closed."""

    def __init__(self, state: bytes | None, options: dict, close_error: Exception | None = None):
        self.state = state
        self.options = options
        self.close_error = close_error
        self.closed = False
        self.pages: list[MagicMock] = []

    def new_page(self) -> MagicMock:
        page = MagicMock(name="page")
        self.pages.append(page)
        return page

    def close(self) -> None:
        self.closed = True
        if self.close_error is not None:
            raise self.close_error


class RecordingBrowser:
    """``BrowserSession`` double: hands out FakeContexts and numbered states."""

    def __init__(self):
        self.contexts: list[FakeContext] = []
        self.captures = 0
        self.close_error: Exception | None = None

    def new_context(self, state: bytes | None = None, **options) -> FakeContext:
        if state is not None:
            # Same contract as the Playwright adapter: undecodable state raises ValueError
            json.loads(state.decode("utf-8"))
        context = FakeContext(state, options, self.close_error)
        self.contexts.append(context)
        return context

    def capture_state(self, context: FakeContext) -> bytes:
        self.captures += 1
        return json.dumps(
            {
                "cookies": [{"name": "session-username", "value": f"admin-{self.captures}"}],
                "origins": [],
            }
        ).encode("utf-8")

    @property
    def seeded_contexts(self) -> list[FakeContext]:
        return [context for context in self.contexts if context.state is not None]


class StubLogin:
    """Login procedure double with a call counter and optional failure."""

    def __init__(self):
        self.calls = 0
        self.error: Exception | None = None

    def __call__(self, page) -> None:
        self.calls += 1
        if self.error is not None:
            raise self.error


# -----------------------------------------------------------------------------
# Fixtures
# -----------------------------------------------------------------------------

@pytest.fixture
def clock() -> ManualClock:
    return ManualClock()


@pytest.fixture
def filesystem(clock: ManualClock) -> InMemoryFilesystem:
    return InMemoryFilesystem(clock)


@pytest.fixture
def fake_browser() -> RecordingBrowser:
    return RecordingBrowser()


@pytest.fixture
def login() -> StubLogin:
    return StubLogin()


@pytest.fixture
def cache(fake_browser, login, clock, filesystem) -> SessionStateCache:
    """
    SessionStateCache wired to in-memory fakes.

    Returns:
        Cache instance whose collaborators are the ``fake_browser``,
        ``login``, ``clock`` and ``filesystem`` fixtures.
    """
    return SessionStateCache(fake_browser, login, clock=clock, filesystem=filesystem)


@pytest.fixture
def state_path() -> Path:
    return STATE_PATH
