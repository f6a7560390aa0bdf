"""
Data model for persisted browser session state.

This module defines the value objects the cache hands around: the
freshness classification of a state file and a handle to the state file
itself. The state content is an opaque byte string produced and consumed
by the browser automation layer; nothing here parses it.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from session_cache.filesystem import Filesystem


class StateFreshness(str, Enum):
    """Enumeration of the states a persisted session file can be in."""

    ABSENT = "absent"
    FRESH = "fresh"
    STALE = "stale"
    UNREADABLE = "unreadable"

    @property
    def needs_login(self) -> bool:
        """Whether a new login is required before the state can be used."""
        return self is not StateFreshness.FRESH


@dataclass
class PersistedSessionState:
    """
    Handle to an authenticated storage-state snapshot on disk.

    The content is loaded lazily so that reusing a fresh state costs no
    I/O beyond the freshness check; once read it is kept in memory.

    Attributes:
        path: Location of the state file (its identity).
        modified_time: Last modification time as a POSIX timestamp.
    """

    path: Path
    modified_time: float
    filesystem: "Filesystem" = field(repr=False, compare=False)
    _content: bytes | None = field(default=None, repr=False, compare=False)

    @property
    def content(self) -> bytes:
        """Raw state blob, read from disk on first access."""
        if self._content is None:
            self._content = self.filesystem.read_bytes(self.path)
        return self._content
