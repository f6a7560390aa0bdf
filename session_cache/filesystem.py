"""
Filesystem access used by the session state cache.

The cache only needs four primitives (stat, read, write, delete), so
they are gathered behind a small protocol. ``LocalFilesystem`` talks to
the real disk; tests substitute an in-memory implementation.
"""

from __future__ import annotations

import os
import tempfile
from pathlib import Path
from typing import Protocol


class Filesystem(Protocol):
    """Storage primitives required by the cache."""

    def modified_time(self, path: Path) -> float:
        """Return the modification time of ``path`` (raises ``OSError``)."""

    def read_bytes(self, path: Path) -> bytes:
        """Return the full content of ``path`` (raises ``OSError``)."""

    def write_bytes(self, path: Path, data: bytes) -> float:
        """Replace ``path`` with ``data`` and return the new modification time."""

    def remove(self, path: Path) -> None:
        """Delete ``path`` (raises ``FileNotFoundError`` when missing)."""


class LocalFilesystem:
    """Filesystem backed by the local disk."""

    def modified_time(self, path: Path) -> float:
        return os.stat(path).st_mtime

    def read_bytes(self, path: Path) -> bytes:
        return Path(path).read_bytes()

    def write_bytes(self, path: Path, data: bytes) -> float:
        """
        Write ``data`` to ``path``, creating parent directories as needed.

        The content goes to a temporary sibling first and is then renamed
        over the target, so readers see either the old file or the new
        one and never a merge of both.

        Args:
            path: Destination file.
            data: Complete new content.

        Returns:
            Modification time of the written file.
        """
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)

        fd, tmp_name = tempfile.mkstemp(dir=path.parent, prefix=f".{path.name}.", suffix=".tmp")
        try:
            with os.fdopen(fd, "wb") as handle:
                handle.write(data)
            os.replace(tmp_name, path)
        except BaseException:
            if os.path.exists(tmp_name):
                os.unlink(tmp_name)
            raise
        return os.stat(path).st_mtime

    def remove(self, path: Path) -> None:
        os.unlink(path)
