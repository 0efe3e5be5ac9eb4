"""Blob store ABC with in-memory and file-backed implementations.

A blob store maps string keys to string values, the same contract as
browser ``localStorage``:

- ``InMemoryBlobStore`` for tests.
- ``FileBlobStore`` keeps one UTF-8 file per key under a root directory.
"""

from __future__ import annotations

import logging
import os
import re
import tempfile
from abc import ABC, abstractmethod
from pathlib import Path

logger = logging.getLogger(__name__)

_KEY_PATTERN = re.compile(r"^[A-Za-z0-9._-]+$")


class BlobStore(ABC):
    """ABC for string blob storage keyed by name."""

    @abstractmethod
    def get(self, key: str) -> str | None: ...

    @abstractmethod
    def set(self, key: str, value: str) -> None: ...

    @abstractmethod
    def remove(self, key: str) -> None: ...

    def healthy(self) -> bool:
        """Return True if the store can currently accept writes."""
        return True


class InMemoryBlobStore(BlobStore):
    """In-memory implementation for tests."""

    def __init__(self, initial: dict[str, str] | None = None) -> None:
        self._blobs: dict[str, str] = dict(initial or {})

    def get(self, key: str) -> str | None:
        return self._blobs.get(key)

    def set(self, key: str, value: str) -> None:
        self._blobs[key] = value

    def remove(self, key: str) -> None:
        self._blobs.pop(key, None)

    def keys(self) -> list[str]:
        return list(self._blobs)


class FileBlobStore(BlobStore):
    """One file per key under ``root``.

    Writes go to a temporary file in the same directory and are moved into
    place with ``os.replace``, so readers never observe a partial blob.
    Concurrent writers to the same key are last-writer-wins.
    """

    def __init__(self, root: str | Path) -> None:
        self._root = Path(root)

    @property
    def root(self) -> Path:
        return self._root

    def _path(self, key: str) -> Path:
        if not _KEY_PATTERN.match(key) or key in {".", ".."}:
            msg = f"Invalid blob key: {key!r}"
            raise ValueError(msg)
        return self._root / key

    def get(self, key: str) -> str | None:
        path = self._path(key)
        try:
            return path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return None

    def set(self, key: str, value: str) -> None:
        path = self._path(key)
        self._root.mkdir(parents=True, exist_ok=True)
        fd, tmp_name = tempfile.mkstemp(dir=self._root, prefix=f".{key}.", suffix=".tmp")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as fh:
                fh.write(value)
            os.replace(tmp_name, path)
        except BaseException:
            Path(tmp_name).unlink(missing_ok=True)
            raise
        logger.debug("Wrote blob %s (%d chars)", key, len(value))

    def remove(self, key: str) -> None:
        self._path(key).unlink(missing_ok=True)

    def healthy(self) -> bool:
        try:
            self._root.mkdir(parents=True, exist_ok=True)
        except OSError:
            return False
        return os.access(self._root, os.W_OK)
