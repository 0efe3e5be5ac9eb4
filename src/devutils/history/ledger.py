"""History ledger: most-recent-first record of accepted tool inputs.

One ledger exists per storage key. The ledger is loaded lazily from its
blob store on first use and the whole sequence is written back after every
mutation. There is no other durability mechanism.

Rules:

- Inputs are trimmed; empty inputs are never recorded.
- Adjacent-duplicate suppression: an input equal to the current head entry
  is ignored. Equal inputs further back are kept.
- New entries go to the front; the ledger is truncated to ``cap`` after
  each insert, so the oldest entries are evicted first.
- ``clear`` removes the blob key entirely rather than writing ``[]``.

Load policy is fail-open: a missing key or an undecodable blob both read
as an empty history. Decode failures are logged, never raised.
"""

from __future__ import annotations

import logging
from collections.abc import Callable

from pydantic import TypeAdapter, ValidationError

from devutils.clock import Clock, SystemClock, format_local
from devutils.models.common import new_entry_id
from devutils.models.history import HistoryEntry
from devutils.storage.blob_store import BlobStore

logger = logging.getLogger(__name__)

DEFAULT_HISTORY_CAP = 100

_ENTRIES_ADAPTER = TypeAdapter(list[HistoryEntry])


class HistoryLedger:
    """Bounded, persisted history for one tool.

    Parameters
    ----------
    store:
        Blob store holding the serialized ledger.
    key:
        Storage key; each tool uses its own.
    cap:
        Maximum number of entries retained.
    clock:
        Source of entry creation timestamps (local time).
    id_factory:
        Zero-argument callable producing unique entry ids.
    """

    def __init__(
        self,
        store: BlobStore,
        key: str,
        cap: int = DEFAULT_HISTORY_CAP,
        clock: Clock | None = None,
        id_factory: Callable[[], str] | None = None,
    ) -> None:
        if cap < 1:
            msg = f"History cap must be at least 1, got {cap}."
            raise ValueError(msg)
        self._store = store
        self._key = key
        self._cap = cap
        self._clock = clock or SystemClock()
        self._id_factory = id_factory or new_entry_id
        self._entries: list[HistoryEntry] | None = None

    @property
    def key(self) -> str:
        return self._key

    @property
    def cap(self) -> int:
        return self._cap

    # ------------------------------------------------------------------
    # Reads
    # ------------------------------------------------------------------

    def load(self) -> list[HistoryEntry]:
        """Read the ledger from the blob store, replacing the cached copy.

        Returns an empty list when the key is missing or its value cannot be
        decoded as a list of entries.
        """
        self._entries = self._read()
        return list(self._entries)

    def entries(self) -> list[HistoryEntry]:
        """Return the cached ledger, loading it on first use."""
        return list(self._ensure_loaded())

    def get(self, entry_id: str) -> HistoryEntry | None:
        for entry in self._ensure_loaded():
            if entry.entry_id == entry_id:
                return entry
        return None

    def restore(self, entry: HistoryEntry) -> str:
        """Return the stored input text for re-populating a tool's input."""
        return entry.input_text

    # ------------------------------------------------------------------
    # Mutations
    # ------------------------------------------------------------------

    def record(self, raw_input: str) -> HistoryEntry | None:
        """Record an accepted input at the head of the ledger.

        Returns the new entry, or ``None`` when the input was empty or equal
        to the most recent entry.
        """
        text = raw_input.strip()
        if not text:
            return None

        entries = self._ensure_loaded()
        if entries and entries[0].input_text.strip() == text:
            return None

        entry = HistoryEntry(
            entry_id=self._id_factory(),
            input_text=text,
            timestamp=format_local(self._clock.now()),
        )
        self._entries = [entry, *entries][: self._cap]
        self._persist()
        logger.debug("Recorded history entry %s in %s", entry.entry_id, self._key)
        return entry

    def remove(self, entry_id: str) -> bool:
        """Delete one entry by id. Returns False if no such entry exists."""
        entries = self._ensure_loaded()
        remaining = [e for e in entries if e.entry_id != entry_id]
        if len(remaining) == len(entries):
            return False
        self._entries = remaining
        self._persist()
        logger.debug("Removed history entry %s from %s", entry_id, self._key)
        return True

    def clear(self) -> None:
        """Empty the ledger and delete its blob."""
        self._entries = []
        self._store.remove(self._key)
        logger.debug("Cleared history %s", self._key)

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _read(self) -> list[HistoryEntry]:
        try:
            raw = self._store.get(self._key)
        except UnicodeDecodeError as exc:
            logger.warning(
                "History blob %s is unreadable; treating as empty (%s)",
                self._key,
                exc.reason,
            )
            return []
        if raw is None:
            return []
        try:
            return _ENTRIES_ADAPTER.validate_json(raw)
        except ValidationError as exc:
            logger.warning(
                "History blob %s is unreadable; treating as empty (%d errors)",
                self._key,
                exc.error_count(),
            )
            return []

    def _ensure_loaded(self) -> list[HistoryEntry]:
        if self._entries is None:
            self._entries = self._read()
        return self._entries

    def _persist(self) -> None:
        blob = _ENTRIES_ADAPTER.dump_json(self._ensure_loaded(), by_alias=True)
        self._store.set(self._key, blob.decode("utf-8"))

    def __len__(self) -> int:
        return len(self._ensure_loaded())
