"""Bounded, persisted recent-input history."""

from devutils.history.ledger import DEFAULT_HISTORY_CAP, HistoryLedger

__all__ = [
    "DEFAULT_HISTORY_CAP",
    "HistoryLedger",
]
