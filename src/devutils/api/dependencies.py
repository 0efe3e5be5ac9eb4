"""FastAPI dependency injection factories for stores and tool services.

Ledgers and services are built per request on top of a shared blob store,
so every request sees the latest persisted history. Tests override
``get_blob_store``, ``get_clock`` and ``get_settings``.
"""

from enum import StrEnum
from functools import lru_cache

from fastapi import Depends

from devutils.clock import Clock, SystemClock
from devutils.config.settings import Settings, get_settings
from devutils.history.ledger import HistoryLedger
from devutils.storage.blob_store import BlobStore, FileBlobStore
from devutils.tools.json_formatter import JsonFormatter
from devutils.tools.time_converter import TimeConverter


class HistoryTool(StrEnum):
    """Tools that keep a history ledger."""

    JSON = "json"
    TIME = "time"


@lru_cache
def _file_store(root: str) -> FileBlobStore:
    return FileBlobStore(root)


# ---------------------------------------------------------------------------
# Infrastructure
# ---------------------------------------------------------------------------


async def get_blob_store(
    settings: Settings = Depends(get_settings),
) -> BlobStore:
    return _file_store(settings.STORAGE_PATH)


async def get_clock(
    settings: Settings = Depends(get_settings),
) -> Clock:
    return SystemClock(settings.TIMEZONE)


# ---------------------------------------------------------------------------
# History
# ---------------------------------------------------------------------------


def _history_key(tool: HistoryTool, settings: Settings) -> str:
    if tool == HistoryTool.JSON:
        return settings.JSON_HISTORY_KEY
    return settings.TIME_HISTORY_KEY


def build_ledger(
    tool: HistoryTool,
    store: BlobStore,
    clock: Clock,
    settings: Settings,
) -> HistoryLedger:
    return HistoryLedger(
        store,
        _history_key(tool, settings),
        cap=settings.HISTORY_CAP,
        clock=clock,
    )


async def get_history_ledger(
    tool: HistoryTool,
    store: BlobStore = Depends(get_blob_store),
    clock: Clock = Depends(get_clock),
    settings: Settings = Depends(get_settings),
) -> HistoryLedger:
    return build_ledger(tool, store, clock, settings)


# ---------------------------------------------------------------------------
# Tools
# ---------------------------------------------------------------------------


async def get_json_formatter(
    store: BlobStore = Depends(get_blob_store),
    clock: Clock = Depends(get_clock),
    settings: Settings = Depends(get_settings),
) -> JsonFormatter:
    return JsonFormatter(build_ledger(HistoryTool.JSON, store, clock, settings))


async def get_time_converter(
    store: BlobStore = Depends(get_blob_store),
    clock: Clock = Depends(get_clock),
    settings: Settings = Depends(get_settings),
) -> TimeConverter:
    ledger = build_ledger(HistoryTool.TIME, store, clock, settings)
    return TimeConverter(ledger, tz=settings.TIMEZONE, clock=clock)
