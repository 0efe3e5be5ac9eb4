"""Shared pytest fixtures for the devutils test suite.

Provides:
- blob_store: empty in-memory blob store
- fixed_clock: clock frozen at 2025-12-09 18:02:15 UTC
- settings: settings pinned to UTC rendering
- client: AsyncClient with store/clock/settings dependencies overridden
"""

import pendulum
import pytest
from httpx import ASGITransport, AsyncClient

from devutils.api.dependencies import get_blob_store, get_clock
from devutils.clock import FixedClock
from devutils.config.settings import Settings, get_settings
from devutils.storage.blob_store import InMemoryBlobStore

FROZEN_NOW = pendulum.datetime(2025, 12, 9, 18, 2, 15, tz="UTC")


@pytest.fixture
def anyio_backend() -> str:
    return "asyncio"


@pytest.fixture
def blob_store() -> InMemoryBlobStore:
    return InMemoryBlobStore()


@pytest.fixture
def fixed_clock() -> FixedClock:
    return FixedClock(FROZEN_NOW)


@pytest.fixture
def settings(tmp_path) -> Settings:
    return Settings(TIMEZONE="UTC", STORAGE_PATH=str(tmp_path / "blobs"))


@pytest.fixture
async def client(blob_store, fixed_clock, settings):
    """AsyncClient over the app with in-memory storage and a frozen clock."""
    from devutils.api.main import app

    async def _override_store():
        return blob_store

    async def _override_clock():
        return fixed_clock

    app.dependency_overrides[get_blob_store] = _override_store
    app.dependency_overrides[get_clock] = _override_clock
    app.dependency_overrides[get_settings] = lambda: settings

    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as ac:
        yield ac

    app.dependency_overrides.clear()
