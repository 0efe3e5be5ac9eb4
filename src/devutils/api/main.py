"""FastAPI application entry point for devutils."""

import logging

import structlog
from fastapi import Depends, FastAPI

from devutils import __version__
from devutils.api.dependencies import get_blob_store
from devutils.api.history import router as history_router
from devutils.api.json_tool import router as json_router
from devutils.api.time_tool import router as time_router
from devutils.config.settings import Environment, get_settings
from devutils.storage.blob_store import BlobStore

APP_VERSION = __version__

settings = get_settings()

_LOG_NAME_TO_LEVEL: dict[str, int] = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}

# --- Structured logging ---
structlog.configure(
    processors=[
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.dev.ConsoleRenderer() if settings.ENVIRONMENT == Environment.DEV
        else structlog.processors.JSONRenderer(),
    ],
    wrapper_class=structlog.make_filtering_bound_logger(
        _LOG_NAME_TO_LEVEL[settings.LOG_LEVEL.value],
    ),
    context_class=dict,
    logger_factory=structlog.PrintLoggerFactory(),
    cache_logger_on_first_use=True,
)

logger: structlog.stdlib.BoundLogger = structlog.get_logger()

# --- FastAPI app ---
app = FastAPI(
    title="devutils API",
    description="JSON formatter and timestamp converter with input history.",
    version=APP_VERSION,
)

app.include_router(json_router)
app.include_router(time_router)
app.include_router(history_router)

logger.info(
    "app_configured",
    environment=settings.ENVIRONMENT.value,
    storage_path=settings.STORAGE_PATH,
)


# --- Infrastructure Endpoints ---


@app.get("/health")
async def health_check(store: BlobStore = Depends(get_blob_store)) -> dict:
    """Liveness check, including the blob store.

    Returns 200 always (degraded status if the store is unusable).
    """
    checks: dict[str, bool] = {"api": True, "storage": store.healthy()}
    all_ok = all(checks.values())

    return {
        "status": "ok" if all_ok else "degraded",
        "version": APP_VERSION,
        "environment": settings.ENVIRONMENT.value,
        "checks": checks,
    }


@app.get("/api/version")
async def get_version() -> dict[str, str]:
    """Return application name, version, and environment."""
    return {
        "name": "devutils",
        "version": APP_VERSION,
        "environment": settings.ENVIRONMENT.value,
    }
