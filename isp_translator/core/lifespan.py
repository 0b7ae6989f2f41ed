"""Application lifespan: startup and shutdown.

Single place for all startup/shutdown logic (SRP). Used by main.py;
no business logic here, only wiring of infrastructure (HTTP client,
edge cache, database tables, background write-back drain, engine dispose).
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

import httpx
from fastapi import FastAPI

from isp_translator.core.config import get_settings
from isp_translator.infrastructure.background import BackgroundTaskRegistry

logger = logging.getLogger(__name__)


@asynccontextmanager
async def create_lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Run startup then yield; on exit run shutdown.

    Startup order: shared HTTP client, edge cache (if enabled), tables
    (if auto-create). Shutdown order: drain write-back tasks, HTTP client
    close, edge cache disconnect, SQL engine dispose. Draining comes first
    because pending write-backs still need the store and the edge cache.
    """
    settings = get_settings()

    # ---- Startup ----
    # Shared HTTP client for the transformation provider (connection reuse).
    app.state.http_client = httpx.AsyncClient(timeout=settings.ai_timeout_seconds)

    if getattr(app.state, "background_tasks", None) is None:
        app.state.background_tasks = BackgroundTaskRegistry()

    if settings.redis_enabled:
        from isp_translator.infrastructure.cache.edge_cache import EdgeCache

        edge_cache = EdgeCache()
        await edge_cache.connect()
        app.state.edge_cache = edge_cache
    else:
        app.state.edge_cache = None
        logger.info("Edge cache disabled; running with persistent store only")

    if settings.database_auto_create:
        from isp_translator.infrastructure.persistence.database import create_tables

        await create_tables()

    yield

    # ---- Shutdown ----
    registry: BackgroundTaskRegistry = app.state.background_tasks
    if registry.pending:
        logger.info("Draining %d background write-back task(s)", registry.pending)
    abandoned = await registry.drain(timeout=settings.background_drain_timeout_seconds)
    if abandoned:
        logger.warning("Abandoned %d background task(s) at shutdown", abandoned)

    if getattr(app.state, "http_client", None) is not None:
        await app.state.http_client.aclose()
        app.state.http_client = None
        logger.info("HTTP client closed")

    if getattr(app.state, "edge_cache", None) is not None:
        await app.state.edge_cache.disconnect()
        app.state.edge_cache = None

    from isp_translator.infrastructure.persistence.database import dispose_engine

    await dispose_engine()
