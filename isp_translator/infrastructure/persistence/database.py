"""Persistence: async engine, session factory, and Base for SQLAlchemy ORM.

Production runs on PostgreSQL (asyncpg) with schema managed by Alembic
migrations. Local development and tests may use SQLite (aiosqlite); set
DATABASE_AUTO_CREATE=true to create tables at startup instead of migrating.

Engine and session factory are created lazily on first use so import does
not trigger Settings validation. Repositories receive the session factory,
not a session: write-back runs after the request scope has closed and opens
its own session.
"""

import logging
from typing import Any

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.orm import DeclarativeBase

from isp_translator.core.config import get_settings

logger = logging.getLogger(__name__)

# Set by _ensure_engine() on first use; avoids get_settings() at import time.
engine: Any = None
AsyncSessionLocal: async_sessionmaker[AsyncSession] | None = None


def _ensure_engine() -> None:
    """Create engine and AsyncSessionLocal on first use."""
    global engine, AsyncSessionLocal
    if AsyncSessionLocal is not None:
        return
    settings = get_settings()
    engine_kwargs: dict[str, Any] = {
        "echo": settings.database_echo,
        "pool_pre_ping": True,
    }
    if settings.is_sqlite:
        logging.getLogger("aiosqlite").setLevel(logging.WARNING)
    else:
        engine_kwargs["pool_size"] = (
            settings.db_pool_size if settings.db_pool_size is not None else 20
        )
        engine_kwargs["max_overflow"] = (
            settings.db_max_overflow if settings.db_max_overflow is not None else 30
        )
        engine_kwargs["pool_recycle"] = 3600
    engine = create_async_engine(settings.database_url, **engine_kwargs)
    AsyncSessionLocal = async_sessionmaker(
        bind=engine,
        class_=AsyncSession,
        expire_on_commit=False,
        autoflush=False,
        autocommit=False,
    )


class Base(DeclarativeBase):
    """Base class for all SQLAlchemy declarative models."""


def get_session_factory() -> async_sessionmaker[AsyncSession]:
    """Return the process-wide session factory, creating the engine on first call."""
    _ensure_engine()
    assert AsyncSessionLocal is not None
    return AsyncSessionLocal


async def create_tables() -> None:
    """Create all tables (DATABASE_AUTO_CREATE). Production uses Alembic instead."""
    from isp_translator.infrastructure.persistence import models  # noqa: F401  registers tables

    _ensure_engine()
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    logger.info("Database tables ensured")


async def dispose_engine() -> None:
    """Dispose the engine and forget the session factory. Call on app shutdown."""
    global engine, AsyncSessionLocal
    if engine is not None:
        await engine.dispose()
        logger.info("Database engine disposed")
    engine = None
    AsyncSessionLocal = None
