"""TranslationRepository against an in-memory SQLite database (aiosqlite)."""

import pytest
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from isp_translator.domain.exceptions import StoreReadError, StoreWriteError
from isp_translator.infrastructure.persistence.database import Base
from isp_translator.infrastructure.persistence.models import Translation  # noqa: F401
from isp_translator.infrastructure.persistence.repositories import (
    TranslationRepository,
)

KEY_A = "755698b2245108943deeee514fe8c0ed"
KEY_B = "30fb8bde76baa6e2f1c54e524a23d0e5"


def _memory_engine():
    return create_async_engine(
        "sqlite+aiosqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )


@pytest.fixture
async def repo() -> TranslationRepository:
    engine = _memory_engine()
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    factory = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
    yield TranslationRepository(factory)
    await engine.dispose()


async def test_get_missing_returns_none(repo: TranslationRepository) -> None:
    assert await repo.get(KEY_A) is None


async def test_put_then_get(repo: TranslationRepository) -> None:
    await repo.put(KEY_A, "中国电信")
    entry = await repo.get(KEY_A)
    assert entry is not None
    assert entry.cache_key == KEY_A
    assert entry.translated_text == "中国电信"
    assert entry.created_at is not None


async def test_duplicate_put_raises_and_keeps_first_row(repo: TranslationRepository) -> None:
    await repo.put(KEY_A, "first")
    with pytest.raises(StoreWriteError) as exc_info:
        await repo.put(KEY_A, "second")
    assert exc_info.value.duplicate is True
    entry = await repo.get(KEY_A)
    assert entry is not None
    assert entry.translated_text == "first"


async def test_list_recent_newest_first(repo: TranslationRepository) -> None:
    await repo.put(KEY_A, "a")
    await repo.put(KEY_B, "b")
    entries = await repo.list_recent()
    assert [e.cache_key for e in entries] == [KEY_B, KEY_A]
    assert len(await repo.list_recent(limit=1)) == 1


async def test_update_and_delete(repo: TranslationRepository) -> None:
    await repo.put(KEY_A, "old")
    assert await repo.update(KEY_A, "new") is True
    entry = await repo.get(KEY_A)
    assert entry is not None and entry.translated_text == "new"
    assert await repo.update(KEY_B, "missing") is False
    assert await repo.delete(KEY_A) is True
    assert await repo.delete(KEY_A) is False
    assert await repo.get(KEY_A) is None


async def test_clear_returns_count(repo: TranslationRepository) -> None:
    await repo.put(KEY_A, "a")
    await repo.put(KEY_B, "b")
    assert await repo.clear() == 2
    assert await repo.list_recent() == []


async def test_read_failure_raises_store_read_error() -> None:
    """Missing table surfaces as StoreReadError, not a driver exception."""
    engine = _memory_engine()
    factory = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
    try:
        with pytest.raises(StoreReadError):
            await TranslationRepository(factory).get(KEY_A)
    finally:
        await engine.dispose()
