"""Translation store (SQLAlchemy). Authoritative tier behind the edge cache.

Each operation opens its own session from the factory: reads run on the
request path, inserts run as detached write-back after the response.
"""

from __future__ import annotations

import logging

from sqlalchemy import delete, select, update
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from isp_translator.application.dtos.translation import TranslationEntry
from isp_translator.core.constants import ADMIN_LIST_LIMIT
from isp_translator.domain.exceptions import StoreReadError, StoreWriteError
from isp_translator.infrastructure.persistence.models.translation import Translation

logger = logging.getLogger(__name__)


def _to_entry(row: Translation) -> TranslationEntry:
    return TranslationEntry(
        cache_key=row.cache_key,
        translated_text=row.translated_text,
        created_at=row.created_at,
    )


class TranslationRepository:
    """Keyed read/insert over the translations table (ITranslationAdminStore)."""

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]) -> None:
        self._session_factory = session_factory

    async def get(self, cache_key: str) -> TranslationEntry | None:
        """Return the entry for cache_key, or None. Raises StoreReadError on driver errors."""
        try:
            async with self._session_factory() as session:
                result = await session.execute(
                    select(Translation).where(Translation.cache_key == cache_key)
                )
                row = result.scalar_one_or_none()
        except SQLAlchemyError as e:
            logger.warning("Translation store read failed for %s: %s", cache_key, e)
            raise StoreReadError(cache_key, str(e)) from e
        return _to_entry(row) if row is not None else None

    async def put(self, cache_key: str, translated_text: str) -> None:
        """Insert a row for cache_key.

        Raises:
            StoreWriteError: duplicate=True when the key already exists (lost insert
                race between concurrent misses); duplicate=False for other failures.
        """
        try:
            async with self._session_factory() as session:
                async with session.begin():
                    session.add(
                        Translation(cache_key=cache_key, translated_text=translated_text)
                    )
        except IntegrityError as e:
            raise StoreWriteError(cache_key, str(e.orig), duplicate=True) from e
        except SQLAlchemyError as e:
            raise StoreWriteError(cache_key, str(e)) from e

    async def list_recent(self, limit: int = ADMIN_LIST_LIMIT) -> list[TranslationEntry]:
        """Return up to limit rows, newest first."""
        try:
            async with self._session_factory() as session:
                result = await session.execute(
                    select(Translation)
                    .order_by(Translation.created_at.desc(), Translation.id.desc())
                    .limit(limit)
                )
                rows = list(result.scalars().all())
        except SQLAlchemyError as e:
            raise StoreReadError("*", str(e)) from e
        return [_to_entry(row) for row in rows]

    async def delete(self, cache_key: str) -> bool:
        """Delete the row for cache_key. Returns True if a row was removed."""
        try:
            async with self._session_factory() as session:
                async with session.begin():
                    result = await session.execute(
                        delete(Translation).where(Translation.cache_key == cache_key)
                    )
        except SQLAlchemyError as e:
            raise StoreWriteError(cache_key, str(e)) from e
        return (result.rowcount or 0) > 0

    async def update(self, cache_key: str, translated_text: str) -> bool:
        """Overwrite translated_text for cache_key. Returns True if a row was changed."""
        try:
            async with self._session_factory() as session:
                async with session.begin():
                    result = await session.execute(
                        update(Translation)
                        .where(Translation.cache_key == cache_key)
                        .values(translated_text=translated_text)
                    )
        except SQLAlchemyError as e:
            raise StoreWriteError(cache_key, str(e)) from e
        return (result.rowcount or 0) > 0

    async def clear(self) -> int:
        """Delete every row. Returns count deleted."""
        try:
            async with self._session_factory() as session:
                async with session.begin():
                    result = await session.execute(delete(Translation))
        except SQLAlchemyError as e:
            raise StoreWriteError("*", str(e)) from e
        deleted = result.rowcount or 0
        logger.warning("Translation store CLEARED: %s rows deleted", deleted)
        return deleted
