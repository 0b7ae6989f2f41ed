"""Translate use case: tiered cache-aside lookup over edge cache, store and provider.

Tiers are consulted cheapest first (edge, then persistent store, then the
provider). A provider result is truncated before any tier sees it and is
written back in the background; the response never waits on those writes
and never sees their outcome.

No locking or single-flight: two concurrent misses for the same key may both
call the provider and both attempt an insert. The store's unique key rejects
the second row.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from isp_translator.application.dtos.translation import TranslationResult
from isp_translator.application.services.key_deriver import KeyDeriver
from isp_translator.core.constants import MAX_TEXT_LENGTH, MAX_TRANSLATION_LENGTH
from isp_translator.domain.enums import TranslationSource
from isp_translator.domain.exceptions import EdgeWriteError, ValidationException

if TYPE_CHECKING:
    from isp_translator.application.interfaces.repositories import ITranslationStore
    from isp_translator.application.interfaces.services import (
        IBackgroundScheduler,
        IEdgeCache,
        IKeyDeriver,
        ITransformationProvider,
    )

logger = logging.getLogger(__name__)


def validate_translation_request(text: str, locale: str) -> None:
    """Raise ValidationException for empty text/locale or text over MAX_TEXT_LENGTH."""
    if not text:
        raise ValidationException("Missing text or locale", field="text")
    if not locale:
        raise ValidationException("Missing text or locale", field="locale")
    if len(text) > MAX_TEXT_LENGTH:
        raise ValidationException(
            f"Text too long (max {MAX_TEXT_LENGTH} characters)", field="text"
        )


def truncate_translation(value: str) -> str:
    """Clip provider output to MAX_TRANSLATION_LENGTH characters."""
    return value[:MAX_TRANSLATION_LENGTH]


class CacheCoordinator:
    """Resolves one translation request across the cache tiers.

    Instances hold no per-request state and may be built per request.
    When edge is None the edge tier is skipped entirely (two-tier variant)
    and the "edge" source is never produced.
    """

    def __init__(
        self,
        store: "ITranslationStore",
        provider: "ITransformationProvider",
        scheduler: "IBackgroundScheduler",
        edge: "IEdgeCache | None" = None,
        key_deriver: "IKeyDeriver | None" = None,
    ) -> None:
        self._store = store
        self._provider = provider
        self._scheduler = scheduler
        self._edge = edge
        self._key_deriver = key_deriver or KeyDeriver()

    async def translate(self, text: str, locale: str) -> TranslationResult:
        """Return the translation of text for locale, computing it on a full miss.

        Raises:
            ValidationException: text/locale empty or text too long; no tier touched.
            StoreReadError: persistent store read failed.
            UpstreamTransformError: provider failed; nothing is written back.
        """
        validate_translation_request(text, locale)
        cache_key = self._key_deriver.derive(text, locale)

        if self._edge is not None:
            cached = await self._edge.probe(cache_key)
            if cached is not None:
                logger.debug("Edge HIT: %s", cache_key)
                return TranslationResult(
                    original=text, translated=cached, source=TranslationSource.EDGE
                )

        entry = await self._store.get(cache_key)
        if entry is not None:
            logger.debug("Store HIT: %s", cache_key)
            self._schedule_edge_backfill(cache_key, entry.translated_text)
            return TranslationResult(
                original=text,
                translated=entry.translated_text,
                source=TranslationSource.CACHE,
            )

        logger.debug("Cache MISS: %s (locale=%s)", cache_key, locale)
        translated = truncate_translation(await self._provider.transform(text, locale))
        self._scheduler.schedule(
            self._persist(cache_key, translated), name=f"store-put:{cache_key}"
        )
        self._schedule_edge_backfill(cache_key, translated)
        return TranslationResult(
            original=text, translated=translated, source=TranslationSource.AI
        )

    def _schedule_edge_backfill(self, cache_key: str, translated_text: str) -> None:
        if self._edge is None:
            return
        self._scheduler.schedule(
            self._backfill_edge(cache_key, translated_text),
            name=f"edge-store:{cache_key}",
        )

    async def _persist(self, cache_key: str, translated_text: str) -> None:
        await self._store.put(cache_key, translated_text)
        logger.debug("Store PUT: %s", cache_key)

    async def _backfill_edge(self, cache_key: str, translated_text: str) -> None:
        if self._edge is None:
            return
        if not await self._edge.store(cache_key, translated_text):
            raise EdgeWriteError(cache_key)
