"""Cache administration API (dev-only): browse, edit and clear stored translations.

Enabled with CACHE_ADMIN_ENABLED; otherwise every route answers 404.
Edits go straight to the translation store; the matching edge entry is
evicted so the next store hit backfills the new value.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Request

from isp_translator.api.v1.dependencies import (
    get_edge_cache,
    get_translation_store,
    require_api_token,
    require_cache_admin,
)
from isp_translator.core.constants import ADMIN_LIST_LIMIT
from isp_translator.core.limiter import limit_admin
from isp_translator.infrastructure.cache.edge_cache import EdgeCache
from isp_translator.infrastructure.persistence.repositories import (
    TranslationRepository,
)
from isp_translator.schemas.cache_admin import (
    CacheDeleteRequest,
    CacheEntryResponse,
    CacheMutationResponse,
    CacheUpdateRequest,
)

router = APIRouter(
    dependencies=[Depends(require_cache_admin), Depends(require_api_token)],
)


@router.get("", response_model=list[CacheEntryResponse])
@limit_admin
async def list_cache(
    request: Request,
    store: Annotated[TranslationRepository, Depends(get_translation_store)],
) -> list[CacheEntryResponse]:
    """Return the newest stored translations (up to 100)."""
    entries = await store.list_recent(limit=ADMIN_LIST_LIMIT)
    return [
        CacheEntryResponse(
            cache_key=e.cache_key,
            translated_text=e.translated_text,
            created_at=e.created_at,
        )
        for e in entries
    ]


@router.post("/clear", response_model=CacheMutationResponse)
@limit_admin
async def clear_cache(
    request: Request,
    store: Annotated[TranslationRepository, Depends(get_translation_store)],
) -> CacheMutationResponse:
    """Delete every stored translation. Edge entries expire on their own TTL."""
    deleted = await store.clear()
    return CacheMutationResponse(affected=deleted)


@router.post("/delete", response_model=CacheMutationResponse)
@limit_admin
async def delete_cache_entry(
    request: Request,
    body: CacheDeleteRequest,
    store: Annotated[TranslationRepository, Depends(get_translation_store)],
    edge: Annotated[EdgeCache | None, Depends(get_edge_cache)],
) -> CacheMutationResponse:
    """Delete one stored translation by cache key."""
    removed = await store.delete(body.key)
    if edge is not None:
        await edge.delete(body.key)
    return CacheMutationResponse(affected=1 if removed else 0)


@router.post("/update", response_model=CacheMutationResponse)
@limit_admin
async def update_cache_entry(
    request: Request,
    body: CacheUpdateRequest,
    store: Annotated[TranslationRepository, Depends(get_translation_store)],
    edge: Annotated[EdgeCache | None, Depends(get_edge_cache)],
) -> CacheMutationResponse:
    """Overwrite the translated text of one stored translation."""
    changed = await store.update(body.key, body.text)
    if edge is not None:
        await edge.delete(body.key)
    return CacheMutationResponse(affected=1 if changed else 0)
