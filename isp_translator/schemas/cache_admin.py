"""Cache administration API schemas (dev-only endpoints)."""

from datetime import datetime

from pydantic import BaseModel, Field

from isp_translator.core.constants import MAX_TRANSLATION_LENGTH


class CacheEntryResponse(BaseModel):
    """One stored translation."""

    cache_key: str
    translated_text: str
    created_at: datetime | None = None


class CacheDeleteRequest(BaseModel):
    """Request body for POST /cache/delete."""

    key: str = Field(..., min_length=1, description="Cache key (MD5 hex digest)")


class CacheUpdateRequest(BaseModel):
    """Request body for POST /cache/update."""

    key: str = Field(..., min_length=1, description="Cache key (MD5 hex digest)")
    text: str = Field(
        ...,
        min_length=1,
        max_length=MAX_TRANSLATION_LENGTH,
        description="Replacement translated text",
    )


class CacheMutationResponse(BaseModel):
    """Response for cache clear/delete/update."""

    success: bool = True
    affected: int = Field(default=0, description="Rows changed")
