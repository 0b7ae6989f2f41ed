"""API request/response schemas (Pydantic)."""

from isp_translator.schemas.cache_admin import (
    CacheDeleteRequest,
    CacheEntryResponse,
    CacheMutationResponse,
    CacheUpdateRequest,
)
from isp_translator.schemas.health import HealthResponse
from isp_translator.schemas.translation import TranslateRequest, TranslateResponse

__all__ = [
    "CacheDeleteRequest",
    "CacheEntryResponse",
    "CacheMutationResponse",
    "CacheUpdateRequest",
    "HealthResponse",
    "TranslateRequest",
    "TranslateResponse",
]
