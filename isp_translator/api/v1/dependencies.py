"""Presentation-layer dependency injection (composition root).

Provides FastAPI Depends() for the cache tiers, the transformation provider,
the background registry and the CacheCoordinator built from them. Routes
depend only on these dependencies, not on infrastructure directly.

Long-lived objects (HTTP client, edge cache, background registry) live on
app.state and are created in create_app()/lifespan; per-request objects are
cheap wrappers around them.
"""

import hmac
from typing import Annotated

from fastapi import Depends, Header, Request

from isp_translator.application.use_cases.translate import CacheCoordinator
from isp_translator.core.config import get_settings
from isp_translator.domain.exceptions import (
    ResourceNotFoundException,
    UnauthorizedException,
)
from isp_translator.infrastructure.background import BackgroundTaskRegistry
from isp_translator.infrastructure.cache.edge_cache import EdgeCache
from isp_translator.infrastructure.external.ai import ChatCompletionProvider
from isp_translator.infrastructure.persistence.database import get_session_factory
from isp_translator.infrastructure.persistence.repositories import (
    TranslationRepository,
)


def require_api_token(
    authorization: Annotated[str | None, Header()] = None,
) -> None:
    """Reject the request unless Authorization equals API_TOKEN (raw value, constant-time)."""
    expected = get_settings().api_token.get_secret_value()
    if not authorization or not hmac.compare_digest(
        authorization.encode(), expected.encode()
    ):
        raise UnauthorizedException()


def require_cache_admin() -> None:
    """Hide the cache administration routes unless CACHE_ADMIN_ENABLED is set."""
    if not get_settings().cache_admin_enabled:
        raise ResourceNotFoundException("route", "cache")


def get_background_tasks(request: Request) -> BackgroundTaskRegistry:
    """Process-wide registry for write-back tasks (drained at shutdown)."""
    return request.app.state.background_tasks


async def get_edge_cache(request: Request) -> EdgeCache | None:
    """Edge cache when enabled and connected; None runs the store-only variant.

    A lost connection is retried here, throttled by the cache itself.
    """
    edge_cache: EdgeCache | None = getattr(request.app.state, "edge_cache", None)
    if edge_cache is None or not await edge_cache.ensure_connected():
        return None
    return edge_cache


def get_translation_store() -> TranslationRepository:
    """Translation repository over the process-wide session factory."""
    return TranslationRepository(get_session_factory())


def get_transformation_provider(request: Request) -> ChatCompletionProvider:
    """Chat completions provider using the shared HTTP client when available."""
    settings = get_settings()
    return ChatCompletionProvider(
        base_url=settings.ai_api_url,
        api_token=settings.ai_api_token.get_secret_value(),
        model=settings.ai_model,
        http_client=getattr(request.app.state, "http_client", None),
        timeout_seconds=settings.ai_timeout_seconds,
    )


def get_cache_coordinator(
    store: Annotated[TranslationRepository, Depends(get_translation_store)],
    provider: Annotated[ChatCompletionProvider, Depends(get_transformation_provider)],
    scheduler: Annotated[BackgroundTaskRegistry, Depends(get_background_tasks)],
    edge: Annotated[EdgeCache | None, Depends(get_edge_cache)],
) -> CacheCoordinator:
    """Build the request-local CacheCoordinator (composition root)."""
    return CacheCoordinator(
        store=store,
        provider=provider,
        scheduler=scheduler,
        edge=edge,
    )
