"""Service interfaces (ports) for the application layer.

Protocols define contracts for the cache tiers, the transformation
provider and the background runner used by the coordinator (DIP).
"""

from __future__ import annotations

from collections.abc import Coroutine
from typing import Any, Protocol


# Key deriver interface
class IKeyDeriver(Protocol):
    """Protocol for cache key derivation (pure, deterministic)."""

    def derive(self, text: str, locale: str) -> str:
        """Return the cache key for (text, locale)."""


# Edge cache interface
class IEdgeCache(Protocol):
    """Protocol for the advisory fast tier. Never raises; errors read as a miss."""

    async def probe(self, cache_key: str) -> str | None:
        """Return cached translated text or None (absent or unavailable)."""

    async def store(self, cache_key: str, value: str) -> bool:
        """Best-effort store. Returns False when the write was not achieved."""


# Transformation provider interface
class ITransformationProvider(Protocol):
    """Protocol for the slow external translation call."""

    async def transform(self, text: str, locale: str) -> str:
        """Return translated text. Raises UpstreamTransformError on any failure."""


# Background runner interface
class IBackgroundScheduler(Protocol):
    """Protocol for detached work that outlives the request but not the process."""

    def schedule(self, coro: Coroutine[Any, Any, Any], name: str) -> None:
        """Run coro in the background; failures are logged, never raised."""
