"""Repository interfaces (ports) for the application layer.

Protocols define contracts that infrastructure implementations must fulfill (DIP).
All types reference application DTOs only; no infrastructure imports.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from isp_translator.application.dtos.translation import TranslationEntry


# Persistent translation store interface
class ITranslationStore(Protocol):
    """Protocol for the authoritative keyed store of computed translations."""

    async def get(self, cache_key: str) -> TranslationEntry | None:
        """Point lookup by unique key. Raises StoreReadError when the store is unreachable."""

    async def put(self, cache_key: str, translated_text: str) -> None:
        """Insert a row. Raises StoreWriteError (duplicate=True on a lost insert race)."""


# Administrative surface over the same table (dev-only endpoints)
class ITranslationAdminStore(ITranslationStore, Protocol):
    """Protocol for browsing and editing stored translations."""

    async def list_recent(self, limit: int = 100) -> list[TranslationEntry]:
        """Return newest rows first."""

    async def delete(self, cache_key: str) -> bool:
        """Delete one row. Returns True if a row was removed."""

    async def update(self, cache_key: str, translated_text: str) -> bool:
        """Overwrite translated_text. Returns True if a row was changed."""

    async def clear(self) -> int:
        """Delete all rows. Returns count deleted."""
