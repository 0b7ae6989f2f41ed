"""DTOs for the translation path (persisted entry and per-request result)."""

from dataclasses import asdict, dataclass
from datetime import datetime
from typing import Any

from isp_translator.domain.enums import TranslationSource


@dataclass(frozen=True)
class TranslationEntry:
    """Row of the persistent store. Created once per cache key, never updated by the core path."""

    cache_key: str
    translated_text: str
    created_at: datetime | None = None


@dataclass(frozen=True)
class TranslationResult:
    """Response value built fresh for each request; never persisted as a whole."""

    original: str
    translated: str
    source: TranslationSource

    def to_dict(self) -> dict[str, Any]:
        data = asdict(self)
        data["source"] = self.source.value
        return data
