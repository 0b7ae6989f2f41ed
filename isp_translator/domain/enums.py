"""Domain enums for translation results."""

from enum import Enum


class TranslationSource(str, Enum):
    """Tier that produced a translation result."""

    EDGE = "edge"
    CACHE = "cache"
    AI = "ai"

    @property
    def cache_status(self) -> str:
        """Value for the X-Cache-Status response header."""
        return _CACHE_STATUS[self]


_CACHE_STATUS = {
    TranslationSource.EDGE: "HIT-EDGE",
    TranslationSource.CACHE: "HIT-STORE",
    TranslationSource.AI: "MISS",
}
