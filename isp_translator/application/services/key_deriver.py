"""Cache key derivation for (text, locale) pairs (digest of the concatenation)."""

from __future__ import annotations

import hashlib
from abc import ABC, abstractmethod


class HashAlgorithm(ABC):
    """Abstract hash algorithm (OCP)."""

    @abstractmethod
    def hash(self, data: str) -> str:
        """Compute lowercase hex digest of input string."""
        ...


class MD5Algorithm(HashAlgorithm):
    """MD5 implementation (128-bit). Used for keying only, not for security."""

    def hash(self, data: str) -> str:
        return hashlib.md5(data.encode("utf-8"), usedforsecurity=False).hexdigest()


class KeyDeriver:
    """Single source of truth for cache keys (IKeyDeriver).

    The key is the digest of text followed directly by locale, with text used
    exactly as received. Keys match rows written by earlier deployments.
    """

    def __init__(self, algorithm: HashAlgorithm | None = None) -> None:
        self.algorithm = algorithm or MD5Algorithm()

    def derive(self, text: str, locale: str) -> str:
        return self.algorithm.hash(text + locale)


_default_deriver = KeyDeriver()


def derive_cache_key(text: str, locale: str) -> str:
    """Return the MD5 cache key for (text, locale) as 32 lowercase hex chars."""
    return _default_deriver.derive(text, locale)
