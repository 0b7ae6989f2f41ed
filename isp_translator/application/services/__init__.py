"""Application services: cache key derivation."""

from isp_translator.application.services.key_deriver import (
    HashAlgorithm,
    KeyDeriver,
    MD5Algorithm,
    derive_cache_key,
)

__all__ = [
    "HashAlgorithm",
    "KeyDeriver",
    "MD5Algorithm",
    "derive_cache_key",
]
