"""Edge cache key builders. Single place for key format (DRY).

Cache keys from the key deriver are lowercase hex and never contain
CACHE_KEY_SEP; anything else is rejected to avoid ambiguous keys.
"""

from isp_translator.core.constants import (
    CACHE_KEY_SEP,
    CACHE_PREFIX_EDGE,
    CACHE_PREFIX_TRANSLATION,
)


def _validate_key_component(value: str, name: str) -> None:
    """Raise ValueError if value is empty or contains the cache key separator.

    Args:
        value: String component used in a cache key.
        name: Name of the component (for error message).

    Raises:
        ValueError: If value is empty or contains CACHE_KEY_SEP.
    """
    if not value or CACHE_KEY_SEP in value:
        raise ValueError(
            f"Cache key component {name!r} must be non-empty and must not contain separator {CACHE_KEY_SEP!r}"
        )


def edge_translation_key(cache_key: str) -> str:
    """Edge cache key for a translation by derived cache key."""
    _validate_key_component(cache_key, "cache_key")
    return f"{CACHE_PREFIX_EDGE}{CACHE_KEY_SEP}{CACHE_PREFIX_TRANSLATION}{CACHE_KEY_SEP}{cache_key}"
