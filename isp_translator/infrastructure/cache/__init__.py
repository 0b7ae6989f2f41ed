"""Cache: Redis-backed edge tier and its key builders.

EdgeCache uses isp_translator.core.config; key format is in keys.py (DRY).
"""

from isp_translator.infrastructure.cache.edge_cache import EdgeCache
from isp_translator.infrastructure.cache.keys import edge_translation_key

__all__ = [
    "EdgeCache",
    "edge_translation_key",
]
