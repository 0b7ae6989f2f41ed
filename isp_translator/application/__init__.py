"""Application layer: interfaces, services, use cases.

Depends only on domain and protocol definitions (DIP).
Infrastructure implements the interfaces (store, edge cache, provider, scheduler).
"""

from isp_translator.application.interfaces import (
    IBackgroundScheduler,
    IEdgeCache,
    IKeyDeriver,
    ITransformationProvider,
    ITranslationAdminStore,
    ITranslationStore,
)
from isp_translator.application.services.key_deriver import KeyDeriver, derive_cache_key
from isp_translator.application.use_cases.translate import CacheCoordinator

__all__ = [
    "CacheCoordinator",
    "IBackgroundScheduler",
    "IEdgeCache",
    "IKeyDeriver",
    "ITransformationProvider",
    "ITranslationAdminStore",
    "ITranslationStore",
    "KeyDeriver",
    "derive_cache_key",
]
