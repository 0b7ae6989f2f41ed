"""Application interfaces (ports): repository and service protocols.

Define contracts for infrastructure implementations (DIP).
No runtime imports from isp_translator.infrastructure or isp_translator.api.
"""

from isp_translator.application.interfaces.repositories import (
    ITranslationAdminStore,
    ITranslationStore,
)
from isp_translator.application.interfaces.services import (
    IBackgroundScheduler,
    IEdgeCache,
    IKeyDeriver,
    ITransformationProvider,
)

__all__ = [
    "IBackgroundScheduler",
    "IEdgeCache",
    "IKeyDeriver",
    "ITransformationProvider",
    "ITranslationAdminStore",
    "ITranslationStore",
]
