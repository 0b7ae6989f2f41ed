"""Domain layer: enums and exceptions.

No dependencies on infrastructure or presentation. Used by application
and infrastructure layers.
"""

from isp_translator.domain.enums import TranslationSource
from isp_translator.domain.exceptions import (
    EdgeWriteError,
    ResourceNotFoundException,
    StoreReadError,
    StoreWriteError,
    TranslatorException,
    UnauthorizedException,
    UpstreamTransformError,
    ValidationException,
)

__all__ = [
    # Enums
    "TranslationSource",
    # Exceptions
    "EdgeWriteError",
    "ResourceNotFoundException",
    "StoreReadError",
    "StoreWriteError",
    "TranslatorException",
    "UnauthorizedException",
    "UpstreamTransformError",
    "ValidationException",
]
