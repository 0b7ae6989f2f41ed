"""Application use cases: one entry point per workflow."""

from isp_translator.application.use_cases.translate import (
    CacheCoordinator,
    truncate_translation,
    validate_translation_request,
)

__all__ = [
    "CacheCoordinator",
    "truncate_translation",
    "validate_translation_request",
]
