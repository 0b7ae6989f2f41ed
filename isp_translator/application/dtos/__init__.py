"""Application DTOs: plain dataclasses passed between layers."""

from isp_translator.application.dtos.translation import (
    TranslationEntry,
    TranslationResult,
)

__all__ = [
    "TranslationEntry",
    "TranslationResult",
]
