"""Persistence repositories. Re-exports for dependency injection."""

from isp_translator.infrastructure.persistence.repositories.translation_repo import (
    TranslationRepository,
)

__all__ = ["TranslationRepository"]
