"""Persistence models: ORM entities."""

from isp_translator.infrastructure.persistence.models.translation import Translation

__all__ = ["Translation"]
