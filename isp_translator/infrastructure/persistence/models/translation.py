"""Stored translation: one row per distinct (text, locale) pair, keyed by its digest."""

from datetime import datetime

from sqlalchemy import DateTime, Integer, String
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy.sql import func

from isp_translator.core.constants import MAX_TRANSLATION_LENGTH
from isp_translator.infrastructure.persistence.database import Base


class Translation(Base):
    """Translation row. cache_key is unique; created_at set by the database."""

    __tablename__ = "translations"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    cache_key: Mapped[str] = mapped_column(String(32), unique=True, nullable=False, index=True)
    translated_text: Mapped[str] = mapped_column(String(MAX_TRANSLATION_LENGTH), nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )
