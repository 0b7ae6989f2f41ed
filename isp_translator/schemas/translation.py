"""Translate API schemas."""

from typing import Literal

from pydantic import BaseModel, Field

from isp_translator.core.constants import MAX_TEXT_LENGTH


class TranslateRequest(BaseModel):
    """Request body for POST /translate."""

    text: str = Field(
        ...,
        min_length=1,
        max_length=MAX_TEXT_LENGTH,
        description="ISP name to translate",
        examples=["China Telecom"],
    )
    locale: str = Field(
        ...,
        min_length=1,
        description="Target locale identifier (not validated against a registry)",
        examples=["zh"],
    )


class TranslateResponse(BaseModel):
    """Response for POST /translate."""

    original: str = Field(..., description="Input text as received")
    translated: str = Field(..., description="Translated text (at most 64 characters)")
    source: Literal["edge", "cache", "ai"] = Field(
        ..., description="Tier that produced the result"
    )
