"""Translate API: tiered cache-aside lookup of ISP name translations."""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, Request, Response

from isp_translator.api.v1.dependencies import get_cache_coordinator, require_api_token
from isp_translator.application.use_cases.translate import CacheCoordinator
from isp_translator.core.constants import CACHE_STATUS_HEADER, IMMUTABLE_CACHE_CONTROL
from isp_translator.core.limiter import limit_translate
from isp_translator.schemas.translation import TranslateRequest, TranslateResponse

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post(
    "",
    response_model=TranslateResponse,
    dependencies=[Depends(require_api_token)],
    responses={
        401: {"description": "Missing or wrong Authorization header"},
        502: {"description": "Translation provider failed"},
        503: {"description": "Translation store unavailable (retry)"},
    },
)
@limit_translate
async def translate(
    request: Request,
    response: Response,
    body: TranslateRequest,
    coordinator: Annotated[CacheCoordinator, Depends(get_cache_coordinator)],
) -> TranslateResponse:
    """Translate an ISP name into the target locale.

    Checks the edge cache, then the translation store, then calls the
    provider. Results are immutable, so the response is marked cacheable
    forever; X-Cache-Status tells which tier answered.
    """
    result = await coordinator.translate(body.text, body.locale)
    logger.info("Translation served (locale=%s, source=%s)", body.locale, result.source.value)
    response.headers["Cache-Control"] = IMMUTABLE_CACHE_CONTROL
    response.headers[CACHE_STATUS_HEADER] = result.source.cache_status
    return TranslateResponse(**result.to_dict())
