"""Transformation provider backed by an OpenAI-compatible chat completions API.

Sends the ISP name as the user message with a system prompt that pins the
output contract: unchanged input when it is already in the target
language/script, otherwise the shortest recognizable localized brand name
with no quotes, explanations or filler. Each request is issued exactly once.
"""

import logging
from contextlib import asynccontextmanager
from typing import Any

import httpx

from isp_translator.domain.exceptions import UpstreamTransformError

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT_SECONDS = 30.0


def build_system_prompt(locale: str) -> str:
    """Return the system prompt for translating an ISP name into locale."""
    return f"""You are a strict, professional translation engine for the telecommunications industry, specialized in concise branding.

TASK: Translate the ISP (Internet Service Provider) name into a CONCISE, localized version for: {locale}.

STRICT OUTPUT RULES:
1. SAME LANGUAGE CHECK: If the input text is already in the target language/script ({locale}), return the original text EXACTLY as-is without any changes.
2. Output ONLY the translated text in {locale}.
3. BREVITY IS CRITICAL: Prioritize the core brand name. Omit redundant legal suffixes (e.g., "Company Limited", "Systems", "Group", "Corp") if the brand remains recognizable.
4. SCRIPT INTEGRITY: Use the correct writing system for {locale}.
5. NO explanations, NO quotes, NO conversational filler.

TRANSLATION GUIDELINES:
- Aim for the shortest recognizable name used in the target region.
- For long company names, keep only the primary identity (e.g., "China Telecom" instead of "China Telecommunications Corporation").
- If a standard short-form localized brand exists, use it.
- Ensure the output is a single, clean string."""


class ChatCompletionProvider:
    """ITransformationProvider over POST {base_url}/chat/completions."""

    def __init__(
        self,
        base_url: str,
        api_token: str,
        model: str,
        *,
        http_client: httpx.AsyncClient | None = None,
        timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS,
    ) -> None:
        self._endpoint = f"{base_url.rstrip('/')}/chat/completions"
        self._api_token = api_token
        self._model = model
        self._shared_http = http_client
        self._timeout_seconds = timeout_seconds

    @asynccontextmanager
    async def _http_cm(self):
        """Yield shared HTTP client or a short-lived one (connection reuse when shared)."""
        if self._shared_http is not None:
            yield self._shared_http
            return
        async with httpx.AsyncClient(timeout=self._timeout_seconds) as client:
            yield client

    def _build_payload(self, text: str, locale: str) -> dict[str, Any]:
        return {
            "model": self._model,
            "messages": [
                {"role": "system", "content": build_system_prompt(locale)},
                {"role": "user", "content": text},
            ],
            "stream": False,
        }

    async def transform(self, text: str, locale: str) -> str:
        """Translate text into locale.

        Raises:
            UpstreamTransformError: transport failure, non-2xx status, or a
                response without choices[0].message.content.
        """
        try:
            async with self._http_cm() as client:
                response = await client.post(
                    self._endpoint,
                    json=self._build_payload(text, locale),
                    headers={"Authorization": f"Bearer {self._api_token}"},
                    timeout=self._timeout_seconds,
                )
        except httpx.HTTPError as e:
            logger.warning("Translation provider request failed: %s", e)
            raise UpstreamTransformError(f"transport error: {e.__class__.__name__}") from e

        if not response.is_success:
            logger.warning(
                "Translation provider returned status=%d body=%s",
                response.status_code,
                response.text[:500],
            )
            raise UpstreamTransformError(
                "unexpected status", status_code=response.status_code
            )

        try:
            data = response.json()
        except ValueError as e:
            logger.warning("Translation provider returned non-JSON body")
            raise UpstreamTransformError("response is not JSON") from e
        return self._extract_content(data)

    @staticmethod
    def _extract_content(data: Any) -> str:
        """Return stripped choices[0].message.content or raise UpstreamTransformError."""
        try:
            content = data["choices"][0]["message"]["content"]
        except (KeyError, IndexError, TypeError) as e:
            logger.warning("Unexpected translation provider response format: %s", data)
            raise UpstreamTransformError("unexpected response format") from e
        if not isinstance(content, str) or not content.strip():
            logger.warning("Translation provider returned empty content")
            raise UpstreamTransformError("empty response content")
        return content.strip()
