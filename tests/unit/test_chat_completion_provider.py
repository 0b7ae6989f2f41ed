"""ChatCompletionProvider tests using httpx.MockTransport (no network)."""

import json

import httpx
import pytest

from isp_translator.domain.exceptions import UpstreamTransformError
from isp_translator.infrastructure.external.ai import ChatCompletionProvider
from isp_translator.infrastructure.external.ai.chat_completion_provider import (
    build_system_prompt,
)


def _provider(handler) -> ChatCompletionProvider:
    client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
    return ChatCompletionProvider(
        base_url="https://ai.example.test/v1/",
        api_token="secret",
        model="test-model",
        http_client=client,
    )


def _completion(content) -> dict:
    return {"choices": [{"message": {"role": "assistant", "content": content}}]}


async def test_transform_sends_chat_request_and_returns_content() -> None:
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json=_completion("  中国电信\n"))

    result = await _provider(handler).transform("China Telecom", "zh-CN")

    assert result == "中国电信"
    assert len(seen) == 1
    request = seen[0]
    assert str(request.url) == "https://ai.example.test/v1/chat/completions"
    assert request.headers["Authorization"] == "Bearer secret"
    body = json.loads(request.content)
    assert body["model"] == "test-model"
    assert body["stream"] is False
    assert body["messages"][0]["role"] == "system"
    assert "zh-CN" in body["messages"][0]["content"]
    assert body["messages"][1] == {"role": "user", "content": "China Telecom"}


async def test_non_success_status_raises() -> None:
    provider = _provider(lambda request: httpx.Response(429, text="slow down"))
    with pytest.raises(UpstreamTransformError) as exc_info:
        await provider.transform("Comcast", "de")
    assert exc_info.value.details["status_code"] == 429


async def test_transport_error_raises() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectTimeout("timed out", request=request)

    with pytest.raises(UpstreamTransformError) as exc_info:
        await _provider(handler).transform("Comcast", "de")
    assert "ConnectTimeout" in exc_info.value.details["reason"]


async def test_non_json_body_raises() -> None:
    provider = _provider(lambda request: httpx.Response(200, text="<html>"))
    with pytest.raises(UpstreamTransformError):
        await provider.transform("Comcast", "de")


@pytest.mark.parametrize(
    "payload",
    [
        {},
        {"choices": []},
        {"choices": [{"message": {}}]},
        _completion(None),
        _completion("   "),
    ],
)
async def test_malformed_or_empty_completion_raises(payload) -> None:
    provider = _provider(lambda request: httpx.Response(200, json=payload))
    with pytest.raises(UpstreamTransformError):
        await provider.transform("Comcast", "de")


async def test_request_is_sent_once_on_failure() -> None:
    calls = 0

    def handler(request: httpx.Request) -> httpx.Response:
        nonlocal calls
        calls += 1
        return httpx.Response(500)

    with pytest.raises(UpstreamTransformError):
        await _provider(handler).transform("Comcast", "de")
    assert calls == 1


def test_system_prompt_mentions_locale_and_rules() -> None:
    prompt = build_system_prompt("ja-JP")
    assert "ja-JP" in prompt
    assert "EXACTLY as-is" in prompt
    assert "NO explanations" in prompt
