"""Unit tests for the Gemini HTTP client"""

import json
import httpx
import pytest
from finance_assistant.config import settings
from finance_assistant.domain.exceptions import LLMAPIError
from finance_assistant.infrastructure.clients.llm import GeminiClient


def _client(handler, api_key: str = "test-key") -> GeminiClient:
    return GeminiClient(
        api_key=api_key,
        base_url="http://gemini.test/",
        model="gemini-test",
        timeout=5.0,
        transport=httpx.MockTransport(handler),
    )


def _answer(*texts: str) -> dict:
    return {"candidates": [{"content": {"parts": [{"text": t} for t in texts]}}]}


async def test_generate_text_success():
    """Test request shape and joined response parts"""
    seen = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json=_answer("## Ringkasan", "\n* Hemat"))

    text = await _client(handler).generate_text("halo")

    assert text == "## Ringkasan\n* Hemat"
    request = seen[0]
    assert request.method == "POST"
    assert request.url == "http://gemini.test/v1beta/models/gemini-test:generateContent"
    assert request.headers["x-goog-api-key"] == "test-key"
    assert json.loads(request.content) == {"contents": [{"parts": [{"text": "halo"}]}]}


async def test_generate_text_missing_key_makes_no_request(monkeypatch):
    monkeypatch.setattr(settings, "api_key", None)
    seen = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json=_answer("x"))

    with pytest.raises(LLMAPIError, match="API key"):
        await _client(handler, api_key="").generate_text("halo")
    assert seen == []


async def test_generate_text_http_error():
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(503, json={"error": {"message": "overloaded"}})

    with pytest.raises(LLMAPIError, match="503"):
        await _client(handler).generate_text("halo")


async def test_generate_text_timeout():
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ReadTimeout("timed out", request=request)

    with pytest.raises(LLMAPIError, match="timeout"):
        await _client(handler).generate_text("halo")


async def test_generate_text_network_error():
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    with pytest.raises(LLMAPIError, match="unreachable"):
        await _client(handler).generate_text("halo")


@pytest.mark.parametrize(
    "body",
    [
        {"candidates": []},
        {"promptFeedback": {"blockReason": "SAFETY"}},
        _answer("   "),
        {"candidates": [{"content": {"parts": ["bukan objek"]}}]},
    ],
)
async def test_generate_text_unusable_body(body):
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, json=body)

    with pytest.raises(LLMAPIError, match="Invalid response"):
        await _client(handler).generate_text("halo")


async def test_generate_text_non_json_body():
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, text="<html>oops</html>")

    with pytest.raises(LLMAPIError, match="Invalid response"):
        await _client(handler).generate_text("halo")
