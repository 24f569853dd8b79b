"""Tests for GeminiClient."""

from __future__ import annotations

import json

import httpx
import pytest

from digital_skeptic.config import Settings
from digital_skeptic.errors import ModelCallError, ModelConfigError
from digital_skeptic.llm.client import GeminiClient

from sample_data import gemini_body


def test_missing_api_key_is_a_config_error(settings: Settings) -> None:
    """It should refuse to build a client without an API key."""

    with pytest.raises(ModelConfigError):
        GeminiClient(settings.model_copy(update={"gemini_api_key": None}))


def test_generate_posts_prompt_and_generation_config(settings: Settings) -> None:
    """It should send one user message, the generation parameters and the key as a query credential."""

    captured: dict = {}

    def handler(request: httpx.Request) -> httpx.Response:
        captured["url"] = request.url
        captured["body"] = json.loads(request.content)
        return httpx.Response(200, json=gemini_body("### Core Claims\n* A"))

    client = GeminiClient(settings, transport=httpx.MockTransport(handler))
    assert client.generate("PROMPT") == "### Core Claims\n* A"

    url: httpx.URL = captured["url"]
    assert url.path == "/v1beta/models/gemini-2.0-flash-lite:generateContent"
    assert url.params["key"] == "test-key"
    assert captured["body"] == {
        "contents": [{"role": "user", "parts": [{"text": "PROMPT"}]}],
        "generationConfig": {"temperature": 0.7, "topK": 40, "topP": 0.95, "maxOutputTokens": 2048},
    }


def test_non_success_status_is_a_call_error(settings: Settings) -> None:
    """It should raise ModelCallError with the status code on non-2xx responses."""

    transport = httpx.MockTransport(lambda request: httpx.Response(429, json={"error": {}}))
    with pytest.raises(ModelCallError, match="429"):
        GeminiClient(settings, transport=transport).generate("p")


@pytest.mark.parametrize(
    "payload",
    [
        {},
        {"candidates": []},
        {"candidates": [{}]},
        {"candidates": [{"content": {"parts": []}}]},
        {"candidates": [{"content": {"parts": [{"inlineData": {}}]}}]},
        [1, 2, 3],
    ],
)
def test_unexpected_shape_is_a_call_error(settings: Settings, payload: object) -> None:
    """It should validate the candidate shape before reading the text."""

    transport = httpx.MockTransport(lambda request: httpx.Response(200, json=payload))
    with pytest.raises(ModelCallError, match="Invalid response"):
        GeminiClient(settings, transport=transport).generate("p")


def test_non_json_body_is_a_call_error(settings: Settings) -> None:
    """It should treat an unparseable body as a call error."""

    transport = httpx.MockTransport(lambda request: httpx.Response(200, text="<html>oops</html>"))
    with pytest.raises(ModelCallError):
        GeminiClient(settings, transport=transport).generate("p")


def test_transport_failure_is_a_call_error(settings: Settings) -> None:
    """It should wrap timeouts into ModelCallError."""

    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ReadTimeout("timed out", request=request)

    with pytest.raises(ModelCallError) as exc_info:
        GeminiClient(settings, transport=httpx.MockTransport(handler)).generate("p")
    assert "test-key" not in str(exc_info.value)
