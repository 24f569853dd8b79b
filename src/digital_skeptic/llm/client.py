"""Gemini ``generateContent`` client.

Talks to the REST endpoint directly with ``httpx``; the API key travels as the ``key``
query parameter.
"""

from __future__ import annotations

import asyncio
import time
from typing import Any

import httpx
from pydantic import ValidationError as PydanticValidationError

from digital_skeptic.config import Settings
from digital_skeptic.errors import ModelCallError, ModelConfigError
from digital_skeptic.logging import get_logger
from digital_skeptic.models.gemini import GenerateContentResponse

logger = get_logger(__name__)


class GeminiClient:
    """Single-turn text generation against a Gemini model."""

    def __init__(self, settings: Settings, *, transport: httpx.BaseTransport | None = None) -> None:
        self._settings = settings
        if not settings.gemini_api_key:
            raise ModelConfigError(
                "Google AI API key not configured. "
                "Set GOOGLE_AI_API_KEY (or DIGITAL_SKEPTIC_GEMINI_API_KEY) in the environment or a .env file."
            )

        self._client = httpx.Client(
            timeout=httpx.Timeout(settings.gemini_timeout_s),
            headers={"Content-Type": "application/json"},
            transport=transport,
        )

    @property
    def endpoint(self) -> str:
        base = self._settings.gemini_base_url.rstrip("/")
        return f"{base}/models/{self._settings.gemini_model}:generateContent"

    def build_payload(self, prompt: str) -> dict[str, Any]:
        """Build the request body for a single user-role message."""

        s = self._settings
        return {
            "contents": [
                {
                    "role": "user",
                    "parts": [{"text": prompt}],
                }
            ],
            "generationConfig": {
                "temperature": s.gemini_temperature,
                "topK": s.gemini_top_k,
                "topP": s.gemini_top_p,
                "maxOutputTokens": s.gemini_max_output_tokens,
            },
        }

    def generate(self, prompt: str) -> str:
        """Generate the raw analysis text for ``prompt``.

        Raises:
            ModelCallError: On transport failure, a non-2xx status, or a response without
                ``candidates[0].content.parts[0].text``.
        """

        started = time.monotonic()
        try:
            resp = self._client.post(
                self.endpoint,
                params={"key": self._settings.gemini_api_key},
                json=self.build_payload(prompt),
            )
        except httpx.HTTPError as e:
            raise ModelCallError(f"Failed to analyze with Gemini: {type(e).__name__}") from e

        if not resp.is_success:
            raise ModelCallError(f"Gemini API error: {resp.status_code}")

        try:
            data = GenerateContentResponse.model_validate(resp.json())
        except (ValueError, PydanticValidationError) as e:
            raise ModelCallError("Invalid response from Gemini API") from e

        text = data.first_text()
        if text is None:
            raise ModelCallError("Invalid response from Gemini API")

        logger.info(
            "Gemini generation ok",
            extra={
                "model": self._settings.gemini_model,
                "prompt_chars": len(prompt),
                "response_chars": len(text),
                "latency_ms": int((time.monotonic() - started) * 1000),
            },
        )
        return text

    async def generate_async(self, prompt: str) -> str:
        """Async variant of :meth:`generate`."""

        return await asyncio.to_thread(self.generate, prompt)

    def close(self) -> None:
        self._client.close()
