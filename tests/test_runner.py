"""Tests for the end-to-end analysis runner."""

from __future__ import annotations

import asyncio
import json

import httpx
import pytest

from digital_skeptic.config import Settings
from digital_skeptic.errors import ExtractionError, ModelConfigError, ValidationError
from digital_skeptic.llm.client import GeminiClient
from digital_skeptic.orchestrator import runner
from digital_skeptic.orchestrator.runner import run_analysis
from digital_skeptic.tools.page_fetcher import PageFetcher

from sample_data import ARTICLE_HTML, RAW_ANALYSIS, gemini_body


def _fetcher(settings: Settings, html: str = ARTICLE_HTML, status: int = 200) -> PageFetcher:
    return PageFetcher(settings, transport=httpx.MockTransport(lambda request: httpx.Response(status, html=html)))


def _llm(settings: Settings, prompts: list[str] | None = None) -> GeminiClient:
    def handler(request: httpx.Request) -> httpx.Response:
        if prompts is not None:
            prompts.append(json.loads(request.content)["contents"][0]["parts"][0]["text"])
        return httpx.Response(200, json=gemini_body(RAW_ANALYSIS))

    return GeminiClient(settings, transport=httpx.MockTransport(handler))


def test_run_analysis_end_to_end(settings: Settings) -> None:
    """It should fetch, extract, prompt, generate and parse in sequence."""

    prompts: list[str] = []
    result = run_analysis(
        "https://news.example.com/budget",
        settings=settings,
        fetcher=_fetcher(settings),
        llm=_llm(settings, prompts),
    )

    assert result.title == "Council Approves New Budget"
    assert result.content.startswith("The city council approved")
    assert "Home | World" not in result.content
    assert result.analysis == RAW_ANALYSIS
    assert result.report.core_claims == ["The council approved a new budget.", "Funding for schools increases."]
    assert result.report.verification_questions == ["What are the revenue assumptions?", "Who audited the figures?"]

    assert len(prompts) == 1
    assert "Article Title: Council Approves New Budget" in prompts[0]
    assert "Article Content: The city council approved" in prompts[0]


def test_invalid_url_fails_before_fetching(settings: Settings) -> None:
    """It should validate the URL before any network call."""

    def handler(request: httpx.Request) -> httpx.Response:
        raise AssertionError("should not fetch")

    fetcher = PageFetcher(settings, transport=httpx.MockTransport(handler))
    with pytest.raises(ValidationError):
        run_analysis("", settings=settings, fetcher=fetcher)
    with pytest.raises(ValidationError):
        run_analysis("ftp://example.com/a", settings=settings, fetcher=fetcher)


def test_short_article_stops_before_model_call(settings: Settings) -> None:
    """It should not call the model when extraction fails."""

    def handler(request: httpx.Request) -> httpx.Response:
        raise AssertionError("should not call the model")

    llm = GeminiClient(settings, transport=httpx.MockTransport(handler))
    with pytest.raises(ExtractionError):
        run_analysis(
            "https://news.example.com/short",
            settings=settings,
            fetcher=_fetcher(settings, html="<p>too short</p>"),
            llm=llm,
        )


def test_missing_key_surfaces_at_model_stage(settings: Settings) -> None:
    """It should fetch and extract before failing on a missing API key."""

    no_key = settings.model_copy(update={"gemini_api_key": None})
    with pytest.raises(ModelConfigError):
        run_analysis("https://news.example.com/budget", settings=no_key, fetcher=_fetcher(no_key))


def test_run_analysis_async_delegates(settings: Settings, monkeypatch: pytest.MonkeyPatch) -> None:
    """It should run the synchronous pipeline in a worker thread."""

    calls: list[str] = []

    def fake_run(url: str, *, settings: Settings, request_id: str | None = None) -> str:
        calls.append(url)
        return "done"

    monkeypatch.setattr(runner, "run_analysis", fake_run)
    assert asyncio.run(runner.run_analysis_async("https://a.example", settings=settings)) == "done"
    assert calls == ["https://a.example"]
