"""End-to-end analysis runner.

fetch -> extract -> prompt -> generate -> parse, strictly in sequence. Each stage's output
is the next stage's only input and nothing is shared between runs.
"""

from __future__ import annotations

import asyncio

from digital_skeptic.config import Settings
from digital_skeptic.llm.client import GeminiClient
from digital_skeptic.logging import analysis_context, get_logger, set_stage
from digital_skeptic.models.article import AnalysisRequest
from digital_skeptic.models.report import AnalysisResult
from digital_skeptic.prompts import build_analysis_prompt
from digital_skeptic.report.parser import parse_report
from digital_skeptic.tools.article_extractor import ArticleExtractor
from digital_skeptic.tools.page_fetcher import PageFetcher
from digital_skeptic.utils.ids import new_request_id
from digital_skeptic.utils.urls import require_article_url

logger = get_logger(__name__)


def run_analysis(
    url: str,
    *,
    settings: Settings,
    fetcher: PageFetcher | None = None,
    extractor: ArticleExtractor | None = None,
    llm: GeminiClient | None = None,
    request_id: str | None = None,
) -> AnalysisResult:
    """Analyze the article at ``url``.

    Collaborators default to fresh instances built from ``settings``. The Gemini client is
    only built once extraction has succeeded, so a missing API key surfaces at the model
    stage.

    Raises:
        ValidationError: If ``url`` is missing or not an absolute http(s) URL.
        ExtractionError: If the article cannot be fetched or has too little text.
        ModelConfigError: If no Gemini API key is configured.
        ModelCallError: If the Gemini call fails.
    """

    with analysis_context(request_id=request_id or new_request_id(), stage="validate"):
        url = require_article_url(url)
        logger.info("Analysis started", extra={"url": url})

        set_stage("fetch")
        owns_fetcher = fetcher is None
        fetcher = fetcher or PageFetcher(settings)
        try:
            document = fetcher.fetch(url)
        finally:
            if owns_fetcher:
                fetcher.close()

        set_stage("extract")
        article = (extractor or ArticleExtractor()).extract(document.html)

        set_stage("generate")
        prompt = build_analysis_prompt(AnalysisRequest.from_article(article))
        owns_llm = llm is None
        llm = llm or GeminiClient(settings)
        try:
            analysis = llm.generate(prompt)
        finally:
            if owns_llm:
                llm.close()

        set_stage("parse")
        report = parse_report(analysis)
        logger.info(
            "Analysis finished",
            extra={
                "claims": len(report.core_claims),
                "red_flags": len(report.red_flags),
                "questions": len(report.verification_questions),
            },
        )

        return AnalysisResult(
            url=url,
            title=article.title,
            content=article.body,
            analysis=analysis,
            report=report,
        )


async def run_analysis_async(url: str, *, settings: Settings, request_id: str | None = None) -> AnalysisResult:
    """Async variant of :func:`run_analysis`.

    The blocking pipeline runs in a worker thread so concurrent requests do not stall the
    event loop.
    """

    return await asyncio.to_thread(run_analysis, url, settings=settings, request_id=request_id)
