"""Article fetching and extraction tools."""

from __future__ import annotations

from digital_skeptic.tools.article_extractor import ArticleExtractor, SelectorRule
from digital_skeptic.tools.page_fetcher import PageFetcher

__all__ = [
    "ArticleExtractor",
    "PageFetcher",
    "SelectorRule",
]
