"""Readable article extraction from raw HTML.

Extraction is a prioritized list of CSS selectors with a paragraph fallback. There is no
scoring: the first rule whose text is long enough wins.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from bs4 import BeautifulSoup

from digital_skeptic.errors import ExtractionError
from digital_skeptic.logging import get_logger
from digital_skeptic.models.article import MIN_BODY_CHARS, UNTITLED_ARTICLE, ExtractedArticle

logger = get_logger(__name__)

NOISE_SELECTOR = "script, style, nav, header, footer, aside, .advertisement, .ads, .social-share"

MIN_SELECTOR_CHARS = 200

_WHITESPACE_RE = re.compile(r"\s+")
_BLANK_LINES_RE = re.compile(r"\n\s*\n")


@dataclass(frozen=True)
class SelectorRule:
    """A content container candidate."""

    selector: str
    min_length: int = MIN_SELECTOR_CHARS

    def match(self, soup: BeautifulSoup) -> str | None:
        """Return the trimmed text of every matching element, or ``None`` if too short."""

        elements = soup.select(self.selector)
        if not elements:
            return None
        text = "".join(el.get_text() for el in elements).strip()
        if len(text) > self.min_length:
            return text
        return None


# Order matters: semantic containers first, then common CMS classes.
CONTENT_RULES: tuple[SelectorRule, ...] = (
    SelectorRule("article"),
    SelectorRule('[role="main"]'),
    SelectorRule(".article-content"),
    SelectorRule(".post-content"),
    SelectorRule(".entry-content"),
    SelectorRule(".content"),
    SelectorRule("main"),
)


def normalize_text(text: str) -> str:
    text = _WHITESPACE_RE.sub(" ", text)
    text = _BLANK_LINES_RE.sub("\n\n", text)
    return text.strip()


class ArticleExtractor:
    """Extract a title and body text from an article page."""

    def __init__(self, rules: tuple[SelectorRule, ...] = CONTENT_RULES) -> None:
        self._rules = rules

    def extract(self, html: str) -> ExtractedArticle:
        """Extract the article from ``html``.

        Raises:
            ExtractionError: If the normalized body is shorter than the minimum length.
        """

        soup = BeautifulSoup(html, "lxml")
        self._strip_noise(soup)

        title = self._resolve_title(soup)
        body, rule = self._resolve_body(soup)
        body = normalize_text(body)

        if len(body) < MIN_BODY_CHARS:
            logger.info("Insufficient content", extra={"body_chars": len(body), "rule": rule})
            raise ExtractionError("insufficient content")

        logger.info("Article extracted", extra={"title": title, "body_chars": len(body), "rule": rule})
        return ExtractedArticle(title=title, body=body)

    @staticmethod
    def _strip_noise(soup: BeautifulSoup) -> None:
        # extract() rather than decompose(): matches may be nested in each other.
        for el in soup.select(NOISE_SELECTOR):
            el.extract()

    @staticmethod
    def _resolve_title(soup: BeautifulSoup) -> str:
        h1 = soup.find("h1")
        if h1 is not None:
            text = h1.get_text().strip()
            if text:
                return text

        title_tag = soup.find("title")
        if title_tag is not None:
            text = title_tag.get_text().strip()
            if text:
                return text

        og = soup.select_one('[property="og:title"]')
        if og is not None:
            content = og.get("content")
            if isinstance(content, str) and content.strip():
                return content.strip()

        return UNTITLED_ARTICLE

    def _resolve_body(self, soup: BeautifulSoup) -> tuple[str, str]:
        for rule in self._rules:
            text = rule.match(soup)
            if text is not None:
                return text, rule.selector

        paragraphs = [p.get_text().strip() for p in soup.find_all("p")]
        return "\n\n".join(paragraphs), "p"
