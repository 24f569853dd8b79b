"""Article models passed between the fetch, extract and prompt stages."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

UNTITLED_ARTICLE = "Untitled Article"
MIN_BODY_CHARS = 100


class RawDocument(BaseModel):
    """An HTML page as returned by the article fetch."""

    model_config = ConfigDict(frozen=True)

    url: str
    html: str


class ExtractedArticle(BaseModel):
    """Readable title and body text of an article.

    ``body`` is normalized and at least 100 characters long; ``title`` is never empty.
    """

    model_config = ConfigDict(frozen=True)

    title: str = Field(default=UNTITLED_ARTICLE, min_length=1)
    body: str = Field(min_length=MIN_BODY_CHARS)


class AnalysisRequest(BaseModel):
    """Input to the analysis prompt builder."""

    model_config = ConfigDict(frozen=True)

    title: str
    body: str

    @classmethod
    def from_article(cls, article: ExtractedArticle) -> "AnalysisRequest":
        return cls(title=article.title, body=article.body)
