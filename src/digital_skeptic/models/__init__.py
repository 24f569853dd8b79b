"""Pydantic models used across the project."""

from __future__ import annotations

from digital_skeptic.models.article import UNTITLED_ARTICLE, AnalysisRequest, ExtractedArticle, RawDocument
from digital_skeptic.models.gemini import GenerateContentResponse
from digital_skeptic.models.report import AnalysisResult, StructuredReport

__all__ = [
    "UNTITLED_ARTICLE",
    "AnalysisRequest",
    "AnalysisResult",
    "ExtractedArticle",
    "GenerateContentResponse",
    "RawDocument",
    "StructuredReport",
]
