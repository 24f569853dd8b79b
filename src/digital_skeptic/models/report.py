"""Structured analysis report models."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class StructuredReport(BaseModel):
    """Sections recovered from a raw analysis.

    An empty field means the section was not identified in the model output; it is
    never ``None``.
    """

    model_config = ConfigDict(frozen=True)

    core_claims: list[str] = Field(default_factory=list)
    language_tone: str = ""
    red_flags: list[str] = Field(default_factory=list)
    verification_questions: list[str] = Field(default_factory=list)

    def is_empty(self) -> bool:
        return not (self.core_claims or self.language_tone or self.red_flags or self.verification_questions)


class AnalysisResult(BaseModel):
    """Outcome of one successful pipeline run."""

    model_config = ConfigDict(frozen=True)

    url: str
    title: str
    content: str
    analysis: str
    report: StructuredReport
