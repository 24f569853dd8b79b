"""Gemini ``generateContent`` wire models.

Only the fields the pipeline reads are modelled; everything else in the response is
ignored.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class Part(BaseModel):
    model_config = ConfigDict(extra="ignore")

    text: str | None = None


class Content(BaseModel):
    model_config = ConfigDict(extra="ignore")

    role: str | None = None
    parts: list[Part] = Field(default_factory=list)


class Candidate(BaseModel):
    model_config = ConfigDict(extra="ignore")

    content: Content | None = None
    finish_reason: str | None = Field(default=None, alias="finishReason")


class GenerateContentResponse(BaseModel):
    """Response body of ``models/{model}:generateContent``."""

    model_config = ConfigDict(extra="ignore")

    candidates: list[Candidate] = Field(default_factory=list)

    def first_text(self) -> str | None:
        """Return ``candidates[0].content.parts[0].text`` or ``None`` if any link is missing."""

        if not self.candidates:
            return None
        content = self.candidates[0].content
        if content is None or not content.parts:
            return None
        return content.parts[0].text
