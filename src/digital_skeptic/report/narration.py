"""Narration text for speech playback of a report."""

from __future__ import annotations

from digital_skeptic.models.report import StructuredReport

_TERMINAL_PUNCTUATION = (".", "!", "?")


def _sentence(text: str) -> str:
    text = text.strip()
    if not text or text.endswith(_TERMINAL_PUNCTUATION):
        return text
    return text + "."


def _sentences(entries: list[str]) -> str:
    return " ".join(s for s in (_sentence(e) for e in entries) if s)


def to_narration(report: StructuredReport, title: str) -> str:
    """Flatten ``report`` into a single narration string.

    Sections are read in a fixed order and skipped entirely when empty.
    """

    parts = [_sentence(f"Analysis of: {title}")]
    if report.core_claims:
        parts.append(f"Core Claims: {_sentences(report.core_claims)}")
    if report.language_tone:
        parts.append(f"Language and Tone Analysis: {_sentence(report.language_tone)}")
    if report.red_flags:
        parts.append(f"Potential Red Flags: {_sentences(report.red_flags)}")
    if report.verification_questions:
        parts.append(f"Verification Questions: {_sentences(report.verification_questions)}")
    return " ".join(parts)
