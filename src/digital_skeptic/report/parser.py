"""Tolerant parser for the model's critical-analysis report.

The parser is a single-pass, line-oriented state machine. A line containing one of the
section header phrases switches the current section. The canonical phrase matches
anywhere in a line; drifted casing is accepted only on heading-shaped lines, so decorated
headers such as ``### CORE CLAIMS:`` or ``**Red flags**`` still work while prose that
mentions "red flags" stays where it is. Lines that do not fit the current section are
dropped; parsing never fails.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from enum import Enum

from digital_skeptic.models.report import StructuredReport


class Section(str, Enum):
    """Parser states."""

    NONE = "none"
    CORE_CLAIMS = "core_claims"
    LANGUAGE_TONE = "language_tone"
    RED_FLAGS = "red_flags"
    VERIFICATION_QUESTIONS = "verification_questions"


# Checked in order; the first phrase found in a line wins.
SECTION_HEADERS: tuple[tuple[str, Section], ...] = (
    ("Core Claims", Section.CORE_CLAIMS),
    ("Language & Tone", Section.LANGUAGE_TONE),
    ("Red Flags", Section.RED_FLAGS),
    ("Verification Questions", Section.VERIFICATION_QUESTIONS),
)

BULLET_MARKERS = ("*", "-")
_ORDINAL_RE = re.compile(r"^\d+\.")
_MAX_BARE_HEADING_WORDS = 6


@dataclass
class _Draft:
    core_claims: list[str] = field(default_factory=list)
    tone: list[str] = field(default_factory=list)
    red_flags: list[str] = field(default_factory=list)
    verification_questions: list[str] = field(default_factory=list)

    def build(self) -> StructuredReport:
        return StructuredReport(
            core_claims=list(self.core_claims),
            language_tone=" ".join(self.tone),
            red_flags=list(self.red_flags),
            verification_questions=list(self.verification_questions),
        )


def _is_heading_shaped(line: str) -> bool:
    """Markdown heading, a ``**bold**`` line, or a short bare label such as ``Red flags:``."""

    if line.startswith("#"):
        return True
    label = line.rstrip(":").rstrip()
    if label.startswith("**") and label.endswith("**") and len(label) > 4:
        return True
    if line.startswith(BULLET_MARKERS) or _ORDINAL_RE.match(line) or label.endswith((".", "!", "?")):
        return False
    return 0 < len(label.split()) <= _MAX_BARE_HEADING_WORDS


def match_header(line: str) -> Section | None:
    """Return the section a header line switches to, or ``None``.

    Phrases match case-sensitively anywhere in a line. Heading-shaped lines also match
    regardless of case, so ``### CORE CLAIMS`` still counts while prose that mentions
    "red flags" does not.
    """

    for phrase, section in SECTION_HEADERS:
        if phrase in line:
            return section
    if not _is_heading_shaped(line):
        return None
    lowered = line.lower()
    for phrase, section in SECTION_HEADERS:
        if phrase.lower() in lowered:
            return section
    return None


def step(state: Section, line: str, draft: _Draft) -> Section:
    """Consume one trimmed line and return the next state."""

    header = match_header(line)
    if header is not None:
        return header

    if line.startswith(BULLET_MARKERS):
        entry = line[1:].strip()
        if state is Section.CORE_CLAIMS:
            draft.core_claims.append(entry)
        elif state is Section.RED_FLAGS:
            draft.red_flags.append(entry)
    elif _ORDINAL_RE.match(line):
        if state is Section.VERIFICATION_QUESTIONS:
            draft.verification_questions.append(_ORDINAL_RE.sub("", line, count=1).strip())
    elif line and state is Section.LANGUAGE_TONE and not line.startswith("#"):
        draft.tone.append(line)

    return state


def parse_report(raw_analysis: str) -> StructuredReport:
    """Parse a raw analysis into a :class:`StructuredReport`.

    Missing sections come back empty.
    """

    draft = _Draft()
    state = Section.NONE
    for raw_line in (raw_analysis or "").splitlines():
        state = step(state, raw_line.strip(), draft)
    return draft.build()


class ReportParser:
    """Object wrapper around :func:`parse_report` for callers that inject collaborators."""

    def parse(self, raw_analysis: str) -> StructuredReport:
        return parse_report(raw_analysis)
