"""Report parsing, narration and rendering."""

from __future__ import annotations

from digital_skeptic.report.narration import to_narration
from digital_skeptic.report.parser import ReportParser, Section, parse_report
from digital_skeptic.report.render import render_markdown

__all__ = [
    "ReportParser",
    "Section",
    "parse_report",
    "render_markdown",
    "to_narration",
]
