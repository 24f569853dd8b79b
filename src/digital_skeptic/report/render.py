"""Human-readable rendering of an analysis result."""

from __future__ import annotations

from digital_skeptic.models.report import AnalysisResult

NO_CLAIMS = "No specific claims identified."
NO_TONE = "No language analysis available."
NO_RED_FLAGS = "No significant red flags identified."
NO_QUESTIONS = "No verification questions generated."


def render_markdown(result: AnalysisResult, *, include_raw: bool = False) -> str:
    """Render ``result`` as Markdown, with placeholders for sections that were not found."""

    report = result.report
    lines: list[str] = [
        "## Article Analysis",
        "",
        f"**{result.title}**",
        "",
        f"Content length: {len(result.content)} characters",
        "",
        "## Core Claims",
        "",
    ]

    if report.core_claims:
        lines.extend(f"{i}. {claim}" for i, claim in enumerate(report.core_claims, start=1))
    else:
        lines.append(NO_CLAIMS)

    lines += ["", "## Language & Tone Analysis", "", report.language_tone or NO_TONE, "", "## Potential Red Flags", ""]

    if report.red_flags:
        lines.extend(f"- {flag}" for flag in report.red_flags)
    else:
        lines.append(NO_RED_FLAGS)

    lines += ["", "## Verification Questions", ""]
    if report.verification_questions:
        lines.extend(f"{i}. {q}" for i, q in enumerate(report.verification_questions, start=1))
    else:
        lines.append(NO_QUESTIONS)

    if include_raw:
        lines += ["", "## Raw Analysis", "", "```", result.analysis.strip(), "```"]

    return "\n".join(lines) + "\n"
