from __future__ import annotations

from digital_skeptic.prompts.analysis import ANALYSIS_PROMPT_TEMPLATE, build_analysis_prompt

__all__ = [
    "ANALYSIS_PROMPT_TEMPLATE",
    "build_analysis_prompt",
]
