"""Speech narration."""

from __future__ import annotations

from digital_skeptic.speech.engine import SpeechEngine, UnsupportedSpeechEngine
from digital_skeptic.speech.player import NarrationPlayer, PlaybackState, estimated_minutes, format_for_speech

__all__ = [
    "NarrationPlayer",
    "PlaybackState",
    "SpeechEngine",
    "UnsupportedSpeechEngine",
    "estimated_minutes",
    "format_for_speech",
]
