"""Speech engine capability.

Speech synthesis is platform specific, so the player receives an engine instead of
reaching for a global one. :class:`UnsupportedSpeechEngine` stands in wherever no
synthesizer is available.
"""

from __future__ import annotations

from typing import Protocol


class SpeechEngine(Protocol):
    """Text-to-speech backend interface."""

    @property
    def supported(self) -> bool:
        """Whether speech output is available."""

    def voices(self) -> list[str]:
        """Names of the voices the engine offers."""

    def speak(self, text: str, *, rate: float, voice: str | None) -> None:
        """Start speaking ``text``."""

    def pause(self) -> None:
        """Pause the current utterance."""

    def resume(self) -> None:
        """Resume a paused utterance."""

    def stop(self) -> None:
        """Cancel the current utterance."""


class UnsupportedSpeechEngine:
    """Engine for platforms without speech synthesis. Every call is a no-op."""

    @property
    def supported(self) -> bool:
        return False

    def voices(self) -> list[str]:
        return []

    def speak(self, text: str, *, rate: float, voice: str | None) -> None:
        return None

    def pause(self) -> None:
        return None

    def resume(self) -> None:
        return None

    def stop(self) -> None:
        return None
