"""Narration playback state."""

from __future__ import annotations

import math
import re
from enum import Enum

from digital_skeptic.logging import get_logger
from digital_skeptic.speech.engine import SpeechEngine, UnsupportedSpeechEngine

logger = get_logger(__name__)

MIN_RATE = 0.5
MAX_RATE = 2.0
WORDS_PER_MINUTE = 200

_HEADER_RE = re.compile(r"#{1,6}\s")
_WHITESPACE_RE = re.compile(r"\s+")


def format_for_speech(text: str) -> str:
    """Strip Markdown punctuation so the synthesizer does not read it aloud."""

    text = _HEADER_RE.sub("", text)
    text = text.replace("**", "").replace("*", "")
    text = text.replace("\n\n", ". ").replace("\n", " ")
    return _WHITESPACE_RE.sub(" ", text).strip()


def estimated_minutes(text: str) -> int:
    """Rough listening time in whole minutes, at 200 words per minute."""

    spoken = format_for_speech(text)
    if not spoken:
        return 0
    return math.ceil(len(spoken.split(" ")) / WORDS_PER_MINUTE)


class PlaybackState(str, Enum):
    IDLE = "idle"
    PLAYING = "playing"
    PAUSED = "paused"


class NarrationPlayer:
    """Play, pause, resume and stop narration on a speech engine.

    Starting playback always cancels whatever the engine is currently speaking.
    """

    def __init__(self, engine: SpeechEngine | None = None, *, rate: float = 1.0, voice: str | None = None) -> None:
        self._engine: SpeechEngine = engine if engine is not None else UnsupportedSpeechEngine()
        self._rate = 1.0
        self.rate = rate
        self.voice = voice
        self._state = PlaybackState.IDLE

    @property
    def supported(self) -> bool:
        return self._engine.supported

    @property
    def state(self) -> PlaybackState:
        return self._state

    @property
    def is_playing(self) -> bool:
        return self._state is not PlaybackState.IDLE

    @property
    def is_paused(self) -> bool:
        return self._state is PlaybackState.PAUSED

    @property
    def rate(self) -> float:
        return self._rate

    @rate.setter
    def rate(self, value: float) -> None:
        self._rate = min(MAX_RATE, max(MIN_RATE, float(value)))

    def voices(self) -> list[str]:
        return self._engine.voices() if self.supported else []

    def play(self, text: str) -> None:
        """Resume if paused, otherwise speak ``text`` from the start."""

        if not self.supported:
            return
        if self._state is PlaybackState.PAUSED:
            self.resume()
            return

        self._engine.stop()
        self._engine.speak(format_for_speech(text), rate=self._rate, voice=self.voice)
        self._state = PlaybackState.PLAYING
        logger.debug("Narration started", extra={"rate": self._rate, "voice": self.voice})

    def pause(self) -> None:
        if self.supported and self._state is PlaybackState.PLAYING:
            self._engine.pause()
            self._state = PlaybackState.PAUSED

    def resume(self) -> None:
        if self.supported and self._state is PlaybackState.PAUSED:
            self._engine.resume()
            self._state = PlaybackState.PLAYING

    def stop(self) -> None:
        if self.supported:
            self._engine.stop()
            self._state = PlaybackState.IDLE

    def finished(self) -> None:
        """Engine callback for the end of an utterance, or an error while speaking."""

        self._state = PlaybackState.IDLE
