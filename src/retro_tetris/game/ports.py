"""Collaborator interfaces the engine talks to.

The engine never imports pygame or touches the filesystem itself; it is given
an audio player and a storage object. The classes here are the defaults used
when nothing else is injected and the doubles used by headless drivers.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Dict, List


class SoundEvent(str, Enum):
    MOVE = "move"
    ROTATE = "rotate"
    DROP = "drop"
    CLEAR = "clear"
    GAME_OVER = "gameOver"


DEFAULT_SETTINGS: Dict[str, Any] = {"soundEnabled": True}


class AudioPort:
    """Fire-and-forget sound output. Implementations must never raise."""

    enabled: bool = True

    def play(self, event: SoundEvent) -> None:
        raise NotImplementedError


class StoragePort:
    """Key-value persistence for the high score and the settings object."""

    def get_high_score(self) -> int:
        raise NotImplementedError

    def set_high_score(self, score: int) -> None:
        raise NotImplementedError

    def get_settings(self) -> Dict[str, Any]:
        raise NotImplementedError

    def set_settings(self, settings: Dict[str, Any]) -> None:
        raise NotImplementedError


class NullAudio(AudioPort):
    def play(self, event: SoundEvent) -> None:
        pass


class RecordingAudio(AudioPort):
    """Keeps every event it is asked to play, respecting `enabled`."""

    def __init__(self) -> None:
        self.enabled = True
        self.events: List[SoundEvent] = []

    def play(self, event: SoundEvent) -> None:
        if self.enabled:
            self.events.append(SoundEvent(event))

    def count(self, event: SoundEvent) -> int:
        return sum(1 for e in self.events if e is event)


class MemoryStorage(StoragePort):
    def __init__(self, high_score: int = 0, settings: Dict[str, Any] | None = None) -> None:
        self.high_score = int(high_score)
        self.settings: Dict[str, Any] = dict(DEFAULT_SETTINGS)
        if settings:
            self.settings.update(settings)

    def get_high_score(self) -> int:
        return self.high_score

    def set_high_score(self, score: int) -> None:
        self.high_score = int(score)

    def get_settings(self) -> Dict[str, Any]:
        return dict(self.settings)

    def set_settings(self, settings: Dict[str, Any]) -> None:
        self.settings = dict(settings)
