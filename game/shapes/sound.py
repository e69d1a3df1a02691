"""
Fire-and-forget sound cues.

A missing or broken sound file never stops the game: the cue is replaced by
a silent ``NullSound`` and the problem is logged.
"""

from __future__ import annotations

import logging
import os
from typing import Any, Callable, Dict, Optional

logger = logging.getLogger(__name__)

CUES = ("shoot", "hit", "explosion")
DEFAULT_SOUND_DIR = os.path.join("assets", "sounds")


class NullSound:
    """Stand-in for a cue that could not be loaded"""

    def __init__(self, name: str = ""):
        self.name = name

    def play(self, volume: float = 1.0):
        return None

    def __repr__(self):
        return f"NullSound({self.name!r})"


def _arcade_loader(path: str):
    import arcade
    return arcade.load_sound(path)


class SoundBank:
    """
    Loads the shoot/hit/explosion cues from ``sound_dir``.

    Args:
        sound_dir: Directory holding ``<cue>.wav`` files
        loader: Callable turning a path into an object with ``play(volume=...)``
        volume: Playback volume in [0, 1]
        enabled: When False every cue is a NullSound and nothing is loaded
    """

    def __init__(
        self,
        sound_dir: str = DEFAULT_SOUND_DIR,
        loader: Optional[Callable[[str], Any]] = None,
        volume: float = 0.5,
        enabled: bool = True,
        extension: str = ".wav",
    ):
        self.sound_dir = sound_dir
        self.volume = volume
        self._loader = loader or _arcade_loader
        self.sounds: Dict[str, Any] = {}

        for cue in CUES:
            if not enabled:
                self.sounds[cue] = NullSound(cue)
                continue
            self.sounds[cue] = self._load(cue, os.path.join(sound_dir, cue + extension))

    def _load(self, cue: str, path: str):
        if not os.path.isfile(path):
            logger.warning("Sound %r not found at %s, using silent cue", cue, path)
            return NullSound(cue)
        try:
            return self._loader(path)
        except Exception as e:
            logger.warning("Could not load sound %r from %s: %s", cue, path, e)
            return NullSound(cue)

    def play(self, cue: str):
        sound = self.sounds.get(cue)
        if sound is None:
            logger.debug("No sound registered for cue %r", cue)
            return
        try:
            sound.play(volume=self.volume)
        except Exception as e:
            logger.warning("Playback of %r failed: %s", cue, e)

    def is_silent(self, cue: str) -> bool:
        return isinstance(self.sounds.get(cue), NullSound)
