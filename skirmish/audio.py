"""Interaction sound playback.

Sound is cosmetic: a missing mixer, a missing file or a playback error is
logged and ignored, never raised to the caller.
"""
import logging
import os
import sys
from abc import ABC, abstractmethod
from typing import Optional

import pygame

logger = logging.getLogger(__name__)

CARD_SOUND_FILE = 'card.wav'


class SoundPlayer(ABC):
    """Fire-and-forget sound side effect used by the attack popup."""

    @abstractmethod
    def play_interaction_sound(self):
        """Play the popup close/confirm sound."""


class SilentAudio(SoundPlayer):
    """No audio (tests, headless servers). Counts calls."""

    def __init__(self):
        self.plays = 0

    def play_interaction_sound(self):
        self.plays += 1


class AudioManager(SoundPlayer):
    """pygame.mixer backed sound player."""

    def __init__(self, enabled: bool = True, sounds_dir: Optional[str] = None):
        self.enabled = enabled
        self.card_sound: Optional[pygame.mixer.Sound] = None
        self._loaded = False
        self._sounds_dir = sounds_dir

    def _find_sounds_dir(self) -> Optional[str]:
        sound_paths = [
            os.path.join(os.path.dirname(__file__), '..', 'data', 'sounds'),
            os.path.join(os.path.dirname(__file__), 'data', 'sounds'),
            'data/sounds',
        ]
        if self._sounds_dir:
            sound_paths.insert(0, self._sounds_dir)
        if hasattr(sys, '_MEIPASS'):
            sound_paths.insert(0, os.path.join(sys._MEIPASS, 'data', 'sounds'))

        for path in sound_paths:
            if os.path.exists(path):
                return path
        return None

    def _load(self):
        """Load the card sound once. Leaves card_sound None on any failure."""
        self._loaded = True
        sounds_dir = self._find_sounds_dir()
        if not sounds_dir:
            logger.warning("Sounds directory not found")
            return

        filepath = os.path.join(sounds_dir, CARD_SOUND_FILE)
        if not os.path.exists(filepath):
            logger.warning(f"Sound file missing: {filepath}")
            return

        try:
            if not pygame.mixer.get_init():
                pygame.mixer.init()
            self.card_sound = pygame.mixer.Sound(filepath)
        except pygame.error as e:
            logger.warning(f"Error loading {CARD_SOUND_FILE}: {e}")

    def play_interaction_sound(self):
        if not self.enabled:
            return
        if not self._loaded:
            self._load()
        if self.card_sound is None:
            return
        try:
            self.card_sound.play()
        except pygame.error as e:
            logger.warning(f"Error playing card sound: {e}")
