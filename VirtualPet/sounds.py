import os
import logging

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")
import pygame

from constants import SOUND_DIR

logger = logging.getLogger(__name__)


class SoundManager:
    """Sound effects through pygame's mixer, with a safe no-op fallback.

    Environment variables:
      - VIRTUALPET_MUTE=1 skips mixer initialisation entirely
      - VIRTUALPET_SOUND_DIR points at a directory of <name>.wav files
      - SDL_AUDIODRIVER=dummy gives a silent mixer for headless runs and tests

    `play_effect(name)` always records `last_played`, even when muted, so the
    game loop can be tested without audio hardware.
    """
    def __init__(self, enabled=True, sound_dir=SOUND_DIR):
        self.enabled = False
        self.last_played = None
        self.sound_dir = sound_dir
        self.assets = {}
        if not enabled:
            return
        try:
            pygame.mixer.init()
            self.enabled = True
        except pygame.error as e:
            logger.debug("Audio mixer unavailable, sound disabled: %s", e)

    def load(self, name, path):
        """Load a sound asset into memory for quicker playback. Returns True on success."""
        self.assets[name] = None
        if not self.enabled:
            return False
        try:
            self.assets[name] = pygame.mixer.Sound(path)
            return True
        except (pygame.error, FileNotFoundError) as e:
            logger.debug("Could not load sound %s from %s: %s", name, path, e)
            return False

    def play_effect(self, name):
        """Play a named effect; no-op if audio is unavailable or the asset is missing."""
        self.last_played = name
        if not self.enabled:
            return
        snd = self.assets.get(name)
        if snd is None and name not in self.assets:
            # Lazy load from the sound directory on first use
            self.load(name, os.path.join(self.sound_dir, f"{name}.wav"))
            snd = self.assets.get(name)
        if snd is None:
            return
        try:
            snd.play()
        except pygame.error as e:
            logger.debug("Playback of %s failed: %s", name, e)

    def check_output(self):
        """Return diagnostic info: (enabled:bool, init_info:dict)."""
        init = pygame.mixer.get_init() if self.enabled else None
        return (self.enabled, {"mixer_init": init})

    def close(self):
        if self.enabled:
            pygame.mixer.quit()
            self.enabled = False
