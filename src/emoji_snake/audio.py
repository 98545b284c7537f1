# src/emoji_snake/audio.py
from __future__ import annotations
from pathlib import Path
from typing import Dict, Optional
import logging

import pygame  # type: ignore

logger = logging.getLogger(__name__)

SOUND_FILES = {"eat": "eat.wav", "game_over": "gameover.wav"}
MUSIC_FILE = "music.ogg"


class AudioPlayer:
    """
    Eat / game-over effects plus looping background music. Missing files or
    a missing audio device leave the player silent instead of failing.
    """

    def __init__(self, assets_dir: Optional[str], volume: float = 0.5):
        self.volume = volume
        self.sounds: Dict[str, "pygame.mixer.Sound"] = {}
        self.music_loaded = False
        self.enabled = self._init_mixer()
        if self.enabled and assets_dir:
            self._load(Path(assets_dir))

    def _init_mixer(self) -> bool:
        try:
            if not pygame.mixer.get_init():
                pygame.mixer.init()
        except pygame.error as exc:
            logger.warning("Audio disabled: %s", exc)
            return False
        return True

    def _load(self, root: Path) -> None:
        for name, filename in SOUND_FILES.items():
            path = root / filename
            try:
                self.sounds[name] = pygame.mixer.Sound(str(path))
            except (FileNotFoundError, pygame.error) as exc:
                logger.warning("Sound %r unavailable (%s): %s", name, path, exc)
        music = root / MUSIC_FILE
        if music.exists():
            try:
                pygame.mixer.music.load(str(music))
                self.music_loaded = True
            except pygame.error as exc:
                logger.warning("Music unavailable (%s): %s", music, exc)
        self.set_volume(self.volume)

    def play(self, name: str) -> None:
        sound = self.sounds.get(name)
        if sound is None:
            return
        # Restart from the beginning if already playing
        sound.stop()
        sound.play()

    def set_volume(self, volume: float) -> None:
        self.volume = volume
        for sound in self.sounds.values():
            sound.set_volume(volume)
        if self.music_loaded:
            pygame.mixer.music.set_volume(volume)

    def start_music(self) -> None:
        if not self.music_loaded or pygame.mixer.music.get_busy():
            return
        pygame.mixer.music.set_volume(self.volume)
        pygame.mixer.music.play(-1)
