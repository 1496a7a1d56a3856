"""Ambient music and footstep sounds."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Any

import pygame

from .config import Movement

_VOLUME = 64 / 128


class Audio:
    """Plays the looping ambient track and the footsteps that match the movement."""

    def __init__(
        self,
        ambient: str,
        running: Any,
        walking: Any,
        music: Any,
        channel_running: Any,
        channel_walking: Any,
    ) -> None:
        self.ambient = ambient
        self.running = running
        self.walking = walking
        self.music = music
        self.channel_running = channel_running
        self.channel_walking = channel_walking

    def update(self, moving: Movement) -> None:
        """Keep the music going and switch footsteps for how the player moves."""
        if not self.music.get_busy():
            try:
                self.music.load(self.ambient)
                self.music.play(-1)
            except pygame.error as exc:
                print(f"Failed to play music: {exc}", file=sys.stderr)
        if moving == Movement.RUNNING:
            if self.channel_walking.get_busy():
                self.channel_walking.stop()
            if not self.channel_running.get_busy():
                self.channel_running.play(self.running)
        if moving == Movement.WALKING:
            if self.channel_running.get_busy():
                self.channel_running.stop()
            if not self.channel_walking.get_busy():
                self.channel_walking.play(self.walking)
        if moving == Movement.STILL:
            self.channel_running.stop()
            self.channel_walking.stop()


def open_audio(root: str | Path = ".") -> Audio:
    """Open the mixer and load the sounds from ``assets/sounds`` below ``root``.

    Raises FileNotFoundError for a missing sound file, RuntimeError if the
    mixer cannot be opened and ValueError if a sound cannot be decoded.
    """
    directory = Path(root) / "assets" / "sounds"
    ambient = directory / "neon.wav"
    running = directory / "running.wav"
    walking = directory / "walking.wav"
    for path in (ambient, running, walking):
        if not path.is_file():
            raise FileNotFoundError(f"sound not found: {path}")
    try:
        pygame.mixer.init(44100, -16, 2, 2048)
    except pygame.error as exc:
        raise RuntimeError(f"cannot open audio: {exc}") from exc
    try:
        pygame.mixer.music.load(str(ambient))
        running_sound = pygame.mixer.Sound(str(running))
        walking_sound = pygame.mixer.Sound(str(walking))
    except pygame.error as exc:
        raise ValueError(f"cannot load sound: {exc}") from exc
    pygame.mixer.music.set_volume(_VOLUME)
    channel_running = pygame.mixer.Channel(1)
    channel_walking = pygame.mixer.Channel(2)
    channel_running.set_volume(_VOLUME)
    channel_walking.set_volume(_VOLUME)
    return Audio(
        str(ambient),
        running_sound,
        walking_sound,
        pygame.mixer.music,
        channel_running,
        channel_walking,
    )