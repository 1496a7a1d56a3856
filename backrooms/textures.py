"""Loading the wall, floor and ceiling textures as ARGB pixel arrays."""

from __future__ import annotations

import struct
from dataclasses import dataclass, fields
from pathlib import Path

import pygame


@dataclass(frozen=True)
class Texture:
    """An image as rows of 0xAARRGGBB pixels."""

    width: int
    height: int
    pixels: tuple[int, ...]

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError(f"texture size must be positive: {self.width}x{self.height}")
        if len(self.pixels) != self.width * self.height:
            raise ValueError(
                f"texture of {self.width}x{self.height} needs "
                f"{self.width * self.height} pixels, got {len(self.pixels)}"
            )


@dataclass(frozen=True)
class TextureSet:
    """Every texture the renderer draws with."""

    wall: Texture
    wall_dark: Texture
    ceiling: Texture
    ceiling_dark: Texture
    ceiling_darker: Texture
    floor: Texture
    floor_light: Texture
    floor_lighter: Texture


def load_texture(path: str | Path) -> Texture:
    """Load an image file into a Texture.

    Raises FileNotFoundError if the file is missing and ValueError if it
    cannot be decoded.
    """
    path = Path(path)
    if not path.is_file():
        raise FileNotFoundError(f"texture not found: {path}")
    try:
        surface = pygame.image.load(str(path))
    except pygame.error as exc:
        raise ValueError(f"cannot load texture {path}: {exc}") from exc
    width, height = surface.get_size()
    data = pygame.image.tobytes(surface, "ARGB")
    pixels = struct.unpack(f">{width * height}I", data)
    return Texture(width, height, pixels)


def load_textures(root: str | Path = ".") -> TextureSet:
    """Load every texture from ``assets/textures/png`` below ``root``."""
    directory = Path(root) / "assets" / "textures" / "png"
    return TextureSet(
        **{item.name: load_texture(directory / f"{item.name}.png") for item in fields(TextureSet)}
    )