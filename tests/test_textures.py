from dataclasses import fields

import pygame
import pytest

from backrooms.textures import Texture, TextureSet, load_texture, load_textures


def save_png(path, colors, size=(2, 1)):
    surface = pygame.Surface(size, pygame.SRCALPHA)
    width = size[0]
    for index, color in enumerate(colors):
        surface.set_at((index % width, index // width), color)
    path.parent.mkdir(parents=True, exist_ok=True)
    pygame.image.save(surface, str(path))


def test_load_texture_gives_argb_pixels(tmp_path):
    path = tmp_path / "tile.png"
    save_png(path, [(255, 0, 0, 255), (0, 255, 0, 128)])
    texture = load_texture(path)
    assert (texture.width, texture.height) == (2, 1)
    assert texture.pixels == (0xFFFF0000, 0x8000FF00)


def test_load_texture_keeps_row_order(tmp_path):
    path = tmp_path / "tall.png"
    colors = [(10, 20, 30, 255), (40, 50, 60, 255), (70, 80, 90, 255), (1, 2, 3, 255)]
    save_png(path, colors, size=(2, 2))
    texture = load_texture(path)
    expected = tuple((a << 24) | (r << 16) | (g << 8) | b for r, g, b, a in colors)
    assert texture.pixels == expected


def test_missing_texture(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_texture(tmp_path / "missing.png")


def test_undecodable_texture(tmp_path):
    path = tmp_path / "broken.png"
    path.write_bytes(b"not an image at all")
    with pytest.raises(ValueError):
        load_texture(path)


def test_texture_rejects_wrong_pixel_count():
    with pytest.raises(ValueError):
        Texture(2, 2, (0,))


def test_texture_rejects_empty_size():
    with pytest.raises(ValueError):
        Texture(0, 1, ())


def test_load_textures_reads_every_file(tmp_path):
    directory = tmp_path / "assets" / "textures" / "png"
    names = [item.name for item in fields(TextureSet)]
    for shade, name in enumerate(names):
        save_png(directory / f"{name}.png", [(shade, shade, shade, 255)] * 2)
    textures = load_textures(tmp_path)
    for shade, name in enumerate(names):
        texture = getattr(textures, name)
        assert texture.pixels[0] == 0xFF000000 | (shade << 16) | (shade << 8) | shade


def test_load_textures_missing_directory(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_textures(tmp_path)