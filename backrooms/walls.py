"""Drawing wall columns, half-height blocks, holes and pillars into the frame."""

from __future__ import annotations

import math

from .framebuffer import FrameBuffer
from .raycasting import Ray
from .state import Game
from .textures import Texture

_MIN_WALL_DISTANCE = 0.001


def _wall_texture(game: Game, ray: Ray) -> Texture:
    textures = game.textures
    return textures.wall_dark if ray.side == 1 else textures.wall


def _texture_column(ray: Ray, dist: float, tex_w: int) -> int:
    if ray.side == 0:
        wall_x = ray.pos_y + dist * ray.ray_dir_y
    else:
        wall_x = ray.pos_x + dist * ray.ray_dir_x
    wall_x -= int(wall_x)
    return int(wall_x * tex_w) & (tex_w - 1)


def _line_height(game: Game, dist: float) -> int:
    return int(game.texture_height * (1.0 / (dist / 2)))


def _top(game: Game, line_height: int, dist: float) -> int:
    """Screen row of the top of a full-height wall at ``dist``."""
    th = game.texture_height
    eye_offset = (int(game.heights.player_height) - th) / dist
    return int(((th - line_height) >> 1) + game.player.camera_shift + eye_offset)


def _draw_span(
    game: Game,
    ray: Ray,
    frame: FrameBuffer,
    dist: float,
    line_height: int,
    top: int,
    height: int,
) -> None:
    """Draw ``height`` texture rows of a wall of ``line_height`` from screen row ``top``."""
    clip = 0
    if top < 0:
        clip = -top
        top = 0
    visible = height - clip
    if visible <= 0:
        return
    texture = _wall_texture(game, ray)
    tex_w, tex_h = texture.width, texture.height
    tex_x = _texture_column(ray, dist, tex_w)
    tex_step = tex_h / line_height
    tex_pos = clip * tex_step
    stride = game.texture_width
    for row in range(top, min(top + visible, game.texture_height)):
        index = row * stride + ray.x
        tex_index = (int(tex_pos) & (tex_h - 1)) * tex_w + tex_x
        if 0 <= tex_index < len(texture.pixels) and 0 <= index < frame.size:
            frame.set_depth(index, dist)
            frame.pixels[index] = texture.pixels[tex_index]
        tex_pos += tex_step


def _shade(color: int, darkness: float) -> int:
    keep = 1.0 - darkness
    red = int(((color >> 16) & 0xFF) * keep)
    green = int(((color >> 8) & 0xFF) * keep)
    blue = int((color & 0xFF) * keep)
    return (red << 16) | (green << 8) | blue


def _draw_shaded_base(
    game: Game,
    ray: Ray,
    frame: FrameBuffer,
    dist: float,
    line_height: int,
    top: int,
) -> None:
    """Draw the lower half of a wall from ``top`` down, darkening towards the bottom."""
    if line_height == 0:
        return
    texture = _wall_texture(game, ray)
    tex_w, tex_h = texture.width, texture.height
    tex_x = _texture_column(ray, dist, tex_w)
    tex_step = tex_h / line_height
    half = tex_h // 2
    # Rows above the screen draw nothing; skip straight to the first visible one.
    skipped = max(0, -top)
    tex_pos = half + skipped * tex_step
    stride = game.texture_width
    for row in range(top + skipped, game.texture_height):
        index = row * stride + ray.x
        tex_y = min(int(tex_pos), tex_h - 1)
        tex_index = tex_y * tex_w + tex_x
        if 0 <= tex_index < len(texture.pixels) and 0 <= index < frame.size:
            darkness = (tex_y - half) / half if half else 1.0
            darkness = min(max(darkness, 0.0), 1.0)
            frame.set_depth(index, dist)
            frame.pixels[index] = _shade(texture.pixels[tex_index], darkness)
        tex_pos += tex_step


def half_down_block(game: Game, ray: Ray, frame: FrameBuffer) -> None:
    """Draw a block hanging from the ceiling ('5' is longest, '9' shortest)."""
    dist = ray.perp_wall_dist
    if dist == 0:
        return
    line_height = _line_height(game, dist)
    top = _top(game, line_height, dist)
    normalized = (ray.detected - 5) / 4.0
    height = int(line_height * (0.1 + normalized * 0.8))
    _draw_span(game, ray, frame, dist, line_height, top, height)


def half_block_up(game: Game, ray: Ray, frame: FrameBuffer) -> None:
    """Draw a block sticking out of the floor ('0' is lowest, '4' highest)."""
    dist = ray.perp_wall_dist
    if dist == 0:
        return
    line_height = _line_height(game, dist) + 4
    normalized = ray.detected / 4.0
    height = int(line_height * (0.1 + normalized * 0.8))
    top = _top(game, line_height, dist) + (line_height - height)
    _draw_span(game, ray, frame, dist, line_height, top, height)


def hole_block(game: Game, ray: Ray, frame: FrameBuffer) -> None:
    """Step the ray one cell further and draw the far inner wall of a hole.

    The ray's cell, side and distance are updated in place.
    """
    if ray.side_dist_x < ray.side_dist_y:
        ray.side_dist_x += ray.delta_dist_x
        ray.map_x += ray.step_x
        ray.side = 0
    else:
        ray.side_dist_y += ray.delta_dist_y
        ray.map_y += ray.step_y
        ray.side = 1
    if ray.side == 0:
        numerator, direction = ray.map_x - ray.pos_x + (1 - ray.step_x) // 2, ray.ray_dir_x
    else:
        numerator, direction = ray.map_y - ray.pos_y + (1 - ray.step_y) // 2, ray.ray_dir_y
    if direction == 0:
        ray.perp_wall_dist = math.inf
        return
    dist = numerator / direction
    ray.perp_wall_dist = dist
    if dist == 0:
        return
    line_height = _line_height(game, dist) + 4
    top = _top(game, line_height, dist) + line_height - 2
    _draw_shaded_base(game, ray, frame, dist, line_height, top)


def pillar_block(game: Game, ray: Ray, frame: FrameBuffer) -> None:
    """Draw the base of a pillar at the ray's whole-cell distance.

    Raises ZeroDivisionError when the ray's distance is less than one cell.
    """
    dist = int(ray.perp_wall_dist)
    th = game.texture_height
    line_height = int(th * (1.0 / (ray.perp_wall_dist / 2))) + 4
    eye_offset = int((int(game.heights.player_height) - th) / dist)
    top = ((th - line_height) >> 1) + game.player.camera_shift + eye_offset
    top += line_height - 2
    _draw_shaded_base(game, ray, frame, dist, line_height, top)


def draw_wall(game: Game, ray: Ray, frame: FrameBuffer) -> None:
    """Draw the full wall the ray ended on."""
    dist = ray.perp_wall_dist
    if dist < _MIN_WALL_DISTANCE:
        dist = _MIN_WALL_DISTANCE
    line_height = _line_height(game, dist) + 4
    top = _top(game, line_height, dist)
    _draw_span(game, ray, frame, dist, line_height, top, line_height)