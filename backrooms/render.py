"""Rendering a frame: raycast columns, floor and ceiling, and the debug minimap."""

from __future__ import annotations

import struct
from collections.abc import Iterator
from concurrent.futures import ThreadPoolExecutor

import pygame

from .config import DOOR_CLOSED, EMPTY, MINIMAP_BLOCK, SHOW_MINIMAP, WALL
from .framebuffer import FrameBuffer
from .raycasting import Ray, init_raycaster, init_raycaster_steps, perform_raycaster_steps
from .state import Game
from .surfaces import cast_floor_and_ceiling, cast_offset_height_floor_and_ceiling
from .walls import draw_wall, half_block_up, half_down_block, hole_block, pillar_block

_HOLE_CODE = 10
_PILLAR_CODE = 11
_OPAQUE = 0xFF000000
_FRAME_ATTR = "_frame"

_MINIMAP_COLORS = {
    EMPTY: (255, 255, 0, 255),
    "0": (0, 100, 0, 255),
    "1": (34, 139, 34, 255),
    "2": (60, 179, 113, 255),
    "3": (144, 238, 144, 255),
    "4": (152, 251, 152, 255),
    "5": (0, 0, 139, 255),
    "6": (0, 0, 205, 255),
    "7": (65, 105, 225, 255),
    "8": (100, 149, 237, 255),
    "9": (135, 206, 250, 255),
    WALL: (128, 128, 128, 255),
    DOOR_CLOSED: (139, 69, 19, 255),
}
_PLAYER_COLOR = (255, 0, 0, 255)


def int_to_color(color: int) -> tuple[int, int, int, int]:
    """Split a 0xRRGGBBAA value into its (r, g, b, a) components."""
    return (
        (color >> 24) & 0xFF,
        (color >> 16) & 0xFF,
        (color >> 8) & 0xFF,
        color & 0xFF,
    )


def circle_points(center_x: int, center_y: int, radius: int) -> list[tuple[int, int]]:
    """The outline points of a circle, by the midpoint algorithm."""
    points: list[tuple[int, int]] = []
    x, y = 0, radius
    d = 3 - 2 * radius
    while x <= y:
        points.extend(
            (
                (center_x + x, center_y + y),
                (center_x - x, center_y + y),
                (center_x + x, center_y - y),
                (center_x - x, center_y - y),
                (center_x + y, center_y + x),
                (center_x - y, center_y + x),
                (center_x + y, center_y - x),
                (center_x - y, center_y - x),
            )
        )
        if d < 0:
            d += 4 * x + 6
        else:
            d += 4 * (x - y) + 10
            y -= 1
        x += 1
    return points


def minimap_color(block: str) -> tuple[int, int, int, int] | None:
    """The minimap colour of a block, or None for blocks that keep the previous colour."""
    return _MINIMAP_COLORS.get(block)


def render_mini_rays(game: Game, mini_rays: list[Ray], frame: FrameBuffer) -> None:
    """Draw the half blocks, holes and pillars a ray crossed, then forget them."""
    for mini in mini_rays:
        detected = mini.detected
        if 0 <= detected < 5:
            half_block_up(game, mini, frame)
        elif 5 <= detected < 10:
            half_down_block(game, mini, frame)
        elif detected == _HOLE_CODE and mini.first_hole:
            hole_block(game, mini, frame)
        elif detected == _PILLAR_CODE and mini.first_hole:
            pillar_block(game, mini, frame)
    mini_rays.clear()


def render_slice(game: Game, frame: FrameBuffer, start: int, end: int) -> None:
    """Render screen columns ``start`` to ``end``: walls, blocks, floor and ceiling."""
    for x in range(start, end):
        ray = init_raycaster(game, x)
        init_raycaster_steps(ray)
        perform_raycaster_steps(ray, game.grid)
        draw_wall(game, ray, frame)
        render_mini_rays(game, ray.mini_rays, frame)
    view = cast_floor_and_ceiling(game, frame, start, end)
    cast_offset_height_floor_and_ceiling(game, frame, view, start, end)


def _slices(width: int, workers: int) -> Iterator[tuple[int, int]]:
    for i in range(workers):
        yield width * i // workers, width * (i + 1) // workers


def draw_scene(game: Game, frame: FrameBuffer, workers: int) -> None:
    """Render the whole frame split into ``workers`` column slices, then reset the depths."""
    if workers < 1:
        raise ValueError(f"need at least one worker, got {workers}")
    bounds = list(_slices(game.texture_width, workers))
    if workers == 1:
        render_slice(game, frame, *bounds[0])
    else:
        with ThreadPoolExecutor(max_workers=workers) as pool:
            futures = [pool.submit(render_slice, game, frame, s, e) for s, e in bounds]
            for future in futures:
                future.result()
    frame.clear_depth()


def draw_minimap(game: Game, surface: pygame.Surface) -> None:
    """Draw the current map, the player and its view direction onto ``surface``."""
    block_size = MINIMAP_BLOCK
    color = (0, 0, 0, 255)
    for y, row in enumerate(game.grid):
        for x, block in enumerate(row):
            color = minimap_color(block) or color
            pygame.draw.rect(
                surface, color, pygame.Rect(x * block_size, y * block_size, block_size, block_size)
            )
    player = game.player
    px = int(player.x * block_size)
    py = int(player.y * block_size)
    bounds = surface.get_rect()
    for point in circle_points(px, py, block_size // 4):
        if bounds.collidepoint(point):
            surface.set_at(point, _PLAYER_COLOR)
    end = (
        int(player.x * block_size + player.dir_x * block_size),
        int(player.y * block_size + player.dir_y * block_size),
    )
    pygame.draw.line(surface, _PLAYER_COLOR, (px, py), end)


def _frame_for(game: Game) -> FrameBuffer:
    frame = getattr(game, _FRAME_ATTR, None)
    if frame is None or (frame.width, frame.height) != (game.texture_width, game.texture_height):
        frame = FrameBuffer(game.texture_width, game.texture_height)
        setattr(game, _FRAME_ATTR, frame)
    return frame


def _to_surface(frame: FrameBuffer) -> pygame.Surface:
    data = struct.pack(f">{frame.size}I", *(p | _OPAQUE for p in frame.pixels))
    return pygame.image.frombytes(data, (frame.width, frame.height), "ARGB")


def render_next_frame(game: Game, screen: pygame.Surface) -> None:
    """Render the scene, scale it onto ``screen`` and present it if it is the display."""
    frame = _frame_for(game)
    screen.fill((0, 0, 0))
    draw_scene(game, frame, game.cores)
    image = _to_surface(frame)
    screen.blit(pygame.transform.scale(image, screen.get_size()), (0, 0))
    if SHOW_MINIMAP:
        draw_minimap(game, screen)
    if pygame.display.get_init() and screen is pygame.display.get_surface():
        pygame.display.flip()