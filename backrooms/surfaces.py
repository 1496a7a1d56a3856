"""Drawing the floor and ceiling, including the tops and bottoms of half blocks."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

from .config import (
    EMPTY,
    HOLE,
    PILLAR,
    TRIGGER,
    WALL_0,
    WALL_1,
    WALL_2,
    WALL_3,
    WALL_5,
    WALL_6,
    WALL_7,
    WALL_8,
    is_half_block_down,
    is_half_block_up,
)
from .framebuffer import FrameBuffer
from .state import Game
from .textures import Texture

_CEILING_OPEN = frozenset((EMPTY, TRIGGER, HOLE, PILLAR))
_FLOOR_OPEN = frozenset((EMPTY, TRIGGER, PILLAR))
_FLOOR_TILE_HEIGHTS = {WALL_0: 0.402, WALL_1: 0.202, WALL_2: 0.0, WALL_3: -0.200}
_CEILING_TILE_HEIGHTS = {WALL_5: 0.400, WALL_6: 0.202, WALL_7: 0.0, WALL_8: -0.200}
_TILE_TINT = 0x010101


@dataclass
class FloorCeiling:
    """The horizon row and the rays through the left and right screen edges."""

    horizon: int
    ray_dir_x_0: float
    ray_dir_y_0: float
    ray_dir_x_1: float
    ray_dir_y_1: float

    @classmethod
    def for_player(cls, game: Game) -> FloorCeiling:
        player = game.player
        return cls(
            horizon=game.texture_height // 2 + player.camera_shift,
            ray_dir_x_0=player.dir_x - player.cam_x,
            ray_dir_y_0=player.dir_y - player.cam_y,
            ray_dir_x_1=player.dir_x + player.cam_x,
            ray_dir_y_1=player.dir_y + player.cam_y,
        )


def _row_cells(
    game: Game, view: FloorCeiling, row_distance: float, start: int, end: int
) -> Iterator[tuple[int, str, float, float]]:
    """Yield (column, block, fraction x, fraction y) for a screen row's hits inside the map."""
    player = game.player
    width = game.texture_width
    step_x = row_distance * (view.ray_dir_x_1 - view.ray_dir_x_0) / width
    step_y = row_distance * (view.ray_dir_y_1 - view.ray_dir_y_0) / width
    world_x = player.x + row_distance * view.ray_dir_x_0 + start * step_x
    world_y = player.y + row_distance * view.ray_dir_y_0 + start * step_y
    for x in range(start, end):
        cell_x = int(world_x)
        cell_y = int(world_y)
        if 0 <= cell_x < game.map_width and 0 <= cell_y < game.map_height:
            yield x, game.cell(cell_x, cell_y), world_x - cell_x, world_y - cell_y
        world_x += step_x
        world_y += step_y


def _texel(texture: Texture, frac_x: float, frac_y: float) -> int:
    tx = int(texture.width * frac_x) & (texture.width - 1)
    ty = int(texture.height * frac_y) & (texture.height - 1)
    return texture.pixels[texture.width * ty + tx]


def _eye_lift(game: Game) -> int:
    return int((int(game.heights.player_height) - game.texture_height) / 2)


def cast_floor_and_ceiling(
    game: Game, frame: FrameBuffer, start: int, end: int
) -> FloorCeiling:
    """Draw the ceiling and floor for screen columns ``start`` to ``end``.

    Returns the view used, for drawing the half-block surfaces afterwards.
    """
    view = FloorCeiling.for_player(game)
    th = game.texture_height
    tw = game.texture_width
    shift = game.player.camera_shift
    lift = _eye_lift(game)

    ceiling = game.textures.ceiling
    pos_z = 0.5 * th - lift
    for y in range(view.horizon):
        row_distance = pos_z / (th // 2 - y + shift) * 2
        for x, block, fx, fy in _row_cells(game, view, row_distance, start, end):
            if block in _CEILING_OPEN or is_half_block_up(block):
                index = y * tw + x
                if y < th and frame.check_depth(index, row_distance):
                    frame.pixels[index] = _texel(ceiling, fx, fy)

    if int(game.heights.player_height) < game.heights.empty:
        return view

    floor = game.textures.floor
    pos_z = 0.5 * th + lift
    for y in range(view.horizon, th):
        p = y - th // 2 - shift
        if p == 0:
            continue
        row_distance = pos_z / p * 2
        for x, block, fx, fy in _row_cells(game, view, row_distance, start, end):
            if block in _FLOOR_OPEN or is_half_block_down(block):
                index = y * tw + x
                if frame.check_depth(index, row_distance):
                    frame.set_depth(index, row_distance)
                    frame.pixels[index] = _texel(floor, fx, fy)
    return view


def _draw_floor_tile(
    game: Game, frame: FrameBuffer, view: FloorCeiling, start: int, end: int, block_type: str
) -> None:
    th = game.texture_height
    tw = game.texture_width
    shift = game.player.camera_shift
    texture = game.textures.floor_light
    pos_z = _FLOOR_TILE_HEIGHTS.get(block_type, 0.0) * th + _eye_lift(game)
    for y in range(view.horizon, th):
        p = y - th // 2 - shift
        if p == 0:
            continue
        row_distance = pos_z / p * 2
        for x, block, fx, fy in _row_cells(game, view, row_distance, start, end):
            if block == block_type:
                index = y * tw + x
                if frame.check_depth(index, row_distance):
                    frame.pixels[index] = _texel(texture, fx, fy) | _TILE_TINT


def _draw_ceiling_tile(
    game: Game, frame: FrameBuffer, view: FloorCeiling, start: int, end: int, block_type: str
) -> None:
    th = game.texture_height
    tw = game.texture_width
    shift = game.player.camera_shift
    texture = game.textures.ceiling_dark
    pos_z = _CEILING_TILE_HEIGHTS.get(block_type, 0.0) * th - _eye_lift(game)
    for y in range(view.horizon):
        row_distance = pos_z / (th // 2 - y + shift) * 2
        for x, block, fx, fy in _row_cells(game, view, row_distance, start, end):
            if block == block_type:
                index = y * tw + x
                if frame.check_depth(index, row_distance):
                    frame.pixels[index] = _texel(texture, fx, fy) | _TILE_TINT


def cast_offset_height_floor_and_ceiling(
    game: Game, frame: FrameBuffer, view: FloorCeiling, start: int, end: int
) -> None:
    """Draw the tops of floor blocks below the eye and the undersides of ceiling blocks above it."""
    heights = game.heights
    height = int(heights.player_height)
    if heights.empty <= height <= heights.wall_1:
        floors, ceilings = (WALL_0,), (WALL_5, WALL_6, WALL_7, WALL_8)
    elif heights.wall_1 < height <= heights.wall_2:
        floors, ceilings = (WALL_0, WALL_1), (WALL_5, WALL_6, WALL_7)
    elif heights.wall_2 < height <= heights.wall_3:
        floors, ceilings = (WALL_0, WALL_1, WALL_2), (WALL_5, WALL_6)
    elif height > heights.wall_3:
        floors, ceilings = (WALL_0, WALL_1, WALL_2, WALL_3), (WALL_5,)
    else:
        return
    for block_type in floors:
        _draw_floor_tile(game, frame, view, start, end, block_type)
    for block_type in ceilings:
        _draw_ceiling_tile(game, frame, view, start, end, block_type)