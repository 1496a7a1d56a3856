import pytest

from backrooms.framebuffer import FrameBuffer
from backrooms.raycasting import Ray
from backrooms.state import Game, Player
from backrooms.textures import Texture, TextureSet
from backrooms.walls import (
    draw_wall,
    half_block_up,
    half_down_block,
    hole_block,
    pillar_block,
)

SIZE = 8


def _texture(base, height=4):
    return Texture(4, height, tuple(base + i for i in range(4 * height)))


def _uniform(color, height=4):
    return Texture(4, height, (color,) * (4 * height))


def _game(wall=None):
    other = _texture(0xFF000000)
    textures = TextureSet(
        wall=wall or _texture(0xFF102030),
        wall_dark=_texture(0xFF405060),
        ceiling=other,
        ceiling_dark=other,
        ceiling_darker=other,
        floor=other,
        floor_light=other,
        floor_lighter=other,
    )
    return Game(
        texture_width=SIZE,
        texture_height=SIZE,
        maps=[["#"]],
        maps_sizes=[(0, 0)],
        players=[Player(x=1.5, y=1.5)],
        textures=textures,
    )


def _frame():
    frame = FrameBuffer(SIZE, SIZE)
    frame.clear_depth()
    return frame


def _column(frame, x):
    return [frame.pixels[y * SIZE + x] for y in range(SIZE)]


def _drawn_rows(frame, x):
    return [y for y in range(SIZE) if frame.depth[y * SIZE + x] != FrameBuffer.FAR]


def _wall_ray(**kwargs):
    values = dict(x=3, pos_x=1.5, pos_y=1.5, ray_dir_x=1.0, ray_dir_y=0.25, side=0)
    values.update(kwargs)
    return Ray(**values)


def test_draw_wall_fills_column_with_wall_texture():
    game = _game()
    frame = _frame()
    draw_wall(game, _wall_ray(perp_wall_dist=2.0), frame)
    wall = set(game.textures.wall.pixels)
    assert all(pixel in wall for pixel in _column(frame, 3))
    assert all(frame.depth[y * SIZE + 3] == 2.0 for y in range(SIZE))
    for x in range(SIZE):
        if x != 3:
            assert _column(frame, x) == [0] * SIZE


def test_draw_wall_uses_dark_texture_on_y_side():
    game = _game()
    frame = _frame()
    draw_wall(game, _wall_ray(perp_wall_dist=2.0, side=1), frame)
    dark = set(game.textures.wall_dark.pixels)
    assert all(pixel in dark for pixel in _column(frame, 3))


def test_draw_wall_clamps_tiny_distance():
    game = _game()
    frame = _frame()
    draw_wall(game, _wall_ray(perp_wall_dist=0.0), frame)
    depths = {frame.depth[y * SIZE + 3] for y in range(SIZE)}
    assert depths == {0.001}


def test_half_block_up_is_anchored_to_the_floor():
    game = _game()
    tall = _frame()
    half_block_up(game, _wall_ray(perp_wall_dist=4.0, detected=4), tall)
    rows = _drawn_rows(tall, 3)
    assert rows
    assert rows[-1] == SIZE - 1
    assert 0 not in rows
    assert rows == list(range(rows[0], rows[-1] + 1))

    low = _frame()
    half_block_up(game, _wall_ray(perp_wall_dist=4.0, detected=0), low)
    assert len(_drawn_rows(low, 3)) < len(rows)


def test_half_down_block_hangs_in_the_middle():
    game = _game()
    long_block = _frame()
    half_down_block(game, _wall_ray(perp_wall_dist=4.0, detected=9), long_block)
    rows = _drawn_rows(long_block, 3)
    assert rows
    assert rows == list(range(rows[0], rows[-1] + 1))
    assert rows[-1] < SIZE - 1
    assert all(long_block.depth[y * SIZE + 3] == 4.0 for y in rows)

    short_block = _frame()
    half_down_block(game, _wall_ray(perp_wall_dist=4.0, detected=5), short_block)
    assert short_block.pixels == [0] * (SIZE * SIZE)


def _hole_ray():
    return Ray(
        x=2,
        pos_x=1.5,
        pos_y=2.5,
        map_x=4,
        map_y=2,
        ray_dir_x=1.0,
        ray_dir_y=0.0,
        step_x=1,
        step_y=1,
        side_dist_x=0.5,
        side_dist_y=1e10,
        delta_dist_x=1.0,
        delta_dist_y=1e10,
    )


def test_hole_block_steps_one_cell_further():
    game = _game(wall=_uniform(0xFF808080))
    frame = _frame()
    ray = _hole_ray()
    hole_block(game, ray, frame)
    assert ray.map_x == 5
    assert ray.side == 0
    assert ray.perp_wall_dist == ray.map_x - ray.pos_x
    rows = _drawn_rows(frame, 2)
    assert rows and rows[-1] == SIZE - 1
    for y in rows:
        pixel = frame.pixels[y * SIZE + 2]
        red, green, blue = (pixel >> 16) & 0xFF, (pixel >> 8) & 0xFF, pixel & 0xFF
        assert pixel >> 24 == 0
        assert red == green == blue
        assert red <= 0x80
        assert frame.depth[y * SIZE + 2] == ray.perp_wall_dist


def test_hole_block_darkens_downwards():
    game = _game(wall=_uniform(0xFF808080, height=16))
    frame = _frame()
    hole_block(game, _hole_ray(), frame)
    rows = _drawn_rows(frame, 2)
    assert len(rows) >= 2
    shades = [frame.pixels[y * SIZE + 2] & 0xFF for y in rows]
    assert shades == sorted(shades, reverse=True)
    assert shades[-1] < shades[0]


def test_pillar_block_uses_whole_cell_distance_and_keeps_ray():
    game = _game(wall=_uniform(0xFF808080))
    frame = _frame()
    ray = _hole_ray()
    ray.perp_wall_dist = 3.7
    pillar_block(game, ray, frame)
    rows = _drawn_rows(frame, 2)
    assert rows and rows[-1] == SIZE - 1
    assert {frame.depth[y * SIZE + 2] for y in rows} == {3.0}
    assert ray.map_x == 4
    assert ray.perp_wall_dist == 3.7


def test_pillar_block_closer_than_one_cell_raises():
    game = _game()
    ray = _hole_ray()
    ray.perp_wall_dist = 0.5
    with pytest.raises(ZeroDivisionError):
        pillar_block(game, ray, _frame())