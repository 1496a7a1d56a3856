import math

import pytest

from backrooms.camera import (
    look_up_and_down_joystick,
    look_up_and_down_mouse,
    rotate_player_joystick,
    rotate_player_mouse,
)
from backrooms.state import Game, Player

# 15% of the 100-pixel texture height used below.
MAX_SHIFT = 15


@pytest.fixture
def game():
    g = Game(texture_width=200, texture_height=100,
             players=[Player(x=1.5, y=1.5, dir_x=1.0, dir_y=0.0)])
    g.frame_time = 0.1
    return g


def direction(game):
    return game.player.dir_x, game.player.dir_y


def test_mouse_right_turns_towards_positive_y(game):
    game.input.mouse_x_rel = 50
    rotate_player_mouse(game, 50)
    assert game.player.dir_y > 0
    assert math.hypot(*direction(game)) == pytest.approx(1.0)
    assert game.input.mouse_x_rel == 0
    p = game.player
    assert p.cam_x * p.dir_x + p.cam_y * p.dir_y == pytest.approx(0.0)


def test_mouse_left_turns_towards_negative_y(game):
    rotate_player_mouse(game, -50)
    assert game.player.dir_y < 0


def test_mouse_turns_cancel_out(game):
    rotate_player_mouse(game, 80)
    rotate_player_mouse(game, -80)
    assert direction(game) == pytest.approx((1.0, 0.0))


def test_mouse_jitter_is_ignored(game):
    game.input.mouse_x_rel = 1
    rotate_player_mouse(game, 1)
    assert direction(game) == (1.0, 0.0)
    assert game.input.mouse_x_rel == 0


def test_joystick_turn_direction_and_dead_zone(game):
    rotate_player_joystick(game, 0.05)
    assert direction(game) == (1.0, 0.0)
    rotate_player_joystick(game, -0.5)
    assert game.player.dir_y > 0
    assert math.hypot(*direction(game)) == pytest.approx(1.0)
    rotate_player_joystick(game, 0.5)
    assert direction(game) == pytest.approx((1.0, 0.0))


def test_mouse_look_direction(game):
    look_up_and_down_mouse(game, 5)
    down = game.player.camera_shift
    assert down < 0
    look_up_and_down_mouse(game, -5)
    look_up_and_down_mouse(game, -5)
    assert game.player.camera_shift > down
    assert game.input.mouse_y_rel == 0


def test_mouse_look_ignores_jitter(game):
    game.player.camera_shift = 3
    look_up_and_down_mouse(game, 1)
    assert game.player.camera_shift == 3


def test_mouse_look_is_clamped(game):
    look_up_and_down_mouse(game, 10**6)
    assert game.player.camera_shift == -MAX_SHIFT
    look_up_and_down_mouse(game, -(10**6))
    assert game.player.camera_shift == MAX_SHIFT


def test_joystick_look_moves_and_clamps(game):
    look_up_and_down_joystick(game, 0.2)
    assert 0 < game.player.camera_shift <= MAX_SHIFT
    look_up_and_down_joystick(game, 1000.0)
    assert game.player.camera_shift == MAX_SHIFT
    look_up_and_down_joystick(game, -1000.0)
    assert game.player.camera_shift == -MAX_SHIFT