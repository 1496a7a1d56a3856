"""Turning the player and tilting the view."""

from __future__ import annotations

import math

from .config import JOY_SENSIT, MOUSE_SENSIT
from .entities import set_player_cam
from .state import Game, Player


def _rotate(player: Player, angle: float) -> None:
    cos_rot = math.cos(angle)
    sin_rot = math.sin(angle)
    old_dir_x = player.dir_x
    player.dir_x = player.dir_x * cos_rot - player.dir_y * sin_rot
    player.dir_y = old_dir_x * sin_rot + player.dir_y * cos_rot


def _clamp_shift(game: Game) -> None:
    max_shift = game.texture_height * 0.15
    player = game.player
    if player.camera_shift > max_shift:
        player.camera_shift = int(max_shift)
    if player.camera_shift < -max_shift:
        player.camera_shift = int(-max_shift)


def rotate_player_mouse(game: Game, x: int) -> None:
    """Turn by a horizontal mouse movement, ignoring jitter of one pixel."""
    angle = abs(x) * MOUSE_SENSIT * game.frame_time
    if x > 1:
        _rotate(game.player, angle)
    if x < -1:
        _rotate(game.player, -angle)
    set_player_cam(game, game.level)
    game.input.mouse_x_rel = 0


def rotate_player_joystick(game: Game, x: float) -> None:
    """Turn by the right stick's horizontal axis, with a small dead zone."""
    angle = abs(x) * JOY_SENSIT * game.frame_time
    if x < -0.1:
        _rotate(game.player, angle)
    if x > 0.1:
        _rotate(game.player, -angle)
    set_player_cam(game, game.level)


def look_up_and_down_joystick(game: Game, x: float) -> None:
    """Tilt the view by the right stick's vertical axis."""
    offset = x * JOY_SENSIT * game.frame_time * 500
    player = game.player
    player.camera_shift = int(player.camera_shift + offset)
    _clamp_shift(game)


def look_up_and_down_mouse(game: Game, y: int) -> None:
    """Tilt the view by a vertical mouse movement."""
    offset = abs(y) * MOUSE_SENSIT * game.frame_time * 500
    player = game.player
    if y > 1:
        player.camera_shift = int(player.camera_shift - offset)
    if y < -1:
        player.camera_shift = int(player.camera_shift + offset)
    _clamp_shift(game)
    set_player_cam(game, game.level)
    game.input.mouse_y_rel = 0