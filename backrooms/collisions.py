"""Collision of the player's body with the blocks around it."""

from __future__ import annotations

import math

from .config import (
    COLLISION_RADIUS,
    EMPTY,
    HOLE,
    WALL,
    WALL_0,
    WALL_1,
    WALL_2,
    WALL_3,
    WALL_4,
    WALL_5,
    WALL_6,
    WALL_7,
    WALL_8,
    WALL_9,
)
from .state import Game

_CEILING_BLOCKS = frozenset((WALL_5, WALL_6, WALL_7, WALL_8))
_INT_MAX = 2**31 - 1


def traversable(game: Game, block: str) -> bool:
    """Whether the player can stand in ``block`` at the current heights."""
    h = game.heights
    if block in (WALL, WALL_4, WALL_9):
        return False
    if block in (EMPTY, WALL_0):
        return h.feet_height >= h.empty
    if block in (WALL_1, WALL_2, WALL_3):
        return h.feet_height >= h.wall_1
    if block == WALL_5:
        return h.player_height < h.wall_5
    if block == WALL_6:
        return h.player_height < h.wall_6
    if block == WALL_7:
        return h.player_height < h.wall_7
    if block == WALL_8:
        return h.player_height < h.wall_8
    return True


def block_height(game: Game, block: str) -> int:
    """The surface height of a block; 0 for blocks without one."""
    h = game.heights
    table = {
        HOLE: h.hole,
        EMPTY: h.empty,
        WALL_0: h.wall_0,
        WALL_1: h.wall_1,
        WALL_2: h.wall_2,
        WALL_3: h.wall_3,
        WALL_5: h.wall_5,
        WALL_6: h.wall_6,
        WALL_7: h.wall_7,
        WALL_8: h.wall_8,
    }
    return table.get(block, 0)


def check_circle_collision(game: Game, x: float, y: float) -> bool:
    """Test the four diagonal points of the player's body at (x, y).

    Updates which block the feet stand on and which ceiling block is overhead;
    returns True if any point is in a block the player cannot enter.
    """
    player = game.player
    heights = game.heights
    diag = COLLISION_RADIUS / math.sqrt(2.0)
    offsets = ((diag, -diag), (-diag, -diag), (diag, diag), (-diag, diag))

    collision_found = False
    best_diff = math.inf
    best_block = player.feet_touch
    found = False
    ceiling_best = -_INT_MAX
    ceiling_block = EMPTY

    for ox, oy in offsets:
        block = game.cell(math.floor(x + ox), math.floor(y + oy))
        if not traversable(game, block):
            collision_found = True
        height = block_height(game, block)
        if block in _CEILING_BLOCKS:
            if height > heights.player_height and height > ceiling_best:
                ceiling_best = height
                ceiling_block = block
        else:
            diff = abs(heights.feet_height - height)
            if diff < best_diff:
                best_diff = diff
                best_block = block
                found = True

    player.head_touch = ceiling_block
    if found:
        player.feet_touch = best_block
    else:
        player.feet_touch = game.cell(math.floor(x), math.floor(y))
    return collision_found


def collisions(game: Game, new_x: float, new_y: float) -> None:
    """Move towards (new_x, new_y), sliding along whatever blocks the way.

    Then set the jump, crouch and stand locks and the height cap from the
    blocks under the feet and over the head.
    """
    player = game.player
    heights = game.heights
    old_y = player.y
    if not check_circle_collision(game, new_x, old_y):
        player.x = new_x
    if not check_circle_collision(game, player.x, new_y):
        player.y = new_y

    if player.head_touch in (WALL_7, WALL_8):
        player.jump_lock = True
        player.stand_lock = True
    elif player.feet_touch in (WALL_2, WALL_3):
        player.jump_lock = True
        player.crouch_lock = True
    else:
        player.crouch_lock = False
        player.jump_lock = False
        player.stand_lock = False

    if player.head_touch == WALL_5:
        heights.height_cap = heights.wall_5_height_cap
    elif player.head_touch == WALL_6:
        heights.height_cap = heights.wall_6_height_cap
    else:
        heights.height_cap = heights.empty_height_cap