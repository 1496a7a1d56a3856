"""Game settings, map characters and the small enumerations shared by the game."""

from __future__ import annotations

from enum import IntEnum

# Settings
DOWNSCALE = 2
FOV = 53
FPS_CAP = 121
DEFAULT_SPEED = 2
RUN_SPEED = DEFAULT_SPEED + 2
MOUSE_SENSIT = 0.01
JOY_SENSIT = 2
GRAVITY = 50
COLLISION_RADIUS = 0.3
VSYNC = True

# Debug switches
START_LEVEL = 0
SHOW_MINIMAP = False
SHOW_FPS = True
PRINT_ENTITIES = False
PRINT_MAPS = False
SHOW_POSITION = False
SHOW_CAM_PLANE = False
SHOW_DIRECTION = False
MINIMAP_BLOCK = 20

# Map characters
WALL = "#"
WALL_0 = "0"
WALL_1 = "1"
WALL_2 = "2"
WALL_3 = "3"
WALL_4 = "4"
WALL_5 = "5"
WALL_6 = "6"
WALL_7 = "7"
WALL_8 = "8"
WALL_9 = "9"
VOID = "."
EMPTY = " "
P_NORTH = "N"
P_SOUTH = "S"
P_EAST = "E"
P_WEST = "W"
E_NORTH = "n"
E_SOUTH = "s"
E_EAST = "e"
E_WEST = "w"
DOOR_CLOSED = "D"
DOOR_OPENED = "U"
DOOR_CLOSING = "d"
DOOR_OPENING = "u"
TRIGGER = "T"
HOLE = ":"
PILLAR = ";"
OUT_OF_MAP = "\0"

HALF_BLOCKS_UP = frozenset(WALL_0 + WALL_1 + WALL_2 + WALL_3 + WALL_4)
HALF_BLOCKS_DOWN = frozenset(WALL_5 + WALL_6 + WALL_7 + WALL_8 + WALL_9)

PLAYER_DIRECTIONS = {
    P_NORTH: (0, -1),
    P_SOUTH: (0, 1),
    P_EAST: (1, 0),
    P_WEST: (-1, 0),
}
ENEMY_DIRECTIONS = {
    E_NORTH: (0, -1),
    E_SOUTH: (0, 1),
    E_EAST: (1, 0),
    E_WEST: (-1, 0),
}

NUMBER_OF_MAPS = 5


class Key(IntEnum):
    """Indices into the held-key table."""

    W = 0
    A = 1
    S = 2
    D = 3
    SHIFT = 4
    C = 5


class Movement(IntEnum):
    """How the player is moving, which selects the footstep sound."""

    STILL = 0
    RUNNING = 1
    WALKING = 2


class JumpState(IntEnum):
    NO_JUMP = 0
    JUMP_UP = 1
    JUMP_DOWN = 2


class Stance(IntEnum):
    STANDING = 0
    CROUCHING = 1
    CRAWLING = 2


def is_half_block_up(block: str) -> bool:
    """True for blocks that stick out of the floor ('0' to '4')."""
    return block in HALF_BLOCKS_UP and len(block) == 1


def is_half_block_down(block: str) -> bool:
    """True for blocks that hang from the ceiling ('5' to '9')."""
    return block in HALF_BLOCKS_DOWN and len(block) == 1