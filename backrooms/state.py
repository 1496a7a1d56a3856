"""Mutable game state: player, enemies, input, heights and the game itself."""

from __future__ import annotations

import struct
from dataclasses import dataclass, field
from typing import Any

from .config import (
    DEFAULT_SPEED,
    EMPTY,
    OUT_OF_MAP,
    JumpState,
    Key,
    Movement,
    Stance,
)


def _f32(value: float) -> float:
    return struct.unpack("f", struct.pack("f", value))[0]


def set_height(texture_height: int, percentage: float) -> int:
    """Height in pixels for a percentage of twice the texture height, capped at 100%."""
    percentage = min(_f32(percentage), 100.0)
    scaled = _f32(_f32(percentage / 100.0) * _f32(texture_height * 2.0))
    return int(scaled)


@dataclass
class Heights:
    """Block and player heights, in screen pixels."""

    hole: int
    empty: int
    wall_0: int
    wall_1: int
    wall_2: int
    wall_3: int
    wall_4: int
    wall_5: int
    wall_6: int
    wall_7: int
    wall_8: int
    wall_9: int
    crouch: int
    crawl: int
    jump: int
    height_cap: int
    empty_height_cap: int
    wall_6_height_cap: int
    wall_5_height_cap: int
    feet_height: float
    eye_height: float
    player_height: float


def make_heights(texture_height: int) -> Heights:
    """The initial heights for a render texture of the given height."""

    def h(percentage: float) -> int:
        return set_height(texture_height, percentage)

    return Heights(
        hole=h(-90),
        empty=h(0),
        wall_0=h(10),
        wall_1=h(30),
        wall_2=h(50),
        wall_3=h(70),
        wall_4=h(90),
        wall_5=h(90),
        wall_6=h(70),
        wall_7=h(50),
        wall_8=h(30),
        wall_9=h(10),
        crouch=h(35),
        crawl=h(20),
        jump=h(25),
        height_cap=h(45),
        empty_height_cap=h(45),
        wall_6_height_cap=h(20),
        wall_5_height_cap=h(30),
        player_height=h(50),
        eye_height=h(50),
        feet_height=h(0),
    )


@dataclass
class Player:
    x: float
    y: float
    dir_x: float = 0.0
    dir_y: float = 0.0
    cam_x: float = 0.0
    cam_y: float = 0.0
    spawn_x: float = 0.0
    spawn_y: float = 0.0
    spawn_dir_x: int = 0
    spawn_dir_y: int = 0
    camera_shift: int = 0
    feet_touch: str = EMPTY
    head_touch: str = EMPTY
    jumping: JumpState = JumpState.NO_JUMP
    crouching: Stance = Stance.STANDING
    crouch_lock: bool = False
    stand_lock: bool = False
    jump_lock: bool = False
    falling: bool = False
    speed: int = DEFAULT_SPEED

    def copy_state_from(self, other: Player) -> None:
        """Take over position, view and movement state; spawn point stays."""
        self.x = other.x
        self.y = other.y
        self.dir_x = other.dir_x
        self.dir_y = other.dir_y
        self.cam_x = other.cam_x
        self.cam_y = other.cam_y
        self.camera_shift = other.camera_shift
        self.feet_touch = other.feet_touch
        self.jumping = other.jumping
        self.crouching = other.crouching
        self.speed = other.speed
        self.crouch_lock = other.crouch_lock
        self.stand_lock = other.stand_lock
        self.falling = other.falling
        self.jump_lock = other.jump_lock


@dataclass
class Enemy:
    x: float
    y: float
    dir_x: float = 0.0
    dir_y: float = 0.0


@dataclass
class Input:
    """Held keys and the latest mouse and stick readings."""

    keys: list[bool] = field(default_factory=lambda: [False] * len(Key))
    mouse_x_rel: int = 0
    mouse_y_rel: int = 0
    joystick_velocity_x: float = 0.0
    joystick_velocity_y: float = 0.0
    joystick_rotation_x: float = 0.0
    joystick_rotation_y: float = 0.0


@dataclass
class Game:
    """Everything the game loop reads and updates."""

    texture_width: int = 0
    texture_height: int = 0
    wind_width: int = 0
    wind_height: int = 0
    maps: list[list[str]] = field(default_factory=list)
    maps_sizes: list[tuple[int, int]] = field(default_factory=list)
    players: list[Player | None] = field(default_factory=list)
    enemies: list[list[Enemy]] = field(default_factory=list)
    level: int = 0
    fps: float = 0.0
    frame_time: float = 0.0
    moving: Movement = Movement.STILL
    input: Input = field(default_factory=Input)
    heights: Heights | None = None
    cores: int = 1
    textures: Any = None

    def __post_init__(self) -> None:
        if self.heights is None:
            self.heights = make_heights(self.texture_height)

    @property
    def player(self) -> Player:
        """The player of the current level."""
        return self.players[self.level]

    @property
    def grid(self) -> list[str]:
        """The map of the current level."""
        return self.maps[self.level]

    @property
    def map_width(self) -> int:
        return self.maps_sizes[self.level][0]

    @property
    def map_height(self) -> int:
        return self.maps_sizes[self.level][1]

    def cell(self, x: int, y: int) -> str:
        """The block at (x, y) on the current map, or NUL outside it."""
        grid = self.grid
        if y < 0 or x < 0 or y >= len(grid):
            return OUT_OF_MAP
        row = grid[y]
        if x >= len(row):
            return OUT_OF_MAP
        return row[x]