"""Casting one ray per screen column through the map grid."""

from __future__ import annotations

import math
from collections.abc import Iterable
from dataclasses import dataclass, field, replace

from .config import WALL
from .state import Game

_NO_DELTA = 1e10
_HOLE_CODE = 10


@dataclass
class Ray:
    """One column's ray and where it meets the map.

    ``mini_rays`` holds a copy of the ray for every open cell it crossed,
    nearest the wall first.
    """

    x: int = 0
    pos_x: float = 0.0
    pos_y: float = 0.0
    map_x: int = 0
    map_y: int = 0
    cam_x: float = 0.0
    ray_dir_x: float = 0.0
    ray_dir_y: float = 0.0
    delta_dist_x: float = 0.0
    delta_dist_y: float = 0.0
    step_x: int = 0
    step_y: int = 0
    side_dist_x: float = 0.0
    side_dist_y: float = 0.0
    side: int = 0
    perp_wall_dist: float = 0.0
    wall_hit_x: float = 0.0
    wall_hit_y: float = 0.0
    detected: int = 0
    first_hole: bool = False
    mini_rays: list[Ray] = field(default_factory=list)


def init_raycaster(game: Game, x: int) -> Ray:
    """The ray for screen column ``x``, starting at the player."""
    player = game.player
    cam_x = 2.0 * x / game.texture_width - 1.0
    ray_dir_x = player.dir_x + player.cam_x * cam_x
    ray_dir_y = player.dir_y + player.cam_y * cam_x
    return Ray(
        x=x,
        pos_x=player.x,
        pos_y=player.y,
        map_x=int(player.x),
        map_y=int(player.y),
        cam_x=cam_x,
        ray_dir_x=ray_dir_x,
        ray_dir_y=ray_dir_y,
        delta_dist_x=_NO_DELTA if ray_dir_x == 0.0 else abs(1.0 / ray_dir_x),
        delta_dist_y=_NO_DELTA if ray_dir_y == 0.0 else abs(1.0 / ray_dir_y),
    )


def init_raycaster_steps(ray: Ray) -> None:
    """Set the step direction and the distance to the first grid line on each axis."""
    if ray.ray_dir_x < 0:
        ray.step_x = -1
        ray.side_dist_x = (ray.pos_x - ray.map_x) * ray.delta_dist_x
    else:
        ray.step_x = 1
        ray.side_dist_x = (ray.map_x + 1.0 - ray.pos_x) * ray.delta_dist_x
    if ray.ray_dir_y < 0:
        ray.step_y = -1
        ray.side_dist_y = (ray.pos_y - ray.map_y) * ray.delta_dist_y
    else:
        ray.step_y = 1
        ray.side_dist_y = (ray.map_y + 1.0 - ray.pos_y) * ray.delta_dist_y


def _inverse(value: float) -> float:
    if value == 0.0:
        return math.copysign(math.inf, value)
    return 1.0 / value


def ray_hit_wall(ray: Ray) -> None:
    """Compute the perpendicular distance to the ray's current cell and the hit point."""
    if ray.side == 0:
        dist = (ray.map_x - ray.pos_x + (1 - ray.step_x) * 0.5) * _inverse(ray.ray_dir_x)
    else:
        dist = (ray.map_y - ray.pos_y + (1 - ray.step_y) * 0.5) * _inverse(ray.ray_dir_y)
    ray.perp_wall_dist = dist
    ray.wall_hit_x = ray.pos_x + ray.ray_dir_x * dist
    ray.wall_hit_y = ray.pos_y + ray.ray_dir_y * dist


def _block(grid: list[str], x: int, y: int) -> str:
    if y < 0 or x < 0 or y >= len(grid) or x >= len(grid[y]):
        raise ValueError(f"ray left the map at ({x}, {y})")
    return grid[y][x]


def perform_raycaster_steps(ray: Ray, grid: list[str]) -> None:
    """Walk the ray through the grid until it reaches a full wall.

    Every open cell crossed on the way is kept in ``ray.mini_rays``. Raises
    ValueError if the ray leaves the map before it meets a wall.
    """
    crossed: list[Ray] = []
    while (block := _block(grid, ray.map_x, ray.map_y)) != WALL:
        mini = replace(ray, mini_rays=[])
        ray_hit_wall(mini)
        mini.detected = ord(block) - ord("0")
        crossed.append(mini)
        if ray.side_dist_x < ray.side_dist_y:
            ray.side_dist_x += ray.delta_dist_x
            ray.map_x += ray.step_x
            ray.side = 0
        else:
            ray.side_dist_y += ray.delta_dist_y
            ray.map_y += ray.step_y
            ray.side = 1
    crossed.reverse()
    find_holes_minirays(crossed)
    ray.mini_rays = crossed
    ray_hit_wall(ray)


def find_holes_minirays(mini_rays: Iterable[Ray]) -> None:
    """Mark the first hole cell of every run of consecutive hole cells."""
    in_hole = False
    for mini in mini_rays:
        if mini.detected == _HOLE_CODE:
            mini.first_hole = not in_hole
            in_hole = True
        else:
            mini.first_hole = False
            in_hole = False