"""Finding the player and enemies on the maps and setting up the camera plane."""

from __future__ import annotations

import math

from .config import EMPTY, ENEMY_DIRECTIONS, FOV, PLAYER_DIRECTIONS
from .state import Enemy, Game, Player


def camera_plane(
    dir_x: float, dir_y: float, texture_width: int, texture_height: int
) -> tuple[float, float]:
    """The camera plane for a view direction, widened by the screen's aspect ratio.

    Raises ZeroDivisionError when ``texture_height`` is zero.
    """
    aspect_ratio = texture_width / texture_height
    fov_rad = FOV * math.pi / 180.0
    h_fov_rad = 2 * math.atan(math.tan(fov_rad / 2) * aspect_ratio)
    half_width = math.tan(h_fov_rad / 2)
    return -dir_y * half_width, dir_x * half_width


def set_player_cam(game: Game, level: int) -> None:
    """Recompute the camera plane of the player on ``level`` from its direction."""
    player = game.players[level]
    player.cam_x, player.cam_y = camera_plane(
        player.dir_x, player.dir_y, game.texture_width, game.texture_height
    )


def find_entities(grid: list[str]) -> tuple[list[str], Player | None, list[Enemy]]:
    """Pick the player and enemies out of a map.

    Returns the map with every entity marker replaced by an empty cell, the
    player (the last marker found wins, None if there is none) and the enemies
    in reading order.
    """
    rows: list[str] = []
    player: Player | None = None
    enemies: list[Enemy] = []
    for y, row in enumerate(grid):
        cells = list(row)
        for x, block in enumerate(cells):
            if block in PLAYER_DIRECTIONS:
                dx, dy = PLAYER_DIRECTIONS[block]
                player = Player(
                    x=x + 0.5,
                    y=y + 0.5,
                    dir_x=float(dx),
                    dir_y=float(dy),
                    spawn_x=x + 0.5,
                    spawn_y=y + 0.5,
                    spawn_dir_x=dx,
                    spawn_dir_y=dy,
                )
                cells[x] = EMPTY
            elif block in ENEMY_DIRECTIONS:
                dx, dy = ENEMY_DIRECTIONS[block]
                enemies.append(Enemy(x=x + 0.5, y=y + 0.5, dir_x=float(dx), dir_y=float(dy)))
                cells[x] = EMPTY
        rows.append("".join(cells))
    return rows, player, enemies


def entities_init(game: Game) -> None:
    """Place the players and enemies of every map and set each player's camera.

    Raises ValueError if a map has no player start.
    """
    game.players = []
    game.enemies = []
    for level, grid in enumerate(game.maps):
        rows, player, enemies = find_entities(grid)
        if player is None:
            raise ValueError(f"map {level + 1} has no player start")
        game.maps[level] = rows
        game.players.append(player)
        game.enemies.append(enemies)
        set_player_cam(game, level)