"""Debug output: frame rate, player state, entities and maps."""

from __future__ import annotations

from dataclasses import dataclass

from .config import (
    NUMBER_OF_MAPS,
    PRINT_ENTITIES,
    PRINT_MAPS,
    SHOW_CAM_PLANE,
    SHOW_DIRECTION,
    SHOW_FPS,
    SHOW_POSITION,
)
from .state import Game

_SEPARATOR = "------------------------"
_FPS_INTERVAL = 0.5


@dataclass
class DebugReporter:
    """Averages the frame rate over half-second windows and reports player state."""

    last_time: float = 0.0
    fps_sum: float = 0.0
    fps_count: int = 0

    def report(self, game: Game, now: float) -> list[str]:
        """Print and return the debug lines for this frame; ``now`` is in seconds."""
        lines: list[str] = []
        elapsed = now - self.last_time
        self.fps_sum += game.fps
        self.fps_count += 1
        if elapsed >= _FPS_INTERVAL:
            if SHOW_FPS:
                lines.append(f"Avg FPS (0.5s) = {self.fps_sum / self.fps_count:f}")
            self.last_time = now
            self.fps_sum = 0.0
            self.fps_count = 0
        player = game.player
        if SHOW_DIRECTION:
            lines.append(f"dir x = {player.dir_x:f} dir y = {player.dir_y:f}")
        if SHOW_POSITION:
            lines.append(f"pos x = {player.x:f} pos y = {player.y:f}")
        if SHOW_CAM_PLANE:
            lines.append(f"camera plane x = {player.cam_x:f} camera plane y = {player.cam_y:f}")
        for line in lines:
            print(line)
        return lines


def format_entities(game: Game) -> str:
    """A listing of every map's player start and enemies."""
    lines = ["==== Entity Data ===="]
    for i in range(NUMBER_OF_MAPS):
        lines.append(f"Map {i + 1}:")
        player = game.players[i] if i < len(game.players) else None
        if player is not None:
            lines.append(
                f"Player Start: X = {player.x:f}, Y = {player.y:f}, "
                f"Dir = ({player.dir_x:.1f}, {player.dir_y:.1f})"
            )
        else:
            lines.append("  No Player Found")
        enemies = game.enemies[i] if i < len(game.enemies) else []
        if enemies:
            for number, enemy in enumerate(enemies, start=1):
                lines.append(
                    f"Enemy {number}: X = {enemy.x:f}, Y = {enemy.y:f}, "
                    f"Dir = ({enemy.dir_x:.1f}, {enemy.dir_y:.1f})"
                )
        else:
            lines.append("No Enemies Found")
        lines.append(_SEPARATOR)
    return "\n".join(lines)


def format_maps(game: Game) -> str:
    """Every loaded map with its size."""
    if not game.maps:
        return "No maps loaded."
    lines: list[str] = []
    for i, grid in enumerate(game.maps):
        width, height = game.maps_sizes[i]
        lines.append(f"Map {i + 1} width {width} height {height}")
        lines.extend(grid)
        lines.append(_SEPARATOR)
    return "\n".join(lines)


def print_entities(game: Game) -> None:
    """Print the entity listing when entity printing is switched on."""
    if PRINT_ENTITIES:
        print(format_entities(game))


def print_all_maps(game: Game) -> None:
    """Print the maps when map printing is switched on."""
    if PRINT_MAPS:
        print(format_maps(game))