"""Starting the game, running its main loop and shutting it down."""

from __future__ import annotations

import argparse
import os
import sys
import time
from collections.abc import Sequence
from pathlib import Path

import pygame

from .audio import open_audio
from .config import DOWNSCALE, NUMBER_OF_MAPS, START_LEVEL, TRIGGER, VSYNC
from .controls import handle_events
from .debug import DebugReporter, print_all_maps, print_entities
from .entities import entities_init
from .maps import map_path, map_size, read_map
from .movement import update_entities
from .render import render_next_frame
from .state import Game, make_heights
from .textures import load_textures
from .timing import FrameClock

_AUDIO_ATTR = "_audio"


def chapter_step(game: Game, level: int) -> bool:
    """Run the story step of chapter ``level``; returns False once the story is over.

    No chapter has an ending condition yet, so the game keeps running.
    Raises ValueError for a level that has no chapter.
    """
    if not 0 <= level < NUMBER_OF_MAPS:
        raise ValueError(f"no chapter for level {level}")
    chapter_end = False
    if chapter_end:
        if level == NUMBER_OF_MAPS - 1:
            return False
        game.level = level + 1
    return True


def level_trigger(game: Game) -> bool:
    """Move to the next level when the player stands on a trigger cell.

    The next level's player takes over the current player's position and
    state. Returns True if the level changed.
    """
    player = game.player
    if game.cell(int(player.x), int(player.y)) != TRIGGER:
        return False
    next_level = game.level + 1
    if next_level >= len(game.players):
        return False
    game.players[next_level].copy_state_from(player)
    game.level = next_level
    return True


def _load_grids(root: Path) -> tuple[list[list[str]], list[tuple[int, int]]]:
    grids: list[list[str]] = []
    sizes: list[tuple[int, int]] = []
    for index in range(1, NUMBER_OF_MAPS + 1):
        path = Path(map_path(index, root))
        if not path.is_file():
            raise FileNotFoundError(f"map not found: {path}")
        grid = list(read_map(path))
        grids.append(grid)
        width, height = map_size(grid)
        sizes.append((width, height))
    return grids, sizes


def _controller_init() -> None:
    from pygame._sdl2 import controller as sdl_controller

    try:
        sdl_controller.init()
        if sdl_controller.get_count() > 0 and sdl_controller.is_controller(0):
            pad = sdl_controller.Controller(0)
            print(f"Controller connected: {pad.name}")
        else:
            print("No compatible controller found.")
    except pygame.error as exc:
        print(f"Failed to open controller: {exc}")


def _init_graphics(game: Game) -> pygame.Surface:
    try:
        screen = pygame.display.set_mode(
            (0, 0), pygame.FULLSCREEN, vsync=1 if VSYNC else 0
        )
    except pygame.error as exc:
        raise RuntimeError(f"cannot create window: {exc}") from exc
    pygame.display.set_caption("Backrooms")
    width, height = screen.get_size()
    game.texture_width = width // DOWNSCALE
    game.texture_height = height // DOWNSCALE
    return screen


def _mouse_init() -> None:
    pygame.mouse.set_visible(False)
    pygame.event.set_grab(True)


def init_game(root: str | Path = ".") -> Game:
    """Open the window, load sounds, textures and maps, and place the entities.

    Raises FileNotFoundError for a missing asset, RuntimeError if the window
    or audio cannot be opened and ValueError for an unusable asset or map.
    """
    root = Path(root)
    grids, sizes = _load_grids(root)
    game = Game()
    pygame.init()
    _controller_init()
    _init_graphics(game)
    _mouse_init()
    setattr(game, _AUDIO_ATTR, open_audio(root))
    game.textures = load_textures(root)
    game.maps = grids
    game.maps_sizes = sizes
    print_all_maps(game)
    entities_init(game)
    print_entities(game)
    game.heights = make_heights(game.texture_height)
    game.cores = os.cpu_count() or 1
    return game


def game_loop(game: Game) -> None:
    """Run frames until the player quits or the story ends."""
    running = True
    game.level = START_LEVEL
    clock = FrameClock()
    reporter = DebugReporter()
    screen = pygame.display.get_surface()
    audio = getattr(game, _AUDIO_ATTR, None)
    while running:
        if audio is not None:
            audio.update(game.moving)
        if not chapter_step(game, game.level):
            running = False
        level_trigger(game)
        if not handle_events(game, pygame.event.get()):
            running = False
        update_entities(game, pygame.time.get_ticks())
        if screen is not None:
            render_next_frame(game, screen)
        reporter.report(game, time.monotonic())
        clock.tick()
        game.fps = clock.fps
        game.frame_time = clock.frame_time


def main(argv: Sequence[str] | None = None) -> int:
    """Start the game; returns the process exit status."""
    parser = argparse.ArgumentParser(prog="backrooms", description="Walk the backrooms.")
    parser.add_argument(
        "--root", default=".", help="directory holding the assets folder (default: .)"
    )
    args = parser.parse_args(argv)
    try:
        game = init_game(args.root)
        game_loop(game)
    except (OSError, ValueError, RuntimeError, pygame.error) as exc:
        print(f"ERROR: {exc}", file=sys.stderr)
        return 1
    finally:
        pygame.quit()
    return 0