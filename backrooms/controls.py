"""Keyboard, mouse and game-controller input."""

from __future__ import annotations

from collections.abc import Iterable

import pygame

from .config import DEFAULT_SPEED, RUN_SPEED, JumpState, Key, Stance
from .state import Game

_HELD_KEYS = {
    pygame.K_w: Key.W,
    pygame.K_a: Key.A,
    pygame.K_s: Key.S,
    pygame.K_d: Key.D,
    pygame.K_c: Key.C,
}

# Developer keys that nudge the eye height while standing on the ground.
_HEIGHT_NUDGES = {
    pygame.K_k: -1,
    pygame.K_i: 1,
    pygame.K_l: -10,
    pygame.K_o: 10,
}


def _start_jump(game: Game) -> None:
    player = game.player
    player.crouching = Stance.STANDING
    player.jumping = JumpState.JUMP_UP


def keydown(game: Game, key: int) -> None:
    """Record a pressed keyboard key; left shift also switches to running speed."""
    held = _HELD_KEYS.get(key)
    if held is not None:
        game.input.keys[held] = True
    if key == pygame.K_LSHIFT:
        game.input.keys[Key.SHIFT] = True
        game.player.speed = RUN_SPEED


def keyup(game: Game, key: int) -> None:
    """Record a released keyboard key; left shift also restores walking speed."""
    held = _HELD_KEYS.get(key)
    if held is not None:
        game.input.keys[held] = False
    if key == pygame.K_LSHIFT:
        game.input.keys[Key.SHIFT] = False
        game.player.speed = DEFAULT_SPEED


def controller_keydown(game: Game, button: int) -> None:
    """Handle a pressed controller button."""
    if button == pygame.CONTROLLER_BUTTON_A:
        _start_jump(game)
    elif button == pygame.CONTROLLER_BUTTON_B:
        game.input.keys[Key.C] = True
    else:
        # Any other button toggles running, just like clicking the left stick.
        player = game.player
        player.speed = RUN_SPEED if player.speed == DEFAULT_SPEED else DEFAULT_SPEED


def controller_keyup(game: Game, button: int) -> None:
    """Handle a released controller button."""
    if button == pygame.CONTROLLER_BUTTON_B:
        game.input.keys[Key.C] = False


def _axis_motion(game: Game, axis: int, value: int) -> None:
    state = game.input
    if axis == 0:
        state.joystick_velocity_x = value / 32768.0
    elif axis == 1:
        state.joystick_velocity_y = -value / 32768.0
    elif axis == 2:
        state.joystick_rotation_x = -value / 32768.0
    elif axis == 3:
        state.joystick_rotation_y = -(value / 32767.0)


def handle_event(game: Game, event: pygame.event.Event) -> bool:
    """Apply one input event; returns False when the game should stop."""
    kind = event.type
    if kind == pygame.MOUSEMOTION:
        game.input.mouse_x_rel, game.input.mouse_y_rel = event.rel
    elif kind == pygame.CONTROLLERAXISMOTION:
        _axis_motion(game, event.axis, event.value)
    elif kind == pygame.KEYDOWN:
        keydown(game, event.key)
        if event.key == pygame.K_SPACE:
            _start_jump(game)
        elif event.key in _HEIGHT_NUDGES and not game.player.jumping:
            game.heights.player_height += _HEIGHT_NUDGES[event.key]
            print(f"PLAYER_HEIGHT = {int(game.heights.player_height)}")
        elif event.key == pygame.K_ESCAPE:
            return False
    elif kind == pygame.KEYUP:
        keyup(game, event.key)
    elif kind == pygame.CONTROLLERBUTTONDOWN:
        controller_keydown(game, event.button)
    elif kind == pygame.CONTROLLERBUTTONUP:
        controller_keyup(game, event.button)
    elif kind == pygame.QUIT:
        return False
    return True


def handle_events(game: Game, events: Iterable[pygame.event.Event]) -> bool:
    """Apply every pending event; returns False if any of them asked to stop."""
    running = True
    for event in events:
        if not handle_event(game, event):
            running = False
    return running