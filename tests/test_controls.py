import pygame
import pytest

from backrooms.config import DEFAULT_SPEED, RUN_SPEED, JumpState, Key, Stance
from backrooms.controls import (
    controller_keydown,
    controller_keyup,
    handle_event,
    handle_events,
    keydown,
    keyup,
)
from backrooms.state import Game, Player


@pytest.fixture
def game():
    return Game(texture_width=200, texture_height=100, players=[Player(x=1.5, y=1.5)])


def key_event(kind, key):
    return pygame.event.Event(kind, key=key)


@pytest.mark.parametrize(
    "code, slot",
    [(pygame.K_w, Key.W), (pygame.K_a, Key.A), (pygame.K_s, Key.S),
     (pygame.K_d, Key.D), (pygame.K_c, Key.C)],
)
def test_key_press_and_release(game, code, slot):
    keydown(game, code)
    assert game.input.keys[slot] is True
    keyup(game, code)
    assert game.input.keys[slot] is False


def test_shift_switches_speed(game):
    keydown(game, pygame.K_LSHIFT)
    assert game.input.keys[Key.SHIFT] is True
    assert game.player.speed == RUN_SPEED
    keyup(game, pygame.K_LSHIFT)
    assert game.input.keys[Key.SHIFT] is False
    assert game.player.speed == DEFAULT_SPEED


def test_space_starts_jump_and_stands_up(game):
    game.player.crouching = Stance.CROUCHING
    assert handle_event(game, key_event(pygame.KEYDOWN, pygame.K_SPACE)) is True
    assert game.player.jumping == JumpState.JUMP_UP
    assert game.player.crouching == Stance.STANDING


def test_escape_stops_the_game(game):
    assert handle_event(game, key_event(pygame.KEYDOWN, pygame.K_ESCAPE)) is False


def test_quit_stops_but_later_events_still_apply(game):
    events = [pygame.event.Event(pygame.QUIT), key_event(pygame.KEYDOWN, pygame.K_w)]
    assert handle_events(game, events) is False
    assert game.input.keys[Key.W] is True


def test_plain_events_keep_running(game):
    events = [key_event(pygame.KEYDOWN, pygame.K_a), key_event(pygame.KEYUP, pygame.K_a)]
    assert handle_events(game, events) is True
    assert game.input.keys[Key.A] is False


def test_mouse_motion_records_relative_movement(game):
    handle_event(game, pygame.event.Event(pygame.MOUSEMOTION, rel=(7, -4), pos=(0, 0), buttons=(0, 0, 0)))
    assert (game.input.mouse_x_rel, game.input.mouse_y_rel) == (7, -4)


def test_axis_motion_scales_and_flips(game):
    for axis in range(3):
        handle_event(game, pygame.event.Event(pygame.CONTROLLERAXISMOTION, axis=axis, value=-32768))
    handle_event(game, pygame.event.Event(pygame.CONTROLLERAXISMOTION, axis=3, value=32767))
    assert game.input.joystick_velocity_x == -1.0
    assert game.input.joystick_velocity_y == 1.0
    assert game.input.joystick_rotation_x == 1.0
    assert game.input.joystick_rotation_y == -1.0


def test_controller_a_jumps(game):
    game.player.crouching = Stance.CRAWLING
    controller_keydown(game, pygame.CONTROLLER_BUTTON_A)
    assert game.player.jumping == JumpState.JUMP_UP
    assert game.player.crouching == Stance.STANDING


def test_controller_b_holds_crouch(game):
    handle_event(game, pygame.event.Event(pygame.CONTROLLERBUTTONDOWN, button=pygame.CONTROLLER_BUTTON_B))
    assert game.input.keys[Key.C] is True
    handle_event(game, pygame.event.Event(pygame.CONTROLLERBUTTONUP, button=pygame.CONTROLLER_BUTTON_B))
    assert game.input.keys[Key.C] is False


def test_other_controller_button_toggles_running(game):
    controller_keydown(game, pygame.CONTROLLER_BUTTON_LEFTSTICK)
    assert game.player.speed == RUN_SPEED
    controller_keydown(game, pygame.CONTROLLER_BUTTON_LEFTSTICK)
    assert game.player.speed == DEFAULT_SPEED
    controller_keyup(game, pygame.CONTROLLER_BUTTON_LEFTSTICK)
    assert game.player.speed == DEFAULT_SPEED


def test_height_nudge_on_ground(game, capsys):
    before = game.heights.player_height
    handle_event(game, key_event(pygame.KEYDOWN, pygame.K_k))
    assert game.heights.player_height == before - 1
    assert "PLAYER_HEIGHT = " in capsys.readouterr().out


def test_height_nudge_ignored_while_jumping(game):
    game.player.jumping = JumpState.JUMP_UP
    before = game.heights.player_height
    handle_event(game, key_event(pygame.KEYDOWN, pygame.K_o))
    assert game.heights.player_height == before