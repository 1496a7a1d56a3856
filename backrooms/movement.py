"""Walking, running, jumping, crouching and falling of the player."""

from __future__ import annotations

from dataclasses import dataclass

from .camera import (
    look_up_and_down_joystick,
    look_up_and_down_mouse,
    rotate_player_joystick,
    rotate_player_mouse,
)
from .collisions import collisions
from .config import (
    DEFAULT_SPEED,
    EMPTY,
    GRAVITY,
    HOLE,
    PILLAR,
    WALL_0,
    WALL_1,
    WALL_2,
    WALL_3,
    JumpState,
    Key,
    Movement,
    Stance,
)
from .entities import set_player_cam
from .state import Game

_DEAD_ZONE = 0.1
_SPEED_RESET_MS = 100
_CRAWL_HOLD_MS = 150
_EYE_TRANSITION_SPEED = 2000.0
_JUMP_RATE = 3.0
_STRAFE_FACTOR = 0.6
_MOVE_KEYS = (Key.W, Key.S, Key.A, Key.D)


@dataclass
class _MotionMemory:
    """What the movement code remembers between frames."""

    stick_last_active: int = 0
    crouch_press_start: int | None = None
    jump_progress: float = 0.0
    jump_origin: float = 0.0
    vertical_speed: float = 0.0


_MEMORY_ATTR = "_motion_memory"


def _memory(game: Game) -> _MotionMemory:
    memory = getattr(game, _MEMORY_ATTR, None)
    if memory is None:
        memory = _MotionMemory()
        setattr(game, _MEMORY_ATTR, memory)
    return memory


def _set_moving(game: Game) -> None:
    game.moving = Movement.WALKING if game.player.speed == DEFAULT_SPEED else Movement.RUNNING


def left_stick(game: Game, now: int) -> None:
    """Drop back to walking speed once the left stick has rested for a while.

    ``now`` is the current time in milliseconds.
    """
    memory = _memory(game)
    state = game.input
    if abs(state.joystick_velocity_y) < _DEAD_ZONE and abs(state.joystick_velocity_x) < _DEAD_ZONE:
        if now - memory.stick_last_active > _SPEED_RESET_MS and not state.keys[Key.SHIFT]:
            game.player.speed = DEFAULT_SPEED
    else:
        memory.stick_last_active = now


def move_player(game: Game, key: Key) -> None:
    """Step forward, back or sideways for one held movement key."""
    player = game.player
    step = player.speed * game.frame_time
    side = player.speed * _STRAFE_FACTOR * game.frame_time
    if key == Key.W:
        x = player.x + player.dir_x * step
        y = player.y + player.dir_y * step
    elif key == Key.S:
        x = player.x - player.dir_x * step
        y = player.y - player.dir_y * step
    elif key == Key.A:
        x = player.x + player.dir_y * side
        y = player.y - player.dir_x * side
    elif key == Key.D:
        x = player.x - player.dir_y * side
        y = player.y + player.dir_x * side
    else:
        raise ValueError(f"not a movement key: {key!r}")
    collisions(game, x, y)
    _set_moving(game)


def move_player_joystick(game: Game, x: float, y: float) -> None:
    """Move by the left stick's axes, each with a small dead zone."""
    player = game.player
    move_x = player.x
    move_y = player.y
    if abs(x) > _DEAD_ZONE:
        side = player.speed * _STRAFE_FACTOR
        move_x -= player.dir_y * side * (x * game.frame_time)
        move_y += player.dir_x * side * (x * game.frame_time)
    if abs(y) > _DEAD_ZONE:
        move_x += player.dir_x * player.speed * (y * game.frame_time)
        move_y += player.dir_y * player.speed * (y * game.frame_time)
    collisions(game, move_x, move_y)
    _set_moving(game)


def crouch(game: Game, now: int) -> None:
    """Toggle crouching on a tap of C, crawl while it is held, and ease the eye height.

    ``now`` is the current time in milliseconds.
    """
    memory = _memory(game)
    player = game.player
    heights = game.heights
    if game.input.keys[Key.C]:
        if memory.crouch_press_start is None:
            memory.crouch_press_start = now
        elif now - memory.crouch_press_start >= _CRAWL_HOLD_MS:
            player.crouching = Stance.CRAWLING
    else:
        if memory.crouch_press_start is not None:
            if now - memory.crouch_press_start < _CRAWL_HOLD_MS:
                if player.crouching == Stance.STANDING:
                    player.crouching = Stance.CROUCHING
                elif player.crouching == Stance.CROUCHING:
                    player.crouching = Stance.STANDING
            else:
                player.crouching = Stance.STANDING
        memory.crouch_press_start = None

    if player.crouch_lock or player.falling:
        return
    goals = {
        Stance.STANDING: game.texture_height,
        Stance.CROUCHING: heights.crouch,
        Stance.CRAWLING: heights.crawl,
    }
    goal = goals.get(player.crouching, 0)
    speed = _EYE_TRANSITION_SPEED * game.frame_time
    if heights.eye_height < goal and not player.stand_lock:
        heights.eye_height = min(int(heights.eye_height + speed), goal)
    elif heights.eye_height > goal:
        heights.eye_height = max(int(heights.eye_height - speed), goal)


def jump(game: Game) -> None:
    """Advance a jump along an eased curve, stopping at the height cap."""
    memory = _memory(game)
    player = game.player
    heights = game.heights
    if player.jump_lock or player.falling:
        player.jumping = JumpState.NO_JUMP
    if player.jumping != JumpState.JUMP_UP:
        return
    if memory.jump_progress == 0.0:
        memory.jump_origin = heights.feet_height
    memory.jump_progress += game.frame_time * _JUMP_RATE
    if memory.jump_progress >= 1.0:
        memory.jump_progress = 1.0
        player.jumping = JumpState.NO_JUMP
    progress = memory.jump_progress
    eased = 2 * progress - progress * progress
    new_height = memory.jump_origin + eased * heights.jump
    if new_height >= heights.height_cap:
        new_height = heights.height_cap
        player.jumping = JumpState.NO_JUMP
        memory.jump_progress = 1.0
    heights.feet_height = int(new_height)
    if not player.jumping:
        memory.jump_progress = 0.0
        memory.jump_origin = 0.0


def respawn(game: Game) -> None:
    """Put the player back on its spawn point, facing its spawn direction."""
    player = game.player
    heights = game.heights
    heights.feet_height = heights.empty
    player.feet_touch = EMPTY
    player.falling = False
    player.x = player.spawn_x
    player.y = player.spawn_y
    player.dir_x = float(player.spawn_dir_x)
    player.dir_y = float(player.spawn_dir_y)
    set_player_cam(game, game.level)


def gravity(game: Game) -> None:
    """Pull the feet down to, or lift them up to, the surface under them.

    Falling far enough into a hole respawns the player.
    """
    player = game.player
    if player.jumping:
        return
    memory = _memory(game)
    heights = game.heights
    dt = game.frame_time
    rise_speed = heights.jump * dt
    goals = {
        HOLE: heights.hole * 2,
        PILLAR: heights.empty,
        EMPTY: heights.empty,
        WALL_0: heights.wall_0,
        WALL_1: heights.wall_1,
        WALL_2: int(heights.wall_1 * 1.1),
        WALL_3: int(heights.wall_1 * 1.2),
    }
    goal = goals.get(player.feet_touch, 0)
    if heights.feet_height > goal:
        player.falling = True
        memory.vertical_speed += GRAVITY * dt
        heights.feet_height = int(heights.feet_height - memory.vertical_speed)
        if heights.feet_height <= goal:
            player.falling = False
            heights.feet_height = goal
            memory.vertical_speed = 0.0
    elif heights.feet_height < goal:
        memory.vertical_speed = 0.0
        heights.feet_height = min(int(heights.feet_height + rise_speed * 2), goal)
    else:
        player.falling = False
    if heights.feet_height <= heights.hole * 2:
        respawn(game)


def update_player_height(game: Game) -> None:
    """The eye level above the ground is the feet height plus the eye height."""
    heights = game.heights
    heights.player_height = heights.feet_height + heights.eye_height


def update_entities(game: Game, now: int) -> None:
    """Apply one frame of input and physics to the player.

    ``now`` is the current time in milliseconds.
    """
    state = game.input
    left_stick(game, now)
    for key in _MOVE_KEYS:
        if state.keys[key]:
            move_player(game, key)
    if state.joystick_velocity_y or state.joystick_velocity_x:
        move_player_joystick(game, state.joystick_velocity_x, state.joystick_velocity_y)
    if state.mouse_x_rel:
        rotate_player_mouse(game, state.mouse_x_rel)
    if state.mouse_y_rel:
        look_up_and_down_mouse(game, state.mouse_y_rel)
    if state.joystick_rotation_x:
        rotate_player_joystick(game, state.joystick_rotation_x)
    if abs(state.joystick_rotation_y) > _DEAD_ZONE:
        look_up_and_down_joystick(game, state.joystick_rotation_y)
    if (
        abs(state.joystick_velocity_y) < _DEAD_ZONE
        and abs(state.joystick_velocity_x) < _DEAD_ZONE
        and not any(state.keys[key] for key in _MOVE_KEYS)
    ):
        game.moving = Movement.STILL
    if game.player.jumping:
        jump(game)
    crouch(game, now)
    gravity(game)
    update_player_height(game)