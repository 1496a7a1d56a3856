# backrooms

A first-person exploration game drawn with a software raycaster. You walk
through five connected levels of fluorescent-lit rooms, with raised and lowered
blocks to climb over or crawl under, holes to fall into and pillars to walk
around. Stepping onto a trigger tile carries you into the next level with your
position, heading and posture intact.

## Installing

```
pip install .
```

The game uses `pygame` for the window, input, textures and sound.

## Running

Start the game from the directory that holds its `assets` folder:

```
backrooms
```

or point it at that directory:

```
backrooms --root path/to/game
```

The game looks for, below the root directory:

- `assets/maps/map.1` to `assets/maps/map.5`: the level layouts
- `assets/textures/png/`: `wall.png`, `wall_dark.png`, `ceiling.png`,
  `ceiling_dark.png`, `ceiling_darker.png`, `floor.png`, `floor_light.png`
  and `floor_lighter.png`
- `assets/sounds/`: `neon.wav` (the ambient loop), `running.wav` and
  `walking.wav`

The window opens full screen and renders at half the display resolution,
spreading the columns over one worker thread per CPU. While it runs, the
average frame rate over each half second is printed to standard output.

If an asset is missing or cannot be loaded, or the window or audio cannot be
opened, the command prints `ERROR: ...` to standard error and exits with
status 1.

## Controls

| Action      | Keyboard    | Game controller                  |
|-------------|-------------|----------------------------------|
| Look around | Mouse       | Right stick                      |
| Move        | W A S D     | Left stick                       |
| Run         | Hold Shift  | Any other button (toggles)       |
| Jump        | Space       | A (Cross)                        |
| Crouch      | Tap C       | Tap B (Circle)                   |
| Crawl       | Hold C      | Hold B (Circle)                  |
| Quit        | Escape, or close the window |                  |

Running by controller drops back to walking speed once the left stick has been
at rest for a tenth of a second. While standing on the ground, the keys K and I
lower and raise the eye height by one pixel, and L and O by ten; each change is
printed.

## Map format

Each map is a plain text file, one row of tiles per line. Every ray must end on
a wall, so the playable area has to be enclosed by `#` tiles.

| Character       | Meaning                                                 |
|-----------------|---------------------------------------------------------|
| `#`             | solid wall                                              |
| ` `             | open floor                                              |
| `0`–`4`         | block rising from the floor, from lowest to highest     |
| `5`–`9`         | block hanging from the ceiling, from longest to shortest |
| `:`             | hole in the floor                                       |
| `;`             | pillar                                                  |
| `T`             | trigger to the next level                               |
| `N` `S` `E` `W` | player start, facing north, south, east or west         |
| `n` `s` `e` `w` | enemy start, facing north, south, east or west          |

Every map needs a player start; player and enemy markers are replaced by open
floor once the level is loaded. Falling far enough into a hole returns you to
the level's starting point.

## What the game does not do

- Enemies are read from the maps and placed, but they neither move nor are
  drawn.
- Door characters (`D`, `U`, `d`, `u`) are read but doors are not drawn and
  cannot be opened.
- The chapters have no story events or ending; the game runs until you quit.

## Using the pieces

The package can also be used as a library:

- `backrooms.maps.load_maps(root)` reads the five level files and their sizes;
  `read_map`, `map_size` and `map_path` handle single maps.
- `backrooms.entities.find_entities(grid)` picks the player and enemies out of
  a grid; `entities_init(game)` does so for every map of a
  `backrooms.state.Game` and sets each player's camera plane.
- `backrooms.collisions` and `backrooms.movement` apply input and physics to
  the player; `backrooms.movement.update_entities(game, now)` runs one frame.
- `backrooms.raycasting`, `backrooms.walls` and `backrooms.surfaces` draw into
  a `backrooms.framebuffer.FrameBuffer`, and
  `backrooms.render.render_slice(game, frame, start, end)` renders a range of
  columns without opening a window, given a `Game` whose `textures` is a
  `backrooms.textures.TextureSet`.
- `backrooms.timing.FrameClock` caps the frame rate and measures frame times.

## Tests

```
pip install ".[test]"
pytest
```