# raycub

A small first-person raycaster. It reads a `.cub` scene file that names four
wall textures, a floor colour, a ceiling colour and a grid map, checks that the
map is closed, and opens a 1100×600 window in which you can walk through the
maze. A minimap in the lower-right corner shows the grid, the player and the
field of view.

## Installing

```
pip install .
```

This installs Pillow (used to load the wall textures) and pygame (used for the
window).

## Running

```
raycub path/to/scene.cub
```

Controls:

| Key             | Action                  |
|-----------------|-------------------------|
| `W` `A` `S` `D` | move forward/left/back/right |
| Left / Right    | turn                    |
| Escape          | quit                    |

Closing the window also quits. A step is refused when a wall is within a
tenth of a cell in that direction.

## Scene files

A scene file has its element lines first and the map last:

```
NO ./textures/north.xpm
SO ./textures/south.xpm
WE ./textures/west.xpm
EA ./textures/east.xpm

F 220,100,0
C 225,30,0

111111
100101
101001
1100N1
111111
```

- `NO`, `SO`, `WE`, `EA` each name an existing file ending in `.xpm`, exactly
  once. Paths are taken relative to the current directory. The file must be
  readable by Pillow.
- `F` and `C` give the floor and ceiling colour as three values from 0 to 255,
  separated by exactly two commas.
- Element lines start at the beginning of the line; blank lines between them
  are allowed.
- The map uses only ` `, `0`, `1` and one of `N`, `S`, `E`, `W` for the
  starting position and heading. There must be exactly one starting position.
  Every open cell must be surrounded by walls: no open cell may touch a blank,
  and none may lie on the map's border.
- Every line from the first map row to the end of the file must be a map row.
  Blank lines inside or after the map are rejected, and so is a newline at the
  very end of the file.

When the command is given the wrong number of arguments it prints
`Wrong number of arguments`; for an empty path it prints `No map to read`.
Any problem with the file itself is reported as `Error` followed by a message.
In every one of these cases the exit status is 1.

## Using it as a library

```python
from raycub.mapfile import read_scene
from raycub.game import Game, Key

scene = read_scene("maps/demo.cub")
game = Game.from_scene(scene)
game.handle_key(Key.W)
game.draw()
# game.view and game.minimap now hold the rendered frames
```

- `raycub.mapfile.read_scene` reads and validates a file;
  `raycub.mapfile.parse_scene` does the same for scene text and returns a
  `SceneConfig`. Invalid input raises `raycub.mapcheck.ParseError`, a
  `ValueError`.
- `raycub.mapcheck.validate_map` checks a grid and returns the camera's
  `CameraStart`.
- `raycub.game.load_texture` loads an image file into a `raycub.image.Image`
  of packed `0xAARRGGBB` pixels.
- The raycasting pieces — `raycub.dda.cast_ray`,
  `raycub.projection.render_view` and the drawing functions in
  `raycub.minimap` — work on a plain `raycub.image.Image` and need no window.
- `raycub.camera.Camera` holds the position and heading, with `turn` and
  `move`.

## What it does not do

There is no mouse look, no sprites or doors, and no way to save a position;
the window only renders the maze and lets you walk through it.

## Running the tests

```
pip install ".[test]"
pytest
```