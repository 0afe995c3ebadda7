# cubed

A first-person raycasting maze viewer. It reads a `.cub` scene file that
names four wall textures, gives floor and ceiling colours and draws a map.
It checks the file and then opens a 640×320 pygame window in which you walk
through the maze.

## Installing

```
pip install .
```

To run the tests, install the `test` extra (`pip install .[test]`) and run
`pytest`.

## Running

```
cubed path/to/scene.cub
```

The command takes exactly one argument. That argument must be an existing
file whose name ends in `.cub`. The command stops with exit status 1 and
prints `Error!` and the reason to standard error in these cases:

- the number of arguments is wrong
- the extension is wrong
- the file is missing
- the configuration is bad
- the map is bad

### Controls

Moves repeat every frame while the key is held down.

| Key             | Action                   |
|-----------------|--------------------------|
| `W` / `S`       | move forward / backward  |
| `A` / `D`       | strafe left / right      |
| `←` / `→`       | turn left / right        |
| `Esc`           | quit                     |

Closing the window also quits. A move is refused if it would bring the
player within 0.1 cells of a wall cell.

## The `.cub` format

Blank lines are skipped until the configuration lines and the first map line
have been read. After that every line is kept, including blank lines inside
the map.

The first six kept lines configure the scene and may come in any order:

```
NO ./textures/north.xpm
SO ./textures/south.xpm
WE ./textures/west.xpm
EA ./textures/east.xpm
F 220,100,0
C 225,30,0
```

- `NO`, `SO`, `WE` and `EA` name texture files.
  - Each file must exist and must be readable by Pillow. XPM works.
  - A name without the `.xpm` extension only prints a warning.
  - Textures are sampled as 32×32 images.
- `F` and `C` give colours as comma-separated integers from 0 to 255.
  - The components are packed into a 0xRRGGBB value with the first component
    in the lowest byte. `F 220,100,0` therefore comes out with 220 as its
    blue part.
- All six keys must be present.

Each frame is drawn in this order:

1. The `F` colour fills the whole frame.
2. The `C` colour fills the lower half.
3. The walls are drawn over both.

The map follows the configuration lines. It uses these characters:

- `1` for walls
- `0` for open floor
- spaces (or tabs) for empty area outside the maze
- exactly one of `N`, `S`, `E`, `W` for the player's starting cell and
  facing direction

The map must be closed by walls, and no open cell may touch a space.

```
111111
100101
1000N1
111111
```

## Using it as a library

- `cubed.mapfile.read_file(path)` returns the kept lines of a scene file.
  `count_lines(path)` counts them.
- `cubed.validate.check_args(argv)` checks the command line. It raises
  `cubed.errors.ArgumentError`.
- `cubed.validate.check_config(lines)` checks the configuration lines. It
  raises `ConfigError`.
- `cubed.validate.check_map(grid)` checks the map. It raises `MapError`.
- All three error classes derive from `cubed.errors.CubError`.
- `cubed.scene.load_scene(lines, texture_loader)` returns a `Scene` (grid,
  textures, floor, ceiling) and a `Player` (position, direction, camera
  plane).
  - `texture_loader` defaults to `Texture.from_file`.
  - Any callable that takes a path and returns a `Texture` will do.
- `cubed.raycast.cast_all(player, grid)` casts one ray per screen column and
  returns `RayHit` objects.
- `cubed.draw.FrameBuffer` is a plain list of 0xRRGGBB pixels.
  `cubed.app.render_frame(frame, scene, player)` draws a full view into it.
- `cubed.app.load_game(path, texture_loader)` reads, checks and loads a
  scene and returns a `Game`.
  - `Game.press(key)` and `Game.release(key)` feed key codes to it.
  - `Game.render()` applies the held key and draws into `Game.frame`.
  - `Game.render()` returns `False` once `Esc` has asked the game to close.
- `cubed.vector.Vector` is the immutable 2D vector used throughout.

## What it does not do

There is no way to save a frame to an image file and no headless mode from
the command line: `cubed` always opens a window. There is no minimap, no
sprites, no doors and no sound. The up and down arrow keys are read but do
nothing.