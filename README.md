# cubrender

Building blocks for a grid-based raycasting game. The package reads and
prepares the data a renderer needs. It does not draw anything.

## Modules

- `cubrender.scene` reads scene description lines into a `SceneConfig`.
  - `R w h` sets the resolution (`width`, `height`).
  - `NO`, `SO`, `WE`, `EA` and `S` set the texture paths (`north`, `south`, `west`, `east`, `sprite`).
  - `F r,g,b` and `C r,g,b` set the floor and ceiling colours, packed as `0xRRGGBB` by `pack_rgb`.

  `SceneConfig.feed_line` reads one line. `SceneConfig.feed_lines` reads lines until
  `is_complete()` is true and returns the lines it did not consume. A colour channel outside
  0..255 or a misplaced comma raises `SceneError` with code 10. Stray text after the numbers
  raises it with code 11.
- `cubrender.xpm` decodes XPM images into an `Image`. An `Image` holds `width`, `height` and
  row-major 32-bit `pixels`, and `Image.pixel(x, y)` returns one pixel. There are two ways in:
  - `load_xpm_file(path)` reads a file. It removes comments with `strip_comments` and collects
    the quoted strings with `extract_strings`.
  - `xpm_to_image(lines)` and `parse_xpm(lines)` take the strings directly.

  The colour `None` gives the transparent value `0xFF000000`. A bad header, or a missing colour
  key or row, raises `XpmError`.
- `cubrender.colors` provides two lookups:
  - `lookup_color(name)` looks up an X11 colour name, ignoring case. `"none"` gives -1, and an
    unknown name raises `KeyError`.
  - `text_to_rgb(name, end)` turns an XPM colour specification (`#RRGGBB` or a name) into
    `0xRRGGBB`. An unknown name gives 0.
- `cubrender.textutil` has the text helpers the XPM reader uses: `find_substring`,
  `find_unquoted` and `split_words`.
- `cubrender.textures` prepares textures and frames:
  - `load_texture(path)` loads an XPM file with each row mirrored by `mirror_rows`.
  - `TextureSet.load(north, south, east, west, sprite)` loads all five textures. The resulting
    set can be iterated in that order.
  - `frame_from_buffer(buf, width, height)` lays out a rendered 2D buffer as a flat,
    row-mirrored list.
- `cubrender.player` keeps the player's position, direction vector and camera plane.
  - `Player.facing(heading, x, y)` sets up the vectors for `"N"`, `"S"` or `"E"`. Any other
    letter leaves them at zero.
  - `press` and `release` take a `Key`. `Key.ESCAPE` raises `QuitRequested`.
  - `update(grid, move_speed, side_speed, rot_speed)` moves and turns the player for the keys
    held. A move along each axis is refused when it would enter a cell equal to 1.
  - `rotate`, `rotate_left` and `rotate_right` turn the view.

## Install

```
pip install .
```

## Example

```python
from cubrender.scene import SceneConfig
from cubrender.player import Player, Key

config = SceneConfig()
config.feed_lines([
    "R 640 480",
    "NO ./north.xpm",
    "SO ./south.xpm",
    "WE ./west.xpm",
    "EA ./east.xpm",
    "S ./sprite.xpm",
    "F 220,100,0",
    "C 225,30,0",
])
assert config.is_complete()
assert config.floor == 0xDC6400

grid = [
    [1, 1, 1],
    [1, 0, 1],
    [1, 1, 1],
]
player = Player.facing("N", 1.5, 1.5)
player.press(Key.W)
player.update(grid, 0.05, 0.05, 0.05)
```

## What it does not do

- There is no game command and no window.
- Nothing casts rays or draws walls, floors or sprites.
- The package does not read or validate the map grid that follows the configuration lines.
  `feed_lines` only hands those lines back.
- Nothing writes screenshots.

A program that uses the package has to supply these parts itself.

## Tests

```
pip install .[test]
pytest
```