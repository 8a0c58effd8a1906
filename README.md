# raymaze

This is the core of a small first-person maze engine that works on a grid map. It does three things:

- it checks that a map is a closed level with exactly one player;
- it casts rays across the map to find wall distances and the faces they hit, and it opens and closes doors;
- it draws a top-down minimap into a plain pixel buffer.

It also has a few string helpers and a buffered line reader.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Map format

A map is a list of row strings. Each row may end in `"\n"`. The cell characters are:

| Character | Meaning |
| --- | --- |
| `1` | wall |
| `0` | floor |
| `D` | closed door |
| `A` | open door |
| `N` `S` `E` `W` | player start; the letter sets the heading (270, 90, 0 and 180 degrees) |
| space | void |

Every floor cell, door cell and player cell must have a neighbour in all eight directions, and none of those neighbours may be void or off the grid. Any other character makes the map invalid. The map must hold exactly one player.

```python
from raymaze.worldmap import validate_map, MapError

grid = [
    "1111\n",
    "1N01\n",
    "1111\n",
]
player = validate_map(grid)   # Player(x=1.5, y=1.5, pov=270)
```

A bad map raises `MapError("Invalid map")`, which is a subclass of `ValueError`.

`raymaze.worldmap` also provides these functions:

- `heading_for(char)` gives the heading for a start marker.
- `scan_row(grid, row)` checks one row and returns the players found in it.
- `check_surroundings(grid, row, col)` checks that one cell is enclosed.
- `has_xpm_extension(path)` tells whether a path ends in `.xpm`.

## Ray casting

```python
from raymaze.raycast import cast_ray, cast_fan, toggle_door

hit = cast_ray(grid, player, player.pov)
hits = cast_fan(grid, player, 1920)
changed = toggle_door(grid, player)
```

- `cast_ray` steps along the given angle, 0.01 map units at a time, until it meets a wall (`1`) or a closed door (`D`). It returns a `RayHit` with these fields: `angle`, `distance`, `face`, `x` and `y`. If the ray leaves the grid first, it raises `ValueError`.
- `cast_fan` casts `width` rays, spread evenly over a 60-degree view centred on the player's heading, from left to right.
- `Face` names the side that was hit: `NORTH`, `SOUTH`, `WEST` and `EAST` for walls, and `DOOR_NORTH` to `DOOR_EAST` for doors. `Face.is_door` tells door faces apart from wall faces. `Face.texture_index` gives 0 to 3 for the four wall sides and 4 for any door.
- `wall_face` and `door_face` work out the face for a given ray length.
- `toggle_door` looks straight ahead for up to 2 map units. The first door it finds is switched between `D` and `A` in the grid, in place. It returns that door's `(row, col)`, or `None` if no door is in reach.

## Minimap

```python
from raymaze.render import Framebuffer, draw_minimap, draw_player

fb = Framebuffer(320, 240)
fb.fill()                # black
draw_minimap(fb, grid)   # 16x16 squares: walls red, closed doors green, open doors purple
draw_player(fb, player)  # 10x10 white square at the player's position
colour = fb.get_pixel(0, 0)
```

`Framebuffer` holds 32-bit colour values. Its default size is 3840x2160. `put_pixel` and `get_pixel` raise `IndexError` outside the buffer. `tile_color(cell)` gives the minimap colour of a cell, and `draw_tile` paints a single cell.

## Helpers

`raymaze.textutil` holds these string helpers:

- `atoi` parses a leading signed integer.
- `itoa` formats an integer.
- `split(text, sep)` splits on one character and drops empty pieces.
- `strtrim(text, charset)` trims from both ends, but the right-hand trim keeps the first character.
- `substr(text, start, length)` returns part of a string.
- `is_space` tests for a space or one of TAB to CR.

`raymaze.strcompare` holds these functions:

- `strncmp` compares byte by byte.
- `strnstr` returns the index of a bounded match, or `None`.
- `strlcat(dest, src, size)` returns `(text, would_be_length)`.
- `strlcpy(src, size)` returns `(text, len(src))`.

`raymaze.linereader.LineReader(fd, buffer_size)` reads from a file descriptor or a file object in chunks. `readline()` returns each line with its newline, and returns `None` at the end. Iterating over the reader yields each line. `read_lines(fd, buffer_size)` is a generator that does the same.

## What it does not do

This package is not a playable game. It has:

- no window, input handling or movement;
- no command to start;
- no reader for scene files with texture paths and floor and ceiling colours;
- no texture loading;
- no drawing of the textured 3D wall view.

A frontend has to supply all of these. It can use the `RayHit` distances and `Face.texture_index` values to draw the walls.