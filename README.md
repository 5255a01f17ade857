# solong

A small top-down puzzle game. You walk a player around a walled map,
pick up every collectible, and then step onto the exit to win. Each
step is counted and printed to the terminal.

## Installing

```
pip install .
```

This pulls in `pygame`, which opens the window and loads the tile images.

## Playing

```
so_long maps/level.ber
```

The command takes exactly one argument: the path of a map file whose
name ends in `.ber`. Tile images are read from a `textures/` directory
in the current working directory: `collect.xpm`, `exit.xpm`,
`player.xpm`, `wall.xpm` and `floor.xpm`. Each tile is drawn 64 pixels
square, so the window is 64 × the map's width by 64 × its height.

Controls:

- arrow keys move the player up, down, left and right;
- Escape, or closing the window, quits.

After every move the terminal shows `moves : N`. Walls cannot be walked
into. The player may stand on the exit while collectibles remain; the
exit reappears once the player steps off it. Stepping onto the exit
when no collectibles remain prints the final count followed by
`You win 🥂`, and the game ends.

The command exits with status 0 when the game is won or quit. A wrong
number of arguments, a bad file name, an unreadable file, an invalid map
or a missing texture prints a message on standard error and exits with
status 1.

## Map files

A map is plain text, one row per line, made of these characters:

| Char | Meaning      |
|------|--------------|
| `1`  | wall         |
| `0`  | floor        |
| `P`  | player start |
| `C`  | collectible  |
| `E`  | exit         |

A map is accepted only if:

- it is not empty, does not start with a newline and has no blank lines;
- every row has the same length;
- it is surrounded by walls;
- it has exactly one `P`, exactly one `E` and at least one `C`, and no
  other characters;
- every non-wall tile can be reached from the player.

Example:

```
1111111
1P0C0E1
1111111
```

## Using it from Python

```python
from solong.mapfile import load_map, MapError
from solong.game import Game, Direction

rows = load_map("maps/level.ber")   # raises MapError on a bad map
game = Game.from_rows(rows)
game.move(Direction.RIGHT)          # True if the player moved
print(game.render_text())
print(game.remaining_collectibles(), game.moves, game.won)
```

`solong.mapfile` provides:

- `check_map_path(path)`, `read_map_text(path)`, `parse_map(text)` and
  `load_map(path)`, which raise `MapError` (a `ValueError`) on a bad
  file name, file or map;
- the individual checks `is_rectangular`, `is_closed_by_walls`,
  `has_valid_components` and `has_valid_path`, and `validate_map`,
  which raises on the first failed check;
- `find_player(rows)`, returning `(row, column)` or `None`, and
  `flood_fill(rows, row, col)`, returning a copy of the map with every
  reachable cell turned into a wall.

`solong.game.Game` holds the grid, the player's position, the move
count and whether the game is won. Besides `move`, it has `go_up`,
`go_down`, `go_left` and `go_right`, a `rows` property, and a `report`
callable that receives each move message (standard output by default).

`solong.display` holds the window: `run(game, texture_dir)`,
`load_textures(directory)` returning a `Textures`, `key_to_direction`,
`tile_layout`, `window_size`, and `main(argv)`, which the `so_long`
command calls.

## What it does not do

The move count is printed to the terminal only; it is not drawn in the
window. There are no enemies, animations or sound, and no bundled maps
or textures.