# solong

A small top-down tile game. You move the player around a walled map, pick up
every coin, and then walk onto the exit. Each step is counted, and the running
total is printed on standard output after every move.

## Installing

```
pip install .
```

This installs `pygame`, which draws the window. To run the tests as well:

```
pip install ".[test]"
pytest
```

## Playing

```
solong path/to/map.ber
```

Keys:

| Key    | Action     |
|--------|------------|
| `w`    | move up    |
| `a`    | move left  |
| `s`    | move down  |
| `d`    | move right |
| `Esc`  | quit       |

Closing the window also quits. Once every coin is collected, stepping onto the
exit wins and ends the game. You can walk over the exit before that; it is put
back on the map when you step off it.

Each tile is drawn 50 pixels square in a window titled `SO LONG`. If the map's
window would not fit on the screen, the game stops with
`Error: the map is too big for the screen`.

## Map files

A map is a plain text file whose name ends in `.ber` (a file named just
`.ber` is rejected). Every line is one row of tiles:

| Char | Tile   |
|------|--------|
| `1`  | wall   |
| `0`  | floor  |
| `C`  | coin   |
| `E`  | exit   |
| `P`  | player |

For example:

```
11111
1PCE1
11111
```

Rows are split on `\n` only. A map is accepted only when:

- it is not empty and has no blank line inside it (leading and trailing
  newlines are ignored);
- all rows have the same length;
- the first and last rows are all walls, and every row starts and ends with a
  wall;
- it uses only the characters above;
- it has exactly one player, exactly one exit and at least one coin;
- every coin and the exit can be reached from the player's start.

When something is wrong, `solong` prints a message starting with `Error:` on
standard error and exits with status 1.

## Using it from Python

```python
from solong.mapfile import read_map
from solong.validation import validate_map
from solong.game import Game, Direction

rows = read_map("maps/level1.ber")
counts = validate_map(rows)      # TileCounts(players=1, exits=1, collectibles=...)
game = Game(rows)
game.move(Direction.RIGHT)       # True if the player moved
game.handle_key("w")             # False once the game has ended
print(game.rows, game.moves, game.won)
```

- `solong.mapfile`: `read_map(path)`, `parse_map(text)` and
  `has_extension(path, suffix)`. Unreadable files and maps with blank lines
  raise `MapError`.
- `solong.validation`: `validate_map(rows)` runs every check and raises
  `MapError` with the matching message, or returns a `TileCounts`. The single
  checks `is_rectangle`, `is_walled`, `has_valid_chars`, `count_tiles` and
  `has_valid_path` are available on their own.
- `solong.game`: `Game` holds the grid and its counters (`moves`,
  `collectibles`, `exits`, `won`, `closed`), with `move(direction)`,
  `handle_key(key)`, `player_position()` returning `(x, y)`, `tile(x, y)` and
  the `rows` property. Key names are `"w"`, `"a"`, `"s"`, `"d"` and
  `"escape"`.
- `solong.display`: `run(game)` opens the window and plays until the game is
  closed, returning True if it was won. `window_size(rows)`,
  `fits_screen(rows, width, height)` and `key_for_event(event)` are helpers
  it uses.
- `solong.cli`: `main(argv=None)` is the `solong` command and returns the exit
  status.

## What it does not include

The package ships no tile images and no maps. The window loads `wall.xpm`,
`road.xpm`, `coin.xpm`, `exit.xpm` and `pacman.xpm` from `./Src/img_xpm/`
relative to the directory you start the game from; without them the game stops
with an error after the map has been checked.