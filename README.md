# solong

A small top-down puzzle game played on a tile map. Walk the player around
the map, pick up every collectible (flower), and then step onto the exit to
win.

## Installing

```
pip install .
```

## Playing

```
solong path/to/level.ber
```

The map file must have the `.ber` extension and must be openable for reading
and writing. Once the map is loaded, the program prints `P = 1, E = 1, C = n`
with the number of collectibles and opens a pygame window that has one 64×64
tile for each map cell.

| Key   | Action      |
|-------|-------------|
| Z     | move up     |
| S     | move down   |
| Q     | move left   |
| D     | move right  |
| Esc   | quit        |

Every key press is echoed as `keycode: N`. After each step the program prints
the move count (`Moves: N`), and the window shows the number of moves and the
flowers that are left. Walls block movement. If you reach the exit before all
the collectibles are picked up, the program prints a reminder and the game
goes on. If you reach it with all of them collected, the program prints a
victory message and the game ends. Closing the window also ends the game.

Tile images are loaded from an `assets/` directory under the current working
directory: `wall.xpm`, `floor.xpm`, `player.xpm`, `exit.xpm` and `item.xpm`.
When an image cannot be loaded, `Erreur image <name>` is printed and the tile
is drawn as a plain coloured square.

## Map format

A map is a rectangle of characters, one row per line:

- `1` wall
- `0` floor
- `P` player start (exactly one)
- `E` exit (exactly one)
- `C` collectible (at least one)

Carriage returns are ignored. The map must be closed by walls on every side,
and every collectible and the exit must be reachable from the start. Example:

```
1111111
1P0C0E1
1111111
```

If the map is invalid, or the arguments are wrong, the program writes `Error`
and a message to standard error and exits with status 1.

## Using the library

The game logic works without a window:

```python
from solong.gamemap import parse_map
from solong.game import Game, Key, Outcome
from solong.render import render_text

game_map = parse_map(["11111", "1PCE1", "11111"])
game = Game.from_map(game_map)
game.move_player(1, 0)          # Outcome.MOVED, collects the item
game.handle_key(Key.D)          # Outcome.WON
print(render_text(game))
```

- `solong.gamemap`: `load_map(path)` and `parse_map(lines)` return a
  validated `GameMap` and raise `MapError` when the map is unusable. The
  individual checks are also available: `read_map`, `clean_line`,
  `check_elements`, `is_map_closed`, `is_valid_path` and
  `check_map_validity`.
- `solong.game`: `Game` holds the player position, the number of moves and
  the collectibles that remain. `handle_key` and `move_player` return an
  `Outcome`, and messages are written to the game's `stream`, which is
  standard output by default.
- `solong.render`: `render_text(game)` returns a text view of the game.
  `PygameRenderer` draws the game in a pygame window.
- `solong.cli`: `main(argv)` and `check_map_path(path)`.

The package also has small helper modules. `solong.chars` covers ASCII
classification and case conversion. `solong.memory` covers byte-buffer
operations. `solong.textops` and `solong.strsearch` cover string parsing,
splitting, trimming, searching and bounded copying. `solong.output` writes
characters, strings and numbers to a stream, and `solong.linkedlist`
provides a singly linked list.

## Running the tests

```
pip install .[test]
pytest
```