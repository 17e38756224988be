# lavacrawl

A small tile-based puzzle game. You walk a character around a walled map,
pick up every chest, and step into the portal to leave. The map is read from
a plain-text `.ber` file and checked before the game window opens.

## Installing

```
pip install .
```

The game window is drawn with pygame.

## Playing

```
lavacrawl path/to/level.ber
```

| Key   | Action      |
|-------|-------------|
| W     | move up     |
| A     | move left   |
| S     | move down   |
| D     | move right  |
| Esc   | quit        |

Closing the window also ends the game. Each step onto a floor or chest tile
prints the move counter (`moove player : N`, counting from 0) on standard
output. Walking onto the exit ends the game only once every collectible has
been picked up; until then the exit does not let you through.

The command takes exactly one argument. With any other number of arguments
it prints an error message and exits with status 0. A map that fails its
checks, or textures that cannot be loaded, are reported as an error message
and the command exits with status 1.

### Textures

The window needs five images in a directory named `xpm` under the current
working directory:

| File               | Drawn for               |
|--------------------|-------------------------|
| `dungeonfloor.xpm` | every tile (background) |
| `lava.xpm`         | walls                   |
| `player.xpm`       | the player              |
| `chest.xpm`        | collectibles            |
| `portal.xpm`       | the exit                |

Each tile is 64 by 64 pixels. The package does not ship these images; you
supply your own. From Python, `lavacrawl.app.run(path, texture_dir)` lets
you point at another directory.

## Map files

A map is a text file whose name ends in `.ber`. Each line is one row, and
every row must have the same length. The characters are:

| Char | Meaning             |
|------|---------------------|
| `1`  | wall (lava)         |
| `0`  | floor               |
| `P`  | player start        |
| `C`  | collectible (chest) |
| `E`  | exit (portal)       |

A map is accepted only if:

- it is rectangular;
- it is fully surrounded by walls;
- it holds exactly one `P`, exactly one `E` and at least one `C`;
- it contains no other characters;
- from the player's start every collectible can be reached and the exit
  has a reachable neighbour.

Example:

```
1111111
1P0C0E1
1111111
```

## Using the package from Python

The map checks live in `lavacrawl.mapfile`:

```python
from lavacrawl.mapfile import MapError, load_map

try:
    info = load_map("level.ber")
except MapError as exc:
    print(exc)
```

`load_map` returns a `MapInfo` with the rows, the number of collectibles and
the player's position. `validate_map` runs the same checks on a list of row
strings; the single steps (`check_rectangle`, `check_walls`,
`count_elements`, `find_player`, `flood_fill`, `check_reachable`) are
available on their own, and `format_map` renders rows as text.

`lavacrawl.game.Game.from_map(info)` builds the game state, which can be
played without a window:

```python
from lavacrawl.game import Game, Key, MoveOutcome
from lavacrawl.mapfile import validate_map

game = Game.from_map(validate_map(["1111111", "1P0C0E1", "1111111"]))
game.press(Key.D)   # MoveOutcome.MOVED
```

`Game.press` takes a key and returns a `MoveOutcome` (`MOVED`, `BLOCKED`,
`LOCKED`, `WON`, `QUIT` or `IGNORED`); `Game.move` moves to given
coordinates directly. `lavacrawl.game.Renderer` opens the pygame window and
draws a game.

The package also holds small general helpers:

- `lavacrawl.chars`: ASCII character tests and case mapping;
- `lavacrawl.strings`: `atoi`, `itoa`, `split`, `strtrim`, `substr`,
  `strnstr`, `strjoin`, `strmapi`, `striteri`;
- `lavacrawl.buffers`: C-string and memory helpers on `bytes` and
  `bytearray` (`strlcpy`, `strlcat`, `strncmp`, `memmove`, `calloc` and
  others);
- `lavacrawl.linkedlist`: a singly linked `LinkedList` of `Node`s;
- `lavacrawl.output`: `put_char`, `put_str`, `put_endl`, `put_nbr` writing
  to a text stream.

## Running the tests

```
pip install .[test]
pytest
```