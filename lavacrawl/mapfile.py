"""Reading and validating ``.ber`` map files.

A map is a rectangle of characters: ``1`` walls, ``0`` floor, ``C``
collectibles, ``E`` the exit and ``P`` the player's spawn point. It has to
be closed by walls, hold exactly one exit and one spawn point, and at least
one collectible. The player must be able to reach every collectible and
stand next to the exit.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import IO, Iterator, Sequence

MAP_SUFFIX = ".ber"
WALL = "1"
FLOOR = "0"
PLAYER = "P"
EXIT = "E"
COLLECTIBLE = "C"
FILLED = "F"

_ALLOWED = frozenset("1PE0C\nF")
_BLOCKING = frozenset((WALL, FILLED, EXIT))
_CHUNK_SIZE = 4096


class MapError(Exception):
    """Raised when a map file cannot be read or is not a playable map."""


@dataclass(frozen=True)
class MapInfo:
    """A validated map with the facts the game needs to start."""

    rows: tuple[str, ...]
    collectibles: int
    player_x: int
    player_y: int

    @property
    def width(self) -> int:
        return len(self.rows[0])

    @property
    def height(self) -> int:
        return len(self.rows)


def read_lines(stream: IO[str]) -> Iterator[str]:
    """Yield the lines of a text stream, each with its ``\\n`` if it had one.

    Only ``\\n`` ends a line; a last line without one is yielded as is and
    an empty remainder is not yielded at all.
    """
    pending = ""
    while True:
        chunk = stream.read(_CHUNK_SIZE)
        if not chunk:
            break
        pending += chunk
        *complete, pending = pending.split("\n")
        for line in complete:
            yield line + "\n"
    if pending:
        yield pending


def check_file_name(path: str) -> None:
    """Check that ``path`` names a ``.ber`` file that can be opened."""
    if not str(path).endswith(MAP_SUFFIX):
        raise MapError("please insert a file .ber")
    try:
        with open(path, "rb"):
            pass
    except OSError as exc:
        raise MapError("file open error") from exc


def read_map(path: str) -> list[str]:
    """Read the rows of a map file, without their line endings."""
    try:
        with open(path, encoding="utf-8", errors="replace", newline="") as stream:
            rows = [line.removesuffix("\n") for line in read_lines(stream)]
    except OSError as exc:
        raise MapError("file open error") from exc
    if not rows:
        raise MapError("file is empty")
    return rows


def check_rectangle(rows: Sequence[str]) -> None:
    """Check that every row is as long as the first one."""
    width = len(rows[0])
    if any(len(row) != width for row in rows[1:]):
        raise MapError("map not rectangle")


def check_walls(rows: Sequence[str]) -> None:
    """Check that the top and bottom rows and both side columns are walls."""
    top, bottom = rows[0], rows[-1]
    width = len(top)
    if any(top[j] != WALL or bottom[j:j + 1] != WALL for j in range(width)):
        raise MapError("the map is not surrounded by a wall")
    for row in rows:
        if row[:1] != WALL or row[width - 1:width] != WALL:
            raise MapError("the map is not surrounded by a wall")


def _count(row: str, wanted: str) -> int:
    """Count ``wanted`` in ``row``, rejecting characters a map cannot hold."""
    found = 0
    for char in row:
        if char not in _ALLOWED:
            raise MapError("There are invalid characters")
        if char == wanted:
            found += 1
    return found


def count_elements(rows: Sequence[str]) -> int:
    """Check the exit, spawn point and collectibles; return the collectibles.

    The first row is skipped: the wall check already requires it to be
    nothing but walls.
    """
    exits = spawns = collectibles = 0
    for row in rows[1:]:
        exits += _count(row, EXIT)
        spawns += _count(row, PLAYER)
        collectibles += _count(row, COLLECTIBLE)
    if collectibles < 1:
        raise MapError("There are not enough collectibles")
    if exits != 1:
        raise MapError("There is a problem with the exit")
    if spawns != 1:
        raise MapError("There is a problem with the spawn player")
    return collectibles


def find_player(rows: Sequence[str]) -> tuple[int, int]:
    """Return the ``(x, y)`` of the first spawn point below the top row."""
    for y, row in enumerate(rows[1:], start=1):
        x = row.find(PLAYER)
        if x != -1:
            return x, y
    raise MapError("There is a problem with the spawn player")


def flood_fill(rows: Sequence[str], x: int, y: int) -> list[str]:
    """Return a copy of ``rows`` with every cell reachable from ``(x, y)`` set to ``F``.

    Walls, already filled cells and the exit stop the fill; the exit is
    never entered.
    """
    grid = [list(row) for row in rows]
    height = len(grid)
    width = len(rows[0]) if rows else 0
    stack = [(x, y)]
    while stack:
        cx, cy = stack.pop()
        if cx < 0 or cy < 0 or cy >= height or cx >= width:
            continue
        if cx >= len(grid[cy]) or grid[cy][cx] in _BLOCKING:
            continue
        grid[cy][cx] = FILLED
        stack.extend(((cx, cy - 1), (cx, cy + 1), (cx - 1, cy), (cx + 1, cy)))
    return ["".join(row) for row in grid]


def _cell(rows: Sequence[str], x: int, y: int) -> str:
    if 0 <= y < len(rows) and 0 <= x < len(rows[y]):
        return rows[y][x]
    return ""


def check_reachable(filled: Sequence[str]) -> None:
    """Check a flood-filled map: the exit borders a filled cell and no collectible is left."""
    remaining = 0
    for y, row in enumerate(filled[1:], start=1):
        for x, char in enumerate(row):
            if char != EXIT:
                continue
            neighbours = (
                _cell(filled, x, y + 1),
                _cell(filled, x, y - 1),
                _cell(filled, x + 1, y),
                _cell(filled, x - 1, y),
            )
            if FILLED not in neighbours:
                raise MapError("the exit is not accessible")
        remaining += _count(row, COLLECTIBLE)
    if remaining:
        raise MapError("not all collectibles are available")


def validate_map(rows: Sequence[str]) -> MapInfo:
    """Run every check on ``rows`` and describe the playable map."""
    if not rows:
        raise MapError("file is empty")
    check_rectangle(rows)
    check_walls(rows)
    collectibles = count_elements(rows)
    x, y = find_player(rows)
    check_reachable(flood_fill(rows, x, y))
    return MapInfo(tuple(rows), collectibles, x, y)


def load_map(path: str) -> MapInfo:
    """Check the file name, read the file and validate the map in it."""
    check_file_name(path)
    return validate_map(read_map(path))


def format_map(rows: Sequence[str]) -> str:
    """Render rows one per line, followed by an empty line."""
    return "".join(row + "\n" for row in rows) + "\n"