"""Game state, movement rules and the window that shows them."""

from __future__ import annotations

import sys
from dataclasses import dataclass, field
from enum import Enum, IntEnum
from pathlib import Path
from typing import Iterator, Optional, TextIO, Union

from lavacrawl.mapfile import COLLECTIBLE, EXIT, FLOOR, PLAYER, WALL, MapInfo

TILE_SIZE = 64
WINDOW_TITLE = "So_long"

TEXTURES = {
    "background": "dungeonfloor.xpm",
    WALL: "lava.xpm",
    PLAYER: "player.xpm",
    COLLECTIBLE: "chest.xpm",
    EXIT: "portal.xpm",
}


class Key(IntEnum):
    """Keys the game reacts to, by their X11 key symbol."""

    ESC = 65307
    W = 119
    A = 97
    S = 115
    D = 100


class MoveOutcome(Enum):
    """What a move or a key press led to."""

    BLOCKED = "blocked"
    MOVED = "moved"
    LOCKED = "locked"
    WON = "won"
    QUIT = "quit"
    IGNORED = "ignored"


@dataclass
class Game:
    """A running game: the grid, the player and the score."""

    grid: list[list[str]]
    player_x: int
    player_y: int
    collectibles: int
    collected: int = 0
    count: int = 0
    over: bool = False
    out: Optional[TextIO] = field(default=None, repr=False, compare=False)

    @classmethod
    def from_map(cls, info: MapInfo) -> "Game":
        """Start a game on a validated map."""
        return cls(
            grid=[list(row) for row in info.rows],
            player_x=info.player_x,
            player_y=info.player_y,
            collectibles=info.collectibles,
        )

    @property
    def width(self) -> int:
        return len(self.grid[0])

    @property
    def height(self) -> int:
        return len(self.grid)

    @property
    def rows(self) -> tuple[str, ...]:
        return tuple("".join(row) for row in self.grid)

    def _report(self, text: str) -> None:
        stream = self.out if self.out is not None else sys.stdout
        stream.write(text)
        stream.flush()

    def move(self, new_x: int, new_y: int) -> MoveOutcome:
        """Try to move the player to ``(new_x, new_y)``."""
        if not (0 <= new_y < self.height and 0 <= new_x < self.width):
            return MoveOutcome.BLOCKED
        target = self.grid[new_y][new_x]
        if target == WALL:
            return MoveOutcome.BLOCKED
        if target == EXIT:
            if self.collected == self.collectibles:
                self.over = True
                return MoveOutcome.WON
            return MoveOutcome.LOCKED
        self._report(f"moove player : {self.count}\n")
        if target == COLLECTIBLE:
            self.collected += 1
        self.grid[self.player_y][self.player_x] = FLOOR
        self.grid[new_y][new_x] = PLAYER
        self.player_x, self.player_y = new_x, new_y
        self.count += 1
        return MoveOutcome.MOVED

    def press(self, key: Union[Key, int]) -> MoveOutcome:
        """React to a key given by its X11 key symbol."""
        try:
            key = Key(key)
        except ValueError:
            return MoveOutcome.IGNORED
        x, y = self.player_x, self.player_y
        if key is Key.ESC:
            self.over = True
            return MoveOutcome.QUIT
        if key is Key.W and y > 0:
            return self.move(x, y - 1)
        if key is Key.A and x > 0:
            return self.move(x - 1, y)
        if key is Key.S and y < self.height:
            return self.move(x, y + 1)
        if key is Key.D and x < self.width:
            return self.move(x + 1, y)
        return MoveOutcome.IGNORED

    def cells(self) -> Iterator[tuple[int, int, str]]:
        """Yield ``(x, y, char)`` for every cell, row by row."""
        for y, row in enumerate(self.grid):
            for x, char in enumerate(row):
                yield x, y, char


class Renderer:
    """A window that draws a game with one texture per kind of tile."""

    def __init__(self, game: Game, texture_dir: Union[str, Path]) -> None:
        import pygame

        self._pygame = pygame
        self.game = game
        pygame.display.init()
        self.screen = pygame.display.set_mode(
            (game.width * TILE_SIZE, game.height * TILE_SIZE)
        )
        pygame.display.set_caption(WINDOW_TITLE)
        directory = Path(texture_dir)
        try:
            self.textures = {
                name: pygame.image.load(str(directory / filename))
                for name, filename in TEXTURES.items()
            }
        except (pygame.error, OSError) as exc:
            self.close()
            raise OSError("xpm file is not avaible") from exc

    def draw(self) -> None:
        """Draw every tile of the game and show the result."""
        background = self.textures["background"]
        for x, y, char in self.game.cells():
            position = (x * TILE_SIZE, y * TILE_SIZE)
            self.screen.blit(background, position)
            sprite = self.textures.get(char)
            if sprite is not None:
                self.screen.blit(sprite, position)
        self._pygame.display.flip()

    def close(self) -> None:
        """Close the window."""
        self._pygame.display.quit()
        self._pygame.quit()