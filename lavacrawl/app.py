"""Command line entry point: check a map and play it in a window."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Optional, Sequence, Union

from lavacrawl.game import Game, Key, MoveOutcome, Renderer
from lavacrawl.mapfile import MapError, load_map

DEFAULT_TEXTURE_DIR = "xpm"


def _key_table(pygame) -> dict:
    return {
        pygame.K_ESCAPE: Key.ESC,
        pygame.K_w: Key.W,
        pygame.K_a: Key.A,
        pygame.K_s: Key.S,
        pygame.K_d: Key.D,
    }


def run(path: str, texture_dir: Union[str, Path] = DEFAULT_TEXTURE_DIR) -> int:
    """Load the map at ``path`` and play it until the player wins or quits."""
    game = Game.from_map(load_map(path))
    renderer = Renderer(game, texture_dir)
    pygame = renderer._pygame
    keys = _key_table(pygame)
    try:
        renderer.draw()
        while not game.over:
            event = pygame.event.wait()
            if event.type == pygame.QUIT:
                break
            if event.type != pygame.KEYDOWN or event.key not in keys:
                continue
            if game.press(keys[event.key]) is MoveOutcome.MOVED:
                renderer.draw()
    finally:
        renderer.close()
    return 0


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Play the map named by the single command line argument."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 1:
        sys.stdout.write("error\nThere are no 2 arguments")
        return 0
    try:
        return run(args[0])
    except MapError as exc:
        sys.stdout.write(f"error:\n{exc}\n")
        return 1
    except OSError as exc:
        sys.stdout.write(f"Error:\n{exc}\n")
        return 1


if __name__ == "__main__":
    sys.exit(main())