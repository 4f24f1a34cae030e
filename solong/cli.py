"""Command-line entry point: load a .ber map and play it in a window."""

from __future__ import annotations

import sys
from os import PathLike
from typing import Optional, Sequence, Union

from solong.game import Game, Key, Outcome
from solong.gamemap import MapError, load_map

_EXTENSION = ".ber"


def check_map_path(path: Union[str, PathLike]) -> None:
    """Check that ``path`` names a .ber file that can be opened for reading and writing."""
    name = str(path)
    if len(name) < len(_EXTENSION) + 1 or not name.endswith(_EXTENSION):
        raise MapError("Erreur : le fichier doit avoir l'extension .ber")
    try:
        with open(name, "r+b"):
            pass
    except OSError as exc:
        raise MapError("Erreur : impossible d'ouvrir le fichier") from exc


def _error(message: str) -> int:
    sys.stderr.write("Error\n")
    sys.stderr.write(message if message.endswith("\n") else message + "\n")
    return 1


def _play(game: Game) -> int:
    import pygame

    from solong.render import PygameRenderer

    try:
        renderer = PygameRenderer(game, "assets")
    except pygame.error:
        return _error("Erreur de création de fenêtre")
    renderer.load_images()
    renderer.draw(game)
    game.on_change = renderer.draw
    clock = pygame.time.Clock()
    try:
        while not game.finished:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    return 0
                if event.type != pygame.KEYDOWN:
                    continue
                code = Key.ESCAPE if event.key == pygame.K_ESCAPE else event.key
                print(f"keycode: {int(code)}")
                if game.handle_key(code) in (Outcome.QUIT, Outcome.WON):
                    return 0
            clock.tick(60)
    finally:
        pygame.quit()
    return 0


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the game on the map file named in ``argv``; return the exit status."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 1:
        return _error("Usage: ./so_long <map_file.ber>")
    try:
        check_map_path(args[0])
        game_map = load_map(args[0])
    except MapError as exc:
        return _error(str(exc))
    print(f"P = 1, E = 1, C = {game_map.collectibles}")
    return _play(Game.from_map(game_map))


if __name__ == "__main__":
    sys.exit(main())