"""Drawing the game: a plain-text view and a pygame window."""

from __future__ import annotations

from os import PathLike
from pathlib import Path
from typing import Optional, TextIO, Union

import pygame

from solong.game import Game
from solong.gamemap import COLLECTIBLE, EXIT, FLOOR, PLAYER, TILE_SIZE, WALL
from solong.output import put_nbr, put_str

_IMAGE_FILES = {
    "wall": "wall.xpm",
    "floor": "floor.xpm",
    "player": "player.xpm",
    "exit": "exit.xpm",
    "item": "item.xpm",
}

_FALLBACK_COLOURS = {
    "wall": (90, 60, 40),
    "floor": (200, 220, 170),
    "player": (40, 90, 220),
    "exit": (220, 60, 60),
    "item": (255, 153, 204),
}

_TILE_IMAGES = {WALL: "wall", FLOOR: "floor", COLLECTIBLE: "item", EXIT: "exit"}

_MOVES_COLOUR = (0xFF, 0xFF, 0xFF)
_ITEMS_COLOUR = (0xFF, 0x99, 0xCC)


def render_text(game: Game) -> str:
    """Return the map as text with the player placed, then the counters."""
    rows = []
    for y, row in enumerate(game.map.grid):
        cells = list(row)
        if y == game.player[1]:
            cells[game.player[0]] = PLAYER
        rows.append("".join(cells))
    rows.append(f"Moves: {game.move_count}")
    rows.append(f"Fleurs restantes: {game.collectibles}")
    return "\n".join(rows) + "\n"


class PygameRenderer:
    """Draws a game in a pygame window, one tile per map cell."""

    def __init__(
        self,
        game: Game,
        assets_dir: Union[str, PathLike] = "assets",
        stream: Optional[TextIO] = None,
    ) -> None:
        pygame.init()
        self.assets_dir = Path(assets_dir)
        self.stream = stream
        self.screen = pygame.display.set_mode(
            (game.map.width * TILE_SIZE, game.map.height * TILE_SIZE)
        )
        pygame.display.set_caption("so_long")
        self.images: dict[str, Optional[pygame.Surface]] = {}
        try:
            pygame.font.init()
            self._font: Optional[pygame.font.Font] = pygame.font.Font(None, 20)
        except pygame.error:
            self._font = None

    def load_images(self) -> None:
        """Load the tile images; report each one that cannot be loaded."""
        for name, filename in _IMAGE_FILES.items():
            try:
                self.images[name] = pygame.image.load(str(self.assets_dir / filename))
            except (pygame.error, OSError):
                self.images[name] = None
                put_str(f"Erreur image {name}\n", self.stream)

    def _blit(self, name: str, x: int, y: int) -> None:
        position = (x * TILE_SIZE, y * TILE_SIZE)
        image = self.images.get(name)
        if image is None:
            self.screen.fill(_FALLBACK_COLOURS[name], (*position, TILE_SIZE, TILE_SIZE))
        else:
            self.screen.blit(image, position)

    def _text(self, text: str, position: tuple[int, int], colour) -> None:
        if self._font is not None:
            self.screen.blit(self._font.render(text, True, colour), position)

    def draw(self, game: Game) -> None:
        """Draw every tile, the player and the counters, then show the frame."""
        put_str("Rendering map...\n", self.stream)
        for y, row in enumerate(game.map.grid[: game.map.height]):
            for x, tile in enumerate(row[: game.map.width]):
                name = _TILE_IMAGES.get(tile)
                if name is None:
                    continue
                if tile == COLLECTIBLE:
                    put_str("Fleur visible à : ", self.stream)
                    put_nbr(x, self.stream)
                    put_str(", ", self.stream)
                    put_nbr(y, self.stream)
                    put_str("\n", self.stream)
                self._blit(name, x, y)
        self._blit("player", *game.player)
        self._text("Moves: ", (10, 10), _MOVES_COLOUR)
        self._text(str(game.move_count), (70, 10), _MOVES_COLOUR)
        self._text("Fleurs restantes: ", (10, 25), _ITEMS_COLOUR)
        self._text(str(game.collectibles), (160, 25), _ITEMS_COLOUR)
        pygame.display.flip()