"""Game state and player movement."""

from __future__ import annotations

import dataclasses
import enum
from dataclasses import dataclass, field
from typing import Callable, Optional, TextIO

from solong.gamemap import COLLECTIBLE, FLOOR, WALL, GameMap, Position
from solong.output import put_nbr, put_str

_WIN_BANNER = "\033[0;35m★ ☆ ★ ☆ ★ ☆ ★ ☆ ★ ☆ ★ ☆ ★ ☆ ★ ☆ ★ ☆ ★ ☆ ★ ☆ ★ ☆\033[0m\n"


class Key(enum.IntEnum):
    """Key codes the game reacts to (ZQSD layout)."""

    ESCAPE = 65307
    Z = 122
    S = 115
    Q = 113
    D = 100


class Outcome(enum.Enum):
    """What a key press or a move led to."""

    IGNORED = "ignored"
    BLOCKED = "blocked"
    MOVED = "moved"
    NEED_ALL_COLLECTIBLES = "need_all_collectibles"
    WON = "won"
    QUIT = "quit"


_DIRECTIONS = {
    Key.Z: (0, -1),
    Key.S: (0, 1),
    Key.Q: (-1, 0),
    Key.D: (1, 0),
}


@dataclass
class Game:
    """A game in progress on its own copy of a map."""

    map: GameMap
    player: Position
    collectibles: int
    stream: Optional[TextIO] = None
    move_count: int = 0
    finished: bool = False
    on_change: Optional[Callable[["Game"], None]] = field(default=None, repr=False)

    @classmethod
    def from_map(cls, game_map: GameMap, stream: Optional[TextIO] = None) -> "Game":
        """Start a game on a copy of ``game_map``."""
        own_map = dataclasses.replace(
            game_map, grid=[list(row) for row in game_map.grid]
        )
        return cls(
            map=own_map,
            player=game_map.player,
            collectibles=game_map.collectibles,
            stream=stream,
        )

    def handle_key(self, keycode: int) -> Outcome:
        """React to a key press."""
        if self.finished:
            return Outcome.IGNORED
        if keycode == Key.ESCAPE:
            self.finished = True
            return Outcome.QUIT
        try:
            direction = _DIRECTIONS[Key(keycode)]
        except (ValueError, KeyError):
            return Outcome.IGNORED
        return self.move_player(*direction)

    def move_player(self, dx: int, dy: int) -> Outcome:
        """Move the player by one step, collecting items and checking for a win."""
        if self.finished:
            raise RuntimeError("the game is over")
        x, y = self.player[0] + dx, self.player[1] + dy
        tile = self.map.grid[y][x]
        if tile == WALL:
            return Outcome.BLOCKED
        if tile == COLLECTIBLE:
            self.map.grid[y][x] = FLOOR
            self.collectibles -= 1
        self.player = (x, y)
        self.move_count += 1
        if self.on_change is not None:
            self.on_change(self)
        put_str("Moves: ", self.stream)
        put_nbr(self.move_count, self.stream)
        put_str("\n", self.stream)
        if self.player != self.map.exit:
            return Outcome.MOVED
        if self.collectibles == 0:
            self._announce_win()
            self.finished = True
            return Outcome.WON
        put_str(
            "\033[0;31mTu dois cueillir toutes les fleurs avant de retrouver Lilo !\033[0m\n",
            self.stream,
        )
        return Outcome.NEED_ALL_COLLECTIBLES

    def _announce_win(self) -> None:
        put_str("\033[0;32m🎉 TU AS GAGNÉ !\033[0m\n", self.stream)
        put_str("\033[0;36mNombre de déplacements : ", self.stream)
        put_nbr(self.move_count, self.stream)
        put_str("\033[0m\n", self.stream)
        put_str(_WIN_BANNER, self.stream)
        put_str(
            "\033[0;35m    Bravo ! Stitch a retrouvé Lilo 🌺     \033[0m\n", self.stream
        )
        put_str(_WIN_BANNER, self.stream)