"""Reading and validating game maps.

A map is a rectangle of tiles: '1' wall, '0' floor, 'P' the player's start,
'E' the exit and 'C' a collectible. A valid map is closed by walls, holds
exactly one player and one exit, at least one collectible, and every
collectible and the exit can be reached from the start.
"""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from os import PathLike
from pathlib import Path
from typing import Iterable, Sequence, Tuple, Union

TILE_SIZE = 64

WALL = "1"
FLOOR = "0"
PLAYER = "P"
EXIT = "E"
COLLECTIBLE = "C"

Position = Tuple[int, int]
Grid = Sequence[Sequence[str]]


class MapError(Exception):
    """Raised when a map cannot be read or is not a valid map."""


@dataclass
class GameMap:
    """A validated map; the player's start tile is stored as floor."""

    grid: list[list[str]]
    width: int
    height: int
    player: Position
    exit: Position
    collectibles: int


def clean_line(line: str) -> str:
    """Remove every carriage return and line feed from ``line``."""
    return line.replace("\r", "").replace("\n", "")


def read_map(path: Union[str, PathLike]) -> list[str]:
    """Read the rows of a map file, with line endings removed."""
    try:
        data = Path(path).read_text(encoding="utf-8")
    except OSError as exc:
        raise MapError("Erreur d'ouverture de fichier") from exc
    rows = data.split("\n")
    if data.endswith("\n"):
        rows.pop()
    if not data:
        rows = []
    return [clean_line(row) for row in rows]


def check_elements(grid: Grid) -> tuple[Position, Position, int]:
    """Count the map's elements.

    Returns the player's position, the exit's position and the number of
    collectibles. Raises MapError on an unknown tile or wrong counts.
    """
    players = exits = collectibles = 0
    player: Position = (0, 0)
    exit_pos: Position = (0, 0)
    for y, row in enumerate(grid):
        for x, tile in enumerate(row):
            if tile == PLAYER:
                player = (x, y)
                players += 1
            elif tile == EXIT:
                exit_pos = (x, y)
                exits += 1
            elif tile == COLLECTIBLE:
                collectibles += 1
            elif tile not in (FLOOR, WALL, "\n", "\r"):
                raise MapError("Carte invalide : caractère inconnu.")
    if players != 1 or exits != 1 or collectibles < 1:
        raise MapError("Carte invalide : il faut 1 P, 1 E et au moins 1 C.")
    return player, exit_pos, collectibles


def is_map_closed(grid: Grid, width: int, height: int) -> bool:
    """Return True when the outer border of the map is all walls."""
    if width <= 0 or height <= 0:
        return False
    top, bottom = grid[0], grid[height - 1]
    if any(top[x] != WALL or bottom[x] != WALL for x in range(width)):
        return False
    return all(
        grid[y][0] == WALL and grid[y][width - 1] == WALL for y in range(height)
    )


def is_valid_path(grid: Grid, start: Position) -> bool:
    """Return True when every collectible and the exit are reachable from ``start``."""
    visited: set[Position] = set()
    pending = deque([start])
    while pending:
        x, y = pending.popleft()
        if (x, y) in visited or y < 0 or y >= len(grid):
            continue
        row = grid[y]
        if x < 0 or x >= len(row) or row[x] == WALL:
            continue
        visited.add((x, y))
        pending.extend(((x + 1, y), (x - 1, y), (x, y + 1), (x, y - 1)))
    return all(
        (x, y) in visited
        for y, row in enumerate(grid)
        for x, tile in enumerate(row)
        if tile in (COLLECTIBLE, EXIT)
    )


def check_map_validity(grid: Grid) -> tuple[Position, Position, int]:
    """Validate a whole map and return its player, exit and collectible count."""
    if not grid:
        raise MapError("Erreur : lecture de carte échouée")
    width = len(grid[0])
    if any(len(row) != width for row in grid[1:]):
        raise MapError("Carte invalide : la carte n'est pas rectangulaire.")
    player, exit_pos, collectibles = check_elements(grid)
    if not is_map_closed(grid, width, len(grid)):
        raise MapError("Carte invalide : la carte n'est pas fermée.")
    if not is_valid_path(grid, player):
        raise MapError(
            "Carte invalide : chemins bloqués vers un item ou la sortie."
        )
    return player, exit_pos, collectibles


def parse_map(lines: Iterable[str]) -> GameMap:
    """Build a validated GameMap from map rows."""
    rows = [clean_line(line) for line in lines]
    player, exit_pos, collectibles = check_map_validity(rows)
    grid = [list(row) for row in rows]
    px, py = player
    grid[py][px] = FLOOR
    return GameMap(
        grid=grid,
        width=len(rows[0]),
        height=len(rows),
        player=player,
        exit=exit_pos,
        collectibles=collectibles,
    )


def load_map(path: Union[str, PathLike]) -> GameMap:
    """Read and validate the map stored at ``path``."""
    return parse_map(read_map(path))