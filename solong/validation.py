"""Checks that a map is playable before a game starts."""

from __future__ import annotations

from collections import Counter, deque
from dataclasses import dataclass
from typing import Sequence

from .mapfile import MapError

ERROR_EMPTY = "Error: Map is empty"
ERROR_REC = "Error: Map is not rectangle"
ERROR_CHAR = "Error: Char invalid"
ERROR_WALL = "Error: Wall invalid"
ERROR_PATH = "Error: Path invalid"

WALL = "1"
FLOOR = "0"
PLAYER = "P"
EXIT = "E"
COLLECTIBLE = "C"

VALID_TILES = frozenset((WALL, FLOOR, PLAYER, EXIT, COLLECTIBLE))
_PASSABLE = frozenset((FLOOR, PLAYER, EXIT, COLLECTIBLE))
_NEIGHBOURS = ((-1, 0), (1, 0), (0, -1), (0, 1))


@dataclass(frozen=True)
class TileCounts:
    """How many players, exits and collectibles a map holds."""

    players: int = 0
    exits: int = 0
    collectibles: int = 0

    @property
    def is_playable(self) -> bool:
        """One player, one exit and at least one collectible."""
        return self.players == 1 and self.exits == 1 and self.collectibles > 0


def is_rectangle(rows: Sequence[str]) -> bool:
    """Return True if every row has the same length."""
    return len({len(row) for row in rows}) <= 1


def has_valid_chars(rows: Sequence[str]) -> bool:
    """Return True if every tile is one of ``0 1 P C E``."""
    return all(set(row) <= VALID_TILES for row in rows)


def is_walled(rows: Sequence[str]) -> bool:
    """Return True if the map is closed in by walls on all four sides."""
    if not rows or any(not row for row in rows):
        return False
    if set(rows[0]) != {WALL} or set(rows[-1]) != {WALL}:
        return False
    return all(row[0] == WALL and row[-1] == WALL for row in rows)


def count_tiles(rows: Sequence[str]) -> TileCounts:
    """Count the players, exits and collectibles on the map."""
    tally = Counter("".join(rows))
    return TileCounts(
        players=tally[PLAYER],
        exits=tally[EXIT],
        collectibles=tally[COLLECTIBLE],
    )


def has_valid_path(rows: Sequence[str], counts: TileCounts) -> bool:
    """Return True if the player can reach every collectible and the exit."""
    starts = [
        (y, x)
        for y, row in enumerate(rows)
        for x, tile in enumerate(row)
        if tile == PLAYER
    ]
    seen = set(starts)
    queue = deque(starts)
    while queue:
        y, x = queue.popleft()
        for dy, dx in _NEIGHBOURS:
            ny, nx = y + dy, x + dx
            if not (0 <= ny < len(rows) and 0 <= nx < len(rows[ny])):
                continue
            if (ny, nx) in seen or rows[ny][nx] not in _PASSABLE:
                continue
            seen.add((ny, nx))
            queue.append((ny, nx))
    reached = Counter(rows[y][x] for y, x in seen)
    return reached[COLLECTIBLE] >= counts.collectibles and reached[EXIT] >= counts.exits


def validate_map(rows: Sequence[str]) -> TileCounts:
    """Check the map and return its tile counts; raise MapError if it is unplayable."""
    if not rows:
        raise MapError(ERROR_EMPTY)
    if not is_rectangle(rows):
        raise MapError(ERROR_REC)
    if not is_walled(rows):
        raise MapError(ERROR_WALL)
    if not has_valid_chars(rows):
        raise MapError(ERROR_CHAR)
    counts = count_tiles(rows)
    if not counts.is_playable:
        raise MapError(ERROR_CHAR)
    if not has_valid_path(rows, counts):
        raise MapError(ERROR_PATH)
    return counts