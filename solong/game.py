"""Game state and the rules for moving the player around the map."""

from __future__ import annotations

from enum import Enum
from typing import Sequence

WALL = "1"
FLOOR = "0"
PLAYER = "P"
EXIT = "E"
COLLECTIBLE = "C"


class Direction(Enum):
    """A step on the map as (dx, dy)."""

    UP = (0, -1)
    DOWN = (0, 1)
    LEFT = (-1, 0)
    RIGHT = (1, 0)

    def __init__(self, dx: int, dy: int) -> None:
        self.dx = dx
        self.dy = dy


KEY_ESCAPE = "escape"
KEY_BINDINGS = {
    "w": Direction.UP,
    "a": Direction.LEFT,
    "s": Direction.DOWN,
    "d": Direction.RIGHT,
}


class Game:
    """A running game on a validated map."""

    def __init__(self, rows: Sequence[str]) -> None:
        self.grid = [list(row) for row in rows]
        self.collectibles = sum(row.count(COLLECTIBLE) for row in rows)
        self.exits = sum(row.count(EXIT) for row in rows)
        self.moves = 0
        self.won = False
        self.closed = False

    @property
    def rows(self) -> list[str]:
        """The current map as strings."""
        return ["".join(row) for row in self.grid]

    def tile(self, x: int, y: int) -> str:
        """Return the tile at column ``x`` of row ``y``."""
        return self.grid[y][x]

    def player_position(self) -> tuple[int, int]:
        """Return the player's (x, y); the last player tile found wins."""
        found = None
        for y, row in enumerate(self.grid):
            for x, tile in enumerate(row):
                if tile == PLAYER:
                    found = (x, y)
        if found is None:
            raise ValueError("no player on the map")
        return found

    def _inside(self, x: int, y: int) -> bool:
        return 0 <= y < len(self.grid) and 0 <= x < len(self.grid[y])

    def move(self, direction: Direction) -> bool:
        """Step the player one tile; return True if the player moved."""
        if self.closed:
            return False
        x, y = self.player_position()
        tx, ty = x + direction.dx, y + direction.dy
        if not self._inside(tx, ty) or self.grid[ty][tx] == WALL:
            return False
        target = self.grid[ty][tx]
        if target in (COLLECTIBLE, FLOOR):
            if target == COLLECTIBLE:
                self.collectibles -= 1
            self.grid[ty][tx] = PLAYER
            if self.exits == 0:
                self.grid[y][x] = EXIT
                self.exits += 1
            else:
                self.grid[y][x] = FLOOR
        elif target == EXIT:
            self.exits -= 1
            self.grid[ty][tx] = PLAYER
            self.grid[y][x] = FLOOR
            if self.collectibles == 0:
                self.won = True
                self.closed = True
        self.moves += 1
        print(self.moves, flush=True)
        return True

    def handle_key(self, key: str) -> bool:
        """React to a key name; return True while the game is still running."""
        if key == KEY_ESCAPE:
            self.closed = True
        elif key in KEY_BINDINGS:
            self.move(KEY_BINDINGS[key])
        return not self.closed