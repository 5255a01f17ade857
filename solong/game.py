"""Game state and player movement on a validated map."""

from __future__ import annotations

import sys
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, Optional, Sequence

from solong.mapfile import (
    COLLECTIBLE,
    EXIT,
    FLOOR,
    PLAYER,
    WALL,
    MapError,
    find_player,
)

Position = tuple[int, int]


def _write_stdout(text: str) -> None:
    sys.stdout.write(text)
    sys.stdout.flush()


class Direction(Enum):
    """A step on the grid as a (row, column) offset."""

    UP = (-1, 0)
    DOWN = (1, 0)
    LEFT = (0, -1)
    RIGHT = (0, 1)


@dataclass
class Game:
    """A map being played: the grid, the player and the move counter."""

    grid: list[list[str]]
    player: Position
    moves: int = 0
    won: bool = False
    exit_under_player: Optional[Position] = None
    report: Callable[[str], None] = field(
        default=_write_stdout, repr=False, compare=False
    )

    @classmethod
    def from_rows(cls, rows: Sequence[str]) -> "Game":
        """Start a game on *rows*; raises MapError if there is no player."""
        start = find_player(rows)
        if start is None:
            raise MapError("no player on the map")
        return cls(grid=[list(row) for row in rows], player=start)

    @property
    def rows(self) -> list[str]:
        """The current map as a list of strings."""
        return ["".join(line) for line in self.grid]

    def remaining_collectibles(self) -> int:
        """Return how many collectibles are still on the map."""
        return sum(line.count(COLLECTIBLE) for line in self.grid)

    def _cell(self, position: Position) -> Optional[str]:
        row, col = position
        if 0 <= row < len(self.grid) and 0 <= col < len(self.grid[row]):
            return self.grid[row][col]
        return None

    def move(self, direction: Direction) -> bool:
        """Move the player one step; return True if the player moved."""
        if self.won:
            return False
        row, col = self.player
        d_row, d_col = direction.value
        target = (row + d_row, col + d_col)
        cell = self._cell(target)
        if cell is None or cell == WALL:
            return False

        if cell == EXIT and not self.remaining_collectibles():
            self.moves += 1
            self.won = True
            self.report(f"moves : {self.moves}\nYou win 🥂")
            return True

        if self.exit_under_player == self.player:
            self.grid[row][col] = EXIT
            self.exit_under_player = None
        else:
            self.grid[row][col] = FLOOR
        if cell == EXIT:
            self.exit_under_player = target
        target_row, target_col = target
        self.grid[target_row][target_col] = PLAYER
        self.player = target
        self.moves += 1
        self.report(f"moves : {self.moves}\n")
        return True

    def go_up(self) -> bool:
        """Move the player one row up."""
        return self.move(Direction.UP)

    def go_down(self) -> bool:
        """Move the player one row down."""
        return self.move(Direction.DOWN)

    def go_left(self) -> bool:
        """Move the player one column left."""
        return self.move(Direction.LEFT)

    def go_right(self) -> bool:
        """Move the player one column right."""
        return self.move(Direction.RIGHT)

    def render_text(self) -> str:
        """Return the map as text, one line per row."""
        return "\n".join(self.rows)