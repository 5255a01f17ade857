"""Reading and validating ``.ber`` map files."""

from __future__ import annotations

from collections import Counter
from os import PathLike
from pathlib import Path
from typing import Sequence, Union

WALL = "1"
FLOOR = "0"
PLAYER = "P"
EXIT = "E"
COLLECTIBLE = "C"

MAP_EXTENSION = ".ber"

StrPath = Union[str, "PathLike[str]"]


class MapError(ValueError):
    """Raised when a map file name, its contents or its layout is invalid."""


def check_map_path(path: StrPath) -> Path:
    """Check that *path* names a readable ``.ber`` file and return it as a Path."""
    name = str(path)
    stem_length = len(name) - len(MAP_EXTENSION)
    if stem_length <= 0 or name[stem_length - 1] == "/":
        raise MapError("no name or no extension")
    if not name.endswith(MAP_EXTENSION):
        raise MapError("no extension")
    try:
        with open(name, "rb"):
            pass
    except OSError as exc:
        raise MapError("no permission or no such a file") from exc
    return Path(name)


def read_map_text(path: StrPath) -> str:
    """Return the whole text of the map file at *path*."""
    try:
        with open(path, encoding="utf-8", errors="replace", newline="") as handle:
            text = handle.read()
    except OSError as exc:
        raise MapError("read failed") from exc
    if text.startswith("\n"):
        raise MapError("there is an empty line in your map")
    return text


def is_rectangular(rows: Sequence[str]) -> bool:
    """Return True when every row has the length of the first."""
    if not rows:
        return True
    width = len(rows[0])
    return all(len(row) == width for row in rows)


def is_closed_by_walls(rows: Sequence[str]) -> bool:
    """Return True when the outer border of the map is made of walls."""
    if not rows or not rows[0]:
        return False
    first, last = rows[0], rows[-1]
    width = len(first)
    if any(first[col] != WALL or last[col] != WALL for col in range(width)):
        return False
    return all(row[0] == WALL and row[width - 1] == WALL for row in rows)


def has_valid_components(rows: Sequence[str]) -> bool:
    """Return True for one player, one exit and at least one collectible.

    Raises MapError if the map holds any unknown character.
    """
    counts: Counter[str] = Counter()
    for row in rows:
        for cell in row:
            if cell in (PLAYER, EXIT, COLLECTIBLE):
                counts[cell] += 1
            elif cell not in (FLOOR, WALL):
                raise MapError("invalid map")
    return counts[COLLECTIBLE] >= 1 and counts[PLAYER] == 1 and counts[EXIT] == 1


def find_player(rows: Sequence[str]) -> tuple[int, int] | None:
    """Return the (row, column) of the first player cell, or None."""
    for row_index, row in enumerate(rows):
        col_index = row.find(PLAYER)
        if col_index >= 0:
            return row_index, col_index
    return None


def flood_fill(rows: Sequence[str], row: int, col: int) -> list[str]:
    """Return a copy of *rows* with every cell reachable from (row, col) set to a wall."""
    grid = [list(line) for line in rows]
    pending = [(row, col)]
    while pending:
        r, c = pending.pop()
        if not (0 <= r < len(grid) and 0 <= c < len(grid[r])):
            continue
        if grid[r][c] == WALL:
            continue
        grid[r][c] = WALL
        pending.extend(((r + 1, c), (r - 1, c), (r, c + 1), (r, c - 1)))
    return ["".join(line) for line in grid]


def has_valid_path(rows: Sequence[str]) -> bool:
    """Return True when the player can reach every collectible and the exit."""
    start = find_player(rows)
    if start is None:
        return False
    filled = flood_fill(rows, *start)
    return all(cell in (WALL, FLOOR) for line in filled for cell in line)


def validate_map(rows: Sequence[str]) -> None:
    """Raise MapError unless the map's shape, border and components are valid."""
    if not is_rectangular(rows):
        raise MapError("your map is not rectangular")
    if not is_closed_by_walls(rows):
        raise MapError("your map is not surrounded by 1")
    if not has_valid_components(rows):
        raise MapError("you need only 1 (E P) or more C")


def parse_map(text: str) -> list[str]:
    """Split map *text* into rows and validate them."""
    if "\n\n" in text:
        raise MapError("a new line in your map")
    rows = [line for line in text.split("\n") if line]
    if not rows:
        raise MapError("empty map")
    validate_map(rows)
    if not has_valid_path(rows):
        raise MapError("invalid map")
    return rows


def load_map(path: StrPath) -> list[str]:
    """Check, read and parse the map file at *path*."""
    checked = check_map_path(path)
    return parse_map(read_map_text(checked))