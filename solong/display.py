"""Window, textures and the command that plays a map."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from os import PathLike
from pathlib import Path
from typing import Optional, Sequence, Union

import pygame

from solong.game import Direction, Game
from solong.mapfile import (
    COLLECTIBLE,
    EXIT,
    FLOOR,
    PLAYER,
    WALL,
    MapError,
    check_map_path,
    parse_map,
    read_map_text,
)

TILE_SIZE = 64
WINDOW_TITLE = "so_long"
USAGE = "./so_long <mapename>.ber"

TEXTURE_FILES = {
    COLLECTIBLE: "collect.xpm",
    EXIT: "exit.xpm",
    PLAYER: "player.xpm",
    WALL: "wall.xpm",
    FLOOR: "floor.xpm",
}

_KEY_DIRECTIONS = {
    pygame.K_UP: Direction.UP,
    pygame.K_DOWN: Direction.DOWN,
    pygame.K_LEFT: Direction.LEFT,
    pygame.K_RIGHT: Direction.RIGHT,
}


@dataclass(frozen=True)
class Textures:
    """One image for each kind of map tile."""

    wall: pygame.Surface
    player: pygame.Surface
    collectible: pygame.Surface
    exit: pygame.Surface
    floor: pygame.Surface

    def for_tile(self, tile: str) -> Optional[pygame.Surface]:
        """Return the image for *tile*, or None for an unknown tile."""
        return {
            WALL: self.wall,
            PLAYER: self.player,
            COLLECTIBLE: self.collectible,
            EXIT: self.exit,
            FLOOR: self.floor,
        }.get(tile)


def key_to_direction(key: int) -> Optional[Direction]:
    """Return the direction an arrow key stands for, or None."""
    return _KEY_DIRECTIONS.get(key)


def tile_layout(rows: Sequence[str]) -> list[tuple[str, tuple[int, int]]]:
    """Return each drawable tile with its pixel position in the window."""
    return [
        (tile, (TILE_SIZE * col, TILE_SIZE * row))
        for row, line in enumerate(rows)
        for col, tile in enumerate(line)
        if tile in TEXTURE_FILES
    ]


def window_size(rows: Sequence[str]) -> tuple[int, int]:
    """Return the (width, height) in pixels of a window showing *rows*."""
    width = len(rows[0]) if rows else 0
    return width * TILE_SIZE, len(rows) * TILE_SIZE


def _load_image(path: Path) -> pygame.Surface:
    try:
        return pygame.image.load(str(path))
    except (pygame.error, OSError) as exc:
        raise OSError(f"cannot load texture {path}") from exc


def load_textures(directory: Union[str, "PathLike[str]"]) -> Textures:
    """Load the tile images from *directory*; raises OSError if one is missing."""
    base = Path(directory)
    images = {tile: _load_image(base / name) for tile, name in TEXTURE_FILES.items()}
    return Textures(
        wall=images[WALL],
        player=images[PLAYER],
        collectible=images[COLLECTIBLE],
        exit=images[EXIT],
        floor=images[FLOOR],
    )


def _draw(screen: pygame.Surface, textures: Textures, rows: Sequence[str]) -> None:
    for tile, position in tile_layout(rows):
        image = textures.for_tile(tile)
        if image is not None:
            screen.blit(image, position)
    pygame.display.flip()


def run(game: Game, texture_dir: Union[str, "PathLike[str]"] = "textures") -> None:
    """Open a window and play *game* until it is won, closed or escaped."""
    pygame.init()
    try:
        screen = pygame.display.set_mode(window_size(game.rows))
        pygame.display.set_caption(WINDOW_TITLE)
        textures = load_textures(texture_dir)
        _draw(screen, textures, game.rows)
        while not game.won:
            event = pygame.event.wait()
            if event.type == pygame.QUIT:
                break
            if event.type != pygame.KEYDOWN:
                continue
            if event.key == pygame.K_ESCAPE:
                break
            direction = key_to_direction(event.key)
            if direction is not None:
                game.move(direction)
            _draw(screen, textures, game.rows)
    finally:
        pygame.quit()


def _fail(header: str, message: str) -> int:
    sys.stderr.write(f"{header}\n{message}\n")
    return 1


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Play the map file named on the command line."""
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) != 1:
        return _fail("Error", USAGE)
    try:
        path = check_map_path(args[0])
    except MapError as exc:
        return _fail("Error", str(exc))
    try:
        rows = parse_map(read_map_text(path))
    except MapError as exc:
        return _fail("ERROR", str(exc))
    game = Game.from_rows(rows)
    try:
        run(game)
    except (OSError, pygame.error) as exc:
        return _fail("Error", str(exc))
    return 0