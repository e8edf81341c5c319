"""Drawing the map in a window and feeding key presses to the game."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Optional, Sequence

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import pygame  # noqa: E402

from .game import COLLECTIBLE, EXIT, FLOOR, KEY_ESCAPE, PLAYER, WALL, Game  # noqa: E402
from .mapfile import MapError  # noqa: E402

ERROR_SCREEN_SIZE = "Error: the map is too big for the screen"

TILE_SIZE = 50
WINDOW_TITLE = "SO LONG"
IMAGE_DIR = Path("Src") / "img_xpm"
_FRAME_RATE = 60

_IMAGE_FILES = {
    WALL: "wall.xpm",
    EXIT: "exit.xpm",
    COLLECTIBLE: "coin.xpm",
    FLOOR: "road.xpm",
    PLAYER: "pacman.xpm",
}

_KEY_NAMES = {
    pygame.K_ESCAPE: KEY_ESCAPE,
    pygame.K_w: "w",
    pygame.K_a: "a",
    pygame.K_s: "s",
    pygame.K_d: "d",
}


def window_size(rows: Sequence[str]) -> tuple[int, int]:
    """Return the (width, height) in pixels needed to show the map."""
    if not rows:
        return (0, 0)
    return (len(rows[0]) * TILE_SIZE, len(rows) * TILE_SIZE)


def fits_screen(rows: Sequence[str], screen_width: int, screen_height: int) -> bool:
    """Return True if the map's window fits on a screen of the given size."""
    width, height = window_size(rows)
    return width <= screen_width and height <= screen_height


def key_for_event(event: pygame.event.Event) -> Optional[str]:
    """Return the game key name for an event, or None if the game ignores it.

    Closing the window counts as pressing escape.
    """
    if event.type == pygame.QUIT:
        return KEY_ESCAPE
    if event.type == pygame.KEYDOWN:
        return _KEY_NAMES.get(event.key)
    return None


def _load_images() -> dict[str, pygame.Surface]:
    return {
        tile: pygame.image.load(str(IMAGE_DIR / filename)).convert()
        for tile, filename in _IMAGE_FILES.items()
    }


def _draw(screen: pygame.Surface, game: Game, images: dict[str, pygame.Surface]) -> None:
    for y, row in enumerate(game.rows):
        for x, tile in enumerate(row):
            image = images.get(tile)
            if image is not None:
                screen.blit(image, (x * TILE_SIZE, y * TILE_SIZE))


def run(game: Game) -> bool:
    """Show the game in a window until it is closed; return True if it was won."""
    rows = game.rows
    pygame.init()
    try:
        info = pygame.display.Info()
        if not fits_screen(rows, info.current_w, info.current_h):
            raise MapError(ERROR_SCREEN_SIZE)
        screen = pygame.display.set_mode(window_size(rows))
        pygame.display.set_caption(WINDOW_TITLE)
        images = _load_images()
        clock = pygame.time.Clock()
        _draw(screen, game, images)
        pygame.display.flip()
        while not game.closed:
            for event in pygame.event.get():
                key = key_for_event(event)
                if key is not None and not game.handle_key(key):
                    break
            _draw(screen, game, images)
            pygame.display.flip()
            clock.tick(_FRAME_RATE)
    finally:
        pygame.quit()
    return game.won