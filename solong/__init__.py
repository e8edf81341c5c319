"""A small top-down tile game: collect every coin, then reach the exit."""

__version__ = "0.1.0"
__all__ = ["cli", "display", "game", "mapfile", "validation"]