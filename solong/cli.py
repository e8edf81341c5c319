"""Command line entry point: load a map, check it and play it."""

from __future__ import annotations

import sys
from typing import Optional, Sequence

from .mapfile import MapError, has_extension, read_map
from .validation import validate_map

ERROR_ARG = "Error: Number of argument invalid ([./so_long] [path_map.ber])"
ERROR_EXT = "Error: File name invalid"
MAP_SUFFIX = ".ber"


def _fail(message: str) -> int:
    print(message, file=sys.stderr)
    return 1


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the game on the map named in ``argv``; return the exit status."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 1:
        return _fail(ERROR_ARG)
    path = args[0]
    if not has_extension(path, MAP_SUFFIX):
        return _fail(ERROR_EXT)
    try:
        rows = read_map(path)
        validate_map(rows)
    except MapError as exc:
        return _fail(str(exc))

    from .display import run
    from .game import Game

    try:
        run(Game(rows))
    except MapError as exc:
        return _fail(str(exc))
    except (OSError, RuntimeError) as exc:
        return _fail(f"Error: {exc}")
    return 0


if __name__ == "__main__":
    sys.exit(main())