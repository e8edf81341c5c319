"""Loading ``.ber`` map files into rows of tiles."""

from __future__ import annotations

import os
from typing import Union

ERROR_FILE = "Error: Cannot open the file"
ERROR_MAP_INVALID = "Error: Map invalid"

PathLike = Union[str, "os.PathLike[str]"]


class MapError(Exception):
    """Raised when a map file cannot be read or is malformed."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return self.message


def has_extension(path: PathLike, suffix: str) -> bool:
    """Return True if ``path`` ends with ``suffix`` and has a name before it."""
    name = os.fspath(path)
    return len(name) > len(suffix) and name.endswith(suffix)


def parse_map(text: str) -> list[str]:
    """Split map text into rows.

    Blank lines inside the map are an error. Leading and trailing
    newlines are ignored.
    """
    if "\n\n" in text:
        raise MapError(ERROR_MAP_INVALID)
    return [row for row in text.split("\n") if row]


def read_map(path: PathLike) -> list[str]:
    """Read the map file at ``path`` and return its rows."""
    try:
        with open(path, encoding="utf-8", errors="replace", newline="") as handle:
            text = handle.read()
    except OSError as exc:
        raise MapError(ERROR_FILE) from exc
    return parse_map(text)