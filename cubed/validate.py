"""Checks on the command line, the configuration block and the map grid."""

from __future__ import annotations

import os
import sys
from collections.abc import Sequence

from .constants import (
    COLOR_KEYS,
    CONFIG_DATA_INVALID,
    CONFIG_KEYS,
    CONFIG_LINES,
    ERROR_AMOUNT_ARGS,
    ERROR_EXTENSION_FILE,
    FILE_NOT_FOUND,
    MAP_EXTENSION,
    MAX_COLOR,
    MIN_COLOR,
    OPEN_CHARS,
    PLAYER_CHARS,
    TEXTURE_EXTENSION,
    WALL,
)
from .cstring import atoi, split, strncmp
from .errors import ArgumentError, ConfigError, MapError

WRONG_CONFIG = "Configuração errada"
WALLS_WRONG = "Map walls are wrong"
WALLS_NOT_CLOSED = "The walls of the map are not correctly closed"
PLAYER_WRONG = "The player is wrong"
WRONG_CHARACTER = "Wrong character in map"

_MAP_CHARS = " 10NEWS\t"
# Cells a space may touch. Membership tests below use "" for a position past
# the end of a row; "" is contained in every string, so the end of a row
# counts as a match, just as a terminating NUL does in a character search.
_WALL_OR_SPACE = "1 "


def _at(row: str, index: int) -> str:
    return row[index] if 0 <= index < len(row) else ""


def check_args(argv: Sequence[str]) -> str:
    """Validate the arguments (without the program name) and return the map path."""
    if len(argv) != 1:
        raise ArgumentError(ERROR_AMOUNT_ARGS)
    path = argv[0]
    if not check_extension(path, MAP_EXTENSION):
        raise ArgumentError(ERROR_EXTENSION_FILE)
    if not check_file_exists(path):
        raise ArgumentError(f"{FILE_NOT_FOUND}: {path}")
    return path


def check_extension(name: str, ext: str) -> bool:
    """True when the text after the last dot of ``name`` is exactly ``ext``."""
    pieces = split(name, ".")
    return bool(pieces) and pieces[-1] == ext


def check_int(text: str) -> bool:
    """True when ``text`` reads back unchanged after parsing as an integer."""
    return strncmp(text, str(atoi(text)), len(text.encode())) == 0


def check_file_exists(path: str) -> bool:
    """True when ``path`` can be opened for reading."""
    try:
        fd = os.open(path, os.O_RDONLY)
    except OSError:
        return False
    os.close(fd)
    return True


def check_rgb(text: str) -> bool:
    """True when every comma-separated part is an integer within 0..255."""
    return all(
        check_int(part) and MIN_COLOR <= atoi(part) <= MAX_COLOR
        for part in split(text, ",")
    )


def _check_config_line(line: str, found: dict[str, str]) -> None:
    fields = split(line, " ")
    if len(fields) < 2:
        raise ConfigError(WRONG_CONFIG)
    key, value = fields[0], fields[1]
    if key not in COLOR_KEYS:
        if not check_extension(value, TEXTURE_EXTENSION):
            # Reported, but a texture with another extension is still accepted.
            print(ERROR_EXTENSION_FILE, file=sys.stderr)
        if not check_file_exists(value):
            raise ConfigError(f"{FILE_NOT_FOUND}: {value}")
    elif not check_rgb(value):
        raise ConfigError(CONFIG_DATA_INVALID)
    for name in CONFIG_KEYS:
        if key.startswith(name):
            found[name] = value


def check_config(lines: Sequence[str]) -> dict[str, str]:
    """Validate the six configuration lines at the start of ``lines``.

    Returns each configuration key with the value given for it.
    """
    if len(lines) < CONFIG_LINES:
        raise ConfigError(WRONG_CONFIG)
    found: dict[str, str] = {}
    for line in lines[:CONFIG_LINES]:
        _check_config_line(line, found)
    missing = [name for name in CONFIG_KEYS if name not in found]
    if missing:
        raise ConfigError(f"{CONFIG_DATA_INVALID}: missing {', '.join(missing)}")
    return found


def _wall_lengths_match(grid: Sequence[str]) -> bool:
    # The part of a row that sticks out past its neighbour must be all wall.
    for upper, lower in zip(grid[1:], grid[2:]):
        if len(lower) > len(upper):
            extra = lower[len(upper):]
        elif len(lower) < len(upper):
            extra = upper[len(lower):]
        else:
            continue
        if any(ch != WALL for ch in extra):
            return False
    return True


def check_walls(grid: Sequence[str]) -> bool:
    """True when the map border is closed by walls."""
    if not grid:
        return False
    for row in grid:
        if _at(row, 0) in OPEN_CHARS or _at(row, len(row) - 1) in OPEN_CHARS:
            return False
    if any(ch in OPEN_CHARS for ch in grid[0]):
        return False
    if any(ch in OPEN_CHARS for ch in grid[-1]):
        return False
    return check_space_empty(grid) and _wall_lengths_match(grid)


def _space_enclosed(grid: Sequence[str], i: int, j: int) -> bool:
    row = grid[i]
    below = grid[i + 1] if i + 1 < len(grid) else ""
    above = grid[i - 1] if i >= 1 else ""
    if j + 1 < len(row) and j + 1 < len(below):
        if any(ch not in _WALL_OR_SPACE for ch in (row[j + 1], below[j + 1], below[j])):
            return False
    if i >= 2 and j + 1 < len(row) and j + 1 < len(above):
        if above[j] not in _WALL_OR_SPACE or above[j + 1] not in _WALL_OR_SPACE:
            return False
    if j >= 2 and i >= 2 and _at(above, j - 1) not in _WALL_OR_SPACE:
        return False
    return True


def check_space_empty(grid: Sequence[str]) -> bool:
    """True when every space is bordered only by walls or other spaces."""
    return all(
        _space_enclosed(grid, i, j)
        for i, row in enumerate(grid)
        for j, ch in enumerate(row)
        if ch == " "
    )


def _spaces_closed(grid: Sequence[str]) -> bool:
    for i, row in enumerate(grid):
        below = grid[i + 1] if i + 1 < len(grid) else None
        for j, ch in enumerate(row):
            if ch != " ":
                continue
            right = _at(row, j + 1)
            if right and right in OPEN_CHARS:
                return False
            if j > 0 and row[j - 1] in OPEN_CHARS:
                return False
            if below is not None:
                down = _at(below, j)
                if down and down in OPEN_CHARS:
                    return False
            # Past the end of the row above counts as open.
            if i > 0 and _at(grid[i - 1], j) in OPEN_CHARS:
                return False
    return True


def check_player(grid: Sequence[str]) -> bool:
    """True when the map holds exactly one player start."""
    return sum(ch in PLAYER_CHARS for row in grid for ch in row) == 1


def _characters_valid(grid: Sequence[str]) -> bool:
    return all(ch in _MAP_CHARS for row in grid for ch in row)


def check_map(grid: Sequence[str]) -> None:
    """Raise MapError describing the first problem found in the map."""
    if not check_walls(grid):
        raise MapError(WALLS_WRONG)
    if not _spaces_closed(grid):
        raise MapError(WALLS_NOT_CLOSED)
    if not check_player(grid):
        raise MapError(PLAYER_WRONG)
    if not _characters_valid(grid):
        raise MapError(WRONG_CHARACTER)