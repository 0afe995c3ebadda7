"""Reading a scene file into the lines the checks and loaders work on."""

from __future__ import annotations

from collections.abc import Iterator
from os import PathLike

from .constants import CONFIG_LINES, FILE_NOT_FOUND
from .cstring import trim
from .errors import ArgumentError


def read_lines(path: str | PathLike[str]) -> Iterator[str]:
    """Yield the raw lines of a file, each with its trailing newline if any.

    Only ``"\\n"`` ends a line; carriage returns stay in the text.
    Raises ArgumentError if the file cannot be opened.
    """
    try:
        handle = open(path, encoding="utf-8", errors="replace", newline="\n")
    except OSError as exc:
        raise ArgumentError(f"{FILE_NOT_FOUND}: {path}") from exc
    with handle:
        yield from handle


def count_lines(path: str | PathLike[str]) -> int:
    """Count the lines that hold something other than spaces.

    Once more than the configuration block has been counted, every line
    counts, blank or not.
    """
    count = 0
    for line in read_lines(path):
        if trim(line, " \n") or count > CONFIG_LINES:
            count += 1
    return count


def read_file(path: str | PathLike[str]) -> list[str]:
    """Return the lines of a scene file without their newlines.

    Empty lines are dropped until more than the configuration block has
    been kept; after that every line is kept, so gaps inside the map stay.
    """
    kept: list[str] = []
    for line in read_lines(path):
        text = trim(line, "\n")
        if text or len(kept) > CONFIG_LINES:
            kept.append(text)
    return kept