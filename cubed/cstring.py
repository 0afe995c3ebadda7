"""String helpers whose edge cases the scene-file checks rely on."""

from __future__ import annotations

from itertools import islice, zip_longest

_WHITESPACE = "\n\f\t\v\r "
_INT_MAX = 2**31 - 1
_UINT_MASK = 0xFFFFFFFF


def _isdigit(ch: str) -> bool:
    return len(ch) == 1 and "0" <= ch <= "9"


def atoi(text: str) -> int:
    """Parse a leading decimal integer, returning 0 when there is none.

    A sign must be followed directly by a digit. Values that do not fit a
    32-bit signed integer give -1 when positive and 0 when negative.
    """
    if not text:
        return 0
    pos = len(text) - len(text.lstrip(_WHITESPACE))
    negative = False
    current = text[pos] if pos < len(text) else ""
    if not _isdigit(current):
        following = text[pos + 1] if pos + 1 < len(text) else ""
        if current not in ("+", "-") or not _isdigit(following):
            return 0
        negative = current == "-"
        pos += 1
    total = 0
    for ch in text[pos:]:
        if not _isdigit(ch):
            break
        # Accumulate with 32-bit wraparound, as the overflow check expects.
        total = (total * 10 + ord(ch) - ord("0")) & _UINT_MASK
    if negative:
        return 0 if total > _INT_MAX + 1 else -total
    return -1 if total > _INT_MAX else total


def split(text: str, sep: str) -> list[str]:
    """Split on a single separator character, dropping empty pieces."""
    return [piece for piece in text.split(sep) if piece]


def strncmp(first: str, second: str, n: int) -> int:
    """Compare at most ``n`` bytes, stopping at the end of either string.

    Returns the difference of the first differing bytes, or 0.
    """
    pairs = zip_longest(first.encode(), second.encode(), fillvalue=0)
    for a, b in islice(pairs, n):
        if a != b or a == 0:
            return a - b
    return 0


def trim(text: str, chars: str) -> str:
    """Remove any of ``chars`` from both ends of ``text``."""
    return text.strip(chars)