"""English spelling of non-negative integers.

The value is split into base-1000 chunks (least significant first). Each non-zero chunk is spelled
as "<digit> hundred" plus a 1-99 remainder and tagged with its scale word; chunks are then joined
most-significant-first with single spaces.
"""

from __future__ import annotations

from src.text.lexicon import SCALES, TENS, UNITS

MAX_SUPPORTED: int = 1000 ** len(SCALES) - 1
"""Largest value with a named scale (just under one thousand sextillion)."""


class NumberToWordsError(ValueError):
    """Raised when the argument is outside the supported domain."""


def _below_hundred(n: int) -> str:
    if n < 20:
        return UNITS[n]
    tens, units = divmod(n, 10)
    return TENS[tens] + (f"-{UNITS[units]}" if units else "")


def _chunk_words(n: int) -> str:
    hundreds, remainder = divmod(n, 100)
    words: list[str] = []
    if hundreds:
        words.append(f"{UNITS[hundreds]} hundred")
    if remainder:
        words.append(_below_hundred(remainder))
    return " ".join(words)


def number_to_words(n: int) -> str:
    """Spell out `n` in English words, e.g. `1001 -> "one thousand one"`.

    Raises:
        NumberToWordsError: If `n` is not an integer, is negative, or exceeds `MAX_SUPPORTED`.
    """

    if isinstance(n, bool) or not isinstance(n, int):
        raise NumberToWordsError(f"expected a non-negative integer, got {type(n).__name__}")
    if n < 0:
        raise NumberToWordsError("negative numbers are not supported")
    if n > MAX_SUPPORTED:
        raise NumberToWordsError(f"numbers above {MAX_SUPPORTED} are not supported")

    if n == 0:
        return "zero"

    parts: list[str] = []
    scale_index = 0
    while n > 0:
        n, chunk = divmod(n, 1000)
        if chunk:
            words = _chunk_words(chunk)
            if scale_index:
                words = f"{words} {SCALES[scale_index]}"
            parts.append(words)
        scale_index += 1

    return " ".join(reversed(parts))
