"""Levenshtein edit distance for fuzzy string matching."""

from __future__ import annotations


def edit_distance(a: str, b: str) -> int:
    """Minimum number of single-character insertions, deletions and substitutions turning `a` into `b`.

    Uses the classic dynamic-programming table, keeping only the previous row: `previous[j]` is
    the distance between the first `i - 1` characters of `a` and the first `j` characters of `b`.
    Characters are compared as-is (no case folding or Unicode normalization).

    Raises:
        TypeError: If either argument is not a string.
    """

    if not isinstance(a, str) or not isinstance(b, str):
        raise TypeError("edit_distance() expects two strings")

    previous = list(range(len(b) + 1))
    for i, char_a in enumerate(a, start=1):
        current = [i]
        for j, char_b in enumerate(b, start=1):
            if char_a == char_b:
                current.append(previous[j - 1])
            else:
                current.append(
                    1 + min(
                        previous[j - 1],  # substitution
                        current[j - 1],  # insertion
                        previous[j],  # deletion
                    )
                )
        previous = current
    return previous[-1]


def similarity(a: str, b: str) -> float:
    """Normalized similarity in `[0, 1]`: `1 - distance / max(len(a), len(b))`."""

    longest = max(len(a), len(b))
    if longest == 0:
        return 1.0
    return 1.0 - edit_distance(a, b) / longest
